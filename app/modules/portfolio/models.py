# Supabase table: portfolio_items

"""
Expected Supabase table structure:

portfolio_items:
- id: uuid (primary key, default: gen_random_uuid())
- title: text (not null)
- category: text (not null) - e.g. Web Development, Branding, Digital Marketing
- description: text (nullable)
- image_url: text (nullable)
- project_link: text (nullable)
- order_index: integer (not null, default: 0)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
