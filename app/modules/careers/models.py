# Supabase table: job_listings

"""
Expected Supabase table structure:

job_listings:
- id: uuid (primary key, default: gen_random_uuid())
- title: text (not null)
- location: text (not null)
- job_type: text (not null) - 'Full-time' | 'Part-time' | 'Contract'
- description: text (not null)
- is_active: boolean (not null, default: true) - inactive listings are hidden from the careers page
- order_index: integer (not null, default: 0)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
