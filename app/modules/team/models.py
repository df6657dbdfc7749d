# Supabase table: team_members
# This file documents the expected database schema

"""
Expected Supabase table structure:

team_members:
- id: uuid (primary key, default: gen_random_uuid())
- name: text (not null)
- role: text (not null)
- bio: text (nullable)
- image_url: text (nullable) - public URL of the uploaded photo
- category: text (nullable) - free text matched against team_categories.name
- order_index: integer (not null, default: 0)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
