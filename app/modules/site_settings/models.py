# Supabase tables: hero_settings, about_settings, contact_settings
# This file documents the expected database schema

"""
Expected Supabase table structure. Each table holds one row with a fixed id,
created by app/scripts/seed_site_content.py.

hero_settings (id = 'hero_001'):
- id: text (primary key)
- title: text
- subtitle: text
- cta_text: text
- cta_link: text
- background_image: text (nullable)
- updated_at: timestamp (nullable)

about_settings (id = 'about_001'):
- id: text (primary key)
- title: text
- mission: text
- vision: text
- story: text
- updated_at: timestamp (nullable)

contact_settings (id = 'contact_001'):
- id: text (primary key)
- email: text
- phone: text
- address: text
- updated_at: timestamp (nullable)
"""
