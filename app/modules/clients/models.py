# Supabase table: clients
# This file documents the expected database schema

"""
Expected Supabase table structure:

clients:
- id: uuid (primary key, default: gen_random_uuid())
- name: text (not null)
- logo_url: text (nullable) - public URL of the uploaded logo
- website_url: text (nullable)
- order_index: integer (not null, default: 0)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
