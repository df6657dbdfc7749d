# Supabase table: services
# This file documents the expected database schema

"""
Expected Supabase table structure:

services:
- id: uuid (primary key, default: gen_random_uuid())
- title: text (not null)
- description: text (not null)
- icon: text (nullable) - icon name rendered by the site
- order_index: integer (not null, default: 0) - display order, not unique
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
