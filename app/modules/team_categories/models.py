# Supabase table: team_categories
# This file documents the expected database schema

"""
Expected Supabase table structure:

team_categories:
- id: uuid (primary key, default: gen_random_uuid())
- name: text (not null) - matched by equality against team_members.category
- order_index: integer (not null, default: 0)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

There is no foreign key from team_members: deleting or renaming a category
leaves members pointing at the old name, and they are grouped as uncategorized.
"""
