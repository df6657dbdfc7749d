# Supabase table: gallery_items
# This file documents the expected database schema

"""
Expected Supabase table structure:

gallery_items:
- id: uuid (primary key, default: gen_random_uuid())
- type: text (not null) - 'image' | 'video'
- src: text (not null) - image URL, or poster image for videos
- video_src: text (nullable) - required when type = 'video'
- title: text (not null)
- category: text (not null) - e.g. Campaigns, Culture, Videos
- description: text (nullable)
- order_index: integer (not null, default: 0)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
