# Supabase table: admin_sessions
# This file documents the expected database schema

"""
Expected Supabase table structure:

admin_sessions:
- id: uuid (primary key, default: gen_random_uuid())
- token_hash: text (unique, not null) - sha256 of the bearer token; the token itself is never stored
- expires_at: timestamptz (not null)
- created_at: timestamp (default: now())

Rows are only reachable with the service_role key (RLS denies anon access).
Expired rows are ignored on validation and removed on logout.
"""
