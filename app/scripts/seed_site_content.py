"""
Seed Site Content Script
Creates the singleton settings rows (hero, about, contact) and the default
team categories when they are missing. Existing rows are left untouched,
so it is safe to re-run after deploys.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from app.core.ordering import OrderedCollection
from app.database.supabase_client import get_admin_supabase
from supabase import Client
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "hero_settings": {
        "id": "hero_001",
        "title": "We Build Brands That Move People",
        "subtitle": "Strategy, design and digital marketing under one roof.",
        "cta_text": "Get Started",
        "cta_link": "/contact-us",
        "background_image": "",
    },
    "about_settings": {
        "id": "about_001",
        "title": "About Us",
        "mission": "",
        "vision": "",
        "story": "",
    },
    "contact_settings": {
        "id": "contact_001",
        "email": "hello@example.com",
        "phone": "",
        "address": "",
    },
}

DEFAULT_TEAM_CATEGORIES = ["Leadership", "Creative", "Marketing", "Technology"]


def seed_settings(supabase: Client):
    """Insert each singleton settings row if it does not exist"""
    logger.info("Seeding site settings...")
    created_count = 0

    for table, row in DEFAULT_SETTINGS.items():
        try:
            existing = supabase.table(table)\
                .select("id")\
                .eq("id", row["id"])\
                .execute()

            if existing.data:
                logger.info(f"  Exists: {table}/{row['id']}")
                continue

            supabase.table(table).insert(row).execute()
            created_count += 1
            logger.info(f"  Created: {table}/{row['id']}")
        except Exception as e:
            logger.error(f"  Error seeding {table}: {str(e)}")

    logger.info(f"Settings seeded: {created_count} created")
    return created_count


def seed_team_categories(supabase: Client):
    """Append default team categories that are not present yet"""
    logger.info("Seeding team categories...")
    categories = OrderedCollection(supabase, "team_categories")
    existing_names = {row.get("name") for row in categories.list()}
    created_count = 0

    for name in DEFAULT_TEAM_CATEGORIES:
        if name in existing_names:
            continue
        categories.append({"name": name})
        created_count += 1
        logger.info(f"  Created category: {name}")

    logger.info(f"Team categories seeded: {created_count} created")
    return created_count


def main():
    supabase = get_admin_supabase()
    seed_settings(supabase)
    seed_team_categories(supabase)
    logger.info("Seeding completed successfully!")


if __name__ == "__main__":
    main()
