from datetime import datetime, timezone
from typing import Dict, NamedTuple, Type
import logging

from fastapi import HTTPException
from pydantic import BaseModel
from supabase import Client

from app.modules.site_settings.schemas import (
    HeroSettingsResponse, AboutSettingsResponse, ContactSettingsResponse,
)

logger = logging.getLogger(__name__)


class Section(NamedTuple):
    table: str
    row_id: str
    response_model: Type[BaseModel]


SECTIONS: Dict[str, Section] = {
    "hero": Section("hero_settings", "hero_001", HeroSettingsResponse),
    "about": Section("about_settings", "about_001", AboutSettingsResponse),
    "contact": Section("contact_settings", "contact_001", ContactSettingsResponse),
}


class SiteSettingsService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _section(self, name: str) -> Section:
        if name not in SECTIONS:
            raise HTTPException(status_code=404, detail=f"Unknown section: {name}")
        return SECTIONS[name]

    def get_section(self, name: str) -> BaseModel:
        section = self._section(name)
        try:
            result = self.supabase.table(section.table)\
                .select("*")\
                .eq("id", section.row_id)\
                .maybe_single()\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching {section.table}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to fetch {name} content")
        if not result or not result.data:
            raise HTTPException(status_code=404, detail=f"{name.capitalize()} content not found")
        return section.response_model(**result.data)

    def update_section(self, name: str, data: BaseModel) -> BaseModel:
        """Overwrite every field of the section row."""
        section = self._section(name)
        update_data = data.model_dump(mode="json")
        update_data["updated_at"] = datetime.now(timezone.utc).isoformat()
        try:
            result = self.supabase.table(section.table)\
                .update(update_data)\
                .eq("id", section.row_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error saving {section.table}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to update {name} content")
        if not result.data:
            raise HTTPException(status_code=404, detail=f"{name.capitalize()} content not found")
        logger.info(f"Updated {section.table}")
        return section.response_model(**result.data[0])
