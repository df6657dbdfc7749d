from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime
from app.core.schemas import RequiredText


class HeroSettings(BaseModel):
    title: RequiredText
    subtitle: str = ""
    cta_text: str = ""
    cta_link: str = ""
    background_image: Optional[str] = None


class AboutSettings(BaseModel):
    title: RequiredText
    mission: str = ""
    vision: str = ""
    story: str = ""


class ContactSettings(BaseModel):
    email: EmailStr
    phone: str = ""
    address: str = ""


class HeroSettingsResponse(HeroSettings):
    updated_at: Optional[datetime] = None


class AboutSettingsResponse(AboutSettings):
    updated_at: Optional[datetime] = None


class ContactSettingsResponse(ContactSettings):
    updated_at: Optional[datetime] = None
