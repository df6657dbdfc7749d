from fastapi import APIRouter, Depends, UploadFile, File
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.site_settings.schemas import (
    HeroSettings, AboutSettings, ContactSettings,
    HeroSettingsResponse, AboutSettingsResponse, ContactSettingsResponse,
)
from app.modules.site_settings.service import SiteSettingsService
from app.core.dependencies import require_admin, get_image_storage, read_image_upload
from app.core.storage import ImageStorage
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/site", tags=["site"])


def get_site_settings_service(supabase: Client = Depends(get_supabase)) -> SiteSettingsService:
    return SiteSettingsService(supabase)


def get_admin_site_settings_service(supabase: Client = Depends(get_admin_supabase)) -> SiteSettingsService:
    """Service for admin writes; uses the service-role client."""
    return SiteSettingsService(supabase)


@router.get("/hero", response_model=HeroSettingsResponse)
async def get_hero(service: SiteSettingsService = Depends(get_site_settings_service)):
    return service.get_section("hero")


@router.put("/hero", response_model=HeroSettingsResponse)
async def update_hero(
    data: HeroSettings,
    admin: Dict = Depends(require_admin),
    service: SiteSettingsService = Depends(get_admin_site_settings_service),
):
    return service.update_section("hero", data)


@router.post("/hero/background", response_model=HeroSettingsResponse)
async def upload_hero_background(
    file: UploadFile = File(...),
    admin: Dict = Depends(require_admin),
    service: SiteSettingsService = Depends(get_admin_site_settings_service),
    storage: ImageStorage = Depends(get_image_storage),
):
    """Upload a background image and store its URL on the hero section."""
    hero = service.get_section("hero")
    content, content_type = await read_image_upload(file)
    url = storage.upload_image(content, file.filename, content_type, entity="hero")
    data = HeroSettings(**hero.model_dump(exclude={"updated_at"}))
    data.background_image = url
    return service.update_section("hero", data)


@router.get("/about", response_model=AboutSettingsResponse)
async def get_about(service: SiteSettingsService = Depends(get_site_settings_service)):
    return service.get_section("about")


@router.put("/about", response_model=AboutSettingsResponse)
async def update_about(
    data: AboutSettings,
    admin: Dict = Depends(require_admin),
    service: SiteSettingsService = Depends(get_admin_site_settings_service),
):
    return service.update_section("about", data)


@router.get("/contact", response_model=ContactSettingsResponse)
async def get_contact(service: SiteSettingsService = Depends(get_site_settings_service)):
    return service.get_section("contact")


@router.put("/contact", response_model=ContactSettingsResponse)
async def update_contact(
    data: ContactSettings,
    admin: Dict = Depends(require_admin),
    service: SiteSettingsService = Depends(get_admin_site_settings_service),
):
    return service.update_section("contact", data)
