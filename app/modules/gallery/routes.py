from fastapi import APIRouter, Depends, UploadFile, File
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.gallery.schemas import GalleryItemCreate, GalleryItemUpdate, GalleryItemResponse
from app.modules.gallery.service import GalleryService
from app.core.dependencies import require_admin, get_image_storage, read_image_upload
from app.core.schemas import MoveRequest
from app.core.storage import ImageStorage
from supabase import Client
from typing import List, Dict, Optional

router = APIRouter(prefix="/gallery", tags=["gallery"])


def get_gallery_service(supabase: Client = Depends(get_supabase)) -> GalleryService:
    return GalleryService(supabase)


def get_admin_gallery_service(supabase: Client = Depends(get_admin_supabase)) -> GalleryService:
    """Service for admin writes; uses the service-role client."""
    return GalleryService(supabase)


@router.get("", response_model=List[GalleryItemResponse])
async def list_gallery(
    category: Optional[str] = None,
    service: GalleryService = Depends(get_gallery_service),
):
    return service.list_items(category=category)


@router.post("", response_model=GalleryItemResponse, status_code=201)
async def create_gallery_item(
    data: GalleryItemCreate,
    admin: Dict = Depends(require_admin),
    service: GalleryService = Depends(get_admin_gallery_service),
):
    return service.create_item(data)


@router.get("/{item_id}", response_model=GalleryItemResponse)
async def get_gallery_item(item_id: str, service: GalleryService = Depends(get_gallery_service)):
    return service.get_item(item_id)


@router.put("/{item_id}", response_model=GalleryItemResponse)
async def update_gallery_item(
    item_id: str,
    data: GalleryItemUpdate,
    admin: Dict = Depends(require_admin),
    service: GalleryService = Depends(get_admin_gallery_service),
):
    return service.update_item(item_id, data)


@router.delete("/{item_id}", status_code=204)
async def delete_gallery_item(
    item_id: str,
    admin: Dict = Depends(require_admin),
    service: GalleryService = Depends(get_admin_gallery_service),
):
    service.delete_item(item_id)
    return None


@router.post("/{item_id}/move", response_model=List[GalleryItemResponse])
async def move_gallery_item(
    item_id: str,
    data: MoveRequest,
    admin: Dict = Depends(require_admin),
    service: GalleryService = Depends(get_admin_gallery_service),
):
    return service.move_item(item_id, data.direction)


@router.post("/{item_id}/image", response_model=GalleryItemResponse)
async def upload_gallery_image(
    item_id: str,
    file: UploadFile = File(...),
    admin: Dict = Depends(require_admin),
    service: GalleryService = Depends(get_admin_gallery_service),
    storage: ImageStorage = Depends(get_image_storage),
):
    """Upload an image and use it as the item's src (poster image for videos)."""
    service.get_item(item_id)
    content, content_type = await read_image_upload(file)
    url = storage.upload_image(content, file.filename, content_type, entity="gallery")
    return service.set_field(item_id, "src", url)
