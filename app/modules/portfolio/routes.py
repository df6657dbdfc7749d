from fastapi import APIRouter, Depends, UploadFile, File
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.portfolio.schemas import PortfolioItemCreate, PortfolioItemUpdate, PortfolioItemResponse
from app.modules.portfolio.service import PortfolioService
from app.core.dependencies import require_admin, get_image_storage, read_image_upload
from app.core.schemas import MoveRequest
from app.core.storage import ImageStorage
from supabase import Client
from typing import List, Dict, Optional

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


def get_portfolio_service(supabase: Client = Depends(get_supabase)) -> PortfolioService:
    return PortfolioService(supabase)


def get_admin_portfolio_service(supabase: Client = Depends(get_admin_supabase)) -> PortfolioService:
    """Service for admin writes; uses the service-role client."""
    return PortfolioService(supabase)


@router.get("", response_model=List[PortfolioItemResponse])
async def list_portfolio(
    category: Optional[str] = None,
    service: PortfolioService = Depends(get_portfolio_service),
):
    """List portfolio projects, optionally filtered to one category."""
    return service.list_items(category=category)


@router.get("/categories", response_model=List[str])
async def list_portfolio_categories(service: PortfolioService = Depends(get_portfolio_service)):
    return service.list_categories()


@router.post("", response_model=PortfolioItemResponse, status_code=201)
async def create_portfolio_item(
    data: PortfolioItemCreate,
    admin: Dict = Depends(require_admin),
    service: PortfolioService = Depends(get_admin_portfolio_service),
):
    return service.create_item(data)


@router.get("/{item_id}", response_model=PortfolioItemResponse)
async def get_portfolio_item(item_id: str, service: PortfolioService = Depends(get_portfolio_service)):
    return service.get_item(item_id)


@router.put("/{item_id}", response_model=PortfolioItemResponse)
async def update_portfolio_item(
    item_id: str,
    data: PortfolioItemUpdate,
    admin: Dict = Depends(require_admin),
    service: PortfolioService = Depends(get_admin_portfolio_service),
):
    return service.update_item(item_id, data)


@router.delete("/{item_id}", status_code=204)
async def delete_portfolio_item(
    item_id: str,
    admin: Dict = Depends(require_admin),
    service: PortfolioService = Depends(get_admin_portfolio_service),
):
    service.delete_item(item_id)
    return None


@router.post("/{item_id}/move", response_model=List[PortfolioItemResponse])
async def move_portfolio_item(
    item_id: str,
    data: MoveRequest,
    admin: Dict = Depends(require_admin),
    service: PortfolioService = Depends(get_admin_portfolio_service),
):
    return service.move_item(item_id, data.direction)


@router.post("/{item_id}/image", response_model=PortfolioItemResponse)
async def upload_portfolio_image(
    item_id: str,
    file: UploadFile = File(...),
    admin: Dict = Depends(require_admin),
    service: PortfolioService = Depends(get_admin_portfolio_service),
    storage: ImageStorage = Depends(get_image_storage),
):
    service.get_item(item_id)
    content, content_type = await read_image_upload(file)
    url = storage.upload_image(content, file.filename, content_type, entity="portfolio")
    return service.set_field(item_id, "image_url", url)
