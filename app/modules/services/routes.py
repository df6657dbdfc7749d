from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.services.schemas import ServiceCreate, ServiceUpdate, ServiceResponse
from app.modules.services.service import ServiceCatalogService
from app.core.dependencies import require_admin
from app.core.schemas import MoveRequest
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/services", tags=["services"])


def get_service_catalog(supabase: Client = Depends(get_supabase)) -> ServiceCatalogService:
    return ServiceCatalogService(supabase)


def get_admin_service_catalog(supabase: Client = Depends(get_admin_supabase)) -> ServiceCatalogService:
    """Service for admin writes; uses the service-role client."""
    return ServiceCatalogService(supabase)


@router.get("", response_model=List[ServiceResponse])
async def list_services(service: ServiceCatalogService = Depends(get_service_catalog)):
    """List services in display order."""
    return service.list_items()


@router.post("", response_model=ServiceResponse, status_code=201)
async def create_service(
    data: ServiceCreate,
    admin: Dict = Depends(require_admin),
    service: ServiceCatalogService = Depends(get_admin_service_catalog),
):
    """Add a service at the end of the list."""
    return service.create_item(data)


@router.get("/{service_id}", response_model=ServiceResponse)
async def get_service(service_id: str, service: ServiceCatalogService = Depends(get_service_catalog)):
    return service.get_item(service_id)


@router.put("/{service_id}", response_model=ServiceResponse)
async def update_service(
    service_id: str,
    data: ServiceUpdate,
    admin: Dict = Depends(require_admin),
    service: ServiceCatalogService = Depends(get_admin_service_catalog),
):
    return service.update_item(service_id, data)


@router.delete("/{service_id}", status_code=204)
async def delete_service(
    service_id: str,
    admin: Dict = Depends(require_admin),
    service: ServiceCatalogService = Depends(get_admin_service_catalog),
):
    service.delete_item(service_id)
    return None


@router.post("/{service_id}/move", response_model=List[ServiceResponse])
async def move_service(
    service_id: str,
    data: MoveRequest,
    admin: Dict = Depends(require_admin),
    service: ServiceCatalogService = Depends(get_admin_service_catalog),
):
    """Swap a service with its neighbour; returns the reordered list."""
    return service.move_item(service_id, data.direction)
