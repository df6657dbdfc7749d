from fastapi import APIRouter, Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.careers.schemas import JobListingCreate, JobListingUpdate, JobListingResponse
from app.modules.careers.service import CareerService
from app.modules.auth.service import AuthService
from app.core.dependencies import require_admin, get_auth_service, security
from app.core.schemas import MoveRequest
from supabase import Client
from typing import List, Dict, Optional

router = APIRouter(prefix="/careers", tags=["careers"])


def get_career_service(supabase: Client = Depends(get_supabase)) -> CareerService:
    return CareerService(supabase)


def get_admin_career_service(supabase: Client = Depends(get_admin_supabase)) -> CareerService:
    """Service for admin writes; uses the service-role client."""
    return CareerService(supabase)


@router.get("", response_model=List[JobListingResponse])
async def list_job_listings(
    include_inactive: bool = False,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    auth_service: AuthService = Depends(get_auth_service),
    service: CareerService = Depends(get_career_service),
):
    """List open positions. Admins may pass include_inactive=true to see all listings."""
    if include_inactive:
        if credentials is None:
            raise HTTPException(status_code=401, detail="Not authenticated")
        auth_service.validate_session(credentials.credentials)
    return service.list_items(include_inactive=include_inactive)


@router.post("", response_model=JobListingResponse, status_code=201)
async def create_job_listing(
    data: JobListingCreate,
    admin: Dict = Depends(require_admin),
    service: CareerService = Depends(get_admin_career_service),
):
    return service.create_item(data)


@router.get("/{listing_id}", response_model=JobListingResponse)
async def get_job_listing(listing_id: str, service: CareerService = Depends(get_career_service)):
    return service.get_item(listing_id)


@router.put("/{listing_id}", response_model=JobListingResponse)
async def update_job_listing(
    listing_id: str,
    data: JobListingUpdate,
    admin: Dict = Depends(require_admin),
    service: CareerService = Depends(get_admin_career_service),
):
    return service.update_item(listing_id, data)


@router.delete("/{listing_id}", status_code=204)
async def delete_job_listing(
    listing_id: str,
    admin: Dict = Depends(require_admin),
    service: CareerService = Depends(get_admin_career_service),
):
    service.delete_item(listing_id)
    return None


@router.post("/{listing_id}/move", response_model=List[JobListingResponse])
async def move_job_listing(
    listing_id: str,
    data: MoveRequest,
    admin: Dict = Depends(require_admin),
    service: CareerService = Depends(get_admin_career_service),
):
    return service.move_item(listing_id, data.direction)
