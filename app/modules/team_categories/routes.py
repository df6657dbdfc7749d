from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.team_categories.schemas import TeamCategoryCreate, TeamCategoryUpdate, TeamCategoryResponse
from app.modules.team_categories.service import TeamCategoryService
from app.core.dependencies import require_admin
from app.core.schemas import MoveRequest
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/team-categories", tags=["team"])


def get_team_category_service(supabase: Client = Depends(get_supabase)) -> TeamCategoryService:
    return TeamCategoryService(supabase)


def get_admin_team_category_service(supabase: Client = Depends(get_admin_supabase)) -> TeamCategoryService:
    """Service for admin writes; uses the service-role client."""
    return TeamCategoryService(supabase)


@router.get("", response_model=List[TeamCategoryResponse])
async def list_team_categories(service: TeamCategoryService = Depends(get_team_category_service)):
    return service.list_items()


@router.post("", response_model=TeamCategoryResponse, status_code=201)
async def create_team_category(
    data: TeamCategoryCreate,
    admin: Dict = Depends(require_admin),
    service: TeamCategoryService = Depends(get_admin_team_category_service),
):
    return service.create_item(data)


@router.put("/{category_id}", response_model=TeamCategoryResponse)
async def update_team_category(
    category_id: str,
    data: TeamCategoryUpdate,
    admin: Dict = Depends(require_admin),
    service: TeamCategoryService = Depends(get_admin_team_category_service),
):
    """Rename or reposition a category. Members keep their old category text."""
    return service.update_item(category_id, data)


@router.delete("/{category_id}", status_code=204)
async def delete_team_category(
    category_id: str,
    admin: Dict = Depends(require_admin),
    service: TeamCategoryService = Depends(get_admin_team_category_service),
):
    """Delete a category. Does not cascade to team members."""
    service.delete_item(category_id)
    return None


@router.post("/{category_id}/move", response_model=List[TeamCategoryResponse])
async def move_team_category(
    category_id: str,
    data: MoveRequest,
    admin: Dict = Depends(require_admin),
    service: TeamCategoryService = Depends(get_admin_team_category_service),
):
    return service.move_item(category_id, data.direction)
