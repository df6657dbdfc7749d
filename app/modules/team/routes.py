from fastapi import APIRouter, Depends, UploadFile, File
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.team.schemas import TeamMemberCreate, TeamMemberUpdate, TeamMemberResponse, TeamGroupResponse
from app.modules.team.service import TeamService
from app.core.dependencies import require_admin, get_image_storage, read_image_upload
from app.core.schemas import MoveRequest
from app.core.storage import ImageStorage
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/team", tags=["team"])


def get_team_service(supabase: Client = Depends(get_supabase)) -> TeamService:
    return TeamService(supabase)


def get_admin_team_service(supabase: Client = Depends(get_admin_supabase)) -> TeamService:
    """Service for admin writes; uses the service-role client."""
    return TeamService(supabase)


@router.get("", response_model=List[TeamMemberResponse])
async def list_team(service: TeamService = Depends(get_team_service)):
    """List team members in display order."""
    return service.list_items()


@router.get("/grouped", response_model=List[TeamGroupResponse])
async def list_team_grouped(
    include_empty: bool = False,
    service: TeamService = Depends(get_team_service),
):
    """Team members grouped by category; unknown categories fall under 'Uncategorized'."""
    return service.list_grouped(include_empty=include_empty)


@router.post("", response_model=TeamMemberResponse, status_code=201)
async def create_team_member(
    data: TeamMemberCreate,
    admin: Dict = Depends(require_admin),
    service: TeamService = Depends(get_admin_team_service),
):
    return service.create_item(data)


@router.get("/{member_id}", response_model=TeamMemberResponse)
async def get_team_member(member_id: str, service: TeamService = Depends(get_team_service)):
    return service.get_item(member_id)


@router.put("/{member_id}", response_model=TeamMemberResponse)
async def update_team_member(
    member_id: str,
    data: TeamMemberUpdate,
    admin: Dict = Depends(require_admin),
    service: TeamService = Depends(get_admin_team_service),
):
    return service.update_item(member_id, data)


@router.delete("/{member_id}", status_code=204)
async def delete_team_member(
    member_id: str,
    admin: Dict = Depends(require_admin),
    service: TeamService = Depends(get_admin_team_service),
):
    service.delete_item(member_id)
    return None


@router.post("/{member_id}/move", response_model=List[TeamMemberResponse])
async def move_team_member(
    member_id: str,
    data: MoveRequest,
    admin: Dict = Depends(require_admin),
    service: TeamService = Depends(get_admin_team_service),
):
    return service.move_item(member_id, data.direction)


@router.post("/{member_id}/photo", response_model=TeamMemberResponse)
async def upload_team_photo(
    member_id: str,
    file: UploadFile = File(...),
    admin: Dict = Depends(require_admin),
    service: TeamService = Depends(get_admin_team_service),
    storage: ImageStorage = Depends(get_image_storage),
):
    """Upload a photo and store its public URL on the member."""
    service.get_item(member_id)
    content, content_type = await read_image_upload(file)
    url = storage.upload_image(content, file.filename, content_type, entity="team")
    return service.set_field(member_id, "image_url", url)
