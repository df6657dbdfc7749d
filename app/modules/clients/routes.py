from fastapi import APIRouter, Depends, UploadFile, File
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.clients.schemas import ClientCreate, ClientUpdate, ClientResponse
from app.modules.clients.service import ClientService
from app.core.dependencies import require_admin, get_image_storage, read_image_upload
from app.core.schemas import MoveRequest
from app.core.storage import ImageStorage
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/clients", tags=["clients"])


def get_client_service(supabase: Client = Depends(get_supabase)) -> ClientService:
    return ClientService(supabase)


def get_admin_client_service(supabase: Client = Depends(get_admin_supabase)) -> ClientService:
    """Service for admin writes; uses the service-role client."""
    return ClientService(supabase)


@router.get("", response_model=List[ClientResponse])
async def list_clients(service: ClientService = Depends(get_client_service)):
    return service.list_items()


@router.post("", response_model=ClientResponse, status_code=201)
async def create_client(
    data: ClientCreate,
    admin: Dict = Depends(require_admin),
    service: ClientService = Depends(get_admin_client_service),
):
    return service.create_item(data)


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(client_id: str, service: ClientService = Depends(get_client_service)):
    return service.get_item(client_id)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    data: ClientUpdate,
    admin: Dict = Depends(require_admin),
    service: ClientService = Depends(get_admin_client_service),
):
    return service.update_item(client_id, data)


@router.delete("/{client_id}", status_code=204)
async def delete_client(
    client_id: str,
    admin: Dict = Depends(require_admin),
    service: ClientService = Depends(get_admin_client_service),
):
    service.delete_item(client_id)
    return None


@router.post("/{client_id}/move", response_model=List[ClientResponse])
async def move_client(
    client_id: str,
    data: MoveRequest,
    admin: Dict = Depends(require_admin),
    service: ClientService = Depends(get_admin_client_service),
):
    return service.move_item(client_id, data.direction)


@router.post("/{client_id}/logo", response_model=ClientResponse)
async def upload_client_logo(
    client_id: str,
    file: UploadFile = File(...),
    admin: Dict = Depends(require_admin),
    service: ClientService = Depends(get_admin_client_service),
    storage: ImageStorage = Depends(get_image_storage),
):
    """Upload a logo and store its public URL on the client."""
    service.get_item(client_id)
    content, content_type = await read_image_upload(file)
    url = storage.upload_image(content, file.filename, content_type, entity="clients")
    return service.set_field(client_id, "logo_url", url)
