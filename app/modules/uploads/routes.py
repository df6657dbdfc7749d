from fastapi import APIRouter, Depends, HTTPException, UploadFile, File
from app.core.dependencies import require_admin, get_image_storage, read_image_upload
from app.core.storage import ImageStorage, ENTITY_PREFIXES
from pydantic import BaseModel
from typing import Dict

router = APIRouter(prefix="/uploads", tags=["uploads"])


class UploadResponse(BaseModel):
    url: str
    entity: str


@router.post("/{entity}", response_model=UploadResponse, status_code=201)
async def upload_image(
    entity: str,
    file: UploadFile = File(...),
    admin: Dict = Depends(require_admin),
    storage: ImageStorage = Depends(get_image_storage),
):
    """
    Upload an image without attaching it to a record.
    The returned URL is saved by the caller as part of the next form submit.
    """
    if entity not in ENTITY_PREFIXES:
        raise HTTPException(status_code=404, detail=f"Unknown upload target: {entity}")
    content, content_type = await read_image_upload(file)
    url = storage.upload_image(content, file.filename, content_type, entity=entity)
    return UploadResponse(url=url, entity=entity)
