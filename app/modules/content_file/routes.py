from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from app.config import settings
from app.core.dependencies import require_admin
from app.modules.content_file.store import ContentFileStore, ContentFileError, SECTION_TYPES
from typing import Any, Dict

router = APIRouter(prefix="/content", tags=["content"])

SECTION_LABELS = {
    "hero": "hero content",
    "services": "services",
    "team": "team",
    "clients": "clients",
    "gallery": "gallery",
}


def get_content_store() -> ContentFileStore:
    return ContentFileStore(settings.content_file)


def _check_section(section: str) -> None:
    if section not in SECTION_TYPES:
        raise HTTPException(status_code=404, detail=f"Unknown section: {section}")


@router.get("/{section}")
async def read_section(section: str, store: ContentFileStore = Depends(get_content_store)):
    """Return one whole section of the content file."""
    _check_section(section)
    try:
        value = store.get_section(section)
    except ContentFileError:
        raise HTTPException(status_code=500, detail=f"Failed to fetch {SECTION_LABELS[section]}")
    return jsonable_encoder(value, by_alias=True)


@router.put("/{section}")
async def replace_section(
    section: str,
    body: Any = Body(...),
    admin: Dict = Depends(require_admin),
    store: ContentFileStore = Depends(get_content_store),
):
    """Replace one whole section of the content file."""
    _check_section(section)
    try:
        value = SECTION_TYPES[section].validate_python(body)
    except ValidationError as e:
        raise RequestValidationError(e.errors())
    try:
        store.replace_section(section, value)
    except ContentFileError:
        raise HTTPException(status_code=500, detail=f"Failed to update {SECTION_LABELS[section]}")
    return {"success": True}
