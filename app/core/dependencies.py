"""
Core dependencies for admin route protection and uploads
"""

from fastapi import Depends, HTTPException, Security, UploadFile
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.config import settings
from app.database.supabase_client import get_admin_supabase
from app.modules.auth.service import AuthService
from app.core.storage import ImageStorage, ALLOWED_IMAGE_TYPES
from supabase import Client
from typing import Dict, Any, Tuple
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_auth_service(supabase: Client = Depends(get_admin_supabase)) -> AuthService:
    return AuthService(supabase)


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials = Security(security)
) -> str:
    """Extract session token from Authorization header"""
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return credentials.credentials


def require_admin(
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service)
) -> Dict[str, Any]:
    """Validate the admin session token on every admin request"""
    return auth_service.validate_session(token)


def get_image_storage(supabase: Client = Depends(get_admin_supabase)) -> ImageStorage:
    return ImageStorage(supabase)


async def read_image_upload(file: UploadFile) -> Tuple[bytes, str]:
    """Read an uploaded image, enforcing the allowed types and size limit."""
    content_type = (file.content_type or "").lower()
    if content_type not in ALLOWED_IMAGE_TYPES:
        raise HTTPException(status_code=400, detail="File must be a JPEG, PNG, WebP, GIF or SVG image")
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Image exceeds the upload size limit")
    return content, content_type
