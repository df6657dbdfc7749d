from fastapi import APIRouter, Depends, Request
from app.config import settings
from app.core.dependencies import get_auth_service, get_bearer_token, require_admin
from app.core.rate_limit import limiter
from app.modules.auth.schemas import LoginRequest, SessionResponse, SessionInfo
from app.modules.auth.service import AuthService
from typing import Dict

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=SessionResponse)
@limiter.limit(settings.login_rate_limit)
async def login(
    request: Request,
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Exchange the admin password for a session token"""
    return service.login(login_data)


@router.post("/logout", status_code=200)
async def logout(
    token: str = Depends(get_bearer_token),
    service: AuthService = Depends(get_auth_service)
):
    """Invalidate the current session"""
    service.logout(token)
    return {"message": "Logged out successfully"}


@router.get("/session", response_model=SessionInfo)
async def get_session(session: Dict = Depends(require_admin)):
    """Report whether the bearer token is a live admin session"""
    return SessionInfo(expires_at=session["expires_at"])
