import hashlib
import hmac
import logging
import secrets
import time
from datetime import datetime, timedelta, timezone
from supabase import Client
from app.modules.auth.schemas import LoginRequest, SessionResponse
from app.config.settings import settings
from fastapi import HTTPException
from typing import Dict, Any

logger = logging.getLogger(__name__)

# In-memory cache for validate_session to avoid a store round-trip on every admin request
_SESSION_CACHE: Dict[str, tuple] = {}
_SESSION_CACHE_TTL_SEC = 60
_SESSION_CACHE_MAX_SIZE = 500


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


def _parse_timestamp(value) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def clear_session_cache():
    _SESSION_CACHE.clear()


class AuthService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def login(self, login_data: LoginRequest) -> SessionResponse:
        """Check the shared admin password and issue an expiring session token"""
        if not settings.admin_password:
            raise HTTPException(status_code=503, detail="Admin login is not configured")
        if not hmac.compare_digest(login_data.password.encode(), settings.admin_password.encode()):
            logger.warning("Rejected admin login attempt")
            raise HTTPException(status_code=401, detail="Invalid password")

        token = secrets.token_urlsafe(32)
        expires_at = datetime.now(timezone.utc) + timedelta(minutes=settings.session_ttl_minutes)
        try:
            result = self.supabase.table("admin_sessions").insert({
                "token_hash": hash_token(token),
                "expires_at": expires_at.isoformat()
            }).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create session")
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Failed to create admin session: {e}")
            raise HTTPException(status_code=500, detail="Failed to create session")

        logger.info("Admin session issued")
        return SessionResponse(access_token=token, expires_at=expires_at)

    def validate_session(self, token: str) -> Dict[str, Any]:
        """Return session data for a live token. Uses short TTL cache to reduce store calls."""
        cache_key = hash_token(token)
        now = time.monotonic()
        if cache_key in _SESSION_CACHE:
            session, expiry = _SESSION_CACHE[cache_key]
            if now < expiry:
                return session
            del _SESSION_CACHE[cache_key]

        try:
            result = self.supabase.table("admin_sessions")\
                .select("*")\
                .eq("token_hash", cache_key)\
                .maybe_single()\
                .execute()
        except Exception as e:
            logger.error(f"Session lookup failed: {e}")
            raise HTTPException(status_code=401, detail="Authentication failed")

        if not result or not result.data:
            raise HTTPException(status_code=401, detail="Invalid or expired session")

        expires_at = _parse_timestamp(result.data["expires_at"])
        remaining = (expires_at - datetime.now(timezone.utc)).total_seconds()
        if remaining <= 0:
            raise HTTPException(status_code=401, detail="Invalid or expired session")

        session = {"id": result.data.get("id"), "expires_at": expires_at}
        if len(_SESSION_CACHE) < _SESSION_CACHE_MAX_SIZE:
            _SESSION_CACHE[cache_key] = (session, now + min(_SESSION_CACHE_TTL_SEC, remaining))
        return session

    def logout(self, token: str) -> bool:
        cache_key = hash_token(token)
        _SESSION_CACHE.pop(cache_key, None)
        try:
            self.supabase.table("admin_sessions").delete().eq("token_hash", cache_key).execute()
            return True
        except Exception as e:
            logger.error(f"Failed to delete admin session: {e}")
            return False
