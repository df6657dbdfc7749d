from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.core.rate_limit import limiter
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.main import app
from app.modules.auth.service import clear_session_cache
from tests.fakes import FakeSupabase

ADMIN_PASSWORD = "correct horse battery staple"


@pytest.fixture
def fake_db() -> FakeSupabase:
    """Fresh in-memory store."""
    return FakeSupabase()


@pytest.fixture
def client(fake_db: FakeSupabase, monkeypatch: pytest.MonkeyPatch):
    """Test client for the real app wired to the fake store."""
    monkeypatch.setattr(settings, "admin_password", ADMIN_PASSWORD)
    limiter.enabled = False
    clear_session_cache()
    app.dependency_overrides[get_supabase] = lambda: fake_db
    app.dependency_overrides[get_admin_supabase] = lambda: fake_db
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    clear_session_cache()
    limiter.enabled = True


@pytest.fixture
def admin_headers(client: TestClient) -> dict[str, str]:
    """Authorization header for a freshly issued admin session."""
    response = client.post("/api/v1/auth/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
