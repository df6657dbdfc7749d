"""Flat-file content API tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.modules.content_file.routes import get_content_store
from app.modules.content_file.store import ContentFileStore

DOCUMENT = {
    "hero": {"title": "Hello", "subtitle": "", "ctaText": "Go", "ctaLink": "/", "backgroundImage": ""},
    "services": [],
    "team": [{"id": "t1", "name": "Ana", "role": "Designer", "bio": ""}],
    "clients": ["Acme"],
    "gallery": [],
}


@pytest.fixture
def content_path(tmp_path: Path, client: TestClient) -> Path:
    path = tmp_path / "content.json"
    path.write_text(json.dumps(DOCUMENT), encoding="utf-8")
    app.dependency_overrides[get_content_store] = lambda: ContentFileStore(str(path))
    return path


def test_read_section(client: TestClient, content_path: Path) -> None:
    response = client.get("/api/v1/content/hero")
    assert response.status_code == 200
    assert response.json()["ctaText"] == "Go"


def test_unknown_section(client: TestClient, content_path: Path) -> None:
    assert client.get("/api/v1/content/pricing").status_code == 404


def test_put_replaces_section(
    client: TestClient, content_path: Path, admin_headers: dict[str, str]
) -> None:
    response = client.put("/api/v1/content/clients", json=["Globex"], headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert json.loads(content_path.read_text(encoding="utf-8"))["clients"] == ["Globex"]


def test_put_requires_admin(client: TestClient, content_path: Path) -> None:
    assert client.put("/api/v1/content/clients", json=["Globex"]).status_code == 401


def test_put_rejects_malformed_section(
    client: TestClient, content_path: Path, admin_headers: dict[str, str]
) -> None:
    response = client.put("/api/v1/content/team", json=[{"role": "no id"}], headers=admin_headers)
    assert response.status_code == 422
    assert json.loads(content_path.read_text(encoding="utf-8"))["team"] == DOCUMENT["team"]


def test_unreadable_file(client: TestClient, tmp_path: Path) -> None:
    app.dependency_overrides[get_content_store] = lambda: ContentFileStore(str(tmp_path / "missing.json"))
    response = client.get("/api/v1/content/services")
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to fetch services"
