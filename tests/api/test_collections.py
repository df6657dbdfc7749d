"""
Ordered collection API tests.

Services, clients, portfolio, gallery and careers share the same
list/append/update/delete/move contract.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.database.supabase_client import get_supabase
from app.main import app
from tests.fakes import FakeSupabase


def seed_services(db: FakeSupabase) -> None:
    db.seed("services", [
        {"id": "s-a", "title": "A", "description": "a", "icon": None, "order_index": 0},
        {"id": "s-b", "title": "B", "description": "b", "icon": None, "order_index": 1},
        {"id": "s-c", "title": "C", "description": "c", "icon": None, "order_index": 2},
    ])


def test_public_list_is_ordered(client: TestClient, fake_db: FakeSupabase) -> None:
    fake_db.seed("services", [
        {"id": "s-2", "title": "Two", "description": "x", "order_index": 5},
        {"id": "s-1", "title": "One", "description": "x", "order_index": 1},
    ])
    response = client.get("/api/v1/services")
    assert response.status_code == 200
    assert [s["title"] for s in response.json()] == ["One", "Two"]


def test_store_failure_is_not_an_empty_list(client: TestClient, fake_db: FakeSupabase) -> None:
    fake_db.failures.add(("services", "select"))
    response = client.get("/api/v1/services")
    assert response.status_code == 503


def test_create_appends_at_count(
    client: TestClient, fake_db: FakeSupabase, admin_headers: dict[str, str]
) -> None:
    seed_services(fake_db)
    response = client.post(
        "/api/v1/services",
        json={"title": "D", "description": "d", "icon": "Star"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    assert response.json()["order_index"] == 3


def test_create_on_empty_collection(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.post(
        "/api/v1/clients", json={"name": "Acme"}, headers=admin_headers
    )
    assert response.status_code == 201
    assert response.json()["order_index"] == 0


def test_blank_required_field_rejected(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.post(
        "/api/v1/services", json={"title": "   ", "description": "d"}, headers=admin_headers
    )
    assert response.status_code == 422


def test_update_replaces_full_record(
    client: TestClient, fake_db: FakeSupabase, admin_headers: dict[str, str]
) -> None:
    fake_db.seed("clients", [
        {"id": "c-1", "name": "Acme", "logo_url": "https://x/logo.png", "website_url": "https://acme.test", "order_index": 4},
    ])
    response = client.put(
        "/api/v1/clients/c-1", json={"name": "Acme Corp"}, headers=admin_headers
    )
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Acme Corp"
    assert body["logo_url"] is None
    assert body["order_index"] == 4


def test_update_missing_record(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.put(
        "/api/v1/clients/nope", json={"name": "Acme"}, headers=admin_headers
    )
    assert response.status_code == 404


def test_get_missing_record(client: TestClient) -> None:
    assert client.get("/api/v1/services/nope").status_code == 404


def test_delete_is_hard(
    client: TestClient, fake_db: FakeSupabase, admin_headers: dict[str, str]
) -> None:
    seed_services(fake_db)
    assert client.delete("/api/v1/services/s-b", headers=admin_headers).status_code == 204
    assert [r["id"] for r in fake_db.rows("services")] == ["s-a", "s-c"]


def test_move_up_swaps(
    client: TestClient, fake_db: FakeSupabase, admin_headers: dict[str, str]
) -> None:
    seed_services(fake_db)
    response = client.post(
        "/api/v1/services/s-b/move", json={"direction": "up"}, headers=admin_headers
    )
    assert response.status_code == 200
    assert [(s["title"], s["order_index"]) for s in response.json()] == [("B", 0), ("A", 1), ("C", 2)]


def test_move_edges_are_noops(
    client: TestClient, fake_db: FakeSupabase, admin_headers: dict[str, str]
) -> None:
    seed_services(fake_db)
    up = client.post("/api/v1/services/s-a/move", json={"direction": "up"}, headers=admin_headers)
    down = client.post("/api/v1/services/s-c/move", json={"direction": "down"}, headers=admin_headers)
    assert [s["id"] for s in up.json()] == ["s-a", "s-b", "s-c"]
    assert [s["id"] for s in down.json()] == ["s-a", "s-b", "s-c"]


def test_move_unknown_record(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.post(
        "/api/v1/services/nope/move", json={"direction": "down"}, headers=admin_headers
    )
    assert response.status_code == 404


def test_move_rejects_bad_direction(
    client: TestClient, fake_db: FakeSupabase, admin_headers: dict[str, str]
) -> None:
    seed_services(fake_db)
    response = client.post(
        "/api/v1/services/s-a/move", json={"direction": "left"}, headers=admin_headers
    )
    assert response.status_code == 422


def test_gallery_video_requires_source(client: TestClient, admin_headers: dict[str, str]) -> None:
    item = {"type": "video", "src": "https://x/poster.jpg", "title": "Reel", "category": "Videos"}
    assert client.post("/api/v1/gallery", json=item, headers=admin_headers).status_code == 422
    item["video_src"] = "https://x/reel.mp4"
    assert client.post("/api/v1/gallery", json=item, headers=admin_headers).status_code == 201


def test_gallery_category_filter(client: TestClient, fake_db: FakeSupabase) -> None:
    fake_db.seed("gallery_items", [
        {"id": "g1", "type": "image", "src": "s", "title": "t", "category": "Culture", "order_index": 0},
        {"id": "g2", "type": "image", "src": "s", "title": "t", "category": "Campaigns", "order_index": 1},
    ])
    response = client.get("/api/v1/gallery", params={"category": "Culture"})
    assert [g["id"] for g in response.json()] == ["g1"]


def test_portfolio_categories_in_display_order(client: TestClient, fake_db: FakeSupabase) -> None:
    fake_db.seed("portfolio_items", [
        {"id": "p1", "title": "Site", "category": "Web Development", "order_index": 0},
        {"id": "p2", "title": "Logo", "category": "Branding", "order_index": 1},
        {"id": "p3", "title": "Shop", "category": "Web Development", "order_index": 2},
    ])
    assert client.get("/api/v1/portfolio/categories").json() == ["Web Development", "Branding"]


def test_careers_hide_inactive_listings(
    client: TestClient, fake_db: FakeSupabase, admin_headers: dict[str, str]
) -> None:
    fake_db.seed("job_listings", [
        {"id": "j1", "title": "Designer", "location": "Remote", "job_type": "Full-time",
         "description": "d", "is_active": True, "order_index": 0},
        {"id": "j2", "title": "Intern", "location": "Office", "job_type": "Part-time",
         "description": "d", "is_active": False, "order_index": 1},
    ])
    assert [j["id"] for j in client.get("/api/v1/careers").json()] == ["j1"]
    assert client.get("/api/v1/careers", params={"include_inactive": True}).status_code == 401
    response = client.get("/api/v1/careers", params={"include_inactive": True}, headers=admin_headers)
    assert [j["id"] for j in response.json()] == ["j1", "j2"]


def test_careers_job_type_validated(client: TestClient, admin_headers: dict[str, str]) -> None:
    listing = {"title": "Dev", "location": "Remote", "job_type": "Gig", "description": "d"}
    assert client.post("/api/v1/careers", json=listing, headers=admin_headers).status_code == 422


@pytest.fixture
def anon_db(client: TestClient, admin_headers: dict[str, str]) -> FakeSupabase:
    """Separate anon-key store; the service-role store stays `fake_db`."""
    anon = FakeSupabase()
    anon.failures.update({
        (table, op)
        for table in ("services", "team_members", "clients")
        for op in ("insert", "update", "delete")
    })
    app.dependency_overrides[get_supabase] = lambda: anon
    return anon


def test_admin_writes_use_service_role_client(
    client: TestClient,
    fake_db: FakeSupabase,
    anon_db: FakeSupabase,
    admin_headers: dict[str, str],
) -> None:
    seed_services(fake_db)
    created = client.post(
        "/api/v1/services", json={"title": "D", "description": "d"}, headers=admin_headers
    )
    assert created.status_code == 201
    new_id = created.json()["id"]
    assert client.put(
        f"/api/v1/services/{new_id}", json={"title": "D2", "description": "d"}, headers=admin_headers
    ).status_code == 200
    moved = client.post(
        f"/api/v1/services/{new_id}/move", json={"direction": "up"}, headers=admin_headers
    )
    assert moved.status_code == 200
    assert client.delete(f"/api/v1/services/{new_id}", headers=admin_headers).status_code == 204

    assert fake_db.row("services", new_id) is None
    assert ("services", "insert") in fake_db.calls
    assert ("services", "update") in fake_db.calls
    assert not any(op != "select" for _, op in anon_db.calls)


def test_uploads_use_service_role_storage(
    client: TestClient,
    fake_db: FakeSupabase,
    anon_db: FakeSupabase,
    admin_headers: dict[str, str],
) -> None:
    fake_db.seed("clients", [{"id": "c-1", "name": "Acme", "order_index": 0}])
    png = ("logo.png", b"\x89PNG\r\n\x1a\n", "image/png")
    response = client.post("/api/v1/clients/c-1/logo", files={"file": png}, headers=admin_headers)
    assert response.status_code == 200
    assert len(fake_db.storage.objects) == 1
    assert anon_db.storage.objects == {}


def test_public_reads_use_anon_client(
    client: TestClient, fake_db: FakeSupabase, anon_db: FakeSupabase
) -> None:
    anon_db.seed("services", [{"id": "s-1", "title": "Public", "description": "x", "order_index": 0}])
    seed_services(fake_db)
    response = client.get("/api/v1/services")
    assert response.status_code == 200
    assert [s["title"] for s in response.json()] == ["Public"]
