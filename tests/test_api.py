"""End-to-end tests covering REST flows against a real database."""
from __future__ import annotations

from datetime import datetime

from fastapi import status
from sqlalchemy import func, select

from shiftboard.db.models import Shift, Tenant


def _count(session, model) -> int:
    return session.scalar(select(func.count()).select_from(model))


def test_tenant_flow(client, session) -> None:
    first = client.post("/api/tenants", json={"name": "Acme Security"})
    second = client.post("/api/tenants", json={"name": "Beta Guards"})

    assert first.status_code == status.HTTP_201_CREATED
    assert second.status_code == status.HTTP_201_CREATED
    created = first.json()
    assert created["name"] == "Acme Security"
    assert created["id"] != second.json()["id"]
    assert datetime.fromisoformat(created["created_at"].replace("Z", "+00:00")).tzinfo is not None

    listing = client.get("/api/tenants")

    assert listing.status_code == status.HTTP_200_OK
    assert [tenant["name"] for tenant in listing.json()] == ["Beta Guards", "Acme Security"]
    assert _count(session, Tenant) == 2


def test_empty_tenant_list(client) -> None:
    response = client.get("/api/tenants")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_short_name_performs_no_insert(client, session) -> None:
    response = client.post("/api/tenants", json={"name": "A"})

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert response.json() == {"error": "name must be at least 2 characters"}
    assert _count(session, Tenant) == 0


def test_malformed_json_performs_no_insert(client, session) -> None:
    for path in ("/api/tenants", "/api/shifts"):
        response = client.post(path, content=b"{oops", headers={"Content-Type": "application/json"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "invalid json"}

    assert _count(session, Tenant) == 0
    assert _count(session, Shift) == 0


def test_shift_flow(client, tenant) -> None:
    created = client.post(
        "/api/shifts",
        json={"tenant_id": tenant.id, "title": "Night watch", "starts_at": "2024-01-01T00:00:00Z"},
    )

    assert created.status_code == status.HTTP_201_CREATED
    body = created.json()
    assert body["tenant_id"] == tenant.id
    assert body["title"] == "Night watch"
    assert body["starts_at"] == "2024-01-01T00:00:00Z"
    assert "ends_at" not in body

    listing = client.get("/api/shifts", params={"tenant_id": tenant.id})

    assert listing.status_code == status.HTTP_200_OK
    assert [shift["id"] for shift in listing.json()] == [body["id"]]


def test_shift_for_unknown_tenant_is_rejected(client, session) -> None:
    response = client.post(
        "/api/shifts",
        json={"tenant_id": "00000000-0000-0000-0000-000000000000", "title": "Orphan"},
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert response.json() == {"error": "tenant_id does not reference an existing tenant"}
    assert _count(session, Shift) == 0


def test_shift_listing_filters_by_tenant(client) -> None:
    acme = client.post("/api/tenants", json={"name": "Acme"}).json()
    beta = client.post("/api/tenants", json={"name": "Beta"}).json()
    for tenant, title in ((acme, "a1"), (beta, "b1"), (acme, "a2")):
        response = client.post("/api/shifts", json={"tenant_id": tenant["id"], "title": title})
        assert response.status_code == status.HTTP_201_CREATED

    scoped = client.get("/api/shifts", params={"tenant_id": acme["id"]}).json()
    everything = client.get("/api/shifts").json()
    blank_filter = client.get("/api/shifts", params={"tenant_id": ""}).json()

    assert [shift["title"] for shift in scoped] == ["a2", "a1"]
    assert {shift["tenant_id"] for shift in scoped} == {acme["id"]}
    assert [shift["title"] for shift in everything] == ["a2", "b1", "a1"]
    assert blank_filter == everything


def test_malformed_tenant_ids(client, session) -> None:
    created = client.post("/api/shifts", json={"tenant_id": "not-a-uuid", "title": "Orphan"})
    listing = client.get("/api/shifts", params={"tenant_id": "not-a-uuid"})

    assert created.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert created.json() == {"error": "tenant_id does not reference an existing tenant"}
    assert listing.status_code == status.HTTP_200_OK
    assert listing.json() == []
    assert _count(session, Shift) == 0


def test_trailing_text_after_timestamp_is_rejected(client, session, tenant) -> None:
    response = client.post(
        "/api/shifts",
        json={"tenant_id": tenant.id, "title": "Night watch", "starts_at": "2024-01-01T00:00:00Z\n"},
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert response.json() == {"error": "invalid starts_at format (RFC3339)"}
    assert _count(session, Shift) == 0


def test_tenant_created_from_plain_text_body(client) -> None:
    response = client.post(
        "/api/tenants", content=b'{"name": "Acme"}', headers={"Content-Type": "text/plain"}
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert client.get("/api/tenants").json()[0]["id"] == response.json()["id"]
