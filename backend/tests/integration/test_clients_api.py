"""End-to-end tests for the /clients endpoints against a SQLite store."""

from datetime import datetime

import pytest
from httpx import AsyncClient


async def _id_of(client: AsyncClient, client_id: str) -> int:
    response = await client.get(f"/clients/clientId/{client_id}")
    assert response.status_code == 200
    return response.json()["client"]["id"]


def _parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


async def _row_count(client: AsyncClient) -> int:
    return (await client.get("/clients/raw")).json()["count"]


# ── Reads ──


@pytest.mark.asyncio
async def test_raw_listing_is_ordered_by_name(api_client: AsyncClient):
    response = await api_client.get("/clients/raw")

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 3
    assert [c["name"] for c in data["clients"]] == [
        "John Smith",
        "Mike Wilson",
        "Sarah Johnson",
    ]
    row = data["clients"][0]
    assert set(row) == {"id", "clientId", "name", "email", "phone", "created_at", "updated_at"}


@pytest.mark.asyncio
async def test_formatted_directory(api_client: AsyncClient):
    response = await api_client.get("/clients")

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 3
    assert set(data["clients"]) == {"johnsmith", "mikewilson", "sarahjohns"}
    assert data["clients"]["sarahjohns"] == {
        "id": data["clients"]["sarahjohns"]["id"],
        "name": "Sarah Johnson",
        "email": "sarah.johnson@email.com",
        "phone": "+44 7700 789123",
        "clientId": "TB-002",
    }


@pytest.mark.asyncio
async def test_directory_key_collision_keeps_later_record(api_client: AsyncClient):
    created = await api_client.post(
        "/clients",
        json={"clientId": "TB-010", "name": "John-Smith", "email": "js@example.com"},
    )
    assert created.status_code == 201

    data = (await api_client.get("/clients")).json()

    assert data["count"] == 4
    assert len(data["clients"]) == 3
    assert data["clients"]["johnsmith"]["clientId"] == "TB-010"
    assert data["clients"]["johnsmith"]["phone"] == ""


@pytest.mark.asyncio
async def test_get_by_id(api_client: AsyncClient):
    record_id = await _id_of(api_client, "TB-003")
    response = await api_client.get(f"/clients/{record_id}")

    assert response.status_code == 200
    assert response.json()["client"]["name"] == "Mike Wilson"


@pytest.mark.asyncio
async def test_get_unknown_client_id_returns_404(api_client: AsyncClient):
    response = await api_client.get("/clients/clientId/UNKNOWN")

    assert response.status_code == 404
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_get_unknown_id_returns_404(api_client: AsyncClient):
    response = await api_client.get("/clients/9999")
    assert response.status_code == 404
    assert response.json() == {"error": "Client not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
async def test_non_numeric_id_returns_400(api_client: AsyncClient, method: str):
    kwargs = {"json": {"name": "x", "email": "x@y.io"}} if method == "PUT" else {}
    response = await api_client.request(method, "/clients/abc", **kwargs)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid ID format"


# ── Create ──


@pytest.mark.asyncio
async def test_create_then_read_back(api_client: AsyncClient):
    payloads = [
        {"clientId": "TB-101", "name": "Ada Lovelace", "email": "ada@example.com", "phone": "+44 1"},
        {"clientId": "TB-102", "name": "Grace Hopper", "email": "grace@example.com"},
    ]
    for payload in payloads:
        response = await api_client.post("/clients", json=payload)
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["client"]["clientId"] == payload["clientId"]
        assert isinstance(body["client"]["id"], int)

    for payload in payloads:
        client = (await api_client.get(f"/clients/clientId/{payload['clientId']}")).json()["client"]
        assert client["name"] == payload["name"]
        assert client["email"] == payload["email"]
        assert client["phone"] == payload.get("phone")


@pytest.mark.asyncio
async def test_create_duplicate_client_id_returns_409(api_client: AsyncClient):
    response = await api_client.post(
        "/clients",
        json={"clientId": "TB-001", "name": "Impostor", "email": "imp@example.com"},
    )

    assert response.status_code == 409
    assert response.json() == {"error": "Client ID already exists", "clientId": "TB-001"}

    rows = (await api_client.get("/clients/raw")).json()["clients"]
    matches = [r for r in rows if r["clientId"] == "TB-001"]
    assert len(matches) == 1
    assert matches[0]["name"] == "John Smith"


@pytest.mark.asyncio
async def test_create_invalid_email_returns_400_without_insert(api_client: AsyncClient):
    before = await _row_count(api_client)

    response = await api_client.post(
        "/clients",
        json={"clientId": "TB-200", "name": "Bad Email", "email": "not-an-email"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid email format"
    assert await _row_count(api_client) == before


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"name": "No Id", "email": "no@id.io"},
        {"clientId": "TB-201", "email": "no@name.io"},
        {"clientId": "TB-202", "name": "No Email"},
        {"clientId": "", "name": "Empty Id", "email": "e@id.io"},
    ],
)
async def test_create_missing_fields_returns_400(api_client: AsyncClient, payload: dict):
    response = await api_client.post("/clients", json=payload)

    assert response.status_code == 400
    assert response.json()["error"].startswith("Missing required fields")


# ── Update ──


@pytest.mark.asyncio
async def test_update_by_id_round_trip(api_client: AsyncClient):
    record_id = await _id_of(api_client, "TB-001")

    response = await api_client.put(
        f"/clients/{record_id}",
        json={
            "clientId": "TB-001",
            "name": "John Smithson",
            "email": "john.smith@email.com",
            "phone": "+44 7700 000000",
        },
    )
    assert response.status_code == 200
    assert response.json()["success"] is True

    client = (await api_client.get(f"/clients/{record_id}")).json()["client"]
    assert client["name"] == "John Smithson"
    assert client["phone"] == "+44 7700 000000"
    assert _parse_timestamp(client["updated_at"]) > _parse_timestamp(
        client["created_at"]
    )


@pytest.mark.asyncio
async def test_update_is_full_replace(api_client: AsyncClient):
    record_id = await _id_of(api_client, "TB-002")

    response = await api_client.put(
        f"/clients/{record_id}",
        json={"name": "Sarah J", "email": "sarah.j@email.com"},
    )

    assert response.status_code == 200
    client = response.json()["client"]
    assert client["clientId"] == "TB-002"
    assert client["phone"] is None


@pytest.mark.asyncio
async def test_update_to_taken_client_id_returns_409(api_client: AsyncClient):
    record_id = await _id_of(api_client, "TB-002")

    response = await api_client.put(
        f"/clients/{record_id}",
        json={"clientId": "TB-001", "name": "Sarah Johnson", "email": "s@j.io"},
    )

    assert response.status_code == 409
    assert response.json()["clientId"] == "TB-001"
    unchanged = (await api_client.get(f"/clients/{record_id}")).json()["client"]
    assert unchanged["clientId"] == "TB-002"
    assert unchanged["email"] == "sarah.johnson@email.com"


@pytest.mark.asyncio
async def test_update_invalid_email_returns_400(api_client: AsyncClient):
    record_id = await _id_of(api_client, "TB-002")
    response = await api_client.put(
        f"/clients/{record_id}", json={"name": "Sarah", "email": "broken"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid email format"


@pytest.mark.asyncio
async def test_update_unknown_id_returns_404(api_client: AsyncClient):
    response = await api_client.put(
        "/clients/9999", json={"name": "Ghost", "email": "ghost@example.com"}
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_by_client_id_can_rename_business_id(api_client: AsyncClient):
    response = await api_client.put(
        "/clients/clientId/TB-003",
        json={"clientId": "TB-030", "name": "Mike Wilson", "email": "mike@wilson.io"},
    )

    assert response.status_code == 200
    assert response.json()["client"]["clientId"] == "TB-030"
    assert (await api_client.get("/clients/clientId/TB-003")).status_code == 404
    assert (await api_client.get("/clients/clientId/TB-030")).status_code == 200


@pytest.mark.asyncio
async def test_update_by_unknown_client_id_returns_404(api_client: AsyncClient):
    response = await api_client.put(
        "/clients/clientId/NOPE", json={"name": "Ghost", "email": "ghost@example.com"}
    )
    assert response.status_code == 404


# ── Delete ──


@pytest.mark.asyncio
async def test_delete_by_id_twice(api_client: AsyncClient):
    record_id = await _id_of(api_client, "TB-001")

    first = await api_client.delete(f"/clients/{record_id}")
    assert first.status_code == 200
    body = first.json()
    assert body["success"] is True
    assert body["deletedClient"]["clientId"] == "TB-001"

    second = await api_client.delete(f"/clients/{record_id}")
    assert second.status_code == 404
    assert await _row_count(api_client) == 2


@pytest.mark.asyncio
async def test_delete_by_client_id(api_client: AsyncClient):
    response = await api_client.delete("/clients/clientId/TB-002")

    assert response.status_code == 200
    assert response.json()["deletedClient"]["name"] == "Sarah Johnson"
    assert (await api_client.delete("/clients/clientId/TB-002")).status_code == 404


# ── Timestamps ──


@pytest.mark.asyncio
async def test_create_and_read_return_identical_timestamps(api_client: AsyncClient):
    created = await api_client.post(
        "/clients",
        json={"clientId": "TB-300", "name": "Time Keeper", "email": "time@keeper.io"},
    )
    assert created.status_code == 201
    written = created.json()["client"]

    stored = (await api_client.get(f"/clients/{written['id']}")).json()["client"]

    assert stored["created_at"] == written["created_at"]
    assert stored["updated_at"] == written["updated_at"]
    assert _parse_timestamp(stored["created_at"]).utcoffset().total_seconds() == 0


@pytest.mark.asyncio
async def test_update_response_timestamps_are_utc(api_client: AsyncClient):
    record_id = await _id_of(api_client, "TB-002")

    response = await api_client.put(
        f"/clients/{record_id}",
        json={"name": "Sarah Johnson", "email": "sarah.johnson@email.com"},
    )

    client = response.json()["client"]
    created_at = _parse_timestamp(client["created_at"])
    updated_at = _parse_timestamp(client["updated_at"])
    assert created_at.tzinfo is not None
    assert updated_at > created_at

    stored = (await api_client.get(f"/clients/{record_id}")).json()["client"]
    assert stored["created_at"] == client["created_at"]


@pytest.mark.asyncio
async def test_update_blank_client_id_keeps_current(api_client: AsyncClient):
    record_id = await _id_of(api_client, "TB-003")

    response = await api_client.put(
        f"/clients/{record_id}",
        json={"clientId": "  ", "name": "Mike W", "email": "mike@wilson.io"},
    )

    assert response.status_code == 200
    assert response.json()["client"]["clientId"] == "TB-003"
    assert response.json()["client"]["name"] == "Mike W"
