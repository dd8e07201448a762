"""
Unit tests for contact message endpoints.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

MESSAGE = {"name": "Li Wei", "email": "li.wei@example.com", "phone": "13800000000", "message": "Need a quote"}


class TestSubmitMessage:
    """Test POST /api/messages."""

    async def test_submit_starts_unread(self, client: AsyncClient):
        response = await client.post("/api/messages", json=MESSAGE)
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["status"] == "unread"
        assert data["email"] == "li.wei@example.com"

    async def test_phone_optional(self, client: AsyncClient):
        payload = {k: v for k, v in MESSAGE.items() if k != "phone"}
        response = await client.post("/api/messages", json=payload)
        assert response.status_code == 201
        assert response.json()["data"]["phone"] is None

    async def test_invalid_email(self, client: AsyncClient):
        response = await client.post("/api/messages", json={**MESSAGE, "email": "not-an-email"})
        assert response.status_code == 400
        assert response.json()["message"] == "Validation failed"

    async def test_missing_message(self, client: AsyncClient):
        payload = {k: v for k, v in MESSAGE.items() if k != "message"}
        assert (await client.post("/api/messages", json=payload)).status_code == 400


class TestAdminMessages:
    """Test the admin inbox."""

    async def test_list_and_filter_by_status(self, client: AsyncClient, auth_headers):
        first = (await client.post("/api/messages", json=MESSAGE)).json()["data"]
        await client.post("/api/messages", json={**MESSAGE, "name": "Zhang San"})

        await client.put(f"/api/admin/messages/{first['id']}", json={"status": "read"}, headers=auth_headers)

        everything = await client.get("/api/admin/messages", headers=auth_headers)
        unread = await client.get("/api/admin/messages", params={"status": "unread"}, headers=auth_headers)
        read = await client.get("/api/admin/messages", params={"status": "read"}, headers=auth_headers)

        assert everything.json()["pagination"]["total"] == 2
        assert [m["name"] for m in unread.json()["data"]] == ["Zhang San"]
        assert [m["id"] for m in read.json()["data"]] == [first["id"]]

    async def test_invalid_status(self, client: AsyncClient, auth_headers):
        created = (await client.post("/api/messages", json=MESSAGE)).json()["data"]
        response = await client.put(
            f"/api/admin/messages/{created['id']}", json={"status": "archived"}, headers=auth_headers
        )
        assert response.status_code == 400

    async def test_mark_replied(self, client: AsyncClient, auth_headers):
        created = (await client.post("/api/messages", json=MESSAGE)).json()["data"]
        response = await client.put(
            f"/api/admin/messages/{created['id']}", json={"status": "replied"}, headers=auth_headers
        )
        assert response.json()["data"]["status"] == "replied"

    async def test_update_status_on_short_path(self, client: AsyncClient, auth_headers):
        created = (await client.post("/api/messages", json=MESSAGE)).json()["data"]

        response = await client.put(f"/api/messages/{created['id']}", json={"status": "read"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "read"

    async def test_short_path_requires_token(self, client: AsyncClient):
        created = (await client.post("/api/messages", json=MESSAGE)).json()["data"]
        response = await client.put(f"/api/messages/{created['id']}", json={"status": "read"})
        assert response.status_code == 401

    async def test_delete(self, client: AsyncClient, auth_headers):
        created = (await client.post("/api/messages", json=MESSAGE)).json()["data"]
        assert (await client.delete(f"/api/admin/messages/{created['id']}", headers=auth_headers)).status_code == 200
        missing = await client.delete(f"/api/admin/messages/{created['id']}", headers=auth_headers)
        assert missing.status_code == 404

    async def test_inbox_requires_token(self, client: AsyncClient):
        assert (await client.get("/api/admin/messages")).status_code == 401
