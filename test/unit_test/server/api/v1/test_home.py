"""
Unit tests for hero slides and the homepage about block.
"""

import pytest
from httpx import AsyncClient

from sitecms.server.services.uploads import UploadCategory, UploadManager

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16

pytestmark = pytest.mark.asyncio


async def _create_slide(client: AsyncClient, headers, **fields) -> dict:
    data = {"title": "Magnets", "subtitle": "Lifting solutions", "link": "/products", **fields}
    response = await client.post("/api/home/hero-slides", data=data, headers=headers)
    assert response.status_code == 201
    return response.json()["data"]


class TestHeroSlides:
    """Test /api/home/hero-slides in both the path and the query id form."""

    async def test_list_in_carousel_order(self, client: AsyncClient, auth_headers):
        await _create_slide(client, auth_headers, title="Second", order="2")
        await _create_slide(client, auth_headers, title="First", order="1")

        response = await client.get("/api/home/hero-slides")

        assert [s["title"] for s in response.json()["data"]] == ["First", "Second"]

    async def test_active_filter(self, client: AsyncClient, auth_headers):
        await _create_slide(client, auth_headers, title="Live")
        await _create_slide(client, auth_headers, title="Hidden", active="false")

        everything = await client.get("/api/home/hero-slides")
        active = await client.get("/api/home/hero-slides", params={"active": "true"})

        assert len(everything.json()["data"]) == 2
        assert [s["title"] for s in active.json()["data"]] == ["Live"]

    async def test_get_by_query_and_path(self, client: AsyncClient, auth_headers):
        slide = await _create_slide(client, auth_headers)

        by_query = await client.get("/api/home/hero-slides", params={"id": slide["id"]})
        by_path = await client.get(f"/api/home/hero-slides/{slide['id']}")

        assert by_query.json()["data"]["id"] == slide["id"]
        assert by_path.json()["data"] == by_query.json()["data"]

    async def test_create_missing_fields(self, client: AsyncClient, auth_headers):
        response = await client.post("/api/home/hero-slides", data={"title": "Only title"}, headers=auth_headers)
        assert response.status_code == 400

    async def test_update_by_query(self, client: AsyncClient, auth_headers, uploads: UploadManager):
        slide = await _create_slide(client, auth_headers)

        response = await client.put(
            "/api/home/hero-slides",
            params={"id": slide["id"]},
            data={"subtitle": "New subtitle"},
            files={"image": ("hero.png", PNG_BYTES, "image/png")},
            headers=auth_headers,
        )

        updated = response.json()["data"]
        assert updated["subtitle"] == "New subtitle"
        assert updated["title"] == "Magnets"
        assert updated["image"].startswith("/uploads/hero/hero-")
        assert len(list(uploads.directory_for(UploadCategory.HERO).iterdir())) == 1

    async def test_update_without_id(self, client: AsyncClient, auth_headers):
        response = await client.put("/api/home/hero-slides", data={"title": "x"}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Slide id is required"

    async def test_delete_by_path_and_query(self, client: AsyncClient, auth_headers):
        first = await _create_slide(client, auth_headers)
        second = await _create_slide(client, auth_headers)

        assert (await client.delete(f"/api/home/hero-slides/{first['id']}", headers=auth_headers)).status_code == 200
        by_query = await client.delete("/api/home/hero-slides", params={"id": second["id"]}, headers=auth_headers)
        assert by_query.status_code == 200
        assert (await client.get("/api/home/hero-slides")).json()["data"] == []

    async def test_delete_without_id(self, client: AsyncClient, auth_headers):
        response = await client.delete("/api/home/hero-slides", headers=auth_headers)
        assert response.status_code == 400

    async def test_writes_require_token(self, client: AsyncClient):
        response = await client.post("/api/home/hero-slides", data={"title": "t", "subtitle": "s", "link": "/"})
        assert response.status_code == 401


class TestHomeAbout:
    """Test /api/home/about."""

    async def test_defaults_on_first_read(self, client: AsyncClient):
        response = await client.get("/api/home/about")
        data = response.json()["data"]
        assert data["title"] == "About Us"
        assert data["image"] is None

    async def test_update_replaces_image(self, client: AsyncClient, auth_headers, uploads: UploadManager):
        for name in ("one.png", "two.png"):
            response = await client.put(
                "/api/home/about",
                data={"content": f"uploaded {name}"},
                files={"image": (name, PNG_BYTES, "image/png")},
                headers=auth_headers,
            )
            assert response.json()["message"] == "About section updated successfully"

        data = response.json()["data"]
        assert data["content"] == "uploaded two.png"
        assert data["title"] == "About Us"
        files = [p.name for p in uploads.directory_for(UploadCategory.HERO).iterdir()]
        assert files == [data["image"].rsplit("/", 1)[1]]
