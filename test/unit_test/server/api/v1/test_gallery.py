"""
Unit tests for gallery records and the gallery file browser.
"""

import pytest
from httpx import AsyncClient

from sitecms.server.services.uploads import UploadCategory, UploadManager

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16

pytestmark = pytest.mark.asyncio


class TestGalleryRecords:
    """Test gallery record CRUD and the public listing."""

    async def test_public_default_page_size(self, client: AsyncClient, auth_headers):
        for i in range(13):
            await client.post(
                "/api/admin/gallery", json={"title": f"Shot {i}", "image": f"/uploads/gallery/{i}.png"}, headers=auth_headers
            )

        response = await client.get("/api/gallery")

        body = response.json()
        assert len(body["data"]) == 12
        assert body["pagination"] == {"page": 1, "pageSize": 12, "total": 13, "totalPages": 2}

    async def test_create_requires_image(self, client: AsyncClient, auth_headers):
        response = await client.post("/api/admin/gallery", json={"title": "No image"}, headers=auth_headers)
        assert response.status_code == 400

    async def test_update_and_delete(self, client: AsyncClient, auth_headers):
        created = (
            await client.post(
                "/api/admin/gallery", json={"title": "Plant", "image": "/uploads/gallery/a.png"}, headers=auth_headers
            )
        ).json()["data"]

        updated = await client.put(f"/api/admin/gallery/{created['id']}", json={"title": "Plant floor"}, headers=auth_headers)
        assert updated.json()["data"]["title"] == "Plant floor"
        assert updated.json()["data"]["image"] == "/uploads/gallery/a.png"

        fetched = await client.get(f"/api/admin/gallery/{created['id']}", headers=auth_headers)
        assert fetched.json()["data"]["title"] == "Plant floor"

        deleted = await client.delete(f"/api/admin/gallery/{created['id']}", headers=auth_headers)
        assert deleted.json()["message"] == "Gallery item deleted successfully"
        missing = await client.get(f"/api/admin/gallery/{created['id']}", headers=auth_headers)
        assert missing.status_code == 404


class TestGalleryFiles:
    """Test upload, listing and deletion of files under /uploads/gallery."""

    async def test_upload_list_delete(self, client: AsyncClient, auth_headers, uploads: UploadManager):
        uploaded = await client.post(
            "/api/admin/gallery/upload", files={"image": ("shot.png", PNG_BYTES, "image/png")}, headers=auth_headers
        )
        assert uploaded.status_code == 201
        stored = uploaded.json()["data"]
        assert stored["path"] == f"/uploads/gallery/{stored['filename']}"
        assert stored["size"] == len(PNG_BYTES)

        listing = await client.get("/api/admin/gallery/files", headers=auth_headers)
        files = listing.json()["data"]
        assert files["total"] == 1
        assert files["files"][0]["filename"] == stored["filename"]
        assert files["offset"] == 0
        assert files["limit"] == 50

        deleted = await client.delete(f"/api/admin/gallery/files/{stored['filename']}", headers=auth_headers)
        assert deleted.status_code == 200
        assert list(uploads.directory_for(UploadCategory.GALLERY).iterdir()) == []

    async def test_delete_missing_file(self, client: AsyncClient, auth_headers):
        response = await client.delete("/api/admin/gallery/files/missing.png", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Image not found"

    async def test_rejects_non_image(self, client: AsyncClient, auth_headers):
        response = await client.post(
            "/api/admin/gallery/upload", files={"image": ("notes.txt", b"hello", "text/plain")}, headers=auth_headers
        )
        assert response.status_code == 400

    async def test_size_limit(self, client: AsyncClient, auth_headers, uploads: UploadManager):
        oversized = b"\x00" * (10 * 1024 * 1024 + 1)
        response = await client.post(
            "/api/admin/gallery/upload", files={"image": ("big.png", oversized, "image/png")}, headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["message"] == "File too large (max 10MB)"
        assert list(uploads.directory_for(UploadCategory.GALLERY).iterdir()) == []

    async def test_requires_token(self, client: AsyncClient):
        assert (await client.get("/api/admin/gallery/files")).status_code == 401
