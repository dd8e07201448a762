"""
Unit tests for product and product category endpoints.

Tests cover:
- Public listing, filtering, featured selection and lookup
- Admin multipart create/update with image upload and replacement
- Category existence checks and cascading category delete
"""

from typing import Dict

import pytest
from httpx import AsyncClient

from sitecms.server.services.uploads import UploadCategory, UploadManager

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64

pytestmark = pytest.mark.asyncio


async def _create_product(client: AsyncClient, headers: Dict[str, str], category_id: str, **fields) -> dict:
    data = {"name": "Lifting magnet", "categoryId": category_id, **fields}
    response = await client.post("/api/admin/products", data=data, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreateProduct:
    """Test POST /api/admin/products."""

    async def test_create_with_image(self, client: AsyncClient, auth_headers, category_id, uploads: UploadManager):
        response = await client.post(
            "/api/admin/products",
            data={
                "name": "Lifting magnet",
                "categoryId": category_id,
                "model": "LM-200",
                "price": "1999.5",
                "featured": "true",
                "displayOrder": "2",
                "content": "# Specs",
            },
            files={"image": ("magnet.png", PNG_BYTES, "image/png")},
            headers=auth_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["code"] == 201
        product = body["data"]
        assert product["name"] == "Lifting magnet"
        assert product["categoryId"] == category_id
        assert product["category"]["name"] == "Motors"
        assert product["price"] == 1999.5
        assert product["featured"] is True
        assert product["displayOrder"] == 2
        assert product["image"].startswith("/uploads/products/products-")
        assert product["image"].endswith(".png")

        stored = uploads.directory_for(UploadCategory.PRODUCTS) / product["image"].rsplit("/", 1)[1]
        assert stored.read_bytes() == PNG_BYTES

    async def test_create_with_file_part(self, client: AsyncClient, auth_headers, category_id, uploads: UploadManager):
        response = await client.post(
            "/api/admin/products",
            data={"name": "Lifting magnet", "categoryId": category_id},
            files={"file": ("magnet.png", PNG_BYTES, "image/png")},
            headers=auth_headers,
        )

        assert response.status_code == 201
        image = response.json()["data"]["image"]
        assert image.startswith("/uploads/products/products-")
        stored = uploads.directory_for(UploadCategory.PRODUCTS) / image.rsplit("/", 1)[1]
        assert stored.read_bytes() == PNG_BYTES

    @pytest.mark.parametrize("price", ["inf", "-inf", "nan", "-1"])
    async def test_create_rejects_invalid_price(self, client: AsyncClient, auth_headers, category_id, price: str):
        response = await client.post(
            "/api/admin/products",
            data={"name": "Lifting magnet", "categoryId": category_id, "price": price},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Validation failed"
        assert (await client.get("/api/products")).json()["data"] == []

    async def test_create_blank_optional_fields_use_defaults(self, client: AsyncClient, auth_headers, category_id):
        product = await _create_product(client, auth_headers, category_id, price="", featured="", displayOrder="")
        assert product["price"] is None
        assert product["featured"] is False
        assert product["displayOrder"] == 0
        assert product["image"] is None

    async def test_create_requires_name_and_category(self, client: AsyncClient, auth_headers):
        response = await client.post("/api/admin/products", data={"model": "X"}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Validation failed"

    async def test_create_unknown_category(self, client: AsyncClient, auth_headers):
        response = await client.post(
            "/api/admin/products", data={"name": "Orphan", "categoryId": "missing"}, headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Category not found"

    async def test_create_rejects_non_image(
        self, client: AsyncClient, auth_headers, category_id, uploads: UploadManager
    ):
        response = await client.post(
            "/api/admin/products",
            data={"name": "Lifting magnet", "categoryId": category_id},
            files={"image": ("notes.txt", b"hello", "text/plain")},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert "image" in response.json()["message"].lower()
        assert list(uploads.directory_for(UploadCategory.PRODUCTS).iterdir()) == []

    async def test_create_requires_token(self, client: AsyncClient, category_id):
        response = await client.post("/api/admin/products", data={"name": "X", "categoryId": category_id})
        assert response.status_code == 401


class TestReadProducts:
    """Test the public product endpoints."""

    async def test_list_with_pagination(self, client: AsyncClient, auth_headers, category_id):
        for index in range(3):
            await _create_product(client, auth_headers, category_id, name=f"Product {index}")

        response = await client.get("/api/products", params={"page": 1, "pageSize": 2})

        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 2
        assert body["pagination"] == {"page": 1, "pageSize": 2, "total": 3, "totalPages": 2}

    async def test_list_empty(self, client: AsyncClient):
        response = await client.get("/api/products")
        assert response.json()["data"] == []
        assert response.json()["pagination"]["totalPages"] == 0

    async def test_list_filters_by_category(self, client: AsyncClient, auth_headers, category_id):
        other = await client.post("/api/admin/product-categories", json={"name": "Sensors"}, headers=auth_headers)
        other_id = other.json()["data"]["id"]
        await _create_product(client, auth_headers, category_id, name="Motor A")
        await _create_product(client, auth_headers, other_id, name="Sensor A")

        response = await client.get("/api/products", params={"categoryId": other_id})

        names = [p["name"] for p in response.json()["data"]]
        assert names == ["Sensor A"]

    async def test_page_size_is_capped(self, client: AsyncClient):
        response = await client.get("/api/products", params={"pageSize": 101})
        assert response.status_code == 400

    async def test_featured_in_display_order(self, client: AsyncClient, auth_headers, category_id):
        await _create_product(client, auth_headers, category_id, name="Second", featured="true", displayOrder="2")
        await _create_product(client, auth_headers, category_id, name="First", featured="true", displayOrder="1")
        await _create_product(client, auth_headers, category_id, name="Hidden", featured="false")

        response = await client.get("/api/products/featured")

        assert [p["name"] for p in response.json()["data"]] == ["First", "Second"]

    async def test_featured_limited_to_five(self, client: AsyncClient, auth_headers, category_id):
        for index in range(7):
            await _create_product(client, auth_headers, category_id, name=f"F{index}", featured="true")

        response = await client.get("/api/products/featured")

        assert len(response.json()["data"]) == 5

    async def test_get_by_id(self, client: AsyncClient, auth_headers, category_id):
        created = await _create_product(client, auth_headers, category_id)

        response = await client.get(f"/api/products/{created['id']}")

        assert response.status_code == 200
        assert response.json()["data"]["id"] == created["id"]
        assert response.json()["data"]["category"]["id"] == category_id

    async def test_get_missing(self, client: AsyncClient):
        response = await client.get("/api/products/missing")
        assert response.status_code == 404
        assert response.json() == {"code": 404, "message": "Product not found"}


class TestUpdateProduct:
    """Test PUT /api/admin/products/{id}."""

    async def test_partial_update_keeps_other_fields(self, client: AsyncClient, auth_headers, category_id):
        created = await _create_product(client, auth_headers, category_id, model="LM-1", price="10")

        response = await client.put(
            f"/api/admin/products/{created['id']}", data={"name": "Renamed", "price": ""}, headers=auth_headers
        )

        assert response.status_code == 200
        updated = response.json()["data"]
        assert updated["name"] == "Renamed"
        assert updated["model"] == "LM-1"
        assert updated["price"] == 10

    async def test_new_image_replaces_old_file(
        self, client: AsyncClient, auth_headers, category_id, uploads: UploadManager
    ):
        created = (
            await client.post(
                "/api/admin/products",
                data={"name": "Magnet", "categoryId": category_id},
                files={"image": ("a.png", PNG_BYTES, "image/png")},
                headers=auth_headers,
            )
        ).json()["data"]
        old_file = uploads.directory_for(UploadCategory.PRODUCTS) / created["image"].rsplit("/", 1)[1]
        assert old_file.exists()

        response = await client.put(
            f"/api/admin/products/{created['id']}",
            files={"image": ("b.png", PNG_BYTES + b"x", "image/png")},
            headers=auth_headers,
        )

        new_image = response.json()["data"]["image"]
        assert new_image != created["image"]
        assert not old_file.exists()
        assert (uploads.directory_for(UploadCategory.PRODUCTS) / new_image.rsplit("/", 1)[1]).exists()

    async def test_blank_text_clears_but_blank_price_keeps(self, client: AsyncClient, auth_headers, category_id):
        created = await _create_product(client, auth_headers, category_id, description="Old copy", price="10")

        response = await client.put(
            f"/api/admin/products/{created['id']}", data={"description": "", "price": ""}, headers=auth_headers
        )

        updated = response.json()["data"]
        assert updated["description"] == ""
        assert updated["price"] == 10

    async def test_file_part_replaces_old_image(
        self, client: AsyncClient, auth_headers, category_id, uploads: UploadManager
    ):
        created = (
            await client.post(
                "/api/admin/products",
                data={"name": "Magnet", "categoryId": category_id},
                files={"file": ("a.png", PNG_BYTES, "image/png")},
                headers=auth_headers,
            )
        ).json()["data"]

        response = await client.put(
            f"/api/admin/products/{created['id']}",
            files={"file": ("b.gif", b"GIF89a" + b"\x00" * 16, "image/gif")},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["data"]["image"].endswith(".gif")
        assert [p.suffix for p in uploads.directory_for(UploadCategory.PRODUCTS).iterdir()] == [".gif"]

    async def test_update_to_unknown_category(self, client: AsyncClient, auth_headers, category_id):
        created = await _create_product(client, auth_headers, category_id)
        response = await client.put(
            f"/api/admin/products/{created['id']}", data={"categoryId": "missing"}, headers=auth_headers
        )
        assert response.status_code == 400

    async def test_update_missing(self, client: AsyncClient, auth_headers):
        response = await client.put("/api/admin/products/missing", data={"name": "X"}, headers=auth_headers)
        assert response.status_code == 404


class TestDeleteProduct:
    """Test DELETE /api/admin/products/{id}."""

    async def test_delete_removes_row_and_image(
        self, client: AsyncClient, auth_headers, category_id, uploads: UploadManager
    ):
        created = (
            await client.post(
                "/api/admin/products",
                data={"name": "Magnet", "categoryId": category_id},
                files={"image": ("a.png", PNG_BYTES, "image/png")},
                headers=auth_headers,
            )
        ).json()["data"]

        response = await client.delete(f"/api/admin/products/{created['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert (await client.get(f"/api/products/{created['id']}")).status_code == 404
        assert list(uploads.directory_for(UploadCategory.PRODUCTS).iterdir()) == []

    async def test_delete_missing(self, client: AsyncClient, auth_headers):
        response = await client.delete("/api/admin/products/missing", headers=auth_headers)
        assert response.status_code == 404


class TestCategories:
    """Test product category endpoints."""

    async def test_list_categories(self, client: AsyncClient, category_id):
        response = await client.get("/api/product-categories")
        body = response.json()
        assert [c["name"] for c in body["data"]] == ["Motors"]
        assert body["pagination"]["pageSize"] == 100

    async def test_category_page_size_cap(self, client: AsyncClient):
        assert (await client.get("/api/product-categories", params={"pageSize": 500})).status_code == 200
        assert (await client.get("/api/product-categories", params={"pageSize": 501})).status_code == 400

    async def test_create_requires_name(self, client: AsyncClient, auth_headers):
        response = await client.post("/api/admin/product-categories", json={"name": ""}, headers=auth_headers)
        assert response.status_code == 400

    async def test_rename(self, client: AsyncClient, auth_headers, category_id):
        response = await client.put(
            f"/api/admin/product-categories/{category_id}", json={"name": "Drives"}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Drives"

    async def test_delete_cascades_to_products(self, client: AsyncClient, auth_headers, category_id):
        product = await _create_product(client, auth_headers, category_id)

        response = await client.delete(f"/api/admin/product-categories/{category_id}", headers=auth_headers)

        assert response.status_code == 200
        assert (await client.get(f"/api/products/{product['id']}")).status_code == 404
        assert (await client.get("/api/product-categories")).json()["data"] == []

    async def test_delete_missing(self, client: AsyncClient, auth_headers):
        response = await client.delete("/api/admin/product-categories/missing", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Category not found"

    async def test_admin_list_categories(self, client: AsyncClient, auth_headers, category_id):
        response = await client.get("/api/admin/product-categories", params={"pageSize": 5}, headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert [c["id"] for c in body["data"]] == [category_id]
        assert body["pagination"] == {"page": 1, "pageSize": 5, "total": 1, "totalPages": 1}

    async def test_admin_get_category(self, client: AsyncClient, auth_headers, category_id):
        response = await client.get(f"/api/admin/product-categories/{category_id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Motors"

    async def test_admin_get_missing_category(self, client: AsyncClient, auth_headers):
        response = await client.get("/api/admin/product-categories/missing", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Category not found"

    @pytest.mark.parametrize("path", ["/api/admin/product-categories", "/api/admin/product-categories/any"])
    async def test_admin_category_reads_require_token(self, client: AsyncClient, path: str):
        response = await client.get(path)
        assert response.status_code == 401
        assert response.json()["message"] == "No token provided"
