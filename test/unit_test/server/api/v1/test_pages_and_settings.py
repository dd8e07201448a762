"""
Unit tests for the about page, site settings and map endpoints.
"""

import pytest
from httpx import AsyncClient

from sitecms.server.core.config import settings
from sitecms.server.core.constant import DEFAULT_MAP_AK, DEFAULT_MAP_LOCATION

pytestmark = pytest.mark.asyncio


class TestAboutPage:
    """Test /api/page/about and its admin counterpart."""

    async def test_empty_by_default(self, client: AsyncClient):
        response = await client.get("/api/page/about")
        assert response.json()["data"]["content"] == ""

    async def test_admin_update(self, client: AsyncClient, auth_headers):
        response = await client.put("/api/admin/page/about", json={"content": "# Our story"}, headers=auth_headers)
        assert response.json()["message"] == "About page updated successfully"

        public = await client.get("/api/page/about")
        admin = await client.get("/api/admin/page/about", headers=auth_headers)
        assert public.json()["data"]["content"] == "# Our story"
        assert admin.json()["data"]["content"] == "# Our story"

    async def test_update_requires_token(self, client: AsyncClient):
        assert (await client.put("/api/admin/page/about", json={"content": "x"})).status_code == 401


class TestSiteSettings:
    """Test /api/settings."""

    async def test_info_defaults(self, client: AsyncClient):
        data = (await client.get("/api/settings/info")).json()["data"]
        assert data["id"] == "singleton"
        assert data["theme"] == "light"
        assert data["language"] == "zh-CN"
        assert data["companyName"] == "唐山迈尼特电气有限公司"

    async def test_derived_views(self, client: AsyncClient):
        contact = (await client.get("/api/settings/contact")).json()["data"]
        social = (await client.get("/api/settings/social")).json()["data"]
        company = (await client.get("/api/settings/company")).json()["data"]

        assert set(contact) == {"phone", "whatsapp", "email", "address"}
        assert set(social) == {"facebook", "instagram", "twitter", "youtube", "tiktok", "linkedin"}
        assert company["companyName"] == "唐山迈尼特电气有限公司"

    async def test_partial_info_update(self, client: AsyncClient, auth_headers):
        response = await client.put(
            "/api/settings/admin/info", json={"facebook": "https://fb.example/acme"}, headers=auth_headers
        )

        data = response.json()["data"]
        assert data["facebook"] == "https://fb.example/acme"
        assert data["phone"] == "139-3150-1373"
        social = (await client.get("/api/settings/social")).json()["data"]
        assert social["facebook"] == "https://fb.example/acme"

    async def test_meta_update(self, client: AsyncClient, auth_headers):
        response = await client.put("/api/settings/admin/meta", json={"ogImage": "/uploads/hero/og.png"}, headers=auth_headers)
        assert response.json()["data"]["ogImage"] == "/uploads/hero/og.png"

        meta = (await client.get("/api/settings/meta")).json()["data"]
        assert meta["ogImage"] == "/uploads/hero/og.png"
        assert meta["keywords"] == "磁电,电气,解决方案"

    async def test_admin_routes_require_token(self, client: AsyncClient):
        assert (await client.get("/api/settings/admin/info")).status_code == 401
        assert (await client.put("/api/settings/admin/meta", json={})).status_code == 401


class TestMap:
    """Test /api/map."""

    async def test_placeholder_key(self, client: AsyncClient, monkeypatch):
        monkeypatch.setattr(settings, "baidu_map_ak", None)
        data = (await client.get("/api/map/config")).json()["data"]
        assert data["ak"] == DEFAULT_MAP_AK
        assert data["defaultLocation"]["name"] == DEFAULT_MAP_LOCATION["name"]
        assert data["defaultLocation"]["lng"] == DEFAULT_MAP_LOCATION["lng"]

    async def test_environment_key(self, client: AsyncClient, monkeypatch):
        monkeypatch.setattr(settings, "baidu_map_ak", "env-key")
        data = (await client.get("/api/map/config")).json()["data"]
        assert data["ak"] == "env-key"

    async def test_site_settings_key_wins(self, client: AsyncClient, auth_headers, monkeypatch):
        monkeypatch.setattr(settings, "baidu_map_ak", "env-key")
        await client.put("/api/settings/admin/info", json={"baiduMapAk": "site-key"}, headers=auth_headers)
        data = (await client.get("/api/map/config")).json()["data"]
        assert data["ak"] == "site-key"

    async def test_locations(self, client: AsyncClient, auth_headers):
        assert (await client.get("/api/map/locations")).json()["data"] == []

        await client.put(
            "/api/settings/admin/info",
            json={"officeAddressName": "HQ", "officeAddressLng": 118.18, "officeAddressLat": 39.63},
            headers=auth_headers,
        )

        locations = (await client.get("/api/map/locations")).json()["data"]
        assert len(locations) == 1
        assert locations[0]["name"] == "HQ"
        assert locations[0]["lat"] == 39.63
