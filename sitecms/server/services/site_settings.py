"""
Site settings service.

SiteInfo and SiteMeta are singleton rows created with defaults on first read.
Concurrent admin edits are last-write-wins: there is a single admin account
and edits are whole-form saves, so no version check is applied.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from sitecms.core.database.entities.site_settings import SiteInfo, SiteMeta
from sitecms.core.database.repositories.singleton import SingletonRepository
from sitecms.core.logging_config import get_logger
from sitecms.core.models.io.site_settings import (
    CompanyInfo,
    ContactInfo,
    MapConfig,
    MapLocation,
    SiteInfoUpdate,
    SiteMetaUpdate,
    SocialMedia,
)
from sitecms.server.core.config import settings
from sitecms.server.core.constant import (
    DEFAULT_MAP_AK,
    DEFAULT_MAP_LOCATION,
    DEFAULT_SITE_INFO,
    DEFAULT_SITE_META,
)

logger = get_logger(__name__)


class SiteSettingsService:
    """Access to the SiteInfo and SiteMeta singletons and the views derived from them."""

    def __init__(self, session: AsyncSession, baidu_map_ak: Optional[str] = None) -> None:
        self.info = SingletonRepository(session, SiteInfo, DEFAULT_SITE_INFO)
        self.meta = SingletonRepository(session, SiteMeta, DEFAULT_SITE_META)
        self.baidu_map_ak = baidu_map_ak if baidu_map_ak is not None else settings.baidu_map_ak

    async def get_info(self) -> SiteInfo:
        return await self.info.get_or_create()

    async def update_info(self, payload: SiteInfoUpdate) -> SiteInfo:
        """Write only the fields present in the request."""
        changes = payload.model_dump(exclude_unset=True)
        updated = await self.info.update(changes)
        logger.info(f"Site info updated: {sorted(changes)}")
        return updated

    async def get_meta(self) -> SiteMeta:
        return await self.meta.get_or_create()

    async def update_meta(self, payload: SiteMetaUpdate) -> SiteMeta:
        changes = payload.model_dump(exclude_unset=True)
        updated = await self.meta.update(changes)
        logger.info(f"Site meta updated: {sorted(changes)}")
        return updated

    async def get_contact(self) -> ContactInfo:
        return ContactInfo.model_validate(await self.get_info())

    async def get_social(self) -> SocialMedia:
        return SocialMedia.model_validate(await self.get_info())

    async def get_company(self) -> CompanyInfo:
        return CompanyInfo.model_validate(await self.get_info())

    async def get_map_config(self) -> MapConfig:
        """Map key from site settings, else BAIDU_MAP_AK, else a placeholder."""
        info = await self.get_info()
        ak = info.baidu_map_ak or self.baidu_map_ak or DEFAULT_MAP_AK
        return MapConfig(ak=ak, default_location=self._office_location(info))

    async def get_map_locations(self) -> List[MapLocation]:
        info = await self.get_info()
        if not info.office_address_name:
            return []
        return [self._office_location(info)]

    @staticmethod
    def _office_location(info: SiteInfo) -> MapLocation:
        return MapLocation(
            name=info.office_address_name or DEFAULT_MAP_LOCATION["name"],
            lng=info.office_address_lng if info.office_address_lng is not None else DEFAULT_MAP_LOCATION["lng"],
            lat=info.office_address_lat if info.office_address_lat is not None else DEFAULT_MAP_LOCATION["lat"],
            address=info.office_address_detail,
            phone=info.office_phone,
            email=info.office_email,
        )
