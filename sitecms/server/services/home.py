"""
Homepage services: hero slides and the singleton about blocks.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from sitecms.core.database.entities.home import HeroSlide, HomeAbout, PageAbout
from sitecms.core.database.repositories.home import HeroSlideRepository
from sitecms.core.database.repositories.singleton import SingletonRepository
from sitecms.core.logging_config import get_logger
from sitecms.core.models.io.home import HomeAboutUpdate
from sitecms.server.core.constant import DEFAULT_HOME_ABOUT

from .base import EntityService
from .uploads import UploadCategory, UploadManager

logger = get_logger(__name__)


class HeroSlideService(EntityService[HeroSlide]):
    label = "Hero slide"
    file_field = "image"
    upload_category = UploadCategory.HERO

    def __init__(self, repository: HeroSlideRepository, uploads: UploadManager) -> None:
        super().__init__(repository, uploads)

    async def list_slides(self, active_only: bool = False) -> List[HeroSlide]:
        """All slides in carousel order."""
        return await self.repository.list(filters={"active": True} if active_only else None)


class PageContentService:
    """Read and edit the homepage 'about' block and the about page."""

    def __init__(self, session: AsyncSession, uploads: UploadManager) -> None:
        self.home_about = SingletonRepository(session, HomeAbout, DEFAULT_HOME_ABOUT)
        self.page_about = SingletonRepository(session, PageAbout, {"content": ""})
        self.uploads = uploads

    async def get_home_about(self) -> HomeAbout:
        return await self.home_about.get_or_create()

    async def update_home_about(self, payload: HomeAboutUpdate, upload: Optional[UploadFile] = None) -> HomeAbout:
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        previous = await self.home_about.get_or_create()
        previous_image = previous.image
        if upload is not None and upload.filename:
            stored = await self.uploads.save(UploadCategory.HERO, upload)
            changes["image"] = stored.url
        updated = await self.home_about.update(changes)
        if "image" in changes and previous_image and previous_image != updated.image:
            await self.uploads.delete_url(previous_image)
        logger.info("Home about block updated")
        return updated

    async def get_page_about(self) -> PageAbout:
        return await self.page_about.get_or_create()

    async def update_page_about(self, content: str) -> PageAbout:
        updated = await self.page_about.update({"content": content})
        logger.info("About page updated")
        return updated
