"""
Gallery record repository.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.gallery import Gallery
from .base import AsyncSqlRepository


class GalleryRepository(AsyncSqlRepository[Gallery]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Gallery)
