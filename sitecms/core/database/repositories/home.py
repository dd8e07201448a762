"""
Hero slide repository.
"""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.home import HeroSlide
from .base import AsyncSqlRepository


class HeroSlideRepository(AsyncSqlRepository[HeroSlide]):
    """Slides are listed in carousel order rather than by creation time."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, HeroSlide)

    def default_ordering(self) -> Sequence[Any]:
        return (HeroSlide.order.asc(), HeroSlide.created_at.asc())
