"""
Homepage and static page entities.

``HomeAbout`` and ``PageAbout`` are singleton tables: exactly one row with the
fixed id ``singleton``, created on first read.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Text
from sqlmodel import Field

from ..base import TimestampedEntity


class HeroSlide(TimestampedEntity, table=True):
    """Homepage carousel slide.

    Table: hero_slides
    """

    __tablename__ = "hero_slides"
    __table_args__ = ({"extend_existing": True},)

    title: str = Field(max_length=255)
    subtitle: str = Field(max_length=512)
    image: Optional[str] = Field(default=None, max_length=512)
    link: str = Field(max_length=512)
    order: int = Field(default=0, description="Carousel position (ascending)")
    active: bool = Field(default=True)


class HomeAbout(TimestampedEntity, table=True):
    """'About us' teaser block on the homepage.

    Table: home_about
    """

    __tablename__ = "home_about"
    __table_args__ = ({"extend_existing": True},)

    title: str = Field(default="", max_length=255)
    content: str = Field(default="", sa_type=Text)
    image: Optional[str] = Field(default=None, max_length=512)


class PageAbout(TimestampedEntity, table=True):
    """Markdown body of the standalone about page.

    Table: page_about
    """

    __tablename__ = "page_about"
    __table_args__ = ({"extend_existing": True},)

    content: str = Field(default="", sa_type=Text)
