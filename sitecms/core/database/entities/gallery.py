"""
Gallery entity.
"""

from __future__ import annotations

from sqlmodel import Field

from ..base import TimestampedEntity


class Gallery(TimestampedEntity, table=True):
    """Titled gallery image. ``image`` points at a file under /uploads/gallery.

    Table: gallery
    """

    __tablename__ = "gallery"
    __table_args__ = ({"extend_existing": True},)

    title: str = Field(max_length=255)
    image: str = Field(max_length=512)
