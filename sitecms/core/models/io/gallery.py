"""
Gallery I/O models: titled gallery records and the raw file browser.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel


class GalleryRead(CamelModel):
    """Schema for reading a gallery record."""

    id: str
    title: str
    image: str
    created_at: datetime
    updated_at: datetime


class GalleryCreate(CamelModel):
    """Schema for creating a gallery record from an already uploaded image."""

    title: str = Field(min_length=1, max_length=255)
    image: str = Field(min_length=1, max_length=512, description="Image URL returned by the upload endpoint")


class GalleryUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    image: Optional[str] = Field(default=None, min_length=1, max_length=512)


class GalleryFileRead(CamelModel):
    """A stored file in the gallery upload directory."""

    filename: str
    url: str
    size: int
    uploaded_at: datetime


class GalleryFileList(CamelModel):
    """Offset-paginated listing of gallery files, newest first."""

    files: List[GalleryFileRead]
    total: int
    offset: int
    limit: int
