"""
Upload I/O models.
"""

from __future__ import annotations

from pydantic import Field

from .common import CamelModel


class StoredFileRead(CamelModel):
    """A file written by the upload manager."""

    path: str = Field(description="Public URL, e.g. /uploads/products/products-1700000000000-42.png")
    filename: str
    size: int = Field(description="Size in bytes")
