"""
Homepage I/O models: hero slides, the home 'about' block and the about page.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .common import CamelModel, blank_to_none


class HeroSlideRead(CamelModel):
    """Schema for reading a hero slide."""

    id: str
    title: str
    subtitle: str
    image: Optional[str] = None
    link: str
    order: int
    active: bool
    created_at: datetime
    updated_at: datetime


class HeroSlideCreate(CamelModel):
    """Schema for creating a hero slide (admin multipart form)."""

    title: str = Field(min_length=1, max_length=255)
    subtitle: str = Field(min_length=1, max_length=512)
    link: str = Field(min_length=1, max_length=512)
    order: int = 0
    active: bool = True

    @field_validator("order", "active", mode="before")
    @classmethod
    def _blank_to_default(cls, value, info):
        if blank_to_none(value) is None:
            return cls.model_fields[info.field_name].default
        return value


class HeroSlideUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    subtitle: Optional[str] = Field(default=None, min_length=1, max_length=512)
    link: Optional[str] = Field(default=None, min_length=1, max_length=512)
    order: Optional[int] = None
    active: Optional[bool] = None

    @field_validator("order", "active", mode="before")
    @classmethod
    def _blank(cls, value):
        return blank_to_none(value)


class HomeAboutRead(CamelModel):
    title: str
    content: str
    image: Optional[str] = None
    updated_at: datetime


class HomeAboutUpdate(CamelModel):
    title: Optional[str] = Field(default=None, max_length=255)
    content: Optional[str] = None


class PageAboutRead(CamelModel):
    content: str = Field(description="Markdown body of the about page")
    updated_at: datetime


class PageAboutUpdate(CamelModel):
    content: str
