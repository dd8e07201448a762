"""
I/O models for cases, news, documents and contact messages.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from sitecms.core.database.entities.content import MessageStatus

from .common import CamelModel, blank_to_none


class _CuratedCreate(CamelModel):
    featured: bool = False
    display_order: int = 0

    @field_validator("featured", "display_order", mode="before")
    @classmethod
    def _blank_to_default(cls, value, info):
        if blank_to_none(value) is None:
            return cls.model_fields[info.field_name].default
        return value


class _CuratedUpdate(CamelModel):
    featured: Optional[bool] = None
    display_order: Optional[int] = None

    @field_validator("featured", "display_order", mode="before")
    @classmethod
    def _blank(cls, value):
        return blank_to_none(value)


# =====================================================================
# Cases
# =====================================================================


class CaseRead(CamelModel):
    """Schema for reading a case study."""

    id: str
    title: str
    description: Optional[str] = None
    content: Optional[str] = None
    image: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    industry: Optional[str] = None
    featured: bool
    display_order: int
    created_at: datetime
    updated_at: datetime


class CaseCreate(_CuratedCreate):
    """Schema for creating a case study (admin multipart form)."""

    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    content: Optional[str] = None
    company: Optional[str] = Field(default=None, max_length=255)
    location: Optional[str] = Field(default=None, max_length=255)
    industry: Optional[str] = Field(default=None, max_length=255)


class CaseUpdate(_CuratedUpdate):
    """Schema for updating a case study; omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    content: Optional[str] = None
    company: Optional[str] = Field(default=None, max_length=255)
    location: Optional[str] = Field(default=None, max_length=255)
    industry: Optional[str] = Field(default=None, max_length=255)


# =====================================================================
# News
# =====================================================================


class NewsRead(CamelModel):
    """Schema for reading a news article."""

    id: str
    title: str
    content: Optional[str] = None
    excerpt: Optional[str] = None
    category: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None
    image: Optional[str] = None
    featured: bool
    display_order: int
    created_at: datetime
    updated_at: datetime


class NewsCreate(_CuratedCreate):
    """Schema for creating a news article (admin multipart form)."""

    title: str = Field(min_length=1, max_length=255)
    content: Optional[str] = None
    excerpt: Optional[str] = None
    category: Optional[str] = Field(default=None, max_length=128)
    author: Optional[str] = Field(default=None, max_length=128)
    date: Optional[str] = Field(default=None, max_length=32)


class NewsUpdate(_CuratedUpdate):
    """Schema for updating a news article; omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: Optional[str] = None
    excerpt: Optional[str] = None
    category: Optional[str] = Field(default=None, max_length=128)
    author: Optional[str] = Field(default=None, max_length=128)
    date: Optional[str] = Field(default=None, max_length=32)


# =====================================================================
# Documents
# =====================================================================


class DocumentRead(CamelModel):
    """Schema for reading a downloadable document."""

    id: str
    title: str
    file: str = Field(description="File URL under /uploads/documents")
    created_at: datetime
    updated_at: datetime


class DocumentCreate(CamelModel):
    """Schema for creating a document; the file itself is uploaded in the same form."""

    title: str = Field(min_length=1, max_length=255)


class DocumentUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)


# =====================================================================
# Messages
# =====================================================================


class MessageRead(CamelModel):
    """Schema for reading a contact message."""

    id: str
    name: str
    email: str
    phone: Optional[str] = None
    message: str
    status: MessageStatus
    created_at: datetime
    updated_at: datetime


class MessageCreate(CamelModel):
    """Public contact-form submission."""

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    phone: Optional[str] = Field(default=None, max_length=64)
    message: str = Field(min_length=1)


class MessageStatusUpdate(CamelModel):
    """Admin status change for a message."""

    status: MessageStatus
