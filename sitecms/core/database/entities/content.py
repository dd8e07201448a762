"""
Editorial content entities: cases, news, documents and contact messages.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from sqlalchemy import Text
from sqlmodel import Field

from ..base import TimestampedEntity


class MessageStatus(str, Enum):
    """Processing state of a contact-form message."""

    UNREAD = "unread"
    READ = "read"
    REPLIED = "replied"


class Case(TimestampedEntity, table=True):
    """Customer case study.

    Table: cases
    """

    __tablename__ = "cases"
    __table_args__ = ({"extend_existing": True},)

    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, sa_type=Text)
    content: Optional[str] = Field(default=None, sa_type=Text, description="Markdown body")
    image: Optional[str] = Field(default=None, max_length=512)
    company: Optional[str] = Field(default=None, max_length=255)
    location: Optional[str] = Field(default=None, max_length=255)
    industry: Optional[str] = Field(default=None, max_length=255)
    featured: bool = Field(default=False)
    display_order: int = Field(default=0)


class News(TimestampedEntity, table=True):
    """News article.

    Table: news
    """

    __tablename__ = "news"
    __table_args__ = ({"extend_existing": True},)

    title: str = Field(max_length=255)
    content: Optional[str] = Field(default=None, sa_type=Text, description="Markdown body")
    excerpt: Optional[str] = Field(default=None, sa_type=Text)
    category: Optional[str] = Field(default=None, max_length=128)
    author: Optional[str] = Field(default=None, max_length=128)
    date: Optional[str] = Field(default=None, max_length=32, description="Display date as entered by the editor")
    image: Optional[str] = Field(default=None, max_length=512)
    featured: bool = Field(default=False)
    display_order: int = Field(default=0)


class Document(TimestampedEntity, table=True):
    """Downloadable document.

    Table: documents
    """

    __tablename__ = "documents"
    __table_args__ = ({"extend_existing": True},)

    title: str = Field(max_length=255)
    # Kept for schema compatibility; always stored as an empty string
    content: str = Field(default="", sa_type=Text)
    file: str = Field(max_length=512, description="Uploaded file URL")


class Message(TimestampedEntity, table=True):
    """Contact-form submission.

    Table: messages
    """

    __tablename__ = "messages"
    __table_args__ = ({"extend_existing": True},)

    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=64)
    message: str = Field(sa_type=Text)
    status: str = Field(default=MessageStatus.UNREAD.value, max_length=16, index=True)
