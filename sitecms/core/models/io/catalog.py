"""
Product catalog I/O models for API requests and responses.

Product writes arrive as multipart forms (the image is uploaded alongside the
fields), so the write schemas treat blank numeric and boolean form values as
"not provided".
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .common import CamelModel, blank_to_none


class CategoryRead(CamelModel):
    """Schema for reading a product category."""

    id: str
    name: str
    created_at: datetime
    updated_at: datetime


class CategoryCreate(CamelModel):
    """Schema for creating a product category."""

    name: str = Field(min_length=1, max_length=255, description="Category display name")


class CategoryUpdate(CategoryCreate):
    """Schema for renaming a product category."""


class ProductRead(CamelModel):
    """Schema for reading a product, including its category."""

    id: str
    name: str
    model: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = Field(default=None, description="Markdown body")
    category_id: str
    category: Optional[CategoryRead] = None
    price: Optional[float] = None
    image: Optional[str] = Field(default=None, description="Image URL under /uploads/products")
    featured: bool
    display_order: int
    created_at: datetime
    updated_at: datetime


class ProductCreate(CamelModel):
    """Schema for creating a product (admin multipart form)."""

    name: str = Field(min_length=1, max_length=255, description="Product name")
    category_id: str = Field(min_length=1, description="Owning category id")
    model: Optional[str] = Field(default=None, max_length=255, description="Model number")
    description: Optional[str] = None
    content: Optional[str] = Field(default=None, description="Markdown body")
    price: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    featured: bool = False
    display_order: int = 0

    @field_validator("price", mode="before")
    @classmethod
    def _blank_price(cls, value):
        return blank_to_none(value)

    @field_validator("featured", "display_order", mode="before")
    @classmethod
    def _blank_to_default(cls, value, info):
        if blank_to_none(value) is None:
            return cls.model_fields[info.field_name].default
        return value


class ProductUpdate(CamelModel):
    """Schema for updating a product; omitted or blank fields are left unchanged."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    category_id: Optional[str] = Field(default=None, min_length=1)
    model: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    content: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    featured: Optional[bool] = None
    display_order: Optional[int] = None

    @field_validator("price", "featured", "display_order", mode="before")
    @classmethod
    def _blank(cls, value):
        return blank_to_none(value)
