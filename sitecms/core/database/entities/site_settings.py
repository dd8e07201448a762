"""
Site-wide settings entities.

Both tables are singletons: the service layer reads or creates the row with
id ``singleton``; no other rows are ever written.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Text
from sqlmodel import Field

from ..base import TimestampedEntity


class SiteInfo(TimestampedEntity, table=True):
    """Contact details, social links, compliance IDs and map settings.

    Table: site_info
    """

    __tablename__ = "site_info"
    __table_args__ = ({"extend_existing": True},)

    # Contact
    phone: Optional[str] = Field(default=None, max_length=64)
    whatsapp: Optional[str] = Field(default=None, max_length=64)
    email: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = Field(default=None, max_length=512)

    # Company
    company_name: Optional[str] = Field(default=None, max_length=255)
    company_description: Optional[str] = Field(default=None, sa_type=Text)
    company_logo: Optional[str] = Field(default=None, max_length=512)

    # Social media
    facebook: Optional[str] = Field(default=None, max_length=512)
    instagram: Optional[str] = Field(default=None, max_length=512)
    twitter: Optional[str] = Field(default=None, max_length=512)
    youtube: Optional[str] = Field(default=None, max_length=512)
    tiktok: Optional[str] = Field(default=None, max_length=512)
    linkedin: Optional[str] = Field(default=None, max_length=512)

    # Compliance
    icp: Optional[str] = Field(default=None, max_length=128)
    security_code: Optional[str] = Field(default=None, max_length=128)

    # Map
    baidu_map_ak: Optional[str] = Field(default=None, max_length=255)
    office_address_name: Optional[str] = Field(default=None, max_length=255)
    office_address_detail: Optional[str] = Field(default=None, max_length=512)
    office_address_lng: Optional[float] = Field(default=None)
    office_address_lat: Optional[float] = Field(default=None)
    office_phone: Optional[str] = Field(default=None, max_length=64)
    office_email: Optional[str] = Field(default=None, max_length=255)

    # Display
    theme: str = Field(default="light", max_length=32)
    language: str = Field(default="zh-CN", max_length=16)


class SiteMeta(TimestampedEntity, table=True):
    """SEO metadata.

    Table: site_meta
    """

    __tablename__ = "site_meta"
    __table_args__ = ({"extend_existing": True},)

    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None, sa_type=Text)
    keywords: Optional[str] = Field(default=None, max_length=512)
    author: Optional[str] = Field(default=None, max_length=255)
    favicon: Optional[str] = Field(default=None, max_length=512)
    og_image: Optional[str] = Field(default=None, max_length=512)
