"""
Site settings I/O models.

``SiteInfoUpdate`` and ``SiteMetaUpdate`` are partial: only the fields present
in the request body are written.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel


class ContactInfo(CamelModel):
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None


class SocialMedia(CamelModel):
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    twitter: Optional[str] = None
    youtube: Optional[str] = None
    tiktok: Optional[str] = None
    linkedin: Optional[str] = None


class CompanyInfo(CamelModel):
    company_name: Optional[str] = None
    company_description: Optional[str] = None
    company_logo: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None


class _SiteInfoFields(ContactInfo, SocialMedia):
    company_name: Optional[str] = None
    company_description: Optional[str] = None
    company_logo: Optional[str] = None
    icp: Optional[str] = None
    security_code: Optional[str] = None
    baidu_map_ak: Optional[str] = None
    office_address_name: Optional[str] = None
    office_address_detail: Optional[str] = None
    office_address_lng: Optional[float] = None
    office_address_lat: Optional[float] = None
    office_phone: Optional[str] = None
    office_email: Optional[str] = None


class SiteInfoRead(_SiteInfoFields):
    """Full site information as stored."""

    id: str
    theme: str
    language: str
    updated_at: datetime


class SiteInfoUpdate(_SiteInfoFields):
    """Partial update of the site information."""

    theme: Optional[str] = Field(default=None, max_length=32)
    language: Optional[str] = Field(default=None, max_length=16)


class SiteMetaRead(CamelModel):
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    author: Optional[str] = None
    favicon: Optional[str] = None
    og_image: Optional[str] = None
    updated_at: datetime


class SiteMetaUpdate(CamelModel):
    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    keywords: Optional[str] = Field(default=None, max_length=512)
    author: Optional[str] = Field(default=None, max_length=255)
    favicon: Optional[str] = Field(default=None, max_length=512)
    og_image: Optional[str] = Field(default=None, max_length=512)


class MapLocation(CamelModel):
    name: str
    lng: float
    lat: float
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class MapConfig(CamelModel):
    """Map widget configuration consumed by the contact page."""

    ak: str = Field(description="Baidu Map browser key")
    default_location: MapLocation
