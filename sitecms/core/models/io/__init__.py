"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts.

Modules:
- common: response envelope, pagination, camelCase base model
- auth: login, change-password and token payloads
- catalog: products and product categories
- content: cases, news, documents and messages
- gallery: gallery records and gallery file listing
- home: hero slides and about blocks
- site_settings: site information, SEO metadata and map configuration
- uploads: stored file descriptor
"""

from .common import ApiResponse, CamelModel, HealthStatus, Pagination

__all__ = ["ApiResponse", "CamelModel", "HealthStatus", "Pagination"]
