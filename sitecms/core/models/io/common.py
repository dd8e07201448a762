"""
Shared I/O building blocks.

Every API response is wrapped in ``ApiResponse``::

    {"code": 200, "message": "Success", "data": ..., "error": null, "pagination": null}

Field names are camelCase on the wire and snake_case in Python.
"""

from __future__ import annotations

import math
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


def blank_to_none(value: Any) -> Any:
    """Treat an empty form field as "not provided"."""
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


class CamelModel(BaseModel):
    """Base schema: camelCase aliases, accepts either spelling on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Pagination(CamelModel):
    """Page metadata for list responses."""

    page: int = Field(description="1-based page number")
    page_size: int = Field(description="Rows per page")
    total: int = Field(description="Total number of rows")
    total_pages: int = Field(description="Number of pages (0 when there are no rows)")

    @classmethod
    def build(cls, page: int, page_size: int, total: int) -> "Pagination":
        return cls(page=page, page_size=page_size, total=total, total_pages=math.ceil(total / page_size))


class ApiResponse(BaseModel, Generic[DataT]):
    """Response envelope used by every backend endpoint."""

    code: int = Field(default=200, description="Mirrors the HTTP status code")
    message: str = Field(default="Success", description="Human readable outcome")
    data: Optional[DataT] = Field(default=None, description="Payload")
    error: Optional[Any] = Field(default=None, description="Error details for failed requests")
    pagination: Optional[Pagination] = Field(default=None, description="Present on paginated lists")


class HealthStatus(BaseModel):
    """Health check payload."""

    code: int = 200
    message: str = "Server is running"
    timestamp: str
    environment: str
    auth: str = Field(description="'ok' or 'degraded'")
