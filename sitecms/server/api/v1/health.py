"""
Health Check Endpoints.

This module provides basic system status endpoints (health, version)
used for monitoring and deployment verification.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from sitecms.core.models.io.common import HealthStatus
from sitecms.server.core import constant
from sitecms.server.core.config import settings
from sitecms.server.services.auth import auth_status

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthStatus,
    summary="Health Check",
    description="Check the operational status of the API server, including whether authentication is degraded.",
    response_description="Status object.",
)
async def health_check() -> HealthStatus:
    """
    Health check endpoint.

    Returns a status indicator to confirm the server is running and reachable.
    The ``auth`` field reads ``degraded`` while the credential store is unreachable.
    """
    return HealthStatus(
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.environment,
        auth=auth_status.state,
    )


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the API server.",
    response_description="Version object.",
)
async def version():
    """Get API version."""
    return {"code": 200, "message": "Success", "data": {"version": constant.VERSION}}
