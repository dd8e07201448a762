"""
Global Exception Handlers for the FastAPI backend.

Every error leaves the API in the response envelope:

- ``HTTPException`` (including the ``ApiError`` taxonomy) → its status code
- request/schema validation failures → 400
- anything else → 500 with an error id; the stack trace is included in the
  body only in the development environment and always logged.
"""

import traceback
import uuid
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from sitecms.core.logging_config import get_logger
from sitecms.server.core.config import settings

from .errors import ApiError

logger = get_logger(__name__)


def _format_validation_errors(errors: List[Dict[str, Any]]) -> List[str]:
    formatted = []
    for err in errors:
        location = ".".join(str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path", "form"))
        formatted.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return formatted


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors into the envelope."""
    if exc.status_code == 404 and exc.detail == "Not Found":
        # Raised by the router itself for unknown paths
        return JSONResponse(
            status_code=404,
            content={"code": 404, "message": "API endpoint not found", "path": request.url.path},
        )

    content: Dict[str, Any] = {"code": exc.status_code, "message": str(exc.detail)}
    if isinstance(exc, ApiError) and exc.error is not None:
        content["error"] = exc.error

    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.detail}")
    else:
        logger.debug(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")

    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render request and schema validation failures as 400."""
    errors = exc.errors() if isinstance(exc, (RequestValidationError, ValidationError)) else []
    details = _format_validation_errors(errors)
    logger.debug(f"Validation failed for {request.method} {request.url.path}: {details}")
    return JSONResponse(
        status_code=400,
        content={"code": 400, "message": "Validation failed", "error": details},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns an envelope with an error ID
    that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = uuid.uuid4().hex[:12]
    stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
        },
    )

    content: Dict[str, Any] = {
        "code": 500,
        "message": "Internal server error",
        "error": str(exc),
        "error_id": error_id,
        "error_type": type(exc).__name__,
    }
    if settings.is_development:
        content["stack"] = stack

    return JSONResponse(status_code=500, content=content)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
