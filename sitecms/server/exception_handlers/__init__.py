"""
Exception handlers for the sitecms backend.

This package contains the error taxonomy raised by services and the setup
function that registers the envelope-rendering handlers with FastAPI.
"""

from .errors import (
    ApiError,
    BadRequestError,
    InvalidFilePathError,
    NotFoundError,
    ServiceUnavailableError,
    UnauthorizedError,
    UploadRejectedError,
)
from .global_handler import setup_exception_handlers

__all__ = [
    "ApiError",
    "BadRequestError",
    "InvalidFilePathError",
    "NotFoundError",
    "ServiceUnavailableError",
    "UnauthorizedError",
    "UploadRejectedError",
    "setup_exception_handlers",
]
