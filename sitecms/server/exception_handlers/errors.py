"""
Exception taxonomy for the backend API.

Services raise these; ``global_handler`` renders them into the response
envelope. Each class fixes the HTTP status so call sites only supply the
message.
"""

from typing import Any, Optional

from fastapi import HTTPException, status


class ApiError(HTTPException):
    """Base class for errors rendered as ``{code, message, error?}``."""

    status_code_default: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: Optional[Any] = None, headers: Optional[dict] = None) -> None:
        super().__init__(status_code=self.status_code_default, detail=message, headers=headers)
        self.message = message
        self.error = error


class BadRequestError(ApiError):
    status_code_default = status.HTTP_400_BAD_REQUEST


class UploadRejectedError(BadRequestError):
    """The uploaded file failed type or size validation; nothing was written."""


class InvalidFilePathError(BadRequestError):
    """A file name resolved outside of its upload directory."""


class UnauthorizedError(ApiError):
    status_code_default = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized", error: Optional[Any] = None) -> None:
        super().__init__(message, error=error, headers={"WWW-Authenticate": "Bearer"})


class NotFoundError(ApiError):
    status_code_default = status.HTTP_404_NOT_FOUND


class ServiceUnavailableError(ApiError):
    status_code_default = status.HTTP_503_SERVICE_UNAVAILABLE
