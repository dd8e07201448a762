"""
Authentication Endpoints.

Login issues a bearer token for the admin dashboard; change-password is the
only way to rotate an admin password over HTTP.
"""

from fastapi import APIRouter

from sitecms.core.logging_config import get_logger
from sitecms.core.models.io.auth import ChangePasswordRequest, LoginData, LoginRequest
from sitecms.core.models.io.common import ApiResponse
from sitecms.server.exception_handlers.errors import UnauthorizedError
from sitecms.server.services.deps import AdminDep, AuthServiceDep

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=ApiResponse[LoginData],
    summary="Admin Login",
    description="Exchange admin credentials for a bearer token valid for 24 hours.",
    responses={
        200: {"description": "Login successful"},
        400: {"description": "Missing username or password"},
        401: {"description": "Invalid credentials"},
        503: {"description": "Credential store unavailable"},
    },
)
async def login(body: LoginRequest, auth: AuthServiceDep) -> ApiResponse[LoginData]:
    """
    Log in as an admin.

    - **username**: Admin username.
    - **password**: Plain-text password.
    """
    if not await auth.validate_credentials(body.username, body.password):
        logger.info(f"Failed login for {body.username!r}")
        raise UnauthorizedError("Invalid credentials")

    token = auth.generate_token(body.username)
    logger.info(f"Admin {body.username!r} logged in")
    return ApiResponse[LoginData](message="Login successful", data=LoginData(token=token, username=body.username))


@router.post(
    "/change-password",
    response_model=ApiResponse[None],
    summary="Change Password",
    description="Change the password of the authenticated admin. The old password stops working immediately.",
    responses={
        200: {"description": "Password changed"},
        400: {"description": "New password too short"},
        401: {"description": "Missing token or wrong old password"},
    },
)
async def change_password(body: ChangePasswordRequest, admin: AdminDep, auth: AuthServiceDep) -> ApiResponse[None]:
    """
    Change the current admin's password.

    - **oldPassword**: Current password.
    - **newPassword**: New password, at least 6 characters.
    """
    await auth.change_password(admin.username, body.old_password, body.new_password)
    return ApiResponse[None](message="Password changed successfully")
