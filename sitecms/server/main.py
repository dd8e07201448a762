"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request timing), registers the exception handlers, mounts the uploaded files
and includes all API routers under ``/api``.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from sitecms.core.database import async_session_maker, init_db
from sitecms.core.logging_config import get_logger, setup_logging
from sitecms.core.monitoring import initialize_logfire

from .api.v1 import (
    auth,
    cases,
    catalog,
    documents,
    gallery,
    health,
    home,
    maps,
    messages,
    news,
    pages,
    site_settings,
    uploads,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware
from .services.auth import AuthService, auth_status
from .services.uploads import upload_manager

# Initialize logging
setup_logging()
logger = get_logger(__name__)


async def seed_admin() -> None:
    """Create the configured bootstrap admin when it is missing.

    A database failure here does not stop the server; it puts the auth service
    into its degraded state instead.
    """
    try:
        async with async_session_maker() as session:
            created = await AuthService(session).ensure_admin()
    except SQLAlchemyError as e:
        auth_status.enter_degraded(f"admin seed failed: {type(e).__name__}: {e}")
        return
    if created:
        logger.info(f"Bootstrap admin {settings.auth.admin_username!r} created")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    On startup: create missing tables, make sure the upload directories exist
    and seed the bootstrap admin when ``SEED_ADMIN_ON_STARTUP`` is set.
    """
    logger.info(f"Starting up {constant.PROJECT_NAME} backend ({settings.environment})...")
    if settings.auth.uses_insecure_secret:
        logger.warning("SECRET_KEY is not set; tokens are signed with the insecure default key")

    upload_manager.ensure_upload_dirs()

    try:
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    if settings.auth.seed_admin_on_startup:
        await seed_admin()

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME} backend...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    sitecms Backend API

    Content management backend for a company website: product catalog, case studies,
    news, downloadable documents, contact messages, gallery, homepage hero and site settings.
    Admin endpoints require a bearer token from `POST /api/auth/login`.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)

for router_module in (
    health,
    auth,
    catalog,
    cases,
    news,
    documents,
    messages,
    gallery,
    home,
    pages,
    uploads,
    site_settings,
    maps,
):
    app.include_router(router_module.router, prefix=constant.API_PREFIX)

app.mount(
    constant.UPLOADS_URL_PREFIX,
    StaticFiles(directory=settings.upload_dir, check_dir=False),
    name="uploads",
)

initialize_logfire(app)
