"""
Proxy Application Entry Point.

Serves the storefront's ``/api`` calls by forwarding them to the backend at
``BACKEND_API_URL``. Route order matters: the dedicated upload and hero-slide
routes are registered before the ``/api/{path}`` catch-all.
"""

from contextlib import asynccontextmanager
from typing import Annotated

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from sitecms.core.logging_config import get_logger, setup_logging
from sitecms.core.monitoring import initialize_logfire
from sitecms.server.core.config import settings
from sitecms.server.middleware import LogfireMiddleware

from .client import BackendClient

setup_logging()
logger = get_logger(__name__)

FORWARDED_METHODS = ["GET", "POST", "PUT", "DELETE"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared backend client for the lifetime of the app."""
    app.state.backend_client = BackendClient()
    logger.info(f"Proxy forwarding /api to {app.state.backend_client.base_url}")
    yield
    await app.state.backend_client.aclose()
    logger.info("Proxy backend client closed")


def get_backend_client(request: Request) -> BackendClient:
    return request.app.state.backend_client


BackendClientDep = Annotated[BackendClient, Depends(get_backend_client)]


app = FastAPI(
    title="sitecms proxy",
    description="Forwards storefront API calls to the sitecms backend.",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
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


@app.post("/api/uploads/{upload_type}")
async def proxy_upload(upload_type: str, request: Request, backend: BackendClientDep) -> Response:
    """Forward a multipart upload byte for byte; failures are wrapped in an envelope."""
    try:
        upstream = await backend.send(request, f"/api/uploads/{upload_type}", raw=True)
    except httpx.HTTPError as e:
        return backend.request_failed(request, e)

    if upstream.is_success:
        return backend.relay_json(upstream)

    logger.info(f"Backend rejected {upload_type} upload with {upstream.status_code}")
    return JSONResponse(
        status_code=upstream.status_code,
        content={"code": upstream.status_code, "message": "Upload failed", "error": upstream.text},
    )


@app.get("/api/uploads/{file_path:path}")
async def proxy_uploaded_file(file_path: str, request: Request, backend: BackendClientDep) -> Response:
    """Serve a stored upload through the proxy with a one-day cache header."""
    try:
        return await backend.stream_upload(file_path)
    except httpx.HTTPError as e:
        return backend.request_failed(request, e)


@app.api_route("/api/home/hero-slides", methods=FORWARDED_METHODS)
async def proxy_hero_slides(request: Request, backend: BackendClientDep) -> Response:
    return await backend.forward(request, "/api/home/hero-slides", raw=True)


@app.api_route("/api/home/hero-slides/{slide_id}", methods=FORWARDED_METHODS)
async def proxy_hero_slide(slide_id: str, request: Request, backend: BackendClientDep) -> Response:
    return await backend.forward(request, f"/api/home/hero-slides/{slide_id}", raw=True)


@app.api_route("/api/{path:path}", methods=FORWARDED_METHODS)
async def proxy_api(path: str, request: Request, backend: BackendClientDep) -> Response:
    """Forward any other API call, preserving method, query string and auth header."""
    return await backend.forward(request, f"/api/{path}")


initialize_logfire(app, service_name="sitecms-proxy")
