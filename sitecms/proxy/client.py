"""
Backend API client used by the proxy.

``BackendClient`` owns one ``httpx.AsyncClient`` bound to ``BACKEND_API_URL``
and turns incoming proxy requests into backend calls:

- the method, path, query string and ``Authorization`` header are forwarded;
- JSON bodies are parsed and re-serialized;
- every other body (multipart, urlencoded, binary) is forwarded byte for byte
  together with its original ``Content-Type``, so multipart boundaries survive.
"""

from __future__ import annotations

import json
import mimetypes
from typing import Any, Dict, Optional

import httpx
from fastapi import Request
from fastapi.responses import JSONResponse, Response, StreamingResponse
from starlette.background import BackgroundTask

from sitecms.core.logging_config import get_logger
from sitecms.server.core.config import ProxyConfig, settings

logger = get_logger(__name__)

UPLOAD_CACHE_CONTROL = "public, max-age=86400"


class BackendClient:
    """Forwards proxy requests to the backend API."""

    def __init__(self, config: Optional[ProxyConfig] = None, *, client: Optional[httpx.AsyncClient] = None) -> None:
        self.config = config or settings.proxy
        self._http = client or httpx.AsyncClient(
            base_url=self.config.backend_api_url,
            timeout=self.config.timeout,
        )

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    async def aclose(self) -> None:
        await self._http.aclose()

    @staticmethod
    def _is_json(content_type: Optional[str]) -> bool:
        return (content_type or "").split(";")[0].strip().lower() == "application/json"

    async def _build_request(self, request: Request, target: str, raw: bool) -> httpx.Request:
        headers: Dict[str, str] = {}
        authorization = request.headers.get("authorization")
        if authorization:
            headers["Authorization"] = authorization

        content_type = request.headers.get("content-type")
        body = await request.body()
        kwargs: Dict[str, Any] = {}
        if body:
            if not raw and self._is_json(content_type):
                try:
                    kwargs["json"] = json.loads(body)
                except ValueError:
                    logger.debug(f"Forwarding malformed JSON body to {target} unchanged")
                    kwargs["content"] = body
                    headers["Content-Type"] = content_type
            else:
                kwargs["content"] = body
                if content_type:
                    headers["Content-Type"] = content_type

        return self._http.build_request(
            request.method,
            target,
            params=request.url.query or None,
            headers=headers,
            **kwargs,
        )

    async def send(self, request: Request, target: str, *, raw: bool = False) -> httpx.Response:
        """Forward ``request`` to ``target`` on the backend and return the raw response.

        Raises:
            httpx.HTTPError: The backend could not be reached or timed out.
        """
        outgoing = await self._build_request(request, target, raw)
        logger.debug(f"Proxy {outgoing.method} {outgoing.url}")
        return await self._http.send(outgoing)

    async def forward(self, request: Request, target: str, *, raw: bool = False) -> Response:
        """Forward a request and relay the backend's JSON and status code unchanged."""
        try:
            upstream = await self.send(request, target, raw=raw)
        except httpx.HTTPError as e:
            return self.request_failed(request, e)
        return self.relay_json(upstream)

    @staticmethod
    def relay_json(upstream: httpx.Response) -> JSONResponse:
        try:
            payload = upstream.json()
        except ValueError:
            logger.warning(f"Backend returned non-JSON body for {upstream.request.url} ({upstream.status_code})")
            payload = {"error": "Invalid JSON response", "details": upstream.text, "status": upstream.status_code}
        return JSONResponse(status_code=upstream.status_code, content=payload)

    @staticmethod
    def request_failed(request: Request, error: httpx.HTTPError) -> JSONResponse:
        logger.error(f"Proxy request {request.method} {request.url.path} failed: {type(error).__name__}: {error}")
        return JSONResponse(status_code=500, content={"error": "API request failed", "details": str(error)})

    async def stream_upload(self, path: str) -> Response:
        """Stream a stored file from the backend's ``/uploads/{path}``.

        Raises:
            httpx.HTTPError: The backend could not be reached or timed out.
        """
        upstream = await self._http.send(self._http.build_request("GET", f"/uploads/{path}"), stream=True)
        if upstream.status_code != 200:
            body = await upstream.aread()
            await upstream.aclose()
            return Response(
                content=body,
                status_code=upstream.status_code,
                media_type=upstream.headers.get("content-type"),
            )

        media_type = mimetypes.guess_type(path)[0] or "application/octet-stream"
        return StreamingResponse(
            upstream.aiter_bytes(),
            media_type=media_type,
            headers={"Cache-Control": UPLOAD_CACHE_CONTROL},
            background=BackgroundTask(upstream.aclose),
        )
