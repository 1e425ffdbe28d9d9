from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.responses import FileResponse, PlainTextResponse
from starlette.requests import Request

from frontend.config import Settings, get_settings
from frontend.proxy import ReverseProxy
from frontend.static_files import SinglePageApp

log = logging.getLogger(__name__)

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


@asynccontextmanager
async def lifespan(application: FastAPI):
    try:
        yield
    finally:
        await application.state.proxy.client.aclose()


def create_app(settings: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None) -> FastAPI:
    settings = settings or get_settings()
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    proxy = ReverseProxy(
        settings.backend_url,
        settings.proxy_prefix,
        client or httpx.AsyncClient(timeout=settings.proxy_timeout),
    )
    spa = SinglePageApp(settings.static_dir)
    application.state.settings = settings
    application.state.proxy = proxy
    application.state.spa = spa
    log.info("Proxy target URL for backend is configured to: %s", proxy.target)

    prefix = settings.proxy_prefix.rstrip("/")

    async def forward(request: Request):
        return await proxy.forward(request)

    application.add_api_route(prefix, forward, methods=PROXY_METHODS, include_in_schema=False)
    application.add_api_route(prefix + "/{path:path}", forward, methods=PROXY_METHODS, include_in_schema=False)

    @application.api_route("/{full_path:path}", methods=["GET", "HEAD"], include_in_schema=False)
    def static_or_entry(full_path: str):
        target = spa.resolve(full_path)
        if not target.is_file():
            return PlainTextResponse("Not Found", status_code=404)
        return FileResponse(target)

    return application
