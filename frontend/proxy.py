from __future__ import annotations

import logging

import httpx
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

log = logging.getLogger(__name__)

PROXY_ERROR_MESSAGE = (
    "Proxy encountered an error. Check backend service connectivity and BACKEND_URL configuration."
)

# Connection-scoped headers never travel through a proxy. Host is replaced by
# the target's, and the body length and encoding are recomputed on each side.
HOP_BY_HOP_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailer",
        "trailers",
        "transfer-encoding",
        "upgrade",
        "host",
        "content-length",
    }
)
STRIPPED_RESPONSE_HEADERS = HOP_BY_HOP_HEADERS | {"content-encoding"}


def strip_prefix(path: str, prefix: str) -> str:
    """
    Remove ``prefix`` from the start of ``path``.

    >>> strip_prefix("/api/contact", "/api")
    '/contact'
    >>> strip_prefix("/api", "/api")
    '/'
    """
    prefix = prefix.rstrip("/")
    if prefix and (path == prefix or path.startswith(prefix + "/")):
        path = path[len(prefix):]
    return path if path.startswith("/") else "/" + path


class ReverseProxy:
    """Forwards requests under ``prefix`` to ``target``, minus the prefix."""

    def __init__(self, target: str, prefix: str, client: httpx.AsyncClient) -> None:
        self.target = target.rstrip("/")
        self.prefix = prefix
        self.client = client

    def target_url(self, path: str, query: str = "") -> str:
        url = self.target + strip_prefix(path, self.prefix)
        return f"{url}?{query}" if query else url

    async def forward(self, request: Request) -> Response:
        target = self.target_url(request.url.path, request.url.query)
        original = request.url.path + (f"?{request.url.query}" if request.url.query else "")
        log.info("Proxying request: %s %s -> %s", request.method, original, target)

        headers = [(k, v) for k, v in request.headers.items() if k.lower() not in HOP_BY_HOP_HEADERS]
        body = await request.body()
        try:
            upstream = await self.client.request(request.method, target, headers=headers, content=body)
        except httpx.HTTPError as exc:
            log.error("Proxy error: %r", exc)
            return PlainTextResponse(PROXY_ERROR_MESSAGE, status_code=500)

        response = Response(content=upstream.content, status_code=upstream.status_code)
        for key, value in upstream.headers.multi_items():
            if key.lower() not in STRIPPED_RESPONSE_HEADERS:
                response.headers.append(key, value)
        return response
