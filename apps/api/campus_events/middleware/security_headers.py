from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from campus_events.core.config import Settings

# Responses carrying a creator id must not be cached by browsers or proxies
NO_STORE_PATHS = ("/api/session",)


def security_headers(settings: Settings) -> dict[str, str]:
    if not settings.security_headers_enabled:
        return {}

    headers = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Referrer-Policy": "no-referrer",
        "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
    }
    if settings.env != "local":
        headers["Strict-Transport-Security"] = "max-age=63072000; includeSubDomains; preload"
    return headers


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, settings: Settings) -> None:
        super().__init__(app)
        self.headers = security_headers(settings)

    async def dispatch(self, request: Request, call_next) -> Response:
        response: Response = await call_next(request)

        for name, value in self.headers.items():
            response.headers.setdefault(name, value)

        if request.url.path.startswith(NO_STORE_PATHS):
            response.headers["Cache-Control"] = "no-store"
        return response
