"""
Response hardening for the local API.

The API listens on a local port that any page in a browser can reach, so
its JSON answers are marked non-sniffable, non-frameable and
same-origin-only. Envelopes rendered by the error handlers pass through
this middleware like any other response.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Stamps ``SECURE_HEADERS`` onto every response, replacing route values."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        response.headers.update(SECURE_HEADERS)
        return response
