"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-endpoint rate limits, keyed by client address.
Exceeded limits are answered with the standard error envelope.
"""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from istek_api.core.config import settings
from istek_api.shared.errors import ApiError

logger = logging.getLogger(__name__)

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
    enabled=settings.rate_limit_enabled,
)


async def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Answer an exceeded rate limit with a RATE_LIMITED (429) envelope.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response in the error envelope.
    """
    logger.warning(
        "Rate limit exceeded for %s on %s: %s",
        get_remote_address(request),
        request.url.path,
        exc.detail,
    )
    return ApiError.rate_limited(f"Rate limit exceeded: {exc.detail}").to_response()
