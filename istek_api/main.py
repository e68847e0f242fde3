"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health; resource routers are mounted by their own packages)
- Error handlers (every failure rendered as the error envelope)
- CORS and security headers middleware, rate limiting
- Logging configuration

No resource logic belongs here.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from istek_api.core.config import settings
from istek_api.interfaces.health import router as health_router
from istek_api.shared.errors.handlers import register_error_handlers
from istek_api.shared.logging import configure_logging
from istek_api.shared.security.headers import SecurityHeadersMiddleware
from istek_api.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    prefix = settings.api_prefix
    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        description="Internal REST API for the Istek API client",
        docs_url=f"{prefix}/docs" if settings.debug else None,
        redoc_url=None,
        openapi_url=f"{prefix}/openapi.json" if settings.debug else None,
    )

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=prefix)

    return app


app = create_app()
