"""
Centralized error handlers for FastAPI.

Every failure leaving the API is rendered as the error envelope
``{"error": {"code": ..., "message": ...}}``.
No stack traces or internal details are exposed to clients.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from istek_api.shared.errors.api_error import (
    ApiError,
    ErrorDetail,
    ErrorResponse,
    code_for_status,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _log_api_error(request: Request, exc: ApiError) -> None:
    if exc.status_code >= 500:
        logger.error(
            "%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message
        )
    else:
        logger.warning(
            "%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message
        )


def _http_error_code(status_code: int) -> str:
    """Derive an error code for a framework-level HTTP error status."""
    known = code_for_status(status_code)
    if known is not None:
        return known
    try:
        return HTTPStatus(status_code).name
    except ValueError:
        return "HTTP_ERROR"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        """Render an ApiError raised by a resource handler."""
        _log_api_error(request, exc)
        return exc.to_response()

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Render malformed query/path/body input as BAD_REQUEST."""
        error = ApiError.from_validation_errors(exc.errors())
        _log_api_error(request, error)
        return error.to_response()

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Render framework HTTP errors (unknown route, bad method, ...)."""
        code = _http_error_code(exc.status_code)
        message = str(exc.detail)
        logger.warning(
            "%s %s -> %d %s", request.method, request.url.path, exc.status_code, code
        )
        body = ErrorResponse(error=ErrorDetail(code=code, message=message))
        return JSONResponse(
            status_code=exc.status_code,
            content=body.model_dump(),
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception(
            "Unexpected error on %s %s: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
        )
        return ApiError.internal_error(INTERNAL_ERROR_MESSAGE).to_response()
