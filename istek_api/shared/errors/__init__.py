"""
Shared error handling package.

Centralizes the error taxonomy and error-to-HTTP mapping so that every
resource handler's failures are consistently translated into API responses.
"""

from istek_api.shared.errors.api_error import (
    DEFAULT_ERROR_STATUS,
    ApiError,
    ErrorCode,
    ErrorDetail,
    ErrorResponse,
    code_for_status,
    status_for_code,
)

__all__ = [
    "DEFAULT_ERROR_STATUS",
    "ApiError",
    "ErrorCode",
    "ErrorDetail",
    "ErrorResponse",
    "code_for_status",
    "status_for_code",
]
