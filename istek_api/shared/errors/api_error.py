"""
API error taxonomy and status mapping.

Resource handlers raise ``ApiError`` at the point a failure is detected.
The error carries an ``ErrorDetail`` (code + message) and converts itself
into a JSON response whose status is a pure function of the code.

Unknown codes still serialize and map to HTTP 500, so an error can never
leave the API with a 2xx status.
"""

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from starlette.responses import JSONResponse

HTTP_400 = 400
HTTP_404 = 404
HTTP_429 = 429
HTTP_500 = 500

DEFAULT_ERROR_STATUS = HTTP_500


class ErrorCode(str, Enum):
    """Known error codes understood by ``status_for_code``."""

    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RATE_LIMITED = "RATE_LIMITED"


_STATUS_BY_CODE: dict[str, int] = {
    ErrorCode.NOT_FOUND.value: HTTP_404,
    ErrorCode.BAD_REQUEST.value: HTTP_400,
    ErrorCode.INTERNAL_ERROR.value: HTTP_500,
    ErrorCode.RATE_LIMITED.value: HTTP_429,
}


def status_for_code(code: str) -> int:
    """Map an error code to its HTTP status.

    Args:
        code: Any error code string, known or not.

    Returns:
        The mapped status, or 500 for codes outside the known vocabulary.
    """
    return _STATUS_BY_CODE.get(code, DEFAULT_ERROR_STATUS)


def code_for_status(status_code: int) -> str | None:
    """Return the known error code mapped to a status, if any."""
    for code, status in _STATUS_BY_CODE.items():
        if status == status_code:
            return code
    return None


class ErrorDetail(BaseModel):
    """Machine-readable code plus human-readable message."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str


class ErrorResponse(BaseModel):
    """Wire body of every error response: ``{"error": {...}}``."""

    model_config = ConfigDict(frozen=True)

    error: ErrorDetail


class ApiError(Exception):
    """Error raised by resource handlers and rendered as an error envelope.

    Use the named constructors for the known kinds. The plain constructor
    accepts any code string; codes the status mapping does not know are
    rendered with HTTP 500.
    """

    def __init__(self, code: str, message: str) -> None:
        if isinstance(code, ErrorCode):
            code = code.value
        self.detail = ErrorDetail(code=code, message=message)
        super().__init__(message)

    @classmethod
    def not_found(cls, message: str) -> "ApiError":
        return cls(ErrorCode.NOT_FOUND, message)

    @classmethod
    def bad_request(cls, message: str) -> "ApiError":
        return cls(ErrorCode.BAD_REQUEST, message)

    @classmethod
    def internal_error(cls, message: str) -> "ApiError":
        return cls(ErrorCode.INTERNAL_ERROR, message)

    @classmethod
    def rate_limited(cls, message: str) -> "ApiError":
        return cls(ErrorCode.RATE_LIMITED, message)

    @classmethod
    def from_validation_errors(
        cls, errors: Iterable[Mapping[str, Any]]
    ) -> "ApiError":
        """Build a BAD_REQUEST error from pydantic/FastAPI validation errors.

        Each error becomes ``"<field>: <msg>"``. The ``query``/``body``/
        ``path`` location prefix FastAPI adds is dropped.

        Args:
            errors: Items as returned by ``ValidationError.errors()``.

        Returns:
            An ``ApiError`` with code ``BAD_REQUEST``.
        """
        parts = []
        for error in errors:
            loc = [
                str(part)
                for part in error.get("loc", ())
                if part not in ("query", "body", "path", "header")
            ]
            msg = error.get("msg", "Invalid value")
            parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
        return cls.bad_request("; ".join(parts) or "Invalid request")

    @property
    def code(self) -> str:
        return self.detail.code

    @property
    def message(self) -> str:
        return self.detail.message

    @property
    def status_code(self) -> int:
        return status_for_code(self.detail.code)

    def to_body(self) -> ErrorResponse:
        """Return the ``{"error": {"code", "message"}}`` body model."""
        return ErrorResponse(error=self.detail)

    def to_response(self, headers: Mapping[str, str] | None = None) -> JSONResponse:
        """Render the error as a JSON response with its mapped status.

        Args:
            headers: Optional extra response headers.

        Returns:
            A ``JSONResponse`` carrying the error envelope.
        """
        return JSONResponse(
            status_code=self.status_code,
            content=self.to_body().model_dump(),
            headers=dict(headers) if headers else None,
        )

    def __repr__(self) -> str:
        return f"ApiError(code={self.code!r}, message={self.message!r})"
