"""
Tests for the centralized error handlers and envelope serialization.

Builds a small FastAPI app with resource-style routes that use the shared
envelopes, wired with the real error handlers and rate limit handler.
"""

from typing import Annotated

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient
from pydantic import BaseModel
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from istek_api.shared.errors import ApiError
from istek_api.shared.errors.handlers import register_error_handlers
from istek_api.shared.pagination import (
    PaginatedResponse,
    PaginationQuery,
    get_pagination_query,
)
from istek_api.shared.responses import SuccessResponse
from istek_api.shared.security.rate_limiting import rate_limit_exceeded_handler


class VariableItem(BaseModel):
    id: str
    key: str


_VARIABLES = [VariableItem(id=f"v{i}", key=f"KEY_{i}") for i in range(7)]

route_limiter = Limiter(key_func=get_remote_address)


def _build_app() -> FastAPI:
    app = FastAPI()
    app.state.limiter = route_limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    register_error_handlers(app)

    @app.get("/variables", response_model=PaginatedResponse[VariableItem])
    def list_variables(
        pagination: Annotated[PaginationQuery, Depends(get_pagination_query)],
    ) -> PaginatedResponse[VariableItem]:
        page = _VARIABLES[pagination.offset : pagination.offset + pagination.limit]
        return PaginatedResponse.from_query(page, len(_VARIABLES), pagination)

    @app.get("/variables/{variable_id}", response_model=VariableItem)
    def get_variable(variable_id: str) -> VariableItem:
        for variable in _VARIABLES:
            if variable.id == variable_id:
                return variable
        raise ApiError.not_found("Variable not found")

    @app.delete("/variables/{variable_id}", response_model=SuccessResponse)
    def delete_variable(variable_id: str) -> SuccessResponse:
        return SuccessResponse.ok()

    @app.put("/environments/{environment_id}/activate", response_model=SuccessResponse)
    def activate_environment(environment_id: str) -> SuccessResponse:
        return SuccessResponse.with_message("Environment activated")

    @app.post("/tests/run")
    def run_tests() -> dict:
        raise ApiError.bad_request("No requests to test")

    @app.post("/workspaces")
    def create_workspace() -> dict:
        raise ApiError("CONFLICT", "Workspace already exists")

    @app.get("/history")
    def list_history() -> dict:
        raise ApiError.internal_error("database is locked")

    @app.get("/integrations")
    def list_integrations() -> dict:
        raise RuntimeError("secret provider exploded")

    @app.get("/limited")
    @route_limiter.limit("2/minute")
    def limited(request: Request) -> dict:
        return {"ok": True}

    return app


client = TestClient(_build_app(), raise_server_exceptions=False)


class TestPaginatedListing:
    """Tests for a listing route using the pagination dependency."""

    def test_defaults_applied(self) -> None:
        """Without query parameters the page uses limit 50, offset 0."""
        response = client.get("/variables")
        assert response.status_code == 200
        body = response.json()
        assert body["limit"] == 50
        assert body["offset"] == 0
        assert body["total"] == 7
        assert len(body["items"]) == 7

    def test_exact_page_shape(self) -> None:
        """A page serializes to exactly items, total, limit, offset."""
        response = client.get("/variables", params={"limit": 2, "offset": 0})
        assert response.json() == {
            "items": [{"id": "v0", "key": "KEY_0"}, {"id": "v1", "key": "KEY_1"}],
            "total": 7,
            "limit": 2,
            "offset": 0,
        }

    def test_paging_echoed(self) -> None:
        """limit and offset are echoed and total is independent of the page."""
        body = client.get("/variables?limit=3&offset=5").json()
        assert (body["limit"], body["offset"], body["total"]) == (3, 5, 7)
        assert [item["id"] for item in body["items"]] == ["v5", "v6"]

    def test_non_integer_limit_is_bad_request(self) -> None:
        """An unparseable limit answers 400 BAD_REQUEST."""
        response = client.get("/variables?limit=lots")
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "BAD_REQUEST"
        assert error["message"].startswith("limit:")

    @pytest.mark.parametrize("value", ["1.0", "1_0", "%205", "2e1"])
    def test_non_plain_integer_limit_is_bad_request(self, value: str) -> None:
        """Fractions, separators and padding are not rewritten into integers."""
        response = client.get(f"/variables?limit={value}")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    def test_empty_offset_is_bad_request(self) -> None:
        """A present but empty value is rejected rather than defaulted."""
        response = client.get("/variables?offset=")
        assert response.status_code == 400

    def test_limit_above_maximum_is_bad_request(self) -> None:
        """A limit above the configured maximum answers 400."""
        response = client.get("/variables?limit=100000")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    def test_negative_offset_is_bad_request(self) -> None:
        """A negative offset answers 400."""
        response = client.get("/variables?offset=-1")
        assert response.status_code == 400

    def test_repeated_requests_are_byte_identical(self) -> None:
        """The same page renders to the same bytes every time."""
        first = client.get("/variables?limit=2")
        second = client.get("/variables?limit=2")
        assert first.content == second.content


class TestApiErrorRendering:
    """Tests for ApiError raised from route handlers."""

    def test_not_found(self) -> None:
        """not_found answers 404 with the error envelope."""
        response = client.get("/variables/missing")
        assert response.status_code == 404
        assert response.json() == {
            "error": {"code": "NOT_FOUND", "message": "Variable not found"}
        }

    def test_bad_request(self) -> None:
        """bad_request answers 400."""
        response = client.post("/tests/run")
        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "BAD_REQUEST",
            "message": "No requests to test",
        }

    def test_internal_error(self) -> None:
        """internal_error answers 500 and keeps its message."""
        response = client.get("/history")
        assert response.status_code == 500
        assert response.json()["error"] == {
            "code": "INTERNAL_ERROR",
            "message": "database is locked",
        }

    def test_unknown_code_fails_safe(self) -> None:
        """An unrecognized code answers 500 with its own code."""
        response = client.post("/workspaces")
        assert response.status_code == 500
        assert response.json()["error"]["code"] == "CONFLICT"

    def test_unexpected_exception_is_hidden(self) -> None:
        """Unexpected exceptions answer 500 without internal details."""
        response = client.get("/integrations")
        assert response.status_code == 500
        assert response.json() == {
            "error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}
        }


class TestSuccessEnvelope:
    """Tests for payload-less routes returning SuccessResponse."""

    def test_ok_has_no_message_key(self) -> None:
        """ok() answers {"success": true} with no message key."""
        response = client.delete("/variables/v1")
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert b"message" not in response.content

    def test_with_message(self) -> None:
        """with_message() answers with the message."""
        response = client.put("/environments/e1/activate")
        assert response.json() == {"success": True, "message": "Environment activated"}


class TestRateLimiting:
    """Tests for rate limiting behavior."""

    def test_rate_limit_returns_429_envelope(self) -> None:
        """Exceeding a rate limit answers 429 with code RATE_LIMITED."""
        responses = [client.get("/limited") for _ in range(3)]
        assert [r.status_code for r in responses[:2]] == [200, 200]
        assert responses[2].status_code == 429
        error = responses[2].json()["error"]
        assert error["code"] == "RATE_LIMITED"
        assert error["message"].startswith("Rate limit exceeded")
