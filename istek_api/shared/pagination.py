"""
Pagination contract shared by every listing endpoint.

``PaginationQuery`` is decoded once per request from the ``limit`` and
``offset`` query parameters, with defaults applied in that single step.
``PaginatedResponse`` is the envelope every list endpoint returns.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Annotated, Generic, TypeVar

from fastapi import Query
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from istek_api.core.config import settings
from istek_api.shared.errors import ApiError

DEFAULT_LIMIT = 50
DEFAULT_OFFSET = 0

# Plain decimal integers only: no fractions, separators or padding.
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

T = TypeVar("T")


class PaginationQuery(BaseModel):
    """Paging intent of a listing request.

    Raw string values must be plain decimal integers. Negative values and
    limits above ``settings.max_page_limit`` are rejected by policy rather
    than clamped, so every accepted value is echoed unchanged.

    Attributes:
        limit: Maximum number of items to return (0..max_page_limit).
        offset: Number of matching items to skip (>= 0).
    """

    model_config = ConfigDict(frozen=True)

    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    @field_validator("limit", "offset", mode="before")
    @classmethod
    def _require_integer_string(cls, value: object) -> object:
        if isinstance(value, str) and not INTEGER_PATTERN.fullmatch(value):
            raise ValueError("must be an integer")
        return value

    @field_validator("limit")
    @classmethod
    def _check_limit(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must be greater than or equal to 0")
        if value > settings.max_page_limit:
            raise ValueError(
                f"must be less than or equal to {settings.max_page_limit}"
            )
        return value

    @field_validator("offset")
    @classmethod
    def _check_offset(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must be greater than or equal to 0")
        return value

    @classmethod
    def decode(
        cls, limit: int | str | None = None, offset: int | str | None = None
    ) -> "PaginationQuery":
        """Build a query, filling absent values with the defaults.

        Raises:
            ApiError: BAD_REQUEST when a value is not an integer or is
                outside the accepted range.
        """
        raw = {}
        if limit is not None:
            raw["limit"] = limit
        if offset is not None:
            raw["offset"] = offset
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise ApiError.from_validation_errors(exc.errors()) from exc

    @classmethod
    def from_query_params(cls, params: Mapping[str, str]) -> "PaginationQuery":
        """Decode raw request query parameters. Unrelated keys are ignored."""
        return cls.decode(limit=params.get("limit"), offset=params.get("offset"))


def get_pagination_query(
    limit: Annotated[
        str | None,
        Query(description=f"Maximum number of items to return (default {DEFAULT_LIMIT})"),
    ] = None,
    offset: Annotated[
        str | None,
        Query(description=f"Number of items to skip (default {DEFAULT_OFFSET})"),
    ] = None,
) -> PaginationQuery:
    """FastAPI dependency decoding ``limit``/``offset`` for listing routes.

    FastAPI hands over the raw strings so that parsing, defaults and range
    checks all happen in ``PaginationQuery.decode``.
    """
    return PaginationQuery.decode(limit=limit, offset=offset)


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of results plus the paging parameters that produced it.

    ``total`` is the size of the full matching set, independent of
    ``len(items)``. Callers keep ``len(items) <= limit`` and
    ``total >= len(items)``; neither is checked here.
    """

    model_config = ConfigDict(frozen=True)

    items: list[T]
    total: int
    limit: int
    offset: int

    @classmethod
    def from_query(
        cls, items: Sequence[T], total: int, query: PaginationQuery
    ) -> "PaginatedResponse[T]":
        """Package a page, echoing the limit/offset of ``query``."""
        return cls(
            items=list(items), total=total, limit=query.limit, offset=query.offset
        )
