"""
Pydantic schemas for the API's own endpoints.

Resource envelopes live in ``istek_api.shared``; this module holds the
schemas of routes served by this package directly.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
