"""
Interfaces layer package.

Contains FastAPI routers and their Pydantic response schemas.
Resource routers return the shared envelopes and raise ``ApiError``.
"""
