"""
Istek API — response and error contract for the local REST API.

Application package root. Resource handlers for workspaces, collections,
environments, variables, integrations, history and tests build on the
envelopes defined here.

Layers:
    - core: Configuration.
    - shared: Cross-cutting concerns (pagination, envelopes, errors,
      security, logging).
    - interfaces: FastAPI routers and their Pydantic schemas.
"""
