"""
Shared module package.

Contains cross-cutting concerns used by every resource context
(workspaces, collections, environments, variables, integrations,
history, tests):
- Pagination query and paginated response envelope
- Success envelope for payload-less operations
- Error taxonomy and centralized error handlers
- Security middleware and rate limiting
- Logging configuration
"""
