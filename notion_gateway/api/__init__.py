"""API routers and utilities.

This package contains the REST surface and shared API utilities:
- deps: FastAPI dependency injection functions
- rest: One POST route per tool
- openapi: Dynamic OpenAPI document for the REST routes
"""

from .deps import (
    get_credential,
    get_dispatcher,
    get_executor,
    get_registry,
    get_request_origin,
    get_settings,
)

__all__ = [
    "get_settings",
    "get_registry",
    "get_dispatcher",
    "get_executor",
    "get_credential",
    "get_request_origin",
]
