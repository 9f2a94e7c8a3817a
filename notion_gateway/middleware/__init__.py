"""ASGI middleware for the FastAPI application.

- Security headers (X-Request-Id, HSTS, etc.)
"""

from .security_headers import SecurityHeadersMiddleware

__all__ = [
    "SecurityHeadersMiddleware",
]
