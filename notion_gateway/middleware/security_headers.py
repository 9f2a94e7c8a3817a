"""Security headers middleware.

Pure ASGI (no BaseHTTPMiddleware) so the long-lived ``/sse`` stream is
forwarded chunk by chunk instead of being buffered.
"""

import logging
from uuid import uuid4

logger = logging.getLogger(__name__)

HSTS_VALUE = b"max-age=31536000; includeSubDomains"


class SecurityHeadersMiddleware:
    """
    Stamp every HTTP response with a request id and static security headers.

    Headers added:
        - X-Request-Id: fresh UUID per request (also stored in scope state)
        - X-Content-Type-Options: nosniff
        - X-Frame-Options: DENY
        - Strict-Transport-Security: only when ``hsts`` is enabled
    """

    def __init__(self, app, hsts: bool = True):
        self.app = app
        self.static_headers: list[tuple[bytes, bytes]] = [
            (b"x-content-type-options", b"nosniff"),
            (b"x-frame-options", b"DENY"),
        ]
        if hsts:
            self.static_headers.append((b"strict-transport-security", HSTS_VALUE))

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid4())
        scope.setdefault("state", {})["request_id"] = request_id
        logger.debug(f"{scope.get('method')} {scope.get('path')} [{request_id}]")
        extra = [(b"x-request-id", request_id.encode()), *self.static_headers]

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                message = {**message, "headers": [*message.get("headers", []), *extra]}
            await send(message)

        await self.app(scope, receive, send_wrapper)
