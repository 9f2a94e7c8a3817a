"""SSE session for the MCP transport.

One SseSession exists per open GET /sse connection. It emits the
``endpoint`` event exactly once, then a ``ping`` event every
keepalive interval until the client goes away. Disconnect is detected
two ways: the probe checked after every tick, and cancellation of the
generator by the ASGI server when the transport closes.
"""

import asyncio
import logging
from collections.abc import AsyncGenerator, Awaitable, Callable

logger = logging.getLogger(__name__)

ENDPOINT_EVENT = "endpoint"
PING_EVENT = "ping"

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",  # Disable nginx buffering
}

DisconnectProbe = Callable[[], Awaitable[bool]]


def format_sse(event: str, data: str = "") -> str:
    """Format a single Server-Sent Event frame."""
    lines = data.split("\n") if data else [""]
    payload = "".join(f"data: {line}\n" for line in lines)
    return f"event: {event}\n{payload}\n"


class SseSession:
    """Handshake plus keep-alive stream for one SSE connection."""

    def __init__(
        self,
        endpoint_url: str,
        is_disconnected: DisconnectProbe,
        keepalive_interval: float = 10.0,
    ) -> None:
        self.endpoint_url = endpoint_url
        self.keepalive_interval = keepalive_interval
        self._is_disconnected = is_disconnected

    async def events(self) -> AsyncGenerator[str, None]:
        """Yield the endpoint event, then pings until disconnect."""
        logger.info(f"SSE session opened, message endpoint {self.endpoint_url}")
        yield format_sse(ENDPOINT_EVENT, self.endpoint_url)

        pings = 0
        try:
            while True:
                await asyncio.sleep(self.keepalive_interval)
                if await self._is_disconnected():
                    break
                pings += 1
                yield format_sse(PING_EVENT)
        except asyncio.CancelledError:
            logger.debug("SSE session cancelled by transport")
            raise
        finally:
            logger.info(f"SSE session closed after {pings} keep-alives")
