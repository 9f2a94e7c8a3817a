"""Tests for the per-connection SSE session."""

import asyncio

import pytest

from notion_gateway.mcp.sse import SseSession, format_sse


def _probe(disconnect_after: int):
    """Disconnect probe reporting a disconnect on its N-th call."""
    calls = {"count": 0}

    async def is_disconnected() -> bool:
        calls["count"] += 1
        return calls["count"] > disconnect_after

    return is_disconnected


class TestFormatSse:
    def test_event_with_data(self) -> None:
        assert format_sse("endpoint", "https://h/messages") == (
            "event: endpoint\ndata: https://h/messages\n\n"
        )

    def test_event_without_data(self) -> None:
        assert format_sse("ping") == "event: ping\ndata: \n\n"

    def test_multiline_data(self) -> None:
        assert format_sse("x", "a\nb") == "event: x\ndata: a\ndata: b\n\n"


class TestSseSession:
    async def test_endpoint_event_precedes_pings(self) -> None:
        session = SseSession("https://gw.example.com/messages", _probe(3), keepalive_interval=0)
        events = [event async for event in session.events()]

        assert events[0] == "event: endpoint\ndata: https://gw.example.com/messages\n\n"
        assert events[1:] == ["event: ping\ndata: \n\n"] * 3

    async def test_endpoint_sent_exactly_once(self) -> None:
        session = SseSession("http://localhost/messages", _probe(5), keepalive_interval=0)
        events = [event async for event in session.events()]
        assert sum(e.startswith("event: endpoint") for e in events) == 1

    async def test_disconnect_before_first_tick(self) -> None:
        session = SseSession("http://localhost/messages", _probe(0), keepalive_interval=0)
        events = [event async for event in session.events()]
        assert events == ["event: endpoint\ndata: http://localhost/messages\n\n"]

    async def test_cancellation_ends_stream(self) -> None:
        session = SseSession("http://localhost/messages", _probe(10**6), keepalive_interval=60)
        received: list[str] = []

        async def consume() -> None:
            async for event in session.events():
                received.append(event)

        task = asyncio.create_task(consume())
        await asyncio.sleep(0.01)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert len(received) == 1
        assert received[0].startswith("event: endpoint")
