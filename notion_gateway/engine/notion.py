"""Async client for the Notion REST API.

A client is scoped to a single credential and is meant to be created
fresh for each tool call and closed afterwards:

    async with NotionClient(token) as client:
        hits = await client.search("roadmap")

Every failure (non-2xx response or transport error) is raised as
BackendError carrying the Notion error message.
"""

import logging
from typing import Any

import httpx

from ..errors import BackendError
from ..models import SearchHit

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.notion.com/v1"
DEFAULT_NOTION_VERSION = "2022-06-28"

SEARCH_PAGE_SIZE = 5
READ_PAGE_SIZE = 100
UNTITLED = "Untitled"


def _rich_text(content: str) -> list[dict[str, Any]]:
    return [{"type": "text", "text": {"content": content}}]


def _paragraph(content: str) -> dict[str, Any]:
    return {
        "object": "block",
        "type": "paragraph",
        "paragraph": {"rich_text": _rich_text(content)},
    }


def _first_plain_text(items: Any) -> str | None:
    if isinstance(items, list) and items:
        first = items[0]
        if isinstance(first, dict):
            return first.get("plain_text") or None
    return None


def extract_title(result: dict[str, Any]) -> str:
    """Pull a display title out of a search result.

    Pages in a database usually carry a "Name" title property, standalone
    pages a "title" property, and databases a top-level title array.
    """
    properties = result.get("properties") or {}
    for key in ("Name", "title"):
        prop = properties.get(key)
        if isinstance(prop, dict):
            title = _first_plain_text(prop.get("title"))
            if title:
                return title
    return _first_plain_text(result.get("title")) or UNTITLED


def extract_block_text(block: dict[str, Any]) -> str:
    """Concatenate the plain text of a block's rich_text (empty if none)."""
    body = block.get(block.get("type", ""))
    if not isinstance(body, dict):
        return ""
    return "".join(part.get("plain_text", "") for part in body.get("rich_text") or [])


class NotionClient:
    """Credential-scoped Notion API client."""

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_API_URL,
        notion_version: str = DEFAULT_NOTION_VERSION,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/") + "/",
            headers={
                "Authorization": f"Bearer {token}",
                "Notion-Version": notion_version,
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "NotionClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        try:
            response = await self._http.request(method, path, json=json, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"Notion request {method} {path} failed: {e}")
            raise BackendError(str(e) or type(e).__name__) from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.is_success:
            if not isinstance(payload, dict):
                logger.warning(f"Notion request {method} {path} returned a non-object body")
                raise BackendError(
                    "Notion returned an invalid response", status=response.status_code
                )
            return payload

        if not isinstance(payload, dict):
            payload = {}
        message = payload.get("message") or f"Notion API returned HTTP {response.status_code}"
        logger.warning(
            f"Notion request {method} {path} returned {response.status_code}: {message}"
        )
        raise BackendError(message, status=response.status_code, code=payload.get("code"))

    # ============ OPERATIONS ============

    async def search(self, query: str) -> list[SearchHit]:
        """Search pages and databases, most recently edited first."""
        data = await self._request(
            "POST",
            "search",
            json={
                "query": query,
                "page_size": SEARCH_PAGE_SIZE,
                "sort": {"direction": "descending", "timestamp": "last_edited_time"},
            },
        )
        hits = []
        for item in data.get("results", []):
            if not item.get("id"):
                raise BackendError("Notion returned a search result without an id")
            hits.append(SearchHit(id=item["id"], title=extract_title(item)))
        return hits

    async def read_content(self, block_id: str) -> list[str]:
        """Return one text fragment per child block of a page."""
        data = await self._request(
            "GET", f"blocks/{block_id}/children", params={"page_size": READ_PAGE_SIZE}
        )
        return [extract_block_text(block) for block in data.get("results", [])]

    async def create_entry(self, database_id: str, title: str, content: str) -> dict[str, Any]:
        """Create a page in a database with a title and one paragraph."""
        return await self._request(
            "POST",
            "pages",
            json={
                "parent": {"database_id": database_id},
                "properties": {"title": {"title": _rich_text(title)}},
                "children": [_paragraph(content)],
            },
        )

    async def append_content(self, block_id: str, content: str) -> dict[str, Any]:
        """Append a paragraph to the bottom of a page."""
        return await self._request(
            "PATCH",
            f"blocks/{block_id}/children",
            json={"children": [_paragraph(content)]},
        )

    async def add_comment(self, page_id: str, text: str) -> dict[str, Any]:
        return await self._request(
            "POST",
            "comments",
            json={"parent": {"page_id": page_id}, "rich_text": _rich_text(text)},
        )

    async def update_property(self, page_id: str, property_name: str, value: str) -> dict[str, Any]:
        """Set a status-type property to the named option."""
        return await self._request(
            "PATCH",
            f"pages/{page_id}",
            json={"properties": {property_name: {"status": {"name": value}}}},
        )

    async def archive(self, page_id: str) -> dict[str, Any]:
        return await self._request("PATCH", f"pages/{page_id}", json={"archived": True})
