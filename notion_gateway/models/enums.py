"""Enumeration types for the Notion Gateway."""

from enum import StrEnum


class ToolName(StrEnum):
    """Available Notion tools."""

    SEARCH_NOTION = "search_notion"
    READ_PAGE = "read_page"
    WRITE_PAGE = "write_page"
    APPEND_CONTENT = "append_content"
    ADD_COMMENT = "add_comment"
    UPDATE_STATUS = "update_status"
    ARCHIVE_PAGE = "archive_page"
