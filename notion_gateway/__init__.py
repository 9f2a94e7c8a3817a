"""Notion Gateway - MCP and REST access to a Notion workspace."""

__version__ = "1.0.0"
