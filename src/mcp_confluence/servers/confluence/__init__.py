"""Confluence MCP server package.

This package contains the Confluence MCP server and tools organized into modules:
- _server.py: FastMCP instance and shared utilities
- search.py: Search tool (search_confluence)
- pages.py: Page tools (get_page, create_page, update_page, delete_page,
  move_page, get_page_children)
- spaces.py: Space tools (list_spaces, get_space_by_id, get_space_by_key,
  get_space_content)
"""

# Import all tool modules to register them with confluence_mcp
from . import pages, search, spaces

# Export the MCP server instance
from ._server import confluence_mcp

from .pages import (
    create_page,
    delete_page,
    get_page,
    get_page_children,
    move_page,
    update_page,
)
from .search import search_confluence
from .spaces import get_space_by_id, get_space_by_key, get_space_content, list_spaces

__all__ = [
    "confluence_mcp",
    # Search tools
    "search_confluence",
    # Page tools
    "get_page",
    "create_page",
    "update_page",
    "delete_page",
    "move_page",
    "get_page_children",
    # Space tools
    "list_spaces",
    "get_space_by_id",
    "get_space_by_key",
    "get_space_content",
]
