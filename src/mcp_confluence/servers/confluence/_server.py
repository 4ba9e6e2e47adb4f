"""Confluence MCP server instance and shared utilities."""

import json
import logging
from typing import Any

from fastmcp import FastMCP

from mcp_confluence.exceptions import ToolValidationError
from mcp_confluence.models.base import ApiModel

logger = logging.getLogger("mcp-confluence.servers.confluence")

# FastMCP server instance
confluence_mcp = FastMCP(
    name="Confluence MCP Service",
    instructions=(
        "Provides tools for searching, reading and editing Confluence content. "
        "Only spaces on the configured allowlist are accessible."
    ),
)


def require_arguments(**arguments: Any) -> None:
    """Reject a tool call whose required arguments are missing or blank.

    Raises:
        ToolValidationError: Naming every missing argument
    """
    missing = [
        name
        for name, value in arguments.items()
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise ToolValidationError(
            f"Missing required argument(s): {', '.join(missing)}"
        )


def to_json(result: Any) -> str:
    """Serialize an adapter result as the tool's text response."""
    if isinstance(result, ApiModel):
        result = result.to_simplified_dict()
    return json.dumps(result, indent=2, ensure_ascii=False)
