"""Confluence space tools - list_spaces, get_space_by_id, get_space_by_key, get_space_content."""

import logging
from typing import Annotated, Literal

from fastmcp import Context
from pydantic import Field

from mcp_confluence.servers.dependencies import get_confluence_fetcher
from mcp_confluence.utils.decorators import tool_error_boundary

from ._server import confluence_mcp, require_arguments, to_json

logger = logging.getLogger(__name__)


@confluence_mcp.tool(tags={"confluence", "read"})
@tool_error_boundary
async def list_spaces(
    ctx: Context,
    limit: Annotated[
        int,
        Field(description="Maximum results (default: 50)", ge=1),
    ] = 50,
    cursor: Annotated[
        str | None,
        Field(description="Optional: Cursor from the previous response's _links.next"),
    ] = None,
) -> str:
    """List accessible Confluence spaces (filtered by allowed spaces).

    Args:
        ctx: The FastMCP context.
        limit: Maximum number of spaces to request.
        cursor: Optional pagination cursor.

    Returns:
        JSON with results, limit, size (allowed spaces only) and _links.
    """
    confluence_fetcher = await get_confluence_fetcher(ctx)
    return to_json(confluence_fetcher.list_spaces(limit=limit, cursor=cursor))


@confluence_mcp.tool(tags={"confluence", "read"})
@tool_error_boundary
async def get_space_by_id(
    ctx: Context,
    spaceId: Annotated[  # noqa: N803 - tool argument names are camelCase
        str,
        Field(description="Space ID"),
    ],
) -> str:
    """Get a Confluence space by its ID.

    Args:
        ctx: The FastMCP context.
        spaceId: The internal space ID.

    Returns:
        JSON of the space.
    """
    require_arguments(spaceId=spaceId)

    confluence_fetcher = await get_confluence_fetcher(ctx)
    return to_json(confluence_fetcher.get_space_by_id(spaceId))


@confluence_mcp.tool(tags={"confluence", "read"})
@tool_error_boundary
async def get_space_by_key(
    ctx: Context,
    spaceKey: Annotated[  # noqa: N803
        str,
        Field(description="Space key"),
    ],
) -> str:
    """Get a Confluence space by its key.

    Args:
        ctx: The FastMCP context.
        spaceKey: The space key.

    Returns:
        JSON of the space.
    """
    require_arguments(spaceKey=spaceKey)

    confluence_fetcher = await get_confluence_fetcher(ctx)
    return to_json(confluence_fetcher.get_space_by_key(spaceKey))


@confluence_mcp.tool(tags={"confluence", "read"})
@tool_error_boundary
async def get_space_content(
    ctx: Context,
    spaceKey: Annotated[  # noqa: N803
        str,
        Field(description="Space key"),
    ],
    limit: Annotated[
        int,
        Field(description="Maximum results (default: 25)", ge=1),
    ] = 25,
    start: Annotated[
        int,
        Field(description="Offset of the first result (default: 0)", ge=0),
    ] = 0,
    bodyFormat: Annotated[  # noqa: N803
        Literal["storage", "view"] | None,
        Field(description="Optional: Include page bodies in 'storage' or 'view' format"),
    ] = None,
) -> str:
    """Get pages from a specific space.

    Args:
        ctx: The FastMCP context.
        spaceKey: The space key.
        limit: Maximum number of pages.
        start: Offset for pagination.
        bodyFormat: Optional body representation to include.

    Returns:
        JSON with results, limit, size and _links.
    """
    require_arguments(spaceKey=spaceKey)

    confluence_fetcher = await get_confluence_fetcher(ctx)
    result = confluence_fetcher.get_space_content(
        spaceKey, limit=limit, start=start, body_format=bodyFormat
    )
    return to_json(result)
