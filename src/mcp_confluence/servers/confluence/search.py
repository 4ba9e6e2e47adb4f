"""Confluence search tool - search_confluence."""

import logging
from typing import Annotated, Literal

from fastmcp import Context
from pydantic import Field

from mcp_confluence.exceptions import ToolValidationError
from mcp_confluence.servers.dependencies import get_confluence_fetcher
from mcp_confluence.utils.decorators import tool_error_boundary

from ._server import confluence_mcp, to_json

logger = logging.getLogger(__name__)


@confluence_mcp.tool(tags={"confluence", "read"})
@tool_error_boundary
async def search_confluence(
    ctx: Context,
    query: Annotated[
        str | None,
        Field(description="Search query for content text"),
    ] = None,
    title: Annotated[
        str | None,
        Field(description="Search query for page titles"),
    ] = None,
    spaceKey: Annotated[  # noqa: N803 - tool argument names are camelCase
        str | None,
        Field(description="Optional: Limit search to a specific space"),
    ] = None,
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
    """Search for content across allowed Confluence spaces by text and/or title.

    At least one of `query` or `title` is required. Without `spaceKey` the
    search covers every allowed space.

    Args:
        ctx: The FastMCP context.
        query: Text to match in page content.
        title: Text to match in page titles.
        spaceKey: Optional space to restrict the search to.
        limit: Maximum number of results.
        start: Offset for pagination.
        bodyFormat: Optional body representation to include.

    Returns:
        JSON with content, start, limit, size and _links.
    """
    if not query and not title:
        raise ToolValidationError('At least one of "query" or "title" must be provided')

    confluence_fetcher = await get_confluence_fetcher(ctx)
    result = confluence_fetcher.search(
        query=query,
        title=title,
        space_key=spaceKey,
        limit=limit,
        start=start,
        body_format=bodyFormat,
    )
    return to_json(result)
