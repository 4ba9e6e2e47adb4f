"""Confluence page tools - get, create, update, delete, move and list children."""

import logging
from typing import Annotated, Literal

from fastmcp import Context
from pydantic import Field

from mcp_confluence.servers.dependencies import get_confluence_fetcher
from mcp_confluence.utils.decorators import tool_error_boundary

from ._server import confluence_mcp, require_arguments, to_json

logger = logging.getLogger(__name__)

BodyFormat = Literal["storage", "view"]


@confluence_mcp.tool(tags={"confluence", "read"})
@tool_error_boundary
async def get_page(
    ctx: Context,
    pageId: Annotated[  # noqa: N803 - tool argument names are camelCase
        str,
        Field(description="Confluence page ID"),
    ],
    bodyFormat: Annotated[  # noqa: N803
        BodyFormat | None,
        Field(description="Optional: Include the body in 'storage' or 'view' format"),
    ] = None,
) -> str:
    """Retrieve a specific Confluence page by ID.

    The page's space must be on the allowlist.

    Args:
        ctx: The FastMCP context.
        pageId: The page ID.
        bodyFormat: Optional body representation to include.

    Returns:
        JSON of the page with space and version information.
    """
    require_arguments(pageId=pageId)

    confluence_fetcher = await get_confluence_fetcher(ctx)
    return to_json(confluence_fetcher.get_page(pageId, body_format=bodyFormat))


@confluence_mcp.tool(tags={"confluence", "write"})
@tool_error_boundary
async def create_page(
    ctx: Context,
    spaceKey: Annotated[  # noqa: N803
        str,
        Field(description="Target space key"),
    ],
    title: Annotated[
        str,
        Field(description="Page title"),
    ],
    content: Annotated[
        str,
        Field(description="Page content (HTML or storage format)"),
    ],
    parentId: Annotated[  # noqa: N803
        str | None,
        Field(description="Optional: Parent page ID"),
    ] = None,
) -> str:
    """Create a new Confluence page.

    Args:
        ctx: The FastMCP context.
        spaceKey: Key of an allowed space.
        title: Title of the new page.
        content: Body in storage format.
        parentId: Optional parent page ID.

    Returns:
        JSON of the created page, including its ID and version.
    """
    require_arguments(spaceKey=spaceKey, title=title, content=content)

    confluence_fetcher = await get_confluence_fetcher(ctx)
    page = confluence_fetcher.create_page(spaceKey, title, content, parent_id=parentId)
    return to_json(page)


@confluence_mcp.tool(tags={"confluence", "write"})
@tool_error_boundary
async def update_page(
    ctx: Context,
    pageId: Annotated[  # noqa: N803
        str,
        Field(description="Page ID to update"),
    ],
    title: Annotated[
        str,
        Field(description="New page title"),
    ],
    content: Annotated[
        str,
        Field(description="New page content"),
    ],
    version: Annotated[
        int,
        Field(description="Version number for this update (required for updates)"),
    ],
) -> str:
    """Update an existing Confluence page.

    The version number is sent unchanged. If the page was modified since it
    was read, Confluence rejects the update with a conflict error; re-read
    the page and try again.

    Args:
        ctx: The FastMCP context.
        pageId: The page ID.
        title: New title.
        content: New body in storage format.
        version: Version number for this update.

    Returns:
        JSON of the updated page.
    """
    require_arguments(pageId=pageId, title=title, content=content, version=version)

    confluence_fetcher = await get_confluence_fetcher(ctx)
    return to_json(confluence_fetcher.update_page(pageId, title, content, version))


@confluence_mcp.tool(tags={"confluence", "write"})
@tool_error_boundary
async def delete_page(
    ctx: Context,
    pageId: Annotated[  # noqa: N803
        str,
        Field(description="Page ID to delete"),
    ],
) -> str:
    """Delete a Confluence page.

    Args:
        ctx: The FastMCP context.
        pageId: The page ID.

    Returns:
        JSON confirming the deletion.
    """
    require_arguments(pageId=pageId)

    confluence_fetcher = await get_confluence_fetcher(ctx)
    return to_json(confluence_fetcher.delete_page(pageId))


@confluence_mcp.tool(tags={"confluence", "write"})
@tool_error_boundary
async def move_page(
    ctx: Context,
    pageId: Annotated[  # noqa: N803
        str,
        Field(description="Page ID to move"),
    ],
    targetSpaceKey: Annotated[  # noqa: N803
        str,
        Field(description="Target space key to move the page to"),
    ],
    parentId: Annotated[  # noqa: N803
        str | None,
        Field(description="Optional: New parent page ID in the target space"),
    ] = None,
) -> str:
    """Move a Confluence page to a different space or parent.

    Both the current and the target space must be on the allowlist.

    Args:
        ctx: The FastMCP context.
        pageId: The page ID.
        targetSpaceKey: Destination space key.
        parentId: Optional new parent page ID.

    Returns:
        JSON of the moved page.
    """
    require_arguments(pageId=pageId, targetSpaceKey=targetSpaceKey)

    confluence_fetcher = await get_confluence_fetcher(ctx)
    page = confluence_fetcher.move_page(pageId, targetSpaceKey, parent_id=parentId)
    return to_json(page)


@confluence_mcp.tool(tags={"confluence", "read"})
@tool_error_boundary
async def get_page_children(
    ctx: Context,
    pageId: Annotated[  # noqa: N803
        str,
        Field(description="Parent page ID"),
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
        BodyFormat | None,
        Field(description="Optional: Include page bodies in 'storage' or 'view' format"),
    ] = None,
) -> str:
    """Get child pages of a specific page.

    Args:
        ctx: The FastMCP context.
        pageId: The parent page ID.
        limit: Maximum number of children.
        start: Offset for pagination.
        bodyFormat: Optional body representation to include.

    Returns:
        JSON with results, limit, size and _links.
    """
    require_arguments(pageId=pageId)

    confluence_fetcher = await get_confluence_fetcher(ctx)
    result = confluence_fetcher.get_page_children(
        pageId, limit=limit, start=start, body_format=bodyFormat
    )
    return to_json(result)
