"""Dependency providers for ConfluenceFetcher with context awareness.

Provides get_confluence_fetcher for use in tool functions.
"""

from __future__ import annotations

import logging

from fastmcp import Context

from mcp_confluence.confluence import ConfluenceFetcher
from mcp_confluence.servers.context import MainAppContext

logger = logging.getLogger("mcp-confluence.servers.dependencies")


def get_app_context(ctx: Context) -> MainAppContext | None:
    """Return the MainAppContext stored by the server lifespan, if any."""
    lifespan_ctx_dict = ctx.request_context.lifespan_context  # type: ignore
    return (
        lifespan_ctx_dict.get("app_lifespan_context")
        if isinstance(lifespan_ctx_dict, dict)
        else None
    )


async def get_confluence_fetcher(ctx: Context) -> ConfluenceFetcher:
    """Returns a ConfluenceFetcher built from the lifespan context.

    The fetcher shares the context's space cache and audit logger, so cached
    spaces survive across tool calls.

    Args:
        ctx: The FastMCP context.

    Returns:
        ConfluenceFetcher instance for the configured site.

    Raises:
        ValueError: If Confluence is not configured.
    """
    logger.debug(f"get_confluence_fetcher: ENTERED. Context ID: {id(ctx)}")

    app_lifespan_ctx = get_app_context(ctx)

    if app_lifespan_ctx and app_lifespan_ctx.full_confluence_config:
        logger.debug(
            "get_confluence_fetcher: Using global configuration from lifespan_context "
            f"for {app_lifespan_ctx.full_confluence_config.base_url}"
        )
        return ConfluenceFetcher(
            config=app_lifespan_ctx.full_confluence_config,
            space_cache=app_lifespan_ctx.space_cache,
            audit_logger=app_lifespan_ctx.audit_logger,
        )

    logger.error("Confluence configuration could not be resolved.")
    raise ValueError(
        "Confluence client (fetcher) not available. Ensure server is configured correctly."
    )
