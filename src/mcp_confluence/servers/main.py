"""Main FastMCP server setup for the Confluence integration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastmcp import FastMCP

from mcp_confluence.confluence.config import ConfluenceConfig
from mcp_confluence.confluence.space_cache import SpaceCache
from mcp_confluence.utils.request_logging import RequestAuditLogger

from .confluence import confluence_mcp
from .context import MainAppContext

logger = logging.getLogger("mcp-confluence.server.main")


def build_app_context(config: ConfluenceConfig) -> MainAppContext:
    """Create the shared per-process state for a loaded configuration."""
    return MainAppContext(
        full_confluence_config=config,
        space_cache=SpaceCache(config.space_cache_ttl),
        audit_logger=RequestAuditLogger(config.log_file, config.log_max_size_bytes),
    )


@asynccontextmanager
async def main_lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[dict]:
    logger.info("Main Confluence MCP server lifespan starting...")

    # Missing settings are fatal: the server must not start half-configured
    confluence_config = ConfluenceConfig.from_env()
    app_context = build_app_context(confluence_config)

    logger.info(f"Connected to: {confluence_config.base_url}")
    logger.info(f"Allowed spaces: {', '.join(confluence_config.allowed_spaces)}")
    if confluence_config.debug:
        logger.info("Debug mode: ENABLED")

    try:
        yield {"app_lifespan_context": app_context}
    except Exception as e:
        logger.error(f"Error during lifespan: {e}", exc_info=True)
        raise
    finally:
        logger.info("Main Confluence MCP server lifespan shutdown complete.")


main_mcp = FastMCP(name="Confluence MCP", lifespan=main_lifespan)
main_mcp.mount(confluence_mcp)
