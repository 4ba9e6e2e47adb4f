"""MCP server instances for the Confluence integration."""

from .main import build_app_context, main_lifespan, main_mcp

__all__ = ["build_app_context", "main_lifespan", "main_mcp"]
