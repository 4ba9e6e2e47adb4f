"""Exceptions raised by the Confluence MCP server."""


class MCPConfluenceError(Exception):
    """Base class for errors raised by mcp-confluence."""


class ConfigurationError(MCPConfluenceError, ValueError):
    """Raised when a required setting is missing or invalid."""


class SpaceAccessDeniedError(MCPConfluenceError):
    """Raised when an operation targets a space outside the allowlist."""


class SpaceNotFoundError(MCPConfluenceError):
    """Raised when a space key cannot be resolved to a space."""


class ToolValidationError(MCPConfluenceError, ValueError):
    """Raised when a tool call is missing a required argument."""


class MCPConfluenceAuthenticationError(MCPConfluenceError):
    """Raised when Confluence rejects the configured credentials (401/403)."""
