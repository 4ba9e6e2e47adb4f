"""Utility helpers for the Confluence MCP server."""

from .env import is_env_truthy
from .logging import setup_logging
from .request_logging import RequestAuditLogger, install_request_logging

__all__ = [
    "RequestAuditLogger",
    "install_request_logging",
    "is_env_truthy",
    "setup_logging",
]
