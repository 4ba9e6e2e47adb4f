"""Logging setup for the Confluence MCP server."""

import logging
from typing import TextIO

LOGGER_NAME = "mcp-confluence"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.WARNING, stream: TextIO | None = None
) -> logging.Logger:
    """Configure the root logger and return the package logger.

    MCP servers speaking STDIO must keep stdout clean, so callers pass
    sys.stderr unless stdout logging was explicitly requested.

    Args:
        level: Logging level for the root logger
        stream: Stream the handler writes to (stderr when None)

    Returns:
        The "mcp-confluence" logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger
