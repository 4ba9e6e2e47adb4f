"""
Pydantic models for Confluence API responses.

Entities (pages and spaces) are passed through as the raw JSON returned by
Confluence; the models here normalize the paginated envelopes around them.
"""

from .base import ApiModel
from .confluence import ConfluencePaginatedResult, ConfluenceSearchResult
from .constants import (  # noqa: F401 - Keep constants available
    DEFAULT_CONTENT_LIMIT,
    DEFAULT_SPACE_LIMIT,
    DEFAULT_START,
    REDACTED,
)

__all__ = [
    "ApiModel",
    "ConfluencePaginatedResult",
    "ConfluenceSearchResult",
    "DEFAULT_CONTENT_LIMIT",
    "DEFAULT_SPACE_LIMIT",
    "DEFAULT_START",
    "REDACTED",
]
