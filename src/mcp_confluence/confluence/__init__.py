"""Confluence API integration module.

This module provides allowlist-restricted access to Confluence content
through the Model Context Protocol.
"""

from .client import ConfluenceClient
from .config import ConfluenceConfig
from .pages import PagesMixin
from .search import SearchMixin
from .space_cache import SpaceCache
from .spaces import SpacesMixin


class ConfluenceFetcher(SearchMixin, PagesMixin):
    """Main entry point for Confluence operations.

    Available mixins:
    - SearchMixin: CQL search operations
    - PagesMixin: Page operations (includes SpacesMixin space operations)
    """

    pass


__all__ = [
    "ConfluenceClient",
    "ConfluenceConfig",
    "ConfluenceFetcher",
    "PagesMixin",
    "SearchMixin",
    "SpaceCache",
    "SpacesMixin",
]
