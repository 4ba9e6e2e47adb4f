"""Module for Confluence space operations."""

import logging
from typing import Any

from ..exceptions import SpaceNotFoundError
from ..models.confluence import ConfluencePaginatedResult
from ..models.constants import (
    DEFAULT_CONTENT_LIMIT,
    DEFAULT_SPACE_LIMIT,
    DEFAULT_START,
    SPACE_LOOKUP_PAGE_SIZE,
)
from ..utils.decorators import handle_atlassian_api_errors
from .client import ConfluenceClient
from .endpoints import api_path
from .utils import cursor_from_link

logger = logging.getLogger("mcp-confluence.confluence.spaces")


class SpacesMixin(ConfluenceClient):
    """Mixin for Confluence space operations."""

    @handle_atlassian_api_errors("Confluence API")
    def list_spaces(
        self, limit: int = DEFAULT_SPACE_LIMIT, cursor: str | None = None
    ) -> ConfluencePaginatedResult:
        """
        List one page of spaces, keeping only allowlisted ones.

        Every returned space is added to the space cache.

        Args:
            limit: Maximum number of spaces to request
            cursor: Cursor from a previous response's ``_links.next``

        Returns:
            ConfluencePaginatedResult whose size is the filtered count
        """
        params: dict[str, Any] = {"limit": limit}
        if cursor:
            params["cursor"] = cursor

        response = self.confluence.get(api_path("list_spaces", "spaces"), params=params)
        response = response or {}

        raw_spaces = response.get("results") or []
        allowed = [
            space for space in raw_spaces if self.config.is_space_allowed(space.get("key"))
        ]
        for space in allowed:
            self.space_cache.put(space)

        logger.debug(f"Listed {len(raw_spaces)} spaces, {len(allowed)} allowed")
        return ConfluencePaginatedResult.from_api_response(
            response, results=allowed, limit=limit
        )

    def get_space_by_key(self, space_key: str) -> dict[str, Any]:
        """
        Resolve a space key to its descriptor.

        The v2 API has no lookup by key, so on a cache miss the space list is
        paged through until the key is found.

        Raises:
            SpaceAccessDeniedError: If the key is not in the allowlist
            SpaceNotFoundError: If no space with that key exists
        """
        self._require_space_access(space_key)

        cached = self.space_cache.get(space_key)
        if cached is not None:
            logger.debug(f"Space cache hit for '{space_key}'")
            return cached

        cursor: str | None = None
        while True:
            page = self.list_spaces(limit=SPACE_LOOKUP_PAGE_SIZE, cursor=cursor)
            for space in page.results:
                if space.get("key") == space_key:
                    self.space_cache.put(space)
                    return space

            cursor = cursor_from_link(page.links.get("next"))
            if not cursor:
                break

        raise SpaceNotFoundError(f"Space not found: {space_key}")

    @handle_atlassian_api_errors("Confluence API")
    def get_space_by_id(self, space_id: str) -> dict[str, Any]:
        """
        Fetch a space by its internal identifier.

        Access is validated on the returned key, since the allowlist only
        holds keys.

        Raises:
            SpaceAccessDeniedError: If the space's key is not in the allowlist
        """
        cached = self.space_cache.get_by_id(space_id)
        if cached is not None:
            return cached

        space = self.confluence.get(api_path("get_space_by_id", "spaces", space_id)) or {}
        self._require_space_access(space.get("key"))
        self.space_cache.put(space)
        return space

    @handle_atlassian_api_errors("Confluence API")
    def get_space_content(
        self,
        space_key: str,
        limit: int = DEFAULT_CONTENT_LIMIT,
        start: int = DEFAULT_START,
        body_format: str | None = None,
    ) -> ConfluencePaginatedResult:
        """
        List pages of a space, optionally with their bodies.

        Args:
            space_key: Key of the space to list
            limit: Maximum number of pages to return
            start: Offset passed through to the listing request
            body_format: "storage" or "view" to attach page bodies

        Raises:
            SpaceAccessDeniedError: If the key is not in the allowlist
        """
        self._require_space_access(space_key)
        space = self.get_space_by_key(space_key)

        params: dict[str, Any] = {"limit": limit}
        if start:
            params["start"] = start
        response = self.confluence.get(
            api_path("get_space_content", "spaces", str(space["id"]), "pages"),
            params=params,
        )
        response = response or {}

        pages = self._attach_bodies(list(response.get("results") or []), body_format)
        return ConfluencePaginatedResult.from_api_response(
            response, results=pages, start=start, limit=limit
        )
