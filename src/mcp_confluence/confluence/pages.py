"""Module for Confluence page operations."""

import logging
from typing import Any

from ..exceptions import SpaceAccessDeniedError
from ..models.confluence import ConfluencePaginatedResult
from ..models.constants import BODY_FORMAT_STORAGE, DEFAULT_CONTENT_LIMIT, DEFAULT_START
from ..utils.decorators import handle_atlassian_api_errors
from .endpoints import api_path
from .spaces import SpacesMixin
from .utils import body_expand

logger = logging.getLogger("mcp-confluence.confluence.pages")


class PagesMixin(SpacesMixin):
    """Mixin for Confluence page operations.

    Every write re-reads the page first so access is checked against the
    page's current space, not a caller-supplied one.
    """

    @handle_atlassian_api_errors("Confluence API")
    def get_page(self, page_id: str, body_format: str | None = None) -> dict[str, Any]:
        """
        Get a page by ID, validating that its space is allowlisted.

        Args:
            page_id: The ID of the page to retrieve
            body_format: "storage" or "view" to include the body

        Returns:
            The page as returned by the v1 content API

        Raises:
            SpaceAccessDeniedError: If the page's space cannot be determined
                or is not in the allowlist
        """
        expand = ["space", "version"]
        body = body_expand(body_format)
        if body:
            expand.append(body)

        logger.debug(f"Getting page '{page_id}' (expand={','.join(expand)})")
        page = self.confluence.get(
            api_path("get_page", "content", page_id),
            params={"expand": ",".join(expand)},
        ) or {}

        if not self._space_key_of(page):
            # Some content types omit the space on the first expansion
            logger.debug(f"Page '{page_id}' has no space info, fetching it separately")
            space_only = self.confluence.get(
                api_path("get_page", "content", page_id),
                params={"expand": "space"},
            ) or {}
            if space_only.get("space"):
                page["space"] = space_only["space"]

        space_key = self._space_key_of(page)
        if not space_key:
            raise SpaceAccessDeniedError(
                "Unable to determine page space for access validation"
            )
        self._require_space_access(space_key)
        return page

    @handle_atlassian_api_errors("Confluence API")
    def create_page(
        self,
        space_key: str,
        title: str,
        content: str,
        parent_id: str | None = None,
    ) -> dict[str, Any]:
        """
        Create a new page in an allowlisted space.

        Args:
            space_key: The key of the space to create the page in
            title: The title of the new page
            content: The page body in storage format
            parent_id: Optional ID of a parent page

        Returns:
            The created page, including its new ID and version 1

        Raises:
            SpaceAccessDeniedError: If space_key is not in the allowlist
            SpaceNotFoundError: If the space does not exist
        """
        self._require_space_access(space_key)

        # v2 addresses spaces by internal ID, not key
        space = self.get_space_by_key(space_key)
        space_id = space.get("id")
        if not space_id:
            raise ValueError(f"Unable to get space ID for space: {space_key}")

        page_data: dict[str, Any] = {
            "spaceId": space_id,
            "status": "current",
            "title": title,
            "body": {"representation": BODY_FORMAT_STORAGE, "value": content},
        }
        if parent_id:
            page_data["parentId"] = parent_id

        logger.debug(f"Creating page '{title}' in space '{space_key}'")
        page = self.confluence.post(api_path("create_page", "pages"), data=page_data)
        logger.info(f"Created page {page.get('id') if page else None} in {space_key}")
        return page

    @handle_atlassian_api_errors("Confluence API")
    def update_page(
        self, page_id: str, title: str, content: str, version: int
    ) -> dict[str, Any]:
        """
        Replace a page's title and body.

        ``version`` is sent as-is. If it does not match what Confluence
        expects, the resulting conflict error is raised to the caller; the
        write is never retried with a refreshed version.

        Args:
            page_id: The ID of the page to update
            title: The new title of the page
            content: The new body in storage format
            version: Version number for this write

        Returns:
            The updated page

        Raises:
            SpaceAccessDeniedError: If the page's space is not in the allowlist
            HTTPError: If Confluence rejects the write (e.g. version conflict)
        """
        self.get_page(page_id)

        update_data = {
            "id": page_id,
            "status": "current",
            "title": title,
            "version": {"number": version},
            "body": {"representation": BODY_FORMAT_STORAGE, "value": content},
        }

        logger.debug(f"Updating page {page_id} with title '{title}' (version {version})")
        return self.confluence.put(api_path("update_page", "pages", page_id), data=update_data)

    @handle_atlassian_api_errors("Confluence API")
    def delete_page(self, page_id: str) -> dict[str, Any]:
        """
        Delete a page after validating access to its space.

        Returns:
            A confirmation dict with the page ID
        """
        self.get_page(page_id)

        logger.debug(f"Deleting page {page_id}")
        self.confluence.delete(api_path("delete_page", "pages", page_id))
        logger.info(f"Deleted page {page_id}")
        return {"pageId": page_id, "deleted": True}

    @handle_atlassian_api_errors("Confluence API")
    def move_page(
        self,
        page_id: str,
        target_space_key: str,
        parent_id: str | None = None,
    ) -> dict[str, Any]:
        """
        Move a page to another space and/or parent.

        Source and target spaces are validated independently, so pages can
        neither leave nor enter a space outside the allowlist.

        The v1 content PUT requires the next version number, so the payload
        carries the current version + 1.

        Args:
            page_id: The ID of the page to move
            target_space_key: Key of the destination space
            parent_id: Optional ID of the new parent page

        Returns:
            The moved page

        Raises:
            SpaceAccessDeniedError: If either space is not in the allowlist
        """
        page = self.get_page(page_id)
        self._require_space_access(self._space_key_of(page), "source space")
        self._require_space_access(target_space_key, "target space")

        current_version = (page.get("version") or {}).get("number", 0)
        move_data: dict[str, Any] = {
            "version": {"number": current_version + 1},
            "title": page.get("title"),
            "type": "page",
            "space": {"key": target_space_key},
        }
        if parent_id:
            move_data["ancestors"] = [{"id": parent_id}]

        logger.debug(
            f"Moving page {page_id} to space {target_space_key}"
            + (f" under {parent_id}" if parent_id else "")
        )
        return self.confluence.put(api_path("move_page", "content", page_id), data=move_data)

    @handle_atlassian_api_errors("Confluence API")
    def get_page_children(
        self,
        page_id: str,
        limit: int = DEFAULT_CONTENT_LIMIT,
        start: int = DEFAULT_START,
        body_format: str | None = None,
    ) -> ConfluencePaginatedResult:
        """
        List child pages of a page, optionally with their bodies.

        Args:
            page_id: The ID of the parent page
            limit: Maximum number of children to return
            start: Offset passed through to the listing request
            body_format: "storage" or "view" to attach page bodies

        Raises:
            SpaceAccessDeniedError: If the parent's space is not in the allowlist
        """
        self.get_page(page_id)

        params: dict[str, Any] = {"limit": limit}
        if start:
            params["start"] = start
        response = self.confluence.get(
            api_path("get_page_children", "pages", page_id, "children"),
            params=params,
        )
        response = response or {}

        children = self._attach_bodies(list(response.get("results") or []), body_format)
        return ConfluencePaginatedResult.from_api_response(
            response, results=children, start=start, limit=limit
        )
