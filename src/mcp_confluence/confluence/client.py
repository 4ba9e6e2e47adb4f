"""Base client module for Confluence API interactions."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from atlassian import Confluence

from ..exceptions import SpaceAccessDeniedError
from ..models.constants import BODY_ENRICHMENT_MAX_WORKERS
from ..utils.request_logging import RequestAuditLogger, install_request_logging
from .config import ConfluenceConfig
from .endpoints import api_path
from .space_cache import SpaceCache
from .utils import body_expand

logger = logging.getLogger("mcp-confluence.confluence.client")


class ConfluenceClient:
    """Base client for Confluence API interactions.

    Owns the authenticated HTTP client, the audit logger attached to it and
    the space cache shared with other clients built from the same context.
    """

    def __init__(
        self,
        config: ConfluenceConfig | None = None,
        space_cache: SpaceCache | None = None,
        audit_logger: RequestAuditLogger | None = None,
    ) -> None:
        """Initialize the Confluence client with given or environment config.

        Args:
            config: Configuration for Confluence client. If None, will load from
                environment.
            space_cache: Shared space cache. A private one is created when None.
            audit_logger: Destination for request/response audit lines. Built
                from the configured log file when None.

        Raises:
            ConfigurationError: If configuration is invalid or missing
        """
        self.config = config or ConfluenceConfig.from_env()
        # An empty SpaceCache is falsy, so test for None explicitly
        self.space_cache = (
            space_cache
            if space_cache is not None
            else SpaceCache(self.config.space_cache_ttl)
        )
        self.audit_logger = (
            audit_logger
            if audit_logger is not None
            else RequestAuditLogger(self.config.log_file, self.config.log_max_size_bytes)
        )

        logger.debug(
            f"Initializing Confluence client for {self.config.wiki_url} "
            f"(timeout={self.config.timeout}s, ssl_verify={self.config.ssl_verify})"
        )
        # Basic credentials are encoded once here and reused for every call
        self.confluence = Confluence(
            url=self.config.wiki_url,
            username=self.config.username,
            password=self.config.api_token,
            cloud=True,
            timeout=self.config.timeout,
            verify_ssl=self.config.ssl_verify,
        )
        install_request_logging(self.confluence.session, self.audit_logger)

    def _require_space_access(self, space_key: str | None, label: str = "space") -> None:
        """Raise SpaceAccessDeniedError unless ``space_key`` is allowlisted."""
        if not self.config.is_space_allowed(space_key):
            logger.warning(f"Denied access to {label} '{space_key}'")
            raise SpaceAccessDeniedError(f"Access denied to {label}: {space_key}")

    @staticmethod
    def _space_key_of(content: dict[str, Any]) -> str | None:
        space = content.get("space") or {}
        return space.get("key")

    def _fetch_body(self, page: dict[str, Any], expand: str) -> dict[str, Any]:
        try:
            content = self.confluence.get(
                api_path("enrich_body", "content", str(page["id"])),
                params={"expand": expand},
            )
            if content and content.get("body"):
                page["body"] = content["body"]
        except Exception as e:  # noqa: BLE001 - a missing body must not fail the listing
            logger.warning(
                f"Failed to retrieve body content for page {page.get('id')}: {e}"
            )
        return page

    def _attach_bodies(
        self, pages: list[dict[str, Any]], body_format: str | None
    ) -> list[dict[str, Any]]:
        """Attach body content to v2 listing entries via the v1 content API.

        One request per page, issued concurrently. A failed request leaves
        that page without a body.
        """
        expand = body_expand(body_format)
        if not expand or not pages:
            return pages

        expand = f"{expand},version,space"
        max_workers = min(BODY_ENRICHMENT_MAX_WORKERS, len(pages))
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(lambda page: self._fetch_body(page, expand), pages))
