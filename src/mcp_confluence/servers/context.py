from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_confluence.confluence.config import ConfluenceConfig
    from mcp_confluence.confluence.space_cache import SpaceCache
    from mcp_confluence.utils.request_logging import RequestAuditLogger


@dataclass(frozen=True)
class MainAppContext:
    """
    Context holding the Confluence configuration loaded at server startup,
    together with the state shared by every tool call: the space cache and
    the audit logger. Passed explicitly to each ConfluenceFetcher instead of
    living in module globals.
    """

    full_confluence_config: ConfluenceConfig | None = None
    space_cache: SpaceCache | None = None
    audit_logger: RequestAuditLogger | None = None
