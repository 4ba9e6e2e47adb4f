"""
Result models for Confluence listing and search operations.

Two pagination styles coexist: the legacy v1 API returns offset-based
results (``start``/``limit``/``size``) while the v2 API returns a cursor in
``_links.next``. Both shapes are normalized here so every tool returns the
same top-level keys.
"""

from typing import Any

from pydantic import Field

from .base import ApiModel


class ConfluenceSearchResult(ApiModel):
    """A page of CQL search results from the v1 search endpoint."""

    content: list[dict[str, Any]] = Field(default_factory=list)
    start: int = 0
    limit: int = 0
    size: int = 0
    links: dict[str, Any] = Field(default_factory=dict, alias="_links")

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceSearchResult":
        results = data.get("results") or []
        return cls(
            content=results,
            start=data.get("start", kwargs.get("start", 0)),
            limit=data.get("limit", kwargs.get("limit", 0)),
            size=data.get("size", len(results)),
            links=data.get("_links") or {},
        )


class ConfluencePaginatedResult(ApiModel):
    """A page of spaces or pages from either API version.

    ``size`` is always the number of entries actually returned, which for
    allowlist-filtered listings differs from the remote count.
    """

    results: list[dict[str, Any]] = Field(default_factory=list)
    start: int | None = None
    limit: int = 0
    size: int = 0
    links: dict[str, Any] = Field(default_factory=dict, alias="_links")

    @classmethod
    def from_api_response(
        cls,
        data: dict[str, Any],
        *,
        results: list[dict[str, Any]] | None = None,
        start: int | None = None,
        limit: int = 0,
        **kwargs: Any,
    ) -> "ConfluencePaginatedResult":
        entries = list(data.get("results") or []) if results is None else results
        return cls(
            results=entries,
            start=data.get("start", start),
            limit=data.get("limit", limit),
            size=len(entries),
            links=data.get("_links") or {},
        )
