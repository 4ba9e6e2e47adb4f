"""Module for Confluence search operations."""

import logging

from ..models.confluence import ConfluenceSearchResult
from ..models.constants import DEFAULT_CONTENT_LIMIT, DEFAULT_START
from ..utils.decorators import handle_atlassian_api_errors
from .client import ConfluenceClient
from .endpoints import api_path
from .utils import body_expand, cql_space_clause, escape_cql_string

logger = logging.getLogger("mcp-confluence.confluence.search")


class SearchMixin(ConfluenceClient):
    """Mixin for Confluence search operations."""

    def build_search_cql(
        self,
        query: str | None = None,
        title: str | None = None,
        space_key: str | None = None,
    ) -> str:
        """
        Build the CQL for a text/title search restricted to allowed spaces.

        Text and title predicates are joined with AND. A given space key is
        validated and used as the only space; otherwise the query is limited
        to the OR of every allowed space.

        Raises:
            SpaceAccessDeniedError: If space_key is not in the allowlist
        """
        conditions = []
        if query:
            conditions.append(f'text ~ "{escape_cql_string(query)}"')
        if title:
            conditions.append(f'title ~ "{escape_cql_string(title)}"')
        if not conditions:
            conditions.append("type = page")
        cql = " AND ".join(conditions)

        if space_key:
            self._require_space_access(space_key)
            return f"{cql_space_clause(space_key)} AND {cql}"

        allowed_clause = " OR ".join(
            cql_space_clause(space) for space in self.config.allowed_spaces
        )
        return f"({allowed_clause}) AND {cql}"

    @handle_atlassian_api_errors("Confluence API")
    def search(
        self,
        query: str | None = None,
        title: str | None = None,
        space_key: str | None = None,
        limit: int = DEFAULT_CONTENT_LIMIT,
        start: int = DEFAULT_START,
        body_format: str | None = None,
    ) -> ConfluenceSearchResult:
        """
        Search content by text and/or title using CQL.

        Always served by the v1 search endpoint, the only API offering CQL.

        Args:
            query: Text to match against page content
            title: Text to match against page titles
            space_key: Optional space to restrict the search to
            limit: Maximum number of results to return
            start: Offset of the first result
            body_format: "storage" or "view" to include page bodies

        Returns:
            ConfluenceSearchResult with content, start, limit, size and links

        Raises:
            SpaceAccessDeniedError: If space_key is not in the allowlist
        """
        cql = self.build_search_cql(query=query, title=title, space_key=space_key)

        expand = ["content.space", "content.version"]
        body = body_expand(body_format)
        if body:
            expand.append(f"content.{body}")

        logger.debug(f"Searching with CQL: {cql}")
        results = self.confluence.get(
            api_path("search", "search"),
            params={
                "cql": cql,
                "limit": limit,
                "start": start,
                "expand": ",".join(expand),
            },
        )

        search_result = ConfluenceSearchResult.from_api_response(
            results or {}, start=start, limit=limit
        )
        logger.info(f"Search returned {search_result.size} results")
        return search_result
