"""API version selection for each Confluence operation.

Two REST API versions are used side by side. v2 is the primary API, but it
has no CQL search endpoint, cannot expand space or body fields on content
reads, and cannot move a page between spaces. Those steps go through the
legacy v1 API instead. The mapping below is the single place that decides
which version serves which step.
"""

from enum import Enum


class ApiVersion(str, Enum):
    """REST API roots, relative to the ``/wiki`` URL."""

    V1 = "rest/api"
    V2 = "api/v2"


OPERATION_API_VERSIONS: dict[str, ApiVersion] = {
    # v1 only: CQL search
    "search": ApiVersion.V1,
    # v1: content reads expanding space and body representations
    "get_page": ApiVersion.V1,
    "enrich_body": ApiVersion.V1,
    # v1: changing space/ancestors of existing content
    "move_page": ApiVersion.V1,
    "create_page": ApiVersion.V2,
    "update_page": ApiVersion.V2,
    "delete_page": ApiVersion.V2,
    "list_spaces": ApiVersion.V2,
    "get_space_by_id": ApiVersion.V2,
    "get_space_content": ApiVersion.V2,
    "get_page_children": ApiVersion.V2,
}


def api_version_for(operation: str) -> ApiVersion:
    try:
        return OPERATION_API_VERSIONS[operation]
    except KeyError:
        raise ValueError(f"No API version registered for '{operation}'") from None


def api_path(operation: str, *parts: str) -> str:
    """Build the relative path for ``operation``.

    Example:
        api_path("get_page", "content", "123") -> "rest/api/content/123"
    """
    segments = [api_version_for(operation).value]
    segments.extend(str(part).strip("/") for part in parts)
    return "/".join(segments)
