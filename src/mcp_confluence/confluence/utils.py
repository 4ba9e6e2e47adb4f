"""Utility functions specific to Confluence operations."""

from collections.abc import Iterable
from urllib.parse import parse_qs, urlsplit

from ..models.constants import BODY_FORMAT_VIEW


def is_space_allowed(space_key: str | None, allowed_spaces: Iterable[str]) -> bool:
    """Check whether a space key is in the allowlist.

    Matching is exact and case-sensitive: "dev" does not match "DEV".

    Args:
        space_key: The space key to check
        allowed_spaces: The configured allowlist

    Returns:
        True if access to the space is permitted
    """
    if not space_key:
        return False
    return space_key in allowed_spaces


def escape_cql_string(value: str) -> str:
    """Escape a value for use inside a double-quoted CQL string."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def cql_space_clause(space_key: str) -> str:
    return f'space = "{escape_cql_string(space_key)}"'


def body_expand(body_format: str | None) -> str | None:
    """Map a body format to its expansion ("body.view" or "body.storage")."""
    if not body_format:
        return None
    return "body.view" if body_format == BODY_FORMAT_VIEW else "body.storage"


def cursor_from_link(link: str | None) -> str | None:
    """Extract the ``cursor`` query parameter from a v2 pagination link."""
    if not link:
        return None
    values = parse_qs(urlsplit(link).query).get("cursor")
    return values[0] if values else None
