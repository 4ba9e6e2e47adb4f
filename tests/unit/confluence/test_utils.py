"""Tests for the Confluence utility functions."""

import pytest

from mcp_confluence.confluence.utils import (
    body_expand,
    cql_space_clause,
    cursor_from_link,
    escape_cql_string,
    is_space_allowed,
)


class TestIsSpaceAllowed:
    @pytest.mark.parametrize("space_key", ["DEV", "DOCS"])
    def test_allowed(self, space_key):
        assert is_space_allowed(space_key, ["DEV", "DOCS"]) is True

    @pytest.mark.parametrize("space_key", ["SECRET", "dev", "DEV ", "", None])
    def test_denied(self, space_key):
        assert is_space_allowed(space_key, ["DEV", "DOCS"]) is False

    def test_empty_allowlist_denies_everything(self):
        assert is_space_allowed("DEV", []) is False


def test_escape_cql_string():
    assert escape_cql_string('say "hi"') == 'say \\"hi\\"'
    assert escape_cql_string("a\\b") == "a\\\\b"


def test_cql_space_clause():
    assert cql_space_clause("DEV") == 'space = "DEV"'


@pytest.mark.parametrize(
    ("body_format", "expected"),
    [
        ("storage", "body.storage"),
        ("view", "body.view"),
        (None, None),
        ("", None),
    ],
)
def test_body_expand(body_format, expected):
    assert body_expand(body_format) == expected


def test_cursor_from_link():
    link = "/wiki/api/v2/spaces?limit=100&cursor=eyJpZCI6MTB9"
    assert cursor_from_link(link) == "eyJpZCI6MTB9"
    assert cursor_from_link("/wiki/api/v2/spaces?limit=100") is None
    assert cursor_from_link(None) is None
