"""Tests for the per-operation API version table."""

import pytest

from mcp_confluence.confluence.endpoints import (
    OPERATION_API_VERSIONS,
    ApiVersion,
    api_path,
    api_version_for,
)


@pytest.mark.parametrize(
    "operation", ["search", "get_page", "enrich_body", "move_page"]
)
def test_v1_operations(operation):
    assert api_version_for(operation) is ApiVersion.V1


@pytest.mark.parametrize(
    "operation",
    [
        "create_page",
        "update_page",
        "delete_page",
        "list_spaces",
        "get_space_by_id",
        "get_space_content",
        "get_page_children",
    ],
)
def test_v2_operations(operation):
    assert api_version_for(operation) is ApiVersion.V2


def test_every_operation_has_one_version():
    assert len(OPERATION_API_VERSIONS) == 11
    assert set(OPERATION_API_VERSIONS.values()) == {ApiVersion.V1, ApiVersion.V2}


def test_unknown_operation():
    with pytest.raises(ValueError, match="No API version registered for 'archive'"):
        api_version_for("archive")


def test_api_path():
    assert api_path("get_page", "content", "123") == "rest/api/content/123"
    assert api_path("get_page_children", "pages", 42, "children") == (
        "api/v2/pages/42/children"
    )
    assert api_path("search", "search") == "rest/api/search"
