"""Tests for the Confluence result models."""

import pytest

from mcp_confluence.models import (
    ApiModel,
    ConfluencePaginatedResult,
    ConfluenceSearchResult,
)


class TestConfluenceSearchResult:
    def test_from_api_response(self):
        data = {
            "results": [{"content": {"id": "1"}}, {"content": {"id": "2"}}],
            "start": 0,
            "limit": 25,
            "size": 2,
            "_links": {"next": "/rest/api/search?cursor=abc"},
        }

        result = ConfluenceSearchResult.from_api_response(data)

        assert len(result.content) == 2
        assert result.size == 2
        assert result.links["next"] == "/rest/api/search?cursor=abc"

    def test_defaults_from_request_when_missing(self):
        result = ConfluenceSearchResult.from_api_response({}, start=10, limit=5)

        assert result.content == []
        assert result.start == 10
        assert result.limit == 5
        assert result.size == 0
        assert result.links == {}

    def test_simplified_dict_uses_wire_names(self):
        result = ConfluenceSearchResult.from_api_response(
            {"results": [], "_links": {"base": "https://x"}}
        )

        simplified = result.to_simplified_dict()

        assert set(simplified) == {"content", "start", "limit", "size", "_links"}
        assert simplified["_links"] == {"base": "https://x"}


class TestConfluencePaginatedResult:
    def test_size_counts_returned_entries(self):
        data = {"results": [{"key": "DEV"}, {"key": "SECRET"}], "_links": {}}

        result = ConfluencePaginatedResult.from_api_response(
            data, results=[{"key": "DEV"}], limit=50
        )

        assert result.results == [{"key": "DEV"}]
        assert result.size == 1
        assert result.limit == 50

    def test_uses_raw_results_when_not_given(self):
        result = ConfluencePaginatedResult.from_api_response(
            {"results": [{"id": "1"}], "start": 5, "limit": 10}
        )

        assert result.results == [{"id": "1"}]
        assert result.start == 5
        assert result.limit == 10
        assert result.size == 1

    def test_simplified_dict_keeps_links_alias(self):
        result = ConfluencePaginatedResult.from_api_response(
            {"results": [], "_links": {"next": "/api/v2/spaces?cursor=c2"}}
        )

        assert result.to_simplified_dict()["_links"] == {
            "next": "/api/v2/spaces?cursor=c2"
        }


def test_base_model_requires_override():
    with pytest.raises(NotImplementedError):
        ApiModel.from_api_response({})
