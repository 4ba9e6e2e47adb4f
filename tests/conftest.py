"""Shared fixtures for mcp-confluence tests."""

import pytest

from mcp_confluence.confluence.config import ConfluenceConfig


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def confluence_config(tmp_path):
    """Configuration allowing the DEV and DOCS spaces."""
    return ConfluenceConfig(
        base_url="https://test.atlassian.net/",
        username="test@example.com",
        api_token="test-api-token",
        allowed_spaces=["DEV", "DOCS"],
        log_file=str(tmp_path / "confluence-mcp.log"),
    )
