"""Tests for the server context module."""

import pytest

from mcp_confluence.confluence.space_cache import SpaceCache
from mcp_confluence.servers.context import MainAppContext
from mcp_confluence.servers.main import build_app_context
from mcp_confluence.utils.request_logging import RequestAuditLogger


class TestMainAppContext:
    """Tests for the MainAppContext dataclass."""

    def test_initialization_with_defaults(self):
        """Test MainAppContext initialization with default values."""
        context = MainAppContext()

        assert context.full_confluence_config is None
        assert context.space_cache is None
        assert context.audit_logger is None

    def test_initialization_with_all_parameters(self, confluence_config, tmp_path):
        # Arrange
        space_cache = SpaceCache(60)
        audit_logger = RequestAuditLogger(tmp_path / "audit.log")

        # Act
        context = MainAppContext(
            full_confluence_config=confluence_config,
            space_cache=space_cache,
            audit_logger=audit_logger,
        )

        # Assert
        assert context.full_confluence_config is confluence_config
        assert context.space_cache is space_cache
        assert context.audit_logger is audit_logger

    def test_frozen_dataclass_behavior(self, confluence_config):
        """Test that MainAppContext is frozen and immutable."""
        context = MainAppContext()

        with pytest.raises(AttributeError):
            context.full_confluence_config = confluence_config

    def test_string_representation(self):
        str_repr = str(MainAppContext())

        assert "MainAppContext" in str_repr
        assert "full_confluence_config=None" in str_repr


class TestBuildAppContext:
    def test_builds_shared_state_from_config(self, confluence_config):
        context = build_app_context(confluence_config)

        assert context.full_confluence_config is confluence_config
        assert context.space_cache.ttl_seconds == confluence_config.space_cache_ttl
        assert context.audit_logger.log_file.name == "confluence-mcp.log"
        assert context.audit_logger.max_size_bytes == 3 * 1024 * 1024

    def test_each_context_gets_its_own_cache(self, confluence_config):
        first = build_app_context(confluence_config)
        second = build_app_context(confluence_config)

        assert first.space_cache is not second.space_cache
