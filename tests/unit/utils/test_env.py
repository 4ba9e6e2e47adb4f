"""Tests for the environment variable helpers."""

import pytest

from mcp_confluence.utils.env import get_env_int, is_env_truthy


@pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes", " Yes "])
def test_is_env_truthy_accepts_truthy_values(monkeypatch, value):
    monkeypatch.setenv("DEBUG", value)
    assert is_env_truthy("DEBUG") is True


@pytest.mark.parametrize("value", ["false", "0", "no", ""])
def test_is_env_truthy_rejects_other_values(monkeypatch, value):
    monkeypatch.setenv("DEBUG", value)
    assert is_env_truthy("DEBUG") is False


def test_is_env_truthy_uses_default_when_unset(monkeypatch):
    monkeypatch.delenv("CONFLUENCE_SSL_VERIFY", raising=False)
    assert is_env_truthy("CONFLUENCE_SSL_VERIFY") is False
    assert is_env_truthy("CONFLUENCE_SSL_VERIFY", "true") is True


def test_get_env_int(monkeypatch):
    monkeypatch.setenv("CONFLUENCE_TIMEOUT", " 45 ")
    assert get_env_int("CONFLUENCE_TIMEOUT", 30) == 45

    monkeypatch.setenv("CONFLUENCE_TIMEOUT", "")
    assert get_env_int("CONFLUENCE_TIMEOUT", 30) == 30

    monkeypatch.delenv("CONFLUENCE_TIMEOUT")
    assert get_env_int("CONFLUENCE_TIMEOUT", 30) == 30


def test_get_env_int_invalid(monkeypatch):
    monkeypatch.setenv("CONFLUENCE_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        get_env_int("CONFLUENCE_TIMEOUT", 30)
