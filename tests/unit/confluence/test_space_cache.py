"""Tests for the space cache."""

import pytest

from mcp_confluence.confluence.space_cache import SpaceCache
from tests.utils.base import FakeClock
from tests.utils.factories import ConfluenceSpaceFactory


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return SpaceCache(ttl_seconds=3600, clock=clock)


def test_get_returns_cached_space(cache):
    space = ConfluenceSpaceFactory.create("DEV", "1001")
    cache.put(space)

    assert cache.get("DEV") is space
    assert cache.get_by_id("1001") is space
    assert len(cache) == 1


def test_miss_for_unknown_key(cache):
    assert cache.get("DEV") is None
    assert cache.get_by_id("1001") is None


def test_entry_expires_after_ttl(cache, clock):
    cache.put(ConfluenceSpaceFactory.create("DEV", "1001"))

    clock.advance(3599)
    assert cache.get("DEV") is not None

    clock.advance(1)
    assert cache.get("DEV") is None
    assert cache.get_by_id("1001") is None


def test_put_refreshes_expiry(cache, clock):
    cache.put(ConfluenceSpaceFactory.create("DEV", "1001"))
    clock.advance(3000)
    cache.put(ConfluenceSpaceFactory.create("DEV", "1001", name="Renamed"))
    clock.advance(3000)

    assert cache.get("DEV")["name"] == "Renamed"


def test_get_by_id_matches_numeric_ids(cache):
    cache.put(ConfluenceSpaceFactory.create("DEV", 1001))

    assert cache.get_by_id("1001")["key"] == "DEV"


def test_space_without_key_is_not_cached(cache):
    cache.put({"id": "1001"})

    assert len(cache) == 0


def test_clear(cache):
    cache.put(ConfluenceSpaceFactory.create("DEV", "1001"))
    cache.clear()

    assert cache.get("DEV") is None
    assert len(cache) == 0
