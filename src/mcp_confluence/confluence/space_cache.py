"""In-memory cache of space descriptors keyed by space key."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..models.constants import DEFAULT_SPACE_CACHE_TTL

logger = logging.getLogger("mcp-confluence.confluence.space_cache")


@dataclass
class CacheEntry:
    space: dict[str, Any]
    expires_at: float


class SpaceCache:
    """Space key -> space descriptor, with a fixed time-to-live.

    Expiry is checked lazily on read; there is no sweep. Concurrent writers
    simply overwrite each other, which is safe because entries are the
    result of idempotent fetches.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_SPACE_CACHE_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def get(self, space_key: str) -> dict[str, Any] | None:
        entry = self._entries.get(space_key)
        if entry is None or self._clock() >= entry.expires_at:
            return None
        return entry.space

    def get_by_id(self, space_id: str) -> dict[str, Any] | None:
        now = self._clock()
        for entry in list(self._entries.values()):
            if str(entry.space.get("id")) == str(space_id) and now < entry.expires_at:
                return entry.space
        return None

    def put(self, space: dict[str, Any]) -> None:
        space_key = space.get("key")
        if not space_key:
            logger.debug(f"Not caching space without a key: {space.get('id')}")
            return
        self._entries[space_key] = CacheEntry(
            space=space, expires_at=self._clock() + self.ttl_seconds
        )

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
