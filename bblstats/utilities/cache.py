"""In-memory response cache with a fixed time-to-live.

One TTLCache instance per resource kind (teams, players, tables...).
Collections use a single constant key, items use their numeric ID.

Entries are replaced on refresh and never evicted, so memory grows with
the number of distinct keys requested during the process lifetime.
There is no locking: two callers racing on a miss may both fetch upstream
and the last write wins.
"""

import logging
import time
from collections.abc import Awaitable, Callable, Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# 5 minutes for every resource kind
CACHE_TTL = 5 * 60

# Key used for unparameterized collections (all teams, all players, ...)
COLLECTION_KEY = "all"

Clock = Callable[[], float]


def make_cache_key(*parts: Any) -> str:
    """Join key parts into a single string key (e.g. 'tables:69:239')."""
    return ":".join(str(p) for p in parts)


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """A cached value and the clock reading when it was stored."""

    value: T
    stored_at: float


class TTLCache(Generic[T]):
    """Time-boxed memoization of upstream responses.

    The clock is injectable so tests can advance time deterministically.
    """

    def __init__(self, name: str = "cache", ttl: float = CACHE_TTL, clock: Clock | None = None):
        self.name = name
        self._ttl = ttl
        self._clock = clock or time.monotonic
        self._entries: dict[Hashable, CacheEntry[T]] = {}
        self._hits = 0
        self._misses = 0

    @property
    def ttl(self) -> float:
        return self._ttl

    def get(self, key: Hashable) -> T | None:
        """Return the cached value if still fresh, otherwise None."""
        entry = self._entries.get(key)
        if entry is not None and self._clock() - entry.stored_at < self._ttl:
            self._hits += 1
            return entry.value
        self._misses += 1
        return None

    def put(self, key: Hashable, value: T) -> None:
        """Store value under key, replacing any previous entry."""
        self._entries[key] = CacheEntry(value=value, stored_at=self._clock())

    async def get_or_fetch(self, key: Hashable, fetch: Callable[[], Awaitable[T]]) -> T:
        """Return the fresh cached value or await fetch() and cache its result.

        Exceptions from fetch propagate and nothing is stored, so the next
        call goes upstream again.
        """
        cached = self.get(key)
        if cached is not None:
            logger.debug("[CACHE] Hit: %s/%s", self.name, key)
            return cached

        logger.info("[CACHE] Fetching fresh %s data (key=%s)", self.name, key)
        value = await fetch()
        self.put(key, value)
        return value

    def stats(self) -> dict:
        """Get cache statistics."""
        now = self._clock()
        fresh = sum(1 for e in self._entries.values() if now - e.stored_at < self._ttl)
        return {
            "name": self.name,
            "ttl_seconds": self._ttl,
            "entries": len(self._entries),
            "fresh_entries": fresh,
            "hits": self._hits,
            "misses": self._misses,
        }

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries
