"""Time-bound in-memory cache shared by the lookup services."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: Any
    timestamp: float


class TTLCache:
    """Key/value cache whose entries expire after a fixed time-to-live.

    Expired entries stay in memory until the next ``get`` for their key,
    which evicts them. There is no background sweep and no locking: two
    concurrent misses for the same key both recompute and the last ``set``
    wins.
    """

    def __init__(
        self,
        ttl_seconds: float,
        name: str = "cache",
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._ttl = ttl_seconds
        self._name = name
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._hits = 0
        self._misses = 0

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def _is_valid(self, entry: CacheEntry) -> bool:
        try:
            age = self._clock() - entry.timestamp
        except TypeError:
            return False
        # A negative age means the clock moved backwards; recompute.
        return 0 <= age < self._ttl

    def get(self, key: str) -> Any | None:
        """Return the cached value, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            self._misses += 1
            return None

        if not self._is_valid(entry):
            del self._entries[key]
            self._misses += 1
            logger.debug("[%s] expired %r", self._name, key)
            return None

        self._hits += 1
        return entry.value

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = CacheEntry(key=key, value=value, timestamp=self._clock())

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()
        logger.debug("[%s] cleared", self._name)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def stats(self) -> dict:
        """Get cache statistics."""
        return {
            "name": self._name,
            "entries": len(self._entries),
            "ttl_seconds": self._ttl,
            "hits": self._hits,
            "misses": self._misses,
        }
