"""Bounded in-memory cache with first-in-first-out eviction.

Holds loaded tables keyed by an identifier (usually the id of an uploaded
file). The cache lives inside one process: every worker process of a web
server gets its own copy and never sees what its siblings stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

import logging
import threading

from table_cache.modules.errors import InvalidConfiguration, KeyNotFound


logger = logging.getLogger(__name__)

EvictionCallback = Callable[[str, Any], None]


@dataclass(frozen=True)
class CacheStats:
    size: int
    capacity: int
    hits: int
    misses: int
    evictions: int
    keys: Tuple[str, ...] = ()


class BoundedEvictionCache:
    """Key/value store holding at most ``capacity`` entries.

    When a new key arrives and the cache is full, the entry inserted longest
    ago is dropped. Reads never change that order, and overwriting an existing
    key keeps its original position. Every operation takes the same lock, so a
    single instance can be shared between threads of one process.

    Parameters
    ----------
    capacity: int
        Maximum number of entries, at least 1.
    on_evict: callable, optional
        Called as ``on_evict(key, value)`` after each FIFO eviction.
    """

    def __init__(self, capacity: int, on_evict: Optional[EvictionCallback] = None) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidConfiguration(f"capacity must be an integer, got {capacity!r}", config_key="capacity")
        if capacity < 1:
            raise InvalidConfiguration(f"capacity must be >= 1, got {capacity}", config_key="capacity")
        self._capacity = capacity
        self._on_evict = on_evict
        # dict keeps insertion order; assigning to an existing key keeps its slot
        self._store: Dict[str, Any] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        logger.debug("Created cache with capacity %d", capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def put(self, key: str, value: Any) -> None:
        """Insert or overwrite ``key``, evicting the oldest entry if full."""
        with self._lock:
            evicted = self._put_locked(key, value)
        self._notify_evicted(evicted)

    def get(self, key: str) -> Any:
        """Return the value for ``key`` or raise :class:`KeyNotFound`."""
        with self._lock:
            if key not in self._store:
                self._misses += 1
                raise KeyNotFound(key)
            self._hits += 1
            return self._store[key]

    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._store

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def delete(self, key: str) -> None:
        with self._lock:
            if key not in self._store:
                raise KeyNotFound(key)
            del self._store[key]

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def keys(self) -> List[str]:
        """Live keys, oldest first."""
        with self._lock:
            return list(self._store)

    def get_or_load(self, key: str, loader: Callable[[], Any]) -> Any:
        """Return the cached value, or build it with ``loader`` and store it.

        ``loader`` runs without the lock held, so other threads are not blocked
        while a table is being read back from disk. If the key was stored by
        someone else in the meantime, that value wins and the loaded one is
        dropped. If ``loader`` raises, the exception propagates and nothing is
        stored.
        """
        with self._lock:
            if key in self._store:
                self._hits += 1
                return self._store[key]
            self._misses += 1
        logger.debug("Cache miss for %r, loading", key)
        value = loader()
        with self._lock:
            if key in self._store:
                return self._store[key]
            evicted = self._put_locked(key, value)
        self._notify_evicted(evicted)
        return value

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                size=len(self._store),
                capacity=self._capacity,
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                keys=tuple(self._store),
            )

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={len(self._store)})"

    def _put_locked(self, key: str, value: Any) -> Optional[Tuple[str, Any]]:
        if key in self._store:
            self._store[key] = value
            return None
        evicted = None
        if len(self._store) >= self._capacity:
            oldest_key = next(iter(self._store))
            evicted = (oldest_key, self._store.pop(oldest_key))
            self._evictions += 1
        self._store[key] = value
        return evicted

    def _notify_evicted(self, evicted: Optional[Tuple[str, Any]]) -> None:
        if evicted is None:
            return
        key, value = evicted
        logger.debug("Evicted %r (capacity %d reached)", key, self._capacity)
        if self._on_evict is not None:
            self._on_evict(key, value)


__all__ = ["BoundedEvictionCache", "CacheStats", "EvictionCallback"]
