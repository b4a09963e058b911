"""Keyed in-memory cache with per-entry TTL and single-flight computation.

Built on ``cachetools.TLRUCache`` so each entry carries its own time to
live. Concurrent callers missing the same key wait for one computation
instead of each running their own.
"""

import threading
import time
from typing import Any, Callable, Dict, Hashable, NamedTuple, TypeVar

from cachetools import TLRUCache

from src.utils.logging import get_logger

logger = get_logger("cache")

T = TypeVar("T")


class _Entry(NamedTuple):
    value: Any
    ttl: float


def _time_to_use(_key: Hashable, entry: _Entry, now: float) -> float:
    return now + entry.ttl


class KeyedCache:
    """Thread-safe ``get_or_compute`` store.

    :param maxsize: Maximum number of live entries
    :param timer: Clock used for expiry, ``time.monotonic`` by default
    """

    def __init__(self, maxsize: int = 128, timer: Callable[[], float] = time.monotonic):
        self._store: TLRUCache = TLRUCache(maxsize=maxsize, ttu=_time_to_use, timer=timer)
        self._lock = threading.Lock()
        self._key_locks: Dict[Hashable, threading.Lock] = {}

    def _lookup(self, key: Hashable):
        with self._lock:
            return self._store.get(key)

    def get_or_compute(self, key: Hashable, ttl: float, compute: Callable[[], T]) -> T:
        """Return the cached value for ``key``, computing it on a miss.

        Exceptions from ``compute`` propagate and leave the key empty, so
        the next call computes again.

        :param key: Cache key
        :param ttl: Seconds the computed value stays valid
        :param compute: Zero-argument callable producing the value
        :return: Cached or freshly computed value
        """
        entry = self._lookup(key)
        if entry is not None:
            return entry.value

        with self._lock:
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        with key_lock:
            # Another caller may have filled the slot while we waited.
            entry = self._lookup(key)
            if entry is not None:
                return entry.value

            logger.debug(f"Cache miss for {key!r}, computing")
            value = compute()
            with self._lock:
                self._store[key] = _Entry(value, ttl)
            return value

    def invalidate(self, key: Hashable) -> None:
        with self._lock:
            self._store.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        with self._lock:
            self._store.expire()
            return len(self._store)
