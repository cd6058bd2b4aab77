"""
In-memory TTL cache with a single-flight refresh guard.

get_or_refresh() is the only way to read the cache: it serves a fresh entry
verbatim, and on a miss exactly one caller runs the refresh while concurrent
callers for the same key wait for and share its result.
"""

import logging
import threading
import time
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """A cached payload and the monotonic time it was captured."""
    captured_at: float
    payload: Any


class TTLCache:
    """
    Process-local cache keyed by string.

    Entries are replaced wholesale on refresh and never partially updated.
    Only successful refreshes are stored; a failing refresh leaves the
    previous entry in place and re-raises to every waiting caller.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            clock: Monotonic time source in seconds, replaceable for testing.
        """
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: Dict[str, CacheEntry] = {}
        self._inflight: Dict[str, Future] = {}

    def _fresh_entry(self, key: str, ttl: float) -> Optional[CacheEntry]:
        entry = self._entries.get(key)
        if entry is not None and self._clock() - entry.captured_at < ttl:
            return entry
        return None

    def get_or_refresh(self, key: str, ttl: float, refresh: Callable[[], Any]) -> Any:
        """
        Return the cached payload for key, refreshing it if older than ttl.

        Args:
            key: Cache key.
            ttl: Maximum age in seconds of a payload that may be served.
            refresh: Zero-argument callable producing a new payload.

        Returns:
            The cached or freshly computed payload.

        Raises:
            Exception: Whatever refresh raised, for the leader and all waiters.
        """
        with self._lock:
            entry = self._fresh_entry(key, ttl)
            if entry is not None:
                logger.debug("[cache] hit %s", key)
                return entry.payload

            inflight = self._inflight.get(key)
            leader = inflight is None
            if leader:
                inflight = Future()
                self._inflight[key] = inflight

        if not leader:
            logger.debug("[cache] waiting on in-flight refresh of %s", key)
            return inflight.result()

        logger.debug("[cache] miss %s, refreshing", key)
        try:
            payload = refresh()
        except BaseException as e:
            with self._lock:
                self._inflight.pop(key, None)
            inflight.set_exception(e)
            raise

        with self._lock:
            self._entries[key] = CacheEntry(captured_at=self._clock(), payload=payload)
            self._inflight.pop(key, None)
        inflight.set_result(payload)
        return payload

    def peek(self, key: str) -> Optional[CacheEntry]:
        """Return the stored entry for key regardless of age, or None."""
        with self._lock:
            return self._entries.get(key)

    def invalidate(self, key: str) -> None:
        """Drop the entry for key."""
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """Drop all entries."""
        with self._lock:
            self._entries.clear()


# Singleton instance
_winners_cache: Optional[TTLCache] = None
_singleton_lock = threading.Lock()


def get_winners_cache() -> TTLCache:
    """Get the process-wide winners cache."""
    global _winners_cache
    with _singleton_lock:
        if _winners_cache is None:
            _winners_cache = TTLCache()
        return _winners_cache
