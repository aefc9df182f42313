"""Shared, expiring key-value store for generated excerpt pairs.

The pipeline only needs ``get`` / ``set`` with a TTL.  ``MemoryTTLStore`` is a
process-local implementation; hosts with a real cache backend implement the
``TTLStore`` protocol instead.  ``SummaryCache`` wraps any store so that a
broken backend degrades to cache misses rather than failed resolutions.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Protocol

from pydantic import ValidationError

from schemas.summary import CacheEntry, GeneratedPair

logger = logging.getLogger("metasummary.services.ttl_cache")


class TTLStore(Protocol):
    def get(self, key: str) -> Any | None:
        ...

    def set(self, key: str, value: GeneratedPair, ttl_seconds: int) -> None:
        ...


class MemoryTTLStore:
    """Lock-guarded dict of ``CacheEntry`` records with lazy expiry."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> GeneratedPair | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_expired(self._clock()):
                del self._entries[key]
                return None
            return entry.value

    def set(self, key: str, value: GeneratedPair, ttl_seconds: int) -> None:
        entry = CacheEntry(value=value, expires_at=self._clock() + ttl_seconds)
        with self._lock:
            self._entries[key] = entry

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def summary_cache_key(kind: str, content_id: int, term_id: int | None) -> str:
    """Key for one item's ``GeneratedPair``.  Kind is part of the key so that
    a post and a term sharing an id never read each other's entry."""
    return f"metasummary:{kind}:{content_id}:{'-' if term_id is None else term_id}"


class SummaryCache:
    """Failure-tolerant facade over a ``TTLStore``."""

    def __init__(self, store: TTLStore, ttl_seconds: int) -> None:
        self.store = store
        self.ttl_seconds = ttl_seconds

    def get(self, key: str) -> GeneratedPair | None:
        try:
            raw = self.store.get(key)
        except Exception as exc:
            logger.warning("Summary cache read failed for %s; treating as miss: %s", key, exc)
            return None
        if raw is None:
            return None
        if isinstance(raw, GeneratedPair):
            return raw
        try:
            return GeneratedPair.model_validate(raw)
        except ValidationError:
            logger.warning("Discarding malformed summary cache entry for %s.", key)
            return None

    def set(self, key: str, value: GeneratedPair) -> None:
        try:
            self.store.set(key, value, self.ttl_seconds)
        except Exception as exc:
            logger.warning("Summary cache write failed for %s; skipped: %s", key, exc)
