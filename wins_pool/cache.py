# wins_pool/cache.py
"""
Simple in-memory TTL cache.

This is per-process cache. If you run multiple gunicorn workers, each worker has its own cache.
Entries are never evicted: an expired entry is ignored and overwritten on the next miss.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
import time
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class CacheEntry:
    """A cached JSON payload and the epoch-ms instant after which it is stale."""
    expires_at_ms: int
    payload: Any

    def is_fresh(self, at_ms: int) -> bool:
        """Return True while at_ms is strictly before the expiry instant."""
        return at_ms < self.expires_at_ms


class TTLCache:
    """
    A small key/value TTL cache with lazy loading.

    Payloads are kept as JSON text, the same way an external key-value store would
    hold them, so callers always get back a fresh copy of what was stored.
    """

    def __init__(self, clock: Callable[[], int] = now_ms) -> None:
        """Initialize an empty cache store."""
        self._store: Dict[str, str] = {}
        self._clock = clock

    def get(self, key: str) -> Optional[CacheEntry]:
        """Return the stored entry for key (fresh or not), or None."""
        raw = self._store.get(key)
        if raw is None:
            return None
        doc = json.loads(raw)
        return CacheEntry(expires_at_ms=int(doc["expires_at_ms"]), payload=doc["payload"])

    def put(self, key: str, entry: CacheEntry) -> None:
        """Store entry under key, replacing whatever was there."""
        self._store[key] = json.dumps(
            {"expires_at_ms": entry.expires_at_ms, "payload": entry.payload}
        )

    def get_or_set(self, key: str, ttl_seconds: int, loader: Callable[[], Any]) -> Any:
        """
        Retrieve a cached payload if not expired, otherwise compute & store a new one.

        Args:
            key: Cache key.
            ttl_seconds: Time-to-live for the entry.
            loader: Function that returns the payload if the cache is stale/missing.

        Returns:
            The cached or newly loaded payload.
        """
        entry = self.get(key)
        if entry is not None and entry.is_fresh(self._clock()):
            logger.info("cache hit key=%s", key)
            return entry.payload

        logger.info("cache miss key=%s", key)
        payload = loader()
        self.put(key, CacheEntry(expires_at_ms=self._clock() + ttl_seconds * 1000, payload=payload))
        return payload
