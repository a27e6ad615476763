from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import pydantic

from swop_client.models.cache import CacheEntry
from .base import CacheStore

"""Response cache layered over an injected key-value store.

Purpose:
    Keep fetched GraphQL responses under their request fingerprint so identical
    calls are served without a network round trip.

Policy:
    - Reading is active only with a non-zero TTL, a store, and no per-call opt out.
    - Writing happens after every successful fetch whenever a store and TTL exist,
      including calls that opted out of reading, so a no_cache call refreshes
      the slot for the calls that follow.
    - Entries are stored as JSON text; anything that fails to parse reads as a miss.
    - Expiry is the store's job; this layer never inspects entry age.
"""

logger = logging.getLogger("swop_client.cache")


class ResponseCache:
    def __init__(self, store: Optional[CacheStore] = None, ttl_seconds: int = 0):
        self._store = store
        self._ttl = int(ttl_seconds or 0)

    @property
    def ttl_seconds(self) -> int:
        return self._ttl

    def enabled(self, no_cache: bool = False) -> bool:
        return self._ttl > 0 and self._store is not None and not no_cache

    def read(self, fingerprint: str, no_cache: bool = False) -> Optional[CacheEntry]:
        if not self.enabled(no_cache):
            return None
        raw = self._store.get(fingerprint)  # type: ignore[union-attr]
        if raw is None:
            logger.debug("cache miss", extra={"digest": fingerprint})
            return None
        try:
            entry = CacheEntry.model_validate_json(raw)
        except pydantic.ValidationError:
            logger.warning(
                "discarding unparsable cache entry", extra={"digest": fingerprint}
            )
            return None
        logger.debug("cache hit", extra={"digest": fingerprint})
        return entry

    def write(self, fingerprint: str, entry: CacheEntry) -> None:
        if self._store is None or self._ttl <= 0:
            return
        self._store.put(fingerprint, entry.model_dump_json(), self._ttl)
        logger.debug("cache write", extra={"digest": fingerprint, "ttl": self._ttl})


@dataclass
class _StoredValue:
    value: str
    expires_at: float


class InMemoryCacheStore:
    """Process-local CacheStore with per-key TTL.

    Suitable for scripts and tests; process restart clears everything.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._values: Dict[str, _StoredValue] = {}

    def _purge_expired(self) -> None:
        now = self._clock()
        expired = [k for k, v in self._values.items() if v.expires_at <= now]
        for k in expired:
            self._values.pop(k, None)

    def get(self, key: str) -> Optional[str]:
        self._purge_expired()
        stored = self._values.get(key)
        return stored.value if stored else None

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            raise ValueError("cache ttl must be positive seconds")
        self._values[key] = _StoredValue(
            value=value, expires_at=self._clock() + ttl_seconds
        )

    def clear(self) -> None:
        self._values.clear()

    def __len__(self) -> int:
        self._purge_expired()
        return len(self._values)
