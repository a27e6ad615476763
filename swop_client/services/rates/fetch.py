from __future__ import annotations

import json
import logging
import time
from typing import Callable

from swop_client.models.cache import CacheEntry
from .base import RequestOptions, Transport
from .cache_service import ResponseCache
from .fingerprint import fingerprint

logger = logging.getLogger("swop_client.fetch")


class FetchOrchestrator:
    """Serve a request from the response cache or fetch it through the transport.

    There is no retry and no in-flight coalescing: two identical calls issued
    back to back both go to the network until the first one has been written.
    Transport and JSON decoding errors propagate to the caller unchanged.
    """

    def __init__(
        self,
        transport: Transport,
        cache: ResponseCache,
        clock: Callable[[], float] = time.time,
    ):
        self._transport = transport
        self._cache = cache
        self._clock = clock

    def execute(
        self, url: str, options: RequestOptions, *, no_cache: bool = False
    ) -> CacheEntry:
        # Call-level flags stay out of the key; only the request itself counts.
        digest = fingerprint(url, options)

        cached = self._cache.read(digest, no_cache=no_cache)
        if cached is not None:
            return cached.model_copy(update={"from_cache": True})

        logger.debug("fetching", extra={"url": url, "digest": digest})
        response = self._transport(url, options)
        body = response.text
        entry = CacheEntry(
            digest=digest,
            data=json.loads(body) if body else None,
            timestamp=int(self._clock() * 1000),
            from_cache=False,
        )
        self._cache.write(digest, entry)
        return entry
