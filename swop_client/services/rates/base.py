from __future__ import annotations

"""Injected capabilities used by the rate client.

Any object with the right shape satisfies these; the client never checks for
concrete classes, so an httpx-backed transport and an in-memory fake are
interchangeable.
"""
from typing import Any, Dict, Optional, Protocol

RequestOptions = Dict[str, Any]


class TransportResponse(Protocol):
    @property
    def text(self) -> str: ...


class Transport(Protocol):
    def __call__(self, url: str, options: RequestOptions) -> TransportResponse:
        """Send one request; options carry method, headers and a text body."""
        ...


class CacheStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def put(self, key: str, value: str, ttl_seconds: int) -> None: ...
