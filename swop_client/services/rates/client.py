from __future__ import annotations

import datetime as dt
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from swop_client.core.config import DEFAULT_ENDPOINT, Settings, get_settings
from swop_client.core.errors import ConfigurationError, ValidationError
from swop_client.models.cache import ResultEnvelope
from swop_client.services.http_client import HttpxTransport
from . import queries
from .base import CacheStore, RequestOptions, Transport
from .cache_service import InMemoryCacheStore, ResponseCache
from .conversion import ConversionResult, convert
from .fetch import FetchOrchestrator
from .unpack import unpack

logger = logging.getLogger("swop_client.client")

DateLike = Union[str, dt.date, None]

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    transport: Transport
    base_currency: Optional[str] = None
    free_tier: bool = False
    cache: Optional[CacheStore] = None
    cache_ttl: int = 0
    endpoint: str = DEFAULT_ENDPOINT


def _require_date(value: DateLike, name: str) -> dt.date:
    if value is None or value == "":
        raise ValidationError(f"{name} is required")
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    # fromisoformat also takes YYYYMMDD and week dates; only the dashed form is sent
    if not isinstance(value, str) or not _ISO_DATE.fullmatch(value):
        raise ValidationError(
            f"{name} must be an ISO date (YYYY-MM-DD), got {value!r}"
        )
    try:
        return dt.date.fromisoformat(value)
    except ValueError as e:
        raise ValidationError(f"{name} is not a valid date: {value!r}") from e


class SwopClient:
    """GraphQL exchange rate client with an optional fingerprinted response cache.

    Every query operation returns a ResultEnvelope. A response without the
    expected field does not raise; check ``envelope.error`` or call
    ``envelope.unwrap()``.
    """

    def __init__(
        self,
        api_key: Optional[str],
        transport: Optional[Transport],
        *,
        base_currency: Optional[str] = None,
        free_tier: bool = False,
        cache: Optional[CacheStore] = None,
        cache_ttl: int = 0,
        endpoint: str = DEFAULT_ENDPOINT,
    ):
        if not api_key:
            raise ConfigurationError("an API key is required")
        if transport is None:
            raise ConfigurationError("a transport is required")
        self.config = ClientConfig(
            api_key=api_key,
            transport=transport,
            base_currency=base_currency,
            free_tier=free_tier,
            cache=cache,
            cache_ttl=cache_ttl,
            endpoint=str(endpoint),
        )
        self._orchestrator = FetchOrchestrator(
            transport, ResponseCache(cache, cache_ttl)
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[Transport] = None,
        cache: Optional[CacheStore] = None,
    ) -> "SwopClient":
        """Build a client from environment settings with httpx and in-memory defaults."""
        settings = settings or get_settings()
        if transport is None:
            transport = HttpxTransport(timeout=settings.http_timeout_seconds)
        if cache is None and settings.cache_ttl_seconds > 0:
            cache = InMemoryCacheStore()
        return cls(
            settings.api_key,
            transport,
            base_currency=settings.base_currency,
            free_tier=settings.free_tier,
            cache=cache,
            cache_ttl=settings.cache_ttl_seconds,
            endpoint=str(settings.endpoint),
        )

    # Internal --------------------------------------------------
    def _base_currency(self, override: Optional[str]) -> Optional[str]:
        if self.config.free_tier:
            return None
        return override or self.config.base_currency

    def _request_options(self, query: str) -> RequestOptions:
        return {
            "method": "POST",
            "headers": {
                "Content-Type": "application/json",
                "Authorization": f"ApiKey {self.config.api_key}",
            },
            "body": json.dumps({"query": query}),
        }

    def _query(self, query: str, field: str, no_cache: bool) -> ResultEnvelope:
        result = self._orchestrator.execute(
            self.config.endpoint, self._request_options(query), no_cache=no_cache
        )
        envelope = unpack(result, field)
        if not envelope.ok:
            logger.warning(
                "response missing field %r", field, extra={"digest": result.digest}
            )
        return envelope

    # Public API -----------------------------------------------
    def latest(
        self,
        symbols: queries.Symbols,
        *,
        base_currency: Optional[str] = None,
        no_cache: bool = False,
        meta: bool = False,
    ) -> ResultEnvelope:
        query = queries.latest_query(symbols, self._base_currency(base_currency), meta)
        return self._query(query, "latest", no_cache)

    def historical(
        self,
        date: DateLike,
        symbols: queries.Symbols,
        *,
        base_currency: Optional[str] = None,
        no_cache: bool = False,
        meta: bool = False,
    ) -> ResultEnvelope:
        day = _require_date(date, "date").isoformat()
        query = queries.historical_query(
            day, symbols, self._base_currency(base_currency), meta
        )
        return self._query(query, "historical", no_cache)

    def time_series(
        self,
        date_start: DateLike,
        date_end: DateLike,
        symbols: queries.Symbols,
        *,
        base_currency: Optional[str] = None,
        no_cache: bool = False,
    ) -> ResultEnvelope:
        start = _require_date(date_start, "date_start")
        end = _require_date(date_end, "date_end")
        if end < start:
            raise ValidationError("date_end must not be before date_start")
        query = queries.time_series_query(
            start.isoformat(),
            end.isoformat(),
            symbols,
            self._base_currency(base_currency),
        )
        return self._query(query, "timeSeries", no_cache)

    def currencies(
        self, symbols: queries.Symbols = None, *, no_cache: bool = False
    ) -> ResultEnvelope:
        return self._query(queries.currencies_query(symbols), "currencies", no_cache)

    @staticmethod
    def convert(
        quotes: Sequence[Any], from_currency: str, to_currency: str, amount: float
    ) -> ConversionResult:
        return convert(quotes, from_currency, to_currency, amount)
