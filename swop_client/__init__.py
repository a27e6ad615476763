"""Client for the swop.cx exchange rate GraphQL API with a fingerprinted response cache."""

from .core.errors import (
    BaseCurrencyMismatchError,
    ConfigurationError,
    ConversionError,
    CurrencyNotFoundError,
    InvalidQuotesError,
    RemoteError,
    SwopError,
    ValidationError,
)
from .models import CacheEntry, ResultEnvelope
from .services.http_client import HttpxTransport
from .services.rates import (
    ClientConfig,
    ConversionResult,
    InMemoryCacheStore,
    SwopClient,
    convert,
    fingerprint,
)

__all__ = [
    "BaseCurrencyMismatchError",
    "ConfigurationError",
    "ConversionError",
    "CurrencyNotFoundError",
    "InvalidQuotesError",
    "RemoteError",
    "SwopError",
    "ValidationError",
    "CacheEntry",
    "ResultEnvelope",
    "HttpxTransport",
    "ClientConfig",
    "ConversionResult",
    "InMemoryCacheStore",
    "SwopClient",
    "convert",
    "fingerprint",
]
