"""Exchange rate client: fingerprinted response cache over a GraphQL transport."""

from .base import CacheStore, Transport, TransportResponse
from .cache_service import InMemoryCacheStore, ResponseCache
from .client import ClientConfig, SwopClient
from .conversion import ConversionResult, convert
from .fetch import FetchOrchestrator
from .fingerprint import fingerprint
from .unpack import unpack

__all__ = [
    "CacheStore",
    "Transport",
    "TransportResponse",
    "InMemoryCacheStore",
    "ResponseCache",
    "ClientConfig",
    "SwopClient",
    "ConversionResult",
    "convert",
    "FetchOrchestrator",
    "fingerprint",
    "unpack",
]
