"""Pydantic domain models for the swop exchange rate client."""

from .cache import CacheEntry, ResultEnvelope
from .rates import Currency, Quote

__all__ = [
    "CacheEntry",
    "ResultEnvelope",
    "Currency",
    "Quote",
]
