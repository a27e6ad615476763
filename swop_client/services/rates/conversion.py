from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel

from swop_client.core.errors import (
    BaseCurrencyMismatchError,
    CurrencyNotFoundError,
    InvalidQuotesError,
)

"""Offline cross-rate conversion.

Computes a rate between two currencies from quotes that were already fetched
against a common base, without touching the network or the cache:

    rate   = quote(to) / quote(from)
    result = rate * amount
"""


@dataclass(frozen=True)
class ConversionResult:
    from_currency: str
    to_currency: str
    amount: float
    rate: float
    result: float
    date: Optional[str]
    historical: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.from_currency,
            "to": self.to_currency,
            "amount": self.amount,
            "rate": self.rate,
            "result": self.result,
            "date": self.date,
            "historical": self.historical,
        }


def _as_record(item: Any) -> Mapping:
    if isinstance(item, BaseModel):
        return item.model_dump(by_alias=True)
    if isinstance(item, Mapping):
        return item
    raise InvalidQuotesError("quotes must be a sequence of quote records")


def _find(records: list, currency: str, side: str) -> Mapping:
    for record in records:
        if str(record.get("quoteCurrency", "")).upper() == currency:
            return record
    raise CurrencyNotFoundError(currency, side)


def _quote_value(record: Mapping, currency: str) -> float:
    value = record.get("quote")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidQuotesError(f"quote for '{currency}' is not a number: {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidQuotesError(f"quote for '{currency}' must be positive: {value!r}")
    return float(value)


def convert(
    quotes: Sequence[Any], from_currency: str, to_currency: str, amount: float
) -> ConversionResult:
    if isinstance(quotes, (str, bytes)) or not isinstance(quotes, Sequence):
        raise InvalidQuotesError("quotes must be a sequence of quote records")
    records = [_as_record(q) for q in quotes]

    src = _find(records, from_currency.upper(), "from")
    dst = _find(records, to_currency.upper(), "to")
    if src.get("baseCurrency") != dst.get("baseCurrency"):
        raise BaseCurrencyMismatchError(src.get("baseCurrency"), dst.get("baseCurrency"))

    rate = _quote_value(dst, to_currency) / _quote_value(src, from_currency)
    return ConversionResult(
        from_currency=from_currency,
        to_currency=to_currency,
        amount=amount,
        rate=rate,
        result=rate * amount,
        date=dst.get("date") or src.get("date"),
        historical=bool(dst.get("historical") or False),
    )
