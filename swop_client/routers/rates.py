from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from swop_client.models.cache import ResultEnvelope
from swop_client.models.rates import Currency, Quote
from swop_client.services.rates.client import SwopClient

"""Rates router exposing the client over HTTP.

Endpoints:
    - GET  /rates/latest             -> latest quotes
    - GET  /rates/historical/{date}  -> quotes for one day
    - GET  /rates/time-series        -> quotes between two days
    - GET  /rates/currencies         -> currency metadata
    - POST /rates/convert            -> offline cross-rate from supplied quotes

Query endpoints return the unwrapped payload plus cache provenance; a response
without the expected field becomes a 502 through the RemoteError handler.
"""

router = APIRouter(prefix="/rates", tags=["rates"])


@lru_cache
def get_client() -> SwopClient:
    return SwopClient.from_settings()


class ConvertPayload(BaseModel):
    quotes: List[Quote]
    from_currency: str = Field(..., alias="from", description="Currency to convert from")
    to_currency: str = Field(..., alias="to", description="Currency to convert to")
    amount: float = Field(1.0, ge=0)


def _present(envelope: ResultEnvelope) -> Dict[str, Any]:
    return {
        "data": envelope.unwrap(),
        "digest": envelope.digest,
        "timestamp": envelope.timestamp,
        "from_cache": envelope.from_cache,
    }


@router.get("/latest", summary="Latest exchange rates")
def latest(
    symbols: str = Query("", description="Comma separated quote currencies"),
    base_currency: Optional[str] = None,
    no_cache: bool = False,
    meta: bool = False,
    client: SwopClient = Depends(get_client),
):
    return _present(
        client.latest(symbols, base_currency=base_currency, no_cache=no_cache, meta=meta)
    )


@router.get("/historical/{day}", summary="Exchange rates for one day")
def historical(
    day: date,
    symbols: str = "",
    base_currency: Optional[str] = None,
    no_cache: bool = False,
    meta: bool = False,
    client: SwopClient = Depends(get_client),
):
    return _present(
        client.historical(
            day, symbols, base_currency=base_currency, no_cache=no_cache, meta=meta
        )
    )


@router.get("/time-series", summary="Exchange rates between two days")
def time_series(
    date_start: Optional[date] = None,
    date_end: Optional[date] = None,
    symbols: str = "",
    base_currency: Optional[str] = None,
    no_cache: bool = False,
    client: SwopClient = Depends(get_client),
):
    return _present(
        client.time_series(
            date_start, date_end, symbols, base_currency=base_currency, no_cache=no_cache
        )
    )


@router.get("/currencies", summary="Currency metadata")
def currencies(
    symbols: str = "",
    no_cache: bool = False,
    client: SwopClient = Depends(get_client),
):
    body = _present(client.currencies(symbols, no_cache=no_cache))
    body["data"] = [
        Currency.model_validate(c).model_dump(by_alias=True, exclude_none=True)
        for c in body["data"]
    ]
    return body


@router.post("/convert", summary="Convert an amount using already fetched quotes")
def convert(payload: ConvertPayload):
    result = SwopClient.convert(
        payload.quotes, payload.from_currency, payload.to_currency, payload.amount
    )
    return result.to_dict()
