from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Quote(_CamelModel):
    """One exchange rate record as returned by latest/historical/timeSeries."""

    date: str
    base_currency: str
    quote_currency: str
    quote: float = Field(..., gt=0)
    historical: Optional[bool] = None
    meta: Optional[Dict[str, Any]] = None

    @field_validator("base_currency", "quote_currency")
    @classmethod
    def upper_code(cls, v: str) -> str:
        return v.upper()


class Currency(_CamelModel):
    code: str
    name: Optional[str] = None
    numeric_code: Optional[str] = None
    decimal_digits: Optional[int] = None
    active: Optional[bool] = None
