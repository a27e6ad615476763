from __future__ import annotations

"""GraphQL query strings for the four supported query shapes.

Plain string assembly: arguments are interpolated as given and the remote
schema decides what is valid.
"""
from typing import List, Optional, Sequence, Union

Symbols = Union[str, Sequence[str], None]

QUOTE_FIELDS = "date baseCurrency quoteCurrency quote"
META_FIELDS = "meta { sourceShortNames sourceNames sourceIds sources { id shortName name } }"
CURRENCY_FIELDS = "code name numericCode decimalDigits active"


def split_symbols(symbols: Symbols) -> List[str]:
    if not symbols:
        return []
    parts = symbols.split(",") if isinstance(symbols, str) else list(symbols)
    return [p.strip().upper() for p in parts if p and p.strip()]


def _quoted_list(codes: List[str]) -> str:
    return "[" + ", ".join(f'"{c}"' for c in codes) + "]"


def _arguments(
    symbols: Symbols,
    base_currency: Optional[str] = None,
    **dates: str,
) -> str:
    args = [f'{name}: "{value}"' for name, value in dates.items()]
    if base_currency:
        args.append(f'baseCurrency: "{base_currency.upper()}"')
    codes = split_symbols(symbols)
    if codes:
        args.append(f"quoteCurrencies: {_quoted_list(codes)}")
    return f"({', '.join(args)})" if args else ""


def _quote_selection(meta: bool) -> str:
    return f"{QUOTE_FIELDS} {META_FIELDS}" if meta else QUOTE_FIELDS


def latest_query(
    symbols: Symbols, base_currency: Optional[str] = None, meta: bool = False
) -> str:
    return (
        f"query {{ latest{_arguments(symbols, base_currency)} "
        f"{{ {_quote_selection(meta)} }} }}"
    )


def historical_query(
    date: str,
    symbols: Symbols,
    base_currency: Optional[str] = None,
    meta: bool = False,
) -> str:
    return (
        f"query {{ historical{_arguments(symbols, base_currency, date=date)} "
        f"{{ {_quote_selection(meta)} }} }}"
    )


def time_series_query(
    date_start: str,
    date_end: str,
    symbols: Symbols,
    base_currency: Optional[str] = None,
) -> str:
    args = _arguments(symbols, base_currency, dateStart=date_start, dateEnd=date_end)
    return f"query {{ timeSeries{args} {{ {QUOTE_FIELDS} }} }}"


def currencies_query(symbols: Symbols = None) -> str:
    codes = split_symbols(symbols)
    args = f"(currencyCodes: {_quoted_list(codes)})" if codes else ""
    return f"query {{ currencies{args} {{ {CURRENCY_FIELDS} }} }}"
