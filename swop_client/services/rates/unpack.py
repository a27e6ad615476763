from __future__ import annotations

from typing import Any

from swop_client.models.cache import CacheEntry, ResultEnvelope


def extract_field(payload: Any, field: str) -> Any:
    """Return payload["data"][field], or None when any level is missing."""
    if not isinstance(payload, dict):
        return None
    body = payload.get("data")
    if not isinstance(body, dict):
        return None
    return body.get(field)


def unpack(result: CacheEntry, field: str) -> ResultEnvelope:
    """Turn a fetch result into the envelope returned by every query operation.

    A missing or null field is reported through ``error``, which then holds the
    whole fetch result for diagnostics. An empty list is a valid result.
    """
    value = extract_field(result.data, field)
    return ResultEnvelope(
        data=value,
        digest=result.digest,
        timestamp=result.timestamp,
        error=result if value is None else False,
        from_cache=result.from_cache,
    )
