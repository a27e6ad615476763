from __future__ import annotations

import base64
import hashlib
import json
from typing import Any

from pydantic import BaseModel

SEPARATOR = "-"
UNDEFINED = "undefined"


def _canonical(value: Any) -> str:
    if value is None:
        return UNDEFINED
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)
    return str(value)


def fingerprint(*args: Any) -> str:
    """Return a short URL-safe identifier for the given call arguments.

    Mappings and sequences are serialized as key-sorted JSON, None becomes the
    token "undefined" and everything else its str(). The joined text is hashed
    with SHA-1; this is a cache key, not a security boundary.
    """
    joined = SEPARATOR.join(_canonical(a) for a in args)
    digest = hashlib.sha1(joined.encode("utf-8")).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")
