from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

from swop_client.core.errors import RemoteError


class CacheEntry(BaseModel):
    """One fetched response, keyed by its request fingerprint.

    from_cache records provenance at the moment the entry was produced; it is
    False when stored and flipped to True by the cache layer on every read.
    """

    model_config = ConfigDict(frozen=True)

    digest: str
    data: Any = None
    timestamp: int  # epoch millis
    from_cache: bool = False


@dataclass(frozen=True)
class ResultEnvelope:
    data: Any
    digest: Optional[str]
    timestamp: Optional[int]
    error: Union[CacheEntry, bool]
    from_cache: Optional[bool]

    @property
    def ok(self) -> bool:
        return self.error is False

    def unwrap(self) -> Any:
        """Return data, raising RemoteError when the expected field was missing."""
        if isinstance(self.error, CacheEntry):
            raise RemoteError(
                "response did not contain the expected field",
                response=self.error.data,
            )
        return self.data
