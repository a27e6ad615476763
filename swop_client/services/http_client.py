from __future__ import annotations

"""Default transport for the rate client, backed by httpx.

Sends exactly one request per call. Timeouts come from the underlying
httpx client; connection and timeout errors propagate to the caller.
"""
import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger("swop_client.http")


class HttpxTransport:
    def __init__(
        self, client: Optional[httpx.Client] = None, *, timeout: float = 10.0
    ):
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def __call__(self, url: str, options: Dict[str, Any]) -> httpx.Response:
        response = self._client.request(
            options.get("method", "POST"),
            url,
            headers=options.get("headers"),
            content=options.get("body"),
        )
        logger.debug(
            "%s -> %s",
            response.request.method,
            response.status_code,
            extra={"url": url, "status": response.status_code},
        )
        return response

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
