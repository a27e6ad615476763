"""Smoke script for the fingerprinted response cache.

Demonstrates:
 1. First call misses and goes through the transport.
 2. An identical call within the TTL is served from cache (same digest and timestamp).
 3. no_cache forces a fetch and refreshes the stored entry.
 4. An offline cross-rate from the cached quotes.

Uses a canned transport by default; set SWOP_API_KEY and pass --live to hit
the real endpoint.

NOTE: This is a lightweight diagnostic and not a formal test.
"""

import json
import sys
from pprint import pprint

from swop_client.core.config import get_settings
from swop_client.core.logging import init_logging
from swop_client.services.rates.cache_service import InMemoryCacheStore
from swop_client.services.rates.client import SwopClient

CANNED = {
    "data": {
        "latest": [
            {"date": "2020-01-01", "baseCurrency": "EUR", "quoteCurrency": "USD", "quote": 1.1},
            {"date": "2020-01-01", "baseCurrency": "EUR", "quoteCurrency": "GBP", "quote": 0.9},
        ]
    }
}


class _CannedResponse:
    text = json.dumps(CANNED)


def _canned_transport(url, options):
    print(f"  -> transport call {options['method']} {url}")
    return _CannedResponse()


def _summary(envelope):
    return {
        "digest": envelope.digest,
        "timestamp": envelope.timestamp,
        "from_cache": envelope.from_cache,
        "ok": envelope.ok,
    }


def run(live: bool = False):
    settings = get_settings()
    init_logging(debug=settings.debug)
    if live:
        client = SwopClient.from_settings(settings, cache=InMemoryCacheStore())
        if client.config.cache_ttl <= 0:
            print("SWOP_CACHE_TTL_SECONDS is 0; every call will miss")
    else:
        client = SwopClient(
            "smoke", _canned_transport, cache=InMemoryCacheStore(), cache_ttl=60
        )

    out = {}
    out["initial"] = _summary(client.latest("USD,GBP"))
    out["second"] = _summary(client.latest("USD,GBP"))
    out["no_cache"] = _summary(client.latest("USD,GBP", no_cache=True))
    cached = client.latest("USD,GBP")
    out["after_refresh"] = _summary(cached)
    if cached.ok:
        out["convert"] = client.convert(cached.data, "USD", "GBP", 100).to_dict()

    pprint(out)


if __name__ == "__main__":
    run(live="--live" in sys.argv)
