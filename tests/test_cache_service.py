"""Response cache policy and store tests."""

from __future__ import annotations

from swop_client.models.cache import CacheEntry
from swop_client.services.rates.cache_service import InMemoryCacheStore, ResponseCache

ENTRY = CacheEntry(digest="abc", data={"data": {"latest": []}}, timestamp=1_600_000_000_000)


def test_round_trip_preserves_fields(store):
    cache = ResponseCache(store, ttl_seconds=60)
    cache.write("abc", ENTRY)
    loaded = cache.read("abc")
    assert loaded == ENTRY
    assert store.puts[0][2] == 60


def test_disabled_without_ttl_or_store(store):
    assert not ResponseCache(store, 0).enabled()
    assert not ResponseCache(None, 60).enabled()
    assert not ResponseCache(store, 60).enabled(no_cache=True)
    assert ResponseCache(store, 60).enabled()


def test_zero_ttl_neither_reads_nor_writes(store):
    cache = ResponseCache(store, 0)
    cache.write("abc", ENTRY)
    assert store.puts == []
    store.values["abc"] = ENTRY.model_dump_json()
    assert cache.read("abc") is None


def test_no_cache_skips_read_only(store):
    cache = ResponseCache(store, 60)
    cache.write("abc", ENTRY)
    assert cache.read("abc", no_cache=True) is None
    assert cache.read("abc") is not None


def test_unparsable_entry_reads_as_miss(store):
    cache = ResponseCache(store, 60)
    store.values["abc"] = "{not json"
    assert cache.read("abc") is None
    store.values["abc"] = '{"digest": "abc"}'
    assert cache.read("abc") is None


def test_in_memory_store_expires_entries():
    now = [100.0]
    mem = InMemoryCacheStore(clock=lambda: now[0])
    mem.put("k", "v", 10)
    assert mem.get("k") == "v"
    assert len(mem) == 1
    now[0] = 110.0
    assert mem.get("k") is None
    assert len(mem) == 0
