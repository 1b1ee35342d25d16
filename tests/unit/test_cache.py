"""Tests for TTL cache backends."""

import duckdb
import pytest

from app.errors import CacheUnavailable
from app.repositories.common import BaseCache, DuckDBCache, TTLCache, create_cache
from app.repositories.db import init_tables

PAYLOAD = {"pairs": [{"priceUsd": "1.5"}]}


class TestTTLCache:
    def test_miss_when_empty(self, cache):
        assert cache.get("dex_A") is None

    def test_fresh_just_before_ttl(self, cache, clock):
        cache.put("dex_A", PAYLOAD)
        clock.advance(60.0 - 0.001)
        assert cache.get("dex_A") == PAYLOAD

    def test_miss_just_after_ttl(self, cache, clock):
        cache.put("dex_A", PAYLOAD)
        clock.advance(60.0 + 0.001)
        assert cache.get("dex_A") is None

    def test_miss_exactly_at_ttl(self, cache, clock):
        cache.put("dex_A", PAYLOAD)
        clock.advance(60.0)
        assert cache.get("dex_A") is None

    def test_stale_entry_kept(self, cache, clock):
        cache.put("dex_A", PAYLOAD)
        clock.advance(120)
        assert cache.get("dex_A") is None
        assert cache.entry("dex_A").value == PAYLOAD
        assert len(cache) == 1

    def test_put_overwrites_and_restamps(self, cache, clock):
        cache.put("dex_A", PAYLOAD)
        clock.advance(59)
        cache.put("dex_A", {"pairs": []})
        clock.advance(59)
        assert cache.get("dex_A") == {"pairs": []}
        assert cache.entry("dex_A").fetched_at == clock.now - 59

    def test_keys_independent(self, cache, clock):
        cache.put("dex_A", PAYLOAD)
        clock.advance(30)
        cache.put("dex_B", {"pairs": []})
        clock.advance(31)
        assert cache.get("dex_A") is None
        assert cache.get("dex_B") == {"pairs": []}

    def test_none_not_cached(self, cache):
        with pytest.raises(ValueError):
            cache.put("dex_A", None)

    def test_clear(self, cache):
        cache.put("dex_A", PAYLOAD)
        cache.clear()
        assert cache.entry("dex_A") is None

    def test_rejects_non_positive_ttl(self):
        with pytest.raises(ValueError):
            TTLCache(ttl=0)


class TestDuckDBCache:
    @pytest.fixture
    def conn(self):
        conn = duckdb.connect(":memory:")
        init_tables(conn)
        yield conn
        conn.close()

    def test_roundtrip_and_expiry(self, conn, clock):
        store = DuckDBCache(conn=conn, ttl=60.0, clock=clock)
        store.put("dex_A", PAYLOAD)
        clock.advance(59.999)
        assert store.get("dex_A") == PAYLOAD
        clock.advance(0.002)
        assert store.get("dex_A") is None

    def test_shared_across_instances(self, conn, clock):
        DuckDBCache(conn=conn, clock=clock).put("dex_A", PAYLOAD)
        assert DuckDBCache(conn=conn, clock=clock).get("dex_A") == PAYLOAD

    def test_overwrite(self, conn, clock):
        store = DuckDBCache(conn=conn, clock=clock)
        store.put("dex_A", PAYLOAD)
        store.put("dex_A", {"pairs": []})
        assert store.get("dex_A") == {"pairs": []}
        assert store.fetchone("SELECT COUNT(*) FROM market_cache")[0] == 1

    def test_clear(self, conn, clock):
        store = DuckDBCache(conn=conn, clock=clock)
        store.put("dex_A", PAYLOAD)
        store.clear()
        assert store.entry("dex_A") is None


class TestCreateCache:
    def test_memory(self):
        assert isinstance(create_cache("memory"), TTLCache)

    def test_unknown(self):
        with pytest.raises(ValueError):
            create_cache("redis")


class TestDuckDBCacheFailures:
    def test_closed_connection_raises_cache_unavailable(self, clock):
        conn = duckdb.connect(":memory:")
        init_tables(conn)
        store = DuckDBCache(conn=conn, clock=clock)
        store.put("dex_A", PAYLOAD)
        store.close()
        with pytest.raises(CacheUnavailable):
            store.get("dex_A")
        with pytest.raises(CacheUnavailable):
            store.put("dex_A", PAYLOAD)


class TestBaseCache:
    def test_backend_missing_hook_fails_at_init(self):
        class ClearOnly(BaseCache):
            def clear(self) -> None:
                pass

        with pytest.raises(TypeError):
            ClearOnly()

    def test_memory_close_keeps_entries(self, cache):
        cache.put("dex_A", PAYLOAD)
        cache.close()
        assert cache.get("dex_A") == PAYLOAD
