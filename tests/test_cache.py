"""Tests for the formatter cache."""

import threading
import time

import pytest

from humantime.cache import (
    DEFAULT_CACHE_SIZE,
    CacheStats,
    FormatterCache,
    clear_cache,
    get_default_cache,
)


class TestCacheStats:
    """Tests for CacheStats."""

    def test_hit_rate(self):
        stats = CacheStats()
        assert stats.hit_rate == 0.0

        stats.record_hit()
        stats.record_miss()
        assert stats.hit_rate == 50.0

    def test_to_dict(self):
        stats = CacheStats(hits=3, misses=1, evictions=2)
        assert stats.to_dict() == {
            "hits": 3,
            "misses": 1,
            "evictions": 2,
            "hit_rate_percent": 75.0,
        }

    def test_reset(self):
        stats = CacheStats(hits=3, misses=1, evictions=2)
        stats.reset()
        assert (stats.hits, stats.misses, stats.evictions) == (0, 0, 0)


class TestFormatterCache:
    """Tests for FormatterCache."""

    def test_get_set(self):
        cache = FormatterCache(max_size=10)
        cache.set("a", 1)

        assert cache.get("a") == 1
        assert cache.get("missing") is None
        assert cache.stats.hits == 1
        assert cache.stats.misses == 1

    def test_default_capacity(self):
        assert FormatterCache().max_size == DEFAULT_CACHE_SIZE == 100

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_size(self, size):
        with pytest.raises(ValueError):
            FormatterCache(max_size=size)

    def test_lru_eviction(self):
        """Test the least recently used entry is evicted first."""
        cache = FormatterCache(max_size=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")
        cache.set("c", 3)

        assert "b" not in cache
        assert cache.keys() == ["a", "c"]
        assert cache.stats.evictions == 1
        assert len(cache) == 2

    def test_set_existing_key_refreshes_recency(self):
        cache = FormatterCache(max_size=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("a", 10)
        cache.set("c", 3)

        assert cache.get("a") == 10
        assert "b" not in cache

    def test_get_or_create_builds_once(self):
        cache = FormatterCache(max_size=10)
        calls = []

        def factory():
            calls.append(1)
            return object()

        first = cache.get_or_create("key", factory)
        second = cache.get_or_create("key", factory)

        assert first is second
        assert len(calls) == 1
        assert cache.stats.misses == 1
        assert cache.stats.hits == 1

    def test_get_or_create_evicts(self):
        cache = FormatterCache(max_size=1)
        cache.get_or_create("a", lambda: 1)
        cache.get_or_create("b", lambda: 2)

        assert cache.keys() == ["b"]
        assert cache.stats.evictions == 1

    def test_delete(self):
        cache = FormatterCache()
        cache.set("a", None)

        assert cache.delete("a") is True
        assert cache.delete("a") is False

    def test_clear_resets_stats(self):
        cache = FormatterCache()
        cache.set("a", 1)
        cache.get("a")
        cache.get("b")
        cache.clear()

        assert cache.size == 0
        assert cache.stats.hits == 0
        assert cache.stats.misses == 0

    def test_resize_shrinks(self):
        """Test shrinking evicts least recently used entries."""
        cache = FormatterCache(max_size=5)
        for key in "abcde":
            cache.set(key, key)
        cache.resize(2)

        assert cache.max_size == 2
        assert cache.keys() == ["d", "e"]
        assert cache.stats.evictions == 3

    def test_resize_invalid(self):
        with pytest.raises(ValueError):
            FormatterCache().resize(0)

    def test_concurrent_get_or_create(self):
        """Test concurrent callers construct a key only once."""
        cache = FormatterCache(max_size=10)
        calls = []
        results = []

        def factory():
            calls.append(1)
            time.sleep(0.01)
            return object()

        def worker():
            results.append(cache.get_or_create("shared", factory))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert len(results) == 8
        assert all(result is results[0] for result in results)


class TestDefaultCache:
    """Tests for the shared cache."""

    def test_singleton(self):
        assert get_default_cache() is get_default_cache()

    def test_clear_cache(self):
        get_default_cache().set("a", 1)
        clear_cache()
        assert get_default_cache().size == 0
