import threading

import pytest

from algokit.caches import ExpiringCache, LFUCache, LRUCache


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_lru_missing_key_returns_none():
    cache = LRUCache(2)
    assert cache.get("absent") is None


def test_lru_evicts_least_recently_used():
    cache = LRUCache(2)
    cache.put(1, "one")
    cache.put(2, "two")
    assert cache.get(1) == "one"
    cache.put(3, "three")
    assert cache.get(2) is None
    assert cache.get(1) == "one"
    assert cache.get(3) == "three"
    assert len(cache) == 2


def test_lru_update_refreshes_recency():
    cache = LRUCache(2)
    cache.put(1, "a")
    cache.put(2, "b")
    cache.put(1, "c")
    cache.put(3, "d")
    assert 2 not in cache
    assert cache.get(1) == "c"


def test_lru_zero_capacity_stores_nothing():
    cache = LRUCache(0)
    cache.put(1, "a")
    assert cache.get(1) is None
    assert len(cache) == 0


def test_lru_negative_capacity_rejected():
    with pytest.raises(ValueError):
        LRUCache(-1)


def test_lfu_evicts_least_frequently_used():
    cache = LFUCache(2)
    cache.put(1, 10)
    cache.put(2, 20)
    assert cache.get(1) == 10
    cache.put(3, 30)
    assert cache.get(2) is None
    assert cache.get(1) == 10
    assert cache.get(3) == 30


def test_lfu_ties_broken_by_age():
    cache = LFUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)
    assert "a" not in cache
    assert "b" in cache and "c" in cache


def test_lfu_update_counts_as_use():
    cache = LFUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 5)
    assert cache.frequency("a") == cache.frequency("b") + 1
    cache.put("c", 3)
    assert "b" not in cache
    assert cache.get("a") == 5


def test_lfu_min_frequency_tracks_after_gets():
    cache = LFUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    cache.get(1)
    cache.get(2)
    cache.get(2)
    cache.put(3, 3)
    assert 1 not in cache
    assert cache.get(2) == 2
    assert len(cache) == 2


def test_lfu_zero_capacity_stores_nothing():
    cache = LFUCache(0)
    cache.put(1, 1)
    assert cache.get(1) is None


def test_expiring_returns_value_before_deadline():
    clock = FakeClock()
    cache = ExpiringCache(5, clock=clock)
    cache.put(1, 100)
    clock.now = 5.0
    assert cache.get(1) == 100


def test_expiring_drops_value_after_deadline():
    clock = FakeClock()
    cache = ExpiringCache(5, clock=clock)
    cache.put(1, 100)
    clock.now = 5.5
    assert cache.get(1) is None
    assert len(cache) == 0


def test_expiring_put_refreshes_deadline():
    clock = FakeClock()
    cache = ExpiringCache(5, clock=clock)
    cache.put(1, 100)
    clock.now = 4.0
    cache.put(1, 200)
    clock.now = 8.0
    assert cache.get(1) == 200


def test_expiring_missing_key():
    cache = ExpiringCache(5)
    assert cache.get("absent") is None


def test_expiring_concurrent_puts():
    cache = ExpiringCache(60)

    def fill(offset):
        for i in range(100):
            cache.put(offset + i, i)

    threads = [threading.Thread(target=fill, args=(n * 100,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(cache) == 400
    assert cache.get(250) == 50