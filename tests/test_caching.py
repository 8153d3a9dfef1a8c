from src.app.services.caching import InMemoryTTLCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_entries_expire_after_ttl():
    clock = FakeClock()
    cache = InMemoryTTLCache(clock=clock)
    cache.set("key", {"value": 1}, ttl_seconds=10)

    assert cache.get("key") == {"value": 1}
    clock.now += 9.9
    assert cache.get("key") == {"value": 1}
    clock.now += 0.2
    assert cache.get("key") is None
    assert len(cache) == 0


def test_zero_ttl_is_not_stored():
    cache = InMemoryTTLCache()
    cache.set("key", "value", ttl_seconds=0)
    assert cache.get("key") is None


def test_oldest_entry_evicted_when_full():
    cache = InMemoryTTLCache(max_entries=2)
    cache.set("a", 1, ttl_seconds=60)
    cache.set("b", 2, ttl_seconds=60)
    cache.set("c", 3, ttl_seconds=60)

    assert cache.get("a") is None
    assert cache.get("b") == 2
    assert cache.get("c") == 3


def test_delete_and_clear():
    cache = InMemoryTTLCache()
    cache.set("a", 1, ttl_seconds=60)
    cache.set("b", 2, ttl_seconds=60)

    cache.delete("a")
    cache.delete("missing")
    assert cache.get("a") is None

    cache.clear()
    assert cache.get("b") is None
