from services.config_cache import TTLCache


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_empty_cache_returns_none():
    assert TTLCache(60).get() is None


def test_set_then_get():
    cache = TTLCache(60, clock=FakeClock())
    cache.set({"a": 1})
    assert cache.get() == {"a": 1}
    assert cache.is_fresh


def test_expires_after_ttl():
    clock = FakeClock()
    cache = TTLCache(300, clock=clock)
    cache.set("config")
    clock.now += 299
    assert cache.get() == "config"
    clock.now += 1
    assert cache.get() is None
    assert not cache.is_fresh


def test_invalidate():
    cache = TTLCache(300, clock=FakeClock())
    cache.set("config")
    cache.invalidate()
    assert cache.get() is None
