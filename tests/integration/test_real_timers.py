"""Integration tests running the cache with real time and timers."""

import threading
import time

from nscache import BoundedMemoryStorageBackend, Cache, CacheConfig, MemoryRegistry


class TestRealTimers:
    """End-to-end behavior with threading.Timer and the wall clock."""

    def test_background_sweep_emits_expired(self) -> None:
        """Test the sweeper expires entries with no caller traffic."""
        expired = threading.Event()
        cache = Cache(
            "sweep",
            CacheConfig(std_ttl=20, check_period=25),
            registry=MemoryRegistry(),
        )
        cache.on("expired", lambda key, value: expired.set())

        try:
            cache.set("k", "v")
            assert expired.wait(timeout=5), "sweeper never expired the entry"
            assert len(cache) == 0
        finally:
            cache.close()

    def test_close_stops_sweeping(self) -> None:
        """Test no sweep runs after the cache is closed."""
        cache = Cache(
            "closed",
            CacheConfig(std_ttl=10, check_period=20),
            registry=MemoryRegistry(),
        )
        cache.close()
        cache.set("k", "v")

        time.sleep(0.1)

        assert len(cache) == 1

    def test_expiry_with_wall_clock(self) -> None:
        """Test entries expire on the real clock through a bounded storage."""
        cache = Cache("wall", storage=BoundedMemoryStorageBackend(maxsize=8))
        cache.set("k", "v", 30)

        assert cache.get("k") == "v"
        time.sleep(0.06)
        assert cache.get("k") is None

    def test_concurrent_callers_on_one_instance(self) -> None:
        """Test threads sharing one instance do not lose writes."""
        cache = Cache("threads", registry=MemoryRegistry())

        def writer(offset: int) -> None:
            for i in range(50):
                cache.set(f"k{offset + i}", i)

        threads = [threading.Thread(target=writer, args=(n * 100,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(cache.keys()) == 200
