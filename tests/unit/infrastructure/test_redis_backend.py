"""Tests for RedisStorageBackend."""

from unittest.mock import MagicMock

import pytest

from nscache import Cache
from nscache_redis import RedisStorageBackend


@pytest.fixture
def client() -> MagicMock:
    """Create a Redis client double backed by a dict."""
    data: dict[str, bytes] = {}
    client = MagicMock()
    client.get.side_effect = data.get
    client.set.side_effect = lambda key, value: data.__setitem__(key, value)
    client.delete.side_effect = lambda *keys: sum(data.pop(k, None) is not None for k in keys)
    client.data = data
    return client


class TestRedisStorageBackend:
    """Tests for RedisStorageBackend."""

    @pytest.fixture
    def backend(self, client: MagicMock) -> RedisStorageBackend:
        """Create a backend for testing."""
        return RedisStorageBackend(key_prefix="app", client=client)

    def test_set_and_get(self, backend: RedisStorageBackend, client: MagicMock) -> None:
        """Test records are stored under the prefixed key."""
        backend.set("nscache_users", b"{}")

        client.set.assert_called_once_with("app:nscache_users", b"{}")
        assert backend.get("nscache_users") == b"{}"

    def test_prefix_not_doubled(self, backend: RedisStorageBackend, client: MagicMock) -> None:
        """Test already prefixed keys are used as is."""
        backend.get("app:ns")

        client.get.assert_called_once_with("app:ns")

    def test_delete(self, backend: RedisStorageBackend, client: MagicMock) -> None:
        """Test deleting a record."""
        backend.set("ns", b"{}")

        backend.delete("ns")

        assert backend.get("ns") is None

    def test_clear_scans_prefix(self, backend: RedisStorageBackend, client: MagicMock) -> None:
        """Test clearing deletes prefixed keys page by page."""
        client.scan.side_effect = [
            (7, [b"app:a", b"app:b"]),
            (0, [b"app:c"]),
        ]
        client.delete.side_effect = lambda *keys: len(keys)

        backend.clear()

        assert client.scan.call_count == 2
        client.scan.assert_any_call(0, match="app:*", count=100)
        client.scan.assert_any_call(7, match="app:*", count=100)
        assert client.delete.call_count == 2

    def test_context_manager_closes(self, client: MagicMock) -> None:
        """Test leaving the context closes the client."""
        with RedisStorageBackend(client=client):
            pass

        client.close.assert_called_once()

    def test_from_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a client is built from the URL when none is given."""
        from_url = MagicMock()
        monkeypatch.setattr("nscache_redis.backend.redis.from_url", from_url)

        RedisStorageBackend(redis_url="redis://cache:6379/2")

        from_url.assert_called_once_with("redis://cache:6379/2")

    def test_cache_over_redis(self, client: MagicMock) -> None:
        """Test a cache stores JSON-encoded records in Redis."""
        cache = Cache("users", storage=RedisStorageBackend(client=client))

        assert cache.set("alice", {"id": 1}) is True
        assert isinstance(client.data["nscache:nscache_users"], bytes)
        assert cache.get("alice") == {"id": 1}
