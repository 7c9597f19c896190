"""Redis storage backend implementation."""

from typing import Any, Optional

import redis


class RedisStorageBackend:
    """Redis storage backend for namespace records.

    Records must be encoded, so use it with serialization enabled
    (the cache default for custom storages). Several processes can
    read the same namespace, but concurrent writers to one namespace
    may overwrite each other's changes.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "nscache",
        client: Optional["redis.Redis"] = None,
    ) -> None:
        """Initialize the Redis storage backend.

        Args:
            redis_url: Redis connection URL. Ignored if ``client`` is given.
            key_prefix: Prefix for all keys written by this backend.
            client: An existing Redis client to use.
        """
        self._redis: redis.Redis = client if client is not None else redis.from_url(redis_url)
        self._key_prefix = key_prefix

    def get(self, key: str) -> Optional[bytes]:
        """Retrieve a stored record.

        Args:
            key: The namespace key.

        Returns:
            The encoded record, or None if there is none.
        """
        return self._redis.get(self._prefixed_key(key))

    def set(self, key: str, value: Any) -> None:
        """Store an encoded record.

        Args:
            key: The namespace key.
            value: The encoded record.
        """
        self._redis.set(self._prefixed_key(key), value)

    def delete(self, key: str) -> None:
        """Remove a stored record.

        Args:
            key: The namespace key.
        """
        self._redis.delete(self._prefixed_key(key))

    def clear(self) -> None:
        """Remove every record with our prefix.

        Note: This only clears keys with our prefix, not the entire Redis DB.
        """
        self._delete_by_pattern(f"{self._key_prefix}:*")

    def _delete_by_pattern(self, pattern: str) -> int:
        """Delete keys matching a pattern using SCAN.

        Uses SCAN instead of KEYS for production safety.

        Args:
            pattern: Redis glob pattern.

        Returns:
            Number of keys deleted.
        """
        count = 0
        cursor = 0

        while True:
            cursor, keys = self._redis.scan(cursor, match=pattern, count=100)

            if keys:
                count += self._redis.delete(*keys)

            if cursor == 0:
                break

        return count

    def _prefixed_key(self, key: str) -> str:
        """Add prefix to key if not already present.

        Args:
            key: The namespace key.

        Returns:
            The key with prefix.
        """
        if key.startswith(f"{self._key_prefix}:"):
            return key
        return f"{self._key_prefix}:{key}"

    def close(self) -> None:
        """Close the Redis connection."""
        self._redis.close()

    def __enter__(self) -> "RedisStorageBackend":
        return self

    def __exit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        self.close()
