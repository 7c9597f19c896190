"""Redis storage backend for nscache."""

from nscache_redis.backend import RedisStorageBackend

__all__ = ["RedisStorageBackend"]
