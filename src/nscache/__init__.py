"""nscache - namespace-scoped in-process key-value cache.

Entries carry a time-to-live and are expired lazily on access or by an
optional background sweep. Each namespace can be capped, either
rejecting new keys or replacing the entry closest to expiry, and every
change is published as a ``set``, ``del`` or ``expired`` event.

Example:
    from datetime import timedelta

    from nscache import Cache, CacheConfig, MaxStrategy

    cache = Cache(
        "users",
        CacheConfig(
            std_ttl=timedelta(minutes=5),
            max_size=1000,
            max_strategy=MaxStrategy.REPLACED,
            check_period=timedelta(minutes=10),
        ),
    )
    cache.on("expired", lambda key, value: print(f"{key} expired"))

    cache.set("alice", {"id": 1})
    cache.get("alice")
    # {'id': 1}

Custom storage (records are JSON-encoded by default):
    from nscache import Cache, MappingStorageBackend

    shared = {}
    cache = Cache("users", storage=MappingStorageBackend(shared))
    cache.set("bob", {"id": 2}, ttl=60_000)
    shared["nscache_users"]
    # b'{"bob": {"v": {"id": 2}, "t": ..., "n": ...}}'
"""

from nscache.cache import Cache
from nscache.core.entities import (
    DEFAULT_NAMESPACE,
    DEFAULT_PREFIX,
    CacheConfig,
    CacheEntry,
    MaxStrategy,
)
from nscache.core.interfaces import (
    IEventListener,
    IKeyBuilder,
    ISerializer,
    IStorageBackend,
)
from nscache.core.services import EventBus, Sweeper
from nscache.infrastructure import (
    BoundedMemoryStorageBackend,
    DefaultKeyBuilder,
    InMemoryStorageBackend,
    JsonSerializer,
    MappingStorageBackend,
    MemoryRegistry,
    SerializationError,
    get_default_registry,
)
from nscache.utils.storage import is_storage_supported

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Cache
    "Cache",
    # Core entities
    "CacheConfig",
    "CacheEntry",
    "MaxStrategy",
    "DEFAULT_NAMESPACE",
    "DEFAULT_PREFIX",
    # Core interfaces
    "IStorageBackend",
    "IKeyBuilder",
    "ISerializer",
    "IEventListener",
    # Core services
    "EventBus",
    "Sweeper",
    # Infrastructure implementations
    "InMemoryStorageBackend",
    "MappingStorageBackend",
    "BoundedMemoryStorageBackend",
    "MemoryRegistry",
    "get_default_registry",
    "DefaultKeyBuilder",
    "JsonSerializer",
    "SerializationError",
    # Storage detection
    "is_storage_supported",
]
