"""Storage backend implementations."""

from nscache.infrastructure.backends.mapping import (
    BoundedMemoryStorageBackend,
    MappingStorageBackend,
)
from nscache.infrastructure.backends.memory import (
    InMemoryStorageBackend,
    MemoryRegistry,
    get_default_registry,
)

__all__ = [
    "InMemoryStorageBackend",
    "MemoryRegistry",
    "get_default_registry",
    "MappingStorageBackend",
    "BoundedMemoryStorageBackend",
]
