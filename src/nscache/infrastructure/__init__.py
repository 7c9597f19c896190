"""Infrastructure layer implementations for nscache."""

from nscache.infrastructure.backends import (
    BoundedMemoryStorageBackend,
    InMemoryStorageBackend,
    MappingStorageBackend,
    MemoryRegistry,
    get_default_registry,
)
from nscache.infrastructure.key_builders import DefaultKeyBuilder
from nscache.infrastructure.serializers import JsonSerializer, SerializationError

__all__ = [
    "InMemoryStorageBackend",
    "MappingStorageBackend",
    "BoundedMemoryStorageBackend",
    "MemoryRegistry",
    "get_default_registry",
    "DefaultKeyBuilder",
    "JsonSerializer",
    "SerializationError",
]
