"""Core domain layer for nscache."""

from nscache.core.entities import CacheConfig, CacheEntry, MaxStrategy
from nscache.core.interfaces import (
    IEventListener,
    IKeyBuilder,
    ISerializer,
    IStorageBackend,
)
from nscache.core.services import (
    EventBus,
    EvictionController,
    NamespaceTable,
    Sweeper,
)

__all__ = [
    # Entities
    "CacheConfig",
    "CacheEntry",
    "MaxStrategy",
    # Interfaces
    "IStorageBackend",
    "IKeyBuilder",
    "ISerializer",
    "IEventListener",
    # Services
    "NamespaceTable",
    "EvictionController",
    "EventBus",
    "Sweeper",
]
