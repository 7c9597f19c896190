"""Domain entities for nscache."""

from nscache.core.entities.cache_config import (
    DEFAULT_NAMESPACE,
    DEFAULT_PREFIX,
    CacheConfig,
    MaxStrategy,
)
from nscache.core.entities.cache_entry import CacheEntry

__all__ = [
    "CacheEntry",
    "CacheConfig",
    "MaxStrategy",
    "DEFAULT_NAMESPACE",
    "DEFAULT_PREFIX",
]
