"""Mapping-backed storage backends."""

from collections.abc import MutableMapping
from datetime import timedelta
from typing import Any

from cachetools import LRUCache, TTLCache  # type: ignore[import-untyped]

from nscache.utils.timing import to_millis


class MappingStorageBackend:
    """Storage backend over any mutable mapping.

    Useful for plugging in dict-like stores (``shelve`` objects,
    ``dbm`` wrappers, plain dicts shared between components).
    """

    def __init__(self, mapping: MutableMapping[str, Any] | None = None) -> None:
        """Initialize the backend.

        Args:
            mapping: The mapping holding records. A new dict if None.
        """
        self._mapping: MutableMapping[str, Any] = {} if mapping is None else mapping

    def get(self, key: str) -> Any | None:
        return self._mapping.get(key)

    def set(self, key: str, value: Any) -> None:
        self._mapping[key] = value

    def delete(self, key: str) -> None:
        self._mapping.pop(key, None)

    def clear(self) -> None:
        """Remove every record in the mapping."""
        self._mapping.clear()

    def __len__(self) -> int:
        return len(self._mapping)


class BoundedMemoryStorageBackend(MappingStorageBackend):
    """In-memory backend that bounds how many namespace records it keeps.

    Uses cachetools for LRU eviction of whole namespace records and,
    when ``ttl`` is given, for dropping records that were not written
    within that time. Entry-level expiry and capacity are still
    handled by the cache itself.
    """

    def __init__(
        self,
        maxsize: int = 1024,
        ttl: int | timedelta | None = None,
    ) -> None:
        """Initialize the bounded backend.

        Args:
            maxsize: Maximum number of namespace records kept.
            ttl: Optional record lifetime in milliseconds or as a timedelta.
        """
        self._maxsize = maxsize
        mapping: MutableMapping[str, Any]
        if ttl is None:
            mapping = LRUCache(maxsize=maxsize)
        else:
            mapping = TTLCache(maxsize=maxsize, ttl=to_millis(ttl) / 1000)
        super().__init__(mapping)

    @property
    def maxsize(self) -> int:
        """Return the maximum number of records kept."""
        return self._maxsize
