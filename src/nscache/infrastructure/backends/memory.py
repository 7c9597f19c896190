"""In-memory storage backend implementation."""

import threading
from typing import Any

from nscache.core.entities.cache_config import DEFAULT_NAMESPACE


class MemoryRegistry:
    """Process-local home of in-memory namespace records.

    Records are grouped in scopes. A scope's table is created on first
    use and lives as long as the registry; nothing is torn down
    automatically. Backends bound to the same registry and scope see
    the same records.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._scopes: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def scope(self, name: str) -> dict[str, Any]:
        """Return the record table of a scope, creating it if needed.

        Args:
            name: The scope name.

        Returns:
            The live table of the scope.
        """
        with self._lock:
            return self._scopes.setdefault(name, {})

    def reset(self, name: str) -> None:
        """Empty a scope's table in place.

        Args:
            name: The scope name.
        """
        with self._lock:
            table = self._scopes.get(name)
            if table is not None:
                table.clear()

    def scopes(self) -> list[str]:
        """Return the names of all scopes created so far."""
        with self._lock:
            return list(self._scopes)


_default_registry: MemoryRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> MemoryRegistry:
    """Return the process-wide registry, creating it on first call.

    Caches built without an explicit storage or registry use this
    registry, so two caches with the same namespace share entries.
    """
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = MemoryRegistry()
        return _default_registry


class InMemoryStorageBackend:
    """In-memory storage backend bound to one registry scope.

    Records are held by reference and never encoded, so a record read
    back is the very object that was stored.
    """

    def __init__(
        self,
        scope: str = DEFAULT_NAMESPACE,
        registry: MemoryRegistry | None = None,
    ) -> None:
        """Initialize the in-memory backend.

        Args:
            scope: The registry scope holding this backend's records.
            registry: The registry to use. Defaults to the process-wide one.
        """
        self._scope = scope
        self._registry = registry or get_default_registry()

    @property
    def scope(self) -> str:
        """The registry scope of this backend."""
        return self._scope

    def get(self, key: str) -> Any | None:
        """Retrieve a stored record.

        Args:
            key: The namespace key.

        Returns:
            The stored record, or None if there is none.
        """
        return self._registry.scope(self._scope).get(key)

    def set(self, key: str, value: Any) -> None:
        """Store a record.

        Args:
            key: The namespace key.
            value: The record to store.
        """
        self._registry.scope(self._scope)[key] = value

    def delete(self, key: str) -> None:
        """Remove a stored record.

        Args:
            key: The namespace key.
        """
        self._registry.scope(self._scope).pop(key, None)

    def clear(self) -> None:
        """Remove every record in this backend's scope."""
        self._registry.reset(self._scope)

    def __len__(self) -> int:
        """Return the number of records in the scope."""
        return len(self._registry.scope(self._scope))
