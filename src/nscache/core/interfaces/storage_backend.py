"""Storage backend interface."""

from typing import Any, Protocol


class IStorageBackend(Protocol):
    """Contract for namespace record storage.

    A backend stores one opaque record per namespace key. The cache
    reads the whole record, mutates it and writes it back, so backends
    need no knowledge of entries or expiry. Methods are synchronous:
    a cache operation must finish its read-modify-write without
    yielding.

    ``clear`` is optional. When present it wipes every record the
    backend holds, which includes other namespaces sharing it.
    """

    def get(self, key: str) -> Any | None:
        """Retrieve a stored record.

        Args:
            key: The namespace key.

        Returns:
            The stored record, or None if there is none.
        """
        ...

    def set(self, key: str, value: Any) -> None:
        """Store a record, replacing any previous one.

        Args:
            key: The namespace key.
            value: The record, encoded or as live objects.
        """
        ...

    def delete(self, key: str) -> None:
        """Remove the record of a single namespace.

        Args:
            key: The namespace key.
        """
        ...
