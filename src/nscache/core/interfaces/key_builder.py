"""Key builder interface."""

from typing import Protocol


class IKeyBuilder(Protocol):
    """Contract for computing the storage key of a namespace.

    All entries of a namespace live in one record, stored under the
    key returned here.
    """

    def build(self, namespace: str) -> str:
        """Build the storage key for a namespace.

        Args:
            namespace: The cache namespace.

        Returns:
            The key under which the namespace record is stored.
        """
        ...
