"""Default key builder implementation."""

from nscache.core.entities.cache_config import DEFAULT_NAMESPACE, DEFAULT_PREFIX


class DefaultKeyBuilder:
    """Default key builder joining a prefix and the namespace.

    A prefix keeps the records of different applications apart when
    they share one storage.
    """

    def __init__(self, prefix: str = DEFAULT_PREFIX) -> None:
        """Initialize the key builder.

        Args:
            prefix: Prefix for all namespace keys.
        """
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def build(self, namespace: str) -> str:
        """Build the storage key for a namespace.

        Args:
            namespace: The cache namespace. Empty means the default one.

        Returns:
            ``prefix + namespace``.
        """
        return f"{self._prefix}{namespace or DEFAULT_NAMESPACE}"
