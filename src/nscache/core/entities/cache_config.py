"""Cache configuration entity."""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from nscache.utils.timing import to_millis

DEFAULT_PREFIX = "nscache_"
DEFAULT_NAMESPACE = "default"


class MaxStrategy(str, Enum):
    """What happens when a new key would exceed ``max_size``.

    LIMITED rejects the write. REPLACED evicts the valid entry that
    expires soonest (oldest write first among equal expiries) and
    always accepts the write.
    """

    LIMITED = "limited"
    REPLACED = "replaced"


@dataclass
class CacheConfig:
    """Cache configuration.

    Durations (``std_ttl``, ``check_period``) are integer milliseconds;
    ``timedelta`` values are accepted and normalized on construction.

    Capacity:
        ``max_size`` of ``-1`` means unlimited and ``0`` rejects every
        write. Capacity only applies when a new key is inserted; updates
        of existing keys are never rejected.

    Serialization:
        ``needs_serialization=None`` lets the cache decide: records are
        kept as live objects in the built-in memory backend and encoded
        through the serializer for any custom storage.
    """

    max_size: int = -1
    max_strategy: MaxStrategy | str = MaxStrategy.LIMITED
    std_ttl: int | timedelta = 0  # 0 = entries never expire
    check_period: int | timedelta = 0  # 0 = no background sweep
    prefix: str = DEFAULT_PREFIX
    needs_serialization: bool | None = None

    def __post_init__(self) -> None:
        """Normalize durations and validate limits."""
        # A non-positive TTL means entries never expire
        self.std_ttl = max(to_millis(self.std_ttl), 0)
        self.check_period = to_millis(self.check_period)

        if self.max_size < -1:
            raise ValueError(f"max_size must be -1 or greater, got {self.max_size}")
        if self.check_period < 0:
            raise ValueError(f"check_period must not be negative, got {self.check_period}")

        try:
            self.max_strategy = MaxStrategy(self.max_strategy)
        except ValueError as e:
            raise ValueError(f"Unknown max_strategy: {self.max_strategy!r}") from e

    @property
    def is_unlimited(self) -> bool:
        """Whether no capacity bound applies."""
        return self.max_size < 0

    @property
    def sweep_enabled(self) -> bool:
        """Whether the background sweep should run."""
        return self.check_period > 0
