"""Cache entry entity."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# Wire field names of a stored entry.
VALUE_FIELD = "v"
EXPIRES_FIELD = "t"
MODIFIED_FIELD = "n"


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    Holds a cached value together with its absolute expiry instant and
    the instant of its most recent write, both in epoch milliseconds.
    An ``expires_at`` of ``0`` means the entry never expires.
    """

    value: Any
    expires_at: int = 0
    last_modified: int = 0

    @property
    def never_expires(self) -> bool:
        """Whether this entry has no expiry instant."""
        return self.expires_at == 0

    def to_record(self) -> dict[str, Any]:
        """Convert the entry to its wire mapping.

        Returns:
            A plain mapping with ``v``, ``t`` and ``n`` fields.
        """
        return {
            VALUE_FIELD: self.value,
            EXPIRES_FIELD: self.expires_at,
            MODIFIED_FIELD: self.last_modified,
        }

    @classmethod
    def from_record(cls, record: Any) -> "CacheEntry":
        """Build an entry from its wire mapping.

        Args:
            record: A mapping with ``v``, ``t`` and ``n`` fields, or an
                existing CacheEntry.

        Returns:
            The decoded CacheEntry.

        Raises:
            ValueError: If the record is malformed.
        """
        if isinstance(record, CacheEntry):
            return record
        if not isinstance(record, Mapping):
            raise ValueError(f"Entry record must be a mapping, got {type(record).__name__}")

        try:
            value = record[VALUE_FIELD]
            expires_at = record[EXPIRES_FIELD]
            last_modified = record[MODIFIED_FIELD]
        except KeyError as e:
            raise ValueError(f"Entry record is missing field {e}") from e

        for stamp in (expires_at, last_modified):
            # bool is an int subclass but never a valid timestamp
            if isinstance(stamp, bool) or not isinstance(stamp, int):
                raise ValueError(f"Invalid timestamp in entry record: {stamp!r}")

        return cls(value=value, expires_at=expires_at, last_modified=last_modified)
