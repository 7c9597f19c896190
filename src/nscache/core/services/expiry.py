"""Expiry policy.

Pure functions deciding when an entry expires and whether it is still
valid at a given instant. All instants are epoch milliseconds.
"""

from datetime import timedelta

from nscache.core.entities.cache_entry import CacheEntry
from nscache.utils.timing import to_millis


def compute_expiry(
    now: int,
    ttl: int | timedelta | None,
    default_ttl: int | timedelta,
) -> int:
    """Compute the absolute expiry instant of an entry written at ``now``.

    Args:
        now: The write instant.
        ttl: Explicit TTL for this write, or None to use the default.
        default_ttl: The cache-wide default TTL.

    Returns:
        ``now + ttl`` for a positive effective TTL, otherwise ``0``
        (never expires).
    """
    effective = to_millis(default_ttl if ttl is None else ttl)
    return now + effective if effective > 0 else 0


def is_valid(entry: CacheEntry, now: int) -> bool:
    """Check whether an entry is still valid at ``now``.

    Args:
        entry: The entry to check.
        now: The instant to check against.

    Returns:
        True if the entry never expires or expires after ``now``.
    """
    return entry.expires_at == 0 or entry.expires_at > now


def wrap(
    value: object,
    now: int,
    ttl: int | timedelta | None,
    default_ttl: int | timedelta,
) -> CacheEntry:
    """Create the entry stored for a write at ``now``."""
    return CacheEntry(
        value=value,
        expires_at=compute_expiry(now, ttl, default_ttl),
        last_modified=now,
    )
