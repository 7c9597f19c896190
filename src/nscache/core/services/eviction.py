"""Eviction controller - capacity enforcement on insert."""

import logging
import math
from collections.abc import Mapping
from enum import Enum

from nscache.core.entities.cache_config import CacheConfig, MaxStrategy
from nscache.core.entities.cache_entry import CacheEntry

logger = logging.getLogger(__name__)


class Admission(str, Enum):
    """Outcome of a capacity check for a new key."""

    ACCEPT = "accept"
    REJECT = "reject"
    REPLACE = "replace"


class EvictionController:
    """Decides whether a new key fits and which entry makes room for it.

    The controller never touches storage. The cache hands it entry
    counts and a snapshot of valid entries and acts on its decision.
    """

    def __init__(self, config: CacheConfig) -> None:
        """Initialize the controller.

        Args:
            config: The cache configuration holding ``max_size`` and
                ``max_strategy``.
        """
        self._config = config

    def is_limited(self, count: int) -> bool:
        """Check whether ``count`` entries leave no room for another key.

        Args:
            count: The number of entries currently held.

        Returns:
            True if a capacity bound applies and is reached.
        """
        return not self._config.is_unlimited and count >= self._config.max_size

    def admit(self, valid_count: int) -> Admission:
        """Decide how to admit a new key given the valid entry count.

        Args:
            valid_count: Number of valid entries after purging expired ones.

        Returns:
            ACCEPT if there is room, otherwise REJECT or REPLACE
            according to the configured strategy.
        """
        if self._config.max_size == 0:
            return Admission.REJECT
        if not self.is_limited(valid_count):
            return Admission.ACCEPT
        if self._config.max_strategy == MaxStrategy.REPLACED:
            return Admission.REPLACE
        return Admission.REJECT

    def select_victim(self, entries: Mapping[str, CacheEntry]) -> str | None:
        """Choose the entry to evict under the REPLACED strategy.

        The entry expiring soonest wins; entries that never expire rank
        last. Ties go to the oldest write, then to insertion order.

        Args:
            entries: Valid entries in insertion order.

        Returns:
            The key to evict, or None if there are no entries.
        """
        victim: str | None = None
        best: tuple[float, int] | None = None

        for key, entry in entries.items():
            rank = (eviction_rank(entry), entry.last_modified)
            if best is None or rank < best:
                victim, best = key, rank

        if victim is not None:
            logger.debug("Selected %r for eviction", victim)
        return victim


def eviction_rank(entry: CacheEntry) -> float:
    """Return the expiry rank of an entry, infinite when it never expires."""
    return math.inf if entry.never_expires else entry.expires_at
