"""Domain services for nscache."""

from nscache.core.services.entry_table import (
    EntryTable,
    NamespaceTable,
    decode_table,
    encode_table,
)
from nscache.core.services.event_bus import EventBus
from nscache.core.services.eviction import Admission, EvictionController
from nscache.core.services.expiry import compute_expiry, is_valid
from nscache.core.services.sweeper import Sweeper

__all__ = [
    # Expiry policy
    "compute_expiry",
    "is_valid",
    # Entry table
    "EntryTable",
    "NamespaceTable",
    "decode_table",
    "encode_table",
    # Capacity
    "Admission",
    "EvictionController",
    # Events and sweeping
    "EventBus",
    "Sweeper",
]
