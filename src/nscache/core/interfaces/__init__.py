"""Core interfaces (Protocol classes) for nscache."""

from nscache.core.interfaces.event_listener import EVENT_NAMES, IEventListener
from nscache.core.interfaces.key_builder import IKeyBuilder
from nscache.core.interfaces.serializer import ISerializer
from nscache.core.interfaces.storage_backend import IStorageBackend

__all__ = [
    "IStorageBackend",
    "IKeyBuilder",
    "ISerializer",
    "IEventListener",
    "EVENT_NAMES",
]
