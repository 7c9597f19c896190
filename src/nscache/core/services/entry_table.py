"""Entry table - the per-namespace record and its storage boundary."""

import logging
from collections.abc import Mapping
from typing import Any

from nscache.core.entities.cache_entry import CacheEntry
from nscache.core.interfaces.serializer import ISerializer
from nscache.core.interfaces.storage_backend import IStorageBackend

logger = logging.getLogger(__name__)

EntryTable = dict[str, CacheEntry]


def decode_table(record: Any) -> EntryTable:
    """Convert a raw namespace record to an entry table.

    Args:
        record: The stored mapping of key to entry fields.

    Returns:
        The entry table in record order. Any malformed entry makes the
        whole record decode to an empty table.
    """
    if record is None:
        return {}
    if not isinstance(record, Mapping):
        logger.warning("Discarding namespace record of type %s", type(record).__name__)
        return {}

    try:
        return {str(key): CacheEntry.from_record(data) for key, data in record.items()}
    except ValueError as e:
        logger.warning("Discarding malformed namespace record: %s", e)
        return {}


def encode_table(table: Mapping[str, CacheEntry]) -> dict[str, dict[str, Any]]:
    """Convert an entry table to its raw record form."""
    return {key: entry.to_record() for key, entry in table.items()}


class NamespaceTable:
    """Reads and writes one namespace's entry table through a storage backend.

    Without a serializer the table itself is stored and every read
    returns that same object, so lookups cost nothing beyond the dict
    access and in-place changes are visible before they are written.
    With a serializer each read decodes a fresh table. Callers always
    write the table back to persist changes.

    Storage and serialization faults never reach the caller: a failed
    read yields an empty table and a failed write is logged and skipped.
    """

    def __init__(
        self,
        storage: IStorageBackend,
        key: str,
        serializer: ISerializer | None = None,
    ) -> None:
        """Initialize the namespace table.

        Args:
            storage: The backend holding the namespace record.
            key: The storage key of the namespace record.
            serializer: Encodes records for the backend. If None, the
                entry table is stored by reference.
        """
        self._storage = storage
        self._key = key
        self._serializer = serializer

    @property
    def key(self) -> str:
        """The storage key of the namespace record."""
        return self._key

    @property
    def storage(self) -> IStorageBackend:
        """The backend holding the namespace record."""
        return self._storage

    def read(self) -> EntryTable:
        """Read the current entry table.

        Returns:
            The entry table; empty if nothing is stored or the record
            cannot be read.
        """
        try:
            raw = self._storage.get(self._key)
        except Exception:
            logger.warning("Failed to read namespace record %r", self._key, exc_info=True)
            return {}

        if raw is None:
            return {}

        if self._serializer is None:
            if isinstance(raw, dict):
                return raw
            return decode_table(raw)

        if raw == "" or raw == b"":
            return {}
        try:
            raw = self._serializer.deserialize(raw)
        except Exception as e:
            logger.warning("Failed to decode namespace record %r: %s", self._key, e)
            return {}

        return decode_table(raw)

    def write(self, table: Mapping[str, CacheEntry]) -> None:
        """Persist the entry table.

        Args:
            table: The complete table to store.
        """
        record: Any
        if self._serializer is None:
            record = table if isinstance(table, dict) else dict(table)
        else:
            try:
                record = self._serializer.serialize(encode_table(table))
            except Exception as e:
                logger.warning("Failed to encode namespace record %r: %s", self._key, e)
                return

        try:
            self._storage.set(self._key, record)
        except Exception:
            logger.warning("Failed to write namespace record %r", self._key, exc_info=True)

    def drop(self) -> None:
        """Remove the whole namespace record."""
        try:
            self._storage.delete(self._key)
        except Exception:
            logger.warning("Failed to delete namespace record %r", self._key, exc_info=True)
