"""Namespace-scoped TTL cache - the public entry point.

Composes the entry table, expiry policy, eviction controller, event
bus and sweeper into the operations applications call.
"""

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from datetime import timedelta
from typing import Any

from nscache.core.entities.cache_config import DEFAULT_NAMESPACE, CacheConfig
from nscache.core.entities.cache_entry import CacheEntry
from nscache.core.interfaces.key_builder import IKeyBuilder
from nscache.core.interfaces.serializer import ISerializer
from nscache.core.interfaces.storage_backend import IStorageBackend
from nscache.core.services.entry_table import EntryTable, NamespaceTable
from nscache.core.services.event_bus import EventBus, Listener
from nscache.core.services.eviction import Admission, EvictionController
from nscache.core.services.expiry import is_valid, wrap
from nscache.core.services.sweeper import Sweeper, TimerFactory
from nscache.infrastructure.backends.memory import InMemoryStorageBackend, MemoryRegistry
from nscache.infrastructure.key_builders.default import DefaultKeyBuilder
from nscache.infrastructure.serializers.json import JsonSerializer
from nscache.utils.storage import is_storage_supported
from nscache.utils.timing import now_millis

logger = logging.getLogger(__name__)

Ttl = int | timedelta


class Cache:
    """Key-value cache with TTL expiry, capacity limits and events.

    All entries of a namespace are kept in one record in the storage
    backend. Every operation reads that record, discards expired
    entries it comes across (emitting ``del`` then ``expired``),
    applies its change and writes the record back.

    Operations on one instance are serialized with a re-entrant lock,
    including background sweeps. Two instances sharing a namespace are
    not synchronized with each other.

    Example:
        cache = Cache("sessions", CacheConfig(std_ttl=60_000, max_size=100))
        cache.on("expired", lambda key, value: print("expired", key))

        cache.set("alice", {"token": "abc"})
        cache.get("alice")
        # {'token': 'abc'}

        cache.ttl("alice", timedelta(minutes=5))
        cache.take("alice")
        # {'token': 'abc'}
        cache.has("alice")
        # False
    """

    def __init__(
        self,
        namespace: str | None = None,
        config: CacheConfig | None = None,
        *,
        storage: IStorageBackend | None = None,
        serializer: ISerializer | None = None,
        key_builder: IKeyBuilder | None = None,
        registry: MemoryRegistry | None = None,
        clock: Callable[[], int] | None = None,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        """Initialize the cache and start its sweeper.

        Args:
            namespace: The namespace partition. Empty or None means
                ``"default"``.
            config: Cache configuration. Uses defaults if not provided.
            storage: Custom storage backend. If omitted, or if it fails
                the capability probe, records live in memory.
            serializer: Encoder for records written to a custom storage.
                Defaults to JsonSerializer.
            key_builder: Computes the namespace record key. Defaults to
                DefaultKeyBuilder with the configured prefix.
            registry: Registry for the in-memory backend. Defaults to
                the process-wide registry.
            clock: Returns the current time in epoch milliseconds.
            timer_factory: Builds sweep timers. Defaults to threading.Timer.
        """
        self._namespace = namespace or DEFAULT_NAMESPACE
        self._config = config or CacheConfig()
        self._clock = clock or now_millis
        self._lock = threading.RLock()

        custom = storage is not None and is_storage_supported(storage)
        if storage is not None and not custom:
            logger.warning(
                "Storage %r is not usable, falling back to memory for namespace %r",
                type(storage).__name__,
                self._namespace,
            )

        backend: IStorageBackend
        if custom:
            backend = storage  # type: ignore[assignment]
        else:
            backend = InMemoryStorageBackend(scope=self._namespace, registry=registry)

        needs_serialization = self._config.needs_serialization
        if needs_serialization is None or not custom:
            needs_serialization = custom

        key_builder = key_builder or DefaultKeyBuilder(prefix=self._config.prefix)
        self._table = NamespaceTable(
            storage=backend,
            key=key_builder.build(self._namespace),
            serializer=(serializer or JsonSerializer()) if needs_serialization else None,
        )

        self._events = EventBus()
        self._eviction = EvictionController(self._config)
        self._sweeper = Sweeper(
            scan=self.keys,
            period=self._config.check_period,
            timer_factory=timer_factory,
        )
        self._sweeper.start()

    @property
    def namespace(self) -> str:
        """The namespace of this cache."""
        return self._namespace

    @property
    def cache_key(self) -> str:
        """The storage key of this namespace's record."""
        return self._table.key

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def storage(self) -> IStorageBackend:
        """The storage backend in use."""
        return self._table.storage

    @property
    def events(self) -> EventBus:
        """The event bus of this instance."""
        return self._events

    # Events

    def on(self, event: str, listener: Listener) -> None:
        """Subscribe to ``set``, ``del`` or ``expired`` events."""
        self._events.on(event, listener)

    def once(self, event: str, listener: Listener) -> None:
        """Subscribe to the next ``set``, ``del`` or ``expired`` event."""
        self._events.once(event, listener)

    def off(self, event: str, listener: Listener | None = None) -> None:
        """Unsubscribe a listener, or all listeners of an event."""
        self._events.off(event, listener)

    # Reads

    def get(self, key: str, default: Any = None) -> Any:
        """Get a cached value.

        Args:
            key: The cache key.
            default: Returned when the key is missing or expired.

        Returns:
            The cached value, or ``default``.
        """
        with self._lock:
            entry = self._valid_entry(self._table.read(), key)
            return default if entry is None else entry.value

    def mget(self, keys: list[str] | tuple[str, ...]) -> dict[str, Any]:
        """Get several cached values.

        Args:
            keys: The cache keys.

        Returns:
            A mapping of the keys that were found and valid to their
            values. Empty if ``keys`` is not a list or tuple.
        """
        if not isinstance(keys, (list, tuple)):
            return {}

        with self._lock:
            table = self._table.read()
            now = self._clock()
            found = {}
            expired = []
            for key in keys:
                entry = table.get(key)
                if entry is None:
                    continue
                if is_valid(entry, now):
                    found[key] = entry.value
                elif key not in expired:
                    expired.append(key)
            self._purge(table, expired)
            return found

    def get_all(self) -> dict[str, Any]:
        """Get every valid key and value of the namespace."""
        with self._lock:
            return self.mget(list(self._table.read()))

    def keys(self) -> list[str]:
        """Return the valid keys in insertion order.

        Expired keys met during the scan are removed.
        """
        with self._lock:
            table = self._table.read()
            valid, expired = self._partition(table)
            self._purge(table, expired)
            return valid

    def has(self, key: str) -> bool:
        """Check whether a key is present and valid."""
        with self._lock:
            return self._valid_entry(self._table.read(), key) is not None

    def get_ttl(self, key: str) -> int | None:
        """Get the expiry instant of a key.

        Returns:
            ``0`` if the key never expires, the expiry instant in epoch
            milliseconds otherwise, or None if missing or expired.
        """
        with self._lock:
            entry = self._valid_entry(self._table.read(), key)
            return None if entry is None else entry.expires_at

    def get_last_modified(self, key: str) -> int | None:
        """Get the instant of the last write to a key, or None."""
        with self._lock:
            entry = self._valid_entry(self._table.read(), key)
            return None if entry is None else entry.last_modified

    # Writes

    def set(self, key: str, value: Any, ttl: Ttl | None = None) -> bool:
        """Set a cached value.

        A new key may be rejected, or may displace another entry, when
        the namespace is at capacity. Updating an existing key is never
        rejected.

        Args:
            key: The cache key.
            value: The value to cache.
            ttl: Time-to-live in milliseconds or as a timedelta. Uses
                ``std_ttl`` if None; ``0`` never expires.

        Returns:
            True if the value was stored, False if capacity rejected it.
        """
        with self._lock:
            if self._config.max_size == 0:
                return False

            table = self._table.read()
            removed: list[tuple[str, Any, bool]] = []

            if key not in table and self._eviction.is_limited(len(table)):
                _, expired = self._partition(table)
                removed.extend(self._remove(table, expired, expired=True))

                admission = self._eviction.admit(len(table))
                if admission == Admission.REJECT:
                    if removed:
                        self._table.write(table)
                        self._notify(removed)
                    return False
                if admission == Admission.REPLACE:
                    victim = self._eviction.select_victim(table)
                    if victim is not None:
                        logger.debug("Evicting %r from namespace %r", victim, self._namespace)
                        removed.extend(self._remove(table, [victim], expired=False))

            table[key] = wrap(value, self._clock(), ttl, self._config.std_ttl)
            self._table.write(table)
            self._notify(removed)
            self._events.emit("set", key, value)
            return True

    def mset(self, items: Iterable[Mapping[str, Any]]) -> bool:
        """Set several cached values.

        Every item is attempted even if an earlier one is rejected.

        Args:
            items: Mappings with ``key``, ``value`` and optional ``ttl``.

        Returns:
            True only if every item was stored.
        """
        with self._lock:
            ok = True
            for item in items:
                if not self.set(item["key"], item["value"], item.get("ttl")):
                    ok = False
            return ok

    def delete(self, key: str | list[str] | tuple[str, ...]) -> int:
        """Delete one or more keys without checking expiry.

        Args:
            key: A key or a list of keys.

        Returns:
            The number of keys that were present and removed.
        """
        keys = list(key) if isinstance(key, (list, tuple)) else [key]

        with self._lock:
            table = self._table.read()
            removed = self._remove(table, keys, expired=False)
            if removed:
                self._table.write(table)
                self._notify(removed)
            return len(removed)

    def take(self, key: str, default: Any = None) -> Any:
        """Get a cached value and delete its key.

        Args:
            key: The cache key.
            default: Returned when the key is missing or expired.

        Returns:
            The cached value, or ``default``.
        """
        with self._lock:
            table = self._table.read()
            entry = self._valid_entry(table, key)
            if entry is None:
                return default
            removed = self._remove(table, [key], expired=False)
            self._table.write(table)
            self._notify(removed)
            return entry.value

    def ttl(self, key: str, ttl: Ttl) -> bool:
        """Reset the time-to-live of an existing key.

        Args:
            key: The cache key.
            ttl: New time-to-live from now, in milliseconds or as a
                timedelta; ``0`` or less never expires.

        Returns:
            True if the key existed and was updated, False otherwise.
        """
        with self._lock:
            table = self._table.read()
            entry = self._valid_entry(table, key)
            if entry is None:
                return False
            table[key] = wrap(entry.value, self._clock(), ttl, self._config.std_ttl)
            self._table.write(table)
            return True

    def clear(self) -> None:
        """Discard every entry of the namespace without emitting events."""
        with self._lock:
            self._table.drop()

    # Sweep and lifecycle

    def start_sweep(self) -> None:
        """Run a validity pass now and schedule periodic passes.

        Periodic passes only run when ``check_period`` is positive.
        """
        self._sweeper.start()

    def stop_sweep(self) -> None:
        """Stop scheduling periodic validity passes."""
        self._sweeper.stop()

    def close(self) -> None:
        """Stop the background sweep."""
        self.stop_sweep()

    def __enter__(self) -> "Cache":
        return self

    def __exit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        self.close()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __len__(self) -> int:
        """Return the raw entry count, expired entries included."""
        with self._lock:
            return len(self._table.read())

    def __repr__(self) -> str:
        return f"Cache(namespace={self._namespace!r}, key={self.cache_key!r})"

    # Internals

    def _valid_entry(self, table: EntryTable, key: str) -> CacheEntry | None:
        entry = table.get(key)
        if entry is None:
            return None
        if is_valid(entry, self._clock()):
            return entry
        self._purge(table, [key])
        return None

    def _partition(self, table: EntryTable) -> tuple[list[str], list[str]]:
        now = self._clock()
        valid, expired = [], []
        for key, entry in table.items():
            (valid if is_valid(entry, now) else expired).append(key)
        return valid, expired

    def _purge(self, table: EntryTable, expired: list[str]) -> None:
        if not expired:
            return
        removed = self._remove(table, expired, expired=True)
        logger.debug("Purged %d expired keys from namespace %r", len(removed), self._namespace)
        self._table.write(table)
        self._notify(removed)

    @staticmethod
    def _remove(
        table: EntryTable,
        keys: Iterable[str],
        expired: bool,
    ) -> list[tuple[str, Any, bool]]:
        removed = []
        for key in keys:
            entry = table.pop(key, None)
            if entry is not None:
                removed.append((key, entry.value, expired))
        return removed

    def _notify(self, removed: list[tuple[str, Any, bool]]) -> None:
        for key, value, expired in removed:
            self._events.emit("del", key, value)
            if expired:
                self._events.emit("expired", key, value)
