"""Storage capability detection."""

import secrets
from itertools import count
from typing import Any

_uid = count(1)


def unique_id(prefix: str = "nscache") -> str:
    """Return a process-unique identifier.

    Args:
        prefix: Leading part of the identifier.

    Returns:
        A string like ``nscache_3f9a01c2d4e5_7``.
    """
    return f"{prefix}_{secrets.token_hex(6)}_{next(_uid)}"


def is_storage_supported(storage: Any) -> bool:
    """Check whether an object can serve as a storage backend.

    The object must expose callable ``get``, ``set`` and ``delete``
    methods, and a probe key must be writable and removable without
    raising.

    Args:
        storage: The candidate storage backend.

    Returns:
        True if the storage passed the probe, False otherwise.
    """
    if storage is None:
        return False
    if not all(callable(getattr(storage, name, None)) for name in ("get", "set", "delete")):
        return False

    probe_key = unique_id()
    try:
        storage.set(probe_key, "1")
        storage.delete(probe_key)
    except Exception:
        return False
    return True
