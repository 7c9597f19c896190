"""Event listener interface."""

from typing import Any, Protocol

EVENT_NAMES: tuple[str, ...] = ("set", "del", "expired")


class IEventListener(Protocol):
    """Callable notified of cache changes.

    Listeners receive the key and the value it held (``del`` and
    ``expired``) or was given (``set``).
    """

    def __call__(self, key: str, value: Any) -> None:
        ...
