"""Per-instance publish/subscribe for cache events."""

from typing import Any

from nscache.core.interfaces.event_listener import EVENT_NAMES, IEventListener

Listener = IEventListener


class EventBus:
    """Publish/subscribe hub for ``set``, ``del`` and ``expired`` events.

    Each cache instance owns its own bus; nothing is registered
    globally. Listeners run synchronously in subscription order.
    """

    def __init__(self) -> None:
        """Initialize an empty bus."""
        # Each subscription is (listener, once)
        self._subscriptions: dict[str, list[tuple[Listener, bool]]] = {
            name: [] for name in EVENT_NAMES
        }

    def on(self, event: str, listener: Listener) -> None:
        """Subscribe a listener until it is removed.

        Args:
            event: One of ``set``, ``del``, ``expired``.
            listener: Called with ``(key, value)``.

        Raises:
            ValueError: If the event name is unknown.
        """
        self._listeners_for(event).append((listener, False))

    def once(self, event: str, listener: Listener) -> None:
        """Subscribe a listener for the next emission only.

        Args:
            event: One of ``set``, ``del``, ``expired``.
            listener: Called with ``(key, value)``.

        Raises:
            ValueError: If the event name is unknown.
        """
        self._listeners_for(event).append((listener, True))

    def off(self, event: str, listener: Listener | None = None) -> None:
        """Unsubscribe a listener, or every listener of an event.

        Args:
            event: One of ``set``, ``del``, ``expired``.
            listener: The listener to remove. Removes all if None.

        Raises:
            ValueError: If the event name is unknown.
        """
        subscriptions = self._listeners_for(event)
        if listener is None:
            subscriptions.clear()
            return
        subscriptions[:] = [s for s in subscriptions if s[0] is not listener]

    def emit(self, event: str, key: str, value: Any) -> None:
        """Notify every listener of an event.

        Args:
            event: One of ``set``, ``del``, ``expired``.
            key: The affected cache key.
            value: The value involved.

        Raises:
            ValueError: If the event name is unknown.
        """
        subscriptions = self._listeners_for(event)
        if not subscriptions:
            return

        current = list(subscriptions)
        # Drop one-shot listeners before calling anything
        subscriptions[:] = [s for s in subscriptions if not s[1]]

        for listener, _ in current:
            listener(key, value)

    def listener_count(self, event: str) -> int:
        """Return the number of listeners subscribed to an event."""
        return len(self._listeners_for(event))

    def _listeners_for(self, event: str) -> list[tuple[Listener, bool]]:
        try:
            return self._subscriptions[event]
        except KeyError:
            raise ValueError(
                f"Unknown event {event!r}, expected one of {', '.join(EVENT_NAMES)}"
            ) from None
