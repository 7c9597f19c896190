"""Background validity sweep."""

import logging
import threading
from collections.abc import Callable
from functools import partial
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    """The part of ``threading.Timer`` the sweeper relies on."""

    daemon: bool

    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], Any]], TimerHandle]


class Sweeper:
    """Periodically runs a validity scan of one namespace.

    Every tick runs the scan to completion and then arms the next
    timer. Stopping cancels the pending timer; a scan already running
    is never interrupted.
    """

    def __init__(
        self,
        scan: Callable[[], Any],
        period: int,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        """Initialize the sweeper.

        Args:
            scan: The validity pass to run; its result is discarded.
            period: Milliseconds between passes. ``0`` disables the timer.
            timer_factory: Builds a timer from ``(seconds, callback)``.
                Defaults to ``threading.Timer``.
        """
        self._scan = scan
        self._period = period
        self._timer_factory: TimerFactory = timer_factory or threading.Timer
        self._timer: TimerHandle | None = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        """Whether periodic passes are configured."""
        return self._period > 0

    @property
    def running(self) -> bool:
        """Whether a timer is currently armed."""
        return self._timer is not None

    def start(self) -> None:
        """Run one pass now and arm the next one if enabled.

        Any pending timer is cancelled first, so calling ``start``
        repeatedly never leaves more than one timer armed.
        """
        self._scan()
        self._arm()

    def stop(self) -> None:
        """Cancel the pending timer, if any."""
        with self._lock:
            self._cancel()

    def _arm(self, expected: int | None = None) -> None:
        if not self.enabled:
            return

        with self._lock:
            # stop() or a restart happened while the scan ran
            if expected is not None and expected != self._generation:
                return
            self._cancel()
            timer = self._timer_factory(
                self._period / 1000, partial(self._tick, self._generation)
            )
            timer.daemon = True
            self._timer = timer
            timer.start()

    def _tick(self, generation: int) -> None:
        if generation != self._generation:
            return
        logger.debug("Sweep tick")
        try:
            self._scan()
        except Exception:
            logger.exception("Sweep pass failed")
        finally:
            self._arm(expected=generation)

    def _cancel(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
