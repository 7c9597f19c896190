"""Tests for Sweeper."""

import logging
from unittest.mock import MagicMock

from nscache.core.services.sweeper import Sweeper


class TestSweeper:
    """Tests for Sweeper."""

    def test_disabled_runs_once(self, timers) -> None:
        """Test a disabled sweeper scans once and arms nothing."""
        scan = MagicMock()
        sweeper = Sweeper(scan, period=0, timer_factory=timers)

        sweeper.start()

        scan.assert_called_once()
        assert timers.timers == []
        assert not sweeper.enabled
        assert not sweeper.running

    def test_start_arms_timer(self, timers) -> None:
        """Test starting scans immediately and arms a daemon timer."""
        scan = MagicMock()
        sweeper = Sweeper(scan, period=1500, timer_factory=timers)

        sweeper.start()

        scan.assert_called_once()
        assert len(timers.pending) == 1
        timer = timers.pending[0]
        assert timer.interval == 1.5
        assert timer.daemon is True
        assert sweeper.running

    def test_tick_rearms(self, timers) -> None:
        """Test every tick scans and arms the next timer."""
        scan = MagicMock()
        sweeper = Sweeper(scan, period=1000, timer_factory=timers)
        sweeper.start()

        timers.fire_pending()
        timers.fire_pending()

        assert scan.call_count == 3
        assert len(timers.timers) == 3
        assert len(timers.pending) == 1

    def test_restart_is_idempotent(self, timers) -> None:
        """Test restarting cancels the pending timer first."""
        sweeper = Sweeper(MagicMock(), period=1000, timer_factory=timers)

        sweeper.start()
        sweeper.start()
        sweeper.start()

        assert len(timers.timers) == 3
        assert len(timers.pending) == 1
        assert all(t.cancelled for t in timers.timers[:2])

    def test_stop(self, timers) -> None:
        """Test stopping cancels the pending timer."""
        scan = MagicMock()
        sweeper = Sweeper(scan, period=1000, timer_factory=timers)
        sweeper.start()

        sweeper.stop()

        assert timers.pending == []
        assert not sweeper.running
        scan.assert_called_once()

    def test_stale_timer_does_nothing(self, timers) -> None:
        """Test a timer firing after stop neither scans nor rearms."""
        scan = MagicMock()
        sweeper = Sweeper(scan, period=1000, timer_factory=timers)
        sweeper.start()
        stale = timers.timers[0]

        sweeper.stop()
        stale.fire()

        scan.assert_called_once()
        assert timers.pending == []

    def test_stop_during_scan(self, timers) -> None:
        """Test stopping while a tick scans prevents rearming."""
        sweeper: Sweeper

        def scan() -> None:
            sweeper.stop()

        sweeper = Sweeper(MagicMock(), period=1000, timer_factory=timers)
        sweeper.start()
        sweeper._scan = scan

        timers.timers[0].fire()

        assert timers.pending == []
        assert len(timers.timers) == 1

    def test_stop_without_start(self, timers) -> None:
        """Test stopping an idle sweeper is harmless."""
        sweeper = Sweeper(MagicMock(), period=1000, timer_factory=timers)

        sweeper.stop()

        assert not sweeper.running

    def test_failing_tick_keeps_sweeping(self, timers, caplog) -> None:
        """Test a scan error on a tick is logged and the next tick is armed."""
        scan = MagicMock()
        sweeper = Sweeper(scan, period=1000, timer_factory=timers)
        sweeper.start()
        scan.side_effect = RuntimeError("listener failed")

        with caplog.at_level(logging.ERROR):
            timers.fire_pending()

        assert "Sweep pass failed" in caplog.text
        assert len(timers.pending) == 1
        assert sweeper.running

        scan.side_effect = None
        timers.fire_pending()

        assert scan.call_count == 3
