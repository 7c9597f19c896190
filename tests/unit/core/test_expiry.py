"""Tests for the expiry policy."""

from datetime import timedelta

import pytest

from nscache.core.entities import CacheEntry
from nscache.core.services.expiry import compute_expiry, is_valid, wrap


class TestComputeExpiry:
    """Tests for compute_expiry."""

    def test_explicit_ttl(self) -> None:
        """Test an explicit TTL overrides the default."""
        assert compute_expiry(1000, 500, 9000) == 1500

    def test_default_ttl(self) -> None:
        """Test the default TTL applies when none is given."""
        assert compute_expiry(1000, None, 9000) == 10_000

    def test_zero_ttl_never_expires(self) -> None:
        """Test a zero TTL means no expiry even with a default."""
        assert compute_expiry(1000, 0, 9000) == 0

    def test_no_default(self) -> None:
        """Test no TTL and no default means no expiry."""
        assert compute_expiry(1000, None, 0) == 0

    def test_timedelta_ttl(self) -> None:
        """Test timedelta TTLs are converted to milliseconds."""
        assert compute_expiry(1000, timedelta(seconds=2), 0) == 3000


class TestIsValid:
    """Tests for is_valid."""

    def test_never_expires(self) -> None:
        """Test entries without expiry are always valid."""
        assert is_valid(CacheEntry(value=1, expires_at=0), 10**15)

    @pytest.mark.parametrize(
        ("now", "expected"),
        [(1999, True), (2000, False), (2001, False)],
    )
    def test_expiry_boundary(self, now: int, expected: bool) -> None:
        """Test an entry is invalid from its expiry instant on."""
        entry = CacheEntry(value=1, expires_at=2000)

        assert is_valid(entry, now) is expected


class TestWrap:
    """Tests for wrap."""

    def test_wrap_sets_timestamps(self) -> None:
        """Test wrapping stamps expiry and last-modified."""
        entry = wrap("v", 1000, None, 5000)

        assert entry == CacheEntry(value="v", expires_at=6000, last_modified=1000)
