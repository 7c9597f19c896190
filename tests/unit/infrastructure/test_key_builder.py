"""Tests for DefaultKeyBuilder."""

import pytest

from nscache.infrastructure.key_builders.default import DefaultKeyBuilder


class TestDefaultKeyBuilder:
    """Tests for DefaultKeyBuilder."""

    @pytest.fixture
    def key_builder(self) -> DefaultKeyBuilder:
        """Create a key builder for testing."""
        return DefaultKeyBuilder(prefix="app_")

    def test_build(self, key_builder: DefaultKeyBuilder) -> None:
        """Test the prefix and namespace are joined."""
        assert key_builder.build("users") == "app_users"

    def test_empty_namespace(self, key_builder: DefaultKeyBuilder) -> None:
        """Test an empty namespace means the default one."""
        assert key_builder.build("") == "app_default"

    def test_default_prefix(self) -> None:
        """Test the default prefix."""
        assert DefaultKeyBuilder().build("users") == "nscache_users"

    def test_empty_prefix(self) -> None:
        """Test an empty prefix leaves the namespace as is."""
        builder = DefaultKeyBuilder(prefix="")

        assert builder.build("users") == "users"
        assert builder.prefix == ""

    def test_distinct_namespaces(self, key_builder: DefaultKeyBuilder) -> None:
        """Test different namespaces get different keys."""
        assert key_builder.build("a") != key_builder.build("b")
