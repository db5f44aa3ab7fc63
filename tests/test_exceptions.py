"""Tests for custom exceptions."""

import pytest

from adjective_agent.exceptions import AdjectiveAgentError, ConfigError, SnapshotError


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    def test_base_error_is_exception(self):
        """Test AdjectiveAgentError inherits from Exception."""
        assert issubclass(AdjectiveAgentError, Exception)

    def test_snapshot_error_inherits_from_base(self):
        """Test SnapshotError inherits from AdjectiveAgentError."""
        assert issubclass(SnapshotError, AdjectiveAgentError)

    def test_config_error_inherits_from_base(self):
        """Test ConfigError inherits from AdjectiveAgentError."""
        assert issubclass(ConfigError, AdjectiveAgentError)


class TestExceptionMessages:
    """Tests for exception message handling."""

    def test_snapshot_error_message(self):
        """Test SnapshotError stores message correctly."""
        error = SnapshotError("Snapshot is missing keys: categories")
        assert str(error) == "Snapshot is missing keys: categories"

    def test_catch_by_base(self):
        """Test specific errors can be caught as the base error."""
        with pytest.raises(AdjectiveAgentError):
            raise ConfigError("Failed to load config")
