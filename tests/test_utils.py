"""Tests for environment helpers."""

import pytest

from append_file_tools import get_env_var


class TestGetEnvVar:
    """Test environment variable lookup."""

    def test_returns_value_when_set(self, monkeypatch):
        """Test that a set variable is returned."""
        monkeypatch.setenv("APPEND_FILE_TEST_VAR", "value")

        assert get_env_var("APPEND_FILE_TEST_VAR") == "value"

    def test_returns_default_when_unset(self, monkeypatch):
        """Test that the default is returned for an unset variable."""
        monkeypatch.delenv("APPEND_FILE_TEST_VAR", raising=False)

        assert get_env_var("APPEND_FILE_TEST_VAR", "fallback") == "fallback"

    def test_empty_value_uses_default(self, monkeypatch):
        """Test that an empty variable falls back to the default."""
        monkeypatch.setenv("APPEND_FILE_TEST_VAR", "")

        assert get_env_var("APPEND_FILE_TEST_VAR", "fallback") == "fallback"

    def test_required_missing_raises(self, monkeypatch):
        """Test that a missing required variable raises ValueError."""
        monkeypatch.delenv("APPEND_FILE_TEST_VAR", raising=False)

        with pytest.raises(ValueError, match="APPEND_FILE_TEST_VAR"):
            get_env_var("APPEND_FILE_TEST_VAR", required=True)
