"""
Tests for the pydantic-settings configuration.

Tests cover:
- Default configuration values
- Environment variable overrides
- Configuration validation
- Settings caching
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from oratime.exceptions import ConfigurationError
from oratime.settings import Settings, get_settings

pytestmark = pytest.mark.usefixtures("fresh_settings")


class TestSettingsDefaults:
    """Test default configuration values."""

    def test_logging_defaults(self):
        """Test logging configuration defaults."""
        settings = Settings()

        assert settings.log_level == "INFO"
        assert "%(levelname)s" in settings.log_format

    def test_batch_defaults(self):
        """Test batch conversion defaults."""
        settings = Settings()

        assert settings.on_error == "raise"
        assert settings.literal_column == "value"


class TestEnvironmentVariableOverrides:
    """Test environment variable overrides."""

    def test_log_level_override_is_normalized(self):
        """Test ORATIME_LOG_LEVEL environment variable."""
        with patch.dict(os.environ, {"ORATIME_LOG_LEVEL": " debug "}):
            settings = Settings()
            assert settings.log_level == "DEBUG"

    def test_on_error_override(self):
        """Test ORATIME_ON_ERROR environment variable."""
        with patch.dict(os.environ, {"ORATIME_ON_ERROR": "coerce"}):
            settings = Settings()
            assert settings.on_error == "coerce"

    def test_literal_column_override(self):
        """Test ORATIME_LITERAL_COLUMN environment variable."""
        with patch.dict(os.environ, {"ORATIME_LITERAL_COLUMN": "redo_value"}):
            settings = Settings()
            assert settings.literal_column == "redo_value"

    def test_unprefixed_variables_are_ignored(self):
        """Test that variables without the prefix do not leak in."""
        with patch.dict(os.environ, {"ON_ERROR": "coerce"}):
            settings = Settings()
            assert settings.on_error == "raise"


class TestSettingsValidation:
    """Test configuration validation."""

    def test_invalid_log_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValidationError, match="log_level must be one of"):
            Settings(log_level="LOUD")

    def test_invalid_on_error(self):
        """Test that unknown batch policies are rejected."""
        with pytest.raises(ValidationError):
            Settings(on_error="ignore")

    def test_empty_literal_column(self):
        """Test that the literal column cannot be empty."""
        with pytest.raises(ValidationError):
            Settings(literal_column="")

    def test_get_settings_wraps_validation_errors(self, env_vars):
        """Test that get_settings() reports bad environments as ConfigurationError."""
        env_vars({"ORATIME_ON_ERROR": "sometimes"})

        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()

        assert exc_info.value.details == {"errors": 1}


class TestSettingsCaching:
    """Test settings caching behavior."""

    def test_get_settings_returns_same_instance(self):
        """Test that get_settings() returns the same cached instance."""
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

    def test_get_settings_returns_settings_instance(self):
        """Test that get_settings() returns a Settings instance."""
        assert isinstance(get_settings(), Settings)
