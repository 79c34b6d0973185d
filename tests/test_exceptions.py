"""
Tests for custom exceptions.
"""

import pytest

from oratime.exceptions import (
    ConfigurationError,
    DataError,
    InstantRangeError,
    LiteralParseError,
    OraTimeError,
)


class TestExceptionHierarchy:
    """Test custom exception classes and hierarchy."""

    def test_oratime_error_base(self):
        """Test OraTimeError base exception."""
        error = OraTimeError("Test error", details={"key": "value"})
        assert str(error) == "Test error (key='value')"
        assert error.message == "Test error"
        assert error.details == {"key": "value"}

    def test_oratime_error_no_details(self):
        """Test OraTimeError without details."""
        error = OraTimeError("Test error")
        assert str(error) == "Test error"
        assert error.details == {}

    def test_literal_parse_error_str_quotes_text_and_grammar(self):
        """Test details are quoted so spaces in a literal stay readable."""
        error = LiteralParseError(
            "Text '2024-01-15T10:30:00' could not be parsed",
            details={"text": "2024-01-15T10:30:00", "grammar": "yyyy-MM-dd HH:mm:ss[.fraction]"},
        )
        assert str(error) == (
            "Text '2024-01-15T10:30:00' could not be parsed "
            "(text='2024-01-15T10:30:00', grammar='yyyy-MM-dd HH:mm:ss[.fraction]')"
        )

    def test_details_are_copied(self):
        """Test the caller's details dictionary is not shared with the error."""
        details = {"text": "x"}
        error = DataError("bad", details=details)
        details["text"] = "y"
        assert error.details == {"text": "x"}

    def test_details_are_keyword_only(self):
        """Test details cannot be passed positionally."""
        with pytest.raises(TypeError):
            OraTimeError("bad", {"text": "x"})

    def test_configuration_error(self):
        """Test ConfigurationError."""
        error = ConfigurationError("Invalid config")
        assert isinstance(error, OraTimeError)
        assert str(error) == "Invalid config"

    @pytest.mark.parametrize("error_type", [LiteralParseError, InstantRangeError])
    def test_data_error_hierarchy(self, error_type):
        """Test that parse and range errors are data errors."""
        error = error_type("bad value")
        assert isinstance(error, DataError)
        assert isinstance(error, OraTimeError)

    def test_literal_parse_error_is_value_error(self):
        """Test that callers catching ValueError also catch parse errors."""
        with pytest.raises(ValueError):
            raise LiteralParseError("bad literal", details={"text": "x"})


class TestUserMessages:
    """Test user-facing messages."""

    def test_literal_parse_error_default_user_message(self):
        """Test the generic message hides the offending text."""
        error = LiteralParseError("Text 'secret' could not be parsed", details={"text": "secret"})
        assert error.to_user_message() == "The value is not a recognized timestamp format."

    def test_custom_user_message(self):
        """Test an explicit user message wins."""
        error = DataError("internal", user_message="Please check the input file.")
        assert error.to_user_message() == "Please check the input file."

    def test_user_message_defaults_to_message(self):
        """Test the message is used when no user message is given."""
        assert InstantRangeError("out of range").to_user_message() == "out of range"
