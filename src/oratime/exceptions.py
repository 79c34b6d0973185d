"""Custom exception classes for oratime.

Exception Hierarchy:
    OraTimeError (base)
    ├── ConfigurationError (invalid settings)
    └── DataError (bad input data)
        ├── LiteralParseError (literal body does not match its grammar)
        └── InstantRangeError (instant not representable by the target type)

Usage:
    >>> from oratime.exceptions import LiteralParseError
    >>> try:
    ...     text_to_instant("TO_TIMESTAMP('not a timestamp')")
    ... except LiteralParseError as e:
    ...     logger.warning(str(e))
"""


class OraTimeError(Exception):
    """Base exception for all oratime errors.

    ``details`` carries the structured context of a failure, such as the
    literal text and the grammar that rejected it. It is appended to
    ``str(error)`` so log lines show exactly which value was refused.
    """

    def __init__(self, message: str, *, details: dict | None = None, user_message: str | None = None):
        """
        Args:
            message: What failed, quoting the offending literal or setting
            details: Context keyed by name (``text``, ``grammar``, ``instant``, ...)
            user_message: Replacement for *message* where raw literals must not be shown
        """
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})
        self._user_message = user_message

    def __str__(self) -> str:
        """Return the message followed by its details, values quoted with ``repr``."""
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} ({context})"

    def to_user_message(self) -> str:
        """Return the message meant for people reading CLI or UI output."""
        return self._user_message or self.message


# ===== Configuration Errors =====


class ConfigurationError(OraTimeError):
    """Raised when settings are invalid or missing."""

    pass


# ===== Data Errors =====


class DataError(OraTimeError):
    """Raised when input data cannot be processed."""

    pass


class LiteralParseError(DataError, ValueError):
    """Raised when a literal body does not conform to the grammar selected for it.

    The offending text and the grammar name are available in ``details``.
    """

    def __init__(self, message: str, *, details: dict | None = None, user_message: str | None = None):
        if user_message is None:
            user_message = "The value is not a recognized timestamp format."
        super().__init__(message, details=details, user_message=user_message)


class InstantRangeError(DataError):
    """Raised when an instant falls outside the range of the requested type."""

    pass


__all__ = [
    "OraTimeError",
    "ConfigurationError",
    "DataError",
    "LiteralParseError",
    "InstantRangeError",
]
