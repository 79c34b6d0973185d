"""Normalization of Oracle LogMiner timestamp and date literals."""

from oratime.core.time import (
    Era,
    Instant,
    ParsedDateTime,
    rewrite_as_formatted_call,
    text_to_instant,
)
from oratime.exceptions import LiteralParseError

__version__ = "0.1.0"

__all__ = [
    "Era",
    "Instant",
    "ParsedDateTime",
    "LiteralParseError",
    "text_to_instant",
    "rewrite_as_formatted_call",
]
