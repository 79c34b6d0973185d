"""Conversion of LogMiner timestamp/date literals to instants, and their SQL rewrite.

Example:
    >>> str(text_to_instant("TO_TIMESTAMP('2024-01-15 10:30:00.123456789')"))
    '2024-01-15T10:30:00.123456789Z'
    >>> rewrite_as_formatted_call("TO_TIMESTAMP('2024-01-15 10:30:00')")
    "TO_TIMESTAMP('2024-01-15 10:30:00', 'YYYY-MM-DD HH24:MI:SS.FF')"
"""

from __future__ import annotations

import logging

from oratime.core.time.eras import Era, Instant
from oratime.core.time.grammars import (
    GRAMMAR_A,
    has_meridiem_marker,
    parse_grammar_a_date,
    parse_local_datetime,
)
from oratime.core.time.literals import LiteralKind, classify_literal
from oratime.exceptions import LiteralParseError

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "YYYY-MM-DD HH24:MI:SS.FF"
TIMESTAMP_AM_PM_FORMAT = "YYYY-MM-DD HH24:MI:SS.FF A"

BCE_SIGN = "-"


def text_to_instant(raw: str) -> Instant:
    """Convert a raw literal, wrapped or not, to an absolute instant in GMT.

    ``TO_TIMESTAMP('..')`` bodies are parsed as timestamps and
    ``TO_DATE('..', '..')`` bodies as dates; the format argument is not
    consulted. Anything else is parsed as a bare timestamp body.

    Raises:
        LiteralParseError: If the body does not match its grammar
    """
    literal = classify_literal(raw)
    if literal.kind is LiteralKind.SINGLE_ARG:
        return parse_timestamp_text(literal.text)
    if literal.kind is LiteralKind.TWO_ARG:
        return parse_date_text(literal.text)

    logger.debug(f"Value '{raw}' is not a function call, parsing it as a timestamp")
    return parse_timestamp_text(raw)


def parse_timestamp_text(text: str) -> Instant:
    """Parse a timestamp body; a leading ``-`` places the date before the current era."""
    body = text.strip()
    if body.startswith(BCE_SIGN):
        parsed = parse_local_datetime(body[len(BCE_SIGN):])
        return parsed.with_era(Era.BCE).to_instant()
    return parse_local_datetime(body).to_instant()


def parse_date_text(text: str) -> Instant:
    """Parse a date body; dates before the current era are taken at midnight.

    Unlike timestamps, a date before the current era is not moved to the end
    of the month when its day does not exist in that year.

    Raises:
        LiteralParseError: If the body does not match Grammar A, or names a
            day that does not exist in its year before the current era
    """
    body = text.strip()
    if body.startswith(BCE_SIGN):
        parsed = parse_grammar_a_date(body[len(BCE_SIGN):])
        try:
            moved = parsed.with_era(Era.BCE, strict=True)
        except ValueError as e:
            raise LiteralParseError(
                f"Text '{body}' could not be parsed: {e}",
                details={"text": body, "grammar": GRAMMAR_A},
            ) from e
        return moved.at_midnight().to_instant()
    return parse_grammar_a_date(body).to_instant()


def rewrite_as_formatted_call(raw: str) -> str | None:
    """Rewrite ``TO_TIMESTAMP('..')`` into a call with an explicit format mask.

    ``TO_DATE`` calls already carry a mask and are returned unchanged.

    Returns:
        The rewritten call, or ``None`` when *raw* is neither call form
    """
    literal = classify_literal(raw)
    if literal.kind is LiteralKind.SINGLE_ARG:
        if has_meridiem_marker(literal.text):
            return f"TO_TIMESTAMP('{literal.text}', '{TIMESTAMP_AM_PM_FORMAT}')"
        return f"TO_TIMESTAMP('{literal.text}', '{TIMESTAMP_FORMAT}')"
    if literal.kind is LiteralKind.TWO_ARG:
        return raw
    return None
