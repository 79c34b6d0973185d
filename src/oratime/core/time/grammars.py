"""Textual grammars for LogMiner timestamp bodies.

Grammar A is the canonical ``yyyy-MM-dd HH:mm:ss[.fraction]`` layout.
Grammar B is the short ``dd-MMM-yy hh.mm.ss[.fraction] AM|PM`` layout that
appears when the session uses a 12-hour ``NLS_TIMESTAMP_FORMAT``.

Both accept 0 to 9 fraction digits after a literal ``.``; the digits are read
as a decimal fraction of a second, so ``.5`` is 500 ms.
"""

from __future__ import annotations

import logging
import re

from oratime.core.time.eras import (
    ParsedDateTime,
    date_from_ordinal,
    days_in_month,
    proleptic_ordinal,
)
from oratime.exceptions import LiteralParseError

logger = logging.getLogger(__name__)

GRAMMAR_A = "yyyy-MM-dd HH:mm:ss[.fraction]"
GRAMMAR_B = "dd-MMM-yy hh.mm.ss[.fraction] a"

_FRACTION = r"(?:\.(?P<fraction>\d{0,9}))?"
_TIME_A = r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})" + _FRACTION

_TIMESTAMP_A = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2}) " + _TIME_A,
    re.ASCII | re.IGNORECASE,
)
_DATE_A = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})(?: " + _TIME_A + r")?",
    re.ASCII | re.IGNORECASE,
)
_TIMESTAMP_B = re.compile(
    r"(?P<day>\d{2})-(?P<month>[A-Za-z]{3})-(?P<year>\d{2}) "
    r"(?P<hour>\d{2})\.(?P<minute>\d{2})\.(?P<second>\d{2})" + _FRACTION + r" (?P<ampm>AM|PM)",
    re.ASCII | re.IGNORECASE,
)

# English abbreviations, keyed upper-case for case-insensitive lookup
MONTH_ABBREVIATIONS = {
    name: index
    for index, name in enumerate(
        ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"),
        start=1,
    )
}

TWO_DIGIT_YEAR_BASE = 2000


def _fail(text: str, grammar: str, reason: str) -> LiteralParseError:
    return LiteralParseError(
        f"Text '{text}' could not be parsed: {reason}",
        details={"text": text, "grammar": grammar},
    )


def _fraction_to_nanos(fraction: str | None) -> int:
    if not fraction:
        return 0
    return int(fraction.ljust(9, "0"))


def _check_range(text: str, grammar: str, field: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise _fail(text, grammar, f"{field} {value} is not in {low}..{high}")


def _positive_year(text: str, grammar: str, digits: str) -> int:
    year = int(digits)
    if year == 0:
        raise _fail(text, grammar, "year-of-era 0 does not exist")
    return year


def _resolve(
    text: str,
    grammar: str,
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    nanosecond: int,
) -> ParsedDateTime:
    """Validate field ranges and build the date-time.

    Days past the end of the month are clamped to its last day, and
    ``24:00:00`` with no fraction rolls over to midnight of the next day.
    """
    _check_range(text, grammar, "month", month, 1, 12)
    _check_range(text, grammar, "day-of-month", day, 1, 31)
    _check_range(text, grammar, "minute", minute, 0, 59)
    _check_range(text, grammar, "second", second, 0, 59)

    end_of_day = hour == 24 and minute == 0 and second == 0 and nanosecond == 0
    if not end_of_day:
        _check_range(text, grammar, "hour", hour, 0, 23)

    day = min(day, days_in_month(year, month))
    if end_of_day:
        year, month, day = date_from_ordinal(proleptic_ordinal(year, month, day) + 1)
        hour = 0
    return ParsedDateTime(year, month, day, hour, minute, second, nanosecond)


def parse_grammar_a(text: str) -> ParsedDateTime:
    """Parse ``yyyy-MM-dd HH:mm:ss[.fraction]``.

    Raises:
        LiteralParseError: If *text* does not match the grammar
    """
    match = _TIMESTAMP_A.fullmatch(text)
    if match is None:
        raise _fail(text, GRAMMAR_A, "unrecognized layout")
    return _resolve(
        text,
        GRAMMAR_A,
        _positive_year(text, GRAMMAR_A, match["year"]),
        int(match["month"]),
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"]),
        _fraction_to_nanos(match["fraction"]),
    )


def parse_grammar_a_date(text: str) -> ParsedDateTime:
    """Parse a Grammar A date with an optional time of day; the time defaults to midnight."""
    match = _DATE_A.fullmatch(text)
    if match is None:
        raise _fail(text, GRAMMAR_A, "unrecognized layout")
    has_time = match["hour"] is not None
    return _resolve(
        text,
        GRAMMAR_A,
        _positive_year(text, GRAMMAR_A, match["year"]),
        int(match["month"]),
        int(match["day"]),
        int(match["hour"]) if has_time else 0,
        int(match["minute"]) if has_time else 0,
        int(match["second"]) if has_time else 0,
        _fraction_to_nanos(match["fraction"]),
    )


def parse_grammar_b(text: str) -> ParsedDateTime:
    """Parse ``dd-MMM-yy hh.mm.ss[.fraction] AM|PM``.

    Two-digit years fall in 2000..2099. ``12 AM`` is midnight and ``12 PM``
    is noon; a clock hour of ``00`` is accepted as hour zero of the half day.

    Raises:
        LiteralParseError: If *text* does not match the grammar
    """
    match = _TIMESTAMP_B.fullmatch(text)
    if match is None:
        raise _fail(text, GRAMMAR_B, "unrecognized layout")

    month = MONTH_ABBREVIATIONS.get(match["month"].upper())
    if month is None:
        raise _fail(text, GRAMMAR_B, f"unknown month '{match['month']}'")

    clock_hour = int(match["hour"])
    _check_range(text, GRAMMAR_B, "clock-hour-of-am-pm", clock_hour, 0, 12)
    hour = clock_hour % 12
    if match["ampm"].upper() == "PM":
        hour += 12

    return _resolve(
        text,
        GRAMMAR_B,
        TWO_DIGIT_YEAR_BASE + int(match["year"]),
        month,
        int(match["day"]),
        hour,
        int(match["minute"]),
        int(match["second"]),
        _fraction_to_nanos(match["fraction"]),
    )


def has_meridiem_marker(text: str) -> bool:
    """Whether *text* carries a space-prefixed ``AM`` or ``PM`` after its first character."""
    return text.find(" AM") > 0 or text.find(" PM") > 0


def parse_local_datetime(text: str) -> ParsedDateTime:
    """Parse *text* with Grammar B when it has an AM/PM marker, otherwise Grammar A."""
    if has_meridiem_marker(text):
        logger.debug(f"Parsing '{text}' with grammar {GRAMMAR_B}")
        return parse_grammar_b(text)
    logger.debug(f"Parsing '{text}' with grammar {GRAMMAR_A}")
    return parse_grammar_a(text)
