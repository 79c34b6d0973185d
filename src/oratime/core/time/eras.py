"""Era-aware calendar fields and absolute instants in the proleptic ISO calendar.

Python's :mod:`datetime` stops at year 1, while redo literals may carry dates
before the current era. Dates are therefore mapped onto the day count since the
Unix epoch by shifting them into the supported range by whole 400-year
Gregorian cycles, which have a fixed length of 146 097 days.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta, timezone
from enum import IntEnum

import pandas as pd

from oratime.exceptions import InstantRangeError

REFERENCE_ZONE = "GMT"

SECONDS_PER_DAY = 86_400
NANOS_PER_SECOND = 1_000_000_000
DAYS_PER_CYCLE = 146_097  # 400 Gregorian years
YEARS_PER_CYCLE = 400
UNIX_EPOCH_ORDINAL = 719_163  # date(1970, 1, 1).toordinal()

_REFERENCE_TZ = timezone(timedelta(0), REFERENCE_ZONE)


class Era(IntEnum):
    """Era of the proleptic ISO calendar, valued by its era index."""

    BCE = 0
    CE = 1


def _cycle_shift(year: int) -> int:
    """Return how many 400-year cycles to add to *year* to land in 1..9999."""
    if year < 1:
        return (1 - year) // YEARS_PER_CYCLE + 1
    if year > 9999:
        return -((year - 9999) // YEARS_PER_CYCLE + 1)
    return 0


def proleptic_ordinal(year: int, month: int, day: int) -> int:
    """Return the proleptic Gregorian ordinal of a date; 0001-01-01 is day 1."""
    cycles = _cycle_shift(year)
    shifted = date(year + cycles * YEARS_PER_CYCLE, month, day)
    return shifted.toordinal() - cycles * DAYS_PER_CYCLE


def date_from_ordinal(ordinal: int) -> tuple[int, int, int]:
    """Inverse of :func:`proleptic_ordinal`, returning ``(year, month, day)``."""
    cycles = 0
    if ordinal < 1:
        cycles = (1 - ordinal) // DAYS_PER_CYCLE + 1
    elif ordinal > date.max.toordinal():
        cycles = -((ordinal - date.max.toordinal()) // DAYS_PER_CYCLE + 1)
    shifted = date.fromordinal(ordinal + cycles * DAYS_PER_CYCLE)
    return shifted.year - cycles * YEARS_PER_CYCLE, shifted.month, shifted.day


def days_in_month(proleptic_year: int, month: int) -> int:
    """Number of days in *month* of a proleptic year (year 0 is a leap year)."""
    shifted_year = proleptic_year + _cycle_shift(proleptic_year) * YEARS_PER_CYCLE
    return calendar.monthrange(shifted_year, month)[1]


@dataclass(frozen=True)
class ParsedDateTime:
    """Calendar date and wall-clock time decomposed into fields.

    ``year`` is the year-of-era and is always positive; ``era`` tells whether
    it counts forwards from year 1 or backwards from 1 BCE.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    era: Era = Era.CE

    @property
    def proleptic_year(self) -> int:
        """Year on the proleptic axis: 1 BCE is year 0, 2 BCE is year -1."""
        if self.era is Era.BCE:
            return 1 - self.year
        return self.year

    @classmethod
    def from_proleptic(
        cls,
        proleptic_year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> ParsedDateTime:
        """Build fields from a proleptic year, deriving the era."""
        if proleptic_year >= 1:
            return cls(proleptic_year, month, day, hour, minute, second, nanosecond, Era.CE)
        return cls(1 - proleptic_year, month, day, hour, minute, second, nanosecond, Era.BCE)

    def with_era(self, era: Era, strict: bool = False) -> ParsedDateTime:
        """Reinterpret the date in *era*, keeping year-of-era and time of day.

        The day is clamped to the last valid day of the month, so February 29
        becomes February 28 when the target year is not a leap year.

        Raises:
            ValueError: If *strict* and the day does not exist in the target year
        """
        moved = replace(self, era=era)
        last_day = days_in_month(moved.proleptic_year, moved.month)
        if moved.day > last_day:
            if strict:
                raise ValueError(
                    f"day-of-month {moved.day} does not exist in month {moved.month} "
                    f"of year {moved.year} {era.name}"
                )
            moved = replace(moved, day=last_day)
        return moved

    def at_midnight(self) -> ParsedDateTime:
        return replace(self, hour=0, minute=0, second=0, nanosecond=0)

    def to_instant(self) -> Instant:
        """Anchor the wall-clock fields to the reference zone."""
        return Instant.from_parsed(self)


@dataclass(frozen=True, order=True)
class Instant:
    """An absolute point on the time line, relative to 1970-01-01T00:00:00 GMT.

    Unlike :class:`datetime.datetime` and :class:`pandas.Timestamp` it keeps
    nanosecond precision over the whole proleptic calendar.
    """

    epoch_second: int
    nano: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nano < NANOS_PER_SECOND:
            raise ValueError(f"nano must be in [0, {NANOS_PER_SECOND}), got {self.nano}")

    @classmethod
    def from_parsed(cls, parsed: ParsedDateTime) -> Instant:
        """Interpret *parsed* as wall-clock time in the reference zone."""
        days = proleptic_ordinal(parsed.proleptic_year, parsed.month, parsed.day) - UNIX_EPOCH_ORDINAL
        seconds = days * SECONDS_PER_DAY + parsed.hour * 3600 + parsed.minute * 60 + parsed.second
        return cls(seconds, parsed.nanosecond)

    @classmethod
    def from_epoch_nanos(cls, nanos: int) -> Instant:
        seconds, nano = divmod(nanos, NANOS_PER_SECOND)
        return cls(seconds, nano)

    @property
    def epoch_nanos(self) -> int:
        return self.epoch_second * NANOS_PER_SECOND + self.nano

    @property
    def epoch_micros(self) -> int:
        """Microseconds since the epoch, rounded towards negative infinity."""
        return self.epoch_nanos // 1_000

    def to_parsed(self) -> ParsedDateTime:
        """Decompose into wall-clock fields in the reference zone."""
        days, seconds = divmod(self.epoch_second, SECONDS_PER_DAY)
        year, month, day = date_from_ordinal(days + UNIX_EPOCH_ORDINAL)
        hour, seconds = divmod(seconds, 3600)
        minute, second = divmod(seconds, 60)
        return ParsedDateTime.from_proleptic(year, month, day, hour, minute, second, self.nano)

    def to_datetime(self) -> datetime:
        """Return an aware :class:`datetime.datetime` in GMT, truncated to microseconds.

        Raises:
            InstantRangeError: If the instant lies outside years 1..9999
        """
        parsed = self.to_parsed()
        if parsed.era is Era.BCE or parsed.year > 9999:
            raise InstantRangeError(
                "Instant is outside the datetime range",
                details={"instant": self.isoformat()},
            )
        return datetime(
            parsed.year,
            parsed.month,
            parsed.day,
            parsed.hour,
            parsed.minute,
            parsed.second,
            parsed.nanosecond // 1_000,
            tzinfo=_REFERENCE_TZ,
        )

    def to_timestamp(self) -> pd.Timestamp:
        """Return a UTC :class:`pandas.Timestamp` with nanosecond precision.

        Raises:
            InstantRangeError: If the instant lies outside the nanosecond bounds
        """
        nanos = self.epoch_nanos
        if not pd.Timestamp.min.value <= nanos <= pd.Timestamp.max.value:
            raise InstantRangeError(
                "Instant is outside the pandas nanosecond range",
                details={"instant": self.isoformat()},
            )
        return pd.Timestamp(nanos, unit="ns", tz="UTC")

    def isoformat(self) -> str:
        """ISO-8601 text in the reference zone, e.g. ``-0044-01-01T00:00:00Z``.

        The fraction is omitted when zero and otherwise printed with 3, 6 or 9
        digits.
        """
        parsed = self.to_parsed()
        year = parsed.proleptic_year
        if year < 0:
            year_text = f"-{-year:04d}"
        elif year > 9999:
            year_text = f"+{year}"
        else:
            year_text = f"{year:04d}"

        text = (
            f"{year_text}-{parsed.month:02d}-{parsed.day:02d}"
            f"T{parsed.hour:02d}:{parsed.minute:02d}:{parsed.second:02d}"
        )
        if self.nano:
            if self.nano % 1_000_000 == 0:
                text += f".{self.nano // 1_000_000:03d}"
            elif self.nano % 1_000 == 0:
                text += f".{self.nano // 1_000:06d}"
            else:
                text += f".{self.nano:09d}"
        return text + "Z"

    def __str__(self) -> str:
        return self.isoformat()

