"""Batch conversion of literal columns."""

from __future__ import annotations

import logging
from typing import Literal

import pandas as pd

from oratime.core.time import rewrite_as_formatted_call, text_to_instant
from oratime.exceptions import DataError, InstantRangeError, LiteralParseError
from oratime.settings import get_settings

logger = logging.getLogger(__name__)

ErrorPolicy = Literal["raise", "coerce"]


def _resolve_policy(errors: ErrorPolicy | None) -> ErrorPolicy:
    if errors is None:
        return get_settings().on_error
    if errors not in ("raise", "coerce"):
        raise ValueError(f"errors must be 'raise' or 'coerce', got {errors!r}")
    return errors


def _is_missing(value: object) -> bool:
    return value is None or value is pd.NA or (isinstance(value, float) and pd.isna(value))


def convert_literal_series(series: pd.Series, *, errors: ErrorPolicy | None = None) -> pd.Series:
    """Convert raw literals in *series* to UTC timestamps.

    Missing values become ``NaT``. With ``errors="coerce"`` literals that do
    not parse, or fall outside the nanosecond range, also become ``NaT``.
    """

    policy = _resolve_policy(errors)
    converted: list[pd.Timestamp] = []
    failures = 0

    for value in series:
        if _is_missing(value):
            converted.append(pd.NaT)
            continue
        try:
            converted.append(text_to_instant(str(value)).to_timestamp())
        except (LiteralParseError, InstantRangeError):
            if policy == "raise":
                raise
            failures += 1
            converted.append(pd.NaT)

    if failures:
        logger.warning(f"Coerced {failures} of {len(series)} literals to NaT")

    return pd.Series(
        pd.to_datetime(converted, utc=True),
        index=series.index,
        name=series.name,
        dtype="datetime64[ns, UTC]",
    )


def rewrite_literal_series(series: pd.Series) -> pd.Series:
    """Rewrite ``TO_TIMESTAMP`` literals in *series*; other values become ``None``.

    The result always has ``object`` dtype, whatever the dtype of *series*.
    """

    rewritten = [None if _is_missing(value) else rewrite_as_formatted_call(str(value)) for value in series]
    return pd.Series(rewritten, index=series.index, name=series.name, dtype=object)


def convert_literal_column(
    df: pd.DataFrame,
    column: str,
    *,
    target: str | None = None,
    errors: ErrorPolicy | None = None,
) -> pd.DataFrame:
    """Return a copy of *df* with *column* converted to UTC timestamps.

    The result replaces *column* unless *target* names another column.
    """

    if column not in df.columns:
        raise DataError(
            f"Column '{column}' not found",
            details={"available": sorted(map(str, df.columns))},
        )

    result = df.copy()
    result[target or column] = convert_literal_series(df[column], errors=errors)
    return result
