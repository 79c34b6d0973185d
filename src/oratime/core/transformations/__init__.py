"""Pandas helpers applying literal conversion to whole columns."""

from .literal_columns import (
    convert_literal_column,
    convert_literal_series,
    rewrite_literal_series,
)

__all__ = [
    "convert_literal_series",
    "convert_literal_column",
    "rewrite_literal_series",
]
