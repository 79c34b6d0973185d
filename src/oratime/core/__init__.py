"""Pure parsing and transformation logic for oratime."""

from __future__ import annotations

__all__ = [
    "time",
    "transformations",
]
