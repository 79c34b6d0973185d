"""Recognizers for function-call wrapped literals in redo/undo SQL."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

TO_TIMESTAMP = re.compile(
    r"(?P<function>TO_TIMESTAMP)\('(?P<text>.*)'\)",
    re.ASCII | re.IGNORECASE | re.DOTALL,
)
TO_DATE = re.compile(
    r"(?P<function>TO_DATE)\('(?P<text>.*)',(?P<separator>[ ]*)'(?P<format>.*)'\)",
    re.ASCII | re.IGNORECASE,
)


class LiteralKind(str, Enum):
    """How a raw literal is wrapped."""

    SINGLE_ARG = "single_arg"
    TWO_ARG = "two_arg"
    UNWRAPPED = "unwrapped"


@dataclass(frozen=True)
class ClassifiedLiteral:
    """A raw literal together with the pieces its recognizer captured.

    For ``UNWRAPPED`` literals ``text`` is the whole raw string.
    """

    raw: str
    kind: LiteralKind
    text: str
    format: str | None = None
    function: str | None = None
    separator: str = ""

    def to_sql(self) -> str:
        """Re-serialize the literal from its captured pieces."""
        if self.kind is LiteralKind.SINGLE_ARG:
            return f"{self.function}('{self.text}')"
        if self.kind is LiteralKind.TWO_ARG:
            return f"{self.function}('{self.text}',{self.separator}'{self.format}')"
        return self.text


def classify_literal(raw: str) -> ClassifiedLiteral:
    """Tell whether *raw* is a ``TO_TIMESTAMP('..')`` call, a ``TO_DATE('..', '..')`` call, or neither.

    Both recognizers must match the whole string.
    """
    match = TO_TIMESTAMP.fullmatch(raw)
    if match:
        return ClassifiedLiteral(raw, LiteralKind.SINGLE_ARG, match["text"], function=match["function"])

    match = TO_DATE.fullmatch(raw)
    if match:
        return ClassifiedLiteral(
            raw,
            LiteralKind.TWO_ARG,
            match["text"],
            format=match["format"],
            function=match["function"],
            separator=match["separator"],
        )

    return ClassifiedLiteral(raw, LiteralKind.UNWRAPPED, raw)
