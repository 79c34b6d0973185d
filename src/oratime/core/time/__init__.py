"""Timestamp literal parsing and rewriting."""

from .conversion import (
    TIMESTAMP_AM_PM_FORMAT,
    TIMESTAMP_FORMAT,
    parse_date_text,
    parse_timestamp_text,
    rewrite_as_formatted_call,
    text_to_instant,
)
from .eras import REFERENCE_ZONE, Era, Instant, ParsedDateTime
from .grammars import (
    GRAMMAR_A,
    GRAMMAR_B,
    parse_grammar_a,
    parse_grammar_a_date,
    parse_grammar_b,
    parse_local_datetime,
)
from .literals import ClassifiedLiteral, LiteralKind, classify_literal

__all__ = [
    "REFERENCE_ZONE",
    "TIMESTAMP_FORMAT",
    "TIMESTAMP_AM_PM_FORMAT",
    "GRAMMAR_A",
    "GRAMMAR_B",
    "Era",
    "Instant",
    "ParsedDateTime",
    "LiteralKind",
    "ClassifiedLiteral",
    "classify_literal",
    "parse_grammar_a",
    "parse_grammar_a_date",
    "parse_grammar_b",
    "parse_local_datetime",
    "parse_timestamp_text",
    "parse_date_text",
    "text_to_instant",
    "rewrite_as_formatted_call",
]
