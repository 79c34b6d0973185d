"""Unit tests for :mod:`oratime.core.time.literals`."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from oratime.core.time import LiteralKind, classify_literal

pytestmark = pytest.mark.unit


def test_classify_literal__to_timestamp__captures_body() -> None:
    literal = classify_literal("TO_TIMESTAMP('2024-01-15 10:30:00')")

    assert literal.kind is LiteralKind.SINGLE_ARG
    assert literal.text == "2024-01-15 10:30:00"
    assert literal.format is None


def test_classify_literal__to_timestamp_body__spans_newlines() -> None:
    literal = classify_literal("to_timestamp('line one\nline two')")

    assert literal.kind is LiteralKind.SINGLE_ARG
    assert literal.text == "line one\nline two"


def test_classify_literal__to_date__captures_body_and_format() -> None:
    literal = classify_literal("To_Date('2024-01-15', 'YYYY-MM-DD')")

    assert literal.kind is LiteralKind.TWO_ARG
    assert literal.text == "2024-01-15"
    assert literal.format == "YYYY-MM-DD"
    assert literal.function == "To_Date"


@pytest.mark.parametrize(
    "raw",
    [
        "plain text",
        "x TO_TIMESTAMP('2024-01-15 10:30:00')",
        "TO_TIMESTAMP('2024-01-15 10:30:00') ",
        "TO_DATE('2024-01-15')",
        "TO_TIMESTAMP(2024)",
        "",
    ],
)
def test_classify_literal__without_full_match__is_unwrapped(raw: str) -> None:
    """Recognizers are anchored to the whole string."""

    literal = classify_literal(raw)

    assert literal.kind is LiteralKind.UNWRAPPED
    assert literal.text == raw


def test_classify_literal__to_date_separator__tolerates_spaces_only() -> None:
    assert classify_literal("TO_DATE('a','b')").kind is LiteralKind.TWO_ARG
    assert classify_literal("TO_DATE('a',    'b')").kind is LiteralKind.TWO_ARG
    assert classify_literal("TO_DATE('a',\t'b')").kind is LiteralKind.UNWRAPPED


@pytest.mark.parametrize(
    "raw",
    [
        "TO_TIMEſTAMP('2024-01-15 10:30:00')",
        "to_timeſtamp('2024-01-15 10:30:00')",
    ],
)
def test_classify_literal__non_ascii_case_fold__is_unwrapped(raw: str) -> None:
    """Function names match case-insensitively over ASCII letters only."""

    assert classify_literal(raw).kind is LiteralKind.UNWRAPPED


_argument = st.text(alphabet=st.characters(exclude_characters="\n\r"), max_size=30)


@given(
    function=st.sampled_from(["TO_DATE", "to_date", "To_Date"]),
    text=_argument,
    separator=st.text(alphabet=" ", max_size=4),
    mask=_argument,
)
def test_classify_literal__property_two_arg__reserializes_exactly(
    function: str,
    text: str,
    separator: str,
    mask: str,
) -> None:
    """Re-serializing the captured groups reproduces the original string."""

    raw = f"{function}('{text}',{separator}'{mask}')"

    literal = classify_literal(raw)

    assert literal.kind is LiteralKind.TWO_ARG
    assert literal.to_sql() == raw


def test_classified_literal__single_arg__reserializes_exactly() -> None:
    raw = "to_timestamp('2024-01-15 10:30:00')"

    assert classify_literal(raw).to_sql() == raw
