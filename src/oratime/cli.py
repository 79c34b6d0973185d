"""
oratime command line interface

Usage:
    # Convert literals to ISO-8601 instants
    oratime convert "TO_TIMESTAMP('2024-01-15 10:30:00')" "TO_DATE('-0045-01-01', 'YYYY-MM-DD')"

    # Rewrite TO_TIMESTAMP literals with an explicit format mask
    oratime rewrite "TO_TIMESTAMP('2024-01-15 10:30:00')"

    # Literals are read one per line from stdin when none are given
    cat literals.txt | oratime convert

    # Convert a CSV column, keeping unparseable values as empty cells
    oratime convert-csv redo.csv converted.csv --column value --errors coerce
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

import pandas as pd

from oratime.core.time import rewrite_as_formatted_call, text_to_instant
from oratime.core.transformations import convert_literal_column
from oratime.exceptions import LiteralParseError, OraTimeError
from oratime.settings import LOG_LEVELS, get_settings

logger = logging.getLogger(__name__)


def _literals(values: Sequence[str]) -> Iterable[str]:
    if values:
        return values
    return (line.rstrip("\r\n") for line in sys.stdin if line.strip())


def convert_literals(values: Sequence[str]) -> int:
    """Print one instant per literal; returns the number of failures."""
    failed = 0
    for value in _literals(values):
        try:
            print(text_to_instant(value).isoformat())
        except LiteralParseError as e:
            logger.error(f"✗ {e}")
            failed += 1
    return failed


def rewrite_literals(values: Sequence[str]) -> int:
    """Print one rewritten call per literal, or an empty line when not convertible."""
    for value in _literals(values):
        print(rewrite_as_formatted_call(value) or "")
    return 0


def convert_csv(
    input_path: Path,
    output_path: Path,
    column: str,
    target: str | None = None,
    errors: str | None = None,
) -> bool:
    """
    Convert the literal column of a CSV file.

    Args:
        input_path: CSV file holding raw literals
        output_path: Destination CSV path
        column: Column holding the literals
        target: Optional column receiving the timestamps (defaults to *column*)
        errors: "raise" or "coerce"; defaults to the configured policy

    Returns:
        True if successful, False otherwise
    """
    try:
        df = pd.read_csv(input_path, dtype=str, keep_default_na=False, na_values=[""])
        result = convert_literal_column(df, column, target=target, errors=errors)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        result.to_csv(output_path, index=False)
    except (OraTimeError, OSError, pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        logger.error(f"✗ Failed to convert {input_path}: {e}")
        return False

    logger.info(f"✓ Converted {len(result)} rows of {input_path.name} -> {output_path}")
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oratime",
        description="Normalize Oracle LogMiner timestamp literals",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level (default: ORATIME_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert literals to ISO-8601 instants")
    convert.add_argument("literals", nargs="*", help="Literals to convert (default: read stdin)")

    rewrite = subparsers.add_parser("rewrite", help="Rewrite TO_TIMESTAMP literals with a format mask")
    rewrite.add_argument("literals", nargs="*", help="Literals to rewrite (default: read stdin)")

    convert_file = subparsers.add_parser("convert-csv", help="Convert a literal column of a CSV file")
    convert_file.add_argument("input", type=Path, help="Input CSV path")
    convert_file.add_argument("output", type=Path, help="Output CSV path")
    convert_file.add_argument("--column", help="Column holding literals (default: ORATIME_LITERAL_COLUMN)")
    convert_file.add_argument("--target", help="Column receiving timestamps (default: same as --column)")
    convert_file.add_argument(
        "--errors",
        choices=("raise", "coerce"),
        help="Raise on unparseable literals, or write them as empty cells",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except OraTimeError as e:
        parser.error(str(e))

    logging.basicConfig(level=args.log_level or settings.log_level, format=settings.log_format)

    if args.command == "convert":
        return 0 if convert_literals(args.literals) == 0 else 1
    if args.command == "rewrite":
        return rewrite_literals(args.literals)

    if not args.input.exists():
        logger.error(f"Input file not found: {args.input}")
        return 1
    column = args.column or settings.literal_column
    return 0 if convert_csv(args.input, args.output, column, args.target, args.errors) else 1


if __name__ == "__main__":
    sys.exit(main())
