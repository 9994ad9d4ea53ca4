#!/usr/bin/env python3
# run_truth_table.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Command-line interface for truth-table generation with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from logic import truth_table, EvaluationError
from utils.logger import configure_logging, get_logger
from utils.table_format import DEFAULT_DELIMITER, format_table
from parser.exceptions import ParseError


def read_formula_file(filepath: Path) -> List[str]:
    """Read formulas from file, one per line.

    Blank lines are skipped.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula strings in file order

    Raises:
        FileNotFoundError: If formula file doesn't exist
        ValueError: If formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            formulas = [line.strip() for line in f if line.strip()]
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not formulas:
        raise ValueError("Formula file is empty")

    return formulas


def process_formula(source: str, delimiter: str, out: TextIO) -> bool:
    """Build and print the truth table of one formula.

    A failing formula is reported and nothing is printed for it.

    Args:
        source: Formula text
        delimiter: Column separator
        out: Stream receiving the rendered table

    Returns:
        True if the table was printed, False if the formula was rejected
    """
    logger = get_logger()

    try:
        table = truth_table(source)
    except (ParseError, EvaluationError) as e:
        logger.formula_rejected(source, str(e))
        return False

    verdict = None
    if table.is_tautology():
        verdict = "tautology"
    elif table.is_contradiction():
        verdict = "contradiction"
    logger.table_summary(source, table.row_count, table.column_count, verdict)

    for line in format_table(table, delimiter):
        print(line, file=out)
    return True


def run_interactive(stream: TextIO, delimiter: str, out: TextIO) -> int:
    """Read formulas line by line until an empty line or end of input.

    Returns:
        Number of formulas that failed
    """
    get_logger().session_banner()

    failures = 0
    for raw in stream:
        source = raw.rstrip("\r\n")
        if not source:
            break
        if not process_formula(source, delimiter, out):
            failures += 1
    return failures


def run_batch(formulas: Iterable[str], delimiter: str, out: TextIO) -> int:
    """Tabulate each formula, separating tables with a blank line.

    Returns:
        Number of formulas that failed
    """
    failures = 0
    for i, source in enumerate(formulas):
        if i:
            print(file=out)
        if not process_formula(source, delimiter, out):
            failures += 1
    return failures


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tabula propositional truth-table generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_truth_table.py
  python run_truth_table.py "a & b" "(p->r)|(!s->!t)"
  python run_truth_table.py -f formulas.txt -d ","
  python run_truth_table.py "a <-> !b" --debug

Formula syntax:
  variables a-z, ! not, & and, | or, -> implies, <-> iff, ( ) grouping
        """,
    )

    parser.add_argument(
        "formulas", nargs="*", help="Formulas to tabulate (interactive mode if none)"
    )

    parser.add_argument(
        "-f", "--file", type=Path, help="Path to a file with one formula per line"
    )

    parser.add_argument(
        "-d",
        "--delimiter",
        default=DEFAULT_DELIMITER,
        help="Column separator for printed tables (default: a space)",
    )

    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Hide the interactive banner"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --quiet)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the truth-table generator.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(quiet=args.quiet, debug=args.debug)
    logger = get_logger()

    try:
        formulas = list(args.formulas)
        if args.file is not None:
            formulas.extend(read_formula_file(args.file))

        if formulas:
            failures = run_batch(formulas, args.delimiter, sys.stdout)
        else:
            failures = run_interactive(sys.stdin, args.delimiter, sys.stdout)

        return 2 if failures else 0

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4


if __name__ == "__main__":
    sys.exit(main())
