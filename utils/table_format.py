# utils/table_format.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Console rendering of truth tables

from typing import Iterable, List

from logic.truth_table import TruthTable

DEFAULT_DELIMITER = " "


def format_row(cells: Iterable[str], delimiter: str = DEFAULT_DELIMITER) -> str:
    return delimiter.join(cells)


def format_table(table: TruthTable, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    """Render a truth table as text lines.

    The header line comes first, followed by one line per assignment.

    Args:
        table: Table to render
        delimiter: Separator placed between columns

    Returns:
        Rendered lines without trailing newlines
    """
    return [format_row(row, delimiter) for row in table]
