# logic/truth_table.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Truth-table generation over every assignment of a formula's variables

"""Truth-table generation for parsed propositional formulas.

The table has one column per node of a pre-order traversal of the
expression tree (root first, then each child in order), labelled with the
node's canonical fully-parenthesized rendering. Rows follow the assignment
index i = 0 .. 2^N - 1, where bit j of i is the value of the j-th variable in
first-occurrence order. A formula with no variables yields one row.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from parser import parse
from parser.ast_nodes import Proposition, preorder, render_all
from parser.variable_registry import VariableRegistry
from utils.logger import get_logger
from .assignment import Assignment
from .evaluator import Evaluator
from .truth_value import TruthValue

TRUE_MARK = "T"
FALSE_MARK = "F"


@dataclass(frozen=True)
class TruthTable:
    """
    Structured truth table for one formula.

    Attributes:
        header: Canonical sub-expression strings in pre-order.
        rows: One tuple of "T"/"F" cells per assignment, aligned with header.
        variables: Variable names in first-occurrence order.
        source: Formula text the table was built from.
    """
    header: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]
    variables: Tuple[str, ...] = ()
    source: str = ""

    @property
    def column_count(self) -> int:
        return len(self.header)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def column(self, position: int) -> Tuple[str, ...]:
        """All cells of one column, top to bottom."""
        return tuple(row[position] for row in self.rows)

    def root_column(self) -> Tuple[str, ...]:
        return self.column(0)

    def is_tautology(self) -> bool:
        return all(cell == TRUE_MARK for cell in self.root_column())

    def is_contradiction(self) -> bool:
        return all(cell == FALSE_MARK for cell in self.root_column())

    def __iter__(self):
        """Iterate header first, then body rows."""
        yield self.header
        yield from self.rows


def generate_truth_table(
    root: Proposition, registry: VariableRegistry, source: str = ""
) -> TruthTable:
    """Evaluate every pre-order sub-expression of root under every assignment.

    Args:
        root: Root of the expression tree
        registry: Registry owning the tree's Atoms
        source: Original formula text, kept on the table for display

    Returns:
        TruthTable with 2^N rows and one column per pre-order node

    Raises:
        UndeterminedValueError: The tree uses an Atom not in registry
    """
    logger = get_logger()

    columns = list(preorder(root))
    rendered = render_all(root)
    header = tuple(rendered[id(node)] for node in columns)
    variables = list(registry)

    logger.debug(
        f"Generating truth table: {len(columns)} column(s), "
        f"{len(variables)} variable(s), {1 << len(variables)} row(s)"
    )

    rows: List[Tuple[str, ...]] = []
    for index in range(1 << len(variables)):
        # One bottom-up pass per row fills in every column value
        evaluator = Evaluator(Assignment.from_index(variables, index), strict=True)
        evaluator.evaluate(root)
        rows.append(
            tuple(
                TRUE_MARK if evaluator.value_of(node) is TruthValue.TRUE else FALSE_MARK
                for node in columns
            )
        )

    return TruthTable(
        header=header,
        rows=tuple(rows),
        variables=registry.names,
        source=source,
    )


def truth_table(source: str) -> TruthTable:
    """Parse a formula string and build its truth table.

    Raises:
        ParseError: Formula is empty or malformed
    """
    formula = parse(source)
    return generate_truth_table(formula.root, formula.variables, source=source)
