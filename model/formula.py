# model/formula.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Parsed formula value object

"""
Formula
=======

Result of parsing one input line: the source text, its postfix token
stream, the expression tree and the variable registry that owns the tree's
Atoms. A Formula lives for one truth-table pass and is rebuilt for the next
input.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from parser.ast_nodes import Proposition
    from parser.variable_registry import VariableRegistry


@dataclass(frozen=True)
class Formula:
    source: str
    postfix: Tuple[str, ...]
    root: Proposition
    variables: VariableRegistry

    @property
    def variable_count(self) -> int:
        return len(self.variables)

    def __str__(self) -> str:
        """Canonical fully-parenthesized rendering of the root."""
        return str(self.root)
