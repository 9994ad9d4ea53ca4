# logic/assignment.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Variable assignments passed explicitly to the evaluator

"""
Assignment
==========

Mutable mapping from variable index to truth value. The expression tree
itself is immutable; an Assignment is what the evaluator reads Atom values
from. Variables that were never assigned read as TruthValue.UNSET.
"""

from __future__ import annotations
from typing import Dict, Iterable, Optional

from parser.ast_nodes import Atom, Proposition
from parser.variable_registry import VariableRegistry
from utils.logger import get_logger
from .exceptions import InvalidMutationError
from .truth_value import TruthValue


class Assignment:
    def __init__(self, values: Optional[Dict[int, bool]] = None):
        self._values: Dict[int, bool] = dict(values or {})

    @classmethod
    def from_index(cls, variables: Iterable[Atom], index: int) -> Assignment:
        """Assignment number `index` of a truth table.

        Bit j of index (bit 0 least significant) is the value of the j-th
        variable in registry order; 1 is true.
        """
        return cls({atom.index: bool((index >> atom.index) & 1) for atom in variables})

    @classmethod
    def from_mapping(cls, registry: VariableRegistry, values: Dict[str, bool]) -> Assignment:
        """Build an assignment from variable names.

        Raises:
            KeyError: A name is not registered
        """
        return cls({registry[name].index: bool(value) for name, value in values.items()})

    def __getitem__(self, atom: Atom) -> TruthValue:
        return TruthValue.of(self._values.get(atom.index))

    def __setitem__(self, node: Proposition, value: bool) -> None:
        if not isinstance(node, Atom):
            get_logger().debug(f"Rejected assignment to compound node {node}")
            raise InvalidMutationError(
                f"Cannot assign a truth value to compound expression {node}"
            )
        self._values[node.index] = bool(value)

    def unset(self, atom: Atom) -> None:
        self._values.pop(atom.index, None)

    def is_complete(self, variables: Iterable[Atom]) -> bool:
        return all(atom.index in self._values for atom in variables)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Assignment) and self._values == other._values

    def __repr__(self) -> str:
        items = ", ".join(f"{i}={v}" for i, v in sorted(self._values.items()))
        return f"Assignment({items})"
