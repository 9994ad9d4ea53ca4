# logic/evaluator.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Bottom-up evaluation of expression trees under an assignment

"""Evaluates propositional expression trees.

The Evaluator is a visitor that computes the TruthValue of a node from the
values in an Assignment. It never mutates the tree or the assignment, so
evaluating the same node under the same assignment always gives the same
result.

Nodes are evaluated bottom-up in a single post-order pass with an explicit
stack, so deeply nested formulas do not hit the recursion limit.

Two entry points are provided:
    try_evaluate: returns TruthValue.UNSET when a needed variable is unset
    evaluate: returns a bool and raises UndeterminedValueError instead
"""

from __future__ import annotations
from typing import Callable, Dict, List

from parser import ast_nodes as ast
from parser.ast_nodes import Operator
from utils.logger import get_logger
from .assignment import Assignment
from .exceptions import UndeterminedValueError
from .truth_value import TruthValue

_SEMANTICS: Dict[Operator, Callable[[List[bool]], bool]] = {
    Operator.NOT: lambda v: not v[0],
    Operator.AND: lambda v: v[0] and v[1],
    Operator.OR: lambda v: v[0] or v[1],
    Operator.IMPLIES: lambda v: (not v[0]) or v[1],
    Operator.BICONDITIONAL: lambda v: v[0] == v[1],
}


class Evaluator(ast.Visitor):
    """Computes truth values of tree nodes under a fixed assignment.

    After evaluate(root), value_of() returns the value of any node under
    root without evaluating it again.

    Attributes:
        assignment: Variable values read by visit_atom
        strict: Raise UndeterminedValueError on an unset variable instead
            of propagating TruthValue.UNSET
    """

    def __init__(self, assignment: Assignment, strict: bool = False):
        self.assignment = assignment
        self.strict = strict
        self._values: Dict[int, TruthValue] = {}

    def evaluate(self, node: ast.Proposition) -> TruthValue:
        self._values.clear()
        for current in ast.postorder(node):
            key = id(current)
            if key not in self._values:
                self._values[key] = current.accept(self)
        return self._values[id(node)]

    def value_of(self, node: ast.Proposition) -> TruthValue:
        """Value of a node computed by the last evaluate call.

        Raises:
            KeyError: node is not part of the last evaluated tree
        """
        return self._values[id(node)]

    def visit_atom(self, n: ast.Atom) -> TruthValue:
        value = self.assignment[n]
        if self.strict and value is TruthValue.UNSET:
            get_logger().debug(f"Evaluation blocked on unset variable '{n.name}'")
            raise UndeterminedValueError(n.name)
        return value

    def visit_compound(self, n: ast.Compound) -> TruthValue:
        """Apply the operator to the already computed child values.

        Evaluation has no side effects, so evaluating both children is
        equivalent to short-circuit evaluation. Any UNSET child makes the
        result UNSET.
        """
        values = [self._values[id(child)] for child in n.children]
        if TruthValue.UNSET in values:
            return TruthValue.UNSET

        return TruthValue.of(_SEMANTICS[n.operator]([v.to_bool() for v in values]))


def try_evaluate(node: ast.Proposition, assignment: Assignment) -> TruthValue:
    """Evaluate node, returning TruthValue.UNSET if it cannot be determined."""
    return Evaluator(assignment).evaluate(node)


def evaluate(node: ast.Proposition, assignment: Assignment) -> bool:
    """Evaluate node to a boolean.

    Args:
        node: Root of the (sub)expression to evaluate
        assignment: Variable values

    Returns:
        Truth of node under assignment

    Raises:
        UndeterminedValueError: A variable under node has no value
    """
    return Evaluator(assignment, strict=True).evaluate(node).to_bool()
