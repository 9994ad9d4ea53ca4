# parser/ast_nodes.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Expression tree node classes for propositional formula representation

"""Expression tree classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional formulas. A tree has two kinds of nodes:

Node Types:
    Atom: A single-letter variable, identified by its registry index
    Compound: An Operator applied to an ordered tuple of child propositions

Atoms hold no truth value. Values live in an Assignment supplied to the
evaluator, so the same tree can be evaluated under any number of assignments
without mutating it. All nodes support the visitor design pattern.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Protocol, Tuple


class Operator(Enum):
    """Closed set of propositional connectives.

    Each member carries its concrete symbol, its arity and its binding
    precedence (higher binds tighter).
    """

    NOT = ("!", 1, 5)
    AND = ("&", 2, 4)
    OR = ("|", 2, 3)
    IMPLIES = ("->", 2, 2)
    BICONDITIONAL = ("<->", 2, 1)

    def __init__(self, symbol: str, arity: int, precedence: int):
        self.symbol = symbol
        self.arity = arity
        self.precedence = precedence

    def __str__(self) -> str:
        return self.symbol

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        """Look up an operator by its concrete symbol.

        Raises:
            KeyError: No operator uses this symbol
        """
        return OPERATORS_BY_SYMBOL[symbol]

    @classmethod
    def symbols(cls) -> Tuple[str, ...]:
        return tuple(OPERATORS_BY_SYMBOL)


OPERATORS_BY_SYMBOL: Dict[str, Operator] = {op.symbol: op for op in Operator}


class Visitor(Protocol):
    """Interface for tree visitors implementing the visitor design pattern."""

    def visit_atom(self, n: Atom): ...

    def visit_compound(self, n: Compound): ...


@dataclass(frozen=True, slots=True)
class Proposition:
    """Base class for all nodes of a propositional expression tree.

    Concrete node types implement accept for visitor dispatch and __str__
    for the canonical fully-parenthesized rendering.
    """

    def accept(self, v: Visitor):
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Atom(Proposition):
    """Propositional variable leaf.

    Every occurrence of the same letter in one parsed formula refers to the
    same Atom instance, handed out by the VariableRegistry.

    Attributes:
        name: Variable letter
        index: Position of the variable in its registry (first-occurrence order)
    """

    name: str
    index: int

    def accept(self, v: Visitor):
        return v.visit_atom(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Compound(Proposition):
    """Connective applied to one or two child propositions.

    Children are kept in source order: for IMPLIES the antecedent is
    children[0] and the consequent is children[1].

    Attributes:
        operator: The connective
        children: Ordered operands, exactly operator.arity of them

    Raises:
        ValueError: Number of children does not match the operator's arity
    """

    operator: Operator
    children: Tuple[Proposition, ...]

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))
        if len(self.children) != self.operator.arity:
            raise ValueError(
                f"Operator '{self.operator.symbol}' takes {self.operator.arity} "
                f"operand(s), got {len(self.children)}"
            )

    def accept(self, v: Visitor):
        return v.visit_compound(self)

    def __str__(self) -> str:
        return render_all(self)[id(self)]


def Not(operand: Proposition) -> Compound:
    return Compound(Operator.NOT, (operand,))


def And(left: Proposition, right: Proposition) -> Compound:
    return Compound(Operator.AND, (left, right))


def Or(left: Proposition, right: Proposition) -> Compound:
    return Compound(Operator.OR, (left, right))


def Implies(antecedent: Proposition, consequent: Proposition) -> Compound:
    return Compound(Operator.IMPLIES, (antecedent, consequent))


def Biconditional(left: Proposition, right: Proposition) -> Compound:
    return Compound(Operator.BICONDITIONAL, (left, right))


def preorder(node: Proposition) -> Iterator[Proposition]:
    """Yield node and then each child subtree in child order.

    Uses an explicit stack, so tree depth is not limited by the interpreter's
    recursion limit. A shared Atom is yielded once per occurrence.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, Compound):
            stack.extend(reversed(current.children))


def postorder(node: Proposition) -> Iterator[Proposition]:
    """Yield every node occurrence after all of its children, left to right."""
    stack = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if expanded or not isinstance(current, Compound):
            yield current
            continue
        stack.append((current, True))
        stack.extend((child, False) for child in reversed(current.children))


def render_all(node: Proposition) -> Dict[int, str]:
    """Canonical rendering of node and of every node below it.

    Returns:
        Rendered text keyed by id() of each node, built bottom-up
    """
    rendered: Dict[int, str] = {}
    for current in postorder(node):
        key = id(current)
        if key in rendered:
            continue
        if isinstance(current, Compound):
            parts = [rendered[id(child)] for child in current.children]
            if current.operator is Operator.NOT:
                rendered[key] = f"(!{parts[0]})"
            else:
                rendered[key] = f"({parts[0]}{current.operator.symbol}{parts[1]})"
        else:
            rendered[key] = str(current)
    return rendered
