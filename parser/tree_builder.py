# parser/tree_builder.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Expression tree construction from postfix token streams

"""Builds expression trees from postfix token sequences.

Operands are resolved through a VariableRegistry so that every occurrence of
a letter shares one Atom. Binary operators pop their right operand first,
which keeps children in source order; this matters for IMPLIES, whose
antecedent must be the first child.
"""

from typing import Iterable, List
from utils.logger import get_logger
from .ast_nodes import OPERATORS_BY_SYMBOL, Compound, Proposition
from .exceptions import ParseError
from .variable_registry import VariableRegistry


def build_tree(postfix: Iterable[str], registry: VariableRegistry) -> Proposition:
    """Build the expression tree for a postfix token sequence.

    Args:
        postfix: Tokens in Reverse Polish order, as produced by to_postfix
        registry: Registry of the formula, extended in place

    Returns:
        Root of the expression tree

    Raises:
        ParseError: The sequence does not reduce to exactly one proposition
    """
    logger = get_logger()
    stack: List[Proposition] = []

    for token in postfix:
        op = OPERATORS_BY_SYMBOL.get(token)
        if op is not None:
            if len(stack) < op.arity:
                raise ParseError(f"Operator '{token}' is missing an operand")

            # Right operand is on top
            operands = stack[-op.arity:]
            del stack[-op.arity:]
            stack.append(Compound(op, tuple(operands)))

        elif len(token) == 1 and "a" <= token <= "z":
            stack.append(registry.atom(token))

        else:
            raise ParseError(f"Unexpected token '{token}' in postfix sequence")

    if not stack:
        raise ParseError("Input formula is empty.")
    if len(stack) > 1:
        raise ParseError(
            f"Formula does not reduce to a single expression ({len(stack)} left over)"
        )

    root = stack[0]
    logger.debug(f"Built expression tree {root} over {len(registry)} variable(s)")
    return root
