# parser/__init__.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Formula parsing components for propositional logic expressions

"""Propositional formula parsing.

The parsing pipeline turns formula text into an expression tree in three
steps: the SLY lexer splits the text into tokens, the shunting-yard converter
reorders them into postfix form, and the tree builder reduces the postfix
stream into Atom and Compound nodes, sharing one Atom per variable letter.

Core Functions:
    parse: Converts a formula string into a Formula (tree plus registry)
    to_postfix: Converts a formula string into its postfix token list

Supported Logic:
    - Variables: single lowercase letters a-z
    - Connectives: ! (not), & (and), | (or), -> (implies), <-> (iff)
    - Parenthetical grouping

Example:
    >>> from parser import parse
    >>> formula = parse("a & b | c")
    >>> str(formula.root)
    '((a&b)|c)'
"""

from .exceptions import ParseError
from .ast_nodes import Atom, Compound, Operator, Proposition, preorder
from .variable_registry import VariableRegistry
from .shunting_yard import to_postfix
from .tree_builder import build_tree
from model.formula import Formula
from utils.logger import get_logger


def parse(source: str) -> Formula:
    """Parse a propositional formula string.

    Uses a fresh registry for each invocation, so Atoms are never shared
    between two parsed formulas.

    Args:
        source: Formula text

    Returns:
        Formula holding the expression tree and its variable registry

    Raises:
        ParseError: Formula is empty or malformed
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    postfix = to_postfix(source)
    registry = VariableRegistry()

    try:
        root = build_tree(postfix, registry)
    except ParseError:
        logger.debug("ParseError encountered while building expression tree")
        raise

    logger.debug(
        f"Formula parsed into {type(root).__name__} with variables {list(registry.names)}"
    )
    return Formula(source=source, postfix=tuple(postfix), root=root, variables=registry)


__all__ = [
    "parse",
    "to_postfix",
    "build_tree",
    "ParseError",
    "Atom",
    "Compound",
    "Operator",
    "Proposition",
    "VariableRegistry",
    "preorder",
]

__version__ = "1.0.0"
__description__ = "Propositional formula tokenization, postfix conversion and tree building"
