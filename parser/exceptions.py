# parser/exceptions.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for propositional formula parsing.

This module defines the exception raised while tokenizing, converting and
building propositional formulas. Malformed input is always rejected with
a ParseError rather than being repaired into a best-effort tree.
"""


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Indicates that the input formula does not conform to the propositional
    grammar: illegal characters, unbalanced parentheses, dangling operators,
    missing operators between operands, or an empty formula.
    """

    pass
