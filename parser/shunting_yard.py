# parser/shunting_yard.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Infix to postfix conversion using the shunting-yard algorithm

"""Shunting-yard conversion of propositional formulas to postfix form.

The converter consumes the token stream produced by FormulaLexer and emits
a Reverse Polish token list in which every operator follows its operands.

Operator Precedence (highest to lowest):
- NOT ('!'): prefix, right-associative
- AND ('&'): left-associative
- OR ('|'): left-associative
- IMPLIES ('->'): left-associative
- BICONDITIONAL ('<->'): left-associative

The converter also tracks whether an operand or an operator is expected
next, so that dangling operators, missing operators and unbalanced
parentheses are rejected instead of producing a meaningless postfix stream.
"""

from typing import List
from utils.logger import get_logger
from .ast_nodes import OPERATORS_BY_SYMBOL, Operator
from .exceptions import ParseError
from .lexer import FormulaLexer

LPAREN = "("

_BINARY_TOKENS = {
    "AND": Operator.AND,
    "OR": Operator.OR,
    "IMPLIES": Operator.IMPLIES,
    "BICONDITIONAL": Operator.BICONDITIONAL,
}


class ShuntingYardConverter:
    """Single-use infix to postfix converter.

    Attributes:
        output: Postfix tokens emitted so far
        stack: Pending operator symbols and open parentheses
        expect_operand: True when the next token must start an operand
    """

    def __init__(self):
        self.output: List[str] = []
        self.stack: List[str] = []
        self.expect_operand = True

    def convert(self, source: str) -> List[str]:
        """Convert an infix formula into its postfix token list.

        Args:
            source: Formula text

        Returns:
            Postfix tokens: variable letters and operator symbols

        Raises:
            ParseError: Formula is empty or malformed
        """
        for token in FormulaLexer().tokenize(source):
            if token.type == "ATOM":
                self._operand(token)
            elif token.type == "LPAREN":
                self._open_paren(token)
            elif token.type == "RPAREN":
                self._close_paren(token)
            elif token.type == "NOT":
                self._prefix_not(token)
            else:
                self._binary(_BINARY_TOKENS[token.type], token)

        return self._finish()

    def _operand(self, token):
        self._require_operand_position(token)
        self.output.append(token.value)
        self.expect_operand = False

    def _open_paren(self, token):
        self._require_operand_position(token)
        self.stack.append(LPAREN)

    def _close_paren(self, token):
        if self.expect_operand:
            raise ParseError(f"Expected an operand before ')' at position {token.index}")

        while self.stack and self.stack[-1] != LPAREN:
            self.output.append(self.stack.pop())

        if not self.stack:
            raise ParseError(f"Unbalanced ')' at position {token.index}")
        self.stack.pop()

    def _prefix_not(self, token):
        # Nothing binds tighter than a prefix operator, so it never pops
        self._require_operand_position(token)
        self.stack.append(Operator.NOT.symbol)

    def _binary(self, op: Operator, token):
        if self.expect_operand:
            raise ParseError(
                f"Operator '{op.symbol}' at position {token.index} is missing its left operand"
            )

        while (
            self.stack
            and self.stack[-1] != LPAREN
            and OPERATORS_BY_SYMBOL[self.stack[-1]].precedence >= op.precedence
        ):
            self.output.append(self.stack.pop())

        self.stack.append(op.symbol)
        self.expect_operand = True

    def _finish(self) -> List[str]:
        if self.expect_operand:
            if not self.output and not self.stack:
                raise ParseError("Input formula is empty.")
            raise ParseError("Syntax error: Unexpected end of formula")

        while self.stack:
            top = self.stack.pop()
            if top == LPAREN:
                raise ParseError("Unbalanced '(': missing closing parenthesis")
            self.output.append(top)

        return self.output

    def _require_operand_position(self, token):
        if not self.expect_operand:
            raise ParseError(
                f"Missing operator before '{token.value}' at position {token.index}"
            )


def to_postfix(source: str) -> List[str]:
    """Convert an infix formula string into postfix tokens.

    Uses a fresh converter for each call.

    Example:
        >>> to_postfix("a & b | !c")
        ['a', 'b', '&', 'c', '!', '|']
    """
    logger = get_logger()
    postfix = ShuntingYardConverter().convert(source)
    logger.debug(f"Postfix for '{source}': {' '.join(postfix)}")
    return postfix
