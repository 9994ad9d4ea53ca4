# parser/lexer.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module breaks formula strings into tokens for the shunting-yard
converter. Variables are single lowercase letters, so a formula can never
mention more than 26 distinct variables.

Supported Tokens:
- Variables: a-z (one letter per token)
- Operators: !, &, |, ->, <->
- Grouping: (, )
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger
from .exceptions import ParseError


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    The two multi-character operators are matched as whole tokens, so a
    lone '-' or '<' is an illegal character rather than being skipped.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "ATOM",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "BICONDITIONAL",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    # '<->' must be tried before '->'
    BICONDITIONAL = r"<->"
    IMPLIES = r"->"
    NOT = r"!"
    AND = r"&"
    OR = r"\|"
    LPAREN = r"\("
    RPAREN = r"\)"

    ATOM = r"[a-z]"

    def error(self, t):
        """Reject characters outside the formula alphabet.

        Args:
            t: SLY token object containing error context

        Raises:
            ParseError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ParseError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
