# formula/lexer.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module implements tokenization of propositional formulas, breaking input
strings into tokens for parser consumption. Whitespace and ``/* ... */`` block
comments are skipped between tokens and carry no meaning.

Supported Tokens:
- Operators: ¬, ∧, ∨, →, ⇄
- Grouping: (, )
- Identifiers: propositional variables, ``[A-Za-z_][A-Za-z0-9_]*``

Characters matching no pattern are emitted as ``ERROR`` tokens so the parser
can report them with the alternatives valid at that point.
"""

from sly import Lexer
from .exceptions import Position, UnterminatedComment
from support.logger import get_logger


class PropLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "ID",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "IFF",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r"

    # Non-nesting block comment; an inner '*' does not close it
    @_(r"/\*[\s\S]*?\*/")
    def ignore_comment(self, t):
        self.lineno += t.value.count("\n")

    @_(r"\n+")
    def ignore_newline(self, t):
        self.lineno += len(t.value)

    NOT = r"¬"
    AND = r"∧"
    OR = r"∨"
    IMPLIES = r"→"
    IFF = r"⇄"
    LPAREN = r"\("
    RPAREN = r"\)"

    ID = r"[A-Za-z_][A-Za-z0-9_]*"

    def error(self, t):
        """Handle characters that match no token pattern.

        An opening ``/*`` reaching this point was not matched by the comment
        rule, so it is never closed. Any other character becomes a
        single-character ``ERROR`` token.

        Args:
            t: SLY token object containing error context

        Returns:
            The ERROR token covering the illegal character

        Raises:
            UnterminatedComment: If the character opens a block comment
        """
        logger = get_logger()

        if self.text.startswith("/*", self.index):
            logger.debug(f"Unterminated comment opened at offset {self.index}")
            raise UnterminatedComment(Position.in_text(self.text, self.index))

        t.value = t.value[0]
        logger.debug(f"Illegal character '{t.value}' at offset {self.index}")

        # Skip the illegal character
        self.index += 1
        return t
