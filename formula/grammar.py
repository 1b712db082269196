# formula/grammar.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implementation using SLY parser generator.

This module defines the grammar rules and parsing logic for propositional
formulas. The parser constructs Abstract Syntax Trees from token streams
provided by the lexer.

Grammar:
    formula : expr
    expr    : expr binop term | term
    binop   : AND | OR | IMPLIES | IFF
    term    : ID | NOT term | LPAREN expr RPAREN

Binary operators share a single precedence level and fold strictly left to
right, so ``a ∧ b ∨ c`` is ``(a ∧ b) ∨ c`` and ``a ∨ b ∧ c`` is
``(a ∨ b) ∧ c``. Negation applies to the term immediately after it.
Parentheses group a full expression into a single term.
"""

from typing import Iterator, Optional, Tuple

from sly import Parser
from .lexer import PropLexer
from .ast_nodes import BinaryKind, BinaryOp, Expr, Negation, Proposition
from .exceptions import Position, TrailingInput, UnexpectedToken
from support.logger import get_logger

# Alternatives reported when a proposition, group or negation must start
EXPECTED_OPERAND: Tuple[str, ...] = ("proposition", "'('", "'¬'")

# Alternatives reported after a complete operand inside an open group
EXPECTED_CONTINUATION: Tuple[str, ...] = tuple(
    f"'{kind.symbol}'" for kind in BinaryKind
) + ("')'",)

# Alternatives reported for an illegal character after a complete formula
EXPECTED_AFTER_FORMULA: Tuple[str, ...] = EXPECTED_CONTINUATION[:-1] + (
    "end of input",
)

# Token types after which a complete operand has been read
_OPERAND_END = {"ID", "RPAREN"}


class _PropParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    Besides building the AST, the parser watches the token stream it
    consumes (last token type and parenthesis depth) so that syntax errors
    can be reported with the alternatives that were valid at that point.

    Attributes:
        tokens: Token types from PropLexer
    """

    tokens = PropLexer.tokens

    def __init__(self):
        super().__init__()
        self._text = ""
        self._last: Optional[str] = None
        self._depth = 0
        self._context: Tuple[Optional[str], int] = (None, 0)

    @_("expr")
    def formula(self, p) -> Expr:
        """Start rule: complete formula is a single expression."""
        return p.expr

    @_("expr binop term")
    def expr(self, p) -> Expr:
        """Binary connective, folded left to right."""
        return BinaryOp(p.binop, p.expr, p.term)

    @_("term")
    def expr(self, p) -> Expr:
        """Expression can be a single term."""
        return p.term

    @_("AND")
    def binop(self, p) -> BinaryKind:
        return BinaryKind.CONJUNCTION

    @_("OR")
    def binop(self, p) -> BinaryKind:
        return BinaryKind.DISJUNCTION

    @_("IMPLIES")
    def binop(self, p) -> BinaryKind:
        return BinaryKind.IMPLICATION

    @_("IFF")
    def binop(self, p) -> BinaryKind:
        return BinaryKind.EQUIVALENCE

    @_("ID")
    def term(self, p) -> Expr:
        """Identifier as propositional variable."""
        return Proposition(p.ID)

    @_("NOT term")
    def term(self, p) -> Expr:
        """Negation of the following term (right-associative)."""
        return Negation(p.term)

    @_("LPAREN expr RPAREN")
    def term(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    def parse(self, text: str) -> Expr:
        """Parse formula text into AST.

        Args:
            text: Formula string to parse

        Returns:
            Root AST node representing the parsed formula

        Raises:
            ParseError: If the text is not exactly one well-formed formula
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text!r}")

        self._text = text
        self._last = None
        self._depth = 0

        ast_result = super().parse(self._track(PropLexer().tokenize(text)))
        logger.debug(f"Successfully parsed formula into {type(ast_result).__name__}")
        return ast_result

    def _track(self, tokens) -> Iterator:
        """Pass tokens through while recording the state before each one."""
        for tok in tokens:
            self._context = (self._last, self._depth)
            if tok.type == "LPAREN":
                self._depth += 1
            elif tok.type == "RPAREN" and self._depth:
                self._depth -= 1
            self._last = tok.type
            yield tok

    def error(self, token):
        """Handle syntax errors during parsing.

        Called automatically by SLY when encountering a token that doesn't
        match any grammar rule, or with None at end of input.

        Args:
            token: Problematic token or None for end of input

        Raises:
            ParseError: Always raises with structured error information
        """
        if token is None:
            last, depth = self._last, self._depth
            position = Position.in_text(self._text, len(self._text))
            found = None
        else:
            last, depth = self._context
            position = Position.in_text(self._text, token.index)
            found = token.value

        get_logger().debug(
            f"Syntax error at offset {position.offset}: found={found!r}, "
            f"after={last}, depth={depth}"
        )

        if last not in _OPERAND_END:
            raise UnexpectedToken(position, EXPECTED_OPERAND, found)
        if depth or token is None:
            raise UnexpectedToken(position, EXPECTED_CONTINUATION, found)
        if token.type == "ERROR":
            raise UnexpectedToken(position, EXPECTED_AFTER_FORMULA, found)
        raise TrailingInput(position, found)
