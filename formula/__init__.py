# formula/__init__.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Formula parsing components for propositional logic expressions

"""Propositional formula parsing.

This package turns formula text into an Abstract Syntax Tree. The parsing
pipeline tokenizes with an SLY lexer that skips whitespace and block comments,
then runs an LALR(1) grammar in which all binary connectives share one
precedence level and associate to the left.

Core Functions:
    parse: Converts formula strings into Abstract Syntax Trees

Supported Notation:
    - Propositions: identifiers such as ``p``, ``ready``, ``x_1``
    - Negation ``¬``, conjunction ``∧``, disjunction ``∨``
    - Implication ``→`` and equivalence ``⇄``
    - Parenthetical grouping and ``/* ... */`` comments

Example:
    >>> from formula import parse
    >>> ast = parse("¬p ∨ q")
    >>> # Returns BinaryOp(DISJUNCTION, Negation(Proposition("p")), Proposition("q"))
"""

from .exceptions import (
    ParseError,
    Position,
    TrailingInput,
    UnexpectedToken,
    UnterminatedComment,
)
from .grammar import _PropParser
from .ast_nodes import BinaryKind, BinaryOp, Expr, Negation, Proposition
from .printer import to_latex, to_text
from support.logger import get_logger


def parse(source: str) -> Expr:
    """Parse formula string into Abstract Syntax Tree representation.

    Uses a fresh parser instance for each invocation so that concurrent
    callers never share state. The text must hold exactly one formula,
    optionally surrounded by whitespace and comments.

    Args:
        source: Formula string to parse

    Returns:
        Root AST node representing the parsed formula structure

    Raises:
        UnexpectedToken: A token or end of input no grammar rule accepts
        UnterminatedComment: A block comment is never closed
        TrailingInput: Input remains after a complete formula

    Example:
        >>> ast = parse("p ∧ q")
        >>> # Returns BinaryOp(CONJUNCTION, Proposition("p"), Proposition("q"))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source!r}")

    parser = _PropParser()

    try:
        result = parser.parse(source)
    except ParseError as exc:
        logger.debug(f"{type(exc).__name__} encountered during formula parsing: {exc}")
        raise

    logger.debug(
        f"Formula parsed successfully into AST with type: {type(result).__name__}"
    )
    return result


__all__ = [
    "parse",
    "to_text",
    "to_latex",
    "Expr",
    "Proposition",
    "Negation",
    "BinaryOp",
    "BinaryKind",
    "ParseError",
    "UnexpectedToken",
    "UnterminatedComment",
    "TrailingInput",
    "Position",
]
