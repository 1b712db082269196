# formula/exceptions.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Structured exceptions for formula tokenization and parsing

"""Domain-specific exceptions for propositional formula parsing.

Every error raised while turning text into an AST is a subclass of
:class:`ParseError` and carries its details as attributes, so a
presentation layer can format them without re-parsing the message text.

Error kinds:
    UnexpectedToken: a token (or end of input) that no grammar rule accepts
    UnterminatedComment: a ``/*`` block comment that is never closed
    TrailingInput: input left over after a complete formula
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Position:
    """Location of a diagnostic inside the formula text.

    Attributes:
        offset: 0-based character offset into the input
        line: 1-based line number
        column: 1-based column number
    """

    offset: int
    line: int
    column: int

    @classmethod
    def in_text(cls, text: str, offset: int) -> Position:
        """Resolve a character offset into line and column numbers."""
        line = text.count("\n", 0, offset) + 1
        line_start = text.rfind("\n", 0, offset) + 1
        return cls(offset, line, offset - line_start + 1)

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


class ParseError(RuntimeError):
    """Base class for errors raised when formula parsing fails.

    Attributes:
        position: Where in the input the problem was detected
    """

    def __init__(self, message: str, position: Position):
        super().__init__(f"{message} at {position}")
        self.position = position


class UnexpectedToken(ParseError):
    """A token or the end of input appeared where the grammar forbids it.

    Attributes:
        expected: Human-readable descriptions of what would have been accepted
        found: Offending token text, or None at end of input
    """

    def __init__(
        self, position: Position, expected: Tuple[str, ...], found: Optional[str]
    ):
        what = "end of input" if found is None else f"'{found}'"
        super().__init__(
            f"Unexpected {what}, expected {_join_alternatives(expected)}", position
        )
        self.expected = expected
        self.found = found


class UnterminatedComment(ParseError):
    """A block comment was opened but never closed."""

    def __init__(self, position: Position):
        super().__init__("Unterminated comment", position)


class TrailingInput(ParseError):
    """A complete formula was followed by more input.

    Attributes:
        found: Text of the first token after the formula
    """

    def __init__(self, position: Position, found: str):
        super().__init__(f"Expected end of input but found '{found}'", position)
        self.found = found


def _join_alternatives(options: Tuple[str, ...]) -> str:
    if len(options) == 1:
        return options[0]
    return f"{', '.join(options[:-1])} or {options[-1]}"
