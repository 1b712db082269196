# formula/printer.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Formula rendering in formula notation and LaTeX

"""Renders ASTs back to text.

``str(node)`` already gives a fully parenthesized form. The printers here add
a minimal form, which omits every parenthesis that the left-to-right grammar
does not need, and a LaTeX form for presentation layers using KaTeX/MathJax.

Only right operands of binary connectives and binary operands of negation
need grouping, since binary connectives fold left to right at one level.
"""

from __future__ import annotations
from typing import Dict, Tuple

from . import ast_nodes as ast

_LATEX_SYMBOLS: Dict[ast.BinaryKind, str] = {
    ast.BinaryKind.CONJUNCTION: r"\land",
    ast.BinaryKind.DISJUNCTION: r"\lor",
    ast.BinaryKind.IMPLICATION: r"\to",
    ast.BinaryKind.EQUIVALENCE: r"\leftrightarrow",
}


class _Printer:
    """Minimal-parenthesis printer parameterized by notation.

    Rendering folds the tree bottom-up, so nesting depth is not limited by
    the interpreter call stack.

    Attributes:
        negation: Prefix used for negation
        symbols: Rendering of each binary connective
        parens: Opening and closing group delimiters
    """

    def __init__(
        self,
        negation: str,
        symbols: Dict[ast.BinaryKind, str],
        parens: Tuple[str, str],
    ):
        self.negation = negation
        self.symbols = symbols
        self.parens = parens

    def render(self, node: ast.Expr) -> str:
        return node.fold(self._combine)

    def _group(self, node: ast.Expr, text: str) -> str:
        if isinstance(node, ast.BinaryOp):
            return f"{self.parens[0]}{text}{self.parens[1]}"
        return text

    def _combine(self, n: ast.Expr, operands: Tuple[str, ...]) -> str:
        if isinstance(n, ast.Proposition):
            return n.name
        if isinstance(n, ast.Negation):
            return f"{self.negation}{self._group(n.operand, operands[0])}"
        left, right = operands
        return f"{left} {self.symbols[n.kind]} {self._group(n.right, right)}"


_TEXT_PRINTER = _Printer(
    ast.NEGATION_SYMBOL, {kind: kind.symbol for kind in ast.BinaryKind}, ("(", ")")
)
_LATEX_PRINTER = _Printer(r"\lnot ", _LATEX_SYMBOLS, (r"\left(", r"\right)"))


def to_text(expr: ast.Expr, minimal: bool = True) -> str:
    """Render an AST in formula notation.

    Args:
        expr: Formula to render
        minimal: Drop parentheses the grammar does not require; when False,
            every binary connective is parenthesized

    Returns:
        Text that parses back to an AST equal to ``expr``
    """
    if not minimal:
        return str(expr)
    return _TEXT_PRINTER.render(expr)


def to_latex(expr: ast.Expr) -> str:
    """Render an AST as a LaTeX math expression."""
    return _LATEX_PRINTER.render(expr)
