# semantics/evaluator.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Truth-value evaluation of formula ASTs under an assignment

"""Evaluates propositional formula ASTs under a variable assignment.

The evaluator reduces the AST bottom-up with :meth:`Expr.fold`, which keeps
its own stack, so formulas nested thousands of levels deep evaluate like any
other. It holds the assignment it was created with and nothing else, so each
call to :func:`evaluate` is a pure function of its inputs.

Connective semantics:
    ¬x     = not x
    l ∧ r  = l and r
    l ∨ r  = l or r
    l → r  = (not l) or r
    l ⇄ r  = l == r
"""

from __future__ import annotations
from typing import Mapping, Tuple

from formula import ast_nodes as ast
from .exceptions import MissingAssignment

Assignment = Mapping[str, bool]


class Evaluator:
    """Computes the truth value of an AST under a fixed assignment.

    Both operands of a binary connective are always evaluated, so a
    missing proposition is reported even where the other operand would
    decide the result. Leaves are reached left to right, so the leftmost
    unassigned name is the one reported.

    Attributes:
        assignment: Truth value for every proposition name
    """

    def __init__(self, assignment: Assignment):
        self.assignment = assignment

    def evaluate(self, root: ast.Expr) -> bool:
        return root.fold(self._combine)

    def _combine(self, n: ast.Expr, operands: Tuple[bool, ...]) -> bool:
        if isinstance(n, ast.Proposition):
            return self._lookup(n.name)
        if isinstance(n, ast.Negation):
            return not operands[0]
        return self._apply(n.kind, *operands)

    def _lookup(self, name: str) -> bool:
        try:
            return bool(self.assignment[name])
        except KeyError:
            raise MissingAssignment(name) from None

    @staticmethod
    def _apply(kind: ast.BinaryKind, left: bool, right: bool) -> bool:
        if kind is ast.BinaryKind.CONJUNCTION:
            return left and right
        if kind is ast.BinaryKind.DISJUNCTION:
            return left or right
        if kind is ast.BinaryKind.IMPLICATION:
            return (not left) or right
        return left == right


def evaluate(expr: ast.Expr, assignment: Assignment) -> bool:
    """Compute the truth value of a formula.

    Args:
        expr: Root of the formula AST
        assignment: Truth value for each proposition; extra names are ignored

    Returns:
        The truth value of ``expr`` under ``assignment``

    Raises:
        MissingAssignment: A proposition of ``expr`` has no entry
    """
    return Evaluator(assignment).evaluate(expr)
