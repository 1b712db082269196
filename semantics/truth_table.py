# semantics/truth_table.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Truth table enumeration over every assignment of a formula's propositions

"""Builds complete truth tables for propositional formulas.

A formula with k distinct propositions has exactly 2^k rows. Rows count
upward in binary from all-false to all-true, with the first column as the
most significant bit. Columns are the propositions in first-occurrence
order, or in sorted order on request.

Every atom of the grammar is a proposition, so k is at least 1 for any
parsed formula and a table always has at least two rows.
"""

from __future__ import annotations
from dataclasses import dataclass
from itertools import product
from typing import Dict, Iterator, Sequence, Tuple

from formula import ast_nodes as ast
from .evaluator import Evaluator
from support.logger import get_logger

ORDER_OCCURRENCE = "occurrence"
ORDER_SORTED = "sorted"


@dataclass(frozen=True)
class Row:
    """One line of a truth table.

    Attributes:
        assignment: Truth value of each proposition
        value: Truth value of the formula under ``assignment``
    """

    assignment: Dict[str, bool]
    value: bool


@dataclass(frozen=True)
class TruthTable:
    """Complete truth table of a formula.

    Iterating yields ``(assignment, value)`` pairs in row order.

    Attributes:
        propositions: Column labels, in enumeration order
        rows: One row per assignment
    """

    propositions: Tuple[str, ...]
    rows: Tuple[Row, ...]

    def __iter__(self) -> Iterator[Tuple[Dict[str, bool], bool]]:
        for row in self.rows:
            yield row.assignment, row.value

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def results(self) -> Tuple[bool, ...]:
        """Formula value of every row, in row order."""
        return tuple(row.value for row in self.rows)

    def columns(self, row: Row) -> Tuple[bool, ...]:
        """Assignment of ``row`` laid out in column order."""
        return tuple(row.assignment[name] for name in self.propositions)


def assignments(propositions: Sequence[str]) -> Iterator[Dict[str, bool]]:
    """Enumerate all assignments, first name as most significant bit."""
    for values in product((False, True), repeat=len(propositions)):
        yield dict(zip(propositions, values))


def truth_table(expr: ast.Expr, order: str = ORDER_OCCURRENCE) -> TruthTable:
    """Evaluate a formula under every assignment of its propositions.

    Args:
        expr: Root of the formula AST
        order: ``"occurrence"`` for first-occurrence column order or
            ``"sorted"`` for lexicographic column order

    Returns:
        The full truth table with 2^k rows

    Raises:
        ValueError: If ``order`` is not a known column order
    """
    propositions = _ordered_propositions(expr, order)
    rows = tuple(
        Row(assignment, Evaluator(assignment).evaluate(expr))
        for assignment in assignments(propositions)
    )

    get_logger().table_built(len(rows), len(propositions))
    return TruthTable(propositions, rows)


def _ordered_propositions(expr: ast.Expr, order: str) -> Tuple[str, ...]:
    names = expr.propositions()
    if order == ORDER_OCCURRENCE:
        return names
    if order == ORDER_SORTED:
        return tuple(sorted(names))
    raise ValueError(f"Unknown proposition order: {order!r}")
