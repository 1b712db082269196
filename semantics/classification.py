# semantics/classification.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Semantic classification and equivalence of formulas via truth tables

"""Tautology, contradiction, satisfiability and equivalence checks.

All checks are decided by exhaustive enumeration of assignments, so their
cost is O(2^k) evaluations for k distinct propositions. Bounding k is left
to the caller.
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Dict, List

from formula import ast_nodes as ast
from .evaluator import Evaluator
from .truth_table import TruthTable, assignments, truth_table
from support.logger import get_logger


class Classification(Enum):
    """Three-way semantic status of a formula."""
    TAUTOLOGY = auto()  # true under every assignment
    CONTRADICTION = auto()  # false under every assignment
    CONTINGENT = auto()  # true under some assignments only


def classify(expr: ast.Expr) -> Classification:
    return classification_of(truth_table(expr))


def classification_of(table: TruthTable) -> Classification:
    """Classify a formula from an already built truth table."""
    results = table.results
    if all(results):
        return Classification.TAUTOLOGY
    if not any(results):
        return Classification.CONTRADICTION
    return Classification.CONTINGENT


def is_tautology(expr: ast.Expr) -> bool:
    return all(truth_table(expr).results)


def is_contradiction(expr: ast.Expr) -> bool:
    return not any(truth_table(expr).results)


def is_satisfiable(expr: ast.Expr) -> bool:
    return any(truth_table(expr).results)


def models(expr: ast.Expr) -> List[Dict[str, bool]]:
    """Return every assignment that makes ``expr`` true, in row order."""
    return [assignment for assignment, value in truth_table(expr) if value]


def are_equivalent(first: ast.Expr, second: ast.Expr) -> bool:
    """Decide whether two formulas agree under every assignment.

    Assignments range over the union of both formulas' propositions: the
    first formula's names in first-occurrence order, then names that only
    occur in the second.

    Args:
        first: One formula
        second: The other formula

    Returns:
        True if both formulas have the same truth value on every row
    """
    names = dict.fromkeys(first.propositions())
    names.update(dict.fromkeys(second.propositions()))

    for assignment in assignments(tuple(names)):
        evaluator = Evaluator(assignment)
        if evaluator.evaluate(first) != evaluator.evaluate(second):
            get_logger().debug(f"Formulas differ under assignment {assignment}")
            return False
    return True
