# semantics/__init__.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Semantic evaluation of parsed propositional formulas

"""Semantic evaluation interface.

This package provides:
  • evaluate: truth value of an AST under an assignment
  • truth_table: every assignment paired with the formula's value
  • classify / is_tautology / is_contradiction / is_satisfiable
  • are_equivalent: agreement of two formulas over their combined variables
  • principal_dnf / principal_cnf: normal forms read off a truth table
  • MissingAssignment: raised when an assignment leaves a proposition out

Everything here is a pure function of its arguments; no state is kept
between calls.
"""

from .classification import (
    Classification,
    are_equivalent,
    classification_of,
    classify,
    is_contradiction,
    is_satisfiable,
    is_tautology,
    models,
)
from .evaluator import Evaluator, evaluate
from .exceptions import EvalError, MissingAssignment
from .normal_forms import principal_cnf, principal_dnf
from .truth_table import Row, TruthTable, truth_table

__all__ = [
    "evaluate",
    "Evaluator",
    "truth_table",
    "TruthTable",
    "Row",
    "classify",
    "classification_of",
    "Classification",
    "is_tautology",
    "is_contradiction",
    "is_satisfiable",
    "models",
    "are_equivalent",
    "principal_dnf",
    "principal_cnf",
    "EvalError",
    "MissingAssignment",
]
