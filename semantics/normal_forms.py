# semantics/normal_forms.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Principal disjunctive and conjunctive normal forms read off a truth table

"""Principal (full) normal forms derived from a truth table.

The principal DNF is the disjunction of one minterm per true row; the
principal CNF is the conjunction of one maxterm per false row. Literals
follow the table's column order, and connectives fold left to right so the
canonical printing of the result parses back to the same tree.

The grammar has no constants, so a contradiction has no principal DNF and a
tautology has no principal CNF; both cases return None.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Sequence

from formula import ast_nodes as ast
from .truth_table import TruthTable


def minterm(assignment: Dict[str, bool], propositions: Sequence[str]) -> ast.Expr:
    """Conjunction true exactly under ``assignment``: ``p`` if true, ``¬p`` if false."""
    return _build_and([_literal(name, assignment[name]) for name in propositions])


def maxterm(assignment: Dict[str, bool], propositions: Sequence[str]) -> ast.Expr:
    """Disjunction false exactly under ``assignment``: ``¬p`` if true, ``p`` if false."""
    return _build_or([_literal(name, not assignment[name]) for name in propositions])


def principal_dnf(table: TruthTable) -> Optional[ast.Expr]:
    """Build the principal disjunctive normal form of a table.

    Args:
        table: Truth table of the formula

    Returns:
        Disjunction of minterms of the true rows, or None if no row is true
    """
    terms = [
        minterm(assignment, table.propositions)
        for assignment, value in table
        if value
    ]
    return _build_or(terms) if terms else None


def principal_cnf(table: TruthTable) -> Optional[ast.Expr]:
    """Build the principal conjunctive normal form of a table.

    Args:
        table: Truth table of the formula

    Returns:
        Conjunction of maxterms of the false rows, or None if no row is false
    """
    clauses = [
        maxterm(assignment, table.propositions)
        for assignment, value in table
        if not value
    ]
    return _build_and(clauses) if clauses else None


def _literal(name: str, positive: bool) -> ast.Expr:
    atom = ast.Proposition(name)
    return atom if positive else ast.Negation(atom)


def _build_and(factors: List[ast.Expr]) -> ast.Expr:
    """Build left-associative conjunction from a non-empty list of factors."""
    expr = factors[0]
    for factor in factors[1:]:
        expr = ast.conjunction(expr, factor)
    return expr


def _build_or(terms: List[ast.Expr]) -> ast.Expr:
    """Build left-associative disjunction from a non-empty list of terms."""
    expr = terms[0]
    for term in terms[1:]:
        expr = ast.disjunction(expr, term)
    return expr
