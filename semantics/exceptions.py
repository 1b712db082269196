# semantics/exceptions.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Custom exceptions for formula evaluation

"""Domain-specific exceptions for propositional formula evaluation."""


class EvalError(RuntimeError):
    """Base class for errors raised while evaluating a formula."""

    pass


class MissingAssignment(EvalError):
    """A proposition in the formula has no value in the assignment.

    Attributes:
        name: The proposition that was left unassigned
    """

    def __init__(self, name: str):
        super().__init__(f"No truth value assigned to proposition '{name}'")
        self.name = name
