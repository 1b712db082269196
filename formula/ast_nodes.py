# formula/ast_nodes.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional formulas. Each non-leaf node exclusively owns
its operand subtrees, so every AST is a finite tree with structural equality.

Node Types:
    Proposition: Named propositional variable (leaf)
    Negation: Unary logical NOT
    BinaryOp: Conjunction, disjunction, implication or equivalence

All nodes support the visitor design pattern for traversal and evaluation.

The parser accepts formulas of any depth, so every whole-tree operation
defined here (printing, equality, hashing, ``fold``) runs over an explicit
stack instead of the interpreter call stack.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from itertools import zip_longest
from typing import Callable, Iterator, List, Protocol, Tuple, TypeVar

T = TypeVar("T")


class BinaryKind(Enum):
    """Binary connectives together with their notation symbol."""

    CONJUNCTION = "∧"
    DISJUNCTION = "∨"
    IMPLICATION = "→"
    EQUIVALENCE = "⇄"

    @property
    def symbol(self) -> str:
        return self.value


NEGATION_SYMBOL = "¬"


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and evaluation operations.
    """

    def visit_proposition(self, n: Proposition): ...

    def visit_negation(self, n: Negation): ...

    def visit_binary(self, n: BinaryOp): ...


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. ``str()`` of any node is the canonical, fully parenthesized
    rendering in formula notation, which parses back to an equal tree.

    Two nodes are equal when their trees have the same shape and carry the
    same connectives and proposition names at corresponding positions.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def children(self) -> Tuple[Expr, ...]:
        """Return the direct operands of this node, left to right."""
        return ()

    def label(self) -> Tuple:
        """Return what distinguishes this node from others of its arity."""
        raise NotImplementedError

    def walk(self) -> Iterator[Expr]:
        """Yield every node of the tree in pre-order.

        Uses an explicit stack so deeply nested formulas do not hit the
        interpreter recursion limit.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    def fold(self, combine: Callable[[Expr, Tuple[T, ...]], T]) -> T:
        """Reduce the tree bottom-up.

        ``combine`` receives each node together with the already reduced
        values of its operands, left to right. Nodes are combined in
        post-order, so leaves are reached in left-to-right order.

        Args:
            combine: Function of a node and its operand values

        Returns:
            The value ``combine`` produced for this node
        """
        values: List[T] = []
        stack = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            children = node.children()
            if children and not expanded:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(children))
                continue
            split = len(values) - len(children)
            operands = tuple(values[split:])
            del values[split:]
            values.append(combine(node, operands))
        return values[0]

    def propositions(self) -> Tuple[str, ...]:
        """Return distinct proposition names in first-occurrence order."""
        seen = {}
        for node in self.walk():
            if isinstance(node, Proposition):
                seen.setdefault(node.name, None)
        return tuple(seen)

    def __eq__(self, other):
        if not isinstance(other, Expr):
            return NotImplemented
        if self is other:
            return True
        # Pre-order labels with fixed arities determine the tree uniquely
        for mine, theirs in zip_longest(self.walk(), other.walk()):
            if mine is None or theirs is None:
                return False
            if type(mine) is not type(theirs) or mine.label() != theirs.label():
                return False
        return True

    def __hash__(self):
        return hash(tuple((type(node).__name__,) + node.label() for node in self.walk()))

    def __str__(self) -> str:
        return self.fold(_canonical_text)

    def __repr__(self) -> str:
        return self.fold(_node_repr)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Proposition(Expr):
    """Atomic propositional variable.

    Attributes:
        name: Identifier matching ``[A-Za-z_][A-Za-z0-9_]*``
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_proposition(self)

    def label(self) -> Tuple:
        return (self.name,)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Negation(Expr):
    """Logical negation that inverts the truth value of its operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_negation(self)

    def children(self) -> Tuple[Expr, ...]:
        return (self.operand,)

    def label(self) -> Tuple:
        return ()


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class BinaryOp(Expr):
    """Binary connective applied to two operands.

    Attributes:
        kind: Which connective this node applies
        left: Left operand
        right: Right operand
    """

    kind: BinaryKind
    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_binary(self)

    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def label(self) -> Tuple:
        return (self.kind,)


def _canonical_text(node: Expr, operands: Tuple[str, ...]) -> str:
    if isinstance(node, Proposition):
        return node.name
    if isinstance(node, Negation):
        return f"{NEGATION_SYMBOL}{operands[0]}"
    left, right = operands
    return f"({left} {node.kind.symbol} {right})"


def _node_repr(node: Expr, operands: Tuple[str, ...]) -> str:
    if isinstance(node, Proposition):
        return f"Proposition(name={node.name!r})"
    if isinstance(node, Negation):
        return f"Negation(operand={operands[0]})"
    left, right = operands
    return f"BinaryOp(kind={node.kind!r}, left={left}, right={right})"


def conjunction(left: Expr, right: Expr) -> BinaryOp:
    return BinaryOp(BinaryKind.CONJUNCTION, left, right)


def disjunction(left: Expr, right: Expr) -> BinaryOp:
    return BinaryOp(BinaryKind.DISJUNCTION, left, right)


def implication(left: Expr, right: Expr) -> BinaryOp:
    return BinaryOp(BinaryKind.IMPLICATION, left, right)


def equivalence(left: Expr, right: Expr) -> BinaryOp:
    return BinaryOp(BinaryKind.EQUIVALENCE, left, right)
