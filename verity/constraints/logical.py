"""
Logical combinators: AND, OR, XOR over child constraints, and NOT.

Combinators evaluate children through their silent form and only the
outermost evaluation raises. A combinator's weight (count) is the sum of
its children's weights.
"""

from __future__ import annotations

import re
from abc import abstractmethod
from typing import Any

from ..exceptions import ConfigurationError
from ..exporter import export
from .base import Constraint
from .equality import IsEqual


# ─────────────────────────────────────────────────────────────────────────────
# Negated Phrasing
# ─────────────────────────────────────────────────────────────────────────────

_NEGATIONS = {
    "contains ": "does not contain ",
    "does not contain ": "contains ",
    "exists": "does not exist",
    "does not exist": "exists",
    "has ": "does not have ",
    "does not have ": "has ",
    "is ": "is not ",
    "is not ": "is ",
    "are ": "are not ",
    "are not ": "are ",
    "matches ": "does not match ",
    "does not match ": "matches ",
    "starts with ": "starts not with ",
    "starts not with ": "starts with ",
    "ends with ": "ends not with ",
    "ends not with ": "ends with ",
    "references ": "does not reference ",
    "does not reference ": "references ",
    "reference ": "do not reference ",
    "do not reference ": "reference ",
}

# Longest phrases first so "is not " wins over "is ".
_PHRASE_PATTERN = re.compile(
    r"\b(" + "|".join(re.escape(p) for p in sorted(_NEGATIONS, key=len, reverse=True)) + ")"
)
_QUOTED_PATTERN = re.compile(r"""('(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*")""", re.DOTALL)


def negate(text: str) -> str:
    """
    Invert the verbs of a constraint description.

    Quoted literals are left untouched, so the value being described is
    never rewritten.

    Example:
        negate("is equal to 5")           # "is not equal to 5"
        negate("contains 'is here'")      # "does not contain 'is here'"
    """
    parts = _QUOTED_PATTERN.split(text)
    return "".join(
        part if index % 2 else _PHRASE_PATTERN.sub(lambda m: _NEGATIONS[m.group(1)], part)
        for index, part in enumerate(parts)
    )


def count_constraints(constraint: Constraint) -> int:
    """Number of leaf predicates in a constraint tree."""
    return constraint.count()


# ─────────────────────────────────────────────────────────────────────────────
# Operators
# ─────────────────────────────────────────────────────────────────────────────

class Operator(Constraint):
    """A constraint built from other constraints."""

    @abstractmethod
    def operator(self) -> str:
        pass

    @abstractmethod
    def precedence(self) -> int:
        """Binding strength; a larger number binds more loosely."""
        pass

    @abstractmethod
    def arity(self) -> int:
        pass

    @staticmethod
    def _check_constraint(constraint: Any) -> Constraint:
        if isinstance(constraint, Constraint):
            return constraint
        return IsEqual(constraint)

    def _needs_parentheses(self, constraint: Constraint) -> bool:
        return (
            isinstance(constraint, Operator)
            and constraint.arity() > 1
            and self.precedence() <= constraint.precedence()
        )


class BinaryOperator(Operator):
    """
    An operator over an ordered, fixed sequence of children.

    Children are given at construction and stored as a tuple. Values that
    are not constraints are wrapped in IsEqual.

    Example:
        constraint = LogicalAnd(IsType("int"), GreaterThan(0), LessThan(10))
        constraint.count()  # 3
    """

    minimum_children = 1

    def __init__(self, *constraints: Any):
        self._constraints = tuple(self._check_constraint(c) for c in constraints)

    @classmethod
    def from_constraints(cls, *constraints: Any) -> BinaryOperator:
        return cls(*constraints)

    @property
    def constraints(self) -> tuple[Constraint, ...]:
        return self._constraints

    def arity(self) -> int:
        return len(self._constraints)

    def count(self) -> int:
        return sum(c.count() for c in self._constraints)

    def to_string(self) -> str:
        parts = []
        for constraint in self._constraints:
            text = constraint.to_string()
            if self._needs_parentheses(constraint):
                text = f"( {text} )"
            parts.append(text)
        return f" {self.operator()} ".join(parts)

    def _require_children(self) -> None:
        if len(self._constraints) < self.minimum_children:
            raise ConfigurationError(
                f"{type(self).__name__} requires at least {self.minimum_children} "
                f"constraint(s), got {len(self._constraints)}"
            )


class LogicalAnd(BinaryOperator):
    """All children must match. Stops at the first failing child."""

    def operator(self) -> str:
        return "and"

    def precedence(self) -> int:
        return 22

    def matches(self, other: Any) -> bool:
        return self.first_failing(other) is None

    def first_failing(self, other: Any) -> Constraint | None:
        """Return the first child that rejects other, or None."""
        self._require_children()
        for constraint in self._constraints:
            if not constraint.evaluate(other, "", True):
                return constraint
        return None

    def additional_failure_description(self, other: Any) -> str:
        failing = self.first_failing(other)
        if failing is None or len(self._constraints) == 1:
            return ""
        return f"First failing constraint: {failing.failure_description(other)}."


class LogicalOr(BinaryOperator):
    """At least one child must match. Stops at the first passing child."""

    def operator(self) -> str:
        return "or"

    def precedence(self) -> int:
        return 24

    def matches(self, other: Any) -> bool:
        self._require_children()
        return any(c.evaluate(other, "", True) for c in self._constraints)


class LogicalXor(BinaryOperator):
    """An odd number of children must match."""

    minimum_children = 2

    def operator(self) -> str:
        return "xor"

    def precedence(self) -> int:
        return 23

    def matches(self, other: Any) -> bool:
        self._require_children()
        passed = sum(1 for c in self._constraints if c.evaluate(other, "", True))
        return passed % 2 == 1


class LogicalNot(Operator):
    """
    Inverts a single child.

    Leaf children have their phrasing negated ("is equal to" becomes
    "is not equal to"); combinator children are wrapped as "not( ... )".
    """

    def __init__(self, constraint: Any):
        self._constraint = self._check_constraint(constraint)

    @property
    def constraint(self) -> Constraint:
        return self._constraint

    def operator(self) -> str:
        return "not"

    def precedence(self) -> int:
        return 5

    def arity(self) -> int:
        return 1

    def count(self) -> int:
        return self._constraint.count()

    def matches(self, other: Any) -> bool:
        return not self._constraint.evaluate(other, "", True)

    def _wraps_operator(self) -> bool:
        return isinstance(self._constraint, Operator) and self._constraint.arity() > 1

    def to_string(self) -> str:
        in_context = self._constraint.to_string_in_context(self)
        if in_context:
            return in_context
        if self._wraps_operator():
            return f"not( {self._constraint.to_string()} )"
        return negate(self._constraint.to_string())

    def failure_description(self, other: Any) -> str:
        in_context = self._constraint.failure_description_in_context(self, other)
        if in_context:
            return in_context
        if self._wraps_operator():
            return f"not( {export(other)} {self._constraint.to_string()} )"
        return negate(self._constraint.failure_description(other))
