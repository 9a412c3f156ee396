"""
Equality constraints.

IsEqual and its variants delegate the equality decision to the comparator
subsystem and differ only in the mode they request. IsIdentical checks
identity for objects and type-plus-value equality for immutable scalars.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from fractions import Fraction
from typing import Any

from ..comparator import ComparatorFactory, ComparisonFailure
from ..exceptions import ConfigurationError, ExpectationFailedError
from ..exporter import export, is_plain_object
from .base import Constraint


class IsEqual(Constraint):
    """
    Value equality through the comparator subsystem.

    Args:
        value: Expected value
        delta: Absolute numeric tolerance
        canonicalize: Ignore element order in sequences
        ignore_case: Compare strings case-insensitively
    """

    def __init__(
        self,
        value: Any,
        delta: float = 0.0,
        canonicalize: bool = False,
        ignore_case: bool = False,
    ):
        if delta < 0:
            raise ConfigurationError(f"delta must not be negative, got {delta}")

        self._value = value
        self._delta = delta
        self._canonicalize = canonicalize
        self._ignore_case = ignore_case

    @property
    def value(self) -> Any:
        return self._value

    def evaluate(self, other: Any, description: str = "", return_result: bool = False) -> bool | None:
        try:
            self._compare(other)
        except ComparisonFailure as failure:
            if return_result:
                return False
            message = "\n".join(part for part in (description, failure.message) if part)
            raise ExpectationFailedError(message, failure) from None

        return True if return_result else None

    def matches(self, other: Any) -> bool:
        return self.evaluate(other, "", True)

    def comparison_failure(self, other: Any) -> ComparisonFailure | None:
        """Return the comparison failure for other, or None if it is equal."""
        try:
            self._compare(other)
        except ComparisonFailure as failure:
            return failure
        return None

    def _compare(self, other: Any) -> None:
        if self._value is other and not isinstance(other, (float, Decimal, complex)):
            return

        factory = ComparatorFactory.default()
        comparator = factory.get_comparator(self._value, other)
        comparator.assert_equals(
            self._value,
            other,
            self._delta,
            self._canonicalize,
            self._ignore_case,
        )

    def to_string(self) -> str:
        if isinstance(self._value, str):
            if "\n" in self._value:
                return "is equal to <text>"
            return f"is equal to '{self._value}'"

        text = f"is equal to {export(self._value)}"
        if self._delta:
            text = f"{text} with delta <{self._delta}>"
        return text


class IsEqualWithDelta(IsEqual):
    """Numeric equality within an absolute tolerance."""

    def __init__(self, value: Any, delta: float):
        super().__init__(value, delta=delta)


class IsEqualCanonicalizing(IsEqual):
    """Equality ignoring element order, recursively."""

    def __init__(self, value: Any):
        super().__init__(value, canonicalize=True)


class IsEqualIgnoringCase(IsEqual):
    """Equality with case-folded strings, recursively."""

    def __init__(self, value: Any):
        super().__init__(value, ignore_case=True)


_IMMUTABLE_SCALARS = (type(None), bool, int, float, complex, str, bytes, Decimal, Fraction)


class IsIdentical(Constraint):
    """
    Identity.

    Objects must be the same object. Immutable scalars (numbers, strings,
    bytes, None) must have the same type and value, since Python may or may
    not share their instances. A NaN is identical only to itself.
    """

    def __init__(self, value: Any):
        self._value = value

    def matches(self, other: Any) -> bool:
        if self._value is other:
            return True
        if isinstance(self._value, _IMMUTABLE_SCALARS) or isinstance(other, _IMMUTABLE_SCALARS):
            return type(self._value) is type(other) and self._value == other
        return False

    def evaluate(self, other: Any, description: str = "", return_result: bool = False) -> bool | None:
        success = self.matches(other)

        if return_result:
            return success

        if not success:
            comparison_failure = None
            if self._same_container_kind(other):
                comparison_failure = ComparisonFailure(
                    self._value,
                    other,
                    export(self._value),
                    export(other),
                )
            self.fail(other, description, comparison_failure)

        return None

    def _same_container_kind(self, other: Any) -> bool:
        for kind in (str, list, tuple, Mapping):
            if isinstance(self._value, kind) and isinstance(other, kind):
                return True
        return False

    def failure_description(self, other: Any) -> str:
        if is_plain_object(self._value) and is_plain_object(other):
            return "two variables reference the same object"
        if isinstance(self._value, str) and isinstance(other, str):
            return "two strings are identical"
        if isinstance(self._value, Mapping) and isinstance(other, Mapping):
            return "two mappings are identical"
        if isinstance(self._value, (list, tuple)) and isinstance(other, (list, tuple)):
            return "two sequences are identical"
        return super().failure_description(other)

    def to_string(self) -> str:
        if is_plain_object(self._value):
            return f'is identical to an object of class "{type(self._value).__qualname__}"'
        return f"is identical to {export(self._value)}"
