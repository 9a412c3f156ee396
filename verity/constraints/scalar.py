"""
Scalar constraints: truth values, None, emptiness, float classes,
ordering, and arbitrary callbacks.
"""

from __future__ import annotations

import math
from abc import abstractmethod
from collections.abc import Callable, Mapping, Sized
from typing import Any

from ..exceptions import ConfigurationError
from ..exporter import describe_type, export
from .base import Constraint


class IsAnything(Constraint):
    """Accepts every value."""

    def matches(self, other: Any) -> bool:
        return True

    def to_string(self) -> str:
        return "is anything"

    def count(self) -> int:
        return 0


class IsTrue(Constraint):
    def matches(self, other: Any) -> bool:
        return other is True

    def to_string(self) -> str:
        return "is true"


class IsFalse(Constraint):
    def matches(self, other: Any) -> bool:
        return other is False

    def to_string(self) -> str:
        return "is false"


class IsNull(Constraint):
    def matches(self, other: Any) -> bool:
        return other is None

    def to_string(self) -> str:
        return "is None"


class IsEmpty(Constraint):
    """
    Emptiness: a sized value of length zero, or a falsy scalar.

    Empty strings, containers, None, False and zero are empty.
    """

    def matches(self, other: Any) -> bool:
        if isinstance(other, Sized):
            return len(other) == 0
        return not other

    def to_string(self) -> str:
        return "is empty"

    def failure_description(self, other: Any) -> str:
        if isinstance(other, Mapping):
            return "a mapping is empty"
        if isinstance(other, (list, tuple, set, frozenset)):
            return f"a {type(other).__name__} is empty"
        if isinstance(other, str):
            return "a string is empty"
        return super().failure_description(other)


class _FloatClass(Constraint):
    def matches(self, other: Any) -> bool:
        try:
            return self._check(other)
        except (TypeError, ValueError, OverflowError):
            return False

    @abstractmethod
    def _check(self, other: Any) -> bool:
        pass


class IsFinite(_FloatClass):
    def _check(self, other: Any) -> bool:
        return math.isfinite(other)

    def to_string(self) -> str:
        return "is finite"


class IsInfinite(_FloatClass):
    def _check(self, other: Any) -> bool:
        return math.isinf(other)

    def to_string(self) -> str:
        return "is infinite"


class IsNan(_FloatClass):
    def _check(self, other: Any) -> bool:
        return math.isnan(other)

    def to_string(self) -> str:
        return "is nan"


class GreaterThan(Constraint):
    """
    Ordering against a fixed value.

    Values that cannot be ordered against the expected value do not match.
    """

    def __init__(self, value: Any):
        self._value = value

    def matches(self, other: Any) -> bool:
        try:
            return other > self._value
        except TypeError:
            return False

    def to_string(self) -> str:
        return f"is greater than {export(self._value)}"


class LessThan(Constraint):
    def __init__(self, value: Any):
        self._value = value

    def matches(self, other: Any) -> bool:
        try:
            return other < self._value
        except TypeError:
            return False

    def to_string(self) -> str:
        return f"is less than {export(self._value)}"


class Callback(Constraint):
    """
    Delegates the decision to a callable returning a truthy value.

    Args:
        callback: Predicate receiving the value
        description: Wording used in messages, e.g. "is a prime number"
    """

    def __init__(self, callback: Callable[[Any], Any], description: str = "is accepted by specified callback"):
        if not callable(callback):
            raise ConfigurationError(
                f"Callback constraint requires a callable, got {describe_type(callback)}"
            )
        self._callback = callback
        self._description = description

    def matches(self, other: Any) -> bool:
        return bool(self._callback(other))

    def to_string(self) -> str:
        return self._description
