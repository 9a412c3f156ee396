"""
Domain-object equality through a comparison method on the actual value.

ObjectEquals(expected) calls actual.equals(expected). The method contract
is checked before the call; a method that cannot honor it is a
configuration error, not a failed assertion.
"""

from __future__ import annotations

import inspect
import types
import typing
from typing import Any, Union

from ..exceptions import ConfigurationError
from ..exporter import describe_type
from .base import Constraint


def _accepts(hint: Any, value: Any) -> bool:
    """True if value satisfies a declared parameter annotation."""
    if hint is Any:
        return True

    origin = typing.get_origin(hint)
    if origin is Union or origin is types.UnionType:
        return any(_accepts(arg, value) for arg in typing.get_args(hint))
    if origin is not None:
        return isinstance(origin, type) and isinstance(value, origin)
    if hint is None or hint is type(None):
        return value is None
    if isinstance(hint, type):
        return isinstance(value, hint)
    return True


class ObjectEquals(Constraint):
    """
    Actual value considers itself equal to the expected value.

    Args:
        expected: Value passed to the comparison method
        method: Name of the comparison method on the actual value

    Raises:
        ConfigurationError: At evaluation, if the method is missing, not
            callable, cannot take exactly one argument, declares a return
            type other than bool, declares a parameter type the expected
            value is not an instance of, or returns a non-bool
    """

    def __init__(self, expected: Any, method: str = "equals"):
        self._expected = expected
        self._method = method

    def matches(self, other: Any) -> bool:
        method = self._comparison_method(other)
        result = method(self._expected)

        if not isinstance(result, bool):
            raise ConfigurationError(
                f"Comparison method {self._qualified(other)}() returned "
                f"{describe_type(result)}, expected bool"
            )

        return result

    def _qualified(self, other: Any) -> str:
        return f"{type(other).__qualname__}.{self._method}"

    def _comparison_method(self, other: Any) -> Any:
        method = getattr(other, self._method, None)
        if method is None:
            raise ConfigurationError(
                f"Comparison method {self._qualified(other)}() does not exist"
            )
        if not callable(method):
            raise ConfigurationError(f"{self._qualified(other)} is not callable")

        try:
            signature = inspect.signature(method)
        except (TypeError, ValueError):
            # builtins without introspectable signatures are called as is
            return method

        try:
            bound = signature.bind(self._expected)
        except TypeError:
            raise ConfigurationError(
                f"Comparison method {self._qualified(other)}() does not declare exactly one parameter"
            ) from None

        try:
            hints = typing.get_type_hints(method)
        except (NameError, TypeError):
            hints = {}

        if "return" in hints and hints["return"] is not bool:
            raise ConfigurationError(
                f"Comparison method {self._qualified(other)}() does not declare bool return type"
            )

        for name in bound.arguments:
            if name in hints and not _accepts(hints[name], self._expected):
                raise ConfigurationError(
                    f"{describe_type(self._expected)} is not accepted by parameter "
                    f'"{name}" of comparison method {self._qualified(other)}()'
                )

        return method

    def to_string(self) -> str:
        return "two objects are equal"

    def failure_description(self, other: Any) -> str:
        return self.to_string()
