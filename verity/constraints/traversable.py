"""
Containment constraints over collections.

Mappings are searched by value. Strings and bytes are not treated as
collections; use StringContains for substrings.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from ..exporter import export
from .base import Constraint
from .equality import IsEqual, IsIdentical
from .type_checks import IsInstanceOf, IsType


def _elements(value: Any) -> Iterable[Any] | None:
    if isinstance(value, Mapping):
        return value.values()
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray)):
        return value
    return None


def _collection_noun(value: Any) -> str:
    if isinstance(value, Mapping):
        return "a mapping"
    if isinstance(value, (list, tuple)):
        return "a sequence"
    return "a collection"


class _TraversableContains(Constraint):
    def __init__(self, value: Any):
        self._value = value

    def matches(self, other: Any) -> bool:
        elements = _elements(other)
        if elements is None:
            return False
        return any(self._element_matches(element) for element in elements)

    @abstractmethod
    def _element_matches(self, element: Any) -> bool:
        pass

    def to_string(self) -> str:
        return f"contains {export(self._value)}"

    def failure_description(self, other: Any) -> str:
        if _elements(other) is None:
            return super().failure_description(other)
        return f"{_collection_noun(other)} {self.to_string()}"


class TraversableContainsEqual(_TraversableContains):
    """A collection has an element equal to the value."""

    def __init__(self, value: Any):
        super().__init__(value)
        self._element_constraint = IsEqual(value)

    def _element_matches(self, element: Any) -> bool:
        return self._element_constraint.evaluate(element, "", True)


class TraversableContainsIdentical(_TraversableContains):
    """A collection has an element identical to the value."""

    def __init__(self, value: Any):
        super().__init__(value)
        self._element_constraint = IsIdentical(value)

    def _element_matches(self, element: Any) -> bool:
        return self._element_constraint.matches(element)


class TraversableContainsOnly(Constraint):
    """
    Every element of a collection is of the given kind or type.

    Args:
        kind_or_type: A native kind name (see IsType) when native is True,
            otherwise a type or dotted type name (see IsInstanceOf)
        native: Interpret kind_or_type as a native kind
    """

    def __init__(self, kind_or_type: Any, native: bool = True):
        if native:
            self._element_constraint: Constraint = IsType(kind_or_type)
        else:
            self._element_constraint = IsInstanceOf(kind_or_type)
        self._kind_or_type = kind_or_type

    def matches(self, other: Any) -> bool:
        elements = _elements(other)
        if elements is None:
            return False
        return all(self._element_constraint.evaluate(e, "", True) for e in elements)

    def to_string(self) -> str:
        name = getattr(self._kind_or_type, "__qualname__", self._kind_or_type)
        return f'contains only values of type "{name}"'
