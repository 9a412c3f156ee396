"""
Type and shape constraints.

Type names given as strings are resolved to types when the constraint is
built (TypeDescriptor), so an unknown name is a configuration error rather
than a failed assertion.
"""

from __future__ import annotations

import builtins
import importlib
import inspect
from collections.abc import Iterable, Iterator, Mapping, Sequence, Sized
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable

from ..comparator.comparators import is_number, is_numeric_string
from ..exceptions import ConfigurationError
from ..exporter import export, is_plain_object, shortened_export
from .base import Constraint


# ─────────────────────────────────────────────────────────────────────────────
# Type Descriptors
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TypeDescriptor:
    """
    A type resolved ahead of evaluation.

    Attributes:
        name: Qualified name, e.g. "collections.OrderedDict"
        type: The resolved type object
    """
    name: str
    type: type

    @property
    def kind(self) -> str:
        """Either "interface" (abstract classes, protocols) or "class"."""
        if inspect.isabstract(self.type) or getattr(self.type, "_is_protocol", False):
            return "interface"
        return "class"

    @classmethod
    def resolve(cls, type_or_name: type | str) -> TypeDescriptor:
        """
        Resolve a type or a dotted type name.

        Args:
            type_or_name: A type, a builtin name ("int") or a dotted path
                ("collections.OrderedDict", "package.module.Outer.Inner")

        Raises:
            ConfigurationError: If the name does not resolve to a type
        """
        if isinstance(type_or_name, type):
            return cls(_qualified_name(type_or_name), type_or_name)

        if not isinstance(type_or_name, str) or not type_or_name:
            raise ConfigurationError(f"Expected a type or a type name, got {shortened_export(type_or_name)}")

        resolved = _lookup(type_or_name)
        if not isinstance(resolved, type):
            raise ConfigurationError(f'Class or interface "{type_or_name}" does not exist')

        return cls(type_or_name, resolved)


def _qualified_name(t: type) -> str:
    if t.__module__ == "builtins":
        return t.__qualname__
    return f"{t.__module__}.{t.__qualname__}"


def _lookup(name: str) -> Any:
    if "." not in name:
        return getattr(builtins, name, None)

    parts = name.split(".")
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            obj: Any = importlib.import_module(module_name)
        except ImportError:
            continue
        for attribute in parts[split:]:
            obj = getattr(obj, attribute, None)
            if obj is None:
                return None
        return obj
    return None


# ─────────────────────────────────────────────────────────────────────────────
# Native Kinds
# ─────────────────────────────────────────────────────────────────────────────

NATIVE_TYPES: dict[str, Callable[[Any], bool]] = {
    "list": lambda v: isinstance(v, list),
    "tuple": lambda v: isinstance(v, tuple),
    "dict": lambda v: isinstance(v, dict),
    "mapping": lambda v: isinstance(v, Mapping),
    "set": lambda v: isinstance(v, (set, frozenset)),
    "bool": lambda v: isinstance(v, bool),
    "int": lambda v: isinstance(v, int) and not isinstance(v, bool),
    "float": lambda v: isinstance(v, float),
    "numeric": lambda v: is_number(v) or is_numeric_string(v),
    "str": lambda v: isinstance(v, str),
    "bytes": lambda v: isinstance(v, (bytes, bytearray)),
    "none": lambda v: v is None,
    "scalar": lambda v: isinstance(v, (bool, int, float, complex, str, bytes, Decimal, Fraction)),
    "callable": callable,
    "iterable": lambda v: isinstance(v, Iterable),
    "object": is_plain_object,
}

_ALIASES = {"string": "str", "null": "none", "array": "list", "integer": "int", "boolean": "bool"}


class IsType(Constraint):
    """
    Value is of a native kind.

    Kinds: list, tuple, dict, mapping, set, bool, int, float, numeric, str,
    bytes, none, scalar, callable, iterable, object (plus the aliases
    string, null, array, integer, boolean).
    """

    def __init__(self, kind: str):
        kind = _ALIASES.get(kind, kind)
        if kind not in NATIVE_TYPES:
            raise ConfigurationError(
                f'Type "{kind}" is not a known native kind; '
                f"valid kinds: {', '.join(sorted(NATIVE_TYPES))}"
            )
        self._kind = kind

    def matches(self, other: Any) -> bool:
        return NATIVE_TYPES[self._kind](other)

    def to_string(self) -> str:
        return f'is of type "{self._kind}"'


class IsInstanceOf(Constraint):
    """Value is an instance of a class or interface."""

    def __init__(self, type_or_name: type | str):
        self._descriptor = TypeDescriptor.resolve(type_or_name)

    def matches(self, other: Any) -> bool:
        return isinstance(other, self._descriptor.type)

    def to_string(self) -> str:
        return f'is an instance of {self._descriptor.kind} "{self._descriptor.name}"'

    def failure_description(self, other: Any) -> str:
        return f"{shortened_export(other)} {self.to_string()}"


# ─────────────────────────────────────────────────────────────────────────────
# Shape
# ─────────────────────────────────────────────────────────────────────────────

def count_of(value: Any) -> int | None:
    """
    Number of elements of a value, or None if it cannot be counted.

    One-shot iterators are not counted, since counting would consume them.
    """
    if isinstance(value, Sized):
        return len(value)
    if isinstance(value, Iterator):
        return None
    if isinstance(value, Iterable):
        return sum(1 for _ in value)
    return None


class Count(Constraint):
    """Value has exactly N elements."""

    def __init__(self, expected: int):
        self._expected = expected

    def matches(self, other: Any) -> bool:
        return count_of(other) == self._expected

    def failure_description(self, other: Any) -> str:
        actual = count_of(other)
        if actual is None:
            return f"{shortened_export(other)} is countable"
        return f"actual size {actual} matches expected size {self._expected}"

    def to_string(self) -> str:
        return f"count matches {self._expected}"


class SameSize(Count):
    """Value has as many elements as a reference collection."""

    def __init__(self, expected: Any):
        size = count_of(expected)
        if size is None:
            raise ConfigurationError(f"{shortened_export(expected)} is not countable")
        super().__init__(size)


class ArrayHasKey(Constraint):
    """A mapping has the key, or a sequence has the index."""

    def __init__(self, key: Any):
        self._key = key

    def matches(self, other: Any) -> bool:
        if isinstance(other, Mapping):
            return self._key in other
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return isinstance(self._key, int) and not isinstance(self._key, bool) and 0 <= self._key < len(other)
        return False

    def to_string(self) -> str:
        return f"has the key {export(self._key)}"

    def failure_description(self, other: Any) -> str:
        if isinstance(other, Mapping):
            return f"a mapping {self.to_string()}"
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return f"a sequence {self.to_string()}"
        return super().failure_description(other)


_MISSING = object()


class ObjectHasProperty(Constraint):
    """
    Object has a named attribute.

    The lookup does not trigger properties or other descriptors.
    """

    def __init__(self, name: str):
        if not isinstance(name, str) or not name.isidentifier():
            raise ConfigurationError(f"{shortened_export(name)} is not a valid attribute name")
        self._name = name

    def matches(self, other: Any) -> bool:
        return inspect.getattr_static(other, self._name, _MISSING) is not _MISSING

    def to_string(self) -> str:
        return f'has property "{self._name}"'

    def failure_description(self, other: Any) -> str:
        return f'object of class "{type(other).__qualname__}" {self.to_string()}'
