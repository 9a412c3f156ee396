"""
Value rendering for failure messages and diffs.

export() produces a stable, multi-line representation of a value so that
two exported values can be diffed line by line. shortened_export() produces
a single line suitable for inline use in a sentence.
"""

from __future__ import annotations

import dataclasses
import datetime
import enum
import numbers
import os
import types
from collections.abc import Mapping, Set
from typing import Any

INDENT = "    "
RECURSION_MARKER = "*RECURSION*"

_OPAQUE_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    enum.Enum,
    os.PathLike,
    type,
)


def export(value: Any, indentation: int = 0) -> str:
    """
    Export a value for display.

    Args:
        value: Any Python value
        indentation: Nesting level used for the closing bracket

    Returns:
        Multi-line string for containers and objects, single line otherwise
    """
    return _export(value, indentation, set())


def shortened_export(value: Any, max_length: int = 40) -> str:
    """Export a value on a single line, truncating if too long."""
    if isinstance(value, str):
        formatted = repr(value)
    else:
        formatted = " ".join(line.strip() for line in export(value).splitlines())
        formatted = formatted.replace("[ ", "[").replace("{ ", "{").replace("( ", "(")
        formatted = formatted.replace(", ]", "]").replace(", }", "}").replace(", )", ")")

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted


def describe_type(value: Any) -> str:
    """Name the kind of a value for messages like 'expected int, got str'."""
    if value is None:
        return "None"
    if is_plain_object(value):
        return f"instance of {type(value).__qualname__}"
    return type(value).__name__


def object_attributes(value: Any) -> dict[str, Any] | None:
    """
    Collect the attributes that define an object's state.

    Returns None when the object exposes neither __dict__ nor __slots__.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}

    attributes: dict[str, Any] = {}
    found = False

    for cls in type(value).__mro__:
        for slot in getattr(cls, "__slots__", ()):
            if slot in ("__dict__", "__weakref__"):
                continue
            found = True
            if hasattr(value, slot):
                attributes[slot] = getattr(value, slot)

    if hasattr(value, "__dict__"):
        found = True
        attributes.update(vars(value))

    return attributes if found else None


def is_plain_object(value: Any) -> bool:
    """True for instances of user classes that carry attribute state."""
    return not isinstance(
        value,
        (str, bytes, bytearray, numbers.Number, list, tuple, Mapping, Set, BaseException),
    ) and not isinstance(value, _OPAQUE_TYPES) and object_attributes(value) is not None


def _export(value: Any, indentation: int, processed: set[int]) -> str:
    if value is None or isinstance(value, (numbers.Number, bytes, bytearray)):
        return repr(value)

    if isinstance(value, str):
        if "\n" in value or "\r" in value:
            escaped = value.replace("\\", "\\\\").replace("'", "\\'")
            return f"'{escaped}'"
        return repr(value)

    if isinstance(value, BaseException):
        return f"{type(value).__qualname__}({', '.join(repr(a) for a in value.args)})"

    if isinstance(value, type):
        return f"<class {value.__module__}.{value.__qualname__}>"

    if isinstance(value, _OPAQUE_TYPES):
        return repr(value)

    if id(value) in processed:
        return RECURSION_MARKER

    whitespace = INDENT * indentation
    processed = processed | {id(value)}

    if isinstance(value, Mapping):
        prefix = "" if type(value) is dict else f"{type(value).__name__} "
        if not value:
            return f"{prefix}{{}}"
        lines = [
            f"{whitespace}{INDENT}{_export(k, indentation + 1, processed)}: "
            f"{_export(v, indentation + 1, processed)},"
            for k, v in value.items()
        ]
        return f"{prefix}{{\n" + "\n".join(lines) + f"\n{whitespace}}}"

    if isinstance(value, (list, tuple)):
        opening, closing = ("[", "]") if isinstance(value, list) else ("(", ")")
        prefix = "" if type(value) in (list, tuple) else f"{type(value).__name__} "
        if not value:
            return f"{prefix}{opening}{closing}"
        lines = [
            f"{whitespace}{INDENT}{_export(item, indentation + 1, processed)},"
            for item in value
        ]
        return f"{prefix}{opening}\n" + "\n".join(lines) + f"\n{whitespace}{closing}"

    if isinstance(value, Set):
        if not value:
            return f"{type(value).__name__}()"
        items = sorted(_export(item, indentation + 1, processed) for item in value)
        lines = [f"{whitespace}{INDENT}{item}," for item in items]
        return "{\n" + "\n".join(lines) + f"\n{whitespace}}}"

    attributes = object_attributes(value)
    if attributes is None:
        return repr(value)

    name = type(value).__qualname__
    if not attributes:
        return f"{name}()"
    lines = [
        f"{whitespace}{INDENT}{key}={_export(attr, indentation + 1, processed)},"
        for key, attr in attributes.items()
    ]
    return f"{name}(\n" + "\n".join(lines) + f"\n{whitespace})"
