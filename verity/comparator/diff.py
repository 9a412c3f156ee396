"""
Diff generation for comparison failures.

Two views of the same inequality are produced:

    - unified_diff(): a line diff of the exported expected and actual
      values, headed "--- Expected" / "+++ Actual"
    - Difference records: one entry per differing path inside a composite
      value, rendered by describe_differences()
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..exporter import shortened_export


class DifferenceKind(str, Enum):
    """How a path differs between expected and actual."""
    ADDED = "added"  # present only in actual
    REMOVED = "removed"  # present only in expected
    CHANGED = "changed"


@dataclass(frozen=True)
class Difference:
    """
    A single differing location inside a composite value.

    Attributes:
        path: JSONPath-like location, e.g. "$.items[2].name"
        kind: Whether the value was added, removed or changed
        expected: Value at path in the expected structure (if any)
        actual: Value at path in the actual structure (if any)
    """
    path: str
    kind: DifferenceKind
    expected: Any = None
    actual: Any = None

    def under(self, segment: str) -> Difference:
        """Re-root this difference below a parent path segment."""
        return Difference(
            path="$" + segment + self.path[1:],
            kind=self.kind,
            expected=self.expected,
            actual=self.actual,
        )

    def __str__(self) -> str:
        if self.kind == DifferenceKind.ADDED:
            return f"{self.path}: unexpected {shortened_export(self.actual)}"
        if self.kind == DifferenceKind.REMOVED:
            return f"{self.path}: expected {shortened_export(self.expected)}, but it is missing"
        return f"{self.path}: expected {shortened_export(self.expected)}, got {shortened_export(self.actual)}"


def path_segment(key: Any) -> str:
    """Format a mapping key, attribute name or index as a path segment."""
    if isinstance(key, int) and not isinstance(key, bool):
        return f"[{key}]"
    if isinstance(key, str) and key.isidentifier():
        return f".{key}"
    return f"[{key!r}]"


def unified_diff(expected: str, actual: str, context: int = 3) -> str:
    """
    Build a unified diff between two exported values.

    Returns:
        The diff text, or an empty string when the inputs are identical
    """
    lines = list(
        difflib.unified_diff(
            expected.splitlines(),
            actual.splitlines(),
            fromfile="Expected",
            tofile="Actual",
            lineterm="",
            n=context,
        )
    )
    return "\n".join(lines)


def describe_differences(differences: list[Difference]) -> str:
    """Render one line per differing path."""
    return "\n".join(str(d) for d in differences)
