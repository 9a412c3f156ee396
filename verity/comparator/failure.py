"""
ComparisonFailure: the structured result of an unequal comparison.
"""

from __future__ import annotations

from typing import Any

from .diff import Difference, describe_differences, unified_diff


class ComparisonFailure(Exception):
    """
    Raised by a comparator when two values are not equal.

    Attributes:
        expected: The expected value
        actual: The actual value
        expected_as_string: Exported form of expected used for the diff
            (empty when a diff would not help, e.g. for two numbers)
        actual_as_string: Exported form of actual
        message: Explanation of the mismatch
        differences: Per-path differences for composite values
    """

    def __init__(
        self,
        expected: Any,
        actual: Any,
        expected_as_string: str,
        actual_as_string: str,
        message: str = "",
        differences: list[Difference] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.expected_as_string = expected_as_string
        self.actual_as_string = actual_as_string
        self.message = message
        self.differences = differences or []

    def diff(self) -> str:
        """Unified diff of the exported values, or "" when there is nothing to diff."""
        if not self.expected_as_string and not self.actual_as_string:
            return ""
        return unified_diff(self.expected_as_string, self.actual_as_string)

    def describe_differences(self) -> str:
        return describe_differences(self.differences)

    def to_string(self) -> str:
        parts = [self.message] if self.message else []
        diff = self.diff()
        if diff:
            parts.append(diff)
        return "\n".join(parts)

    def __str__(self) -> str:
        return self.to_string()
