"""
String constraints: substrings, prefixes, suffixes, regular expressions
and format descriptions.
"""

from __future__ import annotations

import os
import re
from typing import Any

from ..comparator import ComparisonFailure
from ..exceptions import ConfigurationError
from .base import Constraint


class StringContains(Constraint):
    """
    Value is a string containing a substring.

    Args:
        needle: Substring to look for
        ignore_case: Case-fold both sides before searching
    """

    def __init__(self, needle: str, ignore_case: bool = False):
        self._needle = needle
        self._ignore_case = ignore_case

    def matches(self, other: Any) -> bool:
        if not isinstance(other, str):
            return False
        if self._ignore_case:
            return self._needle.casefold() in other.casefold()
        return self._needle in other

    def to_string(self) -> str:
        needle = self._needle.casefold() if self._ignore_case else self._needle
        return f'contains "{needle}"'

    def failure_description(self, other: Any) -> str:
        if isinstance(other, str) and "\n" in other:
            return f"'<text>' {self.to_string()}"
        return super().failure_description(other)


class StringStartsWith(Constraint):
    def __init__(self, prefix: str):
        if not prefix:
            raise ConfigurationError("prefix must not be empty")
        self._prefix = prefix

    def matches(self, other: Any) -> bool:
        return isinstance(other, str) and other.startswith(self._prefix)

    def to_string(self) -> str:
        return f'starts with "{self._prefix}"'


class StringEndsWith(Constraint):
    def __init__(self, suffix: str):
        if not suffix:
            raise ConfigurationError("suffix must not be empty")
        self._suffix = suffix

    def matches(self, other: Any) -> bool:
        return isinstance(other, str) and other.endswith(self._suffix)

    def to_string(self) -> str:
        return f'ends with "{self._suffix}"'


class RegularExpression(Constraint):
    """
    Value is a string in which the pattern can be found (re.search).

    The pattern is compiled at construction.
    """

    def __init__(self, pattern: str):
        try:
            self._compiled = re.compile(pattern)
        except re.error as e:
            raise ConfigurationError(f'Invalid regular expression "{pattern}": {e}') from e
        self._pattern = pattern

    def matches(self, other: Any) -> bool:
        return isinstance(other, str) and self._compiled.search(other) is not None

    def to_string(self) -> str:
        return f'matches regular expression "{self._pattern}"'

    def _parameters(self) -> dict[str, Any]:
        return {"pattern": self._pattern}


# ─────────────────────────────────────────────────────────────────────────────
# Format Descriptions
# ─────────────────────────────────────────────────────────────────────────────

PLACEHOLDERS = {
    "%%": "%",
    "%e": re.escape(os.sep),
    "%s": r"[^\r\n]+",
    "%S": r"[^\r\n]*",
    "%a": r".+",
    "%A": r".*",
    "%w": r"\s*",
    "%i": r"[+-]?\d+",
    "%d": r"\d+",
    "%x": r"[0-9a-fA-F]+",
    "%f": r"[+-]?\.?\d+\.?\d*(?:[Ee][+-]?\d+)?",
    "%c": r".",
}

_PLACEHOLDER_PATTERN = re.compile(r"(%[%eSsaAwidxfc])")


def format_to_regex(description: str) -> str:
    """
    Translate a format description into a regular expression source.

    Literal text is escaped; placeholders are replaced by their patterns.

    Example:
        format_to_regex("%d items")  # r"\\d+\\ items"
    """
    parts = _PLACEHOLDER_PATTERN.split(description)
    return "".join(
        PLACEHOLDERS[part] if index % 2 else re.escape(part)
        for index, part in enumerate(parts)
    )


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


class StringMatchesFormatDescription(Constraint):
    """
    Value matches a template with placeholders such as %d or %s.

    The whole value must match. On failure, a diff is attached in which
    template lines that match their actual line are shown as that line, so
    only the offending lines differ.
    """

    def __init__(self, format_description: str):
        self._format = normalize_line_endings(format_description)
        self._compiled = re.compile(format_to_regex(self._format), re.DOTALL)

    def matches(self, other: Any) -> bool:
        if not isinstance(other, str):
            return False
        return self._compiled.fullmatch(normalize_line_endings(other)) is not None

    def evaluate(self, other: Any, description: str = "", return_result: bool = False) -> bool | None:
        success = self.matches(other)

        if return_result:
            return success

        if not success:
            comparison_failure = None
            if isinstance(other, str):
                actual = normalize_line_endings(other)
                expected = self._expected_with_matched_lines(actual)
                comparison_failure = ComparisonFailure(expected, actual, expected, actual)
            self.fail(other, description, comparison_failure)

        return None

    def _expected_with_matched_lines(self, actual: str) -> str:
        format_lines = self._format.split("\n")
        actual_lines = actual.split("\n")

        for index, line in enumerate(format_lines):
            if index >= len(actual_lines):
                break
            if re.fullmatch(format_to_regex(line), actual_lines[index], re.DOTALL):
                format_lines[index] = actual_lines[index]

        return "\n".join(format_lines)

    def failure_description(self, other: Any) -> str:
        return "string matches format description"

    def to_string(self) -> str:
        return f"matches format description:\n{self._format}"

    def _parameters(self) -> dict[str, Any]:
        return {"format": self._format}
