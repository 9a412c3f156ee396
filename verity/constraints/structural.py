"""
Structural constraints over JSON and XML documents.

Documents on either side are parsed through verity.loaders, so malformed
input raises MalformedInputError instead of failing the assertion.

JSONPath support is built on jsonpath_ng:
    - "$.users[0].id"      → first user's id
    - "$.items[*].name"    → every item's name
    - "$..id"              → every id at any depth
"""

from __future__ import annotations

import json
import logging
import xml.etree.ElementTree as ET
from typing import Any

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError

from ..comparator import ComparisonFailure
from ..exceptions import ConfigurationError, MalformedInputError
from ..exporter import shortened_export
from ..loaders import canonicalize_xml, load_json
from .base import Constraint
from .equality import IsEqual
from .logical import LogicalNot

logger = logging.getLogger(__name__)


def _pretty_json(value: Any) -> str:
    return json.dumps(value, sort_keys=True, indent=4, ensure_ascii=False)


def _decoded(value: Any) -> Any:
    """Decode JSON text; already-decoded structures pass through unchanged."""
    if isinstance(value, (str, bytes, bytearray)):
        return load_json(value, source="actual value")
    return value


# ─────────────────────────────────────────────────────────────────────────────
# JSON
# ─────────────────────────────────────────────────────────────────────────────

class IsJson(Constraint):
    """Value is a string holding a valid JSON document."""

    def matches(self, other: Any) -> bool:
        if not isinstance(other, str):
            return False
        try:
            json.loads(other)
        except json.JSONDecodeError:
            return False
        return True

    def to_string(self) -> str:
        return "is valid JSON"

    def failure_description(self, other: Any) -> str:
        if isinstance(other, str) and not other:
            return f"an empty string {self.to_string()}"
        return f"{shortened_export(other)} {self.to_string()}"

    def additional_failure_description(self, other: Any) -> str:
        if not isinstance(other, str) or not other:
            return ""
        try:
            json.loads(other)
        except json.JSONDecodeError as e:
            return f"{e.msg} at line {e.lineno} column {e.colno}"
        return ""


class JsonMatches(Constraint):
    """
    Value is a JSON document equal to an expected one.

    Object key order and insignificant whitespace are ignored; value types
    are not, so "1" and 1 differ. The expected document is parsed at
    construction.

    Example:
        JsonMatches('{"a": 1, "b": [1, 2]}').evaluate('{"b": [1, 2], "a": 1}')
    """

    def __init__(self, expected_json: str):
        self._expected_json = expected_json
        self._expected = load_json(expected_json, source="expected value")

    def matches(self, other: Any) -> bool:
        # compared re-encoded, so a JSON string never equals a JSON number
        actual = load_json(other, source="actual value")
        return _pretty_json(actual) == _pretty_json(self._expected)

    def evaluate(self, other: Any, description: str = "", return_result: bool = False) -> bool | None:
        success = self.matches(other)

        if return_result:
            return success

        if not success:
            actual = load_json(other, source="actual value")
            comparison_failure = ComparisonFailure(
                self._expected,
                actual,
                _pretty_json(self._expected),
                _pretty_json(actual),
                "Failed asserting that two json values are equal.",
            )
            self.fail(other, description, comparison_failure)

        return None

    def to_string(self) -> str:
        return f"matches JSON string {json.dumps(self._expected_json)}"

    def _parameters(self) -> dict[str, Any]:
        return {"expected": self._expected}


# ─────────────────────────────────────────────────────────────────────────────
# JSONPath
# ─────────────────────────────────────────────────────────────────────────────

def compile_json_path(path: str) -> Any:
    """
    Compile a JSONPath expression.

    Raises:
        ConfigurationError: If the expression is invalid
    """
    try:
        return parse_jsonpath(path)
    except (JsonPathLexerError, JsonPathParserError) as e:
        raise ConfigurationError(f'Invalid JSONPath expression "{path}": {e}') from e


class JsonPathExists(Constraint):
    """
    A JSONPath expression selects at least one node.

    The value may be JSON text or an already-decoded structure.
    """

    def __init__(self, path: str):
        self._path = path
        self._expression = compile_json_path(path)

    def find(self, other: Any) -> list[Any]:
        """Return the values selected by the path."""
        data = _decoded(other)
        values = [match.value for match in self._expression.find(data)]
        logger.debug(f"JSONPath {self._path} selected {len(values)} value(s)")
        return values

    def matches(self, other: Any) -> bool:
        return len(self.find(other)) > 0

    def to_string(self) -> str:
        return f'has a value at JSONPath "{self._path}"'

    def failure_description(self, other: Any) -> str:
        return f"{shortened_export(other)} {self.to_string()}"

    def _parameters(self) -> dict[str, Any]:
        return {"path": self._path}


class JsonPathMatches(JsonPathExists):
    """
    The value selected by a JSONPath expression satisfies a constraint.

    A single match is passed to the inner constraint as is; several matches
    are passed as a list. A path that selects nothing does not match.

    Example:
        JsonPathMatches("$.items", Count(2)).evaluate({"items": [1, 2]})
    """

    def __init__(self, path: str, constraint: Any):
        super().__init__(path)
        self._constraint = constraint if isinstance(constraint, Constraint) else IsEqual(constraint)

    def selected(self, other: Any) -> tuple[bool, Any]:
        values = self.find(other)
        if not values:
            return False, None
        return True, values[0] if len(values) == 1 else values

    def matches(self, other: Any) -> bool:
        found, value = self.selected(other)
        return found and self._constraint.evaluate(value, "", True)

    def count(self) -> int:
        return self._constraint.count()

    def to_string(self) -> str:
        return f'selects a value at JSONPath "{self._path}" that {self._constraint.to_string()}'

    def to_string_in_context(self, operator: Constraint) -> str:
        # only the selection is negated; the inner phrase keeps its polarity
        if isinstance(operator, LogicalNot):
            return f'does not select a value at JSONPath "{self._path}" that {self._constraint.to_string()}'
        return ""

    def failure_description_in_context(self, operator: Constraint, other: Any) -> str:
        in_context = self.to_string_in_context(operator)
        return f"{shortened_export(other)} {in_context}" if in_context else ""

    def additional_failure_description(self, other: Any) -> str:
        found, value = self.selected(other)
        if not found:
            return f'JSONPath "{self._path}" selected nothing.'
        return f"Selected value: {shortened_export(value)}"

    def _parameters(self) -> dict[str, Any]:
        return {"path": self._path, "constraint": self._constraint}


# ─────────────────────────────────────────────────────────────────────────────
# XML
# ─────────────────────────────────────────────────────────────────────────────

def _pretty_xml(canonical: str) -> str:
    element = ET.fromstring(canonical)
    ET.indent(element)
    return ET.tostring(element, encoding="unicode")


class XmlMatches(Constraint):
    """
    Value is an XML document structurally equal to an expected one.

    Both documents are compared in canonical form (C14N) with
    insignificant whitespace removed.
    """

    def __init__(self, expected_xml: str):
        self._expected = canonicalize_xml(expected_xml, source="expected value")

    def matches(self, other: Any) -> bool:
        if not isinstance(other, str):
            raise MalformedInputError(
                f"XML input must be a string, got {type(other).__name__}",
                source="actual value",
            )
        return canonicalize_xml(other, source="actual value") == self._expected

    def evaluate(self, other: Any, description: str = "", return_result: bool = False) -> bool | None:
        success = self.matches(other)

        if return_result:
            return success

        if not success:
            actual = canonicalize_xml(other, source="actual value")
            comparison_failure = ComparisonFailure(
                self._expected,
                actual,
                _pretty_xml(self._expected),
                _pretty_xml(actual),
                "Failed asserting that two XML documents are equal.",
            )
            self.fail(other, description, comparison_failure)

        return None

    def to_string(self) -> str:
        return "matches the expected XML document"

    def failure_description(self, other: Any) -> str:
        return "two XML documents are equal"
