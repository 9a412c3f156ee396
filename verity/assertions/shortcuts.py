"""
Named assertion wrappers.

Each wrapper builds a constraint and passes it to assert_that(), so every
wrapper counts and notifies exactly like assert_that() itself.

Usage:
    from verity.assertions import assert_equals, assert_string_starts_with

    assert_equals(3, len(items), "item count")
    assert_string_starts_with("https://", url)
"""

from __future__ import annotations

import warnings
from typing import Any

from ..constraints import LogicalNot
from ..loaders import load_text_file
from . import factory as f
from .facade import assert_that


# ─────────────────────────────────────────────────────────────────────────────
# Equality
# ─────────────────────────────────────────────────────────────────────────────

def assert_equals(expected: Any, actual: Any, message: str = "") -> None:
    assert_that(actual, f.equal_to(expected), message)


def assert_not_equals(expected: Any, actual: Any, message: str = "") -> None:
    assert_that(actual, LogicalNot(f.equal_to(expected)), message)


def assert_equals_with_delta(expected: Any, actual: Any, delta: float, message: str = "") -> None:
    assert_that(actual, f.equal_to_with_delta(expected, delta), message)


def assert_equals_canonicalizing(expected: Any, actual: Any, message: str = "") -> None:
    assert_that(actual, f.equal_to_canonicalizing(expected), message)


def assert_equals_ignoring_case(expected: Any, actual: Any, message: str = "") -> None:
    assert_that(actual, f.equal_to_ignoring_case(expected), message)


def assert_same(expected: Any, actual: Any, message: str = "") -> None:
    assert_that(actual, f.identical_to(expected), message)


def assert_not_same(expected: Any, actual: Any, message: str = "") -> None:
    assert_that(actual, LogicalNot(f.identical_to(expected)), message)


def assert_object_equals(expected: Any, actual: Any, method: str = "equals", message: str = "") -> None:
    assert_that(actual, f.object_equals(expected, method), message)


# ─────────────────────────────────────────────────────────────────────────────
# Scalars
# ─────────────────────────────────────────────────────────────────────────────

def assert_true(condition: Any, message: str = "") -> None:
    assert_that(condition, f.is_true(), message)


def assert_false(condition: Any, message: str = "") -> None:
    assert_that(condition, f.is_false(), message)


def assert_null(actual: Any, message: str = "") -> None:
    assert_that(actual, f.is_null(), message)


def assert_not_null(actual: Any, message: str = "") -> None:
    assert_that(actual, LogicalNot(f.is_null()), message)


def assert_empty(actual: Any, message: str = "") -> None:
    assert_that(actual, f.is_empty(), message)


def assert_not_empty(actual: Any, message: str = "") -> None:
    assert_that(actual, LogicalNot(f.is_empty()), message)


def assert_greater_than(minimum: Any, actual: Any, message: str = "") -> None:
    assert_that(actual, f.greater_than(minimum), message)


def assert_greater_than_or_equal(minimum: Any, actual: Any, message: str = "") -> None:
    assert_that(actual, f.greater_than_or_equal(minimum), message)


def assert_less_than(maximum: Any, actual: Any, message: str = "") -> None:
    assert_that(actual, f.less_than(maximum), message)


def assert_less_than_or_equal(maximum: Any, actual: Any, message: str = "") -> None:
    assert_that(actual, f.less_than_or_equal(maximum), message)


def assert_finite(actual: Any, message: str = "") -> None:
    assert_that(actual, f.is_finite(), message)


def assert_infinite(actual: Any, message: str = "") -> None:
    assert_that(actual, f.is_infinite(), message)


def assert_nan(actual: Any, message: str = "") -> None:
    assert_that(actual, f.is_nan(), message)


# ─────────────────────────────────────────────────────────────────────────────
# Types and Shape
# ─────────────────────────────────────────────────────────────────────────────

def assert_instance_of(expected: type | str, actual: Any, message: str = "") -> None:
    assert_that(actual, f.is_instance_of(expected), message)


def assert_not_instance_of(expected: type | str, actual: Any, message: str = "") -> None:
    assert_that(actual, LogicalNot(f.is_instance_of(expected)), message)


def assert_is_type(kind: str, actual: Any, message: str = "") -> None:
    assert_that(actual, f.is_type(kind), message)


def assert_count(expected_count: int, haystack: Any, message: str = "") -> None:
    assert_that(haystack, f.has_count(expected_count), message)


def assert_same_size(expected: Any, actual: Any, message: str = "") -> None:
    assert_that(actual, f.same_size(expected), message)


def assert_array_has_key(key: Any, array: Any, message: str = "") -> None:
    assert_that(array, f.array_has_key(key), message)


def assert_array_not_has_key(key: Any, array: Any, message: str = "") -> None:
    assert_that(array, LogicalNot(f.array_has_key(key)), message)


def assert_object_has_property(name: str, obj: Any, message: str = "") -> None:
    assert_that(obj, f.object_has_property(name), message)


def assert_object_not_has_property(name: str, obj: Any, message: str = "") -> None:
    assert_that(obj, LogicalNot(f.object_has_property(name)), message)


def assert_object_has_attribute(name: str, obj: Any, message: str = "") -> None:
    """Deprecated alias of assert_object_has_property()."""
    warnings.warn(
        "assert_object_has_attribute() is deprecated, use assert_object_has_property() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    assert_object_has_property(name, obj, message)


# ─────────────────────────────────────────────────────────────────────────────
# Collections
# ─────────────────────────────────────────────────────────────────────────────

def assert_contains(needle: Any, haystack: Any, message: str = "") -> None:
    assert_that(haystack, f.contains_identical(needle), message)


def assert_not_contains(needle: Any, haystack: Any, message: str = "") -> None:
    assert_that(haystack, LogicalNot(f.contains_identical(needle)), message)


def assert_contains_equals(needle: Any, haystack: Any, message: str = "") -> None:
    assert_that(haystack, f.contains_equal(needle), message)


def assert_contains_only(kind: str, haystack: Any, message: str = "") -> None:
    assert_that(haystack, f.contains_only(kind), message)


def assert_contains_only_instances_of(type_or_name: type | str, haystack: Any, message: str = "") -> None:
    assert_that(haystack, f.contains_only_instances_of(type_or_name), message)


# ─────────────────────────────────────────────────────────────────────────────
# Strings
# ─────────────────────────────────────────────────────────────────────────────

def assert_string_contains_string(needle: str, haystack: str, message: str = "") -> None:
    assert_that(haystack, f.string_contains(needle), message)


def assert_string_contains_string_ignoring_case(needle: str, haystack: str, message: str = "") -> None:
    assert_that(haystack, f.string_contains(needle, ignore_case=True), message)


def assert_string_not_contains_string(needle: str, haystack: str, message: str = "") -> None:
    assert_that(haystack, LogicalNot(f.string_contains(needle)), message)


def assert_string_starts_with(prefix: str, string: str, message: str = "") -> None:
    assert_that(string, f.string_starts_with(prefix), message)


def assert_string_ends_with(suffix: str, string: str, message: str = "") -> None:
    assert_that(string, f.string_ends_with(suffix), message)


def assert_matches_regular_expression(pattern: str, string: str, message: str = "") -> None:
    assert_that(string, f.matches_regular_expression(pattern), message)


def assert_does_not_match_regular_expression(pattern: str, string: str, message: str = "") -> None:
    assert_that(string, LogicalNot(f.matches_regular_expression(pattern)), message)


def assert_string_matches_format(format_description: str, string: str, message: str = "") -> None:
    assert_that(string, f.matches(format_description), message)


def assert_string_matches_format_file(format_file: str, string: str, message: str = "") -> None:
    assert_that(string, f.matches(load_text_file(format_file)), message)


# ─────────────────────────────────────────────────────────────────────────────
# Documents and Files
# ─────────────────────────────────────────────────────────────────────────────

def assert_json(actual: Any, message: str = "") -> None:
    assert_that(actual, f.is_json(), message)


def assert_json_string_equals_json_string(expected_json: str, actual_json: str, message: str = "") -> None:
    assert_that(actual_json, f.json_matches(expected_json), message)


def assert_json_string_equals_json_file(expected_file: str, actual_json: str, message: str = "") -> None:
    assert_that(actual_json, f.json_matches(load_text_file(expected_file)), message)


def assert_json_path_exists(path: str, document: Any, message: str = "") -> None:
    assert_that(document, f.json_path_exists(path), message)


def assert_json_path_matches(path: str, expected: Any, document: Any, message: str = "") -> None:
    assert_that(document, f.json_path_matches(path, expected), message)


def assert_xml_string_equals_xml_string(expected_xml: str, actual_xml: str, message: str = "") -> None:
    assert_that(actual_xml, f.xml_matches(expected_xml), message)


def assert_xml_file_equals_xml_file(expected_file: str, actual_file: str, message: str = "") -> None:
    assert_that(load_text_file(actual_file), f.xml_matches(load_text_file(expected_file)), message)


def assert_file_exists(filename: str, message: str = "") -> None:
    assert_that(filename, f.file_exists(), message)


def assert_file_does_not_exist(filename: str, message: str = "") -> None:
    assert_that(filename, LogicalNot(f.file_exists()), message)


def assert_directory_exists(directory: str, message: str = "") -> None:
    assert_that(directory, f.directory_exists(), message)


def assert_is_readable(filename: str, message: str = "") -> None:
    assert_that(filename, f.is_readable(), message)


def assert_is_writable(filename: str, message: str = "") -> None:
    assert_that(filename, f.is_writable(), message)
