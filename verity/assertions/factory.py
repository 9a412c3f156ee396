"""
Constraint factory functions.

Short names for building constraint trees, for use with assert_that():

    assert_that(value, logical_and(is_type("int"), greater_than_or_equal(0)))
"""

from __future__ import annotations

from typing import Any, Callable

from ..constraints import (
    ArrayHasKey,
    Callback,
    Constraint,
    Count,
    DirectoryExists,
    FileExists,
    GreaterThan,
    IsAnything,
    IsEmpty,
    IsEqual,
    IsEqualCanonicalizing,
    IsEqualIgnoringCase,
    IsEqualWithDelta,
    IsFalse,
    IsFinite,
    IsIdentical,
    IsInfinite,
    IsInstanceOf,
    IsJson,
    IsNan,
    IsNull,
    IsReadable,
    IsTrue,
    IsType,
    IsWritable,
    JsonMatches,
    JsonPathExists,
    JsonPathMatches,
    LessThan,
    LogicalAnd,
    LogicalNot,
    LogicalOr,
    LogicalXor,
    ObjectEquals,
    ObjectHasProperty,
    RegularExpression,
    SameSize,
    StringContains,
    StringEndsWith,
    StringMatchesFormatDescription,
    StringStartsWith,
    TraversableContainsEqual,
    TraversableContainsIdentical,
    TraversableContainsOnly,
    XmlMatches,
)


# ─────────────────────────────────────────────────────────────────────────────
# Operators
# ─────────────────────────────────────────────────────────────────────────────

def logical_and(*constraints: Any) -> LogicalAnd:
    return LogicalAnd.from_constraints(*constraints)


def logical_or(*constraints: Any) -> LogicalOr:
    return LogicalOr.from_constraints(*constraints)


def logical_xor(*constraints: Any) -> LogicalXor:
    return LogicalXor.from_constraints(*constraints)


def logical_not(constraint: Any) -> LogicalNot:
    return LogicalNot(constraint)


# ─────────────────────────────────────────────────────────────────────────────
# Values
# ─────────────────────────────────────────────────────────────────────────────

def anything() -> IsAnything:
    return IsAnything()


def is_true() -> IsTrue:
    return IsTrue()


def is_false() -> IsFalse:
    return IsFalse()


def is_null() -> IsNull:
    return IsNull()


def is_empty() -> IsEmpty:
    return IsEmpty()


def is_finite() -> IsFinite:
    return IsFinite()


def is_infinite() -> IsInfinite:
    return IsInfinite()


def is_nan() -> IsNan:
    return IsNan()


def equal_to(value: Any) -> IsEqual:
    return IsEqual(value)


def equal_to_with_delta(value: Any, delta: float) -> IsEqualWithDelta:
    return IsEqualWithDelta(value, delta)


def equal_to_canonicalizing(value: Any) -> IsEqualCanonicalizing:
    return IsEqualCanonicalizing(value)


def equal_to_ignoring_case(value: Any) -> IsEqualIgnoringCase:
    return IsEqualIgnoringCase(value)


def identical_to(value: Any) -> IsIdentical:
    return IsIdentical(value)


def greater_than(value: Any) -> GreaterThan:
    return GreaterThan(value)


def greater_than_or_equal(value: Any) -> LogicalOr:
    """Equal to, or greater than, the value. Weighs two assertions."""
    return logical_or(IsEqual(value), GreaterThan(value))


def less_than(value: Any) -> LessThan:
    return LessThan(value)


def less_than_or_equal(value: Any) -> LogicalOr:
    """Equal to, or less than, the value. Weighs two assertions."""
    return logical_or(IsEqual(value), LessThan(value))


def callback(predicate: Callable[[Any], Any], description: str = "is accepted by specified callback") -> Callback:
    return Callback(predicate, description)


# ─────────────────────────────────────────────────────────────────────────────
# Types and Shape
# ─────────────────────────────────────────────────────────────────────────────

def is_type(kind: str) -> IsType:
    return IsType(kind)


def is_instance_of(type_or_name: type | str) -> IsInstanceOf:
    return IsInstanceOf(type_or_name)


def has_count(expected: int) -> Count:
    return Count(expected)


def same_size(expected: Any) -> SameSize:
    return SameSize(expected)


def array_has_key(key: Any) -> ArrayHasKey:
    return ArrayHasKey(key)


def object_has_property(name: str) -> ObjectHasProperty:
    return ObjectHasProperty(name)


def object_equals(expected: Any, method: str = "equals") -> ObjectEquals:
    return ObjectEquals(expected, method)


# ─────────────────────────────────────────────────────────────────────────────
# Strings and Collections
# ─────────────────────────────────────────────────────────────────────────────

def string_contains(needle: str, ignore_case: bool = False) -> StringContains:
    return StringContains(needle, ignore_case)


def string_starts_with(prefix: str) -> StringStartsWith:
    return StringStartsWith(prefix)


def string_ends_with(suffix: str) -> StringEndsWith:
    return StringEndsWith(suffix)


def matches_regular_expression(pattern: str) -> RegularExpression:
    return RegularExpression(pattern)


def matches(format_description: str) -> StringMatchesFormatDescription:
    """Match a format description such as "%d items in %s"."""
    return StringMatchesFormatDescription(format_description)


def contains_equal(value: Any) -> TraversableContainsEqual:
    return TraversableContainsEqual(value)


def contains_identical(value: Any) -> TraversableContainsIdentical:
    return TraversableContainsIdentical(value)


def contains_only(kind: str) -> TraversableContainsOnly:
    return TraversableContainsOnly(kind, native=True)


def contains_only_instances_of(type_or_name: type | str) -> TraversableContainsOnly:
    return TraversableContainsOnly(type_or_name, native=False)


# ─────────────────────────────────────────────────────────────────────────────
# Documents and Files
# ─────────────────────────────────────────────────────────────────────────────

def is_json() -> IsJson:
    return IsJson()


def json_matches(expected_json: str) -> JsonMatches:
    return JsonMatches(expected_json)


def json_path_exists(path: str) -> JsonPathExists:
    return JsonPathExists(path)


def json_path_matches(path: str, constraint: Constraint | Any) -> JsonPathMatches:
    return JsonPathMatches(path, constraint)


def xml_matches(expected_xml: str) -> XmlMatches:
    return XmlMatches(expected_xml)


def file_exists() -> FileExists:
    return FileExists()


def directory_exists() -> DirectoryExists:
    return DirectoryExists()


def is_readable() -> IsReadable:
    return IsReadable()


def is_writable() -> IsWritable:
    return IsWritable()
