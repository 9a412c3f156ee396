"""
Built-in comparators.

The factory consults them in this order, first match wins:

    NumericComparator    numbers, and numbers against numeric strings
    ScalarComparator     None, bool, str, bytes on either side
    DateTimeComparator   datetime / date / time pairs
    MappingComparator    two mappings
    SequenceComparator   two lists or tuples
    SetComparator        two sets
    ExceptionComparator  two exceptions
    ObjectComparator     two plain objects
    TypeComparator       everything else
"""

from __future__ import annotations

import datetime
import math
import re
from collections.abc import Mapping, Set
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Any

from ..exporter import RECURSION_MARKER, describe_type, export, is_plain_object, object_attributes, shortened_export
from .base import Comparator, enter
from .diff import Difference, DifferenceKind, path_segment
from .failure import ComparisonFailure

NUMERIC_STRING = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def is_number(value: Any) -> bool:
    """True for int, float, Decimal and Fraction, never for bool."""
    return isinstance(value, (int, float, Decimal, Fraction)) and not isinstance(value, bool)


def is_numeric_string(value: Any) -> bool:
    return isinstance(value, str) and NUMERIC_STRING.match(value) is not None


def to_number(value: Any, like: Any = None) -> int | float | Decimal | Fraction:
    """
    Convert a number or numeric string to a number.

    Integral strings become int. Other strings become Decimal when compared
    against a Decimal and float otherwise.
    """
    if not isinstance(value, str):
        return value
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    if isinstance(like, Decimal):
        try:
            return Decimal(text)
        except InvalidOperation:
            pass
    return float(text)


def canonical_key(item: Any, _seen: frozenset[int] = frozenset()) -> tuple:
    """
    Sort key that does not depend on the order of nested elements.

    Mappings key on their sorted items and sequences and sets on their
    sorted elements, so two values that are equal when canonicalized get
    the same key. Values of different kinds order by kind first.
    """
    if item is None:
        return (0,)
    if isinstance(item, bool):
        return (1, item)
    if is_number(item):
        if isinstance(item, Decimal):
            return (2, Fraction(item) if item.is_finite() else float(item))
        return (2, item)
    if isinstance(item, str):
        return (3, item)
    if isinstance(item, (bytes, bytearray)):
        return (4, bytes(item))

    if id(item) in _seen:
        return (9, RECURSION_MARKER)
    seen = _seen | {id(item)}

    if isinstance(item, Mapping):
        return (5, tuple(sorted((canonical_key(k, seen), canonical_key(v, seen)) for k, v in item.items())))
    if isinstance(item, (list, tuple, Set)):
        return (6, tuple(sorted(canonical_key(element, seen) for element in item)))
    return (7, type(item).__qualname__, export(item))


def canonical_order(items: Any) -> list[Any]:
    """Sort items by their canonical key."""
    return sorted(items, key=canonical_key)


def _difference(e: Any, a: Any) -> Any:
    try:
        return abs(e - a)
    except TypeError:
        # Decimal against float or Fraction
        return abs(Fraction(e) - Fraction(a))


def _within(difference: Any, delta: Any) -> bool:
    try:
        return difference <= delta
    except TypeError:
        return Fraction(difference) <= Fraction(delta)


# ─────────────────────────────────────────────────────────────────────────────
# Scalars
# ─────────────────────────────────────────────────────────────────────────────

class NumericComparator(Comparator):
    """Compares numbers with an absolute tolerance."""

    def accepts(self, expected: Any, actual: Any) -> bool:
        if is_number(expected) and is_number(actual):
            return True
        return (is_number(expected) and is_numeric_string(actual)) or (
            is_numeric_string(expected) and is_number(actual)
        )

    def assert_equals(self, expected, actual, delta=0.0, canonicalize=False, ignore_case=False, processed=None):
        e = to_number(expected, like=actual)
        a = to_number(actual, like=expected)

        if self._is_nan(e) or self._is_nan(a):
            equal = False
        elif self._is_infinite(e) or self._is_infinite(a):
            equal = e == a
        elif delta:
            equal = _within(_difference(e, a), delta)
        else:
            equal = e == a

        if not equal:
            suffix = f" with delta <{delta}>" if delta else ""
            raise ComparisonFailure(
                expected,
                actual,
                "",
                "",
                f"Failed asserting that {export(actual)} matches expected {export(expected)}{suffix}.",
            )

    @staticmethod
    def _is_nan(value: Any) -> bool:
        try:
            return math.isnan(value)
        except (TypeError, ValueError, OverflowError):
            return False

    @staticmethod
    def _is_infinite(value: Any) -> bool:
        try:
            return math.isinf(value)
        except (TypeError, ValueError, OverflowError):
            return False


class ScalarComparator(Comparator):
    """Compares None, booleans, strings and bytes without type coercion."""

    SCALARS = (type(None), bool, str, bytes)

    def accepts(self, expected: Any, actual: Any) -> bool:
        return isinstance(expected, self.SCALARS) or isinstance(actual, self.SCALARS)

    def assert_equals(self, expected, actual, delta=0.0, canonicalize=False, ignore_case=False, processed=None):
        if isinstance(expected, str) and isinstance(actual, str):
            e, a = (expected.casefold(), actual.casefold()) if ignore_case else (expected, actual)
            if e != a:
                raise ComparisonFailure(
                    expected,
                    actual,
                    export(expected),
                    export(actual),
                    "Failed asserting that two strings are equal.",
                )
            return

        if type(expected) is type(actual) and expected == actual:
            return

        raise ComparisonFailure(
            expected,
            actual,
            "",
            "",
            f"Failed asserting that {export(actual)} matches expected {export(expected)}.",
        )


class DateTimeComparator(Comparator):
    """Compares dates and times; delta is a tolerance in seconds."""

    def accepts(self, expected: Any, actual: Any) -> bool:
        for kind in (datetime.datetime, datetime.date, datetime.time):
            if isinstance(expected, kind) and isinstance(actual, kind):
                return isinstance(expected, datetime.datetime) == isinstance(actual, datetime.datetime)
        return False

    def assert_equals(self, expected, actual, delta=0.0, canonicalize=False, ignore_case=False, processed=None):
        if isinstance(expected, datetime.time):
            equal = expected == actual
        else:
            try:
                equal = abs((actual - expected).total_seconds()) <= delta
            except TypeError:
                # naive against aware
                equal = False

        if not equal:
            raise ComparisonFailure(
                expected,
                actual,
                expected.isoformat(),
                actual.isoformat(),
                f"Failed asserting that {actual.isoformat()} matches expected {expected.isoformat()}.",
            )


# ─────────────────────────────────────────────────────────────────────────────
# Composites
# ─────────────────────────────────────────────────────────────────────────────

class MappingComparator(Comparator):
    """Compares mappings key by key; key order is irrelevant."""

    def accepts(self, expected: Any, actual: Any) -> bool:
        return isinstance(expected, Mapping) and isinstance(actual, Mapping)

    def assert_equals(self, expected, actual, delta=0.0, canonicalize=False, ignore_case=False, processed=None):
        processed = enter(processed, expected, actual)
        if processed is None:
            return

        differences: list[Difference] = []
        for key, value in expected.items():
            if key not in actual:
                differences.append(
                    Difference("$" + path_segment(key), DifferenceKind.REMOVED, expected=value)
                )
                continue
            self._compare_child(
                value, actual[key], key, differences, delta, canonicalize, ignore_case, processed
            )

        for key, value in actual.items():
            if key not in expected:
                differences.append(
                    Difference("$" + path_segment(key), DifferenceKind.ADDED, actual=value)
                )

        if differences:
            raise ComparisonFailure(
                expected,
                actual,
                export(self._canonical(expected, canonicalize)),
                export(self._canonical(actual, canonicalize)),
                "Failed asserting that two mappings are equal.",
                differences,
            )

    @staticmethod
    def _canonical(value: Mapping, canonicalize: bool) -> Any:
        if not canonicalize:
            return value
        return {k: value[k] for k in canonical_order(value.keys())}


class SequenceComparator(Comparator):
    """Compares lists and tuples element by element."""

    kind = "sequences"
    always_canonical = False

    def accepts(self, expected: Any, actual: Any) -> bool:
        return isinstance(expected, (list, tuple)) and isinstance(actual, (list, tuple))

    def assert_equals(self, expected, actual, delta=0.0, canonicalize=False, ignore_case=False, processed=None):
        processed = enter(processed, expected, actual)
        if processed is None:
            return

        if canonicalize or self.always_canonical:
            expected = canonical_order(expected)
            actual = canonical_order(actual)
        else:
            expected = list(expected)
            actual = list(actual)

        differences: list[Difference] = []
        for index, value in enumerate(expected):
            if index >= len(actual):
                differences.append(
                    Difference("$" + path_segment(index), DifferenceKind.REMOVED, expected=value)
                )
                continue
            self._compare_child(
                value, actual[index], index, differences, delta, canonicalize, ignore_case, processed
            )

        for index in range(len(expected), len(actual)):
            differences.append(
                Difference("$" + path_segment(index), DifferenceKind.ADDED, actual=actual[index])
            )

        if differences:
            raise ComparisonFailure(
                expected,
                actual,
                export(expected),
                export(actual),
                f"Failed asserting that two {self.kind} are equal.",
                differences,
            )


class SetComparator(SequenceComparator):
    """Compares sets; element order never matters."""

    kind = "sets"
    always_canonical = True

    def accepts(self, expected: Any, actual: Any) -> bool:
        return isinstance(expected, Set) and isinstance(actual, Set)


class ExceptionComparator(Comparator):
    """Compares exceptions by class and arguments."""

    def accepts(self, expected: Any, actual: Any) -> bool:
        return isinstance(expected, BaseException) and isinstance(actual, BaseException)

    def assert_equals(self, expected, actual, delta=0.0, canonicalize=False, ignore_case=False, processed=None):
        if type(expected) is not type(actual):
            raise ComparisonFailure(
                expected,
                actual,
                "",
                "",
                f"{export(actual)} is not instance of expected class \"{type(expected).__qualname__}\".",
            )

        try:
            self.factory.get_comparator(expected.args, actual.args).assert_equals(
                expected.args, actual.args, delta, canonicalize, ignore_case, processed
            )
        except ComparisonFailure as failure:
            raise ComparisonFailure(
                expected,
                actual,
                export(expected),
                export(actual),
                "Failed asserting that two exceptions are equal.",
                [d.under(".args") for d in failure.differences],
            ) from failure


class ObjectComparator(Comparator):
    """Compares plain objects by class and attribute state."""

    def accepts(self, expected: Any, actual: Any) -> bool:
        return is_plain_object(expected) and is_plain_object(actual)

    def assert_equals(self, expected, actual, delta=0.0, canonicalize=False, ignore_case=False, processed=None):
        if type(expected) is not type(actual):
            raise ComparisonFailure(
                expected,
                actual,
                export(expected),
                export(actual),
                f"{shortened_export(actual)} is not instance of expected class "
                f"\"{type(expected).__qualname__}\".",
            )

        processed = enter(processed, expected, actual)
        if processed is None:
            return

        expected_attributes = object_attributes(expected)
        actual_attributes = object_attributes(actual)

        differences: list[Difference] = []
        for name, value in expected_attributes.items():
            if name not in actual_attributes:
                differences.append(
                    Difference("$" + path_segment(name), DifferenceKind.REMOVED, expected=value)
                )
                continue
            self._compare_child(
                value, actual_attributes[name], name, differences, delta, canonicalize, ignore_case, processed
            )

        for name, value in actual_attributes.items():
            if name not in expected_attributes:
                differences.append(
                    Difference("$" + path_segment(name), DifferenceKind.ADDED, actual=value)
                )

        if differences:
            raise ComparisonFailure(
                expected,
                actual,
                export(expected),
                export(actual),
                "Failed asserting that two objects are equal.",
                differences,
            )


class TypeComparator(Comparator):
    """Fallback: equal only when the types match and == holds."""

    def accepts(self, expected: Any, actual: Any) -> bool:
        return True

    def assert_equals(self, expected, actual, delta=0.0, canonicalize=False, ignore_case=False, processed=None):
        if type(expected) is not type(actual):
            raise ComparisonFailure(
                expected,
                actual,
                "",
                "",
                f"{shortened_export(actual)} does not match expected type \"{describe_type(expected)}\".",
            )

        if expected is actual:
            return

        if not expected == actual:
            raise ComparisonFailure(
                expected,
                actual,
                export(expected),
                export(actual),
                "Failed asserting that two values are equal.",
            )
