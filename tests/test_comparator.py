"""Tests for the comparator subsystem."""

import datetime
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

import pytest

from verity.comparator import (
    Comparator,
    ComparatorFactory,
    ComparisonFailure,
    DifferenceKind,
    NumericComparator,
    ScalarComparator,
    SequenceComparator,
    TypeComparator,
)
from verity.constraints import IsEqual


@dataclass
class Point:
    x: int
    y: int


class Money:
    def __init__(self, amount, currency):
        self.amount = amount
        self.currency = currency


class MoneyComparator(Comparator):
    """Treats amounts in different currencies as unequal, ignores the rest."""

    def accepts(self, expected, actual):
        return isinstance(expected, Money) and isinstance(actual, Money)

    def assert_equals(self, expected, actual, delta=0.0, canonicalize=False, ignore_case=False, processed=None):
        if expected.currency != actual.currency:
            raise ComparisonFailure(expected, actual, "", "", "currencies differ")


def equal(expected, actual, **kwargs):
    return IsEqual(expected, **kwargs).evaluate(actual, return_result=True)


# ─────────────────────────────────────────────────────────────────────────────
# Selection
# ─────────────────────────────────────────────────────────────────────────────

def test_factory_selects_by_kind():
    factory = ComparatorFactory.default()

    assert isinstance(factory.get_comparator(1, 2.0), NumericComparator)
    assert isinstance(factory.get_comparator(1, "1"), NumericComparator)
    assert isinstance(factory.get_comparator("a", "b"), ScalarComparator)
    assert isinstance(factory.get_comparator([1], (1,)), SequenceComparator)
    assert isinstance(factory.get_comparator(object(), object()), TypeComparator)


def test_default_factory_is_shared():
    assert ComparatorFactory.default() is ComparatorFactory.default()


def test_custom_comparator_takes_precedence():
    factory = ComparatorFactory.default()
    comparator = MoneyComparator()
    factory.register(comparator)

    assert factory.get_comparator(Money(1, "EUR"), Money(2, "EUR")) is comparator
    assert equal(Money(1, "EUR"), Money(2, "EUR"))
    assert not equal(Money(1, "EUR"), Money(1, "USD"))

    factory.unregister(comparator)
    assert not equal(Money(1, "EUR"), Money(2, "EUR"))


def test_custom_comparator_applies_inside_containers():
    ComparatorFactory.default().register(MoneyComparator())

    assert equal([Money(1, "EUR")], [Money(5, "EUR")])
    assert equal({"price": Money(1, "EUR")}, {"price": Money(9, "EUR")})


# ─────────────────────────────────────────────────────────────────────────────
# Coercion
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "expected,actual,result",
    [
        (1, 1.0, True),
        (1, "1", True),
        ("1e3", 1000, True),
        (" 42 ", 42, True),
        (Decimal("1.10"), "1.1", True),
        (1, True, False),
        (0, False, False),
        (None, 0, False),
        (None, False, False),
        (None, "", False),
        ("abc", 0, False),
        ("1", "01", False),
        ("1", 1.5, False),
    ],
)
def test_scalar_coercion(expected, actual, result):
    assert equal(expected, actual) is result


def test_nan_is_never_equal():
    nan = float("nan")

    assert not equal(nan, nan)
    assert not equal(nan, 1.0, delta=10.0)


def test_infinity_equals_only_same_infinity():
    inf = float("inf")

    assert equal(inf, inf)
    assert not equal(inf, -inf)
    assert not equal(inf, 1e308, delta=1e308)


def test_delta():
    assert equal(1.0, 1.05, delta=0.1)
    assert equal(10, 9.9, delta=0.1)
    assert not equal(1.0, 1.2, delta=0.1)


def test_delta_bounds():
    assert equal(1.0, 1.04, delta=0.05)
    assert not equal(1.0, 1.06, delta=0.05)


def test_delta_is_exact_for_large_and_decimal_numbers():
    assert equal(10**400, 10**400 + 1, delta=1)
    assert not equal(10**400, 10**400 + 2, delta=1)
    assert equal(Decimal("1.05"), Decimal("1.0"), delta=0.05)
    assert equal(Decimal("1.0"), 1.04, delta=0.05)
    assert equal(Fraction(1, 3), Fraction(2, 3), delta=Fraction(1, 3))
    assert not equal(Fraction(1, 3), Fraction(2, 3), delta=Decimal("0.3"))


def test_failure_message_mentions_delta():
    failure = IsEqual(1.0, delta=0.1).comparison_failure(2.0)

    assert failure.message == "Failed asserting that 2.0 matches expected 1.0 with delta <0.1>."


def test_ignore_case_applies_recursively():
    assert not equal("abc", "ABC")
    assert equal("abc", "ABC", ignore_case=True)
    assert equal({"k": ["Foo"]}, {"k": ["FOO"]}, ignore_case=True)


def test_canonicalize_ignores_order_recursively():
    assert not equal([1, 2, 3], [3, 1, 2])
    assert equal([1, 2, 3], [3, 1, 2], canonicalize=True)
    assert equal({"a": [2, 1]}, {"a": [1, 2]}, canonicalize=True)
    assert equal([1, "a", None], ["a", None, 1], canonicalize=True)


def test_canonicalize_sorts_nested_values_independently_of_their_order():
    assert equal([{"b": 1, "z": 0}, {"c": 1}], [{"c": 1}, {"z": 0, "b": 1}], canonicalize=True)
    assert equal([[2, 9], [3]], [[3], [9, 2]], canonicalize=True)
    assert equal([(1, [2, 1]), "x"], ["x", (1, [1, 2])], canonicalize=True)
    assert not equal([[2, 9], [3]], [[3], [9, 4]], canonicalize=True)


def test_canonicalize_keeps_duplicates():
    assert not equal([1, 2, 3], [1, 2, 3, 3], canonicalize=True)
    assert not equal([1, 2, 3, 3], [1, 2, 3], canonicalize=True)


def test_sets_ignore_order():
    assert equal({1, 2, 3}, {3, 2, 1})
    assert not equal({1, 2}, {1, 3})


def test_datetime_delta_is_in_seconds():
    base = datetime.datetime(2024, 1, 1, 12, 0, 0)

    assert equal(base, base + datetime.timedelta(seconds=1), delta=2)
    assert not equal(base, base + datetime.timedelta(seconds=3), delta=2)


def test_naive_and_aware_datetimes_differ():
    naive = datetime.datetime(2024, 1, 1)
    aware = naive.replace(tzinfo=datetime.timezone.utc)

    assert not equal(naive, aware)


def test_objects_compare_by_class_and_state():
    assert equal(Point(1, 2), Point(1, 2))
    assert not equal(Point(1, 2), Point(1, 3))
    assert not equal(Point(1, 2), Money(1, 2))


def test_exceptions_compare_by_class_and_args():
    assert equal(ValueError("x"), ValueError("x"))
    assert not equal(ValueError("x"), ValueError("y"))
    assert not equal(ValueError("x"), TypeError("x"))


def test_recursive_structures_terminate():
    a = []
    a.append(a)
    b = []
    b.append(b)

    assert equal(a, b)


# ─────────────────────────────────────────────────────────────────────────────
# Failures
# ─────────────────────────────────────────────────────────────────────────────

def test_differences_report_paths():
    failure = IsEqual({"a": 1, "b": [1, 2]}).comparison_failure({"a": 1, "b": [1, 3], "c": 0})

    assert failure.message == "Failed asserting that two mappings are equal."
    assert [d.path for d in failure.differences] == ["$.b[1]", "$.c"]
    assert failure.differences[0].kind == DifferenceKind.CHANGED
    assert failure.differences[1].kind == DifferenceKind.ADDED
    assert failure.describe_differences() == "$.b[1]: expected 2, got 3\n$.c: unexpected 0"


def test_missing_key_is_reported_as_removed():
    failure = IsEqual({"a": 1, "b": 2}).comparison_failure({"a": 1})

    assert len(failure.differences) == 1
    assert failure.differences[0].kind == DifferenceKind.REMOVED
    assert str(failure.differences[0]) == "$.b: expected 2, but it is missing"


def test_object_differences_use_attribute_names():
    failure = IsEqual(Point(1, 2)).comparison_failure(Point(1, 5))

    assert [d.path for d in failure.differences] == ["$.y"]


def test_diff_of_composite_values():
    failure = IsEqual([1, 2, 3]).comparison_failure([1, 2, 4])
    diff = failure.diff()

    assert diff.startswith("--- Expected\n+++ Actual")
    assert "-    3," in diff
    assert "+    4," in diff


def test_string_failure_has_diff():
    failure = IsEqual("foo").comparison_failure("bar")

    assert failure.message == "Failed asserting that two strings are equal."
    assert "-'foo'" in failure.diff()
    assert "+'bar'" in failure.diff()


def test_number_failure_has_no_diff():
    failure = IsEqual(1).comparison_failure(2)

    assert failure.diff() == ""
    assert failure.message == "Failed asserting that 2 matches expected 1."


def test_type_mismatch_message():
    failure = IsEqual(object()).comparison_failure(Point(1, 2))

    assert "does not match expected type" in failure.message


def test_equal_values_have_no_failure():
    assert IsEqual({"a": [1, 2]}).comparison_failure({"a": [1, 2]}) is None
