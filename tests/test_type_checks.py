"""Tests for type and shape constraints."""

from collections import OrderedDict
from collections.abc import Mapping

import pytest

from verity.constraints import (
    ArrayHasKey,
    Count,
    IsInstanceOf,
    IsType,
    ObjectHasProperty,
    SameSize,
    TypeDescriptor,
    count_of,
)
from verity.exceptions import ConfigurationError, ExpectationFailedError


class Widget:
    size = 3

    def __init__(self):
        self.name = "widget"

    @property
    def exploding(self):
        raise RuntimeError("property must not be evaluated")


class Bag:
    """Iterable that is not an iterator and has no len()."""

    def __iter__(self):
        return iter([1, 2, 3])


# ─────────────────────────────────────────────────────────────────────────────
# Types
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "kind,value,result",
    [
        ("int", 1, True),
        ("int", True, False),
        ("bool", True, True),
        ("float", 1, False),
        ("numeric", "1.5", True),
        ("numeric", "abc", False),
        ("str", "x", True),
        ("string", "x", True),
        ("none", None, True),
        ("null", None, True),
        ("list", (1,), False),
        ("array", [1], True),
        ("mapping", OrderedDict(), True),
        ("scalar", [1], False),
        ("callable", len, True),
        ("iterable", "abc", True),
        ("object", Widget(), True),
        ("object", 5, False),
    ],
)
def test_is_type(kind, value, result):
    assert IsType(kind).matches(value) is result


def test_is_type_unknown_kind():
    with pytest.raises(ConfigurationError):
        IsType("nope")


def test_is_type_to_string_uses_canonical_name():
    assert IsType("string").to_string() == 'is of type "str"'


def test_instance_of_by_type_and_name():
    assert IsInstanceOf(dict).matches(OrderedDict())
    assert IsInstanceOf("collections.OrderedDict").matches(OrderedDict())
    assert not IsInstanceOf("collections.OrderedDict").matches({})
    assert IsInstanceOf("int").matches(5)


def test_instance_of_unknown_name():
    with pytest.raises(ConfigurationError) as exc:
        IsInstanceOf("no.such.Type")

    assert str(exc.value) == 'Class or interface "no.such.Type" does not exist'


def test_instance_of_to_string_names_kind():
    assert IsInstanceOf(dict).to_string() == 'is an instance of class "dict"'
    assert IsInstanceOf(Mapping).to_string() == 'is an instance of interface "collections.abc.Mapping"'


def test_type_descriptor_resolve():
    descriptor = TypeDescriptor.resolve("collections.OrderedDict")

    assert descriptor.type is OrderedDict
    assert descriptor.kind == "class"


# ─────────────────────────────────────────────────────────────────────────────
# Shape
# ─────────────────────────────────────────────────────────────────────────────

def test_count_of():
    assert count_of([1, 2]) == 2
    assert count_of("abc") == 3
    assert count_of(Bag()) == 3
    assert count_of(5) is None


def test_count_of_does_not_consume_iterators():
    iterator = iter([1, 2])

    assert count_of(iterator) is None
    assert list(iterator) == [1, 2]


def test_count():
    assert Count(2).matches([1, 2])
    assert Count(0).matches({})
    assert not Count(2).matches([1])
    assert Count(2).to_string() == "count matches 2"


def test_count_failure_messages():
    with pytest.raises(ExpectationFailedError) as exc:
        Count(3).evaluate([1])
    assert exc.value.message == "Failed asserting that actual size 1 matches expected size 3."

    with pytest.raises(ExpectationFailedError) as exc:
        Count(1).evaluate(5)
    assert exc.value.message == "Failed asserting that 5 is countable."


def test_same_size():
    assert SameSize([1, 2, 3]).matches("abc")
    assert not SameSize([1]).matches([])


def test_same_size_needs_countable_reference():
    with pytest.raises(ConfigurationError):
        SameSize(5)


def test_array_has_key():
    assert ArrayHasKey("a").matches({"a": 1})
    assert ArrayHasKey(1).matches([1, 2])
    assert not ArrayHasKey(2).matches([1, 2])
    assert not ArrayHasKey(True).matches([1, 2])
    assert not ArrayHasKey(0).matches("abc")


def test_array_has_key_failure():
    with pytest.raises(ExpectationFailedError) as exc:
        ArrayHasKey("b").evaluate({"a": 1})

    assert exc.value.message == "Failed asserting that a mapping has the key 'b'."


def test_object_has_property():
    widget = Widget()

    assert ObjectHasProperty("name").matches(widget)
    assert ObjectHasProperty("size").matches(widget)
    assert ObjectHasProperty("exploding").matches(widget)
    assert not ObjectHasProperty("colour").matches(widget)


def test_object_has_property_failure():
    with pytest.raises(ExpectationFailedError) as exc:
        ObjectHasProperty("colour").evaluate(Widget())

    assert exc.value.message == 'Failed asserting that object of class "Widget" has property "colour".'


def test_object_has_property_requires_identifier():
    with pytest.raises(ConfigurationError):
        ObjectHasProperty("1x")
    with pytest.raises(ConfigurationError):
        ObjectHasProperty("")
