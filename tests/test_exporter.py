"""Tests for value export."""

from dataclasses import dataclass

from verity.exporter import RECURSION_MARKER, describe_type, export, is_plain_object, shortened_export


@dataclass
class Point:
    x: int
    y: int


class Slotted:
    __slots__ = ("a",)

    def __init__(self):
        self.a = 1


def test_export_scalars():
    assert export(1) == "1"
    assert export(None) == "None"
    assert export("a") == "'a'"
    assert export(True) == "True"


def test_export_containers_one_item_per_line():
    assert export([1, 2]) == "[\n    1,\n    2,\n]"
    assert export({"a": [1]}) == "{\n    'a': [\n        1,\n    ],\n}"
    assert export([]) == "[]"
    assert export(()) == "()"


def test_export_objects():
    assert export(Point(1, 2)) == "Point(\n    x=1,\n    y=2,\n)"
    assert export(Slotted()) == "Slotted(\n    a=1,\n)"


def test_export_sets_are_sorted():
    assert export({3, 1, 2}) == "{\n    1,\n    2,\n    3,\n}"


def test_export_marks_recursion():
    items = [1]
    items.append(items)

    assert RECURSION_MARKER in export(items)


def test_shortened_export():
    assert shortened_export([1, 2]) == "[1, 2]"
    assert shortened_export({"a": 1}) == "{'a': 1}"
    assert shortened_export("x" * 100, max_length=10) == "'xxxxxx..."
    assert len(shortened_export(list(range(100)))) == 40


def test_describe_type():
    assert describe_type(None) == "None"
    assert describe_type(1) == "int"
    assert describe_type(Point(1, 2)) == "instance of Point"


def test_is_plain_object():
    assert is_plain_object(Point(1, 2))
    assert is_plain_object(Slotted())
    assert not is_plain_object([1])
    assert not is_plain_object(ValueError("x"))
    assert not is_plain_object(object())
