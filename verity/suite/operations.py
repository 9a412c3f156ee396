"""
Registry of the constraint operations a suite file may name.

Each entry says which keys an operation takes and how to build its
constraint from them. The validator and the parser both read this table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from ..assertions import factory as f
from ..constraints import Constraint, IsEqual


@dataclass(frozen=True)
class OpSpec:
    """
    Attributes:
        name: Operation name as written in suite files
        build: Builds the constraint from the node's parameters
        required: Keys the node must have
        optional: Keys the node may have
        nested: The node takes an inner constraint under "expect"
            (or a plain "value", compared for equality)
    """
    name: str
    build: Callable[[dict[str, Any]], Constraint]
    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()
    nested: bool = False

    @property
    def keys(self) -> set[str]:
        keys = {"op", *self.required, *self.optional}
        if self.nested:
            keys |= {"expect", "value"}
        return keys


def _nested_child(params: dict[str, Any]) -> Any:
    return params["expect"] if "expect" in params else params["value"]


_SPECS = [
    # Equality
    OpSpec(
        "equals",
        lambda p: IsEqual(
            p["value"],
            p.get("delta", 0.0),
            p.get("canonicalize", False),
            p.get("ignore_case", False),
        ),
        required=("value",),
        optional=("delta", "canonicalize", "ignore_case"),
    ),
    OpSpec("identical", lambda p: f.identical_to(p["value"]), required=("value",)),

    # Scalars
    OpSpec("anything", lambda p: f.anything()),
    OpSpec("is_true", lambda p: f.is_true()),
    OpSpec("is_false", lambda p: f.is_false()),
    OpSpec("is_null", lambda p: f.is_null()),
    OpSpec("is_empty", lambda p: f.is_empty()),
    OpSpec("is_finite", lambda p: f.is_finite()),
    OpSpec("is_infinite", lambda p: f.is_infinite()),
    OpSpec("is_nan", lambda p: f.is_nan()),
    OpSpec("greater_than", lambda p: f.greater_than(p["value"]), required=("value",)),
    OpSpec("greater_than_or_equal", lambda p: f.greater_than_or_equal(p["value"]), required=("value",)),
    OpSpec("less_than", lambda p: f.less_than(p["value"]), required=("value",)),
    OpSpec("less_than_or_equal", lambda p: f.less_than_or_equal(p["value"]), required=("value",)),

    # Types and shape
    OpSpec("is_type", lambda p: f.is_type(p["kind"]), required=("kind",)),
    OpSpec("instance_of", lambda p: f.is_instance_of(p["type"]), required=("type",)),
    OpSpec("count", lambda p: f.has_count(p["value"]), required=("value",)),
    OpSpec("same_size", lambda p: f.same_size(p["value"]), required=("value",)),
    OpSpec("has_key", lambda p: f.array_has_key(p["key"]), required=("key",)),
    OpSpec("has_property", lambda p: f.object_has_property(p["name"]), required=("name",)),

    # Collections
    OpSpec("contains", lambda p: f.contains_equal(p["value"]), required=("value",)),
    OpSpec("contains_identical", lambda p: f.contains_identical(p["value"]), required=("value",)),
    OpSpec("contains_only", lambda p: f.contains_only(p["kind"]), required=("kind",)),

    # Strings
    OpSpec(
        "string_contains",
        lambda p: f.string_contains(p["value"], p.get("ignore_case", False)),
        required=("value",),
        optional=("ignore_case",),
    ),
    OpSpec("string_starts_with", lambda p: f.string_starts_with(p["value"]), required=("value",)),
    OpSpec("string_ends_with", lambda p: f.string_ends_with(p["value"]), required=("value",)),
    OpSpec("matches_regex", lambda p: f.matches_regular_expression(p["pattern"]), required=("pattern",)),
    OpSpec("matches_format", lambda p: f.matches(p["format"]), required=("format",)),

    # Documents and files
    OpSpec("is_json", lambda p: f.is_json()),
    OpSpec("json_matches", lambda p: f.json_matches(p["value"]), required=("value",)),
    OpSpec("json_path_exists", lambda p: f.json_path_exists(p["path"]), required=("path",)),
    OpSpec(
        "json_path_matches",
        lambda p: f.json_path_matches(p["path"], _nested_child(p)),
        required=("path",),
        nested=True,
    ),
    OpSpec("xml_matches", lambda p: f.xml_matches(p["value"]), required=("value",)),
    OpSpec("file_exists", lambda p: f.file_exists()),
    OpSpec("directory_exists", lambda p: f.directory_exists()),
    OpSpec("is_readable", lambda p: f.is_readable()),
    OpSpec("is_writable", lambda p: f.is_writable()),
]

OPERATIONS: dict[str, OpSpec] = {spec.name: spec for spec in _SPECS}
