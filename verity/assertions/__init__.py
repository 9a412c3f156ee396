"""
Assertion facade.

Usage:
    from verity.assertions import assert_that, get_count, logical_and, greater_than, less_than

    assert_that(7, logical_and(greater_than(0), less_than(10)), "in range")
    get_count()  # 2
"""

# Counter
from .counter import AssertionCounter

# Facade
from .facade import (
    assert_that,
    assertion_counter,
    detect_location_hint,
    fail,
    get_count,
    mark_test_incomplete,
    mark_test_skipped,
    reset_count,
)

# Constraint factory
from .factory import (
    anything,
    array_has_key,
    callback,
    contains_equal,
    contains_identical,
    contains_only,
    contains_only_instances_of,
    directory_exists,
    equal_to,
    equal_to_canonicalizing,
    equal_to_ignoring_case,
    equal_to_with_delta,
    file_exists,
    greater_than,
    greater_than_or_equal,
    has_count,
    identical_to,
    is_empty,
    is_false,
    is_finite,
    is_infinite,
    is_instance_of,
    is_json,
    is_nan,
    is_null,
    is_readable,
    is_true,
    is_type,
    is_writable,
    json_matches,
    json_path_exists,
    json_path_matches,
    less_than,
    less_than_or_equal,
    logical_and,
    logical_not,
    logical_or,
    logical_xor,
    matches,
    matches_regular_expression,
    object_equals,
    object_has_property,
    same_size,
    string_contains,
    string_ends_with,
    string_starts_with,
    xml_matches,
)

# Named wrappers
from .shortcuts import (
    assert_equals,
    assert_not_equals,
    assert_equals_with_delta,
    assert_equals_canonicalizing,
    assert_equals_ignoring_case,
    assert_same,
    assert_not_same,
    assert_object_equals,
    assert_true,
    assert_false,
    assert_null,
    assert_not_null,
    assert_empty,
    assert_not_empty,
    assert_greater_than,
    assert_greater_than_or_equal,
    assert_less_than,
    assert_less_than_or_equal,
    assert_finite,
    assert_infinite,
    assert_nan,
    assert_instance_of,
    assert_not_instance_of,
    assert_is_type,
    assert_count,
    assert_same_size,
    assert_array_has_key,
    assert_array_not_has_key,
    assert_object_has_property,
    assert_object_not_has_property,
    assert_object_has_attribute,
    assert_contains,
    assert_not_contains,
    assert_contains_equals,
    assert_contains_only,
    assert_contains_only_instances_of,
    assert_string_contains_string,
    assert_string_contains_string_ignoring_case,
    assert_string_not_contains_string,
    assert_string_starts_with,
    assert_string_ends_with,
    assert_matches_regular_expression,
    assert_does_not_match_regular_expression,
    assert_string_matches_format,
    assert_string_matches_format_file,
    assert_json,
    assert_json_string_equals_json_string,
    assert_json_string_equals_json_file,
    assert_json_path_exists,
    assert_json_path_matches,
    assert_xml_string_equals_xml_string,
    assert_xml_file_equals_xml_file,
    assert_file_exists,
    assert_file_does_not_exist,
    assert_directory_exists,
    assert_is_readable,
    assert_is_writable,
)

__all__ = [
    # Counter
    "AssertionCounter",
    # Facade
    "assert_that",
    "assertion_counter",
    "detect_location_hint",
    "fail",
    "get_count",
    "mark_test_incomplete",
    "mark_test_skipped",
    "reset_count",
    # Constraint factory
    "anything",
    "array_has_key",
    "callback",
    "contains_equal",
    "contains_identical",
    "contains_only",
    "contains_only_instances_of",
    "directory_exists",
    "equal_to",
    "equal_to_canonicalizing",
    "equal_to_ignoring_case",
    "equal_to_with_delta",
    "file_exists",
    "greater_than",
    "greater_than_or_equal",
    "has_count",
    "identical_to",
    "is_empty",
    "is_false",
    "is_finite",
    "is_infinite",
    "is_instance_of",
    "is_json",
    "is_nan",
    "is_null",
    "is_readable",
    "is_true",
    "is_type",
    "is_writable",
    "json_matches",
    "json_path_exists",
    "json_path_matches",
    "less_than",
    "less_than_or_equal",
    "logical_and",
    "logical_not",
    "logical_or",
    "logical_xor",
    "matches",
    "matches_regular_expression",
    "object_equals",
    "object_has_property",
    "same_size",
    "string_contains",
    "string_ends_with",
    "string_starts_with",
    "xml_matches",
    # Named wrappers
    "assert_equals",
    "assert_not_equals",
    "assert_equals_with_delta",
    "assert_equals_canonicalizing",
    "assert_equals_ignoring_case",
    "assert_same",
    "assert_not_same",
    "assert_object_equals",
    "assert_true",
    "assert_false",
    "assert_null",
    "assert_not_null",
    "assert_empty",
    "assert_not_empty",
    "assert_greater_than",
    "assert_greater_than_or_equal",
    "assert_less_than",
    "assert_less_than_or_equal",
    "assert_finite",
    "assert_infinite",
    "assert_nan",
    "assert_instance_of",
    "assert_not_instance_of",
    "assert_is_type",
    "assert_count",
    "assert_same_size",
    "assert_array_has_key",
    "assert_array_not_has_key",
    "assert_object_has_property",
    "assert_object_not_has_property",
    "assert_object_has_attribute",
    "assert_contains",
    "assert_not_contains",
    "assert_contains_equals",
    "assert_contains_only",
    "assert_contains_only_instances_of",
    "assert_string_contains_string",
    "assert_string_contains_string_ignoring_case",
    "assert_string_not_contains_string",
    "assert_string_starts_with",
    "assert_string_ends_with",
    "assert_matches_regular_expression",
    "assert_does_not_match_regular_expression",
    "assert_string_matches_format",
    "assert_string_matches_format_file",
    "assert_json",
    "assert_json_string_equals_json_string",
    "assert_json_string_equals_json_file",
    "assert_json_path_exists",
    "assert_json_path_matches",
    "assert_xml_string_equals_xml_string",
    "assert_xml_file_equals_xml_file",
    "assert_file_exists",
    "assert_file_does_not_exist",
    "assert_directory_exists",
    "assert_is_readable",
    "assert_is_writable",
]
