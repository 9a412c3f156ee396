"""Tests for suite loading, validation, parsing and running."""

import pytest

from verity.assertions import get_count
from verity.constraints import LogicalAnd, LogicalNot, LogicalXor
from verity.events import Emitter, EventCollector, TestSuiteFinished, TestSuiteStarted
from verity.suite import (
    OPERATIONS,
    CheckStatus,
    SuiteParser,
    interpolate,
    load_suite,
    run_suite,
    validate_suite_yaml,
)


def errors_at(result, path):
    return [e for e in result.errors if e.path == path]


def single_check(expect, value="1", extra=""):
    return f"""
version: 1
name: Single
checks:
  - id: only
    value: {value}
{extra}    expect:
{expect}
"""


# ─────────────────────────────────────────────────────────────────────────────
# Loading and Parsing
# ─────────────────────────────────────────────────────────────────────────────

def test_valid_suite(sample_suite_yaml):
    suite, result = validate_suite_yaml(sample_suite_yaml)

    assert result.is_valid, str(result)
    assert suite.name == "Sample"
    assert [c.id for c in suite.checks] == ["status", "range", "url"]
    assert suite.get_check("range").constraint.count() == 2
    assert isinstance(suite.get_check("range").constraint, LogicalAnd)
    assert suite.get_check("missing") is None


def test_env_interpolation(sample_suite_yaml):
    suite, _ = validate_suite_yaml(sample_suite_yaml)

    assert suite.get_check("url").value == "https://example.com/api"


def test_interpolate_leaves_unknown_keys():
    assert interpolate("{{env.A}}-{{env.B}}", {"A": "x"}) == "x-{{env.B}}"
    assert interpolate({"k": ["{{env.A}}", 3]}, {"A": 1}) == {"k": ["1", 3]}


def test_combinators_and_nesting():
    yaml_text = """
version: 1
name: Nested
checks:
  - id: xor
    value: 20
    expect:
      one_of:
        - op: greater_than
          value: 0
        - op: less_than
          value: 10
  - id: negated
    value: 5
    expect:
      not:
        op: is_null
  - id: path
    value: '{"items": [1, 2]}'
    expect:
      op: json_path_matches
      path: $.items
      expect:
        op: count
        value: 2
  - id: path_value
    value: {"id": 7}
    expect:
      op: json_path_matches
      path: $.id
      value: 7
"""
    suite, result = validate_suite_yaml(yaml_text)

    assert result.is_valid, str(result)
    assert isinstance(suite.get_check("xor").constraint, LogicalXor)
    assert isinstance(suite.get_check("negated").constraint, LogicalNot)
    assert suite.get_check("path").constraint.matches('{"items": [1, 2]}')
    assert suite.get_check("path_value").constraint.matches({"id": 7})


def test_every_operation_is_buildable_from_its_required_keys():
    params = {
        "value": 1,
        "kind": "int",
        "type": "int",
        "key": "a",
        "name": "a",
        "pattern": "a",
        "format": "%d",
        "path": "$.a",
    }
    overrides = {
        "same_size": {"value": [1]},
        "string_contains": {"value": "a"},
        "string_starts_with": {"value": "a"},
        "string_ends_with": {"value": "a"},
        "json_matches": {"value": "{}"},
        "xml_matches": {"value": "<a/>"},
    }

    for name, spec in OPERATIONS.items():
        node = {key: params[key] for key in spec.required}
        node.update(overrides.get(name, {}))
        if spec.nested:
            node["value"] = 1
        constraint = spec.build(node)
        assert constraint.to_string(), name


def test_yaml_syntax_error():
    suite, result = validate_suite_yaml("version: [1")

    assert suite is None
    assert "Invalid YAML syntax" in result.errors[0].message


def test_content_must_be_mapping():
    suite, result = validate_suite_yaml("- 1\n- 2\n")

    assert suite is None
    assert "must be a YAML object" in result.errors[0].message


def test_load_suite_missing_file(tmp_path):
    suite, result = load_suite(tmp_path / "missing.yaml")

    assert suite is None
    assert result.errors[0].message == "File not found"


def test_load_suite_from_file(suite_file):
    suite, result = load_suite(suite_file)

    assert result.is_valid
    assert suite.base_dir == str(suite_file.parent)


# ─────────────────────────────────────────────────────────────────────────────
# Validation
# ─────────────────────────────────────────────────────────────────────────────

def test_missing_top_level_fields():
    _, result = validate_suite_yaml("name: x\n")

    assert errors_at(result, "version")
    assert errors_at(result, "checks")


def test_unknown_top_level_field_suggests():
    _, result = validate_suite_yaml("version: 1\nname: x\nchecks: []\nsetings: {}\n")

    error = errors_at(result, "setings")[0]
    assert error.suggestion == "Did you mean 'settings'?"


def test_version_must_be_integer():
    _, result = validate_suite_yaml("version: true\nname: x\nchecks: [{id: a, value: 1, expect: {op: is_true}}]\n")

    assert errors_at(result, "version")[0].message == "Must be an integer"


def test_empty_checks():
    _, result = validate_suite_yaml("version: 1\nname: x\nchecks: []\n")

    assert errors_at(result, "checks")[0].message == "Must contain at least one check"


def test_unknown_operation_suggests_closest():
    _, result = validate_suite_yaml(single_check("      op: equal\n      value: 1"))

    error = errors_at(result, "checks[0].expect.op")[0]
    assert error.message == "Unknown operation"
    assert error.suggestion == "Did you mean 'equals'?"


def test_missing_operation_key():
    _, result = validate_suite_yaml(single_check("      op: greater_than"))

    assert errors_at(result, "checks[0].expect.value")[0].message == "Operation 'greater_than' requires a 'value' field"


def test_unexpected_operation_key():
    _, result = validate_suite_yaml(single_check("      op: is_true\n      value: 1"))

    assert errors_at(result, "checks[0].expect.value")[0].message == "Operation 'is_true' does not take 'value'"


def test_duplicate_check_ids():
    yaml_text = """
version: 1
name: Dupes
checks:
  - id: a
    value: 1
    expect: {op: is_true}
  - id: a
    value: 1
    expect: {op: is_true}
"""
    _, result = validate_suite_yaml(yaml_text)

    assert errors_at(result, "checks[1].id")[0].message == "Duplicate check id"


def test_value_and_value_file_are_exclusive():
    _, result = validate_suite_yaml(single_check("      op: is_true", extra="    value_file: x.txt\n"))

    assert errors_at(result, "checks[0]")[0].message == "Check needs exactly one of 'value' or 'value_file'"


def test_one_of_needs_two_children():
    _, result = validate_suite_yaml(single_check("      one_of:\n        - op: is_true"))

    assert errors_at(result, "checks[0].expect.one_of")[0].message == "Must contain at least 2 constraint(s)"


def test_node_needs_op_or_combinator():
    _, result = validate_suite_yaml(single_check("      value: 1"))

    assert errors_at(result, "checks[0].expect")


def test_nested_operation_needs_expect_or_value():
    _, result = validate_suite_yaml(single_check("      op: json_path_matches\n      path: $.a"))

    assert errors_at(result, "checks[0].expect")[0].message == (
        "Operation 'json_path_matches' needs exactly one of 'expect' or 'value'"
    )


def test_unknown_setting():
    yaml_text = single_check("      op: is_true").replace("checks:", "settings:\n  stop_on_fail: true\nchecks:")
    _, result = validate_suite_yaml(yaml_text)

    assert errors_at(result, "settings.stop_on_fail")[0].suggestion == "Did you mean 'stop_on_failure'?"


def test_build_errors_are_collected():
    yaml_text = """
version: 1
name: Broken
checks:
  - id: regex
    value: abc
    expect:
      op: matches_regex
      pattern: "("
  - id: type
    value: 1
    expect:
      op: instance_of
      type: no.such.Type
  - id: path
    value: {}
    expect:
      op: json_path_exists
      path: "$["
"""
    suite, result = validate_suite_yaml(yaml_text)

    assert suite is None
    assert "Invalid regular expression" in errors_at(result, "checks[0].expect")[0].message
    assert "does not exist" in errors_at(result, "checks[1].expect")[0].message
    assert "Invalid JSONPath expression" in errors_at(result, "checks[2].expect")[0].message


def test_parser_build_constraint():
    parser = SuiteParser({"checks": [], "version": 1, "name": "x"})
    constraint = parser.build_constraint({"all_of": [{"op": "is_type", "kind": "int"}, {"op": "greater_than", "value": 0}]})

    assert constraint.matches(3)
    assert constraint.count() == 2


# ─────────────────────────────────────────────────────────────────────────────
# Running
# ─────────────────────────────────────────────────────────────────────────────

MIXED_SUITE = """
version: 1
name: Mixed
checks:
  - id: passes
    value: [1, 2, 3]
    expect:
      all_of:
        - op: count
          value: 3
        - op: contains
          value: 2
  - id: fails
    value: 500
    message: status code
    expect:
      op: equals
      value: 200
  - id: errors
    value: "{not json"
    expect:
      op: json_matches
      value: "{}"
  - id: skipped
    value: 1
    skip: not ready
    expect:
      op: is_true
"""


def test_run_classifies_outcomes():
    suite, result = validate_suite_yaml(MIXED_SUITE)
    assert result.is_valid, str(result)

    run = run_suite(suite, emitter=Emitter())
    statuses = {o.check_id: o.status for o in run.outcomes}

    assert statuses == {
        "passes": CheckStatus.PASSED,
        "fails": CheckStatus.FAILED,
        "errors": CheckStatus.ERROR,
        "skipped": CheckStatus.SKIPPED,
    }
    assert run.result.passed == 1
    assert run.result.failed == 1
    assert run.result.errors == 1
    assert run.result.skipped == 1
    assert run.result.assertions == 4
    assert not run.was_successful


def test_run_outcome_messages():
    suite, _ = validate_suite_yaml(MIXED_SUITE)
    run = run_suite(suite, emitter=Emitter())
    outcomes = {o.check_id: o for o in run.outcomes}

    assert outcomes["fails"].message == "status code\nFailed asserting that 500 matches expected 200."
    assert outcomes["errors"].message.startswith("MalformedInputError: Invalid JSON")
    assert outcomes["skipped"].message == "not ready"
    assert outcomes["passes"].assertions == 2
    assert str(outcomes["passes"]) == "✅ PASSED: passes"


def test_run_does_not_touch_global_counter():
    suite, _ = validate_suite_yaml(MIXED_SUITE)
    run_suite(suite, emitter=Emitter())

    assert get_count() == 0


def test_run_emits_suite_events():
    suite, _ = validate_suite_yaml(MIXED_SUITE)
    em = Emitter()
    collector = EventCollector()
    em.subscribe(collector)

    run = run_suite(suite, emitter=em)

    assert isinstance(collector.events[0], TestSuiteStarted)
    assert collector.events[0].size == 4
    assert isinstance(collector.events[-1], TestSuiteFinished)
    assert collector.events[-1].result == run.result
    assert len(collector.events) == 5


def test_progress_callback():
    suite, _ = validate_suite_yaml(MIXED_SUITE)
    seen = []

    run_suite(suite, emitter=Emitter(), progress=lambda check, outcome: seen.append((check.id, outcome.status)))

    assert [check_id for check_id, _ in seen] == ["passes", "fails", "errors", "skipped"]


def test_stop_on_failure_skips_remaining_checks(failing_suite_yaml):
    yaml_text = failing_suite_yaml.replace("checks:", "settings:\n  stop_on_failure: true\nchecks:")
    suite, result = validate_suite_yaml(yaml_text)
    assert result.is_valid, str(result)

    run = run_suite(suite, emitter=Emitter())

    assert run.outcomes[0].status == CheckStatus.FAILED
    assert run.outcomes[1].status == CheckStatus.SKIPPED
    assert run.outcomes[1].message == "skipped after an earlier failure"


def test_value_file_is_relative_to_suite(tmp_path):
    (tmp_path / "body.json").write_text('{"id": 7, "tags": ["a", "b"]}')
    suite_path = tmp_path / "suite.yaml"
    suite_path.write_text("""
version: 1
name: Files
checks:
  - id: body
    value_file: body.json
    expect:
      all_of:
        - op: is_json
        - op: json_path_matches
          path: $.id
          value: 7
        - op: json_path_matches
          path: $.tags
          expect:
            op: count
            value: 2
  - id: missing
    value_file: missing.json
    expect:
      op: is_json
""")

    suite, result = load_suite(suite_path)
    assert result.is_valid, str(result)

    run = run_suite(suite, emitter=Emitter())

    assert run.outcomes[0].status == CheckStatus.PASSED
    assert run.outcomes[0].assertions == 3
    assert run.outcomes[1].status == CheckStatus.ERROR


@pytest.mark.parametrize("op,value,result", [
    ("is_true", "true", CheckStatus.PASSED),
    ("is_null", "null", CheckStatus.PASSED),
    ("is_empty", "[]", CheckStatus.PASSED),
    ("is_true", "1", CheckStatus.FAILED),
])
def test_scalar_operations(op, value, result):
    suite, validation = validate_suite_yaml(single_check(f"      op: {op}", value=value))
    assert validation.is_valid, str(validation)

    run = run_suite(suite, emitter=Emitter())

    assert run.outcomes[0].status == result
