"""Tests for the command-line interface."""

import json

from typer.testing import CliRunner

from verity import __version__
from verity.cli import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"Verity v{__version__}" in result.output


def test_run_passing_suite(suite_file, tmp_path):
    result = runner.invoke(app, ["run", str(suite_file), "--report-dir", str(tmp_path / "reports")])

    assert result.exit_code == 0, result.output
    assert "Valid suite" in result.output
    assert "Run Report: Sample" in result.output

    reports = list((tmp_path / "reports").glob("*.json"))
    assert len(reports) == 1
    assert json.loads(reports[0].read_text())["status"] == "passed"


def test_run_failing_suite_exits_with_1(failing_suite_file):
    result = runner.invoke(app, ["run", str(failing_suite_file), "--no-report"])

    assert result.exit_code == 1
    assert "wrong_status" in result.output
    assert "Failed asserting that 500 matches expected 200." in result.output


def test_run_quiet(suite_file):
    result = runner.invoke(app, ["run", str(suite_file), "--quiet", "--no-report"])

    assert result.exit_code == 0
    assert "Sample: 3 passed, 0 failed, 0 errors, 0 skipped" in result.output
    assert "Loading suite" not in result.output


def test_run_json_output(suite_file):
    result = runner.invoke(app, ["run", str(suite_file), "--output", "json", "--no-report"])

    assert result.exit_code == 0
    assert '"status": "passed"' in result.output
    assert "Loading suite" not in result.output


def test_run_rejects_unknown_output_format(suite_file):
    result = runner.invoke(app, ["run", str(suite_file), "--output", "xml", "--no-report"])

    assert result.exit_code == 2
    assert "Unknown output format" in result.output


def test_run_invalid_suite(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("version: 1\nname: Bad\nchecks:\n  - id: a\n    value: 1\n    expect:\n      op: equal\n      value: 1\n")

    result = runner.invoke(app, ["run", str(path), "--no-report"])

    assert result.exit_code == 1
    assert "Validation failed" in result.output
    assert "Unknown operation" in result.output


def test_run_missing_file(tmp_path):
    result = runner.invoke(app, ["run", str(tmp_path / "missing.yaml")])

    assert result.exit_code != 0


def test_run_writes_debug_log(suite_file, tmp_path):
    debug_log = tmp_path / "logs" / "debug.log"

    result = runner.invoke(app, ["run", str(suite_file), "--no-report", "--debug-log", str(debug_log)])

    assert result.exit_code == 0
    content = debug_log.read_text()
    assert "Running suite Sample" in content
    assert "Assertion Succeeded" in content


def test_validate(suite_file):
    result = runner.invoke(app, ["validate", str(suite_file)])

    assert result.exit_code == 0
    assert "Valid suite" in result.output
    assert "status" in result.output


def test_validate_invalid_suite(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("version: 1\nname: Bad\nchecks: []\n")

    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code == 1
    assert "Must contain at least one check" in result.output


def test_info():
    result = runner.invoke(app, ["info"])

    assert result.exit_code == 0
    assert "Operations" in result.output
    assert "equals" in result.output
