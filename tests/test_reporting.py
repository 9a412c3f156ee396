"""Tests for run reports built from events."""

import json

import pytest

from verity.assertions import assert_that
from verity.constraints import GreaterThan, IsEqual, LessThan, LogicalAnd
from verity.events import Emitter, SuiteResult
from verity.exceptions import ExpectationFailedError
from verity.reporting import AssertionRecord, RecordStatus, Reporter, RunReport, RunStatus, compute_suite_hash
from verity.suite import validate_suite_yaml


@pytest.fixture
def wired():
    em = Emitter()
    reporter = Reporter()
    em.subscribe(reporter)
    return em, reporter


def test_records_every_assertion(wired):
    em, reporter = wired

    assert_that(5, IsEqual(5), emitter=em)
    with pytest.raises(ExpectationFailedError):
        assert_that(20, LogicalAnd(GreaterThan(0), LessThan(10)), "in range", emitter=em)

    report = reporter.report
    assert report.status == RunStatus.RUNNING
    assert [r.status for r in report.records] == [RecordStatus.PASSED, RecordStatus.FAILED]
    assert report.records[1].constraint == "is greater than 0 and is less than 10"
    assert report.records[1].message == "in range"
    assert report.records[1].weight == 2
    assert report.total_assertions == 3
    assert report.passed_records == 1
    assert report.failed_records == 1


def test_suite_events_open_and_complete_the_report(wired):
    em, reporter = wired

    em.test_suite_started("api", 1)
    assert reporter.report.status == RunStatus.RUNNING
    assert reporter.report.suite_name == "api"

    assert_that(1, IsEqual(1), emitter=em)
    em.test_suite_finished("api", SuiteResult(passed=1, assertions=1))

    assert reporter.finished
    assert reporter.report.status == RunStatus.PASSED
    assert reporter.report.result.passed == 1
    assert reporter.report.duration_ms is not None


def test_failed_checks_fail_the_run(wired):
    em, reporter = wired

    em.test_suite_started("api")
    em.test_suite_finished("api", SuiteResult(failed=1))

    assert reporter.report.status == RunStatus.FAILED


def test_errors_mark_the_run_as_error(wired):
    em, reporter = wired

    em.test_suite_started("api")
    em.test_suite_finished("api", SuiteResult(failed=1, errors=1))

    assert reporter.report.status == RunStatus.ERROR


def test_failed_record_fails_run_without_suite_result():
    report = RunReport(suite_name="adhoc")
    report.start()
    report.add_record(AssertionRecord(index=1, constraint="is true", status=RecordStatus.FAILED))
    report.complete()

    assert report.status == RunStatus.FAILED


def test_report_serialization(wired):
    em, reporter = wired

    em.test_suite_started("api")
    assert_that({"a": 1}, IsEqual({"a": 1}), emitter=em)
    em.test_suite_finished("api", SuiteResult(passed=1, assertions=1))

    data = json.loads(reporter.report.to_json())
    assert data["status"] == "passed"
    assert data["summary"]["assertions"] == 1
    assert data["summary"]["checks"]["passed"] == 1
    assert data["records"][0]["constraint"] == "is equal to {\n    'a': 1,\n}"
    assert data["records"][0]["value"] == "{'a': 1}"


def test_summary(wired):
    em, reporter = wired

    em.test_suite_started("api")
    with pytest.raises(ExpectationFailedError):
        assert_that(2, IsEqual(1), "status", emitter=em)
    em.test_suite_finished("api", SuiteResult(failed=1, assertions=1))

    summary = reporter.get_summary()
    assert "Run Report: api" in summary
    assert "FAILED" in summary
    assert "Checks: 0 passed, 1 failed, 0 errors, 0 skipped" in summary
    assert "└─ status" in summary


def test_save_json_creates_directories(tmp_path, wired):
    em, reporter = wired
    em.test_suite_started("api")
    em.test_suite_finished("api", SuiteResult())

    path = tmp_path / "nested" / "reports" / "run.json"
    reporter.save_json(path)

    assert path.exists()
    assert json.loads(path.read_text())["run_id"] == reporter.report.run_id


def test_from_suite(sample_suite_yaml):
    suite, result = validate_suite_yaml(sample_suite_yaml)
    assert result.is_valid

    reporter = Reporter.from_suite(suite, run_id="run-1")

    assert reporter.report.run_id == "run-1"
    assert reporter.report.suite_name == "Sample"
    assert reporter.report.suite_version == 1
    assert reporter.report.suite_hash == compute_suite_hash(suite.to_dict())


def test_suite_hash_is_stable():
    assert compute_suite_hash({"a": 1, "b": 2}) == compute_suite_hash({"b": 2, "a": 1})
    assert len(compute_suite_hash({})) == 12
