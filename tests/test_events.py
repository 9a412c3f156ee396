"""Tests for event models and the emitter."""

import logging
from datetime import datetime, timezone

from verity.assertions import assert_that
from verity.constraints import Constraint, IsEqual
from verity.events import (
    AssertionMade,
    Emitter,
    EventCollector,
    Subscriber,
    SuiteResult,
    TelemetryInfo,
    TestSuiteFinished,
    TestSuiteStarted,
    emitter,
    reset_emitter,
    set_emitter,
)


class BrokenSubscriber(Subscriber):
    def notify(self, event):
        raise RuntimeError("subscriber exploded")


def telemetry():
    return TelemetryInfo(datetime(2024, 1, 1, tzinfo=timezone.utc), 0.5, 0.1)


# ─────────────────────────────────────────────────────────────────────────────
# Models
# ─────────────────────────────────────────────────────────────────────────────

def test_assertion_made_as_string():
    passed = AssertionMade(telemetry(), 5, IsEqual(5))
    failed = AssertionMade(telemetry(), 6, IsEqual(5), "total", has_failed=True)

    assert passed.as_string() == "Assertion Succeeded (Constraint: is equal to 5)"
    assert failed.as_string() == "Assertion Failed (Constraint: is equal to 5, Message: total)"


def test_suite_events_as_string():
    assert TestSuiteStarted(telemetry(), "api", 3).as_string() == "Test Suite Started (api, 3 checks)"
    assert TestSuiteFinished(telemetry(), "api").as_string() == "Test Suite Finished (api)"
    assert TestSuiteFinished(telemetry(), "").as_string() == "Test Suite Finished"


def test_telemetry_as_string():
    text = telemetry().as_string()

    assert text.startswith("[00:00:00.000000]")
    assert "0.500000s" in text


def test_suite_result():
    result = SuiteResult(passed=2, failed=1, skipped=1, assertions=5)

    assert result.total == 4
    assert not result.was_successful()
    assert SuiteResult(passed=3).was_successful()
    assert result.to_dict() == {
        "total": 4,
        "passed": 2,
        "failed": 1,
        "errors": 0,
        "skipped": 1,
        "assertions": 5,
    }


# ─────────────────────────────────────────────────────────────────────────────
# Emitter
# ─────────────────────────────────────────────────────────────────────────────

def test_emitter_dispatches_to_every_subscriber():
    em = Emitter()
    first, second = EventCollector(), EventCollector()
    em.subscribe(first)
    em.subscribe(second)

    em.assertion_made(1, IsEqual(1), "", False)

    assert len(first.events) == 1
    assert len(second.events) == 1


def test_unsubscribe():
    em = Emitter()
    collector = EventCollector()
    em.subscribe(collector)
    em.unsubscribe(collector)

    em.test_suite_started("s")

    assert collector.events == []
    assert em.subscribers == []


def test_failing_subscriber_does_not_stop_dispatch(caplog):
    em = Emitter()
    collector = EventCollector()
    em.subscribe(BrokenSubscriber())
    em.subscribe(collector)

    with caplog.at_level(logging.WARNING, logger="verity.events.emitter"):
        em.test_suite_started("s", 1)

    assert len(collector.events) == 1
    assert "BrokenSubscriber failed on TestSuiteStarted" in caplog.text


def test_failing_subscriber_does_not_change_assertion_outcome():
    emitter().subscribe(BrokenSubscriber())

    assert_that(5, IsEqual(5))


class Undescribable(Constraint):
    def matches(self, other):
        return True

    def to_string(self):
        raise RuntimeError("no description")


def test_event_description_errors_do_not_change_assertion_outcome(caplog):
    with caplog.at_level(logging.DEBUG, logger="verity.events.emitter"):
        assert_that(5, Undescribable())

    assert "Cannot describe AssertionMade: no description" in caplog.text


def test_events_are_not_described_when_debug_is_off(caplog):
    with caplog.at_level(logging.INFO, logger="verity.events.emitter"):
        assert_that(5, Undescribable())

    assert caplog.text == ""


def test_telemetry_is_monotonic():
    em = Emitter()
    collector = EventCollector()
    em.subscribe(collector)

    em.test_suite_started("s")
    em.test_suite_finished("s", SuiteResult())

    first, second = collector.events
    assert first.telemetry_info.duration_since_start >= 0
    assert second.telemetry_info.duration_since_start >= first.telemetry_info.duration_since_start
    assert second.telemetry_info.duration_since_previous >= 0


def test_collector_of_type():
    em = Emitter()
    collector = EventCollector()
    em.subscribe(collector)

    em.test_suite_started("s")
    em.assertion_made(1, IsEqual(1), "", False)
    em.test_suite_finished("s", SuiteResult(passed=1))

    assert len(collector.of_type(AssertionMade)) == 1
    assert collector.of_type(TestSuiteFinished)[0].result.passed == 1

    collector.clear()
    assert collector.events == []


def test_set_and_reset_emitter():
    custom = Emitter()
    previous = set_emitter(custom)

    assert emitter() is custom
    assert previous is not custom

    fresh = reset_emitter()
    assert emitter() is fresh
    assert fresh is not custom
