"""
Lifecycle events for assertions and suites.

Usage:
    from verity.events import EventCollector, emitter

    collector = EventCollector()
    emitter().subscribe(collector)

    assert_that(5, IsEqual(5))
    collector.events[0].as_string()  # "Assertion Succeeded (Constraint: is equal to 5)"
"""

# Models
from .models import (
    AssertionMade,
    Event,
    SuiteResult,
    TelemetryInfo,
    TestSuiteFinished,
    TestSuiteStarted,
)

# Emitter
from .emitter import Emitter, EventCollector, Subscriber

# Process-wide emitter
from .facade import emitter, reset_emitter, set_emitter

__all__ = [
    # Models
    "AssertionMade",
    "Event",
    "SuiteResult",
    "TelemetryInfo",
    "TestSuiteFinished",
    "TestSuiteStarted",
    # Emitter
    "Emitter",
    "EventCollector",
    "Subscriber",
    # Process-wide emitter
    "emitter",
    "reset_emitter",
    "set_emitter",
]
