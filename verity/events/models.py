"""
Event data models.

Events are immutable records handed to subscribers. Each carries a
TelemetryInfo snapshot taken by the emitter at the moment of emission.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..constraints import Constraint


@dataclass(frozen=True)
class TelemetryInfo:
    """
    Timing snapshot attached to every event.

    Attributes:
        time: Wall-clock time of the event (UTC)
        duration_since_start: Seconds since the emitter was created
        duration_since_previous: Seconds since the previous event
    """
    time: datetime
    duration_since_start: float
    duration_since_previous: float

    def as_string(self) -> str:
        return (
            f"[{self.time.strftime('%H:%M:%S.%f')}] "
            f"[{self.duration_since_start:.6f}s / +{self.duration_since_previous:.6f}s]"
        )


@dataclass(frozen=True)
class SuiteResult:
    """Outcome counts of a suite run."""
    passed: int = 0
    failed: int = 0
    errors: int = 0
    skipped: int = 0
    assertions: int = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.errors + self.skipped

    def was_successful(self) -> bool:
        return self.failed == 0 and self.errors == 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "errors": self.errors,
            "skipped": self.skipped,
            "assertions": self.assertions,
        }


# ─────────────────────────────────────────────────────────────────────────────
# Events
# ─────────────────────────────────────────────────────────────────────────────

class Event(ABC):
    """Base class for all events."""

    telemetry_info: TelemetryInfo

    @abstractmethod
    def as_string(self) -> str:
        pass


@dataclass(frozen=True)
class AssertionMade(Event):
    """
    An assertion was evaluated.

    Emitted once per assert_that() call, whether the assertion passed,
    failed, or the evaluation raised.
    """
    telemetry_info: TelemetryInfo
    value: Any
    constraint: Constraint
    message: str = ""
    has_failed: bool = False

    def as_string(self) -> str:
        outcome = "Failed" if self.has_failed else "Succeeded"
        details = f"Constraint: {self.constraint.to_string()}"
        if self.message:
            details = f"{details}, Message: {self.message}"
        return f"Assertion {outcome} ({details})"


@dataclass(frozen=True)
class TestSuiteStarted(Event):
    telemetry_info: TelemetryInfo
    name: str
    size: int = 0

    __test__ = False

    def as_string(self) -> str:
        return f"Test Suite Started ({self.name}, {self.size} checks)" if self.name else "Test Suite Started"


@dataclass(frozen=True)
class TestSuiteFinished(Event):
    telemetry_info: TelemetryInfo
    name: str
    result: SuiteResult = field(default_factory=SuiteResult)

    __test__ = False

    def as_string(self) -> str:
        return f"Test Suite Finished ({self.name})" if self.name else "Test Suite Finished"
