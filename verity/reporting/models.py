"""
Report data models for assertion runs.

This module defines the records a Reporter builds from events: one
AssertionRecord per assertion made, gathered into a RunReport.
"""

from __future__ import annotations

import hashlib
import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from ..events import SuiteResult


class RecordStatus(str, Enum):
    """Outcome of a single assertion."""
    PASSED = "passed"
    FAILED = "failed"


class RunStatus(str, Enum):
    """Overall status of a run."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


@dataclass
class AssertionRecord:
    """
    Record of a single assertion.

    Captures what was asserted, against which value, and how it ended.
    """
    index: int
    constraint: str
    status: RecordStatus
    message: str = ""
    value: Any = None
    weight: int = 1
    recorded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "index": self.index,
            "constraint": self.constraint,
            "status": self.status.value,
            "message": self.message,
            "value": _safe_serialize(self.value),
            "weight": self.weight,
            "recorded_at": self.recorded_at.isoformat(),
        }


@dataclass
class RunReport:
    """
    Complete record of a run.

    Contains metadata about the run, the suite being run, every assertion
    made while it ran, and the suite's own outcome counts.
    """
    # Run identification
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    # Timing
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    ended_at: datetime | None = None
    duration_ms: float | None = None

    # Suite info
    suite_name: str = ""
    suite_version: int = 1
    suite_hash: str = ""

    # Overall status
    status: RunStatus = RunStatus.PENDING

    # Assertion records
    records: list[AssertionRecord] = field(default_factory=list)

    # Check outcome counts, set when the suite finishes
    result: SuiteResult | None = None

    @property
    def total_assertions(self) -> int:
        return sum(r.weight for r in self.records)

    @property
    def passed_records(self) -> int:
        return sum(1 for r in self.records if r.status == RecordStatus.PASSED)

    @property
    def failed_records(self) -> int:
        return sum(1 for r in self.records if r.status == RecordStatus.FAILED)

    def start(self) -> None:
        """Mark the run as started."""
        self.status = RunStatus.RUNNING
        self.started_at = datetime.now(timezone.utc)

    def complete(self, result: SuiteResult | None = None) -> None:
        """Mark the run as completed and calculate final status."""
        self.ended_at = datetime.now(timezone.utc)
        delta = self.ended_at - self.started_at
        self.duration_ms = delta.total_seconds() * 1000
        self.result = result

        if result is not None and result.errors > 0:
            self.status = RunStatus.ERROR
        elif (result is not None and result.failed > 0) or self.failed_records > 0:
            self.status = RunStatus.FAILED
        else:
            self.status = RunStatus.PASSED

    def add_record(self, record: AssertionRecord) -> None:
        self.records.append(record)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "run_id": self.run_id,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "duration_ms": self.duration_ms,
            "suite_name": self.suite_name,
            "suite_version": self.suite_version,
            "suite_hash": self.suite_hash,
            "status": self.status.value,
            "summary": {
                "assertions": self.total_assertions,
                "records_passed": self.passed_records,
                "records_failed": self.failed_records,
                "checks": self.result.to_dict() if self.result else None,
            },
            "records": [record.to_dict() for record in self.records],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def summary(self) -> str:
        """Generate a human-readable summary."""
        lines = [
            "═══════════════════════════════════════════════════════════",
            f"  Run Report: {self.suite_name}",
            "═══════════════════════════════════════════════════════════",
            f"  Run ID:     {self.run_id}",
            f"  Status:     {_status_icon(self.status)} {self.status.value.upper()}",
            f"  Duration:   {self.duration_ms:.0f}ms" if self.duration_ms else "  Duration:   N/A",
            f"  Started:    {self.started_at.strftime('%Y-%m-%d %H:%M:%S UTC') if self.started_at else 'N/A'}",
            "───────────────────────────────────────────────────────────",
        ]

        if self.result is not None:
            lines.append(
                f"  Checks: {self.result.passed} passed, {self.result.failed} failed, "
                f"{self.result.errors} errors, {self.result.skipped} skipped"
            )
        lines.append(
            f"  Assertions: {self.total_assertions} "
            f"({self.passed_records} passed, {self.failed_records} failed)"
        )
        lines.append("───────────────────────────────────────────────────────────")

        for record in self.records:
            icon = _status_icon_record(record.status)
            lines.append(f"  {icon} [{record.index}] {record.constraint}")
            if record.status == RecordStatus.FAILED and record.message:
                lines.append(f"      └─ {record.message}")

        lines.append("═══════════════════════════════════════════════════════════")
        return "\n".join(lines)


def compute_suite_hash(suite_dict: dict[str, Any]) -> str:
    """
    Compute a hash of the suite for tracking changes between runs.

    Returns:
        SHA-256 hash (first 12 chars)
    """
    serialized = json.dumps(suite_dict, sort_keys=True, default=str)
    return hashlib.sha256(serialized.encode()).hexdigest()[:12]


def _safe_serialize(value: Any) -> Any:
    """Safely serialize a value, handling non-JSON types."""
    if value is None:
        return None
    try:
        json.dumps(value)
        return value
    except (TypeError, ValueError):
        return str(value)


def _status_icon(status: RunStatus) -> str:
    return {
        RunStatus.PENDING: "⏳",
        RunStatus.RUNNING: "🔄",
        RunStatus.PASSED: "✅",
        RunStatus.FAILED: "❌",
        RunStatus.ERROR: "⚠️",
    }.get(status, "❓")


def _status_icon_record(status: RecordStatus) -> str:
    return "✅" if status == RecordStatus.PASSED else "❌"
