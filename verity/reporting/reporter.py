"""
Reporter that builds a run report from events.

The Reporter is an event subscriber: subscribe it to an emitter and it
records every assertion made, opens the report on TestSuiteStarted and
completes it on TestSuiteFinished.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING

from ..events import AssertionMade, Event, Subscriber, TestSuiteFinished, TestSuiteStarted
from ..exporter import shortened_export
from .models import AssertionRecord, RecordStatus, RunReport, RunStatus, compute_suite_hash

if TYPE_CHECKING:
    from ..suite import Suite

logger = logging.getLogger(__name__)


class Reporter(Subscriber):
    """
    Builds a RunReport from emitted events.

    Example:
        from verity.events import emitter
        from verity.reporting import Reporter

        reporter = Reporter.from_suite(suite)
        emitter().subscribe(reporter)

        run_suite(suite)

        print(reporter.report.summary())
        reporter.save_json("reports/run.json")
    """

    def __init__(self, report: RunReport | None = None):
        self.report = report if report is not None else RunReport()
        self._lock = threading.Lock()

    @classmethod
    def from_suite(cls, suite: Suite, run_id: str | None = None) -> Reporter:
        """
        Create a Reporter for a parsed suite.

        Args:
            suite: The suite the report is about
            run_id: Optional custom run ID (auto-generated if not provided)
        """
        report = RunReport(
            suite_name=suite.name,
            suite_version=suite.version,
            suite_hash=compute_suite_hash(suite.to_dict()),
        )
        if run_id:
            report.run_id = run_id
        return cls(report)

    @property
    def finished(self) -> bool:
        return self.report.ended_at is not None

    def notify(self, event: Event) -> None:
        if isinstance(event, AssertionMade):
            self.record_assertion(event)
        elif isinstance(event, TestSuiteStarted):
            self.start_run(event.name)
        elif isinstance(event, TestSuiteFinished):
            self.finish_run(event)

    def start_run(self, name: str = "") -> None:
        """Mark the run as started."""
        with self._lock:
            if name and not self.report.suite_name:
                self.report.suite_name = name
            self.report.start()

    def record_assertion(self, event: AssertionMade) -> AssertionRecord:
        """Append a record for an assertion event."""
        with self._lock:
            if self.report.status == RunStatus.PENDING:
                self.report.start()

            record = AssertionRecord(
                index=len(self.report.records) + 1,
                constraint=event.constraint.to_string(),
                status=RecordStatus.FAILED if event.has_failed else RecordStatus.PASSED,
                message=event.message,
                value=shortened_export(event.value, 80),
                weight=event.constraint.count(),
                recorded_at=event.telemetry_info.time,
            )
            self.report.add_record(record)

        return record

    def finish_run(self, event: TestSuiteFinished | None = None) -> RunReport:
        """
        Mark the run as completed and return the final report.

        Returns:
            The completed RunReport
        """
        with self._lock:
            self.report.complete(event.result if event is not None else None)
        logger.debug(f"Run {self.report.run_id} finished: {self.report.status.value}")
        return self.report

    def save_json(self, path: str | Path) -> None:
        """
        Save the report to a JSON file.

        Args:
            path: Path to save the JSON file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.report.to_json())

    def get_summary(self) -> str:
        """Get a human-readable summary of the run."""
        return self.report.summary()
