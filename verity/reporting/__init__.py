"""
Reporting for assertion runs.

This package turns assertion and suite events into a run report.

Features:
    - Run metadata (ID, timestamp, suite info)
    - One record per assertion made, with its outcome
    - Check outcome counts from the finished suite
    - JSON serialization
    - Human-readable summaries

Usage:
    from verity.events import emitter
    from verity.reporting import Reporter

    reporter = Reporter.from_suite(suite)
    emitter().subscribe(reporter)

    run_suite(suite)

    print(reporter.report.summary())
    reporter.save_json("reports/run.json")
"""

# Models
from .models import (
    AssertionRecord,
    RecordStatus,
    RunReport,
    RunStatus,
    compute_suite_hash,
)

# Reporter
from .reporter import Reporter

__all__ = [
    # Models
    "AssertionRecord",
    "RecordStatus",
    "RunReport",
    "RunStatus",
    "compute_suite_hash",
    # Reporter
    "Reporter",
]
