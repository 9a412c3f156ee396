"""
Typed data structures for assertion suites.

This module contains the enums and dataclasses that represent a parsed
suite file and the outcome of running it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..events import SuiteResult

if TYPE_CHECKING:
    from ..constraints import Constraint


# ─────────────────────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────────────────────

class Combinator(str, Enum):
    """Keys that combine constraint nodes."""
    ALL_OF = "all_of"
    ANY_OF = "any_of"
    ONE_OF = "one_of"
    NOT = "not"


class CheckStatus(str, Enum):
    """Outcome of a single check."""
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"  # e.g., malformed input, unreadable value file
    SKIPPED = "skipped"


# ─────────────────────────────────────────────────────────────────────────────
# Suite
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Settings:
    """Run settings for a suite."""
    stop_on_failure: bool = False


@dataclass
class Check:
    """
    A value and the constraint it must satisfy.

    Exactly one of value and value_file is used; value_file is read as text
    when the check runs, relative to the suite file's directory.
    """
    id: str
    constraint: Constraint
    expect: dict[str, Any] = field(default_factory=dict)  # the constraint node as written
    value: Any = None
    value_file: str | None = None
    message: str = ""
    skip: str | None = None  # reason, if the check is skipped


@dataclass
class Suite:
    """Fully parsed and validated suite."""
    version: int
    name: str
    checks: list[Check] = field(default_factory=list)
    env: dict[str, Any] = field(default_factory=dict)
    settings: Settings = field(default_factory=Settings)
    base_dir: str | None = None

    def get_check(self, check_id: str) -> Check | None:
        for check in self.checks:
            if check.id == check_id:
                return check
        return None

    def to_dict(self) -> dict[str, Any]:
        """Plain representation, used for hashing."""
        return {
            "version": self.version,
            "name": self.name,
            "env": self.env,
            "settings": {"stop_on_failure": self.settings.stop_on_failure},
            "checks": [
                {
                    "id": check.id,
                    "value": check.value,
                    "value_file": check.value_file,
                    "message": check.message,
                    "skip": check.skip,
                    "expect": check.expect,
                }
                for check in self.checks
            ],
        }


# ─────────────────────────────────────────────────────────────────────────────
# Run Outcome
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class CheckOutcome:
    """Result of running one check."""
    check_id: str
    status: CheckStatus
    message: str = ""
    assertions: int = 0
    duration_ms: float | None = None

    @property
    def passed(self) -> bool:
        return self.status == CheckStatus.PASSED

    def __str__(self) -> str:
        icon = {
            CheckStatus.PASSED: "✅",
            CheckStatus.FAILED: "❌",
            CheckStatus.ERROR: "⚠️",
            CheckStatus.SKIPPED: "⏭️",
        }[self.status]
        line = f"{icon} {self.status.value.upper()}: {self.check_id}"
        if self.message and self.status != CheckStatus.PASSED:
            indented = self.message.replace("\n", "\n   ")
            line = f"{line}\n   {indented}"
        return line


@dataclass
class SuiteRun:
    """Everything a suite run produced."""
    suite_name: str
    outcomes: list[CheckOutcome] = field(default_factory=list)
    result: SuiteResult = field(default_factory=SuiteResult)

    @property
    def was_successful(self) -> bool:
        return self.result.was_successful()
