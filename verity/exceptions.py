"""
Signal types raised by the assertion layer.

Three disjoint kinds of signal leave this package:

    - Assertion failures: a predicate evaluated false
      (AssertionFailedError, ExpectationFailedError)
    - Configuration errors: the caller misused the API
      (ConfigurationError, MalformedInputError)
    - Control signals: the test should be reported as skipped or incomplete
      (IncompleteTestError, SkippedTestError, SyntheticSkippedError)

Control signals derive from unittest.SkipTest so that pytest and unittest
runners report them as skips rather than failures.
"""

from __future__ import annotations

import unittest
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .comparator import ComparisonFailure


# ─────────────────────────────────────────────────────────────────────────────
# Assertion Failures
# ─────────────────────────────────────────────────────────────────────────────

class AssertionFailedError(AssertionError):
    """Raised when an assertion fails, e.g. through an explicit fail()."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def to_string(self) -> str:
        return self.message

    def __str__(self) -> str:
        return self.to_string()


class ExpectationFailedError(AssertionFailedError):
    """
    Raised when a constraint rejects a value.

    Attributes:
        message: Full failure text (author prefix + constraint explanation)
        comparison_failure: Structured comparison details for
            equality-style constraints, including the diff
    """

    def __init__(
        self,
        message: str,
        comparison_failure: ComparisonFailure | None = None,
    ):
        super().__init__(message)
        self.comparison_failure = comparison_failure

    def to_string(self) -> str:
        text = self.message
        if self.comparison_failure is not None:
            diff = self.comparison_failure.diff()
            if diff:
                text = f"{text}\n{diff}"
        return text


# ─────────────────────────────────────────────────────────────────────────────
# Configuration / Usage Errors
# ─────────────────────────────────────────────────────────────────────────────

class VerityError(Exception):
    """Base class for errors that are not assertion outcomes."""


class ConfigurationError(VerityError):
    """
    The API was used incorrectly.

    Examples: an unknown type name, an invalid attribute name, an empty
    combinator, a domain object without the named equality method.
    """


class MalformedInputError(ConfigurationError):
    """
    Input handed to a structural constraint or loader could not be parsed.

    Attributes:
        source: Where the input came from (file path or "string")
    """

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


# ─────────────────────────────────────────────────────────────────────────────
# Control Signals
# ─────────────────────────────────────────────────────────────────────────────

class ControlSignal(unittest.SkipTest):
    """A test should neither pass nor fail."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class IncompleteTestError(ControlSignal):
    """The test was marked incomplete."""


class SkippedTestError(ControlSignal):
    """The test was marked skipped."""


class SyntheticSkippedError(SkippedTestError):
    """
    A skip whose origin was given explicitly through a location hint.

    Attributes:
        file: Source file the skip should be attributed to
        line: Line number within that file
        trace: Call stack captured at the point the skip was raised,
            with the synthetic location first
    """

    def __init__(
        self,
        message: str,
        file: str,
        line: int,
        trace: list[tuple[str, int]] | None = None,
    ):
        super().__init__(message)
        self.file = file
        self.line = line
        self.trace = trace or [(file, line)]
