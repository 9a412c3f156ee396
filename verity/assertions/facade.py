"""
Assertion entry points.

assert_that() is the single path through which assertions are made:

    1. The counter grows by the constraint's weight (count()).
    2. The constraint evaluates the value.
    3. The emitter is notified, on every exit path, with the value, the
       constraint, the message and whether the assertion failed.
    4. A failure propagates to the caller as ExpectationFailedError.
"""

from __future__ import annotations

import logging
import re
import traceback
from typing import Any

from ..constraints import Constraint
from ..events import Emitter
from ..events import emitter as default_emitter
from ..exceptions import (
    AssertionFailedError,
    IncompleteTestError,
    SkippedTestError,
    SyntheticSkippedError,
)
from .counter import AssertionCounter

logger = logging.getLogger(__name__)

_counter = AssertionCounter()


def assertion_counter() -> AssertionCounter:
    """Return the process-wide assertion counter."""
    return _counter


def assert_that(
    value: Any,
    constraint: Constraint,
    message: str = "",
    *,
    counter: AssertionCounter | None = None,
    emitter: Emitter | None = None,
) -> None:
    """
    Evaluate a value against a constraint.

    Args:
        value: The value under test
        constraint: The expectation
        message: Prefix shown before the failure explanation
        counter: Counter to update (defaults to the process-wide counter)
        emitter: Emitter to notify (defaults to the process-wide emitter)

    Raises:
        ExpectationFailedError: If the value does not satisfy the constraint
        ConfigurationError: If the constraint cannot be evaluated for this
            value (the emitter is still notified, with has_failed=True)

    Example:
        assert_that(response["status"], IsEqual(200), "status code")
    """
    if counter is None:
        counter = _counter
    if emitter is None:
        emitter = default_emitter()

    counter.increment(constraint.count())

    has_failed = True
    try:
        constraint.evaluate(value, message)
        has_failed = False
    finally:
        emitter.assertion_made(value, constraint, message, has_failed)


def fail(message: str = "", *, counter: AssertionCounter | None = None) -> None:
    """Fail unconditionally. Counts as one assertion."""
    (counter if counter is not None else _counter).increment(1)
    raise AssertionFailedError(message)


def mark_test_incomplete(message: str = "") -> None:
    raise IncompleteTestError(message)


# ─────────────────────────────────────────────────────────────────────────────
# Skipping
# ─────────────────────────────────────────────────────────────────────────────

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def detect_location_hint(message: str) -> dict[str, Any] | None:
    """
    Extract a location hint from the leading lines of a skip message.

    Leading lines of the form "__OFFSET_FILE=<path>" and
    "__OFFSET_LINE=<number>" name the location a skip should be attributed
    to. They are removed from the message.

    Returns:
        {"file": ..., "line": ..., "message": ...} or None if the message
        carries no hint
    """
    lines = _LINE_BREAK.split(message)
    hint: dict[str, Any] = {}

    while lines and "__OFFSET" in lines[0]:
        key, _, offset = lines.pop(0).partition("=")
        if key == "__OFFSET_FILE":
            hint["file"] = offset
        elif key == "__OFFSET_LINE":
            hint["line"] = offset

    if not hint:
        return None

    hint["message"] = "\n".join(lines)
    return hint


def mark_test_skipped(message: str = "") -> None:
    """
    Mark the current test as skipped.

    Raises:
        SyntheticSkippedError: If the message starts with a location hint
        SkippedTestError: Otherwise
    """
    hint = detect_location_hint(message)
    if hint is None:
        raise SkippedTestError(message)

    file = hint.get("file", "")
    try:
        line = int(hint.get("line", 0))
    except ValueError:
        line = 0

    trace = [(file, line)] + [
        (frame.filename, frame.lineno or 0) for frame in reversed(traceback.extract_stack()[:-1])
    ]
    logger.debug(f"Synthetic skip attributed to {file}:{line}")
    raise SyntheticSkippedError(hint["message"], file, line, trace)


# ─────────────────────────────────────────────────────────────────────────────
# Counting
# ─────────────────────────────────────────────────────────────────────────────

def get_count() -> int:
    """Number of assertions made since the last reset."""
    return _counter.value


def reset_count() -> None:
    _counter.reset()
