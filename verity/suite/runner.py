"""
Suite runner.

Runs every check of a suite through assert_that(), classifies the outcome
of each, and brackets the run with TestSuiteStarted / TestSuiteFinished
events.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Callable

from ..assertions import AssertionCounter, assert_that
from ..events import Emitter, SuiteResult
from ..events import emitter as default_emitter
from ..exceptions import AssertionFailedError, ControlSignal, VerityError
from ..loaders import load_text_file
from .models import Check, CheckOutcome, CheckStatus, Suite, SuiteRun

logger = logging.getLogger(__name__)


def _check_value(check: Check, base_dir: str | None) -> Any:
    if check.value_file is None:
        return check.value
    path = Path(check.value_file)
    if base_dir and not path.is_absolute():
        path = Path(base_dir) / path
    return load_text_file(path)


def run_check(
    check: Check,
    *,
    counter: AssertionCounter,
    emitter: Emitter,
    base_dir: str | None = None,
) -> CheckOutcome:
    """
    Run a single check.

    Failures, skips and errors are reported in the outcome rather than
    raised.
    """
    if check.skip is not None:
        return CheckOutcome(check.id, CheckStatus.SKIPPED, check.skip)

    before = counter.value
    started = time.perf_counter()

    try:
        value = _check_value(check, base_dir)
        assert_that(value, check.constraint, check.message, counter=counter, emitter=emitter)
        status, message = CheckStatus.PASSED, ""
    except AssertionFailedError as e:
        status, message = CheckStatus.FAILED, str(e)
    except ControlSignal as e:
        status, message = CheckStatus.SKIPPED, e.message
    except VerityError as e:
        status, message = CheckStatus.ERROR, f"{type(e).__name__}: {e}"
    except Exception as e:
        logger.debug(f"Check {check.id} raised", exc_info=True)
        status, message = CheckStatus.ERROR, f"{type(e).__name__}: {e}"

    return CheckOutcome(
        check_id=check.id,
        status=status,
        message=message,
        assertions=counter.value - before,
        duration_ms=(time.perf_counter() - started) * 1000,
    )


def run_suite(
    suite: Suite,
    *,
    emitter: Emitter | None = None,
    progress: Callable[[Check, CheckOutcome], None] | None = None,
) -> SuiteRun:
    """
    Run every check of a suite.

    Args:
        suite: The parsed suite
        emitter: Emitter to notify (defaults to the process-wide emitter)
        progress: Called after each check with the check and its outcome

    Returns:
        The SuiteRun with one outcome per check
    """
    if emitter is None:
        emitter = default_emitter()

    counter = AssertionCounter()
    run = SuiteRun(suite_name=suite.name)

    logger.debug(f"Running suite {suite.name} ({len(suite.checks)} checks)")
    emitter.test_suite_started(suite.name, len(suite.checks))

    stopped = False
    for check in suite.checks:
        if stopped:
            outcome = CheckOutcome(check.id, CheckStatus.SKIPPED, "skipped after an earlier failure")
        else:
            outcome = run_check(check, counter=counter, emitter=emitter, base_dir=suite.base_dir)
            if suite.settings.stop_on_failure and outcome.status in (CheckStatus.FAILED, CheckStatus.ERROR):
                stopped = True

        run.outcomes.append(outcome)
        if progress is not None:
            progress(check, outcome)

    run.result = SuiteResult(
        passed=sum(1 for o in run.outcomes if o.status == CheckStatus.PASSED),
        failed=sum(1 for o in run.outcomes if o.status == CheckStatus.FAILED),
        errors=sum(1 for o in run.outcomes if o.status == CheckStatus.ERROR),
        skipped=sum(1 for o in run.outcomes if o.status == CheckStatus.SKIPPED),
        assertions=counter.value,
    )

    emitter.test_suite_finished(suite.name, run.result)
    logger.debug(f"Suite {suite.name} finished: {run.result.to_dict()}")
    return run
