"""
Declarative assertion suites.

A suite is a YAML file listing checks: a value and the constraint it must
satisfy. This package loads, validates, parses and runs suite files.

Usage:
    from verity.suite import load_suite, run_suite

    suite, result = load_suite("suites/api.yaml")
    if not result.is_valid:
        print(result)

    run = run_suite(suite)
    print(run.result.to_dict())
"""

# Public API
from .loader import load_suite, validate_suite_yaml
from .runner import run_check, run_suite

# Models
from .models import (
    Check,
    CheckOutcome,
    CheckStatus,
    Combinator,
    Settings,
    Suite,
    SuiteRun,
)

# Operations
from .operations import OPERATIONS, OpSpec

# Parsing and validation
from .parser import SuiteParser, interpolate
from .validation import SuiteValidator, ValidationError, ValidationResult

__all__ = [
    # Loader and runner
    "load_suite",
    "validate_suite_yaml",
    "run_check",
    "run_suite",
    # Models
    "Check",
    "CheckOutcome",
    "CheckStatus",
    "Combinator",
    "Settings",
    "Suite",
    "SuiteRun",
    # Operations
    "OPERATIONS",
    "OpSpec",
    # Parsing and validation
    "SuiteParser",
    "interpolate",
    "SuiteValidator",
    "ValidationError",
    "ValidationResult",
]
