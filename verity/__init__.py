"""
Verity - assertion and constraint engine

This package provides composable constraints, a structural comparator with
diffs, an assertion facade that counts assertions and notifies event
subscribers, and declarative YAML assertion suites.

Subpackages:
    - constraints: Constraint tree (leaves and logical operators)
    - comparator: Equality comparators, ComparisonFailure and diffs
    - assertions: assert_that(), the assertion counter, constraint factory
      and named assert_* wrappers
    - events: Event models, emitter and subscriber interface
    - reporting: Run reports built from events
    - suite: YAML suite loading, validation and running

Usage:
    from verity import assert_that, logical_and, greater_than, less_than

    assert_that(7, logical_and(greater_than(0), less_than(10)), "in range")
"""

__version__ = "0.1.0"

# Re-export assertions for convenience
from .assertions import (
    # Facade
    assert_that,
    fail,
    get_count,
    mark_test_incomplete,
    mark_test_skipped,
    reset_count,
    # Constraint factory
    equal_to,
    greater_than,
    greater_than_or_equal,
    identical_to,
    less_than,
    less_than_or_equal,
    logical_and,
    logical_not,
    logical_or,
    logical_xor,
)

# Re-export constraints for convenience
from .constraints import Constraint, IsEqual, LogicalAnd, LogicalNot, LogicalOr, LogicalXor

# Re-export signals
from .exceptions import (
    AssertionFailedError,
    ConfigurationError,
    ExpectationFailedError,
    IncompleteTestError,
    MalformedInputError,
    SkippedTestError,
    SyntheticSkippedError,
)

# Re-export events and reporting for convenience
from .events import Emitter, EventCollector, Subscriber, emitter
from .reporting import Reporter, RunReport

# Re-export suites for convenience
from .suite import load_suite, run_suite, validate_suite_yaml

__all__ = [
    # Package info
    "__version__",
    # Assertions - Facade
    "assert_that",
    "fail",
    "get_count",
    "mark_test_incomplete",
    "mark_test_skipped",
    "reset_count",
    # Assertions - Constraint factory
    "equal_to",
    "greater_than",
    "greater_than_or_equal",
    "identical_to",
    "less_than",
    "less_than_or_equal",
    "logical_and",
    "logical_not",
    "logical_or",
    "logical_xor",
    # Constraints
    "Constraint",
    "IsEqual",
    "LogicalAnd",
    "LogicalNot",
    "LogicalOr",
    "LogicalXor",
    # Signals
    "AssertionFailedError",
    "ConfigurationError",
    "ExpectationFailedError",
    "IncompleteTestError",
    "MalformedInputError",
    "SkippedTestError",
    "SyntheticSkippedError",
    # Events
    "Emitter",
    "EventCollector",
    "Subscriber",
    "emitter",
    # Reporting
    "Reporter",
    "RunReport",
    # Suites
    "load_suite",
    "run_suite",
    "validate_suite_yaml",
]
