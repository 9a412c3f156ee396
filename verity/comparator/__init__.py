"""
Comparator / diff subsystem.

Decides whether two values are equal under a requested mode (tolerance,
canonicalization, case-insensitivity) and explains inequality with a
unified diff plus per-path differences.

Usage:
    from verity.comparator import ComparatorFactory, ComparisonFailure

    factory = ComparatorFactory.default()
    try:
        factory.get_comparator(expected, actual).assert_equals(expected, actual, delta=0.01)
    except ComparisonFailure as failure:
        print(failure.message)
        print(failure.diff())
        print(failure.describe_differences())
"""

# Failure & diff
from .diff import Difference, DifferenceKind, describe_differences, unified_diff
from .failure import ComparisonFailure

# Comparators
from .base import Comparator
from .comparators import (
    DateTimeComparator,
    ExceptionComparator,
    MappingComparator,
    NumericComparator,
    ObjectComparator,
    ScalarComparator,
    SequenceComparator,
    SetComparator,
    TypeComparator,
)

# Factory
from .factory import ComparatorFactory

__all__ = [
    # Failure & diff
    "ComparisonFailure",
    "Difference",
    "DifferenceKind",
    "describe_differences",
    "unified_diff",
    # Comparators
    "Comparator",
    "DateTimeComparator",
    "ExceptionComparator",
    "MappingComparator",
    "NumericComparator",
    "ObjectComparator",
    "ScalarComparator",
    "SequenceComparator",
    "SetComparator",
    "TypeComparator",
    # Factory
    "ComparatorFactory",
]
