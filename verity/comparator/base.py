"""
Base comparator interface.

A comparator decides whether it handles a pair of values (accepts) and,
if so, whether they are equal (assert_equals raises ComparisonFailure when
they are not).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .diff import Difference, DifferenceKind, path_segment
from .failure import ComparisonFailure

if TYPE_CHECKING:
    from .factory import ComparatorFactory


class Comparator(ABC):
    """
    Abstract base class for comparators.

    Composite comparators use the factory they are registered with to
    compare nested values, so a custom comparator registered on the factory
    also applies inside lists, mappings and objects.
    """

    def __init__(self) -> None:
        self.factory: ComparatorFactory | None = None

    def set_factory(self, factory: ComparatorFactory) -> None:
        self.factory = factory

    @abstractmethod
    def accepts(self, expected: Any, actual: Any) -> bool:
        """Return True if this comparator handles the pair."""
        pass

    @abstractmethod
    def assert_equals(
        self,
        expected: Any,
        actual: Any,
        delta: float = 0.0,
        canonicalize: bool = False,
        ignore_case: bool = False,
        processed: set[tuple[int, int]] | None = None,
    ) -> None:
        """
        Compare two values.

        Args:
            expected: The expected value
            actual: The actual value
            delta: Absolute tolerance for numeric values (seconds for datetimes)
            canonicalize: Ignore element order in sequences
            ignore_case: Compare strings case-insensitively
            processed: Pairs already on the comparison stack (cycle guard)

        Raises:
            ComparisonFailure: If the values are not equal
        """
        pass

    def _compare_child(
        self,
        expected: Any,
        actual: Any,
        key: Any,
        differences: list[Difference],
        delta: float,
        canonicalize: bool,
        ignore_case: bool,
        processed: set[tuple[int, int]],
    ) -> None:
        """Compare a nested pair, recording any differences below key."""
        segment = path_segment(key)
        comparator = self.factory.get_comparator(expected, actual)
        try:
            comparator.assert_equals(expected, actual, delta, canonicalize, ignore_case, processed)
        except ComparisonFailure as failure:
            if failure.differences:
                differences.extend(d.under(segment) for d in failure.differences)
            else:
                differences.append(
                    Difference("$" + segment, DifferenceKind.CHANGED, expected, actual)
                )


def enter(processed: set[tuple[int, int]] | None, expected: Any, actual: Any) -> set[tuple[int, int]] | None:
    """
    Push a pair of containers onto the comparison stack.

    Returns:
        The new stack, or None if the pair is already being compared
    """
    processed = processed or set()
    pair = (id(expected), id(actual))
    if pair in processed:
        return None
    return processed | {pair}
