"""
Comparator selection.

ComparatorFactory picks the comparator for a pair of values by their
runtime kinds. Custom comparators registered at runtime are consulted
before the built-in ones, most recently registered first.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

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

logger = logging.getLogger(__name__)


class ComparatorFactory:
    """
    Registry of comparators.

    Example:
        factory = ComparatorFactory.default()
        comparator = factory.get_comparator(1.0, "1")
        comparator.assert_equals(1.0, "1")  # passes: numeric string coercion

        factory.register(MyMoneyComparator())
        ...
        factory.unregister(my_money_comparator)
    """

    _default_instance: ComparatorFactory | None = None
    _default_lock = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._custom: list[Comparator] = []
        self._builtin: list[Comparator] = []

        for comparator in (
            NumericComparator(),
            ScalarComparator(),
            DateTimeComparator(),
            MappingComparator(),
            SequenceComparator(),
            SetComparator(),
            ExceptionComparator(),
            ObjectComparator(),
            TypeComparator(),
        ):
            comparator.set_factory(self)
            self._builtin.append(comparator)

    @classmethod
    def default(cls) -> ComparatorFactory:
        """Return the process-wide factory."""
        with cls._default_lock:
            if cls._default_instance is None:
                cls._default_instance = cls()
            return cls._default_instance

    def get_comparator(self, expected: Any, actual: Any) -> Comparator:
        """Return the first comparator that accepts the pair."""
        with self._lock:
            comparators = [*self._custom, *self._builtin]

        for comparator in comparators:
            if comparator.accepts(expected, actual):
                return comparator

        # TypeComparator accepts everything, so this is only reachable if a
        # subclass removed it.
        raise LookupError(f"No comparator for {type(expected).__name__} and {type(actual).__name__}")

    def register(self, comparator: Comparator) -> None:
        """Register a custom comparator ahead of all others."""
        comparator.set_factory(self)
        with self._lock:
            self._custom.insert(0, comparator)
        logger.debug(f"Registered comparator {type(comparator).__name__}")

    def unregister(self, comparator: Comparator) -> None:
        """Remove a previously registered custom comparator."""
        with self._lock:
            self._custom = [c for c in self._custom if c is not comparator]

    def reset(self) -> None:
        """Remove all custom comparators."""
        with self._lock:
            self._custom = []
