"""
Event emitter and subscriber interface.

The emitter stamps each event with telemetry and dispatches it to every
registered subscriber. A failing subscriber is logged and does not stop
delivery to the others or change the outcome of the assertion that
triggered the event.
"""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from .models import (
    AssertionMade,
    Event,
    SuiteResult,
    TelemetryInfo,
    TestSuiteFinished,
    TestSuiteStarted,
)

if TYPE_CHECKING:
    from ..constraints import Constraint

logger = logging.getLogger(__name__)


class Subscriber(ABC):
    """Receives every event dispatched by an emitter."""

    @abstractmethod
    def notify(self, event: Event) -> None:
        pass


class EventCollector(Subscriber):
    """
    Subscriber that keeps every event it receives.

    Example:
        collector = EventCollector()
        emitter.subscribe(collector)
        ...
        collector.of_type(AssertionMade)
    """

    def __init__(self):
        self.events: list[Event] = []
        self._lock = threading.Lock()

    def notify(self, event: Event) -> None:
        with self._lock:
            self.events.append(event)

    def of_type(self, event_type: type) -> list[Event]:
        with self._lock:
            return [e for e in self.events if isinstance(e, event_type)]

    def clear(self) -> None:
        with self._lock:
            self.events.clear()


class Emitter:
    """
    Dispatches events to subscribers.

    Safe to use from several threads: the subscriber list is copied under a
    lock before dispatch, and telemetry is stamped under the same lock.
    """

    def __init__(self):
        self._subscribers: list[Subscriber] = []
        self._lock = threading.Lock()
        self._started = time.perf_counter()
        self._previous = self._started

    def subscribe(self, subscriber: Subscriber) -> None:
        with self._lock:
            self._subscribers.append(subscriber)
        logger.debug(f"Subscribed {type(subscriber).__name__}")

    def unsubscribe(self, subscriber: Subscriber) -> None:
        with self._lock:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

    @property
    def subscribers(self) -> list[Subscriber]:
        with self._lock:
            return list(self._subscribers)

    def _telemetry(self) -> TelemetryInfo:
        now = time.perf_counter()
        with self._lock:
            info = TelemetryInfo(
                time=datetime.now(timezone.utc),
                duration_since_start=now - self._started,
                duration_since_previous=now - self._previous,
            )
            self._previous = now
        return info

    def dispatch(self, event: Event) -> None:
        """Deliver an event to every subscriber."""
        if logger.isEnabledFor(logging.DEBUG):
            try:
                logger.debug(event.as_string())
            except Exception as e:
                logger.debug(f"Cannot describe {type(event).__name__}: {e}")

        for subscriber in self.subscribers:
            try:
                subscriber.notify(event)
            except Exception as e:
                logger.warning(
                    f"Subscriber {type(subscriber).__name__} failed on {type(event).__name__}: {e}",
                    exc_info=True,
                )

    # ─────────────────────────────────────────────────────────────────────────
    # Emission
    # ─────────────────────────────────────────────────────────────────────────

    def assertion_made(
        self,
        value: Any,
        constraint: Constraint,
        message: str,
        has_failed: bool,
    ) -> None:
        self.dispatch(AssertionMade(self._telemetry(), value, constraint, message, has_failed))

    def test_suite_started(self, name: str, size: int = 0) -> None:
        self.dispatch(TestSuiteStarted(self._telemetry(), name, size))

    def test_suite_finished(self, name: str, result: SuiteResult) -> None:
        self.dispatch(TestSuiteFinished(self._telemetry(), name, result))
