"""
Process-wide emitter.

assert_that() notifies this emitter unless one is injected.
"""

from __future__ import annotations

import threading

from .emitter import Emitter

_lock = threading.Lock()
_emitter = Emitter()


def emitter() -> Emitter:
    """Return the process-wide emitter."""
    with _lock:
        return _emitter


def set_emitter(new_emitter: Emitter) -> Emitter:
    """Replace the process-wide emitter and return the previous one."""
    global _emitter
    with _lock:
        previous, _emitter = _emitter, new_emitter
    return previous


def reset_emitter() -> Emitter:
    """Install a fresh emitter with no subscribers and return it."""
    fresh = Emitter()
    set_emitter(fresh)
    return fresh
