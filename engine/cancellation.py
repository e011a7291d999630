"""
cancellation.py — Per-Run Cancellation Token
=============================================
One token per algorithm run.  Set from the UI (cancel / reset / shutdown),
observed cooperatively by the algorithm at step boundaries and by
RenderSync before it queues anything new.  Once set it stays set; a new
run gets a fresh token.
"""

import threading
from typing import Callable, List, Optional


class CancellationToken:

    def __init__(self):
        self._event:     threading.Event          = threading.Event()
        self._lock:      threading.Lock           = threading.Lock()
        self._callbacks: List[Callable[[], None]] = []
        self.reason:     Optional[str]            = None

    def cancel(self, reason: str = "cancelled") -> bool:
        """Set the token.  Returns False if it was already set."""
        with self._lock:
            if self._event.is_set():
                return False
            self.reason = reason
            self._event.set()
            callbacks = list(self._callbacks)
        for cb in callbacks:
            cb()
        return True

    def on_cancel(self, callback: Callable[[], None]) -> None:
        """Run `callback` once when the token is set (immediately if it already is)."""
        with self._lock:
            if not self._event.is_set():
                self._callbacks.append(callback)
                return
        callback()

    def wait(self, timeout: float) -> bool:
        """Sleep up to `timeout` seconds; True if cancelled meanwhile."""
        return self._event.wait(timeout)

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def __bool__(self) -> bool:
        return self.cancelled
