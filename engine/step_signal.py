"""
step_signal.py — Producer / Consumer Permit Gate
=================================================
The algorithm thread (producer of steps) calls await_permission() at every
step boundary.  The UI thread (consumer / pacer) decides whether that call
returns at once, blocks until a single permit arrives, or blocks until
continuous mode is restored.

Modes:
    continuous  →  every await_permission() returns immediately
    gated       →  each await_permission() consumes exactly one permit,
                   blocking (condition wait, no polling) while none exist

Permits are COUNTED, not flagged.  A grant_one() issued before the
producer reaches its wait is kept until consumed, and N grants release
exactly N waits no matter how they interleave with the producer.
"""

import threading


class StepSignal:

    def __init__(self):
        self._cond:        threading.Condition = threading.Condition()
        self._continuous:  bool = True
        self._permits:     int  = 0
        self._interrupted: bool = False
        self._waiting:     int  = 0

    # ------------------------------------------------------------------
    # Producer side (algorithm thread)
    # ------------------------------------------------------------------
    def await_permission(self) -> bool:
        """
        Block until allowed to pass this step boundary.

        Returns True when the caller may proceed, False when the wait was
        interrupted; the caller must then treat the step as cancelled.
        """
        with self._cond:
            self._waiting += 1
            try:
                while (not self._interrupted
                       and not self._continuous
                       and self._permits == 0):
                    self._cond.wait()
            finally:
                self._waiting -= 1

            if self._interrupted:
                return False
            if not self._continuous:
                self._permits -= 1
            return True

    # ------------------------------------------------------------------
    # Consumer side (UI thread)
    # ------------------------------------------------------------------
    def grant_continuous(self) -> None:
        """Let every current and future wait through until gated again."""
        with self._cond:
            self._continuous = True
            self._permits    = 0
            self._cond.notify_all()

    def grant_one(self) -> None:
        """Release exactly one wait (now or the next one) and stay gated."""
        with self._cond:
            self._continuous = False
            self._permits   += 1
            self._cond.notify()

    def block(self) -> None:
        """Switch to gated mode.  Already-granted permits stay valid."""
        with self._cond:
            self._continuous = False

    def interrupt(self) -> None:
        """Wake every waiter with a refusal.  Sticky until reset()."""
        with self._cond:
            self._interrupted = True
            self._cond.notify_all()

    def reset(self) -> None:
        """Back to continuous mode with no permits and no interruption."""
        with self._cond:
            self._continuous  = True
            self._permits     = 0
            self._interrupted = False
            self._cond.notify_all()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def pending(self) -> int:
        """Permits granted but not yet consumed."""
        with self._cond:
            return self._permits

    @property
    def waiting(self) -> int:
        """Number of threads currently inside await_permission()."""
        with self._cond:
            return self._waiting

    @property
    def is_continuous(self) -> bool:
        with self._cond:
            return self._continuous

    @property
    def is_interrupted(self) -> bool:
        with self._cond:
            return self._interrupted
