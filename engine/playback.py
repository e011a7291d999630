"""
playback.py — Play / Pause / Step Controller
=============================================
The PlaybackController is the ONLY object the UI talks to while a run is
on screen.  It owns the StepSignal the algorithm thread waits on and
translates button presses into permit grants.

State machine:
    RUNNING       →  pause()   →  PAUSED
    RUNNING       →  step()    →  PAUSED  →  STEPPING_ONE
    PAUSED        →  step()    →  STEPPING_ONE
    PAUSED        →  play()    →  RUNNING
    STEPPING_ONE  →  (permit consumed by the algorithm)  →  PAUSED
    STEPPING_ONE  →  play()    →  RUNNING
    STEPPING_ONE  →  pause()   →  PAUSED   (granted permits still honoured)
    any           →  reset()   →  RUNNING  (blocked waiter released)

Threading:
    Transition methods are called from the UI thread only.
    await_permission() is called from the algorithm thread only; the one
    write it performs is retiring the step-pending latch once the last
    granted permit has been consumed.
"""

import logging
import threading
from enum import Enum

from engine.errors import InternalSyncFailure
from engine.step_signal import StepSignal


LOG = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class PlaybackState(Enum):
    RUNNING      = "running"
    PAUSED       = "paused"
    STEPPING_ONE = "stepping"


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        signal       : The StepSignal shared with the algorithm thread.
        steps_taken  : Step boundaries passed since construction / reset.
    """

    def __init__(self, signal: StepSignal = None):
        self.signal:       StepSignal    = signal or StepSignal()
        self.steps_taken:  int           = 0

        self._state:        PlaybackState  = PlaybackState.RUNNING
        self._step_pending: bool           = False
        self._lock:         threading.Lock = threading.Lock()

    # ------------------------------------------------------------------
    # UI commands
    # ------------------------------------------------------------------
    def pause(self) -> None:
        with self._lock:
            self._step_pending = False
            if self._state is PlaybackState.PAUSED:
                return
            self._state = PlaybackState.PAUSED
            self.signal.block()
        LOG.debug("playback paused")

    def play(self) -> None:
        with self._lock:
            self._state        = PlaybackState.RUNNING
            self._step_pending = False
            self.signal.grant_continuous()
        LOG.debug("playback running")

    def step(self) -> None:
        with self._lock:
            if self._state is PlaybackState.RUNNING:
                self._state = PlaybackState.PAUSED
                self.signal.block()
            self._state        = PlaybackState.STEPPING_ONE
            self._step_pending = True
            self.signal.grant_one()
        LOG.debug("playback single step granted")

    def toggle_play(self) -> None:
        if self.state is PlaybackState.RUNNING:
            self.pause()
        else:
            self.play()

    def reset(self) -> None:
        with self._lock:
            self._state        = PlaybackState.RUNNING
            self._step_pending = False
            self.steps_taken   = 0
            self.signal.reset()
        LOG.debug("playback reset")

    def interrupt(self) -> None:
        """Refuse every current and future wait (run is being torn down)."""
        self.signal.interrupt()

    # ------------------------------------------------------------------
    # Algorithm side
    # ------------------------------------------------------------------
    def await_permission(self) -> None:
        """
        Block at a step boundary until playback lets the algorithm through.

        Raises InternalSyncFailure when the wait is interrupted instead of
        granted; callers translate that into a cancelled step.
        """
        if not self.signal.await_permission():
            raise InternalSyncFailure("step permit wait was interrupted")

        with self._lock:
            self.steps_taken += 1
            if self._step_pending and self.signal.pending == 0:
                self._step_pending = False
                if self._state is PlaybackState.STEPPING_ONE:
                    self._state = PlaybackState.PAUSED

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> PlaybackState:
        with self._lock:
            return self._state

    @property
    def is_playing(self) -> bool:
        return self.state is PlaybackState.RUNNING

    @property
    def is_paused(self) -> bool:
        return self.state is not PlaybackState.RUNNING

    @property
    def step_pending(self) -> bool:
        with self._lock:
            return self._step_pending
