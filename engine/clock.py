"""
clock.py — Speed-Scaled Animation Delays
=========================================
An algorithm asks for "a pause of N ms for visual effect" by calling
AnimationClock.wait(N).  The clock first lets playback gate the call
(blocking indefinitely while paused, without advancing simulated time),
then sleeps N / speed milliseconds.

Speed is a multiplier in [MIN_SPEED, MAX_SPEED]:
    2.0  →  N / 2     (fastest)
    1.0  →  N
    0.1  →  N * 10    (slowest)

The speed is read once per wait, after permission has been granted; a
change made mid-sleep only affects the next wait.
"""

import logging
import threading

import config
from engine.cancellation import CancellationToken
from engine.errors import InternalSyncFailure
from engine.playback import PlaybackController


LOG = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# AnimationSpeed — bounded multiplier shared between UI and clock
# ---------------------------------------------------------------------------
class AnimationSpeed:

    def __init__(self, value: float = config.DEFAULT_SPEED):
        self._lock  = threading.Lock()
        self._value = self.clamp(value)

    @staticmethod
    def clamp(value: float) -> float:
        return max(config.MIN_SPEED, min(config.MAX_SPEED, float(value)))

    def set(self, value: float) -> float:
        """Store `value` clamped into range and return what was stored."""
        clamped = self.clamp(value)
        with self._lock:
            self._value = clamped
        return clamped

    def get(self) -> float:
        with self._lock:
            return self._value

    @property
    def value(self) -> float:
        return self.get()


# ---------------------------------------------------------------------------
# AnimationClock
# ---------------------------------------------------------------------------
class AnimationClock:
    """
    Attributes:
        speed       : AnimationSpeed read on every wait.
        delay_scale : Extra multiplier on every base delay (config.DELAY_SCALE).
    """

    def __init__(
        self,
        playback: PlaybackController,
        token: CancellationToken,
        speed: AnimationSpeed = None,
        delay_scale: float = None,
    ):
        self.playback:    PlaybackController = playback
        self.token:       CancellationToken  = token
        self.speed:       AnimationSpeed     = speed or AnimationSpeed()
        self.delay_scale: float = config.DELAY_SCALE if delay_scale is None else delay_scale

    def delay_seconds(self, base_ms: float) -> float:
        return (base_ms / self.speed.get()) * self.delay_scale / 1000.0

    def check_pause_and_step(self) -> bool:
        """Gate on playback only.  False means the run must unwind."""
        if self.token.cancelled:
            return False
        try:
            self.playback.await_permission()
        except InternalSyncFailure as exc:
            if not self.token.cancelled:
                LOG.warning("%s outside a cancellation; treating the run as cancelled", exc)
                self.token.cancel(reason="sync-failure")
            return False
        return not self.token.cancelled

    def wait(self, base_ms: float) -> bool:
        """
        One step boundary: wait for playback, then sleep base_ms / speed.

        Returns True to continue, False once the run has been cancelled.
        Never raises to the algorithm.
        """
        if not self.check_pause_and_step():
            return False
        delay = self.delay_seconds(base_ms)
        if delay > 0 and self.token.wait(delay):
            return False
        return not self.token.cancelled
