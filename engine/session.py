"""
session.py — UI-Facing Facade
==============================
The one object a front end holds.  It owns the rendering context (a
RenderLoop), the user's speed setting, and at most one live
AlgorithmRunner at a time.

    session = VisualizerSession().start()
    session.start_run([5, 3, 8, 1], "insertion_sort")
    session.pause(); session.step(); session.play()
    session.set_speed(2.0)
    session.cancel_run()
    session.snapshot()          # dict for the front end to draw

Runs never overlap: start_run() while a run is active raises
RunInProgressError, the programmatic version of a greyed-out Run button.
"""

import logging
import threading
from typing import Any, Dict, List, Optional, Sequence

from engine.clock import AnimationSpeed
from engine.errors import RunInProgressError
from engine.playback import PlaybackState
from engine.render import RenderListener, RenderLoop
from engine.runner import AlgorithmRunner, RunState


LOG = logging.getLogger(__name__)

RESET_JOIN_TIMEOUT = 2.0


class VisualizerSession:
    """
    Attributes:
        loop        : The rendering context shared by every run of this session.
        speed       : AnimationSpeed, persists across runs.
        runner      : The current (or most recent) AlgorithmRunner.
        delay_scale : Passed to each run's AnimationClock (None = config default).
    """

    def __init__(self, delay_scale: Optional[float] = None, loop: Optional[RenderLoop] = None):
        self.loop:        RenderLoop                = loop or RenderLoop()
        self.speed:       AnimationSpeed            = AnimationSpeed()
        self.runner:      Optional[AlgorithmRunner] = None
        self.delay_scale: Optional[float]           = delay_scale

        self._input:      List[int]      = []
        self._lock:       threading.Lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> "VisualizerSession":
        self.loop.start()
        return self

    def shutdown(self, timeout: float = 2.0) -> None:
        runner = self.runner
        if runner is not None and runner.is_active:
            runner.cancel("shutdown")
            runner.join(timeout)
        self.loop.stop(timeout)

    def add_listener(self, listener: RenderListener) -> None:
        self.loop.add_listener(listener)

    # ------------------------------------------------------------------
    # Runs
    # ------------------------------------------------------------------
    def start_run(
        self,
        values: Sequence[int],
        algo_key: str,
        target: Optional[int] = None,
        visualize: bool = True,
    ) -> AlgorithmRunner:
        """Validate, then launch on a worker thread.  Raises before any thread exists."""
        # held until the worker is RUNNING, so a concurrent caller sees it as busy
        with self._lock:
            if self.runner is not None and not self.runner.is_finished:
                raise RunInProgressError("An algorithm is already running.")
            runner = AlgorithmRunner(
                algo_key,
                values,
                target=target,
                visualize=visualize,
                render_loop=self.loop,
                speed=self.speed,
                delay_scale=self.delay_scale,
            )
            if visualize:
                self.loop.submit("values", list(values))
            runner.start()
            self._input = list(values)
            self.runner = runner
        return runner

    def cancel_run(self) -> None:
        runner = self.runner
        if runner is not None and runner.is_active:
            runner.cancel()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the current run is finished and its outcome rendered."""
        runner = self.runner
        if runner is None:
            return True
        if not runner.join(timeout):
            return False
        return self.loop.flush(timeout or 5.0)

    @property
    def is_running(self) -> bool:
        runner = self.runner
        return runner is not None and runner.is_active

    # ------------------------------------------------------------------
    # Playback commands
    # ------------------------------------------------------------------
    def pause(self) -> None:
        if self.runner is not None:
            self.runner.playback.pause()

    def play(self) -> None:
        if self.runner is not None:
            self.runner.playback.play()

    def step(self) -> None:
        if self.runner is not None:
            self.runner.playback.step()

    def reset(self) -> None:
        """Cancel the active run, release playback and redisplay the original input."""
        runner = self.runner
        if runner is not None:
            # token first: a parked step released by the reset must find it set
            if runner.is_active:
                runner.cancel("reset")
            runner.playback.reset()
            if not runner.join(RESET_JOIN_TIMEOUT):
                LOG.warning(
                    "run %s did not stop within %.1fs of reset", runner.info.key, RESET_JOIN_TIMEOUT,
                )
        if self._input:
            self.loop.submit("values", list(self._input))
            self.loop.submit("status", "Animation reset. Ready to start.")

    def set_speed(self, multiplier: float) -> float:
        applied = self.speed.set(multiplier)
        LOG.debug("animation speed set to %.2fx", applied)
        return applied

    # ------------------------------------------------------------------
    # Read-only view for the front end
    # ------------------------------------------------------------------
    @property
    def playback_state(self) -> PlaybackState:
        if self.runner is None:
            return PlaybackState.RUNNING
        return self.runner.playback.state

    def snapshot(self) -> Dict[str, Any]:
        runner = self.runner
        state  = runner.state if runner is not None else RunState.NOT_STARTED
        data   = self.loop.snapshot().to_dict()
        data.update({
            "run_state":      state.value,
            "playback_state": self.playback_state.value,
            "speed":          self.speed.get(),
            "algo_key":       runner.info.key if runner is not None else None,
            "comparisons":    runner.context.comparisons if runner is not None else 0,
            "writes":         runner.context.writes if runner is not None else 0,
        })
        return data
