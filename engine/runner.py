"""
runner.py — Algorithm Runner
=============================
Runs ONE algorithm over ONE input on a worker thread so that playback
waits never freeze the UI, then reports the terminal outcome back on the
rendering context.

State machine:
    NOT_STARTED  →  start() / run()  →  RUNNING
    RUNNING      →  algorithm returns           →  COMPLETED
    RUNNING      →  algorithm unwinds on cancel  →  CANCELLED
    RUNNING      →  algorithm raises            →  FAILED

Terminal states are final.  Another run needs another AlgorithmRunner,
which brings its own PlaybackController, CancellationToken and context.

Every piece of per-run mutable state (counters, token, playback) lives on
the runner's RunContext; algorithm modules keep no globals.
"""

import logging
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Sequence

from engine.cancellation import CancellationToken
from engine.clock import AnimationClock, AnimationSpeed
from engine.errors import InternalSyncFailure
from engine.playback import PlaybackController
from engine.render import ColorTag, RenderListener, RenderLoop, RenderSync
from engine.validation import validate_run


LOG = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States & outcome
# ---------------------------------------------------------------------------
class RunState(Enum):
    NOT_STARTED = "not-started"
    RUNNING     = "running"
    COMPLETED   = "completed"
    CANCELLED   = "cancelled"
    FAILED      = "failed"


TERMINAL_STATES = (RunState.COMPLETED, RunState.CANCELLED, RunState.FAILED)


@dataclass
class RunOutcome:
    state:         RunState   = RunState.NOT_STARTED
    result:        Any        = None
    values:        List[int]  = field(default_factory=list)   # final array contents
    comparisons:   int        = 0
    writes:        int        = 0
    elapsed_ms:    float      = 0.0
    error_kind:    str        = ""
    error_message: str        = ""

    @property
    def found(self) -> bool:
        return self.result is not None


# ---------------------------------------------------------------------------
# RunContext — the handle every algorithm receives
# ---------------------------------------------------------------------------
class RunContext:
    """
    Bundles the calling contract of an algorithm: the visualize flag, the
    RenderSync handle, the CancellationToken, the AnimationClock, plus the
    run's counters.

    With visualize=False every visual helper is a no-op and pause() only
    reports cancellation, so the same algorithm body serves both the
    animated path and the benchmark path.
    """

    def __init__(
        self,
        token: CancellationToken,
        visualize: bool = False,
        render: Optional[RenderSync] = None,
        clock: Optional[AnimationClock] = None,
    ):
        self.token:       CancellationToken        = token
        self.visualize:   bool                     = bool(visualize and render is not None)
        self.render:      Optional[RenderSync]     = render if self.visualize else None
        self.clock:       Optional[AnimationClock] = clock if self.visualize else None
        self.comparisons: int = 0
        self.writes:      int = 0
        self.unwound:     bool = False     # the algorithm saw the cancel and stopped early

    # -- cancellation --
    @property
    def cancelled(self) -> bool:
        if self.token.cancelled:
            self.unwound = True
        return self.unwound

    # -- visual helpers --
    def show(self, values: Sequence[int]) -> None:
        if self.render:
            self.render.set_values(values)

    def mark(self, index: int, tag: ColorTag) -> None:
        if self.render:
            self.render.highlight(index, tag)

    def mark_range(self, start: int, stop: int, tag: ColorTag) -> None:
        """Highlight indices start..stop-1."""
        if self.render:
            for i in range(start, stop):
                self.render.highlight(i, tag)

    def unmark(self, index: int) -> None:
        if self.render:
            self.render.reset_highlight(index)

    def clear_marks(self) -> None:
        if self.render:
            self.render.reset_all()

    def say(self, message: str) -> None:
        if self.render:
            self.render.status(message)

    def line(self, number: int) -> None:
        if self.render:
            self.render.highlight_line(number)

    def progress(self, current: float, total: float) -> None:
        if self.render and total > 0:
            self.render.report_progress(current / total)

    # -- pacing --
    def pause(self, base_ms: float) -> bool:
        """Step boundary.  False means: stop now, the run was cancelled."""
        if self.clock:
            go_on = self.clock.wait(base_ms)
        else:
            go_on = not self.token.cancelled
        if not go_on:
            self.unwound = True
        return go_on


# ---------------------------------------------------------------------------
# AlgorithmRunner
# ---------------------------------------------------------------------------
class AlgorithmRunner:
    """
    Attributes:
        info      : AlgoInfo of the algorithm being run.
        values    : The runner's private copy of the input; the algorithm owns
                    it while RUNNING.  Read it via `outcome.values` afterwards.
        target    : Search target (None for sorts).
        visualize : Animated run (True) or fast benchmark path (False).
        token     : This run's CancellationToken.
        playback  : This run's PlaybackController.
        clock     : This run's AnimationClock (None when not visualizing).
        context   : The RunContext handed to the algorithm.
        outcome   : RunOutcome, filled in when a terminal state is reached.
    """

    def __init__(
        self,
        algo_key: str,
        values: Sequence[int],
        target: Optional[int] = None,
        visualize: bool = True,
        render_loop: Optional[RenderLoop] = None,
        listener: Optional[RenderListener] = None,
        speed: Optional[AnimationSpeed] = None,
        delay_scale: Optional[float] = None,
    ):
        self.info = validate_run(values, algo_key, target)
        if visualize and render_loop is None:
            raise ValueError("A visualized run needs a render loop.")

        self.values:    List[int]          = list(values)
        self.target:    Optional[int]      = target
        self.visualize: bool               = visualize
        self.token:     CancellationToken  = CancellationToken()
        self.playback:  PlaybackController = PlaybackController()
        self.outcome:   Optional[RunOutcome] = None

        self._loop:     Optional[RenderLoop]     = render_loop
        self._listener: Optional[RenderListener] = listener
        self._state:    RunState                 = RunState.NOT_STARTED
        self._lock:     threading.Lock           = threading.Lock()
        self._done:     threading.Event          = threading.Event()
        self._thread:   Optional[threading.Thread] = None

        # a cancel must also wake an algorithm parked on a paused step
        self.token.on_cancel(self.playback.interrupt)

        render = None
        self.clock: Optional[AnimationClock] = None
        if visualize:
            render     = RenderSync(render_loop, self.token)
            self.clock = AnimationClock(self.playback, self.token, speed, delay_scale)

        self.context = RunContext(self.token, visualize, render, self.clock)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> "AlgorithmRunner":
        """Run on a dedicated worker thread and return immediately."""
        self._begin()
        self._thread = threading.Thread(
            target=self._execute,
            name=f"algo-{self.info.key}",
            daemon=True,
        )
        self._thread.start()
        return self

    def run(self) -> RunOutcome:
        """Run synchronously on the calling thread (benchmarks, tests)."""
        self._begin()
        self._execute()
        return self.outcome

    def cancel(self, reason: str = "cancelled") -> None:
        if self.token.cancel(reason):
            LOG.info("run %s: cancellation requested (%s)", self.info.key, reason)

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for a terminal state.  True once reached."""
        return self._done.wait(timeout)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> RunState:
        with self._lock:
            return self._state

    @property
    def is_active(self) -> bool:
        return self.state is RunState.RUNNING

    @property
    def is_finished(self) -> bool:
        return self.state in TERMINAL_STATES

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _begin(self) -> None:
        with self._lock:
            if self._state is not RunState.NOT_STARTED:
                raise RuntimeError(f"Run already {self._state.value}; create a new runner.")
            self._state = RunState.RUNNING
        LOG.info(
            "run %s started (n=%d, target=%s, visualize=%s)",
            self.info.key, len(self.values), self.target, self.visualize,
        )
        if self._loop is not None:
            self._loop.submit("begin")

    def _execute(self) -> None:
        ctx     = self.context
        started = time.perf_counter()
        state   = RunState.COMPLETED
        result  = None
        kind    = message = ""
        try:
            result = self.info.fn(self.values, self.target, ctx)
            # a cancel landing after a normal return does not undo the result
            if ctx.unwound:
                state  = RunState.CANCELLED
                result = None
        except Exception as exc:
            LOG.exception("run %s failed", self.info.key)
            state   = RunState.FAILED
            kind    = type(exc).__name__
            message = str(exc)

        self.outcome = RunOutcome(
            state=state,
            result=result,
            values=list(self.values),
            comparisons=ctx.comparisons,
            writes=ctx.writes,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 3),
            error_kind=kind,
            error_message=message,
        )
        with self._lock:
            self._state = state
        LOG.info(
            "run %s %s in %.1f ms (%d comparisons, %d writes)",
            self.info.key, state.value, self.outcome.elapsed_ms,
            ctx.comparisons, ctx.writes,
        )
        try:
            self._deliver(self.outcome)
        finally:
            self._done.set()

    def _deliver(self, outcome: RunOutcome) -> None:
        if outcome.state is RunState.COMPLETED:
            op, args = "completed", (outcome.result,)
        elif outcome.state is RunState.CANCELLED:
            op, args = "cancelled", ()
        else:
            op, args = "failed", (outcome.error_kind, outcome.error_message)

        if self._loop is not None:
            try:
                self._loop.submit(op, *args)
            except InternalSyncFailure:
                LOG.warning("run %s: render loop gone, outcome %s not shown", self.info.key, op)
            return

        if self._listener is not None:
            hook = {"completed": "on_completed", "cancelled": "on_cancelled", "failed": "on_failed"}[op]
            try:
                getattr(self._listener, hook)(*args)
            except Exception:
                LOG.exception("run %s: listener failed in %s", self.info.key, hook)
