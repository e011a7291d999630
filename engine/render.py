"""
render.py — Single Rendering Context
=====================================
Algorithms never touch the visual model.  They call RenderSync, which
turns each call into an operation on a FIFO queue and returns at once.
One RenderLoop thread drains that queue in order, applies each operation
to the VisualModel it owns, then notifies RenderListeners.

    algorithm thread ──RenderSync──▶ queue ──RenderLoop──▶ VisualModel
                                                       └──▶ listeners

Guarantees:
  - operations are applied in exactly the order they were issued
  - the algorithm thread never waits for an operation to be applied
    (unless RENDER_QUEUE_MAXSIZE bounds the queue and it is full)
  - a listener that raises is logged and skipped; the loop keeps going
  - nothing new is queued by a RenderSync once its run is cancelled

Queue policy:
  Unbounded by default; memory grows with how far rendering lags the
  algorithm.  Algorithms pace themselves through AnimationClock waits,
  so in practice the backlog stays at a handful of operations.
"""

import logging
import queue
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

import config
from engine.cancellation import CancellationToken
from engine.errors import InternalSyncFailure


LOG = logging.getLogger(__name__)

STATUS_HISTORY = 50


# ---------------------------------------------------------------------------
# Color tags — semantic labels, mapped to real colors by ui/canvas.py
# ---------------------------------------------------------------------------
class ColorTag(Enum):
    DEFAULT    = "default"
    COMPARING  = "comparing"
    SELECTED   = "selected"     # key being inserted / element being moved
    PIVOT      = "pivot"
    ACTIVE     = "active"       # inside the current search range / partition
    SORTED     = "sorted"
    FOUND      = "found"
    NOT_FOUND  = "not-found"
    ELIMINATED = "eliminated"


# ---------------------------------------------------------------------------
# VisualModel — the VisualElement sequence plus narration
# ---------------------------------------------------------------------------
@dataclass
class VisualModel:
    values:     List[int]      = field(default_factory=list)
    tags:       List[ColorTag] = field(default_factory=list)
    status:     str            = ""
    status_log: List[str]      = field(default_factory=list)
    progress:   float          = 0.0
    line:       int            = -1
    outcome:    Optional[str]  = None
    result:     Any            = None
    error:      Optional[Dict[str, str]] = None

    def copy(self) -> "VisualModel":
        return VisualModel(
            values=list(self.values),
            tags=list(self.tags),
            status=self.status,
            status_log=list(self.status_log),
            progress=self.progress,
            line=self.line,
            outcome=self.outcome,
            result=self.result,
            error=dict(self.error) if self.error else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "values":     list(self.values),
            "tags":       [t.value for t in self.tags],
            "status":     self.status,
            "status_log": list(self.status_log),
            "progress":   self.progress,
            "line":       self.line,
            "outcome":    self.outcome,
            "result":     self.result,
            "error":      self.error,
        }


# ---------------------------------------------------------------------------
# Listener interface — override what you need
# ---------------------------------------------------------------------------
class RenderListener:
    """Outbound hooks, always invoked on the render thread."""

    def on_values_changed(self, values: List[int]) -> None:
        pass

    def on_highlight(self, index: int, tag: ColorTag) -> None:
        pass

    def on_reset_highlights(self) -> None:
        pass

    def on_status(self, message: str) -> None:
        pass

    def on_progress(self, fraction: float) -> None:
        pass

    def on_line(self, line: int) -> None:
        pass

    def on_completed(self, result: Any) -> None:
        pass

    def on_cancelled(self) -> None:
        pass

    def on_failed(self, kind: str, message: str) -> None:
        pass


# ---------------------------------------------------------------------------
# RenderLoop — the rendering context
# ---------------------------------------------------------------------------
_STOP = ("stop", ())


class RenderLoop:

    def __init__(self, maxsize: int = None, name: str = "render-loop"):
        size = config.RENDER_QUEUE_MAXSIZE if maxsize is None else maxsize
        self.model:      VisualModel          = VisualModel()
        self.listeners:  List[RenderListener] = []

        self._queue:     "queue.Queue"        = queue.Queue(maxsize=size)
        self._lock:      threading.Lock       = threading.Lock()
        self._thread:    Optional[threading.Thread] = None
        self._name:      str                  = name
        self._running:   bool                 = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> "RenderLoop":
        if self._running:
            return self
        self._running = True
        self._thread  = threading.Thread(target=self._loop, name=self._name, daemon=True)
        self._thread.start()
        LOG.debug("render loop started")
        return self

    def stop(self, timeout: float = 2.0) -> None:
        if not self._running:
            return
        self._queue.put(_STOP)
        if self._thread is not None:
            self._thread.join(timeout)
        self._running = False
        LOG.debug("render loop stopped")

    @property
    def is_running(self) -> bool:
        return self._running

    def add_listener(self, listener: RenderListener) -> None:
        self.listeners.append(listener)

    def remove_listener(self, listener: RenderListener) -> None:
        if listener in self.listeners:
            self.listeners.remove(listener)

    # ------------------------------------------------------------------
    # Queue access
    # ------------------------------------------------------------------
    def submit(self, name: str, *args) -> None:
        """Queue one operation.  Blocks only when a bounded queue is full."""
        if not self._running:
            raise InternalSyncFailure("render loop is not running")
        self._queue.put((name, args))

    def flush(self, timeout: float = 5.0) -> bool:
        """Block until everything queued before this call has been applied."""
        done = threading.Event()
        self.submit("barrier", done)
        return done.wait(timeout)

    @property
    def backlog(self) -> int:
        return self._queue.qsize()

    def snapshot(self) -> VisualModel:
        with self._lock:
            return self.model.copy()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _loop(self) -> None:
        while True:
            name, args = self._queue.get()
            if name == "stop":
                break
            if name == "barrier":
                args[0].set()
                continue
            try:
                self._apply(name, *args)
            except Exception:
                LOG.exception("render operation %r failed", name)

    def _apply(self, name: str, *args) -> None:
        m = self.model
        if name == "values":
            (values,) = args
            with self._lock:
                m.values = list(values)
                m.tags   = [ColorTag.DEFAULT] * len(values)
            self._notify("on_values_changed", list(values))

        elif name == "highlight":
            index, tag = args
            with self._lock:
                if not 0 <= index < len(m.values):
                    return
                m.tags[index] = tag
            self._notify("on_highlight", index, tag)

        elif name == "reset_all":
            with self._lock:
                m.tags = [ColorTag.DEFAULT] * len(m.values)
            self._notify("on_reset_highlights")

        elif name == "status":
            (message,) = args
            with self._lock:
                m.status = message
                m.status_log.append(message)
                del m.status_log[:-STATUS_HISTORY]
            self._notify("on_status", message)

        elif name == "progress":
            (fraction,) = args
            with self._lock:
                m.progress = fraction
            self._notify("on_progress", fraction)

        elif name == "line":
            (line,) = args
            with self._lock:
                m.line = line
            self._notify("on_line", line)

        elif name == "clear":
            with self._lock:
                self.model = VisualModel()
            self._notify("on_values_changed", [])

        elif name == "completed":
            (result,) = args
            with self._lock:
                m.outcome  = "completed"
                m.result   = result
                m.progress = 1.0
            self._notify("on_completed", result)

        elif name == "cancelled":
            with self._lock:
                m.outcome = "cancelled"
            self._notify("on_cancelled")

        elif name == "failed":
            kind, message = args
            with self._lock:
                m.outcome = "failed"
                m.error   = {"kind": kind, "message": message}
            self._notify("on_failed", kind, message)

        elif name == "begin":
            with self._lock:
                m.outcome  = None
                m.result   = None
                m.error    = None
                m.progress = 0.0
                m.line     = -1

        else:
            LOG.warning("unknown render operation %r ignored", name)

    def _notify(self, hook: str, *args) -> None:
        for listener in list(self.listeners):
            try:
                getattr(listener, hook)(*args)
            except Exception:
                LOG.exception("render listener %r failed in %s", listener, hook)


# ---------------------------------------------------------------------------
# RenderSync — what algorithms hold
# ---------------------------------------------------------------------------
class RenderSync:
    """
    Fire-and-forget handle bound to one run.  After the run's token is set
    every call is dropped, so a cancelled algorithm can never repaint.
    """

    def __init__(self, loop: RenderLoop, token: CancellationToken):
        self.loop:  RenderLoop        = loop
        self.token: CancellationToken = token

    def _push(self, name: str, *args) -> None:
        if self.token.cancelled:
            return
        self.loop.submit(name, *args)

    def set_values(self, values: Sequence[int]) -> None:
        self._push("values", list(values))

    def highlight(self, index: int, tag: ColorTag) -> None:
        self._push("highlight", index, tag)

    def reset_highlight(self, index: int) -> None:
        self._push("highlight", index, ColorTag.DEFAULT)

    def reset_all(self) -> None:
        self._push("reset_all")

    def status(self, message: str) -> None:
        self._push("status", message)

    def report_progress(self, fraction: float) -> None:
        self._push("progress", max(0.0, min(1.0, float(fraction))))

    def highlight_line(self, line: int) -> None:
        self._push("line", line)
