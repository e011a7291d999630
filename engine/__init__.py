"""
engine/
-------
Playback, pacing and rendering-synchronisation layer.

    from engine import VisualizerSession
    from engine import AlgorithmRunner, PlaybackController, AnimationClock, RenderLoop
"""

from engine.errors       import VisualizerError, InputValidationError, RunInProgressError, InternalSyncFailure
from engine.cancellation import CancellationToken
from engine.step_signal  import StepSignal
from engine.playback     import PlaybackController, PlaybackState
from engine.clock        import AnimationClock, AnimationSpeed
from engine.render       import ColorTag, RenderListener, RenderLoop, RenderSync, VisualModel
from engine.runner       import AlgorithmRunner, RunContext, RunOutcome, RunState
from engine.session      import VisualizerSession
from engine.recorder     import Recorder, RunMetrics, ComparisonResult, compare, record

__all__ = [
    "VisualizerError",
    "InputValidationError",
    "RunInProgressError",
    "InternalSyncFailure",
    "CancellationToken",
    "StepSignal",
    "PlaybackController",
    "PlaybackState",
    "AnimationClock",
    "AnimationSpeed",
    "ColorTag",
    "RenderListener",
    "RenderLoop",
    "RenderSync",
    "VisualModel",
    "AlgorithmRunner",
    "RunContext",
    "RunOutcome",
    "RunState",
    "VisualizerSession",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "record",
]
