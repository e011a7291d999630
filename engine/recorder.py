"""
recorder.py — Benchmark Runs & Comparison
==========================================
Runs an algorithm on the fast, non-visual path and captures the numbers
the Analytics panel shows.  Two recorders over the SAME input give a
side-by-side ComparisonResult.

Usage:
    rec = Recorder()
    rec.start("quick_sort", values)
    metrics = rec.run_to_completion()

    left, right = Recorder(), Recorder()
    ...
    compare(left, right)   →  ComparisonResult
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from engine.runner import AlgorithmRunner, RunOutcome, RunState


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str   = ""
    algo_label:   str   = ""
    size:         int   = 0
    comparisons:  int   = 0
    writes:       int   = 0
    wall_time_ms: float = 0.0
    result:       Any   = None          # found index, or None
    completed:    bool  = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_comparisons: str = ""
    winner_writes:      str = ""
    winner_time:        str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        runner  : The AlgorithmRunner driving the current recording.
        outcome : RunOutcome of the finished run.
        metrics : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self):
        self.runner:  Optional[AlgorithmRunner] = None
        self.outcome: Optional[RunOutcome]      = None
        self.metrics: Optional[RunMetrics]      = None

    def start(self, algo_key: str, values: Sequence[int], target: Optional[int] = None) -> None:
        """Validate input and prepare a non-visual run."""
        self.runner  = AlgorithmRunner(algo_key, values, target=target, visualize=False)
        self.outcome = None
        self.metrics = None

    def run_to_completion(self) -> RunMetrics:
        if self.runner is None:
            raise RuntimeError("Call start() first.")
        self.outcome = self.runner.run()
        self.metrics = self._compute_metrics(self.outcome)
        return self.metrics

    @property
    def final_values(self) -> List[int]:
        return list(self.outcome.values) if self.outcome else []

    def _compute_metrics(self, outcome: RunOutcome) -> RunMetrics:
        info = self.runner.info
        return RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            size=len(outcome.values),
            comparisons=outcome.comparisons,
            writes=outcome.writes,
            wall_time_ms=outcome.elapsed_ms,
            result=outcome.result,
            completed=outcome.state is RunState.COMPLETED,
        )


def record(algo_key: str, values: Sequence[int], target: Optional[int] = None) -> Recorder:
    """One-shot helper: start + run_to_completion."""
    rec = Recorder()
    rec.start(algo_key, values, target)
    rec.run_to_completion()
    return rec


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_label if l_val < r_val else r.algo_label

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons),
        winner_writes=winner(l.writes, r.writes),
        winner_time=winner(l.wall_time_ms, r.wall_time_ms),
    )
