"""
errors.py — Engine Error Taxonomy
==================================
Cancellation is deliberately absent: a cancelled run is a terminal
outcome (RunState.CANCELLED), not an exception.
"""


class VisualizerError(Exception):
    """Base class for every error the engine raises."""


class InputValidationError(VisualizerError, ValueError):
    """Malformed size / value / target input, rejected before a run starts."""


class RunInProgressError(VisualizerError):
    """A run was requested while another one is still active."""


class InternalSyncFailure(VisualizerError):
    """A permit wait was torn down from outside (shutdown, reset mid-wait)."""
