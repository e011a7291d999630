"""
config.py — Application Constants
==================================
Every tunable the engine and the web front end read.  Values are plain
module constants; a handful can be overridden from the environment so the
same build can run slow for a classroom or near-instant for the test suite.
"""

import os


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


# ---------------------------------------------------------------------------
# Animation speed (multiplier chosen by the user on the slider)
# ---------------------------------------------------------------------------
MIN_SPEED     = 0.1
MAX_SPEED     = 2.0
DEFAULT_SPEED = 1.0

# multiplier applied to every base delay an algorithm asks for
DELAY_SCALE = _env_float("VISUALIZER_DELAY_SCALE", 1.0)


# ---------------------------------------------------------------------------
# Input arrays
# ---------------------------------------------------------------------------
MAX_ARRAY_SIZE     = 1000
DEFAULT_ARRAY_SIZE = 10
RANDOM_VALUE_MAX   = 99

# widest max - min + 1 a counting-style sort may allocate counts for
MAX_VALUE_RANGE = _env_int("VISUALIZER_MAX_VALUE_RANGE", 100_000)


# ---------------------------------------------------------------------------
# Rendering context
# ---------------------------------------------------------------------------
# 0 = unbounded FIFO.  A positive value blocks the algorithm thread once
# that many visual operations are waiting to be applied.
RENDER_QUEUE_MAXSIZE = _env_int("VISUALIZER_RENDER_QUEUE", 0)


# ---------------------------------------------------------------------------
# Web server / logging
# ---------------------------------------------------------------------------
HOST      = os.environ.get("VISUALIZER_HOST", "0.0.0.0")
PORT      = _env_int("VISUALIZER_PORT", 5000)
DEBUG     = os.environ.get("VISUALIZER_DEBUG", "0") == "1"
LOG_LEVEL = os.environ.get("VISUALIZER_LOG_LEVEL", "INFO").upper()
