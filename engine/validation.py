"""
validation.py — Input Parsing & Pre-Run Checks
===============================================
Everything that can be wrong with user input is caught here, on the
calling (UI) thread, before a worker thread exists.  A run that starts
never discovers malformed input halfway through.
"""

import random
import re
from typing import List, Optional, Sequence

import algorithms
import config
from engine.errors import InputValidationError


_SEPARATORS = re.compile(r"[\s,;]+")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
def parse_size(text: str) -> int:
    text = (text or "").strip()
    if not text:
        raise InputValidationError("Please enter an array size.")
    try:
        size = int(text)
    except ValueError:
        raise InputValidationError(f"Array size must be an integer, got {text!r}.") from None
    _check_size(size)
    return size


def parse_array(text: str, expected_size: Optional[int] = None) -> List[int]:
    """Parse whitespace / comma separated integers."""
    text = (text or "").strip()
    if not text:
        raise InputValidationError("Please enter array elements or generate a random array.")

    tokens = [t for t in _SEPARATORS.split(text) if t]
    values: List[int] = []
    for tok in tokens:
        try:
            values.append(int(tok))
        except ValueError:
            raise InputValidationError(f"Array element {tok!r} is not an integer.") from None

    if expected_size is not None and len(values) != expected_size:
        raise InputValidationError(
            f"Number of elements ({len(values)}) does not match the specified "
            f"array size ({expected_size})."
        )
    _check_size(len(values))
    return values


def parse_target(text) -> int:
    if isinstance(text, int) and not isinstance(text, bool):
        return text
    text = str(text if text is not None else "").strip()
    if not text:
        raise InputValidationError("Please enter a search target value.")
    try:
        return int(text)
    except ValueError:
        raise InputValidationError(f"Search target must be an integer, got {text!r}.") from None


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------
def generate_random_array(
    size: int = config.DEFAULT_ARRAY_SIZE,
    seed: Optional[int] = None,
    max_value: int = config.RANDOM_VALUE_MAX,
) -> List[int]:
    _check_size(size)
    rng = random.Random(seed)
    return [rng.randint(0, max_value) for _ in range(size)]


# ---------------------------------------------------------------------------
# Pre-run validation
# ---------------------------------------------------------------------------
def validate_run(values: Sequence[int], algo_key: str, target: Optional[int] = None):
    """
    Reject a run request.  Returns the AlgoInfo on success so callers
    don't look it up twice.
    """
    info = algorithms.get_algorithm(algo_key)
    if info is None:
        raise InputValidationError(f"Unknown algorithm: {algo_key!r}")

    if values is None:
        raise InputValidationError("No input array supplied.")
    _check_size(len(values))
    for v in values:
        if isinstance(v, bool) or not isinstance(v, int):
            raise InputValidationError(f"Array element {v!r} is not an integer.")

    if info.is_search:
        if target is None:
            raise InputValidationError(f"{info.label} needs a search target.")
        if isinstance(target, bool) or not isinstance(target, int):
            raise InputValidationError(f"Search target {target!r} is not an integer.")

    if info.non_negative_only and any(v < 0 for v in values):
        raise InputValidationError(f"{info.label} only supports non-negative integers.")

    if info.bounded_range:
        span = max(values) - min(values) + 1
        if span > config.MAX_VALUE_RANGE:
            raise InputValidationError(
                f"{info.label} needs max - min + 1 <= {config.MAX_VALUE_RANGE}, got {span}."
            )

    if info.requires_sorted and any(values[i] < values[i - 1] for i in range(1, len(values))):
        raise InputValidationError(
            f"{info.label} requires the array to be sorted in ascending order."
        )
    return info


def _check_size(size: int) -> None:
    if size <= 0 or size > config.MAX_ARRAY_SIZE:
        raise InputValidationError(
            f"Array size must be a positive number (1-{config.MAX_ARRAY_SIZE})."
        )
