"""
binary_search.py — Binary Search
=================================
Halves a sorted array's search range until the target is found or the
range is empty.  The live range is ACTIVE, the probe COMPARING, and the
discarded half ELIMINATED.
"""

import math
from typing import List, Optional

from engine.render import ColorTag


PSEUDOCODE: List[str] = [
    "low = 0, high = n - 1",                 # 0
    "while low <= high",                     # 1
    "    mid = (low + high) / 2",            # 2
    "    if array[mid] == target: return mid",  # 3
    "    if array[mid] < target: low = mid + 1",  # 4
    "    else: high = mid - 1",              # 5
    "return not found",                      # 6
]


def binary_search(array: List[int], target: Optional[int], ctx) -> Optional[int]:
    n = len(array)
    max_steps = max(1, math.ceil(math.log2(n + 1)))

    ctx.show(array)
    ctx.say(f"Starting Binary Search for {target} in a sorted array of {n} elements.")
    if not ctx.pause(800):
        return None

    ctx.line(0)
    low, high = 0, n - 1
    steps = 0

    while low <= high:
        if ctx.cancelled:
            return None

        ctx.line(1)
        mid = (low + high) // 2
        steps += 1

        ctx.line(2)
        ctx.mark_range(low, high + 1, ColorTag.ACTIVE)
        ctx.mark(mid, ColorTag.COMPARING)
        ctx.say(f"Range [{low}..{high}], middle index {mid} holds {array[mid]}.")
        ctx.progress(min(steps, max_steps), max_steps)
        if not ctx.pause(700):
            return None

        ctx.line(3)
        ctx.comparisons += 1
        if array[mid] == target:
            ctx.mark(mid, ColorTag.FOUND)
            ctx.progress(1, 1)
            ctx.say(f"Found {target} at index {mid} after {steps} step(s).")
            return mid

        ctx.comparisons += 1
        if array[mid] < target:
            ctx.line(4)
            ctx.mark_range(low, mid + 1, ColorTag.ELIMINATED)
            ctx.say(f"{array[mid]} < {target}: discard the left half.")
            low = mid + 1
        else:
            ctx.line(5)
            ctx.mark_range(mid, high + 1, ColorTag.ELIMINATED)
            ctx.say(f"{array[mid]} > {target}: discard the right half.")
            high = mid - 1

        if not ctx.pause(600):
            return None

    ctx.line(6)
    ctx.mark_range(0, n, ColorTag.NOT_FOUND)
    ctx.progress(1, 1)
    ctx.say(f"{target} is not in the array ({steps} step(s)).")
    return None
