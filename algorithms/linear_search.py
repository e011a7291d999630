"""
linear_search.py — Linear Search
=================================
Scans left to right and returns the index of the first element equal to
the target, or None.  Visited slots are ELIMINATED; the hit is FOUND.
"""

from typing import List, Optional

from engine.render import ColorTag


PSEUDOCODE: List[str] = [
    "for i = 0 to n-1",              # 0
    "    if array[i] == target",     # 1
    "        return i",              # 2
    "return not found",              # 3
]


def linear_search(array: List[int], target: Optional[int], ctx) -> Optional[int]:
    n = len(array)

    ctx.show(array)
    ctx.say(f"Starting Linear Search for {target}: check every element in turn.")
    if not ctx.pause(800):
        return None

    for i in range(n):
        if ctx.cancelled:
            return None

        ctx.line(0)
        ctx.line(1)
        ctx.comparisons += 1
        ctx.mark(i, ColorTag.COMPARING)
        ctx.say(f"Is array[{i}] = {array[i]} equal to {target}?")
        ctx.progress(i + 1, n)
        if not ctx.pause(500):
            return None

        if array[i] == target:
            ctx.line(2)
            ctx.mark(i, ColorTag.FOUND)
            ctx.say(f"Found {target} at index {i} after {i + 1} comparison(s).")
            return i

        ctx.mark(i, ColorTag.ELIMINATED)

    ctx.line(3)
    ctx.mark_range(0, n, ColorTag.NOT_FOUND)
    ctx.progress(1, 1)
    ctx.say(f"{target} is not in the array ({n} comparisons).")
    return None
