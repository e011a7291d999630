"""
counting_sort.py — Counting Sort
=================================
Tallies how often each value occurs, then writes the values back in
order.  Counts are indexed by value - min, so negative integers work; the
width of the range (max - min + 1) is capped before the run starts.  A
cancel during the write-back phase restores the input, since a
half-written array is not a permutation of it.
"""

from typing import List, Optional

from engine.render import ColorTag
from algorithms.common import finish_sorted


PSEUDOCODE: List[str] = [
    "find min and max of array",                 # 0
    "count = array of zeros, size max - min + 1",  # 1
    "for each x in array",                       # 2
    "    count[x - min] = count[x - min] + 1",   # 3
    "k = 0",                                     # 4
    "for v = min to max",                        # 5
    "    repeat count[v - min] times",           # 6
    "        array[k] = v; k = k + 1",           # 7
]


def counting_sort(array: List[int], target: Optional[int], ctx) -> None:
    n = len(array)
    original = list(array)

    ctx.show(array)
    ctx.say("Starting Counting Sort: count each value, then write them back in order.")
    if not ctx.pause(800):
        return None

    ctx.line(0)
    low, high = min(array), max(array)
    ctx.mark_range(0, n, ColorTag.ACTIVE)
    ctx.say(f"Values range from {low} to {high}.")
    if not ctx.pause(500):
        return None
    ctx.clear_marks()

    ctx.line(1)
    counts = [0] * (high - low + 1)
    ctx.say(f"Count array of size {len(counts)}, one slot per value from {low} to {high}.")

    ctx.line(2)
    for i, value in enumerate(array):
        if ctx.cancelled:
            return None
        counts[value - low] += 1
        ctx.line(3)
        ctx.mark(i, ColorTag.COMPARING)
        ctx.say(f"Count {value}: seen {counts[value - low]} time(s) so far.")
        ctx.progress(i + 1, 2 * n)
        if not ctx.pause(300):
            return None
        ctx.unmark(i)

    ctx.line(4)
    k = 0
    ctx.line(5)
    for offset, count in enumerate(counts):
        value = low + offset
        for _ in range(count):
            if ctx.cancelled:
                array[:] = original
                return None
            ctx.line(7)
            array[k] = value
            ctx.writes += 1
            ctx.show(array)
            ctx.mark_range(0, k + 1, ColorTag.ACTIVE)
            ctx.mark(k, ColorTag.SELECTED)
            ctx.say(f"Write {value} at index {k}.")
            ctx.progress(n + k + 1, 2 * n)
            k += 1
            if not ctx.pause(300):
                array[:] = original
                return None

    finish_sorted(
        array, ctx,
        "Counting Sort: O(n + k) time and O(k) space, where k is max - min + 1.",
    )
    return None
