"""
radix_sort.py — Radix Sort (LSD, base 10)
==========================================
One stable bucket pass per decimal digit, least significant first.
Non-negative integers only.  Each pass writes its output back slot by
slot; a cancel in the middle of a pass puts back the array as it was
before that pass.
"""

from typing import List, Optional

from engine.render import ColorTag
from algorithms.common import finish_sorted


PSEUDOCODE: List[str] = [
    "for exp = 1, 10, 100, ... while max / exp > 0",  # 0
    "    buckets = 10 empty lists",                    # 1
    "    for each x in array",                         # 2
    "        append x to buckets[(x / exp) % 10]",     # 3
    "    array = concatenation of buckets",            # 4
]

BASE = 10


def radix_sort(array: List[int], target: Optional[int], ctx) -> None:
    n = len(array)
    largest = max(array)
    passes = len(str(largest))

    ctx.show(array)
    ctx.say(f"Starting Radix Sort: {passes} pass(es), one per decimal digit.")
    if not ctx.pause(800):
        return None

    exp = 1
    for pass_no in range(passes):
        if ctx.cancelled:
            return None

        ctx.line(0)
        ctx.line(1)
        buckets: List[List[int]] = [[] for _ in range(BASE)]

        ctx.line(2)
        for i, value in enumerate(array):
            digit = (value // exp) % BASE
            buckets[digit].append(value)
            ctx.line(3)
            ctx.mark(i, ColorTag.COMPARING)
            ctx.say(f"Pass {pass_no + 1}: {value} has digit {digit}, goes to bucket {digit}.")
            if not ctx.pause(250):
                return None
            ctx.unmark(i)

        before = list(array)
        ctx.line(4)
        k = 0
        for bucket in buckets:
            for value in bucket:
                if ctx.cancelled:
                    array[:] = before
                    return None
                array[k] = value
                ctx.writes += 1
                ctx.show(array)
                ctx.mark(k, ColorTag.SELECTED)
                ctx.say(f"Pass {pass_no + 1}: write {value} back at index {k}.")
                k += 1
                if not ctx.pause(250):
                    array[:] = before
                    return None

        ctx.progress(pass_no + 1, passes)
        exp *= BASE

    finish_sorted(
        array, ctx,
        "Radix Sort: O(d * (n + 10)) time for d digits, O(n) extra space, stable.",
    )
    return None
