"""
bubble_sort.py — Bubble Sort
=============================
Adjacent compare-and-swap passes; the largest remaining element bubbles
to the end of each pass.  Stops early after a pass with no swaps.
"""

from typing import List, Optional

from engine.render import ColorTag
from algorithms.common import finish_sorted, swap


PSEUDOCODE: List[str] = [
    "for i = 0 to n-2",                          # 0
    "    for j = 0 to n-i-2",                    # 1
    "        if array[j] > array[j+1]",          # 2
    "            swap array[j] and array[j+1]",  # 3
    "    if no swaps: stop",                     # 4
]


def bubble_sort(array: List[int], target: Optional[int], ctx) -> None:
    n = len(array)

    ctx.show(array)
    ctx.say("Starting Bubble Sort: neighbours swap until the largest value reaches the end.")
    if not ctx.pause(800):
        return None

    for i in range(n - 1):
        if ctx.cancelled:
            return None
        swapped = False
        ctx.line(0)

        for j in range(n - 1 - i):
            if ctx.cancelled:
                return None
            ctx.comparisons += 1
            ctx.line(2)
            ctx.mark(j, ColorTag.COMPARING)
            ctx.mark(j + 1, ColorTag.COMPARING)
            ctx.say(f"Compare {array[j]} and {array[j + 1]}.")
            if not ctx.pause(400):
                return None

            if array[j] > array[j + 1]:
                swap(array, j, j + 1, ctx)
                swapped = True
                ctx.line(3)
                ctx.show(array)
                ctx.mark_range(n - i, n, ColorTag.ACTIVE)
                ctx.mark(j + 1, ColorTag.SELECTED)
                ctx.say(f"{array[j + 1]} > {array[j]}: swapped.")
                if not ctx.pause(400):
                    return None
            else:
                ctx.unmark(j)
                ctx.unmark(j + 1)

        ctx.mark(n - 1 - i, ColorTag.ACTIVE)
        ctx.progress(i + 1, n - 1)
        if not swapped:
            ctx.line(4)
            ctx.say("No swaps in this pass: the array is already sorted.")
            if not ctx.pause(600):
                return None
            break

    finish_sorted(array, ctx, "Bubble Sort: O(n^2) worst case, O(n) on already sorted input.")
    return None
