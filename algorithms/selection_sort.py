"""
selection_sort.py — Selection Sort
===================================
Repeatedly selects the minimum of the unsorted suffix and swaps it to the
front.  At most one swap per pass, so the array is a permutation of the
input at every step boundary.
"""

from typing import List, Optional

from engine.render import ColorTag
from algorithms.common import finish_sorted, swap


PSEUDOCODE: List[str] = [
    "for i = 0 to n-2",                          # 0
    "    min = i",                               # 1
    "    for j = i+1 to n-1",                    # 2
    "        if array[j] < array[min]",          # 3
    "            min = j",                       # 4
    "    swap array[i] and array[min]",          # 5
]


def selection_sort(array: List[int], target: Optional[int], ctx) -> None:
    n = len(array)

    ctx.show(array)
    ctx.say("Starting Selection Sort: find the minimum, move it to the front, repeat.")
    if not ctx.pause(800):
        return None

    for i in range(n - 1):
        if ctx.cancelled:
            return None

        min_idx = i
        ctx.line(1)
        ctx.mark(i, ColorTag.SELECTED)
        ctx.say(f"Pass {i + 1}: assume {array[i]} at index {i} is the minimum.")
        if not ctx.pause(500):
            return None

        for j in range(i + 1, n):
            if ctx.cancelled:
                return None
            ctx.comparisons += 1
            ctx.line(3)
            ctx.mark(j, ColorTag.COMPARING)
            ctx.say(f"Compare {array[j]} with current minimum {array[min_idx]}.")
            if not ctx.pause(400):
                return None

            if array[j] < array[min_idx]:
                ctx.unmark(min_idx)
                min_idx = j
                ctx.line(4)
                ctx.mark(j, ColorTag.SELECTED)
                ctx.say(f"New minimum: {array[j]} at index {j}.")
                if not ctx.pause(400):
                    return None
            else:
                ctx.unmark(j)

        ctx.line(5)
        if min_idx != i:
            swap(array, i, min_idx, ctx)
            ctx.show(array)
            ctx.say(f"Swap {array[min_idx]} and {array[i]}: index {i} now holds {array[i]}.")
        else:
            ctx.say(f"{array[i]} is already in place at index {i}.")
        ctx.mark_range(0, i + 1, ColorTag.ACTIVE)
        ctx.progress(i + 1, n - 1)
        if not ctx.pause(600):
            return None

    finish_sorted(array, ctx, "Selection Sort: O(n^2) comparisons but at most n-1 swaps.")
    return None
