"""
quick_sort.py — Quick Sort
===========================
Lomuto partition around the middle element (swapped to the end first, so
already-sorted input does not degrade to quadratic depth).  The smaller
side is sorted recursively and the larger side by looping, which keeps
the recursion depth logarithmic.

Cancellation is checked before every partition and before each recursive
descent; helpers return False to unwind the whole call chain.
"""

from typing import List, Optional

from engine.render import ColorTag
from algorithms.common import finish_sorted, swap


PSEUDOCODE: List[str] = [
    "quickSort(array, low, high)",               # 0
    "    if low < high",                         # 1
    "        p = partition(array, low, high)",   # 2
    "        quickSort(array, low, p - 1)",      # 3
    "        quickSort(array, p + 1, high)",     # 4
    "partition(array, low, high)",               # 5
    "    pivot = array[high]",                   # 6
    "    i = low - 1",                           # 7
    "    for j = low to high - 1",               # 8
    "        if array[j] < pivot",               # 9
    "            i = i + 1; swap array[i], array[j]",  # 10
    "    swap array[i+1], array[high]",          # 11
    "    return i + 1",                          # 12
]

ANIMATION_DELAY = 500


def quick_sort(array: List[int], target: Optional[int], ctx) -> None:
    ctx.show(array)
    ctx.say("Starting Quick Sort: partition around a pivot, then sort each side.")
    if not ctx.pause(800):
        return None

    if not _sort(array, 0, len(array) - 1, ctx, [0]):
        return None

    finish_sorted(array, ctx, "Quick Sort: O(n log n) on average, O(log n) extra space.")
    return None


def _sort(array: List[int], low: int, high: int, ctx, placed: List[int]) -> bool:
    while low < high:
        if ctx.cancelled:
            return False

        ctx.line(1)
        ctx.mark_range(low, high + 1, ColorTag.ACTIVE)
        ctx.say(f"Sorting subarray [{low}..{high}].")
        if not ctx.pause(ANIMATION_DELAY):
            return False

        ctx.line(2)
        p = _partition(array, low, high, ctx)
        if p is None:
            return False

        ctx.mark(p, ColorTag.PIVOT)
        ctx.say(
            f"Pivot {array[p]} placed at index {p}. "
            f"Smaller elements are to its left, larger to its right."
        )
        placed[0] += 1
        ctx.progress(placed[0], len(array))
        if not ctx.pause(ANIMATION_DELAY):
            return False

        if p - low < high - p:
            ctx.line(3)
            if not _sort(array, low, p - 1, ctx, placed):
                return False
            low = p + 1
        else:
            ctx.line(4)
            if not _sort(array, p + 1, high, ctx, placed):
                return False
            high = p - 1

    if ctx.cancelled:
        return False
    if low == high:
        ctx.say(f"Subarray [{low}..{high}] has one element: nothing to do.")
    return True


def _partition(array: List[int], low: int, high: int, ctx) -> Optional[int]:
    mid = (low + high) // 2
    if mid != high:
        swap(array, mid, high, ctx)
        ctx.show(array)

    pivot = array[high]
    ctx.line(6)
    ctx.mark_range(low, high, ColorTag.ACTIVE)
    ctx.mark(high, ColorTag.PIVOT)
    ctx.say(f"Pivot: {pivot} (middle element, moved to index {high}).")
    if not ctx.pause(ANIMATION_DELAY):
        return None

    ctx.line(7)
    i = low - 1
    for j in range(low, high):
        if ctx.cancelled:
            return None
        ctx.comparisons += 1
        ctx.line(9)
        ctx.mark(j, ColorTag.COMPARING)
        ctx.say(f"Is {array[j]} < pivot {pivot}?")
        if not ctx.pause(ANIMATION_DELAY):
            return None

        if array[j] < pivot:
            i += 1
            ctx.line(10)
            if i != j:
                swap(array, i, j, ctx)
                ctx.show(array)
                ctx.mark(high, ColorTag.PIVOT)
                ctx.say(f"Yes: swap {array[i]} into the smaller-than-pivot region at {i}.")
            else:
                ctx.say(f"Yes: {array[i]} already sits in the smaller-than-pivot region.")
            ctx.mark_range(low, i + 1, ColorTag.SELECTED)
        else:
            ctx.mark(j, ColorTag.ACTIVE)

    ctx.line(11)
    p = i + 1
    if p != high:
        swap(array, p, high, ctx)
    ctx.show(array)
    ctx.line(12)
    return p
