"""
merge_sort.py — Merge Sort
===========================
Top-down merge sort.  Each merge copies the two halves out, then writes
the merged sequence back one slot per step boundary.

If a merge is cancelled halfway, the not-yet-written remainder of both
halves is copied back without any visual updates, so the array stays a
permutation of the input.
"""

from typing import List, Optional

from engine.render import ColorTag
from algorithms.common import finish_sorted


PSEUDOCODE: List[str] = [
    "mergeSort(array, left, right)",             # 0
    "    if left < right",                       # 1
    "        mid = (left + right) / 2",          # 2
    "        mergeSort(array, left, mid)",       # 3
    "        mergeSort(array, mid + 1, right)",  # 4
    "        merge(array, left, mid, right)",    # 5
    "merge: take the smaller head of L and R",   # 6
    "       copy whatever remains",              # 7
]


def merge_sort(array: List[int], target: Optional[int], ctx) -> None:
    ctx.show(array)
    ctx.say("Starting Merge Sort: split in halves, sort each, merge them back.")
    if not ctx.pause(800):
        return None

    if not _merge_sort(array, 0, len(array) - 1, ctx, [0]):
        return None

    finish_sorted(array, ctx, "Merge Sort: O(n log n) in every case, O(n) extra space, stable.")
    return None


def _merge_sort(array: List[int], left: int, right: int, ctx, merged: List[int]) -> bool:
    if ctx.cancelled:
        return False
    if left >= right:
        return True

    mid = (left + right) // 2
    ctx.line(2)
    ctx.mark_range(left, right + 1, ColorTag.ACTIVE)
    ctx.say(f"Split [{left}..{right}] into [{left}..{mid}] and [{mid + 1}..{right}].")
    if not ctx.pause(500):
        return False

    ctx.line(3)
    if not _merge_sort(array, left, mid, ctx, merged):
        return False
    ctx.line(4)
    if not _merge_sort(array, mid + 1, right, ctx, merged):
        return False
    ctx.line(5)
    if not _merge(array, left, mid, right, ctx):
        return False

    merged[0] += 1
    ctx.progress(merged[0], len(array) - 1)
    return True


def _merge(array: List[int], left: int, mid: int, right: int, ctx) -> bool:
    lo = array[left:mid + 1]
    hi = array[mid + 1:right + 1]
    i = j = 0
    k = left

    ctx.mark_range(left, mid + 1, ColorTag.ACTIVE)
    ctx.mark_range(mid + 1, right + 1, ColorTag.COMPARING)
    ctx.say(f"Merge {lo} and {hi}.")
    if not ctx.pause(500):
        return False

    while i < len(lo) or j < len(hi):
        if ctx.cancelled:
            array[k:right + 1] = lo[i:] + hi[j:]
            return False

        if i < len(lo) and j < len(hi):
            ctx.comparisons += 1
            ctx.line(6)
            take_lo = lo[i] <= hi[j]
            msg = f"Compare {lo[i]} and {hi[j]}: take {lo[i] if take_lo else hi[j]}."
        else:
            ctx.line(7)
            take_lo = i < len(lo)
            msg = f"Copy remaining {lo[i] if take_lo else hi[j]}."

        if take_lo:
            array[k] = lo[i]
            i += 1
        else:
            array[k] = hi[j]
            j += 1
        ctx.writes += 1
        k += 1

        ctx.show(array)
        ctx.mark_range(left, k, ColorTag.SELECTED)
        ctx.say(msg)
        if not ctx.pause(300):
            array[k:right + 1] = lo[i:] + hi[j:]
            return False

    return True
