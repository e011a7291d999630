"""
insertion_sort.py — Insertion Sort
===================================
Grows a sorted prefix one element at a time.  Step boundaries:
  1. Pick the next key                →  key marked SELECTED
  2. Each comparison that shifts      →  element marked COMPARING, then shifted
  3. The comparison that stops        →  insertion point found
  4. Key written into its slot        →  sorted prefix marked ACTIVE

A cancel anywhere inside the shift loop writes the key back into the
gap, so the array is always a permutation of the input.
"""

from typing import List, Optional

from engine.render import ColorTag
from algorithms.common import finish_sorted


PSEUDOCODE: List[str] = [
    "for i = 1 to n-1",                        # 0
    "    key = array[i]",                      # 1
    "    j = i - 1",                           # 2
    "    while j >= 0 and array[j] > key",     # 3
    "        array[j+1] = array[j]",           # 4
    "        j = j - 1",                       # 5
    "    array[j+1] = key",                    # 6
]


def insertion_sort(array: List[int], target: Optional[int], ctx) -> None:
    n = len(array)

    ctx.show(array)
    ctx.say("Starting Insertion Sort: the sorted portion grows one element at a time.")
    if not ctx.pause(800):
        return None

    if n > 0:
        ctx.mark(0, ColorTag.ACTIVE)
        ctx.line(0)
        ctx.say(f"First element [{array[0]}] on its own is already sorted.")
        if not ctx.pause(800):
            return None

    for i in range(1, n):
        if ctx.cancelled:
            return None

        key = array[i]
        ctx.line(1)
        ctx.mark(i, ColorTag.SELECTED)
        ctx.say(f"Selected key: {key} (element at index {i}).")
        if not ctx.pause(600):
            return None

        ctx.line(2)
        j = i - 1
        shifted = False

        while j >= 0:
            ctx.comparisons += 1
            ctx.line(3)
            ctx.mark(j, ColorTag.COMPARING)
            if array[j] <= key:
                ctx.say(f"Comparing: {array[j]} > {key}? No, found the insertion point.")
                if not ctx.pause(600):
                    if shifted:
                        array[j + 1] = key
                        ctx.writes += 1
                    return None
                break

            ctx.say(f"Comparing: {array[j]} > {key}? Yes, shift {array[j]} from {j} to {j + 1}.")
            array[j + 1] = array[j]
            ctx.writes += 1
            ctx.line(4)
            ctx.show(array)
            ctx.mark(j + 1, ColorTag.COMPARING)
            if not ctx.pause(500):
                array[j] = key
                ctx.writes += 1
                return None

            j -= 1
            shifted = True
            ctx.line(5)

        array[j + 1] = key
        ctx.writes += 1

        ctx.line(6)
        ctx.show(array)
        ctx.mark_range(0, i + 1, ColorTag.ACTIVE)
        ctx.mark(j + 1, ColorTag.SELECTED)
        if shifted:
            ctx.say(f"Inserted {key} at position {j + 1} after shifting larger elements.")
        else:
            ctx.say(f"Inserted {key} at position {j + 1} (no shifting needed).")
        ctx.progress(i, n - 1)
        if not ctx.pause(800):
            return None

    finish_sorted(
        array, ctx,
        "Insertion Sort: O(n^2) time, O(1) space. Efficient for small or nearly sorted arrays.",
    )
    return None
