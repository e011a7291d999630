"""
heap_sort.py — Heap Sort
=========================
Build a max-heap in place, then repeatedly swap the root to the end of the
shrinking heap and sift the new root down.  Only swaps touch the array,
so every step boundary sees a permutation of the input.
"""

from typing import List, Optional

from engine.render import ColorTag
from algorithms.common import finish_sorted, swap


PSEUDOCODE: List[str] = [
    "for i = n/2 - 1 down to 0",                 # 0
    "    heapify(array, n, i)",                  # 1
    "for end = n-1 down to 1",                   # 2
    "    swap array[0] and array[end]",          # 3
    "    heapify(array, end, 0)",                # 4
    "heapify: largest of root, left, right",     # 5
    "    if largest != root: swap, continue down",  # 6
]


def heap_sort(array: List[int], target: Optional[int], ctx) -> None:
    n = len(array)

    ctx.show(array)
    ctx.say("Starting Heap Sort: build a max-heap, then pull the maximum out n times.")
    if not ctx.pause(800):
        return None

    ctx.line(0)
    for i in range(n // 2 - 1, -1, -1):
        if ctx.cancelled:
            return None
        ctx.line(1)
        if not _sift_down(array, n, i, ctx):
            return None

    ctx.say("Max-heap built: the largest element is at the root (index 0).")
    if not ctx.pause(600):
        return None

    for end in range(n - 1, 0, -1):
        if ctx.cancelled:
            return None
        ctx.line(3)
        swap(array, 0, end, ctx)
        ctx.show(array)
        ctx.mark_range(end, n, ColorTag.ACTIVE)
        ctx.say(f"Move max {array[end]} to index {end}; heap shrinks to {end} elements.")
        ctx.progress(n - end, n - 1)
        if not ctx.pause(600):
            return None

        ctx.line(4)
        if not _sift_down(array, end, 0, ctx):
            return None

    finish_sorted(array, ctx, "Heap Sort: O(n log n) in every case with O(1) extra space.")
    return None


def _sift_down(array: List[int], size: int, root: int, ctx) -> bool:
    while True:
        if ctx.cancelled:
            return False

        largest = root
        left    = 2 * root + 1
        right   = left + 1

        ctx.line(5)
        ctx.mark(root, ColorTag.SELECTED)
        if left < size:
            ctx.comparisons += 1
            ctx.mark(left, ColorTag.COMPARING)
            if array[left] > array[largest]:
                largest = left
        if right < size:
            ctx.comparisons += 1
            ctx.mark(right, ColorTag.COMPARING)
            if array[right] > array[largest]:
                largest = right

        ctx.say(f"Heapify at index {root}: largest of the family is {array[largest]}.")
        if not ctx.pause(300):
            return False

        if largest == root:
            ctx.unmark(root)
            if left < size:
                ctx.unmark(left)
            if right < size:
                ctx.unmark(right)
            return True

        ctx.line(6)
        swap(array, root, largest, ctx)
        ctx.show(array)
        ctx.mark_range(size, len(array), ColorTag.ACTIVE)
        root = largest
