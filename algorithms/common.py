"""
common.py — Shared Closing Sequences
=====================================
Small helpers several algorithm modules end with.  Kept separate so every
sort finishes the same way: the final sweep is the ONLY place a sort
paints a slot with ColorTag.SORTED, one highlight per element.
"""

from typing import List

from engine.render import ColorTag


SWEEP_DELAY = 50


def finish_sorted(array: List[int], ctx, summary: str = "") -> bool:
    """Repaint the final array, sweep every slot to SORTED, narrate.  False if cancelled."""
    if ctx.cancelled:
        return False
    ctx.show(array)
    for i in range(len(array)):
        ctx.mark(i, ColorTag.SORTED)
        if not ctx.pause(SWEEP_DELAY):
            return False
    ctx.progress(1, 1)
    ctx.say(f"Sorting complete! All {len(array)} elements are in order.")
    if summary:
        if not ctx.pause(800):
            return False
        ctx.say(summary)
    return True


def swap(array: List[int], i: int, j: int, ctx) -> None:
    """Swap two slots and count both writes."""
    array[i], array[j] = array[j], array[i]
    ctx.writes += 2
