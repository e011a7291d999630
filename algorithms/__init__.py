"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "insertion_sort": AlgoInfo(key, label, fn, pseudocode, tags, is_search, …),
        …
    }

Every fn has the same signature, fn(array, target, ctx):
  - sorts mutate `array` in place and return None
  - searches return the index of the target, or None
  - `ctx` is an engine.runner.RunContext (visual helpers, counters, pause)

Adding an algorithm means: write the function, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.insertion_sort import insertion_sort as _insertion, PSEUDOCODE as _ins_pc
from algorithms.selection_sort import selection_sort as _selection, PSEUDOCODE as _sel_pc
from algorithms.bubble_sort    import bubble_sort    as _bubble,    PSEUDOCODE as _bub_pc
from algorithms.quick_sort     import quick_sort     as _quick,     PSEUDOCODE as _qs_pc
from algorithms.merge_sort     import merge_sort     as _merge,     PSEUDOCODE as _ms_pc
from algorithms.heap_sort      import heap_sort      as _heap,      PSEUDOCODE as _hs_pc
from algorithms.counting_sort  import counting_sort  as _counting,  PSEUDOCODE as _cs_pc
from algorithms.radix_sort     import radix_sort     as _radix,     PSEUDOCODE as _rs_pc
from algorithms.linear_search  import linear_search  as _linear,    PSEUDOCODE as _ls_pc
from algorithms.binary_search  import binary_search  as _binary,    PSEUDOCODE as _bs_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "quick_sort"
    label:             str                    # human label, e.g. "Quick Sort"
    fn:                Callable               # fn(array, target, ctx)
    pseudocode:        List[str]              # lines for the side-panel
    tags:              List[str] = field(default_factory=list)   # e.g. ["comparison", "stable"]
    is_search:         bool     = False       # needs a target, returns an index
    requires_sorted:   bool     = False       # input must already be ascending
    non_negative_only: bool     = False       # radix style
    bounded_range:     bool     = False       # max - min + 1 capped by config.MAX_VALUE_RANGE
    complexity_time:   str      = ""          # e.g. "O(n log n)"
    complexity_space:  str      = ""          # e.g. "O(log n)"
    description:       str      = ""          # one-liner for the UI card

    def to_dict(self) -> dict:
        return {
            "key":               self.key,
            "label":             self.label,
            "pseudocode":        list(self.pseudocode),
            "tags":              list(self.tags),
            "is_search":         self.is_search,
            "requires_sorted":   self.requires_sorted,
            "non_negative_only": self.non_negative_only,
            "bounded_range":     self.bounded_range,
            "complexity_time":   self.complexity_time,
            "complexity_space":  self.complexity_space,
            "description":       self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "insertion_sort": AlgoInfo(
        key="insertion_sort", label="Insertion Sort", fn=_insertion, pseudocode=_ins_pc,
        tags=["sort", "comparison", "stable", "in-place"],
        complexity_time="O(n^2)", complexity_space="O(1)",
        description="Grows a sorted prefix by inserting one key at a time.",
    ),

    "selection_sort": AlgoInfo(
        key="selection_sort", label="Selection Sort", fn=_selection, pseudocode=_sel_pc,
        tags=["sort", "comparison", "in-place"],
        complexity_time="O(n^2)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted part and swaps it to the front.",
    ),

    "bubble_sort": AlgoInfo(
        key="bubble_sort", label="Bubble Sort", fn=_bubble, pseudocode=_bub_pc,
        tags=["sort", "comparison", "stable", "in-place"],
        complexity_time="O(n^2)", complexity_space="O(1)",
        description="Swaps adjacent pairs until a full pass makes no swap.",
    ),

    "quick_sort": AlgoInfo(
        key="quick_sort", label="Quick Sort", fn=_quick, pseudocode=_qs_pc,
        tags=["sort", "comparison", "divide-and-conquer", "in-place"],
        complexity_time="O(n log n) avg, O(n^2) worst", complexity_space="O(log n)",
        description="Partitions around a pivot, then sorts each side.",
    ),

    "merge_sort": AlgoInfo(
        key="merge_sort", label="Merge Sort", fn=_merge, pseudocode=_ms_pc,
        tags=["sort", "comparison", "divide-and-conquer", "stable"],
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Sorts both halves, then merges them back together.",
    ),

    "heap_sort": AlgoInfo(
        key="heap_sort", label="Heap Sort", fn=_heap, pseudocode=_hs_pc,
        tags=["sort", "comparison", "in-place"],
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max-heap and repeatedly moves the root to the end.",
    ),

    "counting_sort": AlgoInfo(
        key="counting_sort", label="Counting Sort", fn=_counting, pseudocode=_cs_pc,
        tags=["sort", "non-comparison", "stable"],
        bounded_range=True,
        complexity_time="O(n + k)", complexity_space="O(k)",
        description="Counts occurrences of each value, then writes them back in order.",
    ),

    "radix_sort": AlgoInfo(
        key="radix_sort", label="Radix Sort", fn=_radix, pseudocode=_rs_pc,
        tags=["sort", "non-comparison", "stable"],
        non_negative_only=True,
        complexity_time="O(d * (n + 10))", complexity_space="O(n)",
        description="Stable bucket passes over each decimal digit, least significant first.",
    ),

    "linear_search": AlgoInfo(
        key="linear_search", label="Linear Search", fn=_linear, pseudocode=_ls_pc,
        tags=["search"],
        is_search=True,
        complexity_time="O(n)", complexity_space="O(1)",
        description="Checks every element from left to right.",
    ),

    "binary_search": AlgoInfo(
        key="binary_search", label="Binary Search", fn=_binary, pseudocode=_bs_pc,
        tags=["search", "divide-and-conquer"],
        is_search=True, requires_sorted=True,
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Halves the range of a sorted array on every probe.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
