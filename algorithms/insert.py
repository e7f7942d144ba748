"""
insert.py — Min-Heap Insert (bubble-up)
========================================
Builds the full StepTrace for inserting one value:
  1. Append the value at the end  →  PUSH
  2. Compare it with its parent   →  COMPARE (always emitted)
  3. Smaller than the parent?     →  SWAP and move up, else stop
  4. Reached the root / stopped   →  DONE

Pure: the input heap is copied, never touched.  Same input, same trace.
"""

from typing import Dict, List, Sequence

from heap import parent
from algorithms.step import StepKind, StepTrace, TraceBuilder


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = pseudocode line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def insert(heap, value):",                     # 0
    "    heap.append(value)",                       # 1
    "    i ← len(heap) - 1",                        # 2
    "    while i > 0:",                             # 3
    "        p ← (i - 1) // 2",                     # 4
    "        if heap[i] < heap[p]:",                # 5
    "            swap(heap[i], heap[p])",           # 6
    "            i ← p",                            # 7
    "        else: break",                          # 8
    "    return heap",                              # 9
]

STEP_LINES: Dict[StepKind, int] = {
    StepKind.PUSH:    1,
    StepKind.COMPARE: 5,
    StepKind.SWAP:    6,
    StepKind.DONE:    9,
}


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def generate_insert(heap: Sequence, value) -> StepTrace:
    """
    Args:
        heap  : Starting snapshot (list, tuple or HeapState).
        value : Number to insert.

    Returns:
        StepTrace – push, then compare/swap pairs up the tree, then done.
    """
    tb = TraceBuilder("insert", heap)

    tb.arr.append(value)
    i = len(tb.arr) - 1
    tb.push(i)

    while i > 0:
        p = parent(i)
        tb.compare(i, p)
        if tb.arr[i] < tb.arr[p]:
            tb.exchange(i, p)
            tb.swap(i, p)
            i = p
        else:
            break

    tb.done()
    return tb.build()


def pseudocode_line(step_index: int, step) -> int:
    """Line of PSEUDOCODE that `step` illustrates."""
    return STEP_LINES.get(step.kind, 0)
