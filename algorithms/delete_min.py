"""
delete_min.py — Min-Heap Delete-Min (bubble-down)
==================================================
Builds the full StepTrace for removing the root:
  1. Mark root and last slot                 →  REMOVE_ROOT (nothing moved yet)
  2. Single element?  remove it              →  DONE
  3. Exchange root with last                 →  SWAP
  4. Drop the (old root) tail                →  POP
  5. Sift down: pick the smaller child       →  COMPARE (always emitted)
     child smaller than the node?            →  SWAP and move down, else stop
  6. Heap property restored                  →  DONE

Tie-break: the right child only wins on STRICT inequality, so equal
children always resolve to the left one.

An empty heap yields an empty trace: there is nothing to animate.
"""

from typing import Dict, List, Sequence

from heap import left, right
from algorithms.step import StepKind, StepTrace, TraceBuilder


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def delete_min(heap):",                                # 0
    "    if heap is empty: return",                         # 1
    "    last ← len(heap) - 1",                             # 2
    "    swap(heap[0], heap[last])",                        # 3
    "    heap.pop()",                                       # 4
    "    i ← 0",                                            # 5
    "    while left(i) < len(heap):",                       # 6
    "        s ← left(i)",                                  # 7
    "        if right(i) < len(heap) and heap[right(i)] < heap[s]:",  # 8
    "            s ← right(i)",                             # 9
    "        if heap[s] < heap[i]:",                        # 10
    "            swap(heap[i], heap[s]); i ← s",            # 11
    "        else: break",                                  # 12
    "    return heap",                                      # 13
]

STEP_LINES: Dict[StepKind, int] = {
    StepKind.REMOVE_ROOT: 2,
    StepKind.POP:         4,
    StepKind.COMPARE:     10,
    StepKind.DONE:        13,
}


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def generate_delete_min(heap: Sequence) -> StepTrace:
    tb = TraceBuilder("delete_min", heap)
    arr = tb.arr

    if not arr:
        return tb.build()

    last = len(arr) - 1
    tb.remove_root(0, last)

    if last == 0:
        arr.pop()
        tb.done()
        return tb.build()

    tb.exchange(0, last)
    tb.swap(0, last)
    arr.pop()
    tb.pop(last)

    # --- sift down from the root ---
    i = 0
    while True:
        l, r = left(i), right(i)
        if l >= len(arr):
            break
        smaller = l
        if r < len(arr) and arr[r] < arr[l]:
            smaller = r
        tb.compare(i, smaller)
        if arr[smaller] < arr[i]:
            tb.exchange(i, smaller)
            tb.swap(i, smaller)
            i = smaller
        else:
            break

    tb.done()
    return tb.build()


def pseudocode_line(step_index: int, step) -> int:
    """Line of PSEUDOCODE that `step` (at `step_index` in its trace) illustrates."""
    if step.kind is StepKind.SWAP:
        # step 1 is always the root <-> last exchange
        return 3 if step_index == 1 else 11
    return STEP_LINES.get(step.kind, 0)
