"""
highlight.py — Step → Highlight & Pseudo Text
==============================================
Pure mapping, no state.  For each Step the renderer needs two things:

    • a HighlightDescriptor  – which array slots to emphasise and how
    • a one-line description – what is being compared / swapped and
                               what happens next

    compare(a, b)       → {compare,    [a, b]}
    swap(a, b)          → {swap,       [a, b]}
    push(i)             → {push,       [i]}
    pop(i)              → {pop,        [i]}
    removeRoot(r, l)    → {removeRoot, [r, l]}
    done                → {done,       []}
    (nothing / cleared) → {none,       []}
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from heap import parent
from algorithms.step import Step, Push, Compare, Swap, Pop, RemoveRoot, Done


class HighlightKind(Enum):
    NONE        = "none"
    COMPARE     = "compare"
    SWAP        = "swap"
    PUSH        = "push"
    POP         = "pop"
    REMOVE_ROOT = "removeRoot"
    DONE        = "done"


@dataclass(frozen=True)
class HighlightDescriptor:
    kind:    HighlightKind   = HighlightKind.NONE
    indices: Tuple[int, ...] = ()

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "indices": list(self.indices)}


NO_HIGHLIGHT = HighlightDescriptor()


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------
def highlight_for(step: Optional[Step]) -> HighlightDescriptor:
    if isinstance(step, Compare):
        return HighlightDescriptor(HighlightKind.COMPARE, (step.a, step.b))
    if isinstance(step, Swap):
        return HighlightDescriptor(HighlightKind.SWAP, (step.a, step.b))
    if isinstance(step, Push):
        return HighlightDescriptor(HighlightKind.PUSH, (step.index,))
    if isinstance(step, Pop):
        return HighlightDescriptor(HighlightKind.POP, (step.removed_index,))
    if isinstance(step, RemoveRoot):
        return HighlightDescriptor(HighlightKind.REMOVE_ROOT, (step.root, step.last))
    if isinstance(step, Done):
        return HighlightDescriptor(HighlightKind.DONE, ())
    return NO_HIGHLIGHT


def _is_bubble_up(step: Compare) -> bool:
    # bubble-down compares a node with one of its children, never its parent
    return step.a > 0 and step.b == parent(step.a)


def describe(step: Optional[Step]) -> str:
    """Human-readable line for the explanation box."""
    if step is None:
        return ""
    h = step.heap

    if isinstance(step, Push):
        return f"Push {h[step.index]} at index {step.index} (end of the array)."

    if isinstance(step, Compare):
        a, b = step.a, step.b
        if _is_bubble_up(step):
            if h[a] < h[b]:
                follow = f"{h[a]} < {h[b]}, swap with the parent next."
            else:
                follow = f"{h[a]} >= {h[b]}, heap order holds, stop."
            return f"Compare heap[{a}] = {h[a]} with its parent heap[{b}] = {h[b]}: {follow}"
        if h[b] < h[a]:
            follow = f"{h[b]} < {h[a]}, swap with the child next."
        else:
            follow = f"{h[b]} >= {h[a]}, heap order holds, stop."
        return f"Compare heap[{a}] = {h[a]} with its smaller child heap[{b}] = {h[b]}: {follow}"

    if isinstance(step, Swap):
        return f"Swap heap[{step.a}] and heap[{step.b}]: now {h[step.a]} and {h[step.b]}."

    if isinstance(step, Pop):
        return f"Pop index {step.removed_index}: the old minimum leaves the heap."

    if isinstance(step, RemoveRoot):
        if step.root == step.last:
            return f"Remove root {h[step.root]}: it is the only element."
        return (
            f"Remove root {h[step.root]}: exchange it with the last element "
            f"heap[{step.last}] = {h[step.last]}."
        )

    if isinstance(step, Done):
        return "Done: heap property restored."

    return ""


def map_step(step: Optional[Step]) -> Tuple[HighlightDescriptor, str]:
    """(highlight, pseudo_text) for one step."""
    return highlight_for(step), describe(step)
