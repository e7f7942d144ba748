"""
algorithms/__init__.py — Heap Operation Registry
=================================================
Single source of truth for every heap operation the visualizer can
animate.

    from algorithms import REGISTRY, get_operation

REGISTRY is a dict:
    {
        "insert":     OperationInfo(key, label, fn, pseudocode, …),
        "delete_min": OperationInfo(…),
    }

Adding an operation is: write the trace generator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from algorithms.step import (
    Step, StepKind, StepTrace, TraceBuilder,
    Push, Compare, Swap, Pop, RemoveRoot, Done,
)
from algorithms.insert     import generate_insert,     PSEUDOCODE as _ins_pc, pseudocode_line as _ins_line
from algorithms.delete_min import generate_delete_min, PSEUDOCODE as _del_pc, pseudocode_line as _del_line


# ---------------------------------------------------------------------------
# OperationInfo — metadata card for each operation
# ---------------------------------------------------------------------------
@dataclass
class OperationInfo:
    key:             str                        # registry key, e.g. "insert"
    label:           str                        # human label, e.g. "Insert"
    fn:              Callable[..., StepTrace]   # the trace generator
    pseudocode:      List[str]                  # lines for the side-panel
    line_for:        Callable[[int, Step], int] # (step_index, step) -> pseudocode line
    takes_value:     bool = False               # insert needs a value, delete-min doesn't
    complexity_time: str  = ""
    description:     str  = ""
    tags:            List[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, OperationInfo] = {

    "insert": OperationInfo(
        key="insert", label="Insert", fn=generate_insert,
        pseudocode=_ins_pc, line_for=_ins_line, takes_value=True,
        complexity_time="O(log n)",
        description="Append the value (O(1)), then bubble it up while it is smaller than its parent.",
        tags=["bubble-up"],
    ),

    "delete_min": OperationInfo(
        key="delete_min", label="Delete Min", fn=generate_delete_min,
        pseudocode=_del_pc, line_for=_del_line,
        complexity_time="O(log n)",
        description="Swap root with last, pop the last (O(1)), then sift the new root down.",
        tags=["bubble-down", "sift-down"],
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_operation(key: str) -> Optional[OperationInfo]:
    """Return OperationInfo by key, or None."""
    return REGISTRY.get(key)


def list_operations() -> List[OperationInfo]:
    """Return all registered operations in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "OperationInfo",
    "REGISTRY",
    "get_operation",
    "list_operations",
    "generate_insert",
    "generate_delete_min",
    "Step",
    "StepKind",
    "StepTrace",
    "TraceBuilder",
    "Push",
    "Compare",
    "Swap",
    "Pop",
    "RemoveRoot",
    "Done",
]
