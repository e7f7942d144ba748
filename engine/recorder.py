"""
recorder.py — Trace Metrics & Export
=====================================
Summarises a StepTrace for the analytics panel and turns it into plain
dicts/lists so the web layer can jsonify it.

Usage:
    metrics = measure(trace)          # the analytics card
    payload = export_trace(trace)     # serialisable snapshot for replay
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from heap import HeapState
from algorithms.step import Step, StepKind, StepTrace, Push, Compare, Swap, Pop, RemoveRoot


# ---------------------------------------------------------------------------
# Metrics dataclass — what the analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class TraceMetrics:
    operation:    str  = ""
    total_steps:  int  = 0
    compares:     int  = 0
    swaps:        int  = 0     # includes the root <-> last exchange of delete-min
    levels_moved: int  = 0     # swaps made while bubbling up / sifting down
    final_size:   int  = 0
    final_height: int  = 0
    heap_valid:   bool = True  # invariant holds on the final snapshot

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def measure(trace: StepTrace) -> TraceMetrics:
    kinds = trace.kinds()
    swaps = kinds.count(StepKind.SWAP)
    levels = swaps
    if StepKind.REMOVE_ROOT in kinds and swaps:
        levels -= 1

    final = trace.final_heap or HeapState()
    return TraceMetrics(
        operation=trace.operation,
        total_steps=len(trace),
        compares=kinds.count(StepKind.COMPARE),
        swaps=swaps,
        levels_moved=levels,
        final_size=len(final),
        final_height=final.height,
        heap_valid=final.is_valid(),
    )


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------
def export_step(step: Step) -> Dict[str, Any]:
    out: Dict[str, Any] = {"type": step.kind.value, "heap": list(step.heap)}
    if isinstance(step, Push):
        out["index"] = step.index
    elif isinstance(step, (Compare, Swap)):
        out["a"], out["b"] = step.a, step.b
    elif isinstance(step, Pop):
        out["removed_index"] = step.removed_index
    elif isinstance(step, RemoveRoot):
        out["root"], out["last"] = step.root, step.last
    return out


def export_trace(trace: StepTrace) -> Dict[str, Any]:
    steps: List[Dict[str, Any]] = [export_step(s) for s in trace]
    return {
        "operation": trace.operation,
        "steps":     steps,
        "metrics":   measure(trace).to_dict(),
    }
