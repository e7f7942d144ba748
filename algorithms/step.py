"""
step.py — Heap Step Variants & Traces
======================================
Every heap operation is turned into a StepTrace: an immutable, ordered
list of Steps.  A Step is a frozen-in-time picture of one primitive
action plus the array as it looks right AFTER that action:

    • Push        – value appended at `index` (always the last slot)
    • Compare     – positions `a` and `b` are being compared (no mutation)
    • Swap        – positions `a` and `b` have just been exchanged
    • Pop         – element formerly at `removed_index` has been discarded
    • RemoveRoot  – start of delete-min, before anything moves
    • Done        – heap property restored

Design decisions:
  - The variants form a CLOSED union (`Step`).  Consumers dispatch on
    the concrete class or on `step.kind`; there is no free-form "info"
    dict to go out of sync.
  - `heap` is always a tuple so a Step can never be mutated by a reader.
  - The generators are the only writers (via TraceBuilder); the
    controller / highlight mapper are pure readers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterator, List, Optional, Sequence, Tuple, Union

from heap import HeapState


# ---------------------------------------------------------------------------
# Step kinds
# ---------------------------------------------------------------------------
class StepKind(Enum):
    PUSH        = "push"
    COMPARE     = "compare"
    SWAP        = "swap"
    POP         = "pop"
    REMOVE_ROOT = "removeRoot"
    DONE        = "done"


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Push:
    index: int
    heap:  Tuple = ()

    kind: ClassVar[StepKind] = StepKind.PUSH

    @property
    def indices(self) -> Tuple[int, ...]:
        return (self.index,)


@dataclass(frozen=True)
class Compare:
    """`a` is the moving node, `b` its parent (bubble-up) or smaller child (bubble-down)."""
    a:    int
    b:    int
    heap: Tuple = ()

    kind: ClassVar[StepKind] = StepKind.COMPARE

    @property
    def indices(self) -> Tuple[int, ...]:
        return (self.a, self.b)


@dataclass(frozen=True)
class Swap:
    a:    int
    b:    int
    heap: Tuple = ()

    kind: ClassVar[StepKind] = StepKind.SWAP

    @property
    def indices(self) -> Tuple[int, ...]:
        return (self.a, self.b)


@dataclass(frozen=True)
class Pop:
    removed_index: int
    heap:          Tuple = ()

    kind: ClassVar[StepKind] = StepKind.POP

    @property
    def indices(self) -> Tuple[int, ...]:
        return (self.removed_index,)


@dataclass(frozen=True)
class RemoveRoot:
    root: int
    last: int
    heap: Tuple = ()

    kind: ClassVar[StepKind] = StepKind.REMOVE_ROOT

    @property
    def indices(self) -> Tuple[int, ...]:
        return (self.root, self.last)


@dataclass(frozen=True)
class Done:
    heap: Tuple = ()

    kind: ClassVar[StepKind] = StepKind.DONE

    @property
    def indices(self) -> Tuple[int, ...]:
        return ()


Step = Union[Push, Compare, Swap, Pop, RemoveRoot, Done]


# ---------------------------------------------------------------------------
# Trace
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class StepTrace:
    """
    Attributes:
        operation : registry key of the operation that produced it
                    ("insert" / "delete_min").
        steps     : the ordered Steps.  Empty only for a no-op operation.
    """

    operation: str
    steps:     Tuple[Step, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, idx: int) -> Step:
        return self.steps[idx]

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    @property
    def is_empty(self) -> bool:
        return not self.steps

    @property
    def final_heap(self) -> Optional[HeapState]:
        """Snapshot after the last step, or None for an empty trace."""
        if not self.steps:
            return None
        return HeapState(self.steps[-1].heap)

    def kinds(self) -> List[StepKind]:
        return [s.kind for s in self.steps]


# ---------------------------------------------------------------------------
# Convenience builder so generators don't have to copy the array by hand
# ---------------------------------------------------------------------------
class TraceBuilder:
    """
    Mutable scratch-pad that generators use to construct a trace.

    Usage inside a generator:
        tb = TraceBuilder("insert", heap)
        tb.arr.append(value)
        tb.push(len(tb.arr) - 1)
        ...
        return tb.build()

    Every emit method snapshots `arr` at the moment of the call.
    """

    def __init__(self, operation: str, heap: Sequence = ()):
        self.operation = operation
        self.arr: List = list(heap)
        self._steps: List[Step] = []

    # -- helpers --
    def exchange(self, i: int, j: int) -> None:
        self.arr[i], self.arr[j] = self.arr[j], self.arr[i]

    def push(self, index: int) -> None:
        self._steps.append(Push(index=index, heap=tuple(self.arr)))

    def compare(self, a: int, b: int) -> None:
        self._steps.append(Compare(a=a, b=b, heap=tuple(self.arr)))

    def swap(self, a: int, b: int) -> None:
        self._steps.append(Swap(a=a, b=b, heap=tuple(self.arr)))

    def pop(self, removed_index: int) -> None:
        self._steps.append(Pop(removed_index=removed_index, heap=tuple(self.arr)))

    def remove_root(self, root: int, last: int) -> None:
        self._steps.append(RemoveRoot(root=root, last=last, heap=tuple(self.arr)))

    def done(self) -> None:
        self._steps.append(Done(heap=tuple(self.arr)))

    def build(self) -> StepTrace:
        return StepTrace(operation=self.operation, steps=tuple(self._steps))
