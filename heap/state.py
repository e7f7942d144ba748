"""
state.py — Array-backed Min-Heap Value
=======================================
The heap the visualizer animates, stored in level order:

    index:     0   1   2   3   4
    value:   [ 0,  1,  2,  7,  3 ]

               0
             /   \
            1     2
           / \
          7   3

Index arithmetic:
    parent(i) = (i - 1) // 2
    left(i)   = 2i + 1
    right(i)  = 2i + 2

HeapState is a VALUE.  It never changes after construction; the step
generators work on a private list copy and emit fresh snapshots.
"""

import math
from numbers import Real
from typing import Iterable, List, Optional, Tuple, Union

Number = Union[int, float]


# ---------------------------------------------------------------------------
# Index helpers
# ---------------------------------------------------------------------------
def parent(i: int) -> int:
    return (i - 1) // 2


def left(i: int) -> int:
    return 2 * i + 1


def right(i: int) -> int:
    return 2 * i + 2


# ---------------------------------------------------------------------------
# Value checks
# ---------------------------------------------------------------------------
def is_number(value) -> bool:
    """
    True for finite real numbers that fit in a float.  bool is rejected
    on purpose; ints beyond float range count as out of range.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def coerce_value(value) -> Optional[Number]:
    """
    Turn raw user input into a heap element, or None if it isn't one.

    Accepts ints, floats and numeric strings ("12", " 3.5 ").  Whole
    floats parsed from text stay floats; ints stay ints.  Anything past
    float range ("1e400", a 400-digit integer) is rejected.
    """
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                return None
    if not is_number(value):
        return None
    return value


# ---------------------------------------------------------------------------
# HeapState
# ---------------------------------------------------------------------------
class HeapState:
    """
    Immutable level-order min-heap snapshot.

    Attributes:
        values : tuple of numbers in array order.

    Supports len(), indexing, iteration and equality against other
    HeapStates, lists and tuples, so tests can write
    ``state == [0, 1, 2]``.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Number] = ()):
        self._values: Tuple[Number, ...] = tuple(values)

    @classmethod
    def from_iterable(cls, values: Iterable[Number]) -> "HeapState":
        """Build a valid heap by inserting one value at a time (bubble-up)."""
        arr: List[Number] = []
        for v in values:
            arr.append(v)
            i = len(arr) - 1
            while i > 0 and arr[i] < arr[parent(i)]:
                p = parent(i)
                arr[i], arr[p] = arr[p], arr[i]
                i = p
        return cls(arr)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def values(self) -> Tuple[Number, ...]:
        return self._values

    @property
    def minimum(self) -> Optional[Number]:
        return self._values[0] if self._values else None

    @property
    def height(self) -> int:
        """Number of levels; 0 for an empty heap."""
        return len(self._values).bit_length()

    def is_empty(self) -> bool:
        return not self._values

    def is_valid(self) -> bool:
        """Min-heap property: heap[i] >= heap[parent(i)] for every i > 0."""
        vals = self._values
        return all(vals[i] >= vals[parent(i)] for i in range(1, len(vals)))

    def children(self, i: int) -> List[int]:
        return [c for c in (left(i), right(i)) if c < len(self._values)]

    def to_list(self) -> List[Number]:
        return list(self._values)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, i):
        return self._values[i]

    def __iter__(self):
        return iter(self._values)

    def __eq__(self, other) -> bool:
        if isinstance(other, HeapState):
            return self._values == other._values
        if isinstance(other, (list, tuple)):
            return self._values == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"HeapState({list(self._values)!r})"
