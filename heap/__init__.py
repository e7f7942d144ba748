"""
heap/
-----
Core data layer.  Public API:

    from heap import HeapState
    from heap import parent, left, right, is_number
"""

from heap.state import HeapState, parent, left, right, is_number, coerce_value

__all__ = [
    "HeapState",
    "parent",
    "left",
    "right",
    "is_number",
    "coerce_value",
]
