"""Tests for algorithms.insert — bubble-up step traces."""

import random

import pytest

from algorithms import Compare, Done, Push, StepKind, Swap, generate_insert
from heap import HeapState


def replay_inserts(values):
    heap = []
    for v in values:
        heap = list(generate_insert(heap, v).final_heap)
    return heap


class TestInsertScenarios:

    def test_into_empty_heap(self) -> None:
        trace = generate_insert([], 5)
        assert list(trace) == [Push(0, (5,)), Done((5,))]
        assert trace.final_heap == [5]

    def test_bubbles_to_root(self) -> None:
        trace = generate_insert([1, 3, 2, 7], 0)
        assert trace.steps == (
            Push(4, (1, 3, 2, 7, 0)),
            Compare(4, 1, (1, 3, 2, 7, 0)),
            Swap(4, 1, (1, 0, 2, 7, 3)),
            Compare(1, 0, (1, 0, 2, 7, 3)),
            Swap(1, 0, (0, 1, 2, 7, 3)),
            Done((0, 1, 2, 7, 3)),
        )
        assert trace.final_heap == [0, 1, 2, 7, 3]

    def test_stops_after_failed_compare(self) -> None:
        trace = generate_insert([1, 3, 2], 5)
        assert trace.kinds() == [StepKind.PUSH, StepKind.COMPARE, StepKind.DONE]
        assert trace[1] == Compare(3, 1, (1, 3, 2, 5))
        assert trace.final_heap == [1, 3, 2, 5]

    def test_equal_to_parent_does_not_swap(self) -> None:
        trace = generate_insert([1, 3], 1)
        assert trace.kinds() == [StepKind.PUSH, StepKind.COMPARE, StepKind.DONE]

    def test_float_values(self) -> None:
        trace = generate_insert([1.5, 2.5], 0.5)
        assert trace.final_heap == [0.5, 2.5, 1.5]

    def test_operation_key(self) -> None:
        assert generate_insert([], 1).operation == "insert"


class TestInsertProperties:

    def test_does_not_mutate_input(self) -> None:
        heap = [1, 3, 2, 7]
        generate_insert(heap, 0)
        assert heap == [1, 3, 2, 7]

    def test_accepts_heap_state(self) -> None:
        trace = generate_insert(HeapState([1, 3, 2, 7]), 0)
        assert trace.final_heap == [0, 1, 2, 7, 3]

    def test_deterministic(self) -> None:
        assert generate_insert([1, 3, 2, 7], 0) == generate_insert([1, 3, 2, 7], 0)

    @pytest.mark.parametrize("seed", range(20))
    def test_random_inserts_keep_invariant(self, seed: int) -> None:
        rng = random.Random(seed)
        values = [rng.randint(-50, 50) for _ in range(rng.randint(1, 40))]
        heap = replay_inserts(values)
        assert HeapState(heap).is_valid()
        assert sorted(heap) == sorted(values)

    @pytest.mark.parametrize("seed", range(10))
    def test_compare_precedes_every_swap(self, seed: int) -> None:
        rng = random.Random(seed)
        heap = replay_inserts([rng.randint(0, 99) for _ in range(30)])
        trace = generate_insert(heap, rng.randint(-10, 99))
        steps = trace.steps
        assert isinstance(steps[0], Push)
        assert isinstance(steps[-1], Done)
        for prev, cur in zip(steps, steps[1:]):
            if isinstance(cur, Swap):
                assert isinstance(prev, Compare)
                assert (prev.a, prev.b) == (cur.a, cur.b)

    def test_trace_length_is_logarithmic(self) -> None:
        heap = list(range(1, 1024))
        trace = generate_insert(heap, 0)
        # push + 10 levels of compare/swap + done
        assert len(trace) == 1 + 2 * 10 + 1
