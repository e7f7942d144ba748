"""Tests for engine.session — the collaborator-facing façade."""

import pytest

from engine import HeapSession, HighlightKind, PlaybackState, PolledScheduler


@pytest.fixture
def session(clock):
    return HeapSession(scheduler=PolledScheduler(clock), auto_play=False, seed=3)


def finish(session):
    while session.controller.state is not PlaybackState.IDLE:
        session.step()


class TestInsert:

    def test_insert_loads_trace(self, session) -> None:
        assert session.insert(5) is True
        assert session.snapshot.heap == (5,)
        assert session.snapshot.highlight.kind is HighlightKind.PUSH
        assert session.controller.state is PlaybackState.PAUSED

    def test_numeric_string_is_accepted(self, session) -> None:
        assert session.insert("7") is True
        assert session.controller.committed_heap == [7]

    @pytest.mark.parametrize("raw", ["abc", "", None, True, float("nan"), [3]])
    def test_non_numeric_is_silent_noop(self, session, raw) -> None:
        assert session.insert(raw) is False
        assert session.last_trace is None
        assert session.snapshot.heap == ()
        assert session.controller.state is PlaybackState.IDLE

    @pytest.mark.parametrize("raw", [10 ** 400, "1" + "0" * 400, "1e400"])
    def test_value_past_float_range_is_silent_noop(self, session, raw) -> None:
        assert session.insert(raw) is False
        assert session.last_trace is None
        assert session.controller.committed_heap == []

    def test_next_operation_starts_from_committed_heap(self, session) -> None:
        session.insert(5)
        session.insert(3)      # first trace never played out
        finish(session)
        assert session.snapshot.heap == (3, 5)

    def test_insert_random_in_range(self, session) -> None:
        values = [session.insert_random() for _ in range(30)]
        assert all(0 <= v <= 99 for v in values)
        assert sorted(session.controller.committed_heap) == sorted(values)

    def test_insert_random_is_seeded(self, clock) -> None:
        a = HeapSession(scheduler=PolledScheduler(clock), auto_play=False, seed=11)
        b = HeapSession(scheduler=PolledScheduler(clock), auto_play=False, seed=11)
        assert [a.insert_random() for _ in range(5)] == [b.insert_random() for _ in range(5)]


class TestDeleteMin:

    def test_empty_heap_is_noop(self, session) -> None:
        assert session.delete_min() is False
        assert session.controller.state is PlaybackState.IDLE
        assert session.last_trace.is_empty

    def test_removes_minimum(self, session) -> None:
        for v in (4, 1, 3):
            session.insert(v)
        assert session.delete_min() is True
        finish(session)
        assert sorted(session.snapshot.heap) == [3, 4]
        assert session.snapshot.heap[0] == 3


class TestPlayback:

    def test_auto_play(self, clock) -> None:
        sched = PolledScheduler(clock)
        s = HeapSession(scheduler=sched, auto_play=True)
        s.insert(1)
        assert s.snapshot.is_playing
        assert sched.live_handles == 1

    def test_auto_play_skips_empty_trace(self, clock) -> None:
        sched = PolledScheduler(clock)
        s = HeapSession(scheduler=sched, auto_play=True)
        s.delete_min()
        assert not s.snapshot.is_playing
        assert sched.live_handles == 0

    def test_pump_drives_timer(self, clock) -> None:
        s = HeapSession(scheduler=PolledScheduler(clock), auto_play=True, interval_ms=100)
        s.insert(2)
        s.insert(1)
        clock.advance(100)
        assert s.pump() == 1
        assert s.controller.cursor == 2

    @pytest.mark.parametrize("level,ms", [(1, 1200), (5, 711), (10, 100), (0, 1200), (42, 100)])
    def test_set_speed_level(self, session, level, ms) -> None:
        assert session.set_speed_level(level) == ms
        assert session.controller.interval_ms == ms

    def test_set_speed_preset(self, session) -> None:
        assert session.set_speed_preset("fast") == 344

    def test_play_pause_step_forwarded(self, session) -> None:
        session.insert(2)
        session.insert(1)
        session.play()
        assert session.snapshot.is_playing
        session.pause()
        assert not session.snapshot.is_playing
        session.step()
        assert session.controller.cursor == 2
        session.toggle_play()
        assert session.snapshot.is_playing
        session.close()
        assert not session.controller.has_timer

    def test_reset(self, session) -> None:
        session.insert(1)
        session.reset()
        assert session.snapshot.heap == ()
        assert session.last_trace is None
        assert session.controller.committed_heap == []


def test_state_payload(session) -> None:
    session.insert(2)
    session.insert(1)
    state = session.state()
    assert state["heap"] == [2, 1]
    assert state["highlight"] == {"kind": "push", "indices": [1]}
    assert state["state"] == "paused"
    assert state["cursor"] == 1
    assert state["total_steps"] == 4
    assert state["operation"] == "insert"
    assert state["trace"]["metrics"]["swaps"] == 1
    assert state["is_playing"] is False
    assert state["metrics"] == state["trace"]["metrics"]
    assert state["metrics"]["compares"] == 1


def test_state_payload_before_any_operation(session) -> None:
    state = session.state()
    assert state["trace"] is None
    assert state["metrics"] is None
