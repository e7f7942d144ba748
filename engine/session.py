"""
session.py — Heap Visualizer Session
=====================================
What the input widgets talk to.  Turns UI actions into traces and hands
them to the PlaybackController:

    insert(value)       → generate_insert(committed heap, value) → load
    insert_random()     → same, with a random integer in [0, 99]
    delete_min()        → generate_delete_min(committed heap)    → load
    play / pause / step → forwarded
    set_speed_level(n)  → level_to_interval(n) → set_speed

New operations always start from the controller's committed heap (the
final snapshot of the last loaded trace), never from a half-played
intermediate array.
"""

import logging
import random
from typing import Any, Dict, Optional

from heap import coerce_value
from algorithms import get_operation
from algorithms.step import StepTrace
from engine.controller import PlaybackController, PlaybackSnapshot
from engine.recorder import export_trace
from engine.speed import DEFAULT_INTERVAL_MS, level_to_interval, preset_interval
from engine.timers import PolledScheduler, Scheduler

_logger = logging.getLogger(__name__)


class HeapSession:
    """
    Attributes:
        controller : the PlaybackController driving the animation.
        auto_play  : start playback right after loading an operation.
        last_trace : most recently generated trace (may be empty).
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        interval_ms: float = DEFAULT_INTERVAL_MS,
        auto_play: bool = True,
        random_min: int = 0,
        random_max: int = 99,
        seed: Optional[int] = None,
    ):
        self.scheduler  = scheduler or PolledScheduler()
        self.controller = PlaybackController(self.scheduler, interval_ms=interval_ms)
        self.auto_play  = auto_play
        self.random_min = random_min
        self.random_max = random_max
        self.last_trace: Optional[StepTrace] = None
        self._rng = random.Random(seed)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def insert(self, value: Any) -> bool:
        """Insert `value`; non-numeric input is ignored.  Returns True if accepted."""
        number = coerce_value(value)
        if number is None:
            _logger.debug("insert: ignoring non-numeric value %r", value)
            return False
        self._run("insert", number)
        return True

    def insert_random(self) -> int:
        value = self._rng.randint(self.random_min, self.random_max)
        self._run("insert", value)
        return value

    def delete_min(self) -> bool:
        """Returns False when the heap was empty (nothing to animate)."""
        trace = self._run("delete_min")
        return not trace.is_empty

    def reset(self) -> None:
        self.last_trace = None
        self.controller.reset()

    def _run(self, key: str, *args) -> StepTrace:
        info = get_operation(key)
        trace = info.fn(self.controller.committed_heap, *args)
        self.last_trace = trace
        _logger.info("%s %s: %d steps", key, list(args), len(trace))
        self.controller.load(trace)
        if self.auto_play and not trace.is_empty:
            self.controller.play()
        return trace

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------
    def play(self) -> None:
        self.controller.play()

    def pause(self) -> None:
        self.controller.pause()

    def toggle_play(self) -> None:
        self.controller.toggle_play()

    def step(self) -> None:
        self.controller.step()

    def set_speed_level(self, level: int) -> int:
        interval = level_to_interval(level)
        self.controller.set_speed(interval)
        return interval

    def set_speed_preset(self, name: str) -> int:
        interval = preset_interval(name)
        self.controller.set_speed(interval)
        return interval

    def pump(self) -> int:
        """Fire due timer ticks when running on a PolledScheduler."""
        if isinstance(self.scheduler, PolledScheduler):
            return self.scheduler.poll()
        return 0

    def close(self) -> None:
        self.controller.close()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def snapshot(self) -> PlaybackSnapshot:
        return self.controller.snapshot

    def state(self) -> Dict[str, Any]:
        """JSON-friendly view of everything the renderer needs."""
        ctl   = self.controller
        snap  = ctl.snapshot
        trace = export_trace(ctl.trace) if ctl.trace is not None else None
        return {
            "heap":            list(snap.heap),
            "highlight":       snap.highlight.to_dict(),
            "pseudo_text":     snap.pseudo_text,
            "pseudocode_line": snap.pseudocode_line,
            "is_playing":      snap.is_playing,
            "state":           ctl.state.value,
            "cursor":          ctl.cursor,
            "total_steps":     ctl.total_steps,
            "interval_ms":     ctl.interval_ms,
            "operation":       ctl.trace.operation if ctl.trace is not None else None,
            "trace":           trace,
            "metrics":         trace["metrics"] if trace is not None else None,
        }
