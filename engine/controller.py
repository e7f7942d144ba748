"""
controller.py — Step-by-Step Playback Controller
=================================================
The PlaybackController is the ONLY object that advances a heap trace.
It owns the trace, the cursor and (at most) one periodic timer handle,
and publishes a PlaybackSnapshot every time something visible changes.

State machine:
    IDLE     →  load(trace)   →  PAUSED   (step 0 already applied)
    PAUSED   →  play()        →  PLAYING
    PLAYING  →  pause()       →  PAUSED
    PLAYING  →  step()        →  PAUSED   (plus exactly one step)
    PLAYING  →  (tick at end) →  IDLE
    PAUSED   →  (step at end) →  IDLE
    any      →  load(empty)   →  IDLE     (published state untouched)

Cursor:
    0 <= cursor <= len(trace), only ever moves forward, reset only by
    load().  `cursor` is the index of the NEXT step to apply.

Timer:
    Every path that stops playback (pause, load, step while playing,
    end of trace, close) cancels the handle; set_speed() cancels before
    creating the replacement.  Two live handles never coexist.

Thread safety:
    None.  Drive it from one thread / one event loop.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from heap import HeapState
from algorithms import get_operation
from algorithms.step import Step, StepTrace
from engine.highlight import HighlightDescriptor, NO_HIGHLIGHT, map_step
from engine.speed import DEFAULT_INTERVAL_MS, clamp_interval
from engine.timers import Scheduler, TimerHandle

_logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class PlaybackState(Enum):
    IDLE    = "idle"
    PAUSED  = "paused"
    PLAYING = "playing"


# ---------------------------------------------------------------------------
# Published tuple
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PlaybackSnapshot:
    """
    What the renderer consumes.

    Attributes:
        heap            : array as of the last applied step.
        highlight       : slots to emphasise.
        pseudo_text     : explanation line for the last applied step.
        is_playing      : True while the timer is running.
        pseudocode_line : line of the operation's pseudocode (-1 if none).
    """

    heap:            Tuple               = ()
    highlight:       HighlightDescriptor = NO_HIGHLIGHT
    pseudo_text:     str                 = ""
    is_playing:      bool                = False
    pseudocode_line: int                 = -1


Listener = Callable[[PlaybackSnapshot], None]


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        state       : Current PlaybackState.
        trace       : Active StepTrace (None before the first load).
        cursor      : Index of the next step to apply.
        interval_ms : Milliseconds between timer ticks.
        snapshot    : Latest published PlaybackSnapshot.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        interval_ms: float = DEFAULT_INTERVAL_MS,
        heap: Tuple = (),
    ):
        self._scheduler = scheduler
        self._timer:     Optional[TimerHandle] = None
        self._listeners: List[Listener]        = []

        self.trace:       Optional[StepTrace] = None
        self.cursor:      int                 = 0
        self.state:       PlaybackState       = PlaybackState.IDLE
        self.interval_ms: int                 = clamp_interval(interval_ms)
        self.snapshot:    PlaybackSnapshot    = PlaybackSnapshot(heap=tuple(heap))

        # heap every new operation starts from
        self._base: HeapState = HeapState(heap)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, trace: StepTrace) -> None:
        """Replace any current trace and show its first step immediately."""
        was_playing = self.state is PlaybackState.PLAYING
        self._cancel_timer()
        if trace.is_empty:
            _logger.debug("load: empty %s trace, nothing to animate", trace.operation)
            self.trace  = None
            self.cursor = 0
            self.state  = PlaybackState.IDLE
            if was_playing:
                self._publish(self.snapshot, is_playing=False)
            return

        self.trace  = trace
        self._base  = trace.final_heap
        self.cursor = 0
        self.state  = PlaybackState.PAUSED
        _logger.debug("load: %s trace with %d steps", trace.operation, len(trace))
        self._advance()

    def close(self) -> None:
        """Teardown: stop the timer for good."""
        self._cancel_timer()
        if self.state is PlaybackState.PLAYING:
            self.state = PlaybackState.PAUSED
            self._publish(self.snapshot, is_playing=False)

    # ------------------------------------------------------------------
    # Play / Pause / Step
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state is PlaybackState.PLAYING or self.at_end:
            return
        self._start_timer()
        self.state = PlaybackState.PLAYING
        self._publish(self.snapshot, is_playing=True)

    def pause(self) -> None:
        was_playing = self.state is PlaybackState.PLAYING
        self._cancel_timer()
        if was_playing or (self.trace is not None and not self.at_end):
            self.state = PlaybackState.PAUSED
        if was_playing:
            self._publish(self.snapshot, is_playing=False)

    def toggle_play(self) -> None:
        if self.state is PlaybackState.PLAYING:
            self.pause()
        else:
            self.play()

    def step(self) -> None:
        """Apply exactly one step; stops auto-play first."""
        if self.state is PlaybackState.PLAYING:
            self._cancel_timer()
            self.state = PlaybackState.PAUSED
        self._advance()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, interval_ms: float) -> None:
        self.interval_ms = clamp_interval(interval_ms)
        if self.state is PlaybackState.PLAYING:
            # restart at the new period; cursor is left alone
            self._cancel_timer()
            self._start_timer()
        _logger.debug("speed: %d ms per step", self.interval_ms)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_playing(self) -> bool:
        return self.state is PlaybackState.PLAYING

    @property
    def total_steps(self) -> int:
        return len(self.trace) if self.trace is not None else 0

    @property
    def at_end(self) -> bool:
        return self.cursor >= self.total_steps

    @property
    def has_timer(self) -> bool:
        return self._timer is not None and self._timer.active

    @property
    def heap(self) -> HeapState:
        return HeapState(self.snapshot.heap)

    @property
    def committed_heap(self) -> HeapState:
        """Heap as it will be once the loaded trace finishes."""
        return self._base

    def reset(self, heap: Tuple = ()) -> None:
        """Drop the trace and publish a fresh heap (used by 'clear')."""
        self._cancel_timer()
        self.trace  = None
        self.cursor = 0
        self.state  = PlaybackState.IDLE
        self._base  = HeapState(heap)
        self._publish(PlaybackSnapshot(heap=tuple(heap)))

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _tick(self) -> None:
        self._advance()

    def _advance(self) -> None:
        """Apply the step at the cursor, or finish if there is none."""
        if self.trace is None or self.at_end:
            self._finish()
            return
        step = self.trace[self.cursor]
        self._apply(self.cursor, step)
        self.cursor += 1

    def _apply(self, index: int, step: Step) -> None:
        highlight, text = map_step(step)
        line = -1
        info = get_operation(self.trace.operation)
        if info is not None:
            line = info.line_for(index, step)
        self._publish(PlaybackSnapshot(
            heap=tuple(step.heap),
            highlight=highlight,
            pseudo_text=text,
            pseudocode_line=line,
        ))

    def _finish(self) -> None:
        self._cancel_timer()
        already_idle = self.state is PlaybackState.IDLE
        self.state = PlaybackState.IDLE
        if already_idle and self.snapshot.highlight == NO_HIGHLIGHT:
            return
        _logger.debug("trace finished at cursor %d", self.cursor)
        self._publish(PlaybackSnapshot(
            heap=self.snapshot.heap,
            highlight=NO_HIGHLIGHT,
            pseudo_text=self.snapshot.pseudo_text,
            pseudocode_line=-1,
        ))

    def _start_timer(self) -> None:
        self._cancel_timer()
        self._timer = self._scheduler.call_every(self.interval_ms, self._tick)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _publish(self, snapshot: PlaybackSnapshot, is_playing: Optional[bool] = None) -> None:
        if is_playing is None:
            is_playing = self.state is PlaybackState.PLAYING
        self.snapshot = PlaybackSnapshot(
            heap=snapshot.heap,
            highlight=snapshot.highlight,
            pseudo_text=snapshot.pseudo_text,
            is_playing=is_playing,
            pseudocode_line=snapshot.pseudocode_line,
        )
        for listener in list(self._listeners):
            listener(self.snapshot)
