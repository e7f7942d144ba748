"""
engine/
-------
Playback layer.

    from engine import PlaybackController, HeapSession, map_step
"""

from engine.highlight  import HighlightKind, HighlightDescriptor, NO_HIGHLIGHT, highlight_for, describe, map_step
from engine.timers     import Scheduler, TimerHandle, PolledScheduler, AsyncioScheduler
from engine.speed      import SPEED_PRESETS, level_to_interval, preset_interval, clamp_interval
from engine.controller import PlaybackController, PlaybackState, PlaybackSnapshot
from engine.recorder   import TraceMetrics, measure, export_trace
from engine.session    import HeapSession

__all__ = [
    "HighlightKind",
    "HighlightDescriptor",
    "NO_HIGHLIGHT",
    "highlight_for",
    "describe",
    "map_step",
    "Scheduler",
    "TimerHandle",
    "PolledScheduler",
    "AsyncioScheduler",
    "SPEED_PRESETS",
    "level_to_interval",
    "preset_interval",
    "clamp_interval",
    "PlaybackController",
    "PlaybackState",
    "PlaybackSnapshot",
    "TraceMetrics",
    "measure",
    "export_trace",
    "HeapSession",
]
