"""
timers.py — Periodic Timer Handles
===================================
The playback controller needs exactly one thing from its environment:
"call me every N ms until I cancel".  A Scheduler hands out TimerHandles;
the controller owns at most one at a time.

Two schedulers:

    PolledScheduler   – deadline based; somebody calls poll() from their
                        own loop (the Flask app polls on every request,
                        tests poll with a fake clock).  Overdue ticks are
                        fired one by one, in order, so nothing is skipped.
    AsyncioScheduler  – real periodic timer on an asyncio event loop.

Neither is thread-safe.  Create, cancel and poll from one thread.
"""

import asyncio
import logging
import time
from typing import Callable, List, Optional

_logger = logging.getLogger(__name__)

Callback = Callable[[], None]


# ---------------------------------------------------------------------------
# Handle
# ---------------------------------------------------------------------------
class TimerHandle:
    """
    Attributes:
        interval_ms : period between ticks.
        callback    : fired once per tick.
        active      : False once cancelled; a cancelled handle never fires.
    """

    def __init__(self, interval_ms: float, callback: Callback):
        self.interval_ms: float    = interval_ms
        self.callback:    Callback = callback
        self.active:      bool     = True

    def cancel(self) -> None:
        self.active = False

    def _fire(self) -> None:
        if self.active:
            self.callback()


# ---------------------------------------------------------------------------
# Scheduler interface
# ---------------------------------------------------------------------------
class Scheduler:
    def call_every(self, interval_ms: float, callback: Callback) -> TimerHandle:
        """Run `callback` every `interval_ms` until cancelled.  Subclasses implement this."""
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Polled (deadline) scheduler
# ---------------------------------------------------------------------------
class _PolledHandle(TimerHandle):
    def __init__(self, interval_ms: float, callback: Callback, due: float):
        super().__init__(interval_ms, callback)
        self.due: float = due


class PolledScheduler(Scheduler):
    """
    Args:
        clock : monotonic clock in SECONDS (default time.monotonic).
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.monotonic
        self._handles: List[_PolledHandle] = []

    def call_every(self, interval_ms: float, callback: Callback) -> TimerHandle:
        handle = _PolledHandle(interval_ms, callback, self._clock() + interval_ms / 1000.0)
        self._handles.append(handle)
        return handle

    @property
    def live_handles(self) -> int:
        return sum(1 for h in self._handles if h.active)

    def poll(self) -> int:
        """Fire every tick that is due by now.  Returns the number fired."""
        now = self._clock()
        fired = 0
        for handle in list(self._handles):
            while handle.active and handle.due <= now:
                handle.due += handle.interval_ms / 1000.0
                handle._fire()
                fired += 1
        self._handles = [h for h in self._handles if h.active]
        return fired


# ---------------------------------------------------------------------------
# asyncio scheduler
# ---------------------------------------------------------------------------
class _AsyncioHandle(TimerHandle):
    def __init__(self, interval_ms: float, callback: Callback, loop: asyncio.AbstractEventLoop):
        super().__init__(interval_ms, callback)
        self._loop = loop
        self._pending: Optional[asyncio.TimerHandle] = None
        self._schedule()

    def _schedule(self) -> None:
        self._pending = self._loop.call_later(self.interval_ms / 1000.0, self._tick)

    def _tick(self) -> None:
        if not self.active:
            return
        self._fire()
        # the callback may have cancelled us
        if self.active:
            self._schedule()

    def cancel(self) -> None:
        super().cancel()
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None


class AsyncioScheduler(Scheduler):
    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_every(self, interval_ms: float, callback: Callback) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        _logger.debug("asyncio timer every %s ms", interval_ms)
        return _AsyncioHandle(interval_ms, callback, loop)
