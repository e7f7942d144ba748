"""
speed.py — Playback Speed
==========================
The UI exposes a 1..10 slider; the controller works in milliseconds
between steps.

    level 1  → 1200 ms   (slowest, teaching mode)
    level 10 →  100 ms   (fastest)

    ms = round(1200 - (level - 1) * 1100 / 9)
"""

import math

MIN_INTERVAL_MS     = 100
MAX_INTERVAL_MS     = 1200
DEFAULT_INTERVAL_MS = 600

MIN_LEVEL = 1
MAX_LEVEL = 10


# ---------------------------------------------------------------------------
# Speed presets (slider levels)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1,     # teaching mode
    "medium": 5,
    "fast":   8,
    "turbo":  10,    # demo mode
}


def clamp_interval(interval_ms: float) -> int:
    return int(min(MAX_INTERVAL_MS, max(MIN_INTERVAL_MS, interval_ms)))


def level_to_interval(level: int) -> int:
    level = min(MAX_LEVEL, max(MIN_LEVEL, int(level)))
    raw = MAX_INTERVAL_MS - (level - 1) * ((MAX_INTERVAL_MS - MIN_INTERVAL_MS) / (MAX_LEVEL - MIN_LEVEL))
    # half-up, not banker's rounding
    return clamp_interval(math.floor(raw + 0.5))


def preset_interval(name: str) -> int:
    """Interval for a named preset; raises KeyError for unknown names."""
    return level_to_interval(SPEED_PRESETS[name])
