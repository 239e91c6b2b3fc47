"""Centralized domain constants for the territory simulation.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_WIDTH = 40
"""Default arena width in cells."""

GRID_HEIGHT = 24
"""Default arena height in cells."""

RNG_MASK = 0xFFFF
"""Every random draw is a 16-bit value."""

LFSR_DEFAULT_SEED = 0xACE1
"""Process-start LFSR state. Must be non-zero."""

PAIRS_PER_TICK = 240
"""Default duel attempts drawn per tick."""

PAIRS_PER_TICK_RANGE = (0, 500)
"""Inclusive tuning range for pairs_per_tick."""

TICKS_PER_SECOND = 15
"""Default fixed simulation rate."""

TICKS_PER_SECOND_RANGE = (5, 30)
"""Inclusive tuning range for ticks_per_second."""

ALBERT_ROTATION_AVERAGE = 58
"""Default centre of Albert's rotation interval, in ticks."""

ALBERT_ROTATION_AVERAGE_RANGE = (10, 200)
"""Inclusive tuning range for the rotation average."""

ALBERT_ROTATION_HALF_INTERVAL = 43
"""Default half width of Albert's rotation interval (gives 15-101 ticks)."""

ALBERT_ROTATION_HALF_INTERVAL_RANGE = (5, 100)
"""Inclusive tuning range for the rotation half interval."""

DEFAULT_LEVEL = 1
"""Level loaded at game start and on restart."""

HUMAN_PLAYER_ID = 0
"""Player index driven by external input."""

ALBERT_PLAYER_ID = 1
"""Player index driven by the Albert controller."""

COMBAT_HISTORY_TICKS = 15
"""Rolling window for the battles-per-second read-out."""

FLUSH_THRESHOLD = 8_192
"""Flush tick log rows to Parquet once this in-memory row count is reached."""

MAX_MATCH_TICKS = 1_000_000
"""Safety cap on ticks simulated by one headless match."""
