"""Simulation layer: phase machine, fixed-step clock, commands and persistence."""

from handlords.simulation.clock import FixedStepClock
from handlords.simulation.commands import (
    force_albert_rotation,
    reset_albert_config,
    reset_albert_timer,
    reset_game_config,
    restart_level,
    rotate_human_piece,
    set_albert_rotation_average,
    set_albert_rotation_half_interval,
    set_pairs_per_tick,
    set_ticks_per_second,
    start_game,
)
from handlords.simulation.engine import (
    evaluate_outcome,
    play_match,
    run_match,
    run_matches,
    step_fixed,
    territory_counts,
)
from handlords.simulation.persistence import flush_columns

__all__ = [
    "FixedStepClock",
    "evaluate_outcome",
    "flush_columns",
    "force_albert_rotation",
    "play_match",
    "reset_albert_config",
    "reset_albert_timer",
    "reset_game_config",
    "restart_level",
    "rotate_human_piece",
    "run_match",
    "run_matches",
    "set_albert_rotation_average",
    "set_albert_rotation_half_interval",
    "set_pairs_per_tick",
    "set_ticks_per_second",
    "start_game",
    "step_fixed",
    "territory_counts",
]
