"""Visualization: grid snapshots, territory time series and the viz CLI."""

from handlords.viz.render import (
    grid_to_array,
    render_grid_snapshot,
    render_territory_timeseries,
    replay_snapshot,
)
from handlords.viz.theme import DEFAULT_THEME, PAPER_THEME, Theme, get_theme

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "Theme",
    "get_theme",
    "grid_to_array",
    "render_grid_snapshot",
    "render_territory_timeseries",
    "replay_snapshot",
]
