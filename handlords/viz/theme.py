"""Visualization theme presets for arena renderers.

Themes are frozen dataclasses that group all styling constants together,
selectable via the ``--theme`` CLI argument or programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    # Territory palette, indexed by player id (wraps after four players)
    player_colors: tuple[str, ...] = ("#50C878", "#DC5050", "#5078DC", "#DCC850")
    player_labels: dict[int, str] = field(default_factory=dict)
    wall_color: str = "#505050"
    empty_cell_color: str = "#19191C"
    glyph_color: str = "white"
    glyph_outline_color: str = "black"
    background_color: str = "#141418"
    text_color: str = "white"


_DEFAULT_PLAYER_LABELS: dict[int, str] = {
    0: "Player 0 (you)",
    1: "Albert",
}

DEFAULT_THEME = Theme(player_labels=dict(_DEFAULT_PLAYER_LABELS))

PAPER_THEME = Theme(
    player_colors=("#2196F3", "#FF5722", "#4CAF50", "#FFC107"),
    player_labels=dict(_DEFAULT_PLAYER_LABELS),
    wall_color="#9E9E9E",
    empty_cell_color="#F0F0F0",
    glyph_color="black",
    glyph_outline_color="white",
    background_color="white",
    text_color="black",
)

THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme preset by name."""
    try:
        return THEMES[name]
    except KeyError as exc:
        valid = ", ".join(sorted(THEMES))
        raise ValueError(f"Unknown theme {name!r}; expected one of {valid}") from exc
