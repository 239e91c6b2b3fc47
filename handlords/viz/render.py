"""Matplotlib-based rendering of arena snapshots and match time series."""

from __future__ import annotations

import json
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pyarrow.parquet as pq
from matplotlib import patheffects
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.patches import Patch

from handlords.config.types import MatchConfig, RngKind
from handlords.domain.grid import CellKind, Grid
from handlords.io.paths import resolve_within_base
from handlords.simulation.engine import play_match
from handlords.viz.theme import DEFAULT_THEME, Theme

EMPTY_CODE = 0
WALL_CODE = 1
PLAYER_CODE_OFFSET = 2
PALETTE_PLAYERS = 4


def grid_to_array(grid: Grid) -> np.ndarray:
    """Return (H, W) int array: 0 empty, 1 wall, 2 + owner for symbols."""
    codes = np.full((grid.height, grid.width), EMPTY_CODE, dtype=int)
    for (x, y), cell in zip(grid.coords(), grid.cells, strict=True):
        if cell.kind == CellKind.WALL:
            codes[y, x] = WALL_CODE
        elif cell.kind == CellKind.SYMBOL:
            codes[y, x] = PLAYER_CODE_OFFSET + cell.owner % PALETTE_PLAYERS
    return codes


def _arena_cmap(theme: Theme) -> tuple[ListedColormap, BoundaryNorm]:
    colors = [theme.empty_cell_color, theme.wall_color, *theme.player_colors]
    cmap = ListedColormap(colors)
    norm = BoundaryNorm([i - 0.5 for i in range(len(colors) + 1)], cmap.N)
    return cmap, norm


def _legend_handles(n_players: int, theme: Theme) -> list[Patch]:
    handles = [
        Patch(
            facecolor=theme.player_colors[pid % len(theme.player_colors)],
            edgecolor="gray",
            label=theme.player_labels.get(pid, f"Player {pid}"),
        )
        for pid in range(n_players)
    ]
    handles.append(Patch(facecolor=theme.wall_color, edgecolor="gray", label="Wall"))
    handles.append(Patch(facecolor=theme.empty_cell_color, edgecolor="gray", label="Empty"))
    return handles


def _resolve_paths(base_dir: Path | None, *paths: Path) -> list[Path]:
    if base_dir is None:
        return [Path(p).resolve() for p in paths]
    base = Path(base_dir).resolve()
    return [resolve_within_base(Path(p), base) for p in paths]


def render_grid_snapshot(
    grid: Grid,
    output_path: Path,
    title: str | None = None,
    annotate: bool = True,
    n_players: int = 2,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Render the arena with one coloured square per cell and R/P/S glyphs."""
    cmap, norm = _arena_cmap(theme)
    codes = grid_to_array(grid)

    fig, ax = plt.subplots(figsize=(grid.width * 0.25 + 1, grid.height * 0.25 + 1))
    fig.patch.set_facecolor(theme.background_color)
    ax.imshow(codes, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    ax.set_xticks([])
    ax.set_yticks([])

    if annotate:
        outline = [patheffects.withStroke(linewidth=1.5, foreground=theme.glyph_outline_color)]
        for (x, y), cell in zip(grid.coords(), grid.cells, strict=True):
            if cell.kind != CellKind.SYMBOL:
                continue
            ax.text(
                x,
                y,
                cell.piece.glyph,
                ha="center",
                va="center",
                fontsize=6,
                color=theme.glyph_color,
                path_effects=outline,
            )

    if title:
        ax.set_title(title, fontsize=10, color=theme.text_color)
    fig.legend(
        handles=_legend_handles(n_players, theme),
        loc="lower center",
        ncol=n_players + 2,
        fontsize=8,
        frameon=False,
        labelcolor=theme.text_color,
    )
    fig.tight_layout(rect=(0, 0.08, 1, 1))
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, facecolor=fig.get_facecolor())
    plt.close(fig)


def render_territory_timeseries(
    player_log_path: Path,
    output_path: Path,
    run_id: str | None = None,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Plot territory and per-tick losses for every player of one run."""
    player_log_path, output_path = _resolve_paths(base_dir, player_log_path, output_path)

    table = pq.read_table(player_log_path)
    if run_id is None:
        run_ids = sorted(set(table.column("run_id").to_pylist()))
        if not run_ids:
            raise ValueError(f"No rows in {player_log_path}")
        run_id = run_ids[0]
    rows = pq.read_table(player_log_path, filters=[("run_id", "=", run_id)]).to_pylist()
    if not rows:
        raise ValueError(f"No player rows for run_id={run_id} in {player_log_path}")

    # player_id -> [(tick, territory, tick_losses)]
    by_player: dict[int, list[tuple[int, int, int]]] = {}
    for row in rows:
        by_player.setdefault(int(row["player_id"]), []).append(
            (int(row["tick"]), int(row["territory"]), int(row["tick_losses"]))
        )

    fig, (ax_territory, ax_losses) = plt.subplots(2, 1, figsize=(8, 6), sharex=True)
    for pid, player_rows in sorted(by_player.items()):
        player_rows.sort()
        ticks = [r[0] for r in player_rows]
        color = theme.player_colors[pid % len(theme.player_colors)]
        label = theme.player_labels.get(pid, f"Player {pid}")
        ax_territory.plot(ticks, [r[1] for r in player_rows], color=color, label=label)
        ax_losses.plot(
            ticks,
            [r[2] for r in player_rows],
            color=color,
            alpha=0.7,
            linewidth=1.0,
        )

    ax_territory.set_ylabel("Territory (cells)")
    ax_territory.legend(frameon=False)
    ax_territory.grid(True, alpha=0.3)
    ax_losses.set_ylabel("Cells lost per tick")
    ax_losses.set_xlabel("Tick")
    ax_losses.grid(True, alpha=0.3)
    fig.suptitle(f"Run: {run_id}", fontsize=11)
    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)


def replay_snapshot(
    match_json_path: Path,
    tick: int,
    output_path: Path,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> int:
    """Re-play an LFSR match to *tick* and render the arena; return the tick reached.

    Replays reaching the recorded end of the match are checked against the
    stored final RNG state.
    """
    match_json_path, output_path = _resolve_paths(base_dir, match_json_path, output_path)
    if tick < 0:
        raise ValueError("tick must be >= 0")

    payload = json.loads(match_json_path.read_text())
    run_id = payload.get("run_id")
    if not isinstance(run_id, str) or not run_id:
        raise ValueError("Match JSON must include non-empty string field 'run_id'")
    raw_metadata = payload.get("metadata")
    if not isinstance(raw_metadata, dict):
        raise ValueError("Match JSON must include object field 'metadata'")

    config = MatchConfig.from_metadata(raw_metadata)
    if config.rng_kind != RngKind.LFSR:
        raise ValueError(f"Run {run_id} used the system RNG and cannot be replayed")

    state = play_match(config, stop_at_tick=tick)
    if state.tick == payload.get("ticks") and "final_rng_state" in raw_metadata:
        if state.rng.state != raw_metadata["final_rng_state"]:
            raise ValueError(f"Replay of {run_id} diverged from the recorded match")

    render_grid_snapshot(
        state.grid,
        output_path,
        title=f"{run_id} - tick {state.tick} ({state.phase.value})",
        n_players=len(state.players),
        theme=theme,
    )
    return state.tick
