"""Path construction helpers for match output directories."""

from __future__ import annotations

from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve *path* and ensure it stays within the trusted *base_dir*.

    Raises :exc:`ValueError` if the resolved path escapes the base directory.
    """
    candidate = path if path.is_absolute() else base_dir / path
    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()
    if resolved != base_resolved and base_resolved not in resolved.parents:
        raise ValueError(f"Path escapes base_dir: {path}")
    return resolved


def matches_dir(out_dir: Path) -> Path:
    return out_dir / "matches"


def logs_dir(out_dir: Path) -> Path:
    return out_dir / "logs"


def tick_log_path(out_dir: Path) -> Path:
    """Return path to the per-tick duel statistics Parquet file."""
    return logs_dir(out_dir) / "tick_log.parquet"


def player_log_path(out_dir: Path) -> Path:
    """Return path to the per-tick, per-player Parquet file."""
    return logs_dir(out_dir) / "player_log.parquet"


def match_json_path(out_dir: Path, run_id: str) -> Path:
    return matches_dir(out_dir) / f"{run_id}.json"
