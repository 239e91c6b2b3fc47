"""Tests for viz/cli.py: argument parsing and subcommand dispatch."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from handlords.viz.cli import main
from handlords.viz.theme import DEFAULT_THEME, PAPER_THEME


def test_main_no_subcommand_exits() -> None:
    with pytest.raises(SystemExit):
        main([])


def test_snapshot_subcommand_dispatches(tmp_path: Path) -> None:
    argv = [
        "snapshot",
        "--match-json",
        str(tmp_path / "m.json"),
        "--tick",
        "7",
        "--output",
        str(tmp_path / "out.png"),
        "--base-dir",
        str(tmp_path),
    ]
    with patch("handlords.viz.cli.replay_snapshot") as mock_replay:
        main(argv)
    mock_replay.assert_called_once_with(
        match_json_path=tmp_path / "m.json",
        tick=7,
        output_path=tmp_path / "out.png",
        base_dir=tmp_path,
        theme=DEFAULT_THEME,
    )


def test_timeseries_subcommand_uses_theme(tmp_path: Path) -> None:
    argv = [
        "--theme",
        "paper",
        "timeseries",
        "--player-log",
        str(tmp_path / "player_log.parquet"),
        "--output",
        str(tmp_path / "ts.png"),
        "--run-id",
        "level1_lfsr_sace1",
    ]
    with patch("handlords.viz.cli.render_territory_timeseries") as mock_render:
        main(argv)
    kwargs = mock_render.call_args.kwargs
    assert kwargs["theme"] is PAPER_THEME
    assert kwargs["run_id"] == "level1_lfsr_sace1"
    assert kwargs["base_dir"] == Path(".")


def test_unknown_theme_exits(tmp_path: Path) -> None:
    argv = [
        "--theme",
        "neon",
        "timeseries",
        "--player-log",
        str(tmp_path / "p.parquet"),
        "--output",
        str(tmp_path / "o.png"),
    ]
    with pytest.raises(SystemExit):
        main(argv)


def test_snapshot_requires_tick(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["snapshot", "--match-json", "m.json", "--output", "o.png"])


def test_unknown_log_level_exits(tmp_path: Path) -> None:
    argv = [
        "--log-level",
        "LOUD",
        "timeseries",
        "--player-log",
        str(tmp_path / "p.parquet"),
        "--output",
        str(tmp_path / "o.png"),
    ]
    with patch("handlords.viz.cli.render_territory_timeseries") as mock_render:
        with pytest.raises(SystemExit):
            main(argv)
    mock_render.assert_not_called()
