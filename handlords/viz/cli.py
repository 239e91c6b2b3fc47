"""Command-line entrypoint for rendering recorded matches."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from handlords.viz.render import render_territory_timeseries, replay_snapshot
from handlords.viz.theme import get_theme


def _build_snapshot_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("snapshot", help="Replay a recorded match and render the arena at a tick")
    p.set_defaults(func=_handle_snapshot)
    p.add_argument("--match-json", type=Path, required=True)
    p.add_argument("--tick", type=int, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _build_timeseries_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("timeseries", help="Plot territory and losses over a match")
    p.set_defaults(func=_handle_timeseries)
    p.add_argument("--player-log", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--run-id", type=str, default=None)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _handle_snapshot(args: argparse.Namespace) -> None:
    replay_snapshot(
        match_json_path=args.match_json,
        tick=args.tick,
        output_path=args.output,
        base_dir=args.base_dir,
        theme=args.theme,
    )


def _handle_timeseries(args: argparse.Namespace) -> None:
    render_territory_timeseries(
        player_log_path=args.player_log,
        output_path=args.output,
        run_id=args.run_id,
        base_dir=args.base_dir,
        theme=args.theme,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Visualization tools for match data")
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        help="Theme preset name (default, paper)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _build_snapshot_parser(sub)
    _build_timeseries_parser(sub)
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)

    try:
        args.theme = get_theme(args.theme)
    except ValueError as exc:
        parser.error(str(exc))

    args.func(args)


if __name__ == "__main__":
    main()
