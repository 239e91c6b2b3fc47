"""CLI entrypoint for headless matches.

This module owns CLI argument parsing and config resolution. All domain
logic lives elsewhere:

- ``handlords.config``            – configuration dataclasses
- ``handlords.simulation.engine`` – ``run_matches`` engine
- ``handlords.io.schemas``        – Parquet schemas
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path

from handlords.config.constants import (
    ALBERT_ROTATION_AVERAGE,
    ALBERT_ROTATION_HALF_INTERVAL,
    DEFAULT_LEVEL,
    LFSR_DEFAULT_SEED,
    PAIRS_PER_TICK,
    RNG_MASK,
    TICKS_PER_SECOND,
)
from handlords.config.types import MatchConfig, RngKind
from handlords.simulation.engine import run_matches

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_rng_kind(raw_rng_kind: str) -> RngKind:
    """Parse RNG strategy from CLI/config."""
    try:
        return RngKind(raw_rng_kind)
    except ValueError as exc:
        valid = ", ".join(kind.value for kind in RngKind)
        raise ValueError(f"rng must be one of {valid}") from exc


def _parse_seed(raw_seed: str | int) -> int:
    """Parse an LFSR seed given as decimal or 0x-prefixed hex."""
    if isinstance(raw_seed, int) and not isinstance(raw_seed, bool):
        seed = raw_seed
    else:
        try:
            seed = int(str(raw_seed), 0)
        except ValueError as exc:
            raise ValueError(f"seed must be an integer, got {raw_seed!r}") from exc
    if not 0 < seed <= RNG_MASK:
        raise ValueError("seed must be a non-zero 16-bit value")
    return seed


def _seed_sequence(base_seed: int, n_runs: int) -> list[int]:
    """Consecutive non-zero 16-bit seeds starting at *base_seed*."""
    return [((base_seed - 1 + i) % RNG_MASK) + 1 for i in range(n_runs)]


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run headless territory matches")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--n-runs", type=int, default=None)
    parser.add_argument("--max-ticks", type=int, default=None)
    parser.add_argument("--seed", type=str, default=None, help="LFSR seed, e.g. 0xACE1")
    parser.add_argument(
        "--rng",
        type=str,
        choices=[kind.value for kind in RngKind],
        default=None,
    )
    parser.add_argument("--system-seed", type=int, default=None)
    parser.add_argument("--level", type=int, default=None)
    parser.add_argument("--pairs-per-tick", type=int, default=None)
    parser.add_argument("--ticks-per-second", type=int, default=None)
    parser.add_argument("--rotation-average", type=int, default=None)
    parser.add_argument("--rotation-half-interval", type=int, default=None)
    parser.add_argument(
        "--human-rotate-every",
        type=int,
        default=None,
        help="Rotate the human piece every N ticks (0 = never)",
    )
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for headless matches.

    Supports ``--config path/to/config.json`` for reproducibility.
    CLI arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must hold a JSON object: {args.config}")

    try:
        n_runs = _get_int(args.n_runs, "n_runs", file_cfg, 1)
        if n_runs < 1:
            raise ValueError("n_runs must be >= 1")
        seed = _parse_seed(_get_val(args.seed, "seed", file_cfg, LFSR_DEFAULT_SEED))  # type: ignore[arg-type]
        rng_kind = _parse_rng_kind(_get_str(args.rng, "rng", file_cfg, RngKind.LFSR.value))
        raw_system_seed = _get_val(args.system_seed, "system_seed", file_cfg, None)
        system_seed = (
            None if raw_system_seed is None else _coerce_int(raw_system_seed, "system_seed")
        )
        out_dir = Path(_get_str(args.out_dir, "out_dir", file_cfg, "data"))

        configs = [
            MatchConfig(
                max_ticks=_get_int(args.max_ticks, "max_ticks", file_cfg, 2_000),
                seed=run_seed,
                rng_kind=rng_kind,
                system_seed=None if system_seed is None else system_seed + i,
                level=_get_int(args.level, "level", file_cfg, DEFAULT_LEVEL),
                pairs_per_tick=_get_int(
                    args.pairs_per_tick, "pairs_per_tick", file_cfg, PAIRS_PER_TICK
                ),
                ticks_per_second=_get_int(
                    args.ticks_per_second, "ticks_per_second", file_cfg, TICKS_PER_SECOND
                ),
                rotation_average=_get_int(
                    args.rotation_average, "rotation_average", file_cfg, ALBERT_ROTATION_AVERAGE
                ),
                rotation_half_interval=_get_int(
                    args.rotation_half_interval,
                    "rotation_half_interval",
                    file_cfg,
                    ALBERT_ROTATION_HALF_INTERVAL,
                ),
                human_rotate_every=_get_int(
                    args.human_rotate_every, "human_rotate_every", file_cfg, 0
                ),
            )
            for i, run_seed in enumerate(_seed_sequence(seed, n_runs))
        ]
    except ValueError as exc:
        parser.error(str(exc))

    results = run_matches(configs, out_dir)
    logger.info("%d match(es) written to %s", len(results), out_dir)
    print(json.dumps([asdict(result) for result in results], indent=2))


if __name__ == "__main__":
    main()
