"""Parquet schema definitions for match observability logs.

Both logs share the ``run_id``/``tick`` key so a batch of matches can be
written to one file and filtered per run afterwards.
"""

from __future__ import annotations

import pyarrow as pa

MATCH_PAYLOAD_SCHEMA_VERSION = 1

TICK_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("tick", pa.int64()),
        ("phase", pa.string()),
        ("attempts", pa.int64()),
        ("battles", pa.int64()),
        ("same_player", pa.int64()),
        ("wall_empty", pa.int64()),
        ("rng_state", pa.int64()),
    ]
)

PLAYER_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("tick", pa.int64()),
        ("player_id", pa.int64()),
        ("piece", pa.string()),
        ("tick_losses", pa.int64()),
        ("territory", pa.int64()),
        ("last_rot_tick", pa.int64()),
        ("rot_period", pa.int64()),
    ]
)
