from handlords.config.constants import (
    ALBERT_ROTATION_AVERAGE,
    ALBERT_ROTATION_AVERAGE_RANGE,
    ALBERT_ROTATION_HALF_INTERVAL,
    ALBERT_ROTATION_HALF_INTERVAL_RANGE,
    COMBAT_HISTORY_TICKS,
    FLUSH_THRESHOLD,
    GRID_HEIGHT,
    GRID_WIDTH,
    LFSR_DEFAULT_SEED,
    MAX_MATCH_TICKS,
    PAIRS_PER_TICK,
    PAIRS_PER_TICK_RANGE,
    RNG_MASK,
    TICKS_PER_SECOND,
    TICKS_PER_SECOND_RANGE,
)


def test_grid_dimensions_leave_an_interior() -> None:
    assert isinstance(GRID_WIDTH, int) and GRID_WIDTH > 2
    assert isinstance(GRID_HEIGHT, int) and GRID_HEIGHT > 2


def test_reference_arena_is_40_by_24() -> None:
    assert (GRID_WIDTH, GRID_HEIGHT) == (40, 24)


def test_lfsr_seed_is_non_zero_16_bit() -> None:
    assert 0 < LFSR_DEFAULT_SEED <= RNG_MASK
    assert RNG_MASK == 0xFFFF


def test_defaults_lie_inside_tuning_ranges() -> None:
    for value, (low, high) in (
        (PAIRS_PER_TICK, PAIRS_PER_TICK_RANGE),
        (TICKS_PER_SECOND, TICKS_PER_SECOND_RANGE),
        (ALBERT_ROTATION_AVERAGE, ALBERT_ROTATION_AVERAGE_RANGE),
        (ALBERT_ROTATION_HALF_INTERVAL, ALBERT_ROTATION_HALF_INTERVAL_RANGE),
    ):
        assert low <= value <= high


def test_pairs_per_tick_range_allows_zero() -> None:
    assert PAIRS_PER_TICK_RANGE[0] == 0


def test_combat_history_matches_default_rate() -> None:
    assert COMBAT_HISTORY_TICKS == TICKS_PER_SECOND


def test_flush_threshold_is_large() -> None:
    assert isinstance(FLUSH_THRESHOLD, int) and FLUSH_THRESHOLD >= 1024


def test_max_match_ticks_is_large() -> None:
    assert isinstance(MAX_MATCH_TICKS, int)
    assert MAX_MATCH_TICKS >= 100_000
