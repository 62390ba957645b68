import math

import pytest

from bakusave.domain.entities import StatsBlock
from bakusave.services.codecs.stats_codec import read_stats, write_stats
from bakusave.services.errors import OutOfRangeError, StatsUnsupportedError
from tests.helpers.save_buffers import buffer_for, context_for


def _full_stats() -> StatsBlock:
    return StatsBlock(
        ranking_points=123_456,
        bakugan_points=7_890,
        battles=200,
        wins=150,
        losses=50,
        sphere_attacks=31,
        double_stands=4,
        mode_counts=[10, 20, 30],
        opponent_wins=list(range(16)),
        attribute_usage=[6, 5, 4, 3, 2, 1],
    )


def test_stats_round_trip() -> None:
    ctx = context_for("ps3")
    buffer = buffer_for("ps3")
    stats = _full_stats()

    write_stats(buffer, ctx, stats)

    assert read_stats(buffer, ctx) == stats


def test_points_are_big_endian_on_ps3() -> None:
    ctx = context_for("ps3")
    buffer = buffer_for("ps3")

    write_stats(buffer, ctx, _full_stats())

    offset = ctx.stats_offsets.ranking_points
    assert buffer[offset : offset + 3] == (123_456).to_bytes(3, "big")


def test_byte_counters_clamp() -> None:
    ctx = context_for("wii", 1)
    buffer = buffer_for("wii")
    stats = StatsBlock(battles=300, wins=-5, losses=math.nan, sphere_attacks="lots", double_stands=12.9)

    write_stats(buffer, ctx, stats)

    stored = read_stats(buffer, ctx)
    assert stored.battles == 255
    assert stored.wins == 0
    assert stored.losses == 0
    assert stored.sphere_attacks == 0
    assert stored.double_stands == 12


def test_points_mask_to_twenty_four_bits() -> None:
    ctx = context_for("ps3")
    buffer = buffer_for("ps3")

    write_stats(buffer, ctx, StatsBlock(ranking_points=16_777_300, bakugan_points=0xFFFFFF))

    stored = read_stats(buffer, ctx)
    assert stored.ranking_points == 16_777_300 & 0xFFFFFF
    assert stored.bakugan_points == 0xFFFFFF


def test_attribute_usage_entries_are_padded() -> None:
    ctx = context_for("ps3")
    buffer = buffer_for("ps3", fill=0x77)

    write_stats(buffer, ctx, _full_stats())

    start = ctx.stats_offsets.attribute_usage
    assert buffer[start : start + 12] == bytes([6, 0, 5, 0, 4, 0, 3, 0, 2, 0, 1, 0])


def test_short_arrays_fill_with_zero_and_missing_arrays_are_left_alone() -> None:
    ctx = context_for("ps3")
    buffer = buffer_for("ps3", fill=0x09)

    write_stats(buffer, ctx, StatsBlock(opponent_wins=[1, 2], attribute_usage=None))

    stored = read_stats(buffer, ctx)
    assert stored.opponent_wins == [1, 2] + [0] * 14
    assert stored.attribute_usage == [0x09] * 6


def test_ps2_layout_without_optional_arrays() -> None:
    ctx = context_for("ps2", 2)
    buffer = buffer_for("ps2", fill=0x33)

    write_stats(buffer, ctx, _full_stats())

    stored = read_stats(buffer, ctx)
    assert stored.opponent_wins is None
    assert stored.attribute_usage is None
    assert stored.mode_counts == [10, 20, 0]
    assert stored.ranking_points == 123_456
    offset = ctx.stats_offsets.ranking_points
    assert buffer[offset : offset + 3] == (123_456).to_bytes(3, "little")


def test_stats_unsupported_platform() -> None:
    ctx = context_for("x360")
    buffer = buffer_for("x360")

    with pytest.raises(StatsUnsupportedError):
        read_stats(buffer, ctx)
    with pytest.raises(StatsUnsupportedError):
        write_stats(buffer, ctx, StatsBlock())


def test_stats_out_of_range_leaves_buffer_untouched() -> None:
    ctx = context_for("ps3")
    size = ctx.stats_offsets.attribute_usage + 11
    buffer = bytearray(size)

    with pytest.raises(OutOfRangeError):
        write_stats(buffer, ctx, _full_stats())
    with pytest.raises(OutOfRangeError):
        read_stats(buffer, ctx)

    assert buffer == bytearray(size)


def test_huge_counters_clamp_without_float_overflow() -> None:
    ctx = context_for("ps3")
    buffer = buffer_for("ps3")

    write_stats(buffer, ctx, StatsBlock(ranking_points=10**400, battles=10**400, wins=-(10**400)))

    stored = read_stats(buffer, ctx)
    assert stored.battles == 255
    assert stored.wins == 0
    assert stored.ranking_points == (10**400) & 0xFFFFFF


def test_bad_array_payload_leaves_points_untouched() -> None:
    ctx = context_for("ps3")
    buffer = buffer_for("ps3", fill=0x5A)
    before = bytes(buffer)

    with pytest.raises(TypeError):
        write_stats(buffer, ctx, StatsBlock(ranking_points=42, battles=3, opponent_wins=7))

    assert bytes(buffer) == before
