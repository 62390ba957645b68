"""Battle statistics codec."""
from __future__ import annotations

from typing import Iterator, Sequence, Tuple

from bakusave.core.byteio import U24_MASK, read_u24, write_u24
from bakusave.core.log import get_logger
from bakusave.domain.context import SaveContext
from bakusave.domain.defs import StatsOffsets
from bakusave.domain.defs.platform_def import ATTRIBUTE_COUNT, OPPONENT_COUNT, STATS_BYTE_COUNTERS
from bakusave.domain.entities import StatsBlock
from bakusave.domain.stat_scaling import clamp_byte, coerce_int
from bakusave.services.codecs.bounds import require_range
from bakusave.services.errors import StatsUnsupportedError

POINTS_WIDTH = 3
ATTRIBUTE_USAGE_STRIDE = 2

logger = get_logger(__name__)


def _require_stats(ctx: SaveContext) -> StatsOffsets:
    if ctx.stats_offsets is None:
        raise StatsUnsupportedError(ctx.platform)
    return ctx.stats_offsets


def _spans(offsets: StatsOffsets) -> Iterator[Tuple[str, int, int]]:
    yield "ranking_points", offsets.ranking_points, POINTS_WIDTH
    yield "bakugan_points", offsets.bakugan_points, POINTS_WIDTH
    for name in STATS_BYTE_COUNTERS:
        offset = getattr(offsets, name)
        if offset is not None:
            yield name, offset, 1
    for index, offset in enumerate(offsets.mode_counts):
        if offset is not None:
            yield f"mode_counts[{index}]", offset, 1
    if offsets.opponent_wins is not None:
        yield "opponent_wins", offsets.opponent_wins, OPPONENT_COUNT
    if offsets.attribute_usage is not None:
        yield "attribute_usage", offsets.attribute_usage, ATTRIBUTE_COUNT * ATTRIBUTE_USAGE_STRIDE


def _check_bounds(buffer: bytes | bytearray, offsets: StatsOffsets) -> None:
    for name, offset, length in _spans(offsets):
        require_range(buffer, offset, length, f"Stats field {name}")


def _read_byte(buffer: bytes | bytearray, offset: int | None) -> int:
    return 0 if offset is None else buffer[offset]


def read_stats(buffer: bytes | bytearray, ctx: SaveContext) -> StatsBlock:
    """Decode the battle statistics block."""
    offsets = _require_stats(ctx)
    _check_bounds(buffer, offsets)

    opponent_wins = None
    if offsets.opponent_wins is not None:
        start = offsets.opponent_wins
        opponent_wins = list(buffer[start : start + OPPONENT_COUNT])
    attribute_usage = None
    if offsets.attribute_usage is not None:
        start = offsets.attribute_usage
        attribute_usage = [buffer[start + index * ATTRIBUTE_USAGE_STRIDE] for index in range(ATTRIBUTE_COUNT)]

    return StatsBlock(
        ranking_points=read_u24(buffer, offsets.ranking_points, ctx.endian),
        bakugan_points=read_u24(buffer, offsets.bakugan_points, ctx.endian),
        mode_counts=[_read_byte(buffer, offset) for offset in offsets.mode_counts],
        opponent_wins=opponent_wins,
        attribute_usage=attribute_usage,
        **{name: _read_byte(buffer, getattr(offsets, name)) for name in STATS_BYTE_COUNTERS},
    )


def _points(value: object) -> int:
    number = coerce_int(value)
    return 0 if number is None else number & U24_MASK


def _byte_at(values: Sequence[object], index: int) -> int:
    return clamp_byte(values[index]) if index < len(values) else 0


def write_stats(buffer: bytearray, ctx: SaveContext, stats: StatsBlock) -> None:
    """Encode ``stats``; byte counters clamp to 0-255, points mask to 24 bits.

    Counters without a configured position are skipped, as are the opponent
    and attribute arrays when either the layout or ``stats`` leaves them out.
    """
    offsets = _require_stats(ctx)
    _check_bounds(buffer, offsets)

    ranking_points = _points(stats.ranking_points)
    bakugan_points = _points(stats.bakugan_points)
    byte_values: list[Tuple[int, int]] = []
    for name in STATS_BYTE_COUNTERS:
        offset = getattr(offsets, name)
        if offset is not None:
            byte_values.append((offset, clamp_byte(getattr(stats, name))))
    for index, offset in enumerate(offsets.mode_counts):
        if offset is not None:
            byte_values.append((offset, _byte_at(stats.mode_counts, index)))
    if offsets.opponent_wins is not None and stats.opponent_wins is not None:
        start = offsets.opponent_wins
        for index in range(OPPONENT_COUNT):
            byte_values.append((start + index, _byte_at(stats.opponent_wins, index)))
    if offsets.attribute_usage is not None and stats.attribute_usage is not None:
        start = offsets.attribute_usage
        for index in range(ATTRIBUTE_COUNT):
            position = start + index * ATTRIBUTE_USAGE_STRIDE
            byte_values.append((position, _byte_at(stats.attribute_usage, index)))
            byte_values.append((position + 1, 0x00))

    write_u24(buffer, offsets.ranking_points, ranking_points, ctx.endian)
    write_u24(buffer, offsets.bakugan_points, bakugan_points, ctx.endian)
    for position, value in byte_values:
        buffer[position] = value
    logger.debug("Wrote stats block for %s slot %d", ctx.platform, ctx.slot)
