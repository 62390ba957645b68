"""Card unlock flag codec."""
from __future__ import annotations

from typing import Iterable

from bakusave.core.log import get_logger
from bakusave.domain.context import SaveContext
from bakusave.services.codecs.bounds import require_range

logger = get_logger(__name__)


def get_card_offset(ctx: SaveContext, card_id: int) -> int:
    """Return the absolute flag offset for ``card_id``; may be negative."""
    return ctx.card_base_offset + card_id


def _card_offset_checked(buffer: bytes | bytearray, ctx: SaveContext, card_id: int) -> int:
    return require_range(buffer, get_card_offset(ctx, card_id), 1, f"Card flag {card_id}")


def read_card_flag(buffer: bytes | bytearray, ctx: SaveContext, card_id: int) -> bool:
    """Return True if ``card_id`` is unlocked."""
    return buffer[_card_offset_checked(buffer, ctx, card_id)] != 0


def write_card_flag(buffer: bytearray, ctx: SaveContext, card_id: int, unlocked: bool) -> None:
    """Mark ``card_id`` as unlocked (1) or locked (0)."""
    buffer[_card_offset_checked(buffer, ctx, card_id)] = 1 if unlocked else 0


def write_card_flags(buffer: bytearray, ctx: SaveContext, card_ids: Iterable[int], unlocked: bool) -> int:
    """Set the flag for every card in ``card_ids``; return how many were written.

    Every offset is validated before the first byte changes.
    """
    offsets = [_card_offset_checked(buffer, ctx, card_id) for card_id in card_ids]
    value = 1 if unlocked else 0
    for offset in offsets:
        buffer[offset] = value
    logger.debug("Set %d card flags to %d", len(offsets), value)
    return len(offsets)


def count_unlocked(buffer: bytes | bytearray, ctx: SaveContext, card_ids: Iterable[int]) -> int:
    """Return how many of ``card_ids`` are unlocked."""
    return sum(1 for card_id in card_ids if read_card_flag(buffer, ctx, card_id))
