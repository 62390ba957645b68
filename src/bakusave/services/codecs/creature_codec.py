"""Bakugan stat record codec.

Each bakugan owns a 120-byte block holding six 20-byte attribute slots.
The first 14 bytes of a slot form the stat record::

    +0   id            +8   speed
    +4   attribute     +9   defense
    +5   power (u16)   +10  acceleration
                       +11  endurance
                       +12  jump
                       +13  level

Bytes +1..+3 and +7 are not part of the record and are never written.
"""
from __future__ import annotations

from dataclasses import asdict
from typing import Mapping

from bakusave.core.byteio import read_u16, write_u16
from bakusave.core.log import get_logger
from bakusave.domain.context import SaveContext
from bakusave.domain.entities import CreatureEntry
from bakusave.services.codecs.bounds import require_range

BAKUGAN_BLOCK_SIZE = 120
ATTRIBUTE_BLOCK_SIZE = 20
ENTRY_SIZE = 14

_BYTE_FIELDS = {
    "speed": 8,
    "defense": 9,
    "acceleration": 10,
    "endurance": 11,
    "jump": 12,
    "level": 13,
}

logger = get_logger(__name__)


def get_entry_offset(ctx: SaveContext, creature_id: int, attribute_id: int) -> int:
    """Return the absolute offset of a bakugan/attribute stat record."""
    return ctx.base_offset + creature_id * BAKUGAN_BLOCK_SIZE + attribute_id * ATTRIBUTE_BLOCK_SIZE


def _entry_offset_checked(
    buffer: bytes | bytearray, ctx: SaveContext, creature_id: int, attribute_id: int
) -> int:
    offset = get_entry_offset(ctx, creature_id, attribute_id)
    return require_range(buffer, offset, ENTRY_SIZE, f"Entry {creature_id}/{attribute_id}")


def read_creature_entry(
    buffer: bytes | bytearray, ctx: SaveContext, creature_id: int, attribute_id: int
) -> CreatureEntry:
    """Decode the stat record for ``creature_id``/``attribute_id``."""
    offset = _entry_offset_checked(buffer, ctx, creature_id, attribute_id)
    return CreatureEntry(
        id=buffer[offset],
        attribute=buffer[offset + 4],
        power=read_u16(buffer, offset + 5, ctx.endian),
        **{name: buffer[offset + delta] for name, delta in _BYTE_FIELDS.items()},
    )


def write_creature_entry(
    buffer: bytearray,
    ctx: SaveContext,
    creature_id: int,
    attribute_id: int,
    entry: CreatureEntry | Mapping[str, int | None],
) -> None:
    """Encode ``entry`` into the record for ``creature_id``/``attribute_id``.

    The id and attribute bytes always receive the lookup key, so a record
    never carries a stale identity. Fields missing from a mapping payload
    are written as 0. Every value is converted before the first byte
    changes, so a bad payload leaves the record untouched.
    """
    offset = _entry_offset_checked(buffer, ctx, creature_id, attribute_id)
    values = asdict(entry) if isinstance(entry, CreatureEntry) else dict(entry)

    def _value(name: str) -> int:
        value = values.get(name)
        return 0 if value is None else int(value)

    power = _value("power")
    byte_values = [(offset + delta, _value(name) & 0xFF) for name, delta in _BYTE_FIELDS.items()]

    buffer[offset] = creature_id & 0xFF
    buffer[offset + 4] = attribute_id & 0xFF
    write_u16(buffer, offset + 5, power, ctx.endian)
    for position, value in byte_values:
        buffer[position] = value
    logger.debug("Wrote stat record %s/%s at offset %d", creature_id, attribute_id, offset)
