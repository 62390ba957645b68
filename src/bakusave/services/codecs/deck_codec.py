"""Deck loadout codec.

A deck is a 36-byte block of three 12-byte groups. Each group holds three
2-byte slots followed by six bytes of 0xFF padding::

    +0   bakugan slots   (6 * bakugan_id + attribute_id)
    +12  gate cards      (card_id - 10232)
    +24  ability cards   (card_id - 10232)

An empty slot stores 0xFFFF.
"""
from __future__ import annotations

from typing import Sequence

from bakusave.core.byteio import read_u16, write_u16
from bakusave.core.log import get_logger
from bakusave.domain.context import SaveContext
from bakusave.domain.entities import DECK_SLOT_COUNT, Deck, DeckCreatureSlot
from bakusave.services.codecs.bounds import require_range
from bakusave.services.errors import InvalidDeckIndexError, InvalidDeckSlotError

DECK_LENGTH = 36
GROUP_LENGTH = 12
SLOT_WIDTH = 2
ATTRIBUTES_PER_BAKUGAN = 6
EMPTY_SLOT = 0xFFFF
MAX_SLOT_VALUE = EMPTY_SLOT - 1
PADDING_BYTE = 0xFF

# Card slots store ids relative to this value (0x27F8).
DECK_CARD_BASE_ID = 10232

CREATURE_GROUP = 0
GATE_GROUP = 12
ABILITY_GROUP = 24

logger = get_logger(__name__)


def lookup_deck_offset(offsets: Sequence[int], deck_index: int) -> int:
    """Return ``offsets[deck_index]`` or raise InvalidDeckIndexError."""
    if isinstance(deck_index, bool) or not isinstance(deck_index, int):
        raise InvalidDeckIndexError(deck_index)
    if not 0 <= deck_index < len(offsets):
        raise InvalidDeckIndexError(deck_index)
    return offsets[deck_index]


def _deck_offset_checked(buffer: bytes | bytearray, ctx: SaveContext, deck_index: int) -> int:
    base = lookup_deck_offset(ctx.deck_offsets, deck_index)
    return require_range(buffer, base, DECK_LENGTH, f"Deck {deck_index + 1} block")


def _require_slot_value(value: int, what: str) -> int:
    if not 0 <= value <= MAX_SLOT_VALUE:
        raise InvalidDeckSlotError(what, value)
    return value


def _require_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDeckSlotError(what, value)
    return value


def encode_creature_slot(slot: DeckCreatureSlot | None) -> int | None:
    """Pack a bakugan slot; raise InvalidDeckSlotError if it cannot be stored."""
    if slot is None or slot.is_empty:
        return None
    creature_id = _require_int(slot.creature_id, "Bakugan id")
    attribute_id = _require_int(slot.attribute_id, "Attribute id")
    if not 0 <= attribute_id < ATTRIBUTES_PER_BAKUGAN:
        raise InvalidDeckSlotError("Attribute id", attribute_id)
    if creature_id < 0:
        raise InvalidDeckSlotError("Bakugan id", creature_id)
    return _require_slot_value(ATTRIBUTES_PER_BAKUGAN * creature_id + attribute_id, "Bakugan slot")


def decode_creature_slot(value: int | None) -> DeckCreatureSlot:
    if value is None:
        return DeckCreatureSlot()
    creature_id, attribute_id = divmod(value, ATTRIBUTES_PER_BAKUGAN)
    return DeckCreatureSlot(creature_id=creature_id, attribute_id=attribute_id)


def encode_card_slot(card_id: int | None) -> int | None:
    if card_id is None:
        return None
    return _require_slot_value(_require_int(card_id, "Card id") - DECK_CARD_BASE_ID, f"Card {card_id}")


def decode_card_slot(value: int | None) -> int | None:
    return None if value is None else value + DECK_CARD_BASE_ID


def _read_group(buffer: bytes | bytearray, ctx: SaveContext, start: int) -> list[int | None]:
    values: list[int | None] = []
    for index in range(DECK_SLOT_COUNT):
        raw = read_u16(buffer, start + index * SLOT_WIDTH, ctx.endian)
        values.append(None if raw == EMPTY_SLOT else raw)
    return values


def _write_group(buffer: bytearray, ctx: SaveContext, start: int, values: Sequence[int | None]) -> None:
    for index in range(DECK_SLOT_COUNT):
        value = values[index] if index < len(values) else None
        write_u16(buffer, start + index * SLOT_WIDTH, EMPTY_SLOT if value is None else value, ctx.endian)
    padding_start = start + DECK_SLOT_COUNT * SLOT_WIDTH
    padding_end = start + GROUP_LENGTH
    buffer[padding_start:padding_end] = bytes([PADDING_BYTE]) * (padding_end - padding_start)


def read_deck(buffer: bytes | bytearray, ctx: SaveContext, deck_index: int) -> Deck:
    """Decode deck ``deck_index``."""
    base = _deck_offset_checked(buffer, ctx, deck_index)
    return Deck(
        creature_slots=[decode_creature_slot(value) for value in _read_group(buffer, ctx, base + CREATURE_GROUP)],
        gate_cards=[decode_card_slot(value) for value in _read_group(buffer, ctx, base + GATE_GROUP)],
        ability_cards=[decode_card_slot(value) for value in _read_group(buffer, ctx, base + ABILITY_GROUP)],
    )


def write_deck(buffer: bytearray, ctx: SaveContext, deck_index: int, deck: Deck) -> None:
    """Encode ``deck`` into deck ``deck_index``; padding is always rewritten as 0xFF.

    All slots are encoded before the first write, so an unstorable slot
    leaves the deck untouched.
    """
    base = _deck_offset_checked(buffer, ctx, deck_index)
    creature_values = [encode_creature_slot(slot) for slot in deck.creature_slots]
    gate_values = [encode_card_slot(card_id) for card_id in deck.gate_cards]
    ability_values = [encode_card_slot(card_id) for card_id in deck.ability_cards]
    _write_group(buffer, ctx, base + CREATURE_GROUP, creature_values)
    _write_group(buffer, ctx, base + GATE_GROUP, gate_values)
    _write_group(buffer, ctx, base + ABILITY_GROUP, ability_values)
    logger.debug("Wrote deck %d at offset %d", deck_index, base)
