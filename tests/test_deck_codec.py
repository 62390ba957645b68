import pytest

from bakusave.domain.entities import Deck, DeckCreatureSlot
from bakusave.services.codecs.deck_codec import (
    DECK_LENGTH,
    decode_card_slot,
    decode_creature_slot,
    encode_card_slot,
    encode_creature_slot,
    read_deck,
    write_deck,
)
from bakusave.services.errors import InvalidDeckIndexError, InvalidDeckSlotError, OutOfRangeError
from tests.helpers.save_buffers import buffer_for, context_for

_PADDING_RANGES = (range(6, 12), range(18, 24), range(30, 36))


def _full_deck() -> Deck:
    return Deck(
        creature_slots=[
            DeckCreatureSlot(creature_id=5, attribute_id=2),
            DeckCreatureSlot(creature_id=0, attribute_id=0),
            DeckCreatureSlot(creature_id=12, attribute_id=5),
        ],
        gate_cards=[10300, 10232, 10240],
        ability_cards=[10250, 10251, 10299],
    )


def test_creature_slot_packing() -> None:
    assert encode_creature_slot(DeckCreatureSlot(creature_id=5, attribute_id=2)) == 32
    assert decode_creature_slot(32) == DeckCreatureSlot(creature_id=5, attribute_id=2)
    assert encode_creature_slot(DeckCreatureSlot(creature_id=5)) is None
    assert encode_creature_slot(None) is None


def test_card_slot_packing() -> None:
    assert encode_card_slot(10300) == 68
    assert decode_card_slot(68) == 10300
    assert encode_card_slot(None) is None
    assert decode_card_slot(None) is None


def test_deck_round_trip() -> None:
    ctx = context_for("ps3")
    buffer = buffer_for("ps3")
    deck = _full_deck()

    write_deck(buffer, ctx, 0, deck)

    assert read_deck(buffer, ctx, 0) == deck
    base = ctx.deck_offsets[0]
    assert buffer[base : base + 2] == bytes([0x00, 0x20])
    assert buffer[base + 12 : base + 14] == bytes([0x00, 0x44])


def test_deck_slots_little_endian_on_ps2() -> None:
    ctx = context_for("ps2")
    buffer = buffer_for("ps2")

    write_deck(buffer, ctx, 1, _full_deck())

    base = ctx.deck_offsets[1]
    assert buffer[base : base + 2] == bytes([0x20, 0x00])
    assert read_deck(buffer, ctx, 1) == _full_deck()


def test_empty_slots_use_sentinel_and_read_back_as_none() -> None:
    ctx = context_for("wii", 1)
    buffer = buffer_for("wii")
    deck = Deck(
        creature_slots=[DeckCreatureSlot(creature_id=3, attribute_id=None)],
        gate_cards=[None, 10300],
        ability_cards=[],
    )

    write_deck(buffer, ctx, 1, deck)

    base = ctx.deck_offsets[1]
    assert buffer[base : base + 6] == bytes([0xFF] * 6)
    assert buffer[base + 12 : base + 14] == bytes([0xFF, 0xFF])
    assert buffer[base + 24 : base + 30] == bytes([0xFF] * 6)
    stored = read_deck(buffer, ctx, 1)
    assert all(slot.is_empty for slot in stored.creature_slots)
    assert stored.creature_slots[0] == DeckCreatureSlot()
    assert stored.gate_cards == [None, 10300, None]
    assert stored.ability_cards == [None, None, None]


def test_padding_always_rewritten() -> None:
    ctx = context_for("ps3")
    buffer = buffer_for("ps3")

    write_deck(buffer, ctx, 0, _full_deck())

    base = ctx.deck_offsets[0]
    for padding in _PADDING_RANGES:
        assert all(buffer[base + index] == 0xFF for index in padding)


def test_write_stays_inside_deck_block() -> None:
    ctx = context_for("ps3")
    buffer = buffer_for("ps3", fill=0x12)

    write_deck(buffer, ctx, 0, Deck())

    base = ctx.deck_offsets[0]
    assert buffer[base - 1] == 0x12
    assert buffer[base + DECK_LENGTH] == 0x12
    assert buffer[base : base + DECK_LENGTH] == bytes([0xFF] * DECK_LENGTH)


@pytest.mark.parametrize("deck_index", [2, -1, True])
def test_invalid_deck_index(deck_index: int) -> None:
    ctx = context_for("ps3")
    buffer = buffer_for("ps3")

    with pytest.raises(InvalidDeckIndexError):
        read_deck(buffer, ctx, deck_index)
    with pytest.raises(InvalidDeckIndexError):
        write_deck(buffer, ctx, deck_index, Deck())


def test_deck_out_of_range_leaves_buffer_untouched() -> None:
    ctx = context_for("ps3")
    size = ctx.deck_offsets[1] + DECK_LENGTH - 1
    buffer = bytearray(size)

    with pytest.raises(OutOfRangeError):
        write_deck(buffer, ctx, 1, _full_deck())

    assert buffer == bytearray(size)
    assert read_deck(buffer, ctx, 0).gate_cards == [10232, 10232, 10232]


@pytest.mark.parametrize("card_id", [10231, 10232 + 0xFFFF, 10232.0, True])
def test_unstorable_card_id_raises(card_id: object) -> None:
    with pytest.raises(InvalidDeckSlotError):
        encode_card_slot(card_id)


def test_highest_storable_card_id() -> None:
    assert encode_card_slot(10232 + 0xFFFE) == 0xFFFE


@pytest.mark.parametrize(
    "slot",
    [
        DeckCreatureSlot(creature_id=4, attribute_id=7),
        DeckCreatureSlot(creature_id=4, attribute_id=-1),
        DeckCreatureSlot(creature_id=-1, attribute_id=0),
        DeckCreatureSlot(creature_id=10923, attribute_id=5),
    ],
)
def test_unstorable_creature_slot_raises(slot: DeckCreatureSlot) -> None:
    with pytest.raises(InvalidDeckSlotError):
        encode_creature_slot(slot)


@pytest.mark.parametrize(
    "deck",
    [
        Deck(gate_cards=[10300, 10231]),
        Deck(creature_slots=[DeckCreatureSlot(creature_id=4, attribute_id=7)]),
    ],
)
def test_unstorable_slot_leaves_deck_untouched(deck: Deck) -> None:
    ctx = context_for("ps3")
    buffer = buffer_for("ps3")
    write_deck(buffer, ctx, 0, _full_deck())
    before = bytes(buffer)

    with pytest.raises(InvalidDeckSlotError):
        write_deck(buffer, ctx, 0, deck)

    assert bytes(buffer) == before
    assert read_deck(buffer, ctx, 0) == _full_deck()
