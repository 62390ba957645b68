"""Deck loadout models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

DECK_SLOT_COUNT = 3


@dataclass(slots=True)
class DeckCreatureSlot:
    """A bakugan slot. Both ids are ``None`` when the slot is empty."""

    creature_id: int | None = None
    attribute_id: int | None = None

    @property
    def is_empty(self) -> bool:
        return self.creature_id is None or self.attribute_id is None


def _empty_creature_slots() -> List[DeckCreatureSlot]:
    return [DeckCreatureSlot() for _ in range(DECK_SLOT_COUNT)]


def _empty_card_slots() -> List[int | None]:
    return [None] * DECK_SLOT_COUNT


@dataclass(slots=True)
class Deck:
    """Three bakugan, three gate cards and three ability cards.

    Card slots hold absolute card ids or ``None`` for an empty slot.
    """

    creature_slots: List[DeckCreatureSlot] = field(default_factory=_empty_creature_slots)
    gate_cards: List[int | None] = field(default_factory=_empty_card_slots)
    ability_cards: List[int | None] = field(default_factory=_empty_card_slots)
