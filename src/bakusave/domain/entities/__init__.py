"""Entity exports."""

from .creature import SUBSTAT_FIELDS, CreatureEntry
from .deck import DECK_SLOT_COUNT, Deck, DeckCreatureSlot
from .stats import StatsBlock

__all__ = [
    "CreatureEntry",
    "DECK_SLOT_COUNT",
    "Deck",
    "DeckCreatureSlot",
    "SUBSTAT_FIELDS",
    "StatsBlock",
]
