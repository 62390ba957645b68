"""Codec for Bakugan Battle Brawlers save files across console platforms."""
from __future__ import annotations

from bakusave.core.byteio import read_u16, read_u24, write_u16, write_u24
from bakusave.domain.context import SaveContext
from bakusave.domain.defs import PlatformProfile, StatsOffsets, StylingFieldDef
from bakusave.domain.entities import CreatureEntry, Deck, DeckCreatureSlot, StatsBlock
from bakusave.services.codecs import (
    read_card_flag,
    read_creature_entry,
    read_deck,
    read_deck_name,
    read_player_name,
    read_stats,
    read_styling,
    write_card_flag,
    write_creature_entry,
    write_deck,
    write_deck_name,
    write_player_name,
    write_stats,
    write_styling,
)
from bakusave.services.context_resolver import SaveContextResolver, resolve_context
from bakusave.services.errors import (
    DeckNameUnsupportedError,
    InvalidDeckIndexError,
    InvalidDeckSlotError,
    OutOfRangeError,
    SaveFileError,
    SaveFormatError,
    StatsUnsupportedError,
    UnknownPlatformError,
)
from bakusave.services.save_editor import SaveEditor
from bakusave.services.save_file import SaveFile, parse_save_file, serialize_save_file

__version__ = "0.3.0"

__all__ = [
    "CreatureEntry",
    "Deck",
    "DeckCreatureSlot",
    "DeckNameUnsupportedError",
    "InvalidDeckIndexError",
    "InvalidDeckSlotError",
    "OutOfRangeError",
    "PlatformProfile",
    "SaveContext",
    "SaveContextResolver",
    "SaveEditor",
    "SaveFile",
    "SaveFileError",
    "SaveFormatError",
    "StatsBlock",
    "StatsOffsets",
    "StatsUnsupportedError",
    "StylingFieldDef",
    "UnknownPlatformError",
    "parse_save_file",
    "read_card_flag",
    "read_creature_entry",
    "read_deck",
    "read_deck_name",
    "read_player_name",
    "read_stats",
    "read_styling",
    "read_u16",
    "read_u24",
    "resolve_context",
    "serialize_save_file",
    "write_card_flag",
    "write_creature_entry",
    "write_deck",
    "write_deck_name",
    "write_player_name",
    "write_stats",
    "write_styling",
    "write_u16",
    "write_u24",
]
