"""Field codecs for every fixed-layout save entity."""

from .card_codec import count_unlocked, read_card_flag, write_card_flag, write_card_flags
from .creature_codec import read_creature_entry, write_creature_entry
from .deck_codec import read_deck, write_deck
from .name_codec import read_deck_name, read_player_name, write_deck_name, write_player_name
from .stats_codec import read_stats, write_stats
from .styling_codec import read_styling, write_styling

__all__ = [
    "count_unlocked",
    "read_card_flag",
    "read_creature_entry",
    "read_deck",
    "read_deck_name",
    "read_player_name",
    "read_stats",
    "read_styling",
    "write_card_flag",
    "write_card_flags",
    "write_creature_entry",
    "write_deck",
    "write_deck_name",
    "write_player_name",
    "write_stats",
    "write_styling",
]
