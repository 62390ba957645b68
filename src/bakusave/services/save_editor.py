"""Editing session bound to one save buffer and one resolved save slot."""
from __future__ import annotations

from typing import Dict, Iterable, Mapping, Sequence

from bakusave.core.log import get_logger
from bakusave.domain.context import SaveContext
from bakusave.domain.defs import StylingFieldDef
from bakusave.domain.entities import CreatureEntry, Deck, StatsBlock
from bakusave.services import codecs
from bakusave.services.context_resolver import SaveContextResolver, default_resolver
from bakusave.services.save_file import SaveFile

logger = get_logger(__name__)


class SaveEditor:
    """Runs field codecs against a save buffer using a cached context."""

    def __init__(
        self,
        save_file: SaveFile,
        platform: str,
        slot: int = 0,
        *,
        resolver: SaveContextResolver | None = None,
        styling_fields: Sequence[StylingFieldDef] | None = None,
    ) -> None:
        self._save_file = save_file
        self._resolver = resolver or default_resolver()
        self._styling_fields = styling_fields
        self._context = self._resolver.resolve(platform, slot)

    @property
    def context(self) -> SaveContext:
        return self._context

    @property
    def buffer(self) -> bytearray:
        return self._save_file.data

    def switch_slot(self, slot: int) -> SaveContext:
        """Re-resolve the context for another slot of the same platform."""
        self._context = self._resolver.resolve(self._context.platform, slot)
        logger.debug("Editing %s slot %d", self._context.platform, self._context.slot)
        return self._context

    def creature_entry(self, creature_id: int, attribute_id: int) -> CreatureEntry:
        return codecs.read_creature_entry(self.buffer, self._context, creature_id, attribute_id)

    def set_creature_entry(
        self, creature_id: int, attribute_id: int, entry: CreatureEntry | Mapping[str, int | None]
    ) -> None:
        codecs.write_creature_entry(self.buffer, self._context, creature_id, attribute_id, entry)

    def card_unlocked(self, card_id: int) -> bool:
        return codecs.read_card_flag(self.buffer, self._context, card_id)

    def set_card_unlocked(self, card_id: int, unlocked: bool) -> None:
        codecs.write_card_flag(self.buffer, self._context, card_id, unlocked)

    def set_cards_unlocked(self, card_ids: Iterable[int], unlocked: bool) -> int:
        """Lock or unlock a batch of cards; nothing changes if any id is out of range."""
        return codecs.write_card_flags(self.buffer, self._context, card_ids, unlocked)

    def count_unlocked(self, card_ids: Iterable[int]) -> int:
        return codecs.count_unlocked(self.buffer, self._context, card_ids)

    def player_name(self) -> str:
        return codecs.read_player_name(self.buffer, self._context)

    def set_player_name(self, name: str | None) -> None:
        codecs.write_player_name(self.buffer, self._context, name)

    def styling(self) -> Dict[str, int]:
        return codecs.read_styling(self.buffer, self._context, self._styling_fields)

    def set_styling(self, values: Mapping[str, object]) -> None:
        codecs.write_styling(self.buffer, self._context, values, self._styling_fields)

    def deck(self, deck_index: int) -> Deck:
        return codecs.read_deck(self.buffer, self._context, deck_index)

    def set_deck(self, deck_index: int, deck: Deck) -> None:
        codecs.write_deck(self.buffer, self._context, deck_index, deck)

    def deck_name(self, deck_index: int) -> str:
        return codecs.read_deck_name(self.buffer, self._context, deck_index)

    def set_deck_name(self, deck_index: int, name: str | None) -> None:
        codecs.write_deck_name(self.buffer, self._context, deck_index, name)

    def stats(self) -> StatsBlock:
        return codecs.read_stats(self.buffer, self._context)

    def set_stats(self, stats: StatsBlock) -> None:
        codecs.write_stats(self.buffer, self._context, stats)
