"""Resolved, absolute-offset view of one save instance."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from bakusave.core.types import Endian
from bakusave.domain.defs import StatsOffsets


@dataclass(frozen=True, slots=True)
class SaveContext:
    """Absolute offsets for a single (platform, slot) pair."""

    platform: str
    slot: int
    endian: Endian
    base_offset: int
    card_base_offset: int
    player_name_offset: int
    styling_offset: int
    deck_offsets: Tuple[int, ...]
    deck_name_offsets: Tuple[int, ...] | None = None
    stats_offsets: StatsOffsets | None = None
    shift: int = 0
