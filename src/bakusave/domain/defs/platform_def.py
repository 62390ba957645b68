"""Per-platform save layout definitions."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from bakusave.core.types import Endian

STATS_BYTE_COUNTERS: Tuple[str, ...] = (
    "battles",
    "wins",
    "losses",
    "sphere_attacks",
    "double_stands",
)
MODE_COUNT_SLOTS = 3
OPPONENT_COUNT = 16
ATTRIBUTE_COUNT = 6


@dataclass(frozen=True, slots=True)
class StatsOffsets:
    """Offsets of the battle statistics block.

    Single-byte counters may be ``None`` when their position in the save is
    unknown; such counters read as 0 and are never written.
    """

    ranking_points: int
    bakugan_points: int
    battles: int | None = None
    wins: int | None = None
    losses: int | None = None
    sphere_attacks: int | None = None
    double_stands: int | None = None
    mode_counts: Tuple[int | None, ...] = (None, None, None)
    opponent_wins: int | None = None
    attribute_usage: int | None = None

    def shifted(self, shift: int) -> "StatsOffsets":
        """Return a copy with every configured offset moved by ``shift``."""

        def _move(value: int | None) -> int | None:
            return None if value is None else value + shift

        return StatsOffsets(
            ranking_points=self.ranking_points + shift,
            bakugan_points=self.bakugan_points + shift,
            battles=_move(self.battles),
            wins=_move(self.wins),
            losses=_move(self.losses),
            sphere_attacks=_move(self.sphere_attacks),
            double_stands=_move(self.double_stands),
            mode_counts=tuple(_move(value) for value in self.mode_counts),
            opponent_wins=_move(self.opponent_wins),
            attribute_usage=_move(self.attribute_usage),
        )


@dataclass(frozen=True, slots=True)
class PlatformProfile:
    """Static layout constants for one platform."""

    platform: str
    save_size: int | None
    base_offset: int
    card_base_offset: int
    player_name_offset: int
    styling_offset: int
    deck_offsets: Tuple[int, int]
    endian: Endian
    deck_name_back_offset: int | None = None
    stats_offsets: StatsOffsets | None = None
    slot_count: int = 1
    provisional: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def multi_save(self) -> bool:
        return self.save_size is not None
