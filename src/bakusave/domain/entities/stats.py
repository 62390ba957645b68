"""Battle statistics model."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


def _zero_mode_counts() -> List[int]:
    return [0, 0, 0]


@dataclass(slots=True)
class StatsBlock:
    """Player battle statistics.

    ``opponent_wins`` and ``attribute_usage`` are ``None`` when the platform
    layout has no position for them, or when a write should leave them alone.
    """

    ranking_points: int = 0
    bakugan_points: int = 0
    battles: int = 0
    wins: int = 0
    losses: int = 0
    sphere_attacks: int = 0
    double_stands: int = 0
    mode_counts: List[int] = field(default_factory=_zero_mode_counts)
    opponent_wins: List[int] | None = None
    attribute_usage: List[int] | None = None
