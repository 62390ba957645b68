"""Bakugan stat record model."""
from __future__ import annotations

from dataclasses import dataclass

SUBSTAT_FIELDS: tuple[str, ...] = ("speed", "defense", "acceleration", "endurance", "jump")


@dataclass(slots=True)
class CreatureEntry:
    """Decoded 14-byte stat record for one bakugan/attribute combination."""

    id: int = 0
    attribute: int = 0
    power: int = 0
    speed: int = 0
    defense: int = 0
    acceleration: int = 0
    endurance: int = 0
    jump: int = 0
    level: int = 0
