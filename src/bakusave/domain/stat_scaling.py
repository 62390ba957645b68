"""Scaling helpers between stored bakugan stats and editor-facing values."""
from __future__ import annotations

import math
from dataclasses import replace

from bakusave.domain.entities import SUBSTAT_FIELDS, CreatureEntry

SUBSTAT_STEP = 10
SUBSTAT_DISPLAY_RANGE = (1, 5)
POWER_RANGE = (0, 1000)
LEVEL_RANGE = (1, 10)
BYTE_RANGE = (0, 255)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def clamp(value: float, lower: int, upper: int) -> int:
    """Round and clamp ``value`` into ``[lower, upper]``; NaN maps to ``lower``."""
    if isinstance(value, int):
        return min(max(int(value), lower), upper)
    if isinstance(value, float):
        if math.isnan(value):
            return lower
        if math.isinf(value):
            return upper if value > 0 else lower
    return min(max(_round_half_up(value), lower), upper)


def coerce_int(value: object) -> int | None:
    """Return ``value`` as an int, 0 for NaN or infinity, None if it is not a number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        return int(value)
    return value


def clamp_byte(value: object) -> int:
    """Coerce an arbitrary input to a byte; non-numeric and NaN input become 0."""
    number = coerce_int(value)
    if number is None:
        return 0
    return clamp(number, *BYTE_RANGE)


def display_from_stored(stored: int) -> int:
    """Convert a stored substat (10, 20, ... 50) into its 1-5 display rating."""
    return clamp(stored / SUBSTAT_STEP, *SUBSTAT_DISPLAY_RANGE)


def stored_from_display(display: float) -> int:
    """Convert a 1-5 display rating back into the stored substat value."""
    return clamp(display, *SUBSTAT_DISPLAY_RANGE) * SUBSTAT_STEP


def normalize_entry(entry: CreatureEntry) -> CreatureEntry:
    """Return ``entry`` with the in-game limits applied to every editable stat."""
    substats = {
        name: stored_from_display(display_from_stored(getattr(entry, name)))
        for name in SUBSTAT_FIELDS
    }
    return replace(
        entry,
        power=clamp(entry.power, *POWER_RANGE),
        level=clamp(entry.level, *LEVEL_RANGE),
        **substats,
    )
