"""Domain definition exports."""

from .platform_def import PlatformProfile, StatsOffsets
from .styling_field_def import StylingFieldDef

__all__ = [
    "PlatformProfile",
    "StatsOffsets",
    "StylingFieldDef",
]
