"""Repository exports."""

from .platforms_repo import PlatformsRepository
from .styling_fields_repo import STYLING_LENGTH, StylingFieldsRepository, require_styling_offset

__all__ = [
    "PlatformsRepository",
    "STYLING_LENGTH",
    "StylingFieldsRepository",
    "require_styling_offset",
]
