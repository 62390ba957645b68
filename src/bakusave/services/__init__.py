"""Service layer exports."""

from .context_resolver import SaveContextResolver, clamp_slot, default_resolver, resolve_context
from .errors import (
    DeckNameUnsupportedError,
    InvalidDeckIndexError,
    InvalidDeckSlotError,
    OutOfRangeError,
    SaveFileError,
    SaveFormatError,
    StatsUnsupportedError,
    UnknownPlatformError,
)
from .save_editor import SaveEditor
from .save_file import SaveFile, parse_save_file, serialize_save_file

__all__ = [
    "DeckNameUnsupportedError",
    "InvalidDeckIndexError",
    "InvalidDeckSlotError",
    "OutOfRangeError",
    "SaveContextResolver",
    "SaveEditor",
    "SaveFile",
    "SaveFileError",
    "SaveFormatError",
    "StatsUnsupportedError",
    "UnknownPlatformError",
    "clamp_slot",
    "default_resolver",
    "parse_save_file",
    "resolve_context",
    "serialize_save_file",
]
