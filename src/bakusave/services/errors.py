"""Service-layer exceptions."""
from __future__ import annotations


class SaveFormatError(Exception):
    """Base exception for save layout and codec failures."""


class UnknownPlatformError(SaveFormatError):
    """Raised when a platform key has no layout profile."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"Unknown platform: {platform}")
        self.platform = platform


class OutOfRangeError(SaveFormatError):
    """Raised when a field would extend past either end of the buffer."""

    def __init__(self, what: str, offset: int, length: int, buffer_size: int) -> None:
        super().__init__(
            f"{what} at offset {offset} (length {length}) out of range (file size: {buffer_size})"
        )
        self.offset = offset
        self.length = length
        self.buffer_size = buffer_size


class InvalidDeckIndexError(SaveFormatError):
    """Raised when a deck index does not name a configured deck."""

    def __init__(self, deck_index: int) -> None:
        super().__init__(f"Invalid deck index {deck_index}")
        self.deck_index = deck_index


class DeckNameUnsupportedError(SaveFormatError):
    """Raised when deck names have no known location on a platform."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"Deck names are not supported on platform '{platform}'")
        self.platform = platform


class StatsUnsupportedError(SaveFormatError):
    """Raised when a platform layout has no battle statistics block."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"Stats unavailable on platform '{platform}'")
        self.platform = platform


class SaveFileError(SaveFormatError):
    """Raised when raw save data cannot be wrapped or serialized."""


class InvalidDeckSlotError(SaveFormatError):
    """Raised when a deck slot value cannot be stored in a 16-bit slot."""

    def __init__(self, what: str, value: object) -> None:
        super().__init__(f"{what} cannot be stored in a deck slot: {value!r}")
        self.value = value
