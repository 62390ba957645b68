"""Bounds checks shared by the field codecs."""
from __future__ import annotations

from bakusave.services.errors import OutOfRangeError


def require_range(buffer: bytes | bytearray, offset: int, length: int, what: str) -> int:
    """Return ``offset`` if ``[offset, offset + length)`` lies inside ``buffer``."""
    if offset < 0 or offset + length > len(buffer):
        raise OutOfRangeError(what, offset, length, len(buffer))
    return offset
