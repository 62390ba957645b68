"""Endian-aware fixed-width integer access over a mutable byte buffer.

These helpers do no bounds checking. Callers validate ``offset + width``
against the buffer length before calling in.
"""
from __future__ import annotations

from .types import Endian

U16_MASK = 0xFFFF
U24_MASK = 0xFFFFFF


def read_u16(buffer: bytes | bytearray, offset: int, endian: Endian) -> int:
    """Return the unsigned 16-bit value stored at ``offset``."""
    return int.from_bytes(buffer[offset : offset + 2], endian)


def write_u16(buffer: bytearray, offset: int, value: int, endian: Endian) -> None:
    """Store ``value`` (masked to 16 bits) at ``offset``."""
    buffer[offset : offset + 2] = (int(value) & U16_MASK).to_bytes(2, endian)


def read_u24(buffer: bytes | bytearray, offset: int, endian: Endian) -> int:
    """Return the unsigned 24-bit value stored at ``offset``."""
    return int.from_bytes(buffer[offset : offset + 3], endian)


def write_u24(buffer: bytearray, offset: int, value: int, endian: Endian) -> None:
    """Store ``value`` (masked to 24 bits) at ``offset``."""
    buffer[offset : offset + 3] = (int(value) & U24_MASK).to_bytes(3, endian)
