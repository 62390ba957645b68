"""Shared type aliases for the core and domain layers."""
from typing import Literal

Endian = Literal["big", "little"]

ENDIANS: tuple[Endian, ...] = ("big", "little")

__all__ = ["ENDIANS", "Endian"]
