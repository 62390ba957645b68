"""Styling block field descriptors."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StylingFieldDef:
    """One single-byte styling value inside the 45-byte styling block."""

    key: str
    byte_offset: int
    label: str
    group: str
    option_count: int = 0
