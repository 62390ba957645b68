"""Exceptions raised while loading layout definition files."""
from __future__ import annotations

from pathlib import Path


class DataError(Exception):
    """Base exception for the definitions layer."""


class DataLoadError(DataError):
    """Raised when a definition file is missing, unreadable or not JSON."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class DataValidationError(DataError):
    """Raised when definition content does not match the expected schema."""
