"""In-memory save file wrapper."""
from __future__ import annotations

from dataclasses import dataclass

from bakusave.services.errors import SaveFileError


@dataclass(slots=True)
class SaveFile:
    """Owns the mutable byte buffer for one editing session."""

    data: bytearray

    @property
    def size(self) -> int:
        return len(self.data)


def parse_save_file(raw: bytes | bytearray | memoryview) -> SaveFile:
    """Copy ``raw`` into a new editable SaveFile."""
    if raw is None:
        raise SaveFileError("No save data supplied.")
    data = bytearray(raw)
    if not data:
        raise SaveFileError("Save data is empty.")
    return SaveFile(data=data)


def serialize_save_file(save: SaveFile | None) -> bytes:
    """Return an immutable snapshot of the edited bytes."""
    if save is None or not save.data:
        raise SaveFileError("Nothing to serialize")
    return bytes(save.data)
