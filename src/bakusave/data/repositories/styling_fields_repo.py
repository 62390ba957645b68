"""Styling field descriptor repository."""
from __future__ import annotations

from typing import Dict

from bakusave.data.errors import DataValidationError
from bakusave.data.repositories.base import RepositoryBase
from bakusave.domain.defs import StylingFieldDef

STYLING_LENGTH = 45


def require_styling_offset(key: str, byte_offset: int) -> int:
    """Return ``byte_offset`` if it falls inside the styling block."""
    valid = isinstance(byte_offset, int) and not isinstance(byte_offset, bool)
    if not valid or not 0 <= byte_offset < STYLING_LENGTH:
        raise DataValidationError(
            f"styling field '{key}' byte_offset must be within the {STYLING_LENGTH}-byte styling block."
        )
    return byte_offset


class StylingFieldsRepository(RepositoryBase[StylingFieldDef]):
    """Loads the descriptor list for the avatar styling block."""

    def __init__(self, base_path=None) -> None:
        super().__init__("styling_fields.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, StylingFieldDef]:
        fields: Dict[str, StylingFieldDef] = {}
        seen_offsets: Dict[int, str] = {}
        for key, payload in raw.items():
            context = f"styling field '{key}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(data, {"byte_offset", "label", "group", "option_count"}, context)

            byte_offset = self._require_int(data["byte_offset"], f"{context} byte_offset")
            require_styling_offset(key, byte_offset)
            if byte_offset in seen_offsets:
                raise DataValidationError(
                    f"{context} shares byte_offset {byte_offset} with '{seen_offsets[byte_offset]}'."
                )
            seen_offsets[byte_offset] = key

            option_count = self._require_int(data["option_count"], f"{context} option_count")
            if option_count < 0:
                raise DataValidationError(f"{context} option_count must not be negative.")

            fields[key] = StylingFieldDef(
                key=key,
                byte_offset=byte_offset,
                label=self._require_str(data["label"], f"{context} label"),
                group=self._require_str(data["group"], f"{context} group"),
                option_count=option_count,
            )
        return fields

    def ordered(self) -> list[StylingFieldDef]:
        """Return descriptors in block order."""
        return sorted(self.all(), key=lambda field: field.byte_offset)

    def by_group(self) -> Dict[str, list[StylingFieldDef]]:
        """Return descriptors grouped for display, each group in block order."""
        groups: Dict[str, list[StylingFieldDef]] = {}
        for field in self.ordered():
            groups.setdefault(field.group, []).append(field)
        return groups
