"""Avatar styling block codec."""
from __future__ import annotations

from functools import lru_cache
from typing import Dict, Mapping, Sequence

from bakusave.core.log import get_logger
from bakusave.data.repositories import STYLING_LENGTH, StylingFieldsRepository, require_styling_offset
from bakusave.domain.context import SaveContext
from bakusave.domain.defs import StylingFieldDef
from bakusave.domain.stat_scaling import coerce_int
from bakusave.services.codecs.bounds import require_range

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def default_styling_fields() -> tuple[StylingFieldDef, ...]:
    """Return the bundled styling descriptors, loaded once."""
    return tuple(StylingFieldsRepository().ordered())


def _styling_offset_checked(buffer: bytes | bytearray, ctx: SaveContext) -> int:
    return require_range(buffer, ctx.styling_offset, STYLING_LENGTH, "Styling block")


def read_styling(
    buffer: bytes | bytearray,
    ctx: SaveContext,
    fields: Sequence[StylingFieldDef] | None = None,
) -> Dict[str, int]:
    """Return the value of every described styling field."""
    base = _styling_offset_checked(buffer, ctx)
    descriptors = default_styling_fields() if fields is None else fields
    return {
        field.key: buffer[base + require_styling_offset(field.key, field.byte_offset)]
        for field in descriptors
    }


def _as_byte(value: object) -> int | None:
    number = coerce_int(value)
    return None if number is None else number & 0xFF


def write_styling(
    buffer: bytearray,
    ctx: SaveContext,
    values: Mapping[str, object],
    fields: Sequence[StylingFieldDef] | None = None,
) -> None:
    """Write every described field that has a numeric value in ``values``.

    Each written byte is followed by a zero padding byte when that byte is
    still inside the block. Fields without a numeric value are left as-is.
    Descriptors placed outside the block raise DataValidationError before
    anything is written.
    """
    base = _styling_offset_checked(buffer, ctx)
    descriptors = default_styling_fields() if fields is None else fields
    end = base + STYLING_LENGTH
    pending = []
    for field in descriptors:
        index = base + require_styling_offset(field.key, field.byte_offset)
        value = _as_byte(values.get(field.key))
        if value is not None:
            pending.append((index, value))
    for index, value in pending:
        buffer[index] = value
        if index + 1 < end:
            buffer[index + 1] = 0x00
    logger.debug("Wrote %d styling fields at offset %d", len(pending), base)
