"""Player and deck name codec.

Names are stored as one ASCII byte per character, each followed by a zero
padding byte. A zero character byte terminates the name early.
"""
from __future__ import annotations

from bakusave.core.log import get_logger
from bakusave.domain.context import SaveContext
from bakusave.services.codecs.bounds import require_range
from bakusave.services.codecs.deck_codec import lookup_deck_offset
from bakusave.services.errors import DeckNameUnsupportedError

PLAYER_NAME_MAX_CHARS = 8
DECK_NAME_MAX_CHARS = 10
CHAR_STRIDE = 2
PRINTABLE_RANGE = (0x20, 0x7E)
REPLACEMENT_CHAR = 0x3F  # '?'

logger = get_logger(__name__)


def _read_name(buffer: bytes | bytearray, offset: int, max_chars: int, what: str) -> str:
    require_range(buffer, offset, max_chars * CHAR_STRIDE, what)
    chars = []
    for index in range(max_chars):
        char_byte = buffer[offset + index * CHAR_STRIDE]
        if char_byte == 0x00:
            break
        chars.append(chr(char_byte))
    return "".join(chars)


def encode_name(name: str | None, max_chars: int) -> bytes:
    """Return the padded on-disk form of ``name`` for a ``max_chars`` field."""
    safe_name = (name or "")[:max_chars]
    low, high = PRINTABLE_RANGE
    encoded = bytearray(max_chars * CHAR_STRIDE)
    for index, char in enumerate(safe_name):
        code = ord(char)
        encoded[index * CHAR_STRIDE] = code if low <= code <= high else REPLACEMENT_CHAR
    return bytes(encoded)


def _write_name(buffer: bytearray, offset: int, name: str | None, max_chars: int, what: str) -> None:
    length = max_chars * CHAR_STRIDE
    require_range(buffer, offset, length, what)
    buffer[offset : offset + length] = encode_name(name, max_chars)


def read_player_name(buffer: bytes | bytearray, ctx: SaveContext) -> str:
    """Return the player name."""
    return _read_name(buffer, ctx.player_name_offset, PLAYER_NAME_MAX_CHARS, "Player name")


def write_player_name(buffer: bytearray, ctx: SaveContext, name: str | None) -> None:
    """Store ``name``, truncated to 8 characters with unprintables replaced by '?'."""
    _write_name(buffer, ctx.player_name_offset, name, PLAYER_NAME_MAX_CHARS, "Player name")
    logger.debug("Wrote player name at offset %d", ctx.player_name_offset)


def get_deck_name_offset(ctx: SaveContext, deck_index: int) -> int:
    """Return the absolute offset of a deck's name field."""
    if ctx.deck_name_offsets is None:
        raise DeckNameUnsupportedError(ctx.platform)
    return lookup_deck_offset(ctx.deck_name_offsets, deck_index)


def read_deck_name(buffer: bytes | bytearray, ctx: SaveContext, deck_index: int) -> str:
    """Return the name of deck ``deck_index``."""
    offset = get_deck_name_offset(ctx, deck_index)
    return _read_name(buffer, offset, DECK_NAME_MAX_CHARS, f"Deck {deck_index + 1} name")


def write_deck_name(buffer: bytearray, ctx: SaveContext, deck_index: int, name: str | None) -> None:
    """Store ``name`` for deck ``deck_index``, truncated to 10 characters."""
    offset = get_deck_name_offset(ctx, deck_index)
    _write_name(buffer, offset, name, DECK_NAME_MAX_CHARS, f"Deck {deck_index + 1} name")
    logger.debug("Wrote deck %d name at offset %d", deck_index, offset)
