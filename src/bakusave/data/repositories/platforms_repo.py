"""Platform layout repository."""
from __future__ import annotations

from typing import Dict, Tuple

from bakusave.core.types import ENDIANS, Endian
from bakusave.data.errors import DataValidationError
from bakusave.data.repositories.base import RepositoryBase
from bakusave.domain.defs import PlatformProfile, StatsOffsets
from bakusave.domain.defs.platform_def import MODE_COUNT_SLOTS, STATS_BYTE_COUNTERS

DECK_COUNT = 2

_PROFILE_FIELDS = {
    "save_size",
    "slot_count",
    "endian",
    "base_offset",
    "card_base_offset",
    "player_name_offset",
    "styling_offset",
    "deck_offsets",
    "deck_name_back_offset",
    "stats_offsets",
    "provisional",
}
_STATS_FIELDS = {
    "ranking_points",
    "bakugan_points",
    *STATS_BYTE_COUNTERS,
    "mode_counts",
    "opponent_wins",
    "attribute_usage",
}


class PlatformsRepository(RepositoryBase[PlatformProfile]):
    """Loads and validates the per-platform save layout table."""

    def __init__(self, base_path=None) -> None:
        super().__init__("platforms.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, PlatformProfile]:
        profiles: Dict[str, PlatformProfile] = {}
        for platform, payload in raw.items():
            context = f"platform '{platform}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(data, _PROFILE_FIELDS, context)

            save_size = self._require_optional_int(data["save_size"], f"{context} save_size")
            if save_size is not None and save_size <= 0:
                raise DataValidationError(f"{context} save_size must be positive.")
            slot_count = self._require_int(data["slot_count"], f"{context} slot_count")
            if save_size is None and slot_count != 1:
                raise DataValidationError(f"{context} is single-save and must declare slot_count 1.")
            if slot_count < 1:
                raise DataValidationError(f"{context} slot_count must be at least 1.")

            back_offset = self._require_optional_int(
                data["deck_name_back_offset"], f"{context} deck_name_back_offset"
            )
            if back_offset is not None and back_offset <= 0:
                raise DataValidationError(f"{context} deck_name_back_offset must be positive.")

            stats_raw = data["stats_offsets"]
            stats_offsets = None if stats_raw is None else self._parse_stats(stats_raw, context)

            profiles[platform] = PlatformProfile(
                platform=platform,
                save_size=save_size,
                base_offset=self._require_offset(data["base_offset"], f"{context} base_offset"),
                # Signed: the card flag table can start before the file on some layouts.
                card_base_offset=self._require_int(data["card_base_offset"], f"{context} card_base_offset"),
                player_name_offset=self._require_offset(
                    data["player_name_offset"], f"{context} player_name_offset"
                ),
                styling_offset=self._require_offset(data["styling_offset"], f"{context} styling_offset"),
                deck_offsets=self._parse_deck_offsets(data["deck_offsets"], context),
                endian=self._require_endian(data["endian"], f"{context} endian"),
                deck_name_back_offset=back_offset,
                stats_offsets=stats_offsets,
                slot_count=slot_count,
                provisional=self._parse_provisional(data["provisional"], context),
            )
        return profiles

    def _parse_deck_offsets(self, raw: object, context: str) -> Tuple[int, int]:
        if not isinstance(raw, list) or len(raw) != DECK_COUNT:
            raise DataValidationError(f"{context} deck_offsets must be a list of {DECK_COUNT} integers.")
        first, second = (
            self._require_offset(value, f"{context} deck_offsets[{index}]") for index, value in enumerate(raw)
        )
        return first, second

    def _parse_stats(self, raw: object, platform_context: str) -> StatsOffsets:
        context = f"{platform_context} stats_offsets"
        data = self._require_mapping(raw, context)
        self._assert_exact_fields(data, _STATS_FIELDS, context)

        counters = {
            name: self._require_optional_offset(data[name], f"{context} {name}") for name in STATS_BYTE_COUNTERS
        }
        mode_raw = data["mode_counts"]
        if not isinstance(mode_raw, list) or len(mode_raw) != MODE_COUNT_SLOTS:
            raise DataValidationError(f"{context} mode_counts must be a list of {MODE_COUNT_SLOTS} entries.")
        mode_counts = tuple(
            self._require_optional_offset(value, f"{context} mode_counts[{index}]")
            for index, value in enumerate(mode_raw)
        )
        return StatsOffsets(
            ranking_points=self._require_offset(data["ranking_points"], f"{context} ranking_points"),
            bakugan_points=self._require_offset(data["bakugan_points"], f"{context} bakugan_points"),
            mode_counts=mode_counts,
            opponent_wins=self._require_optional_offset(data["opponent_wins"], f"{context} opponent_wins"),
            attribute_usage=self._require_optional_offset(data["attribute_usage"], f"{context} attribute_usage"),
            **counters,
        )

    def _parse_provisional(self, raw: object, context: str) -> Tuple[str, ...]:
        if not isinstance(raw, list):
            raise DataValidationError(f"{context} provisional must be a list of field names.")
        names = tuple(self._require_str(value, f"{context} provisional entry") for value in raw)
        unknown = sorted(set(names) - (_PROFILE_FIELDS - {"provisional"}))
        if unknown:
            raise DataValidationError(f"{context} provisional names unknown fields: {unknown}")
        return names

    @classmethod
    def _require_offset(cls, value: object, context: str) -> int:
        offset = cls._require_int(value, context)
        if offset < 0:
            raise DataValidationError(f"{context} must not be negative.")
        return offset

    @classmethod
    def _require_optional_offset(cls, value: object, context: str) -> int | None:
        if value is None:
            return None
        return cls._require_offset(value, context)

    @staticmethod
    def _require_endian(value: object, context: str) -> Endian:
        if value not in ENDIANS:
            raise DataValidationError(f"{context} must be one of {list(ENDIANS)}.")
        return value  # type: ignore[return-value]
