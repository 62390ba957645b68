"""Resolves per-platform layout profiles into absolute save offsets."""
from __future__ import annotations

from functools import lru_cache

from bakusave.core.log import get_logger
from bakusave.data.repositories import PlatformsRepository
from bakusave.domain.context import SaveContext
from bakusave.domain.defs import PlatformProfile
from bakusave.services.errors import UnknownPlatformError

logger = get_logger(__name__)


class SaveContextResolver:
    """Turns (platform, slot) pairs into immutable SaveContext values."""

    def __init__(self, *, platforms_repo: PlatformsRepository | None = None) -> None:
        self._platforms_repo = platforms_repo or PlatformsRepository()
        self._warned_provisional: set[str] = set()

    def platforms(self) -> list[str]:
        """Return every known platform key."""
        return self._platforms_repo.ids()

    def profile(self, platform: str) -> PlatformProfile:
        """Return the layout profile for ``platform``."""
        try:
            return self._platforms_repo.get(platform)
        except KeyError as exc:
            raise UnknownPlatformError(platform) from exc

    def resolve(self, platform: str, slot: int = 0) -> SaveContext:
        """Return the absolute-offset context for ``slot`` of ``platform``."""
        profile = self.profile(platform)
        self._warn_provisional(profile)

        resolved_slot = clamp_slot(profile, slot)
        if resolved_slot != slot:
            logger.debug("Clamped %s save slot %s to %s", platform, slot, resolved_slot)
        shift = profile.save_size * resolved_slot if profile.save_size is not None else 0

        deck_offsets = tuple(offset + shift for offset in profile.deck_offsets)
        deck_name_offsets = None
        if profile.deck_name_back_offset is not None:
            deck_name_offsets = tuple(offset - profile.deck_name_back_offset for offset in deck_offsets)
        stats_offsets = None
        if profile.stats_offsets is not None:
            stats_offsets = profile.stats_offsets.shifted(shift)

        return SaveContext(
            platform=profile.platform,
            slot=resolved_slot,
            endian=profile.endian,
            base_offset=profile.base_offset + shift,
            card_base_offset=profile.card_base_offset + shift,
            player_name_offset=profile.player_name_offset + shift,
            styling_offset=profile.styling_offset + shift,
            deck_offsets=deck_offsets,
            deck_name_offsets=deck_name_offsets,
            stats_offsets=stats_offsets,
            shift=shift,
        )

    def _warn_provisional(self, profile: PlatformProfile) -> None:
        if not profile.provisional or profile.platform in self._warned_provisional:
            return
        self._warned_provisional.add(profile.platform)
        logger.warning(
            "Platform '%s' uses unverified layout values: %s",
            profile.platform,
            ", ".join(profile.provisional),
        )


def clamp_slot(profile: PlatformProfile, slot: int | None) -> int:
    """Clamp a requested save slot into the range the platform supports."""
    if not profile.multi_save:
        return 0
    requested = slot or 0
    return min(max(requested, 0), profile.slot_count - 1)


@lru_cache(maxsize=1)
def default_resolver() -> SaveContextResolver:
    """Return the process-wide resolver over the bundled platform table."""
    return SaveContextResolver()


def resolve_context(platform: str, slot: int = 0) -> SaveContext:
    """Resolve ``platform``/``slot`` against the bundled platform table."""
    return default_resolver().resolve(platform, slot)
