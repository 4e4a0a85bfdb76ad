"""Client-side playlist cache that drives playback selection."""

import random
from typing import Dict, List, Optional, Tuple, Union

from .catalog import CatalogService, validate_mode
from .errors import EmptyCandidateSetError
from .logging_config import get_logger
from .modes import Mode
from .selection import select_next
from .store import PlaylistEntry

logger = get_logger(__name__)


class CacheStats:
    """Statistics for cache operations."""

    def __init__(self) -> None:
        """Initialize cache stats."""
        self.hits = 0
        self.misses = 0
        self.refreshes = 0

    def reset(self) -> None:
        """Reset cache stats."""
        self.hits = 0
        self.misses = 0
        self.refreshes = 0


class ModePlaylistCache:
    """Read-only mirror of per-mode playlists.

    The cached lists are replaced wholesale from the catalog on every mode
    switch and after every add or remove; they are never edited in place.
    """

    def __init__(
        self,
        catalog: CatalogService,
        mode: Union[Mode, str] = Mode.SLEEP,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize the cache on a starting mode.

        Args:
            catalog: Catalog service to fetch from and write through
            mode: Starting mode
            rng: Random source for selection
        """
        self.catalog = catalog
        self.rng = rng
        self.stats = CacheStats()
        self._entries: Dict[Mode, Tuple[Tuple[int, str], ...]] = {}

        self.current_mode = validate_mode(mode)
        self.refresh()
        video_ids = self.video_ids()
        self.current_video_id: Optional[str] = video_ids[0] if video_ids else None

    def refresh(self, mode: Union[Mode, str, None] = None) -> List[Tuple[int, str]]:
        """Re-fetch a mode's playlist from the catalog.

        Args:
            mode: Mode to refresh, defaults to the current mode

        Returns:
            List of (entry id, video ID) pairs
        """
        target = validate_mode(mode) if mode is not None else self.current_mode
        entries: List[PlaylistEntry] = self.catalog.list_urls(target)
        self._entries[target] = tuple((entry.id, entry.video_id) for entry in entries)
        self.stats.refreshes += 1
        logger.debug("Refreshed %s: %d videos", target.value, len(entries))
        return list(self._entries[target])

    def entries(self, mode: Union[Mode, str, None] = None) -> List[Tuple[int, str]]:
        """Get cached (entry id, video ID) pairs, fetching on a miss."""
        target = validate_mode(mode) if mode is not None else self.current_mode
        if target in self._entries:
            self.stats.hits += 1
            return list(self._entries[target])

        self.stats.misses += 1
        return self.refresh(target)

    def video_ids(self, mode: Union[Mode, str, None] = None) -> List[str]:
        """Get cached video IDs of a mode in listing order."""
        return [video_id for _, video_id in self.entries(mode)]

    def switch_mode(self, mode: Union[Mode, str]) -> List[str]:
        """Make a mode current and refresh its playlist.

        The current video keeps playing until the next pick.

        Returns:
            Video IDs of the new mode
        """
        self.current_mode = validate_mode(mode)
        logger.info("Switched to %s mode", self.current_mode.value)
        return [video_id for _, video_id in self.refresh()]

    def add(self, raw_input: str) -> PlaylistEntry:
        """Add a video to the current mode and refresh.

        Raises:
            ValidationError: If the input is not a video URL or ID
        """
        entry = self.catalog.add_url(self.current_mode, raw_input)
        self.refresh()
        return entry

    def remove(self, entry_id: int) -> bool:
        """Remove an entry from the current mode and refresh."""
        removed = self.catalog.remove_url(self.current_mode, entry_id)
        self.refresh()
        return removed

    def play_next(self) -> str:
        """Pick the next video of the current mode and make it current.

        Returns:
            str: Video ID to play

        Raises:
            EmptyCandidateSetError: If the current mode has no videos
        """
        video_ids = self.video_ids()
        if not video_ids:
            raise EmptyCandidateSetError(self.current_mode.value)

        next_id = select_next(video_ids, self.current_video_id, self.rng)
        logger.info("Next video: %s", next_id)
        self.current_video_id = next_id
        return next_id

    def clear(self) -> None:
        """Drop all cached playlists."""
        self._entries = {}
        self.stats.reset()
