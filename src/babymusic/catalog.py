"""Catalog service: bootstrap and CRUD over the playlist store."""

from typing import List, Optional, Union

from .errors import ValidationError
from .logging_config import get_logger
from .modes import DEFAULT_VIDEOS, MODE_VALUES, Mode, is_valid_mode
from .store import PlaylistEntry, PlaylistStore
from .utils import extract_video_id

logger = get_logger(__name__)


def validate_mode(mode: Union[Mode, str, None]) -> Mode:
    """Check a mode name against the playback modes.

    Args:
        mode: Mode name or Mode

    Returns:
        Mode: The matching mode

    Raises:
        ValidationError: If mode is not one of the playback modes
    """
    if not is_valid_mode(mode):
        raise ValidationError(
            f"Invalid mode: {mode!r}. Must be one of: {', '.join(MODE_VALUES)}"
        )
    return Mode(mode)


class CatalogService:
    """The only writer of the playlist store."""

    def __init__(self, store: PlaylistStore):
        """Initialize catalog.

        Args:
            store: Playlist store to read and write
        """
        self.store = store

    def bootstrap(self) -> int:
        """Seed default videos when the store is completely empty.

        A mode emptied by deletions is left empty.

        Returns:
            int: Number of entries seeded
        """
        if self.store.count() != 0:
            return 0

        logger.info("Initializing database with default videos...")
        defaults = [
            (mode, video_id) for mode, video_ids in DEFAULT_VIDEOS.items() for video_id in video_ids
        ]
        seeded = len(self.store.insert_many(defaults))
        logger.info("Database initialized with %d default videos", seeded)
        return seeded

    def list_urls(self, mode: Union[Mode, str]) -> List[PlaylistEntry]:
        """List the entries of a mode in insertion order.

        Raises:
            ValidationError: If mode is invalid
        """
        return self.store.list_by_mode(validate_mode(mode))

    def video_ids(self, mode: Union[Mode, str]) -> List[str]:
        """List the video IDs of a mode in insertion order."""
        return [entry.video_id for entry in self.list_urls(mode)]

    def add_url(self, mode: Union[Mode, str], raw_input: Optional[str]) -> PlaylistEntry:
        """Normalize user input and add it to a mode.

        Args:
            mode: Playback mode
            raw_input: Video URL or ID as entered by the user

        Returns:
            PlaylistEntry: The stored entry

        Raises:
            ValidationError: If mode is invalid or the input is not a video URL/ID
        """
        valid_mode = validate_mode(mode)
        video_id = extract_video_id(raw_input)
        if video_id is None:
            raise ValidationError(f"Invalid video URL or ID: {raw_input!r}")

        entry = self.store.insert(valid_mode, video_id)
        logger.info("Added %s to %s (id %d)", video_id, valid_mode.value, entry.id)
        return entry

    def remove_url(self, mode: Union[Mode, str], entry_id: int) -> bool:
        """Remove an entry. Deletion is keyed by id only.

        Args:
            mode: Playback mode the entry was listed under
            entry_id: Id of the entry

        Returns:
            bool: True if an entry was deleted, False if it did not exist

        Raises:
            ValidationError: If mode is invalid
        """
        valid_mode = validate_mode(mode)
        removed = self.store.remove(entry_id)
        if removed:
            logger.info("Removed entry %d from %s", entry_id, valid_mode.value)
        else:
            logger.debug("Entry %d already absent", entry_id)
        return removed
