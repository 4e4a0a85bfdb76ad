"""Error types for the playlist store and its callers."""

from typing import Optional

from .logging_config import get_logger

logger = get_logger(__name__)


def log_error(error: Exception, context: Optional[str] = None) -> None:
    """Log an error with optional context.

    Args:
        error: The exception to log
        context: Optional context about where/why the error occurred
    """
    if context:
        logger.error(f"{context}: {str(error)}")
    else:
        logger.error(str(error))


class BabyMusicError(Exception):
    """Base class for babymusic errors."""

    pass


class ValidationError(BabyMusicError):
    """Error raised for an unknown mode or input that is not a video ID."""

    pass


class ConstraintError(BabyMusicError):
    """Error raised when a write would store a mode outside the enumeration."""

    def __init__(self, mode: object = None):
        """Initialize error.

        Args:
            mode: The rejected mode value
        """
        self.mode = mode
        if mode is not None:
            super().__init__(f"Invalid mode: {mode!r}")
        else:
            super().__init__("Mode constraint violated")


class EmptyCandidateSetError(BabyMusicError):
    """Error raised when there is nothing to play."""

    def __init__(self, mode: Optional[str] = None):
        """Initialize error.

        Args:
            mode: Mode that has no videos, if known
        """
        self.mode = mode
        if mode:
            super().__init__(f"No videos available for mode {mode}")
        else:
            super().__init__("No videos available")


class StorageError(BabyMusicError):
    """Error raised when the database fails."""

    pass
