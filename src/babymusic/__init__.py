"""Mode playlists for a baby music player."""

__version__ = "0.1.0"

# Import all public components
from .cache import CacheStats, ModePlaylistCache
from .catalog import CatalogService, validate_mode
from .errors import (
    BabyMusicError,
    ConstraintError,
    EmptyCandidateSetError,
    StorageError,
    ValidationError,
)
from .logging_config import configure_logging, get_logger
from .modes import DEFAULT_VIDEOS, Mode
from .selection import select_next
from .store import PlaylistEntry, PlaylistStore
from .utils import extract_video_id

# Import config variables
from .config import (  # noqa: F401
    DATA_DIR,
    DATABASE_URL,
    HOST,
    PORT,
)

# Configure logging
configure_logging()

# Get logger for this module
logger = get_logger(__name__)
