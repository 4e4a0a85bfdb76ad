"""Utility functions for YouTube video identifiers."""

import re
from typing import Optional

from .logging_config import get_logger

logger = get_logger(__name__)

VIDEO_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{11}$")

# youtu.be/<id>, .../v/<id>, .../u/<x>/<id>, .../embed/<id>, ...watch?v=<id>
URL_MARKER_PATTERN = re.compile(
    r"(?:youtu\.be/|v/|/u/\w/|embed/|watch\?)\??v?=?([A-Za-z0-9_-]{11})"
)

# watch?feature=share&v=<id>
QUERY_PARAM_PATTERN = re.compile(r"[?&]v=([A-Za-z0-9_-]{11})")


def extract_video_id(raw: Optional[str]) -> Optional[str]:
    """Extract a canonical video ID from a YouTube URL or return the raw ID.

    Surrounding whitespace is stripped first, so a pasted " 035d3iiFej4 "
    is accepted as 035d3iiFej4. The ID itself must still be exactly 11
    characters from [A-Za-z0-9_-].

    Args:
        raw: A YouTube video URL or an 11 character video ID

    Returns:
        The 11 character video ID, or None if the input is not recognized
    """
    if not raw:
        return None

    candidate = raw.strip()
    if VIDEO_ID_PATTERN.match(candidate):
        return candidate

    if "watch" in candidate:
        param_match = QUERY_PARAM_PATTERN.search(candidate)
        if param_match:
            return param_match.group(1)

    url_match = URL_MARKER_PATTERN.search(candidate)
    if url_match:
        return url_match.group(1)

    logger.debug("Could not extract video ID from %r", raw)
    return None
