"""Pick the next video to play without repeating the current one."""

import random
from typing import Optional, Sequence

from .errors import EmptyCandidateSetError

_default_rng = random.Random()


def select_next(
    candidates: Sequence[str],
    current: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Select the next video ID from a mode's candidates.

    Every occurrence of the current video is excluded while another
    candidate exists; otherwise the only option is repeated.

    Args:
        candidates: Video IDs of the active mode, in listing order
        current: Video ID that is playing now, if any
        rng: Random source with a ``choice`` method

    Returns:
        str: The selected video ID

    Raises:
        EmptyCandidateSetError: If there are no candidates
    """
    if not candidates:
        raise EmptyCandidateSetError()

    others = [video_id for video_id in candidates if video_id != current]
    pool = others if others else list(candidates)
    return (rng or _default_rng).choice(pool)
