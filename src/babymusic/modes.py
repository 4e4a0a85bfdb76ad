"""Playback modes and their default videos."""

from enum import Enum
from typing import Dict, List, Union


class Mode(str, Enum):
    """Fixed set of playback modes."""

    SLEEP = "sleep"
    RELAX = "relax"
    PLAY = "play"
    LEARNING = "learning"


MODE_VALUES = tuple(mode.value for mode in Mode)

# Seeded once into an empty database
DEFAULT_VIDEOS: Dict[Mode, List[str]] = {
    Mode.SLEEP: ["035d3iiFej4", "HAzZH6wccew", "XGSSmQiqBl8"],  # Lullabies
    Mode.RELAX: ["Na0w3Mz46GA", "P6tFwmw2OEY", "n2-beumXxEM"],  # Relaxing music
    Mode.PLAY: ["REtbaAA4j7U", "BW4H15rK6iI", "CaqHOvgAnO0"],  # Upbeat kids songs
    Mode.LEARNING: ["XzorjCt7Cv8", "O8BThfcH-F4", "hRxJRkMXuZI"],  # English learning songs
}


def is_valid_mode(mode: Union[str, Mode, None]) -> bool:
    """Check whether a value names one of the playback modes."""
    if isinstance(mode, Mode):
        return True
    return isinstance(mode, str) and mode in MODE_VALUES
