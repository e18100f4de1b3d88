# File: simple_meditation/models/enums.py

from enum import Enum
from typing import Optional


class Soundtrack(Enum):
    """Ambient soundtracks; the value is both the label and the file stem."""
    RAIN = "Rain"
    OCEAN = "Ocean"
    UNDERWATER = "Underwater"
    STREAM = "Stream"

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["Soundtrack"]:
        """Look up a soundtrack by value or member name, ignoring case."""
        if not name:
            return None
        cleaned = str(name).strip().lower()
        for track in cls:
            if cleaned in (track.value.lower(), track.name.lower()):
                return track
        return None


class ClipState(Enum):
    """Playback state of a single preloaded clip."""
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"  # Interrupted, resumable from its position


class InterruptionType(Enum):
    """Kinds of platform audio interruption."""
    BEGAN = "began"
    ENDED = "ended"


class TickPolicy(Enum):
    """How a late clock event is turned into timer ticks."""
    CLAMP = "clamp"        # Always one tick per clock event
    CATCH_UP = "catch_up"  # One tick per whole elapsed second
