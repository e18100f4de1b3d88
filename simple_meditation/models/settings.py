# File: simple_meditation/models/settings.py
"""
Data models for the user-editable meditation settings.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .enums import Soundtrack
from .errors import ConfigurationError
from .phase import DEFAULT_PHASES, validate_duration


@dataclass
class MeditationSettings:
    """Phase durations plus soundtrack selection, as edited in the settings form."""
    durations: List[float] = field(default_factory=lambda: [p.duration for p in DEFAULT_PHASES])
    selected_soundtrack: Optional[Soundtrack] = None
    is_sound_enabled: bool = False

    def __post_init__(self):
        """Validate durations and convert string soundtrack to enum."""
        self.durations = [
            validate_duration(d, f"phase {i + 1}") for i, d in enumerate(self.durations)
        ]

        if isinstance(self.selected_soundtrack, str):
            track = Soundtrack.from_name(self.selected_soundtrack)
            if track is None:
                raise ConfigurationError(f"Unknown soundtrack: {self.selected_soundtrack}")
            self.selected_soundtrack = track

    @property
    def wants_sound(self) -> bool:
        """True when sound is enabled and a soundtrack has been picked."""
        return self.is_sound_enabled and self.selected_soundtrack is not None

    def to_dict(self) -> dict:
        return {
            'durations': list(self.durations),
            'soundtrack': self.selected_soundtrack.value if self.selected_soundtrack else None,
            'sound_enabled': self.is_sound_enabled,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'MeditationSettings':
        """Create settings from a dictionary (e.g., loaded from JSON)."""
        raw_enabled = str(data.get('sound_enabled', False)).lower()
        durations = data.get('durations')
        if durations is None:
            durations = [p.duration for p in DEFAULT_PHASES]

        return cls(
            durations=list(durations),
            selected_soundtrack=data.get('soundtrack') or None,
            is_sound_enabled=raw_enabled in ['yes', 'true', '1', 'on'],
        )
