# File: simple_meditation/models/phase.py

import math
from dataclasses import dataclass
from numbers import Real
from typing import List, Sequence

from .errors import ConfigurationError


def validate_duration(value, label: str = "phase") -> float:
    """Return the duration as a float, or raise ConfigurationError."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigurationError(f"Duration for {label} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigurationError(f"Duration for {label} must be finite, got {value}")
    if value < 0:
        raise ConfigurationError(f"Duration for {label} cannot be negative: {value}")
    return float(value)


def validate_durations(durations: Sequence, phase_count: int) -> List[float]:
    """Validate a full duration table against the number of phases."""
    if len(durations) != phase_count:
        raise ConfigurationError(
            f"Expected {phase_count} durations, got {len(durations)}"
        )
    return [validate_duration(d, f"phase {i + 1}") for i, d in enumerate(durations)]


@dataclass(frozen=True)
class PhaseDefinition:
    """A named stage of the breathing cycle with its default duration."""
    name: str
    duration: float

    def __post_init__(self):
        if not self.name:
            raise ConfigurationError("Phase name cannot be empty")
        validate_duration(self.duration, self.name)


@dataclass(frozen=True)
class PhaseChanged:
    """Emitted by the timer whenever a new phase becomes active."""
    index: int
    name: str
    duration: float


DEFAULT_PHASES: List[PhaseDefinition] = [
    PhaseDefinition("Breathe", 5.0),
    PhaseDefinition("Hold", 3.0),
    PhaseDefinition("Exhale", 5.0),
]
