from .enums import Soundtrack, ClipState, InterruptionType, TickPolicy
from .errors import ConfigurationError
from .phase import (
    PhaseDefinition, PhaseChanged, DEFAULT_PHASES,
    validate_duration, validate_durations
)
from .settings import MeditationSettings
from .events import InterruptionEvent

__all__ = [
    "Soundtrack",
    "ClipState",
    "InterruptionType",
    "TickPolicy",
    "ConfigurationError",
    "PhaseDefinition",
    "PhaseChanged",
    "DEFAULT_PHASES",
    "validate_duration",
    "validate_durations",
    "MeditationSettings",
    "InterruptionEvent",
]
