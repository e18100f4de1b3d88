from .phase_timer import PhaseTimer
from .session import MeditationSession

__all__ = ["PhaseTimer", "MeditationSession"]
