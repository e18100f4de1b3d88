# File: simple_meditation/core/phase_timer.py
"""
Phase timer for the breathing cycle.

Holds the phase list, the duration table, the active index and the countdown.
The timer knows nothing about sound or rendering; callers subscribe to
PhaseChanged events and decide what to do with them.
"""

from typing import Callable, List, Optional, Sequence, Union

from simple_meditation.models import (
    PhaseDefinition, PhaseChanged, ConfigurationError, validate_durations
)
from simple_meditation.utils.logger import setup_logger

logger = setup_logger(__name__)

PhaseListener = Callable[[PhaseChanged], None]


class PhaseTimer:
    """
    Countdown over an ordered, repeating sequence of phases.

    Advanced exactly once per external tick. When the active phase runs
    out, the index wraps modulo the phase count and the new phase's
    configured duration is loaded.
    """

    def __init__(
        self,
        phases: Sequence[Union[str, PhaseDefinition]],
        durations: Optional[Sequence[float]] = None
    ):
        """
        Initialize the timer.

        Args:
            phases: Phase names, or PhaseDefinition objects carrying defaults
            durations: Seconds per phase, index-aligned with phases. Required
                       when phases are plain names.

        Raises:
            ConfigurationError: If there are no phases, or the duration table
                                does not match the phases
        """
        if not phases:
            raise ConfigurationError("At least one phase is required")

        names = [p.name if isinstance(p, PhaseDefinition) else str(p) for p in phases]
        if durations is None:
            if not all(isinstance(p, PhaseDefinition) for p in phases):
                raise ConfigurationError("Durations are required when phases are given by name")
            durations = [p.duration for p in phases]

        self._phases: List[str] = names
        self._durations: List[float] = validate_durations(durations, len(names))
        self._listeners: List[PhaseListener] = []
        self.current_index = 0
        self.time_remaining = self._durations[0]

        logger.debug(f"PhaseTimer created with phases {self._phases} and durations {self._durations}")

    @property
    def phases(self) -> List[str]:
        return list(self._phases)

    @property
    def durations(self) -> List[float]:
        return list(self._durations)

    @property
    def phase_count(self) -> int:
        return len(self._phases)

    @property
    def current_phase(self) -> str:
        """Name of the active phase."""
        return self._phases[self.current_index]

    @property
    def current_duration(self) -> float:
        """Configured duration of the active phase (may differ from the running countdown)."""
        return self._durations[self.current_index]

    def add_listener(self, listener: PhaseListener) -> None:
        """Register an onPhaseChanged callback."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: PhaseListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def tick(self) -> Optional[PhaseChanged]:
        """
        Advance the countdown by one second.

        Returns:
            The PhaseChanged event if this tick completed the active phase,
            otherwise None
        """
        if self.time_remaining > 0:
            self.time_remaining = max(self.time_remaining - 1, 0.0)
            if self.time_remaining > 0:
                return None

        return self._advance()

    def reset(self, keep_index: bool = False) -> None:
        """
        Restart the countdown for a new session.

        Args:
            keep_index: Resync the active phase instead of returning to the first one
        """
        if not keep_index:
            self.current_index = 0
        self.time_remaining = self._durations[self.current_index]
        logger.debug(f"Timer reset to {self.current_phase} ({self.time_remaining:g}s)")

    def set_durations(self, durations: Sequence[float]) -> None:
        """
        Replace the duration table.

        The running countdown is left alone; a new duration for the active
        phase applies the next time that phase is entered.

        Raises:
            ConfigurationError: If the table does not match the phases
        """
        self._durations = validate_durations(durations, len(self._phases))
        logger.info(f"Durations updated: {self._durations}")

    def _advance(self) -> PhaseChanged:
        """Move to the next phase and notify listeners."""
        self.current_index = (self.current_index + 1) % len(self._phases)
        self.time_remaining = self._durations[self.current_index]

        event = PhaseChanged(
            index=self.current_index,
            name=self.current_phase,
            duration=self.time_remaining
        )
        logger.debug(f"Phase changed to {event.name} ({event.duration:g}s)")

        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.error(f"Phase listener failed on {event.name}: {e}", exc_info=True)

        return event
