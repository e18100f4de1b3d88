# File: simple_meditation/core/session.py
"""
Meditation session: composes the phase timer with the sound player.

The timer and the player never talk to each other. The session listens for
phase changes and translates them, together with the current settings,
into play/stop calls.
"""

import math
from dataclasses import replace
from typing import List, Optional, Tuple

from simple_meditation.core.phase_timer import PhaseTimer
from simple_meditation.models import MeditationSettings, PhaseChanged, TickPolicy
from simple_meditation.utils.logger import setup_logger

logger = setup_logger(__name__)


class MeditationSession:
    """
    One running breathing session.

    Owns the timer, the optional sound player and a copy of the settings.
    Audio failures are logged and never interrupt the phase cycle.
    """

    def __init__(
        self,
        timer: PhaseTimer,
        sound_player=None,
        settings: Optional[MeditationSettings] = None,
        tick_policy: TickPolicy = TickPolicy.CLAMP,
        max_catch_up_ticks: int = 60
    ):
        """
        Initialize the session.

        Args:
            timer: Phase timer to drive
            sound_player: SoundPlayer, or None to run silently
            settings: Initial settings; defaults to the timer's own durations
            tick_policy: How late clock events are converted into ticks
            max_catch_up_ticks: Upper bound on ticks applied for one clock event
        """
        self.timer = timer
        self.sound_player = sound_player
        self.settings = settings or MeditationSettings(durations=timer.durations)
        self.tick_policy = tick_policy
        self.max_catch_up_ticks = max(1, max_catch_up_ticks)

        if self.settings.durations != timer.durations:
            self.timer.set_durations(self.settings.durations)

        self.timer.add_listener(self._on_phase_changed)
        logger.info(
            f"Session ready: {timer.phase_count} phases, policy={tick_policy.value}, "
            f"sound={'on' if self.settings.wants_sound else 'off'}"
        )

    def appear(self) -> None:
        """Resync the countdown to the active phase when the view (re)appears."""
        self.timer.reset(keep_index=True)

    def tick(self) -> Optional[PhaseChanged]:
        """Advance the timer by exactly one second."""
        return self.timer.tick()

    def on_clock(self, elapsed_seconds: float = 1.0) -> List[PhaseChanged]:
        """
        Handle one clock event.

        Args:
            elapsed_seconds: Wall time since the previous clock event

        Returns:
            PhaseChanged events produced by the ticks applied
        """
        ticks = self.ticks_for(elapsed_seconds)
        if ticks > 1:
            logger.debug(f"Catching up {ticks} ticks after {elapsed_seconds:.2f}s")

        events = []
        for _ in range(ticks):
            event = self.tick()
            if event is not None:
                events.append(event)
        return events

    def ticks_for(self, elapsed_seconds: float) -> int:
        """Number of ticks to apply for a clock event under the current policy."""
        if self.tick_policy == TickPolicy.CLAMP:
            return 1
        whole = math.floor(elapsed_seconds) if elapsed_seconds > 0 else 0
        return min(max(1, whole), self.max_catch_up_ticks)

    def update_settings(self, settings: MeditationSettings) -> None:
        """
        Apply settings edited by the user.

        Durations go to the timer without touching the running countdown.
        Turning sound off (or clearing the soundtrack) silences it at once.

        Raises:
            ConfigurationError: If the durations do not match the phases
        """
        self.timer.set_durations(settings.durations)
        had_sound = self.settings.wants_sound
        self.settings = replace(settings, durations=list(settings.durations))

        if had_sound and not self.settings.wants_sound:
            self._apply_sound()

        logger.info(f"Settings updated: {self.settings.to_dict()}")

    def display_state(self) -> Tuple[str, float]:
        """Return (phase name, seconds remaining) for rendering."""
        return self.timer.current_phase, self.timer.time_remaining

    def close(self) -> None:
        self.timer.remove_listener(self._on_phase_changed)
        if self.sound_player is not None:
            try:
                self.sound_player.close()
            except Exception as e:
                logger.error(f"Error closing sound player: {e}", exc_info=True)

    def _on_phase_changed(self, event: PhaseChanged) -> None:
        logger.info(f"Phase: {event.name} ({event.duration:g}s)")
        self._apply_sound()

    def _apply_sound(self) -> None:
        """Play the selected soundtrack, or switch sound off, per the settings."""
        if self.sound_player is None:
            return

        try:
            if self.settings.wants_sound:
                self.sound_player.play(self.settings.selected_soundtrack)
            else:
                self.sound_player.play(None)
        except Exception as e:
            logger.error(f"Sound playback failed: {e}", exc_info=True)
