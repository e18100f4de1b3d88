# File: simple_meditation/audio/backend.py
"""
pygame-backed audio platform for Simple Meditation.

Provides the capability the sound player consumes: configure the audio
session, load a named clip, and play/pause/stop that clip in a loop.
"""

import os
from pathlib import Path
from typing import Optional, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

from simple_meditation.models import ClipState
from simple_meditation.utils.logger import setup_logger

logger = setup_logger(__name__)


class PygameClip:
    """A preloaded sound plus the mixer channel it is currently using."""

    def __init__(self, name: str, sound: "pygame.mixer.Sound"):
        self.name = name
        self._sound = sound
        self._channel: Optional["pygame.mixer.Channel"] = None
        self.state = ClipState.IDLE

    def play(self, loop: bool = True) -> None:
        """Start playback, or resume from the paused position."""
        if self.state == ClipState.PLAYING:
            return

        if self.state == ClipState.PAUSED and self._channel is not None:
            self._channel.unpause()
            self.state = ClipState.PLAYING
            return

        channel = self._sound.play(loops=-1 if loop else 0)
        if channel is None:
            logger.warning(f"No free mixer channel for {self.name}")
            return

        self._channel = channel
        self.state = ClipState.PLAYING

    def pause(self) -> None:
        if self.state == ClipState.PLAYING and self._channel is not None:
            self._channel.pause()
            self.state = ClipState.PAUSED

    def stop(self) -> None:
        if self._channel is not None:
            self._channel.stop()
            self._channel = None
        self.state = ClipState.IDLE

    def is_playing(self) -> bool:
        return self.state == ClipState.PLAYING


class PygameAudioBackend:
    """Loads soundtrack files from a directory into pygame mixer sounds."""

    def __init__(
        self,
        sounds_dir: Union[str, Path],
        extension: str = "mp3",
        frequency: int = 44100,
        buffer: int = 2048
    ):
        """
        Initialize the backend.

        Args:
            sounds_dir: Directory containing <name>.<extension> files
            extension: Audio file extension, without the dot
            frequency: Mixer sample rate
            buffer: Mixer buffer size in samples
        """
        self.sounds_dir = Path(sounds_dir)
        self.extension = extension.lstrip(".")
        self.frequency = frequency
        self.buffer = buffer

    def configure_session(self) -> bool:
        """
        Initialize the pygame mixer for background playback.

        Returns:
            True if the mixer is ready, False otherwise
        """
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.pre_init(self.frequency, -16, 2, self.buffer)
                pygame.mixer.init()
            logger.info(f"Audio mixer initialized: {pygame.mixer.get_init()}")
            return True
        except pygame.error as e:
            logger.error(f"Failed to initialize audio mixer: {e}")
            return False

    def clip_path(self, name: str) -> Path:
        return self.sounds_dir / f"{name}.{self.extension}"

    def load_clip(self, name: str) -> Optional[PygameClip]:
        """
        Load a clip by soundtrack name.

        Returns:
            PygameClip, or None if the file is missing or unreadable
        """
        path = self.clip_path(name)
        if not path.exists():
            logger.warning(f"Sound file {path.name} not found in {self.sounds_dir}")
            return None

        try:
            sound = pygame.mixer.Sound(str(path))
        except pygame.error as e:
            logger.error(f"Could not load sound {path.name}: {e}")
            return None

        logger.debug(f"Loaded sound {path.name}")
        return PygameClip(name, sound)

    def shutdown(self) -> None:
        if pygame.mixer.get_init():
            pygame.mixer.quit()
            logger.info("Audio mixer shut down")
