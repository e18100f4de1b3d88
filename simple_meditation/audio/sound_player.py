# File: simple_meditation/audio/sound_player.py
"""
Looping soundtrack playback for Simple Meditation.

Plays at most one soundtrack at a time and pauses/resumes around platform
interruptions. The player is constructed explicitly and handed to whoever
needs it; there is no module-level instance.
"""

import threading
from typing import Dict, Iterable, List, Optional, Union

from simple_meditation.models import Soundtrack, InterruptionEvent
from simple_meditation.utils.logger import setup_logger
from .interruptions import InterruptionCenter

logger = setup_logger(__name__)

TrackName = Union[Soundtrack, str, None]


class SoundPlayer:
    """
    Catalog of preloaded, loopable soundtracks.

    `currently_playing` is the track to restore after an interruption. It
    survives stop() but is cleared by play(None), which is how the caller
    says the user switched sound off. While an interruption is in progress,
    play() only records the selection; the track starts on resume.
    """

    def __init__(
        self,
        backend,
        interruptions: Optional[InterruptionCenter] = None,
        catalog: Iterable[Soundtrack] = Soundtrack
    ):
        """
        Configure the audio session and preload every soundtrack.

        Args:
            backend: Audio platform (configure_session, load_clip, shutdown)
            interruptions: Channel delivering interruption notifications
            catalog: Soundtracks to preload
        """
        self.backend = backend
        self.interruptions = interruptions
        self.players: Dict[Soundtrack, object] = {}
        self.currently_playing: Optional[Soundtrack] = None
        self.interrupted = False
        self._load_lock = threading.Lock()
        self._lock = threading.RLock()

        if self.backend.configure_session():
            self.preload_sounds(catalog)
        else:
            logger.error("Audio session unavailable; soundtracks disabled for this session")

        if self.interruptions is not None:
            self.interruptions.subscribe(self.handle_interruption)

    def preload_sounds(self, catalog: Iterable[Soundtrack]) -> None:
        """Create one clip per soundtrack; missing files are skipped."""
        with self._load_lock:
            for soundtrack in catalog:
                if soundtrack in self.players:
                    continue
                try:
                    clip = self.backend.load_clip(soundtrack.value)
                except Exception as e:
                    logger.error(f"Failed to load {soundtrack.value}: {e}")
                    clip = None
                if clip is not None:
                    self.players[soundtrack] = clip

        logger.info(f"Preloaded {len(self.players)} soundtracks: {[t.value for t in self.players]}")

    @property
    def available_tracks(self) -> List[Soundtrack]:
        return list(self.players)

    def is_playing(self, name: TrackName) -> bool:
        track = self._resolve(name)
        player = self.players.get(track) if track else None
        return bool(player and player.is_playing())

    def play(self, name: TrackName) -> bool:
        """
        Play a soundtrack on loop, stopping any other.

        Args:
            name: Soundtrack, its name, or None to switch sound off

        Returns:
            True if the requested track is playing afterwards
        """
        if name is None:
            with self._lock:
                self.stop()
                self.currently_playing = None
            return False

        track = self._resolve(name)
        if track is None:
            logger.warning(f"Unknown soundtrack requested: {name}")
            return False

        with self._lock:
            player = self.players.get(track)
            if player is None:
                logger.warning(f"Soundtrack {track.value} is not loaded; ignoring play request")
                return False

            if player.is_playing():
                return True

            for other, other_player in self.players.items():
                if other is not track:
                    other_player.stop()

            self.currently_playing = track
            if self.interrupted:
                logger.info(f"Soundtrack {track.value} selected; waiting for interruption to end")
                return False

            player.play(loop=True)
            logger.info(f"Playing soundtrack {track.value}")
            return player.is_playing()

    def stop(self) -> None:
        """Stop every soundtrack. The resume target is kept."""
        with self._lock:
            for player in self.players.values():
                player.stop()

    def handle_interruption(self, event: InterruptionEvent) -> None:
        """Pause on interruption, resume the current soundtrack when allowed."""
        with self._lock:
            if event.began:
                self.interrupted = True
                for player in self.players.values():
                    if player.is_playing():
                        player.pause()
                return

            self.interrupted = False
            if not event.should_resume or self.currently_playing is None:
                return

            player = self.players.get(self.currently_playing)
            if player is not None and not player.is_playing():
                player.play(loop=True)
                logger.info(f"Resumed soundtrack {self.currently_playing.value}")

    def close(self) -> None:
        """Stop playback, detach from interruptions and release the backend."""
        if self.interruptions is not None:
            self.interruptions.unsubscribe(self.handle_interruption)
        self.stop()
        self.backend.shutdown()

    @staticmethod
    def _resolve(name: TrackName) -> Optional[Soundtrack]:
        if isinstance(name, Soundtrack):
            return name
        return Soundtrack.from_name(name)
