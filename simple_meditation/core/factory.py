# File: simple_meditation/core/factory.py

from typing import Optional

from simple_meditation.core.config_manager import Config
from simple_meditation.core.phase_timer import PhaseTimer
from simple_meditation.core.session import MeditationSession
from simple_meditation.audio import InterruptionCenter, SoundPlayer
from simple_meditation.utils.logger import setup_logger

logger = setup_logger(__name__)


class SessionFactory:
    """Factory for creating a fully wired MeditationSession."""
    
    @staticmethod
    def create_sound_player(interruptions: InterruptionCenter, backend=None) -> SoundPlayer:
        """
        Create the sound player over the pygame backend.
        
        Args:
            interruptions: Channel the player listens to
            backend: Audio backend override (defaults to pygame)
        
        Returns:
            SoundPlayer instance (possibly with an empty catalog)
        """
        if backend is None:
            from simple_meditation.audio.backend import PygameAudioBackend
            backend = PygameAudioBackend(Config.SOUNDS_DIR, extension=Config.SOUND_EXTENSION)
        return SoundPlayer(backend, interruptions)
    
    @staticmethod
    def create(
        interruptions: Optional[InterruptionCenter] = None,
        backend=None,
        with_sound: bool = True
    ) -> MeditationSession:
        """
        Create a session from the current configuration.
        
        Returns:
            MeditationSession ready to receive clock events
        
        Raises:
            ConfigurationError: If phases or settings are invalid
        """
        logger.info("Creating MeditationSession via factory")
        
        phases, settings = Config.load_session_config()
        timer = PhaseTimer(phases)
        
        player = None
        if with_sound:
            try:
                player = SessionFactory.create_sound_player(
                    interruptions or InterruptionCenter(), backend
                )
            except Exception as e:
                logger.error(f"Sound disabled, could not create player: {e}", exc_info=True)
        
        return MeditationSession(
            timer,
            sound_player=player,
            settings=settings,
            tick_policy=Config.tick_policy(),
            max_catch_up_ticks=Config.MAX_CATCH_UP_TICKS
        )
