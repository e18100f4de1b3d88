# File: simple_meditation/core/config_manager.py
"""
Centralized configuration management for Simple Meditation.
Loads settings from environment variables and an optional config file.
"""

import os
import json
from pathlib import Path
from typing import Any, Dict, List, Tuple
from dotenv import load_dotenv

from simple_meditation.models import (
    PhaseDefinition, DEFAULT_PHASES, MeditationSettings, TickPolicy, ConfigurationError
)
from simple_meditation.utils.logger import setup_logger

# Load environment variables
load_dotenv()

logger = setup_logger(__name__)


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={os.getenv(name)!r}, using {default}")
        return default


class Config:
    """Application configuration."""
    
    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from simple_meditation/core/
    
    CONFIG_DIR = BASE_DIR / "config"
    SOUNDS_DIR = Path(os.getenv("SOUNDS_DIR", str(BASE_DIR / "sounds")))
    LOGS_DIR = Path(os.getenv("LOGS_DIR", str(BASE_DIR / "logs")))
    CONFIG_FILE = Path(os.getenv("CONFIG_FILE", str(CONFIG_DIR / "config.json")))
    
    # Audio
    SOUND_EXTENSION = os.getenv("SOUND_EXTENSION", "mp3")
    
    # Clock
    TICK_INTERVAL_MS = _env_int("TICK_INTERVAL_MS", 1000)
    TICK_POLICY = os.getenv("TICK_POLICY", TickPolicy.CLAMP.value)
    MAX_CATCH_UP_TICKS = _env_int("MAX_CATCH_UP_TICKS", 60)
    
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    
    WINDOW_TITLE = "Simple Meditation"
    
    @classmethod
    def tick_policy(cls) -> TickPolicy:
        """Parse TICK_POLICY, falling back to clamping."""
        try:
            return TickPolicy(str(cls.TICK_POLICY).strip().lower())
        except ValueError:
            logger.warning(f"Unknown TICK_POLICY {cls.TICK_POLICY!r}, using clamp")
            return TickPolicy.CLAMP
    
    @classmethod
    def load_config_file(cls) -> Dict[str, Any]:
        """Load the optional JSON config file; an absent file means defaults."""
        if not cls.CONFIG_FILE.exists():
            logger.debug(f"No config file at {cls.CONFIG_FILE}, using defaults")
            return {}
        
        with open(cls.CONFIG_FILE, 'r', encoding='utf-8') as f:
            return json.load(f)
    
    @classmethod
    def load_session_config(cls) -> Tuple[List[PhaseDefinition], MeditationSettings]:
        """
        Build the phase list and initial settings for a session.
        
        Returns:
            Tuple of (phases, settings)
        
        Raises:
            ConfigurationError: If the config file holds invalid phases or settings
        """
        try:
            data = cls.load_config_file()
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Config file {cls.CONFIG_FILE} is not valid JSON: {e}") from e
        
        raw_phases = data.get('phases')
        if raw_phases:
            try:
                phases = [PhaseDefinition(p['name'], p['duration']) for p in raw_phases]
            except (KeyError, TypeError) as e:
                raise ConfigurationError(f"Each phase needs a name and a duration: {e}") from e
        else:
            phases = list(DEFAULT_PHASES)
        
        settings = MeditationSettings.from_dict({
            'durations': [p.duration for p in phases],
            'soundtrack': data.get('soundtrack'),
            'sound_enabled': data.get('sound_enabled', False),
        })
        
        logger.info(f"Loaded {len(phases)} phases: {[p.name for p in phases]}")
        return phases, settings
    
    @classmethod
    def validate(cls) -> bool:
        """Validate that the configuration is usable."""
        errors = []
        
        try:
            cls.load_session_config()
        except ConfigurationError as e:
            errors.append(str(e))
        
        if cls.TICK_INTERVAL_MS <= 0:
            errors.append(f"TICK_INTERVAL_MS must be positive, got {cls.TICK_INTERVAL_MS}")
        
        if not cls.SOUNDS_DIR.is_dir():
            # Missing sounds only disable audio; the timer still runs
            logger.warning(f"Sounds directory not found at {cls.SOUNDS_DIR}")
        
        if errors:
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False
        
        return True
