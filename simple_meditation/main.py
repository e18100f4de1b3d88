# File: simple_meditation/main.py
"""
Simple Meditation entry point.
Opens the breathing view and runs until the window is closed.
"""

import sys

from simple_meditation.audio import InterruptionCenter
from simple_meditation.core.config_manager import Config
from simple_meditation.core.factory import SessionFactory
from simple_meditation.models import ConfigurationError
from simple_meditation.utils.logger import setup_logger

logger = setup_logger(__name__)


def main() -> int:
    """
    Main execution function.
    
    Returns:
        Exit code (0 for success, 1 for failure)
    """
    logger.info("="*60)
    logger.info("Starting Simple Meditation")
    logger.info("="*60)
    
    if not Config.validate():
        logger.error("Configuration validation failed")
        return 1
    
    try:
        from simple_meditation.ui.app import MeditationApp
        
        interruptions = InterruptionCenter()
        session = SessionFactory.create(interruptions)
        app = MeditationApp(
            session,
            interruptions=interruptions,
            title=Config.WINDOW_TITLE,
            tick_interval_ms=Config.TICK_INTERVAL_MS
        )
        app.run()
        return 0
    
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    
    except KeyboardInterrupt:
        logger.warning("Session interrupted by user")
        return 1
    
    except Exception as e:
        logger.error("Unexpected fatal error", exc_info=True)
        logger.error(f"Error: {e}")
        return 1
    
    finally:
        logger.info("Simple Meditation closed")


if __name__ == "__main__":
    sys.exit(main())
