# File: simple_meditation/utils/logger.py
"""
Centralized logging configuration for Simple Meditation.
"""

import logging
import os
import sys
from pathlib import Path
from datetime import datetime

DEFAULT_LOGS_DIR = Path(__file__).parent.parent.parent / "logs"


def _resolve_level(level) -> int:
    """Accept either a logging constant or a level name like 'DEBUG'."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logger(name: str = "simple_meditation", level=None) -> logging.Logger:
    """
    Configure and return a logger instance.
    
    Args:
        name: Logger name
        level: Logging level (default: LOG_LEVEL env var, else INFO)
    
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    
    # Prevent duplicate handlers
    if logger.handlers:
        return logger
    
    level = _resolve_level(level if level is not None else os.getenv("LOG_LEVEL", "INFO"))
    logger.setLevel(logging.DEBUG)
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)
    
    # File handler for persistent logs
    log_dir = Path(os.getenv("LOGS_DIR", str(DEFAULT_LOGS_DIR)))
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"simple_meditation_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
    except OSError as e:
        logger.warning(f"File logging disabled, could not open {log_dir}: {e}")
        return logger
    
    file_handler.setLevel(logging.DEBUG)
    file_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(file_format)
    logger.addHandler(file_handler)
    
    return logger

