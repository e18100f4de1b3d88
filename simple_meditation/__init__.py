"""Simple Meditation: a guided breathing timer with ambient soundtracks."""

__version__ = "1.0.0"
