# File: simple_meditation/models/errors.py


class ConfigurationError(ValueError):
    """Raised when phases, durations or settings are not usable."""
