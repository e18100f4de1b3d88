from .app import MeditationApp
from .settings_view import SettingsDialog

__all__ = ["MeditationApp", "SettingsDialog"]
