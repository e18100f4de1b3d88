from .interruptions import InterruptionCenter
from .sound_player import SoundPlayer

__all__ = ["InterruptionCenter", "SoundPlayer"]
