# File: simple_meditation/models/events.py

from dataclasses import dataclass

from .enums import InterruptionType


@dataclass(frozen=True)
class InterruptionEvent:
    """A platform interruption notification with its resume hint."""
    type: InterruptionType
    should_resume: bool = False

    @property
    def began(self) -> bool:
        return self.type == InterruptionType.BEGAN
