# File: simple_meditation/audio/interruptions.py
"""
Notification channel for audio interruptions.

Whatever detects that audio should be preempted (the window being hidden,
a call starting, the host pausing us) posts here; the sound player listens.
"""

import threading
from typing import Callable, List

from simple_meditation.models import InterruptionEvent, InterruptionType
from simple_meditation.utils.logger import setup_logger

logger = setup_logger(__name__)

InterruptionHandler = Callable[[InterruptionEvent], None]


class InterruptionCenter:
    """Fan-out of interruption began/ended notifications to subscribers."""

    def __init__(self):
        self._handlers: List[InterruptionHandler] = []
        self._lock = threading.Lock()

    def subscribe(self, handler: InterruptionHandler) -> None:
        with self._lock:
            if handler not in self._handlers:
                self._handlers.append(handler)

    def unsubscribe(self, handler: InterruptionHandler) -> None:
        with self._lock:
            if handler in self._handlers:
                self._handlers.remove(handler)

    def post(self, event: InterruptionEvent) -> None:
        """Deliver an event to every subscriber; a failing handler is logged and skipped."""
        with self._lock:
            handlers = list(self._handlers)

        logger.info(f"Audio interruption {event.type.value} (resume={event.should_resume})")
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Interruption handler failed: {e}", exc_info=True)

    def began(self) -> None:
        self.post(InterruptionEvent(InterruptionType.BEGAN))

    def ended(self, should_resume: bool = True) -> None:
        self.post(InterruptionEvent(InterruptionType.ENDED, should_resume=should_resume))
