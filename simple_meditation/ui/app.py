# File: simple_meditation/ui/app.py
"""
Full-screen breathing view.
"""

import time
import tkinter as tk
from typing import Optional

from simple_meditation.audio import InterruptionCenter
from simple_meditation.core.session import MeditationSession
from simple_meditation.ui.settings_view import SettingsDialog
from simple_meditation.utils.logger import setup_logger

logger = setup_logger(__name__)


class MeditationApp:
    """Shows the active phase and drives the session from a 1 Hz after() loop."""
    
    def __init__(
        self,
        session: MeditationSession,
        interruptions: Optional[InterruptionCenter] = None,
        title: str = "Simple Meditation",
        tick_interval_ms: int = 1000
    ):
        """Initialize the application window."""
        self.session = session
        self.interruptions = interruptions
        self.tick_interval_ms = tick_interval_ms
        self._after_id: Optional[str] = None
        self._last_clock: Optional[float] = None
        self._hidden = False
        
        self.root = tk.Tk()
        self.root.title(title)
        self.root.configure(bg="black")
        self.root.geometry("480x640")
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)
        
        self.setup_ui()
        
        # Window hidden/shown stands in for the platform's interruption signal
        self.root.bind("<Unmap>", self._on_unmap)
        self.root.bind("<Map>", self._on_map)
    
    def setup_ui(self):
        """Set up UI elements."""
        self.phase_label = tk.Label(self.root, text="", font=("Arial", 36),
                                    fg="white", bg="black")
        self.phase_label.pack(expand=True, fill="both")
        
        self.settings_button = tk.Button(self.root, text="Settings", command=self.open_settings,
                                         fg="white", bg="black", padx=16, pady=8)
        self.settings_button.pack(pady=16)
    
    def render(self):
        phase, _ = self.session.display_state()
        self.phase_label.config(text=phase)
    
    def open_settings(self):
        player = self.session.sound_player
        soundtracks = player.available_tracks if player is not None else []
        SettingsDialog(self.root, self.session.settings, soundtracks, self.session.update_settings)
    
    def _schedule(self):
        self._after_id = self.root.after(self.tick_interval_ms, self._on_clock)
    
    def _on_clock(self):
        now = time.monotonic()
        elapsed = now - self._last_clock if self._last_clock is not None else 1.0
        self._last_clock = now
        
        self.session.on_clock(elapsed)
        self.render()
        self._schedule()
    
    def _on_unmap(self, event):
        if event.widget is self.root and not self._hidden and self.interruptions:
            self._hidden = True
            self.interruptions.began()
    
    def _on_map(self, event):
        if event.widget is self.root and self._hidden and self.interruptions:
            self._hidden = False
            self.interruptions.ended(should_resume=True)
    
    def on_close(self):
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None
        self.session.close()
        self.root.destroy()
    
    def run(self):
        """Start the UI application."""
        self.session.appear()
        self.render()
        self._last_clock = time.monotonic()
        self._schedule()
        logger.info("Meditation view started")
        self.root.mainloop()
