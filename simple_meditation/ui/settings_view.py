# File: simple_meditation/ui/settings_view.py
"""
Settings form: phase durations and soundtrack selection.
"""

import tkinter as tk
from typing import Callable, List, Optional

from simple_meditation.models import MeditationSettings, Soundtrack, ConfigurationError

NONE_LABEL = "None"


def parse_durations(raw_values: List[str]) -> List[float]:
    """Convert form entries into durations; blank or bad input raises ConfigurationError."""
    durations = []
    for index, raw in enumerate(raw_values):
        try:
            durations.append(float(raw.strip()))
        except ValueError:
            raise ConfigurationError(f"Phase {index + 1}: '{raw}' is not a number of seconds") from None
    return durations


class SettingsDialog:
    """Modal form editing a copy of the session settings."""
    
    def __init__(
        self,
        parent: tk.Misc,
        settings: MeditationSettings,
        soundtracks: List[Soundtrack],
        on_done: Callable[[MeditationSettings], None]
    ):
        """
        Build the dialog.
        
        Args:
            parent: Owning window
            settings: Current settings, shown as initial values
            soundtracks: Tracks offered in the picker
            on_done: Called with the new settings when "Done" is pressed
        """
        self.on_done = on_done
        self.window = tk.Toplevel(parent)
        self.window.title("Settings")
        self.window.configure(bg="black")
        self.window.transient(parent)
        
        self.duration_vars = [tk.StringVar(value=f"{d:g}") for d in settings.durations]
        self.sound_enabled_var = tk.BooleanVar(value=settings.is_sound_enabled)
        selected = settings.selected_soundtrack.value if settings.selected_soundtrack else NONE_LABEL
        self.soundtrack_var = tk.StringVar(value=selected)
        self.error_var = tk.StringVar(value="")
        self.soundtrack_labels = [NONE_LABEL] + [t.value for t in soundtracks]
        self.picker: Optional[tk.OptionMenu] = None
        
        self.setup_ui()
        self.window.grab_set()
    
    def setup_ui(self):
        """Set up form sections."""
        label_opts = dict(bg="black", fg="white")
        
        tk.Label(self.window, text="Phase Durations", font=("Arial", 14, "bold"),
                 **label_opts).grid(row=0, column=0, columnspan=2, pady=(12, 6))
        
        for index, var in enumerate(self.duration_vars):
            tk.Label(self.window, text=f"Phase {index + 1}", **label_opts).grid(
                row=index + 1, column=0, sticky="w", padx=12)
            tk.Entry(self.window, textvariable=var, width=8).grid(
                row=index + 1, column=1, padx=12, pady=2)
        
        row = len(self.duration_vars) + 1
        tk.Label(self.window, text="Soundtrack", font=("Arial", 14, "bold"),
                 **label_opts).grid(row=row, column=0, columnspan=2, pady=(12, 6))
        
        tk.Checkbutton(
            self.window, text="Enable Soundtrack", variable=self.sound_enabled_var,
            command=self._toggle_picker, bg="black", fg="white", selectcolor="black"
        ).grid(row=row + 1, column=0, columnspan=2)
        
        self.picker = tk.OptionMenu(self.window, self.soundtrack_var, *self.soundtrack_labels)
        self.picker.grid(row=row + 2, column=0, columnspan=2, pady=6)
        self._toggle_picker()
        
        tk.Label(self.window, textvariable=self.error_var, bg="black", fg="red").grid(
            row=row + 3, column=0, columnspan=2)
        tk.Button(self.window, text="Done", command=self.done).grid(
            row=row + 4, column=0, columnspan=2, pady=12)
    
    def _toggle_picker(self):
        # Picker only shown while the soundtrack is enabled
        if self.sound_enabled_var.get():
            self.picker.grid()
        else:
            self.picker.grid_remove()
    
    def collect(self) -> MeditationSettings:
        """Read the form into a settings object."""
        label = self.soundtrack_var.get()
        return MeditationSettings(
            durations=parse_durations([v.get() for v in self.duration_vars]),
            selected_soundtrack=None if label == NONE_LABEL else Soundtrack.from_name(label),
            is_sound_enabled=self.sound_enabled_var.get(),
        )
    
    def done(self):
        """Apply the form and close, or show the validation error."""
        try:
            settings = self.collect()
            self.on_done(settings)
        except ConfigurationError as e:
            self.error_var.set(str(e))
            return
        self.window.grab_release()
        self.window.destroy()
