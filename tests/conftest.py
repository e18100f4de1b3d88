# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides fake audio clips/backends and sample timers for all tests.
"""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Keep test runs from writing into the project's logs/ folder
os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp(prefix="simple_meditation_logs_"))

from simple_meditation.models import (
    ClipState, Soundtrack, PhaseDefinition, MeditationSettings
)
from simple_meditation.core.phase_timer import PhaseTimer
from simple_meditation.audio import InterruptionCenter, SoundPlayer
from simple_meditation.audio.backend import PygameClip


# ==================== Audio Fakes ====================

class FakeClip:
    """
    In-memory clip that records how it was driven.
    
    Like a raw mixer sound, every non-resume play opens another channel,
    even when one is already sounding; stop() closes them all.
    """
    
    def __init__(self, name):
        self.name = name
        self.state = ClipState.IDLE
        self.starts = 0    # fresh starts from position 0
        self.resumes = 0   # unpauses
        self.channels = 0  # loops currently sounding
        self.loop = None
    
    def play(self, loop=True):
        self.loop = loop
        if self.state == ClipState.PAUSED:
            self.resumes += 1
        else:
            self.starts += 1
            self.channels += 1
        self.state = ClipState.PLAYING
    
    def pause(self):
        if self.state == ClipState.PLAYING:
            self.state = ClipState.PAUSED
    
    def stop(self):
        self.channels = 0
        self.state = ClipState.IDLE
    
    def is_playing(self):
        return self.state == ClipState.PLAYING


class FakeBackend:
    """Audio platform whose files and session outcome are chosen by the test."""
    
    def __init__(self, available=None, session_ok=True):
        self.available = {t.value for t in (available if available is not None else Soundtrack)}
        self.session_ok = session_ok
        self.clips = {}
        self.shutdown = Mock()
    
    def configure_session(self):
        return self.session_ok
    
    def load_clip(self, name):
        if name not in self.available:
            return None
        clip = FakeClip(name)
        self.clips[name] = clip
        return clip


class MockSoundBackend(FakeBackend):
    """Backend handing out real PygameClip objects over mocked mixer sounds."""
    
    def __init__(self, available=None, session_ok=True):
        super().__init__(available, session_ok)
        self.sounds = {}
    
    def load_clip(self, name):
        if name not in self.available:
            return None
        sound = Mock(name=f"Sound[{name}]")
        self.sounds[name] = sound
        clip = PygameClip(name, sound)
        self.clips[name] = clip
        return clip


# ==================== Audio Fixtures ====================

@pytest.fixture
def make_backend():
    """Factory for fake backends."""
    return FakeBackend


@pytest.fixture
def backend():
    """Backend with every soundtrack present."""
    return FakeBackend()


@pytest.fixture
def rain_ocean_backend():
    """Backend where only Rain and Ocean files exist."""
    return FakeBackend(available=[Soundtrack.RAIN, Soundtrack.OCEAN])


@pytest.fixture
def mock_sound_backend():
    """Rain/Ocean backend whose clips are PygameClip over mocked sounds."""
    return MockSoundBackend(available=[Soundtrack.RAIN, Soundtrack.OCEAN])


@pytest.fixture
def interruptions():
    return InterruptionCenter()


@pytest.fixture
def player(rain_ocean_backend, interruptions):
    """Sound player over the Rain/Ocean catalog."""
    return SoundPlayer(rain_ocean_backend, interruptions)


# ==================== Timer Fixtures ====================

@pytest.fixture
def breathing_phases():
    return [
        PhaseDefinition("Breathe", 5),
        PhaseDefinition("Hold", 3),
        PhaseDefinition("Exhale", 5),
    ]


@pytest.fixture
def timer(breathing_phases):
    """Breathe/Hold/Exhale timer with durations 5/3/5."""
    return PhaseTimer(breathing_phases)


@pytest.fixture
def sound_settings():
    """Settings with the Rain soundtrack switched on."""
    return MeditationSettings(
        durations=[5, 3, 5],
        selected_soundtrack=Soundtrack.RAIN,
        is_sound_enabled=True
    )
