# File: tests/integration/test_session.py
"""
Integration tests for the meditation session.
Drives the timer and the sound player together through fake audio.
"""

from unittest.mock import Mock

import pytest

from simple_meditation.audio import SoundPlayer
from simple_meditation.core.config_manager import Config
from simple_meditation.core.factory import SessionFactory
from simple_meditation.core.phase_timer import PhaseTimer
from simple_meditation.core.session import MeditationSession
from simple_meditation.models import (
    ClipState, ConfigurationError, MeditationSettings, Soundtrack, TickPolicy
)


@pytest.fixture
def session(timer, player, sound_settings):
    """Session with Rain selected and sound enabled."""
    return MeditationSession(timer, sound_player=player, settings=sound_settings)


def tick_many(session, count):
    for _ in range(count):
        session.tick()


class TestPhaseSound:
    """Tests for sound decisions on phase changes."""
    
    def test_no_sound_before_first_transition(self, session, player):
        tick_many(session, 4)
        
        assert not player.is_playing(Soundtrack.RAIN)
    
    def test_transition_plays_selected_track(self, session, player):
        tick_many(session, 5)
        
        assert player.is_playing(Soundtrack.RAIN)
        assert player.currently_playing == Soundtrack.RAIN
    
    def test_later_transitions_do_not_restart(self, session, rain_ocean_backend):
        tick_many(session, 13)
        
        assert rain_ocean_backend.clips["Rain"].starts == 1
    
    def test_disabled_sound_switches_off_on_transition(self, timer, player):
        player.play(Soundtrack.OCEAN)
        session = MeditationSession(timer, player, MeditationSettings([5, 3, 5]))
        
        tick_many(session, 5)
        
        assert not player.is_playing(Soundtrack.OCEAN)
        assert player.currently_playing is None
    
    def test_change_soundtrack_in_settings(self, session, player):
        tick_many(session, 5)
        session.update_settings(MeditationSettings([5, 3, 5], Soundtrack.OCEAN, True))
        
        tick_many(session, 3)
        
        assert player.is_playing(Soundtrack.OCEAN)
        assert not player.is_playing(Soundtrack.RAIN)
    
    def test_turning_sound_off_silences_immediately(self, session, player, interruptions):
        """Test that disabling sound stops playback and blocks interruption resume."""
        tick_many(session, 5)
        
        session.update_settings(MeditationSettings([5, 3, 5], Soundtrack.RAIN, False))
        interruptions.began()
        interruptions.ended(should_resume=True)
        
        assert not player.is_playing(Soundtrack.RAIN)
    
    def test_audio_failure_does_not_halt_cycle(self, timer, sound_settings):
        """Test that a throwing player is contained and the timer keeps going."""
        broken = Mock()
        broken.play.side_effect = RuntimeError("device lost")
        session = MeditationSession(timer, broken, sound_settings)
        
        tick_many(session, 13)
        
        assert broken.play.call_count == 3
        assert timer.current_phase == "Breathe"
        assert timer.time_remaining == 5.0
    
    def test_runs_without_player(self, timer, sound_settings):
        session = MeditationSession(timer, None, sound_settings)
        
        tick_many(session, 8)
        
        assert session.display_state() == ("Exhale", 5.0)


class TestInterruptedSession:
    """Tests for phase changes that happen while audio is interrupted."""
    
    def test_phase_change_during_interruption_stays_paused(self, session, rain_ocean_backend, interruptions):
        tick_many(session, 5)
        interruptions.began()
        
        tick_many(session, 3)
        
        rain = rain_ocean_backend.clips["Rain"]
        assert session.display_state() == ("Exhale", 5.0)
        assert rain.state == ClipState.PAUSED
        
        interruptions.ended(should_resume=True)
        
        assert rain.is_playing()
        assert rain.starts == 1
        assert rain.channels == 1
    
    def test_window_hidden_across_transition_leaves_one_loop(self, timer, sound_settings, mock_sound_backend, interruptions):
        """Test hide, transition, show, then sound off over mixer-backed clips."""
        player = SoundPlayer(mock_sound_backend, interruptions)
        session = MeditationSession(timer, player, sound_settings)
        sound = mock_sound_backend.sounds["Rain"]
        channel = sound.play.return_value
        
        tick_many(session, 5)
        interruptions.began()
        tick_many(session, 3)
        interruptions.ended(should_resume=True)
        
        assert sound.play.call_count == 1
        assert player.is_playing(Soundtrack.RAIN)
        
        session.update_settings(MeditationSettings([5, 3, 5], Soundtrack.RAIN, False))
        
        channel.stop.assert_called_once()
        assert not player.is_playing(Soundtrack.RAIN)


class TestSettings:
    """Tests for applying edited settings."""
    
    def test_durations_apply_on_next_entry(self, session, timer):
        tick_many(session, 1)
        
        session.update_settings(MeditationSettings([9, 3, 5]))
        
        assert timer.time_remaining == 4.0
        tick_many(session, 4 + 3 + 5)
        assert session.display_state() == ("Breathe", 9.0)
    
    def test_mismatched_durations_rejected(self, session):
        with pytest.raises(ConfigurationError):
            session.update_settings(MeditationSettings([5, 3]))
        
        assert session.settings.durations == [5.0, 3.0, 5.0]
    
    def test_initial_settings_override_timer_durations(self, player):
        timer = PhaseTimer(["Breathe", "Hold", "Exhale"], [5, 3, 5])
        
        MeditationSession(timer, player, MeditationSettings([4, 7, 8]))
        
        assert timer.durations == [4.0, 7.0, 8.0]
    
    def test_appear_resyncs_active_phase(self, session, timer):
        tick_many(session, 6)
        session.update_settings(MeditationSettings([5, 6, 5], Soundtrack.RAIN, True))
        
        session.appear()
        
        assert session.display_state() == ("Hold", 6.0)


class TestClockPolicy:
    """Tests for missed-tick handling."""
    
    def test_clamp_applies_one_tick(self, timer):
        session = MeditationSession(timer, tick_policy=TickPolicy.CLAMP)
        
        session.on_clock(elapsed_seconds=7.5)
        
        assert session.display_state() == ("Breathe", 4.0)
    
    def test_catch_up_applies_elapsed_ticks(self, timer):
        session = MeditationSession(timer, tick_policy=TickPolicy.CATCH_UP)
        
        events = session.on_clock(elapsed_seconds=7.5)
        
        assert [e.name for e in events] == ["Hold"]
        assert session.display_state() == ("Hold", 1.0)
    
    def test_catch_up_is_capped(self, timer):
        session = MeditationSession(timer, tick_policy=TickPolicy.CATCH_UP, max_catch_up_ticks=3)
        
        assert session.ticks_for(3600) == 3
    
    def test_catch_up_short_interval_still_ticks(self, timer):
        session = MeditationSession(timer, tick_policy=TickPolicy.CATCH_UP)
        
        assert session.ticks_for(0.4) == 1


class TestFactory:
    """Tests for building a session from configuration."""
    
    def test_create_with_fake_backend(self, tmp_path, monkeypatch, backend, interruptions):
        monkeypatch.setattr(Config, "CONFIG_FILE", tmp_path / "missing.json")
        monkeypatch.setattr(Config, "TICK_POLICY", "catch_up")
        
        session = SessionFactory.create(interruptions, backend=backend)
        
        assert isinstance(session.sound_player, SoundPlayer)
        assert session.tick_policy == TickPolicy.CATCH_UP
        assert session.display_state() == ("Breathe", 5.0)
    
    def test_create_without_sound(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Config, "CONFIG_FILE", tmp_path / "missing.json")
        
        session = SessionFactory.create(with_sound=False)
        
        assert session.sound_player is None
    
    def test_close_shuts_down_audio(self, session, rain_ocean_backend):
        session.close()
        
        rain_ocean_backend.shutdown.assert_called_once()
