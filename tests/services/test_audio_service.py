"""AudioService tests (NullAudioBackend)"""

import pytest

from framtidsbygget.core.event_bus import GameEvent
from framtidsbygget.core.event_types import EventTypes
from framtidsbygget.services.audio import (
    AudioBackend,
    AudioBackendError,
    AudioService,
    NullAudioBackend,
    get_audio_backend,
)


@pytest.fixture()
def backend() -> NullAudioBackend:
    return NullAudioBackend()


@pytest.fixture()
def audio(backend, manifest) -> AudioService:
    return AudioService(backend, manifest)


class _FailingPlayBackend(NullAudioBackend):
    def play(self, buffer, volume, loop, delay_ms):
        raise AudioBackendError("device busy")


class TestInit:
    def test_preload(self, audio, backend):
        assert audio.init() == 12
        assert audio.initialized
        assert len(backend.loaded) == 12
        assert audio.is_loaded("ui.click")
        assert not audio.is_loaded("feedback.achievement")

    def test_init_is_idempotent(self, audio, backend):
        audio.init()
        audio.init()
        assert len(backend.loaded) == 12

    def test_failed_load_not_counted(self, manifest):
        backend = NullAudioBackend(fail_files={"/assets/audio/ui/click.mp3"})
        audio = AudioService(backend, manifest)
        assert audio.init() == 11
        assert not audio.is_loaded("ui.click")

    def test_batch_size_override(self, backend, manifest):
        audio = AudioService(backend, manifest, batch_size=0)
        assert audio.init() == 12


class TestVolume:
    def test_effective_volume(self, audio, manifest):
        click = manifest.get("ui.click")
        assert audio.effective_volume(click) == pytest.approx(0.3)
        assert audio.effective_volume(click, 0.5) == pytest.approx(0.15)

    def test_clamped(self, audio, manifest):
        assert audio.effective_volume(manifest.get("ui.click"), 10.0) == 1.0
        assert audio.set_volume("ui", 1.7) == 1.0
        assert audio.set_volume("ui", -1) == 0.0

    def test_unknown_category(self, audio):
        assert audio.set_volume("voice", 0.5) is None
        assert audio.volume("voice") is None

    def test_master(self, audio, manifest):
        audio.set_volume("master", 0.5)
        assert audio.effective_volume(manifest.get("ui.click")) == pytest.approx(0.15)

    def test_preset(self, audio, manifest):
        assert audio.apply_preset("quiet") is True
        assert audio.volume("ui") == 0.3
        assert audio.volume("master") == 0.5
        assert audio.effective_volume(manifest.get("ui.click")) == pytest.approx(0.075)
        assert audio.apply_preset("nope") is False


class TestPlay:
    def test_play(self, audio, backend):
        handle = audio.play("ui.click")
        assert handle.sound_id == "ui.click"
        assert handle.volume == pytest.approx(0.3)
        assert handle.loop is False
        assert backend.played[-1].file == "/assets/audio/ui/click.mp3"

    def test_play_initializes(self, audio):
        audio.play("ui.click")
        assert audio.initialized

    def test_lazy_load(self, audio, backend):
        audio.init()
        audio.play("feedback.achievement")
        assert audio.is_loaded("feedback.achievement")
        assert backend.loaded.count("/assets/audio/feedback/achievement.mp3") == 1
        audio.play("feedback.achievement")
        assert backend.loaded.count("/assets/audio/feedback/achievement.mp3") == 1

    def test_loop_default_from_asset(self, audio, manifest):
        looping = next(s for s in manifest.sounds() if s.loop)
        assert audio.play(looping.id).loop is True
        assert audio.play(looping.id, loop=False).loop is False

    def test_unknown_sound(self, audio, backend):
        assert audio.play("nope") is None
        assert backend.played == []

    def test_muted_is_noop(self, audio, backend):
        audio.mute()
        assert audio.muted
        assert audio.play("ui.click") is None
        assert audio.play_sequence("game_start") == []
        assert backend.played == []
        audio.unmute()
        assert audio.play("ui.click") is not None

    def test_backend_play_failure(self, manifest):
        audio = AudioService(_FailingPlayBackend(), manifest)
        assert audio.play("ui.click") is None

    def test_load_failure(self, manifest):
        backend = NullAudioBackend(fail_files={"/assets/audio/feedback/achievement.mp3"})
        audio = AudioService(backend, manifest)
        assert audio.play("feedback.achievement") is None


class TestSequences:
    def test_delays(self, audio, backend):
        handles = audio.play_sequence("achievement_unlock")
        assert [h.sound_id for h in handles] == ["feedback.unlock", "feedback.achievement"]
        assert [c.delay_ms for c in backend.played] == [0, 300]

    def test_short_ids(self, audio):
        handles = audio.play_sequence("consensus_reached")
        assert [h.sound_id for h in handles] == [
            "games.welfare.relationship_improve",
            "games.welfare.consensus_reached",
        ]

    def test_unknown_sequence(self, audio):
        assert audio.play_sequence("nope") == []


class TestEventHandlers:
    def test_achievement_event_plays_sequence(self, backend, manifest, event_bus):
        AudioService(backend, manifest, event_bus=event_bus)
        event_bus.emit(
            GameEvent(
                event_type=EventTypes.ACHIEVEMENT_UNLOCKED,
                data={"achievement_id": "first_victory"},
                source="test",
            )
        )
        assert [c.delay_ms for c in backend.played] == [0, 300]

    def test_mission_event_plays_sequence(self, backend, manifest, event_bus):
        AudioService(backend, manifest, event_bus=event_bus)
        event_bus.emit(
            GameEvent(
                event_type=EventTypes.MISSION_COMPLETED,
                data={"world_id": "kompetensresan"},
                source="test",
            )
        )
        assert [c.file for c in backend.played] == [
            "/assets/audio/feedback/success.mp3",
            "/assets/audio/feedback/level-complete.mp3",
        ]


class TestDescribe:
    def test_describe(self, audio):
        assert audio.describe("ui.click") == "Button clicked"
        assert audio.describe("nope") is None


class TestFactory:
    def test_null(self):
        backend = get_audio_backend("null")
        assert isinstance(backend, AudioBackend)
        assert backend.name == "null"

    def test_unknown_falls_back(self):
        assert isinstance(get_audio_backend("webaudio"), NullAudioBackend)

    def test_default_from_settings(self):
        assert get_audio_backend().name == "null"
