"""SoundManifest tests"""

from framtidsbygget.core.audio.manifest import MASTER, SoundManifest


class TestSounds:
    def test_flattened_ids(self, manifest):
        assert len(manifest.sounds()) == 52
        click = manifest.get("ui.click")
        assert click.file == "/assets/audio/ui/click.mp3"
        assert click.volume == 0.5
        assert click.category == "ui"
        assert click.preload is True

    def test_short_id_resolves_under_games(self, manifest):
        assert manifest.resolve("welfare.consensus_reached") == "games.welfare.consensus_reached"
        assert manifest.get("games.welfare.consensus_reached").volume == 0.9
        assert manifest.resolve("welfare.nope") is None
        assert manifest.get("nope") is None

    def test_preload_assets(self, manifest):
        preload = manifest.preload_assets()
        assert len(preload) == 12
        assert all(s.preload for s in preload)
        assert manifest.batch_size == 5

    def test_every_sequence_step_resolves(self, manifest):
        for name in manifest.sequence_names():
            for step in manifest.sequence(name):
                assert manifest.resolve(step.sound) is not None, (name, step.sound)

    def test_sequence(self, manifest):
        steps = manifest.sequence("achievement_unlock")
        assert [(s.sound, s.delay) for s in steps] == [
            ("feedback.unlock", 0),
            ("feedback.achievement", 300),
        ]
        assert manifest.sequence("nope") is None


class TestVolumes:
    def test_default_volumes_include_master(self, manifest):
        volumes = manifest.default_volumes()
        assert volumes == {
            "ui": 0.6,
            "ambient": 0.4,
            "feedback": 0.7,
            "dialogue": 0.8,
            MASTER: 1.0,
        }

    def test_presets(self, manifest):
        assert set(manifest.preset_names()) == {
            "default",
            "quiet",
            "loud",
            "no_music",
            "accessibility",
        }
        quiet = manifest.preset("quiet")
        assert quiet["ui"] == 0.3
        assert quiet[MASTER] == 0.5
        assert manifest.preset("nope") is None

    def test_preset_copy(self, manifest):
        manifest.preset("quiet")["ui"] = 1.0
        assert manifest.preset("quiet")["ui"] == 0.3


class TestDescriptions:
    def test_lookup(self, manifest):
        assert manifest.description("ui.click") == "Button clicked"
        assert manifest.description("feedback.achievement") == "Achievement unlocked"
        assert manifest.description("feedback.unlock") is None
        assert manifest.description("nope") is None


class TestMinimalManifest:
    def test_bad_sound_skipped(self):
        manifest = SoundManifest(
            {
                "categories": {"ui": {"default_volume": 0.5}},
                "sounds": {
                    "ui": {
                        "ok": {"file": "/ok.mp3"},
                        "bad": {"file": "/bad.mp3", "volume": "loud"},
                    }
                },
            }
        )
        assert manifest.resolve("ui.ok") == "ui.ok"
        assert manifest.get("ui.bad") is None
        assert manifest.batch_size == 5
