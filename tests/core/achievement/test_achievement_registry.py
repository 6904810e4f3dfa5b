"""AchievementRegistry and display helper tests"""

import pytest

from framtidsbygget.core.achievement import (
    AchievementRegistry,
    ConditionType,
    Rarity,
    format_progress,
    public_view,
    rarity_color,
    rarity_name,
)
from framtidsbygget.core.progress.models import CompassStatus, CompletedMission, PlayerProgress


def _raw(achievement_id: str, **overrides) -> dict:
    raw = {
        "id": achievement_id,
        "name": achievement_id.title(),
        "description": "d",
        "category": "gameplay",
        "icon": "flag",
        "rarity": "common",
        "fl_score_reward": 10,
        "unlock_conditions": {"type": "game_completion", "count": 1, "any_game": True},
    }
    raw.update(overrides)
    return raw


# ── loading ──


class TestLoad:
    def test_packaged_content(self, registry):
        assert registry.count() == 21
        first = registry.get("first_victory")
        assert first is not None
        assert first.rarity == Rarity.COMMON
        assert first.fl_score_reward == 50
        assert first.condition.type == ConditionType.GAME_COMPLETION
        assert first.condition.is_global

    def test_categories(self, registry):
        ids = [c.id for c in registry.categories()]
        assert ids == ["gameplay", "mastery", "strategy", "exploration", "social"]
        assert len(registry.by_category("social")) == 3

    def test_hidden_flag(self, registry):
        hidden = {a.id for a in registry.get_all() if a.hidden}
        assert hidden == {"speedrunner", "perfectionist", "easter_egg_hunter"}

    def test_world_scope(self, registry):
        assert registry.get("security_expert").condition.game_id == "pussel-spel-datasystem"

    def test_duplicate_id_rejected(self):
        registry = AchievementRegistry()
        with pytest.raises(ValueError):
            registry.load_from_dict({"achievements": [_raw("dup"), _raw("dup")]})

    def test_malformed_record_skipped(self):
        registry = AchievementRegistry()
        count = registry.load_from_dict(
            {
                "achievements": [
                    _raw("ok"),
                    _raw("bad_type", unlock_conditions={"type": "no_such_kind"}),
                    {"id": "missing_fields"},
                ]
            }
        )
        assert count == 1
        assert "ok" in registry
        assert registry.get("bad_type") is None

    def test_get_unknown(self, registry):
        assert registry.get("nope") is None


# ── display ──


class TestDisplay:
    @pytest.mark.parametrize(
        "rarity,color,name",
        [
            ("common", "#9E9E9E", "Vanlig"),
            ("rare", "#2196F3", "Sällsynt"),
            ("legendary", "#FF9800", "Legendarisk"),
        ],
    )
    def test_rarity_lookup(self, rarity, color, name):
        assert rarity_color(rarity) == color
        assert rarity_name(rarity) == name

    def test_unknown_rarity_falls_back_to_common(self):
        assert rarity_color("mythic") == "#9E9E9E"
        assert rarity_name(None) == "Vanlig"

    def test_every_rarity_has_color_and_name(self):
        for rarity in Rarity:
            assert rarity_color(rarity).startswith("#")
            assert rarity_name(rarity)

    def test_progress_text_completion(self, registry):
        progress = PlayerProgress(
            user_id="u1", completed_missions=[CompletedMission(world_id="kompetensresan")]
        )
        text = format_progress(registry.get("halfway_there"), progress)
        assert text == "1 / 3 uppdrag slutförda"

    def test_progress_text_synergy(self, registry):
        progress = PlayerProgress(user_id="u1", unlocked_synergies={"a": True, "b": True})
        assert format_progress(registry.get("synergy_master"), progress) == (
            "2 / 4 synergier upplåsta"
        )

    def test_progress_text_compass(self, registry):
        progress = PlayerProgress(
            user_id="u1",
            compass_progress={"a": CompassStatus.UNLOCKED, "b": CompassStatus.LOCKED},
        )
        assert format_progress(registry.get("compass_navigator"), progress) == (
            "50% av kompassen utforskad"
        )

    def test_progress_text_other_kinds(self, registry):
        progress = PlayerProgress(user_id="u1")
        assert format_progress(registry.get("perfectionist"), progress) == "???"
        assert format_progress(registry.get("security_expert"), progress) == "Framsteg dolt"

    def test_hidden_masked_until_unlocked(self, registry):
        achievement = registry.get("perfectionist")
        masked = public_view(achievement)
        assert masked["name"] == "???"
        assert masked["flavor_text"] == ""

        progress = PlayerProgress(user_id="u1", unlocked_achievements=["perfectionist"])
        revealed = public_view(achievement, progress)
        assert revealed["name"] == achievement.name
        assert revealed["unlocked"] is True

    def test_visible_not_masked(self, registry):
        view = public_view(registry.get("first_victory"))
        assert view["name"] == "Första Segern"
        assert "unlocked" not in view
