"""Achievement domain models (immutable content)"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .enums import ConditionType, Rarity


@dataclass(frozen=True)
class UnlockCondition:
    """Tagged union over ConditionType.

    Only the fields relevant to `type` are meaningful; the rest keep defaults.
    A condition without game_id is global (checked after every mission).
    """

    type: ConditionType
    game_id: Optional[str] = None
    any_game: bool = False
    all_games: bool = False
    count: int = 0

    # specific_outcome / specific_gameplay
    requirement: Optional[str] = None
    min_score: int = 0
    outcome: Optional[str] = None

    # metric_threshold
    metrics: tuple[tuple[str, float], ...] = ()
    final_index: Optional[float] = None

    # synergy_unlock
    any_synergy: bool = False
    all_synergies: bool = False

    # compass_exploration
    percentage_unlocked: float = 0.0

    # relationship_scores
    all_characters_above: float = 0.0

    # efficiency_metric
    max_budget_used: float = 1.0
    max_time_used: float = 1.0

    # replay_variation
    different_outcomes: int = 0

    # connectivity / ecosystem
    all_regions_connected: bool = False
    cross_sector_partnerships: int = 0

    # speedrun, seconds
    total_time: float = 0.0

    # easter_egg
    found: bool = False

    @property
    def is_global(self) -> bool:
        return self.game_id is None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> UnlockCondition:
        metrics = raw.get("metrics") or {}
        final_index = raw.get("final_index")
        return cls(
            type=ConditionType(raw["type"]),
            game_id=raw.get("game_id"),
            any_game=bool(raw.get("any_game", False)),
            all_games=bool(raw.get("all_games", False)),
            count=int(raw.get("count", 0)),
            requirement=raw.get("requirement"),
            min_score=int(raw.get("min_score", 0)),
            outcome=raw.get("outcome"),
            metrics=tuple((k, float(v)) for k, v in metrics.items()),
            final_index=float(final_index) if final_index is not None else None,
            any_synergy=bool(raw.get("any_synergy", False)),
            all_synergies=bool(raw.get("all_synergies", False)),
            percentage_unlocked=float(raw.get("percentage_unlocked", 0)),
            all_characters_above=float(raw.get("all_characters_above", 0)),
            max_budget_used=float(raw.get("max_budget_used", 1.0)),
            max_time_used=float(raw.get("max_time_used", 1.0)),
            different_outcomes=int(raw.get("different_outcomes", 0)),
            all_regions_connected=bool(raw.get("all_regions_connected", False)),
            cross_sector_partnerships=int(raw.get("cross_sector_partnerships", 0)),
            total_time=float(raw.get("total_time", 0)),
            found=bool(raw.get("found", False)),
        )


@dataclass(frozen=True)
class AchievementCategory:
    id: str
    name: str
    description: str = ""
    icon: str = ""
    color: str = ""


@dataclass(frozen=True)
class Achievement:
    """Achievement definition. Loaded from achievements.json."""

    id: str  # "first_victory"
    name: str
    description: str
    category: str  # AchievementCategory.id
    icon: str
    rarity: Rarity
    fl_score_reward: int
    condition: UnlockCondition
    hidden: bool = False
    flavor_text: str = ""
