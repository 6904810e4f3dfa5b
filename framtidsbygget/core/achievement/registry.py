"""Achievement definition registry - JSON load"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from framtidsbygget.core.content import ACHIEVEMENTS_FILE, load_json

from .enums import Rarity
from .models import Achievement, AchievementCategory, UnlockCondition

logger = logging.getLogger(__name__)


class AchievementRegistry:
    """
    Read-only store of achievement definitions and categories.
    Insertion order of achievements.json is kept for display.
    """

    def __init__(self) -> None:
        self._achievements: dict[str, Achievement] = {}
        self._categories: dict[str, AchievementCategory] = {}

    @classmethod
    def from_content(cls, content_dir: Optional[str | Path] = None) -> AchievementRegistry:
        registry = cls()
        registry.load_from_dict(load_json(ACHIEVEMENTS_FILE, content_dir))
        return registry

    def load_from_dict(self, data: dict[str, Any]) -> int:
        """Load categories and achievements. Returns the number of achievements loaded.

        Malformed records are logged and skipped.
        A duplicate achievement id raises ValueError.
        """
        for cat_id, raw in (data.get("categories") or {}).items():
            self._categories[cat_id] = AchievementCategory(
                id=raw.get("id", cat_id),
                name=raw.get("name", cat_id),
                description=raw.get("description", ""),
                icon=raw.get("icon", ""),
                color=raw.get("color", ""),
            )

        count = 0
        for raw in data.get("achievements") or []:
            achievement_id = raw.get("id", "?")
            if achievement_id in self._achievements:
                raise ValueError(f"Duplicate achievement id: {achievement_id}")
            try:
                achievement = Achievement(
                    id=raw["id"],
                    name=raw["name"],
                    description=raw.get("description", ""),
                    category=raw["category"],
                    icon=raw.get("icon", ""),
                    rarity=Rarity(raw.get("rarity", "common")),
                    fl_score_reward=int(raw.get("fl_score_reward", 0)),
                    condition=UnlockCondition.from_dict(raw["unlock_conditions"]),
                    hidden=bool(raw.get("hidden") or False),
                    flavor_text=raw.get("flavor_text", ""),
                )
            except (KeyError, ValueError, TypeError) as e:
                logger.warning("Failed to load achievement %s: %s", achievement_id, e)
                continue
            if achievement.category not in self._categories:
                logger.warning(
                    "Achievement %s references unknown category %s",
                    achievement.id,
                    achievement.category,
                )
            self._achievements[achievement.id] = achievement
            count += 1

        logger.info("Loaded %d achievements", count)
        return count

    def get(self, achievement_id: str) -> Optional[Achievement]:
        """O(1) lookup. None when unknown."""
        return self._achievements.get(achievement_id)

    def get_all(self) -> list[Achievement]:
        return list(self._achievements.values())

    def by_category(self, category: str) -> list[Achievement]:
        return [a for a in self._achievements.values() if a.category == category]

    def get_category(self, category: str) -> Optional[AchievementCategory]:
        return self._categories.get(category)

    def categories(self) -> list[AchievementCategory]:
        return list(self._categories.values())

    def count(self) -> int:
        return len(self._achievements)

    def __contains__(self, achievement_id: object) -> bool:
        return achievement_id in self._achievements
