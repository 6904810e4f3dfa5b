"""Presentation helpers for achievements (colours, names, progress text)"""

from __future__ import annotations

from typing import Any, Optional

from framtidsbygget.core.progress.models import PlayerProgress

from .enums import ConditionType, Rarity
from .models import Achievement

RARITY_COLORS: dict[Rarity, str] = {
    Rarity.COMMON: "#9E9E9E",
    Rarity.UNCOMMON: "#4CAF50",
    Rarity.RARE: "#2196F3",
    Rarity.EPIC: "#9C27B0",
    Rarity.LEGENDARY: "#FF9800",
}

RARITY_NAMES: dict[Rarity, str] = {
    Rarity.COMMON: "Vanlig",
    Rarity.UNCOMMON: "Ovanlig",
    Rarity.RARE: "Sällsynt",
    Rarity.EPIC: "Episk",
    Rarity.LEGENDARY: "Legendarisk",
}

HIDDEN_NAME = "???"
HIDDEN_DESCRIPTION = "Dold utmärkelse"


def _as_rarity(rarity: Rarity | str | None) -> Rarity:
    try:
        return Rarity(rarity)
    except ValueError:
        return Rarity.COMMON


def rarity_color(rarity: Rarity | str | None) -> str:
    """Unknown rarity falls back to common."""
    return RARITY_COLORS[_as_rarity(rarity)]


def rarity_name(rarity: Rarity | str | None) -> str:
    return RARITY_NAMES[_as_rarity(rarity)]


def format_progress(achievement: Achievement, progress: PlayerProgress) -> str:
    cond = achievement.condition
    if cond.type == ConditionType.GAME_COMPLETION:
        return f"{progress.completed_count} / {cond.count} uppdrag slutförda"
    if cond.type == ConditionType.SYNERGY_UNLOCK:
        return f"{progress.unlocked_synergy_count} / {cond.count} synergier upplåsta"
    if cond.type == ConditionType.COMPASS_EXPLORATION:
        return f"{int(progress.compass_percentage())}% av kompassen utforskad"
    return HIDDEN_NAME if achievement.hidden else "Framsteg dolt"


def public_view(
    achievement: Achievement, progress: Optional[PlayerProgress] = None
) -> dict[str, Any]:
    """Serializable view. Hidden achievements stay masked until unlocked."""
    unlocked = progress is not None and progress.has_achievement(achievement.id)
    masked = achievement.hidden and not unlocked
    view: dict[str, Any] = {
        "id": achievement.id,
        "name": HIDDEN_NAME if masked else achievement.name,
        "description": HIDDEN_DESCRIPTION if masked else achievement.description,
        "category": achievement.category,
        "icon": "help" if masked else achievement.icon,
        "rarity": achievement.rarity.value,
        "rarity_name": rarity_name(achievement.rarity),
        "rarity_color": rarity_color(achievement.rarity),
        "fl_score_reward": achievement.fl_score_reward,
        "hidden": achievement.hidden,
        "flavor_text": "" if masked else achievement.flavor_text,
    }
    if progress is not None:
        view["unlocked"] = unlocked
        view["progress_text"] = format_progress(achievement, progress)
    return view
