"""Achievement Core - definitions, unlock evaluation, display helpers"""

from .enums import ConditionType, Rarity
from .models import Achievement, AchievementCategory, UnlockCondition
from .registry import AchievementRegistry
from .conditions import (
    PREDICATES,
    achievements_to_check,
    calculate_achievement_score,
    check_achievement,
    evaluate_condition,
    find_unlockable,
)
from .display import format_progress, public_view, rarity_color, rarity_name

__all__ = [
    "ConditionType",
    "Rarity",
    "Achievement",
    "AchievementCategory",
    "UnlockCondition",
    "AchievementRegistry",
    "PREDICATES",
    "achievements_to_check",
    "calculate_achievement_score",
    "check_achievement",
    "evaluate_condition",
    "find_unlockable",
    "format_progress",
    "public_view",
    "rarity_color",
    "rarity_name",
]
