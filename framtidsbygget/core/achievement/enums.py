"""Achievement enums"""

from enum import Enum


class ConditionType(str, Enum):
    GAME_COMPLETION = "game_completion"
    SPECIFIC_OUTCOME = "specific_outcome"
    METRIC_THRESHOLD = "metric_threshold"
    SYNERGY_UNLOCK = "synergy_unlock"
    COMPASS_EXPLORATION = "compass_exploration"
    RELATIONSHIP_SCORES = "relationship_scores"
    EFFICIENCY_METRIC = "efficiency_metric"
    SPECIFIC_GAMEPLAY = "specific_gameplay"
    REPLAY_VARIATION = "replay_variation"
    CONNECTIVITY_METRIC = "connectivity_metric"
    ECOSYSTEM_METRIC = "ecosystem_metric"
    SPEEDRUN = "speedrun"
    PERFECT_SCORES = "perfect_scores"
    EASTER_EGG = "easter_egg"


class Rarity(str, Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
