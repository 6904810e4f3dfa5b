"""Achievement unlock evaluation

Every predicate is pure: (condition, progress, result) -> bool.
Callers apply the unlock (see progress.logic.unlock_achievement).
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from framtidsbygget.core.progress.models import (
    TOTAL_MISSIONS,
    TOTAL_SYNERGIES,
    GameResult,
    PlayerProgress,
)

from .enums import ConditionType
from .models import Achievement, UnlockCondition
from .registry import AchievementRegistry

logger = logging.getLogger(__name__)

Predicate = Callable[[UnlockCondition, PlayerProgress, Optional[GameResult]], bool]


def _result_for(
    condition: UnlockCondition, result: Optional[GameResult]
) -> Optional[GameResult]:
    """The result if it belongs to the condition's world (any world when global)."""
    if result is None:
        return None
    if condition.game_id is not None and result.world_id != condition.game_id:
        return None
    return result


# ── predicates ──


def _game_completion(cond, progress, result) -> bool:
    if cond.all_games:
        return progress.completed_count == TOTAL_MISSIONS
    if cond.any_game:
        return progress.completed_count >= cond.count
    return False


def _specific_outcome(cond, progress, result) -> bool:
    r = _result_for(cond, result)
    if r is None:
        return False
    if cond.requirement == "perfect_security":
        return r.metric_value("security_score") == 100 and r.score_awarded >= cond.min_score
    if cond.requirement == "consensus_outcome":
        return r.outcome is not None and r.outcome == cond.outcome
    if cond.requirement == "unicorns_created":
        return r.companies_created.get("unicorns", 0) >= cond.count
    logger.warning("Unknown specific_outcome requirement: %s", cond.requirement)
    return False


def _metric_threshold(cond, progress, result) -> bool:
    r = _result_for(cond, result)
    if r is None:
        return False
    if cond.metrics:
        for name, floor in cond.metrics:
            value = r.final_competence.get(name)
            if value is None:
                value = r.metric_value(name)
            if value is None or value < floor:
                return False
        return True
    if cond.final_index is not None:
        value = r.metric_value("final_index")
        return value is not None and value >= cond.final_index
    return False


def _synergy_unlock(cond, progress, result) -> bool:
    if cond.all_synergies:
        flags = progress.unlocked_synergies
        return len(flags) >= TOTAL_SYNERGIES and all(flags.values())
    return progress.unlocked_synergy_count >= max(cond.count, 1)


def _compass_exploration(cond, progress, result) -> bool:
    if not progress.compass_progress:
        return False
    return progress.compass_percentage() >= cond.percentage_unlocked


def _relationship_scores(cond, progress, result) -> bool:
    r = _result_for(cond, result)
    if r is None or not r.relationship_scores:
        return False
    return all(v >= cond.all_characters_above for v in r.relationship_scores.values())


def _efficiency_metric(cond, progress, result) -> bool:
    r = _result_for(cond, result)
    if r is None or not r.success:
        return False
    budget = r.metric_value("budget_used_ratio")
    time_used = r.metric_value("time_used_ratio")
    if budget is None or time_used is None:
        return False
    return budget <= cond.max_budget_used and time_used <= cond.max_time_used


def _specific_gameplay(cond, progress, result) -> bool:
    r = _result_for(cond, result)
    if r is None or not r.success:
        return False
    if cond.requirement == "no_negative_events":
        return r.metric_value("negative_events") == 0
    logger.warning("Unknown specific_gameplay requirement: %s", cond.requirement)
    return False


def _replay_variation(cond, progress, result) -> bool:
    return any(
        len(set(outcomes)) >= cond.different_outcomes
        for outcomes in progress.outcome_history.values()
    )


def _connectivity_metric(cond, progress, result) -> bool:
    r = _result_for(cond, result)
    return r is not None and r.flag("all_regions_connected")


def _ecosystem_metric(cond, progress, result) -> bool:
    r = _result_for(cond, result)
    if r is None:
        return False
    partnerships = r.metric_value("cross_sector_partnerships")
    return partnerships is not None and partnerships >= cond.cross_sector_partnerships


def _speedrun(cond, progress, result) -> bool:
    if progress.completed_count < TOTAL_MISSIONS:
        return False
    times = [m.time_spent for m in progress.completed_missions]
    if any(t is None for t in times):
        return False
    return sum(times) <= cond.total_time


def _perfect_scores(cond, progress, result) -> bool:
    if progress.completed_count < TOTAL_MISSIONS:
        return False
    return all(m.perfect for m in progress.completed_missions)


def _easter_egg(cond, progress, result) -> bool:
    if progress.easter_eggs_found:
        return True
    return result is not None and result.flag("easter_egg")


PREDICATES: dict[ConditionType, Predicate] = {
    ConditionType.GAME_COMPLETION: _game_completion,
    ConditionType.SPECIFIC_OUTCOME: _specific_outcome,
    ConditionType.METRIC_THRESHOLD: _metric_threshold,
    ConditionType.SYNERGY_UNLOCK: _synergy_unlock,
    ConditionType.COMPASS_EXPLORATION: _compass_exploration,
    ConditionType.RELATIONSHIP_SCORES: _relationship_scores,
    ConditionType.EFFICIENCY_METRIC: _efficiency_metric,
    ConditionType.SPECIFIC_GAMEPLAY: _specific_gameplay,
    ConditionType.REPLAY_VARIATION: _replay_variation,
    ConditionType.CONNECTIVITY_METRIC: _connectivity_metric,
    ConditionType.ECOSYSTEM_METRIC: _ecosystem_metric,
    ConditionType.SPEEDRUN: _speedrun,
    ConditionType.PERFECT_SCORES: _perfect_scores,
    ConditionType.EASTER_EGG: _easter_egg,
}

_missing = set(ConditionType) - set(PREDICATES)
if _missing:
    raise RuntimeError(f"No predicate for condition types: {sorted(_missing)}")


# ── public API ──


def evaluate_condition(
    condition: UnlockCondition,
    progress: PlayerProgress,
    result: Optional[GameResult] = None,
) -> bool:
    return PREDICATES[condition.type](condition, progress, result)


def check_achievement(
    registry: AchievementRegistry,
    progress: PlayerProgress,
    achievement_id: str,
    result: Optional[GameResult] = None,
) -> bool:
    """Should achievement_id transition locked -> unlocked?

    Unknown ids and already unlocked achievements give False.
    Does not mutate progress.
    """
    achievement = registry.get(achievement_id)
    if achievement is None:
        logger.warning("check_achievement: unknown achievement %s", achievement_id)
        return False
    if progress.has_achievement(achievement_id):
        return False
    return evaluate_condition(achievement.condition, progress, result)


def achievements_to_check(
    registry: AchievementRegistry, world_id: Optional[str]
) -> list[Achievement]:
    """Candidates after a mission in world_id: every global condition
    plus those scoped to that world."""
    return [
        a
        for a in registry.get_all()
        if a.condition.is_global or a.condition.game_id == world_id
    ]


def find_unlockable(
    registry: AchievementRegistry,
    progress: PlayerProgress,
    result: Optional[GameResult] = None,
) -> list[Achievement]:
    """Achievements that check_achievement accepts for this result, in table order."""
    world_id = result.world_id if result is not None else None
    return [
        a
        for a in achievements_to_check(registry, world_id)
        if check_achievement(registry, progress, a.id, result)
    ]


def calculate_achievement_score(
    registry: AchievementRegistry, achievement_ids: Iterable[str]
) -> int:
    """Sum of rewards over distinct known ids. Unknown ids contribute 0."""
    total = 0
    for achievement_id in set(achievement_ids):
        achievement = registry.get(achievement_id)
        if achievement is not None:
            total += achievement.fl_score_reward
    return total
