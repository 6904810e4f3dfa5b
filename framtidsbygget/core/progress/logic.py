"""Progress transitions: applying a GameResult, unlocking achievements"""

from __future__ import annotations

import copy
import logging
from typing import Optional

from framtidsbygget.core.achievement.conditions import calculate_achievement_score
from framtidsbygget.core.achievement.models import Achievement
from framtidsbygget.core.achievement.registry import AchievementRegistry
from framtidsbygget.core.games.catalog import GameCatalog

from .models import (
    COMPASS_RANK,
    CompassStatus,
    CompletedMission,
    GameResult,
    PlayerProgress,
    utc_now_iso,
)

logger = logging.getLogger(__name__)


class UnknownWorldError(ValueError):
    """GameResult names a world that is not in the catalog."""


def new_progress(user_id: str, catalog: Optional[GameCatalog] = None) -> PlayerProgress:
    """Fresh progress. Synergies all false, compass nodes locked except the root."""
    progress = PlayerProgress(user_id=user_id)
    if catalog is not None:
        progress.unlocked_synergies = {r.id: False for r in catalog.synergy_rules()}
        progress.compass_progress = {
            n.id: CompassStatus.LOCKED for n in catalog.compass_nodes()
        }
        root = catalog.compass_root
        if root in progress.compass_progress:
            progress.compass_progress[root] = CompassStatus.UNLOCKED
    return progress


def _raise_compass(progress: PlayerProgress, node_id: str, status: CompassStatus) -> bool:
    current = progress.compass_progress.get(node_id, CompassStatus.LOCKED)
    if COMPASS_RANK[status] <= COMPASS_RANK[current]:
        return False
    progress.compass_progress[node_id] = status
    return True


def apply_game_result(
    progress: PlayerProgress, result: GameResult, catalog: GameCatalog
) -> PlayerProgress:
    """Return a new PlayerProgress with result applied. Input is not modified.

    - successful mission recorded; an existing record keeps the best score
    - total_fl_score grows by the improvement of the best score only
    - outcome appended to outcome_history
    - synergies of the world unlocked when the rule metric reaches its threshold
    - compass nodes of the world unlocked (mastered on a perfect result), never downgraded
    - easter egg recorded

    Raises:
        UnknownWorldError: result.world_id is not one of the catalog worlds
    """
    if catalog.world(result.world_id) is None:
        raise UnknownWorldError(result.world_id)

    updated = copy.deepcopy(progress)
    now = utc_now_iso()
    world_id = result.world_id
    time_spent = result.metric_value("time_spent")

    if result.success:
        mission = updated.mission(world_id)
        if mission is None:
            updated.completed_missions.append(
                CompletedMission(
                    world_id=world_id,
                    score_awarded=result.score_awarded,
                    best_outcome=result.outcome,
                    completed_at=now,
                    perfect=result.is_perfect,
                    time_spent=time_spent,
                    game_version=updated.game_version,
                )
            )
            updated.total_fl_score += result.score_awarded
        else:
            if result.score_awarded > mission.score_awarded:
                updated.total_fl_score += result.score_awarded - mission.score_awarded
                mission.score_awarded = result.score_awarded
                mission.best_outcome = result.outcome or mission.best_outcome
                mission.completed_at = now
            mission.perfect = mission.perfect or result.is_perfect
            if time_spent is not None and (
                mission.time_spent is None or time_spent < mission.time_spent
            ):
                mission.time_spent = time_spent

    outcome = result.outcome or ("success" if result.success else "failure")
    updated.outcome_history.setdefault(world_id, []).append(outcome)

    if result.success:
        for rule in catalog.synergy_rules_for(world_id):
            value = result.metric_value(rule.metric)
            if value is not None and value >= rule.threshold:
                if not updated.unlocked_synergies.get(rule.id):
                    logger.info("Synergy unlocked: %s (%s)", rule.id, updated.user_id)
                updated.unlocked_synergies[rule.id] = True

        target = CompassStatus.MASTERED if result.is_perfect else CompassStatus.UNLOCKED
        for node in catalog.compass_nodes_for(world_id):
            _raise_compass(updated, node.id, target)
        root = catalog.compass_root
        if root:
            _raise_compass(updated, root, CompassStatus.UNLOCKED)

    if result.flag("easter_egg"):
        egg = str(result.details.get("easter_egg_id") or world_id)
        if egg not in updated.easter_eggs_found:
            updated.easter_eggs_found.append(egg)

    updated.last_updated = now
    return updated


def unlock_achievement(progress: PlayerProgress, achievement: Achievement) -> bool:
    """Append the id and add the reward. False (no change) when already unlocked."""
    if progress.has_achievement(achievement.id):
        return False
    progress.unlocked_achievements.append(achievement.id)
    progress.total_fl_score += achievement.fl_score_reward
    progress.last_updated = utc_now_iso()
    logger.info(
        "Achievement unlocked: %s (+%d) for %s",
        achievement.id,
        achievement.fl_score_reward,
        progress.user_id,
    )
    return True


def recompute_total_score(progress: PlayerProgress, registry: AchievementRegistry) -> int:
    """Best mission scores plus rewards of unlocked achievements, from scratch."""
    mission_total = sum(m.score_awarded for m in progress.completed_missions)
    return mission_total + calculate_achievement_score(
        registry, progress.unlocked_achievements
    )
