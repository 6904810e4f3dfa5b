"""Progress Service - connects progress/achievement Core with the document store

Service -> Core and Service -> DB allowed.
Service -> Service forbidden, go through the EventBus.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from framtidsbygget.core.achievement.conditions import find_unlockable
from framtidsbygget.core.achievement.display import public_view
from framtidsbygget.core.achievement.models import Achievement
from framtidsbygget.core.achievement.registry import AchievementRegistry
from framtidsbygget.core.event_bus import EventBus, GameEvent
from framtidsbygget.core.event_types import EventTypes
from framtidsbygget.core.games.catalog import GameCatalog
from framtidsbygget.core.logging import get_logger
from framtidsbygget.core.progress.logic import (
    apply_game_result,
    new_progress,
    unlock_achievement,
)
from framtidsbygget.core.progress.models import GameResult, PlayerProgress, utc_now_iso
from framtidsbygget.db.store import ProgressStore, ProgressStoreError

logger = get_logger(__name__)

SOURCE = "progress_service"


class UnknownPlayerError(LookupError):
    """No progress exists for the user id."""


@dataclass
class SubmissionReport:
    """What one GameResult changed."""

    progress: PlayerProgress
    unlocked: List[Achievement] = field(default_factory=list)
    new_synergies: List[str] = field(default_factory=list)
    saved: bool = True

    @property
    def total_fl_score(self) -> int:
        return self.progress.total_fl_score


class ProgressService:
    """Create/load progress, apply GameResults, unlock achievements, persist.

    The in-memory copy is authoritative; a failed save is reported
    (saved=False) and retried on the next write.
    """

    def __init__(
        self,
        db: Session,
        event_bus: EventBus,
        registry: AchievementRegistry,
        catalog: GameCatalog,
    ) -> None:
        self._store = ProgressStore(db)
        self._bus = event_bus
        self._registry = registry
        self._catalog = catalog
        self._cache: Dict[str, PlayerProgress] = {}

    # ── lookup ───────────────────────────────────────────────

    def get_progress(self, user_id: str) -> Optional[PlayerProgress]:
        """Cached progress, else the stored document. None when unknown.

        Raises:
            ProgressStoreError: the store could not be read. Not the same
                as an unknown player; nothing may be created in its place.
        """
        cached = self._cache.get(user_id)
        if cached is not None:
            return cached
        document = self._store.load(user_id)
        if document is None:
            return None
        progress = PlayerProgress.from_dict(document)
        self._cache[user_id] = progress
        return progress

    def create_or_load(self, user_id: str) -> tuple[PlayerProgress, bool]:
        """Start a session: load or create progress and bump session_count.

        Returns: (progress, saved)

        Raises:
            ProgressStoreError: stored progress could not be read. Nothing
                is created or saved.
        """
        try:
            progress = self.get_progress(user_id)
        except ProgressStoreError as e:
            logger.error(f"Progress load failed, not creating {user_id}: {e}")
            raise
        if progress is None:
            progress = new_progress(user_id, self._catalog)
            self._bus.emit(
                GameEvent(
                    event_type=EventTypes.PROGRESS_CREATED,
                    data={"user_id": user_id},
                    source=SOURCE,
                )
            )
            logger.info(f"Progress created: {user_id}")
        progress.session_count += 1
        progress.last_updated = utc_now_iso()
        self._cache[user_id] = progress
        saved = self._persist(progress)
        self._bus.reset_chain()
        return progress, saved

    # ── result submission ────────────────────────────────────

    def submit_game_result(self, user_id: str, result: GameResult) -> SubmissionReport:
        """Consume one GameResult: update progress, unlock achievements, persist.

        Raises:
            UnknownPlayerError: no progress for user_id
            UnknownWorldError: result.world_id is not a catalog world
            ProgressStoreError: stored progress could not be read
        """
        current = self.get_progress(user_id)
        if current is None:
            raise UnknownPlayerError(user_id)

        updated = apply_game_result(current, result, self._catalog)
        report = SubmissionReport(progress=updated)

        report.new_synergies = [
            synergy_id
            for synergy_id, unlocked in updated.unlocked_synergies.items()
            if unlocked and not current.unlocked_synergies.get(synergy_id)
        ]

        for achievement in find_unlockable(self._registry, updated, result):
            if unlock_achievement(updated, achievement):
                report.unlocked.append(achievement)

        self._cache[user_id] = updated
        report.saved = self._persist(updated)

        if result.success:
            self._emit(
                EventTypes.MISSION_COMPLETED,
                {"user_id": user_id, "world_id": result.world_id},
            )
        for synergy_id in report.new_synergies:
            self._emit(
                EventTypes.SYNERGY_UNLOCKED,
                {"user_id": user_id, "synergy_id": synergy_id},
            )
        for node_id, status in updated.compass_progress.items():
            if current.compass_progress.get(node_id) != status:
                self._emit(
                    EventTypes.COMPASS_NODE_UPDATED,
                    {"user_id": user_id, "node_id": node_id, "status": status.value},
                )
        for achievement in report.unlocked:
            self._emit(
                EventTypes.ACHIEVEMENT_UNLOCKED,
                {"user_id": user_id, "achievement_id": achievement.id},
            )
        self._bus.reset_chain()

        logger.info(
            f"Result applied: {user_id} {result.world_id} success={result.success} "
            f"unlocked={[a.id for a in report.unlocked]} total={updated.total_fl_score}"
        )
        return report

    # ── achievements view ────────────────────────────────────

    def achievement_overview(self, user_id: str) -> List[Dict[str, Any]]:
        progress = self.get_progress(user_id)
        if progress is None:
            raise UnknownPlayerError(user_id)
        return [public_view(a, progress) for a in self._registry.get_all()]

    # ── seeding ──────────────────────────────────────────────

    def seed(self, players: List[PlayerProgress]) -> int:
        """Store players that do not exist yet. Returns the number stored."""
        stored = 0
        for player in players:
            try:
                if self.get_progress(player.user_id) is not None:
                    continue
            except ProgressStoreError as e:
                logger.error(f"Seed skipped {player.user_id}: {e}")
                continue
            self._cache[player.user_id] = player
            if self._persist(player):
                stored += 1
        logger.info(f"Seeded {stored} mock players")
        return stored

    # ── internal ─────────────────────────────────────────────

    def _persist(self, progress: PlayerProgress) -> bool:
        try:
            self._store.save(progress.user_id, progress.to_dict())
        except ProgressStoreError as e:
            logger.error(f"Progress save failed, keeping in-memory state: {e}")
            self._emit(
                EventTypes.PROGRESS_SAVE_FAILED, {"user_id": progress.user_id}
            )
            return False
        self._emit(EventTypes.PROGRESS_SAVED, {"user_id": progress.user_id})
        return True

    def _emit(self, event_type: str, data: Dict[str, Any]) -> None:
        self._bus.emit(GameEvent(event_type=event_type, data=data, source=SOURCE))
