"""Player progress domain models (DB independent)"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

TOTAL_MISSIONS = 5
TOTAL_SYNERGIES = 4
GAME_VERSION = "1.0.0"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class CompassStatus(str, Enum):
    LOCKED = "locked"
    UNLOCKED = "unlocked"
    MASTERED = "mastered"


# ordering used to refuse downgrades
COMPASS_RANK: dict[CompassStatus, int] = {
    CompassStatus.LOCKED: 0,
    CompassStatus.UNLOCKED: 1,
    CompassStatus.MASTERED: 2,
}


class OnboardingStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class CompletedMission:
    """Best record for one world."""

    world_id: str
    status: str = "completed"
    score_awarded: int = 0
    best_outcome: Optional[str] = None
    completed_at: Optional[str] = None
    perfect: bool = False
    time_spent: Optional[float] = None  # seconds, None when the game did not report it
    game_version: str = GAME_VERSION

    def to_dict(self) -> dict[str, Any]:
        return {
            "world_id": self.world_id,
            "status": self.status,
            "score_awarded": self.score_awarded,
            "best_outcome": self.best_outcome,
            "completed_at": self.completed_at,
            "perfect": self.perfect,
            "time_spent": self.time_spent,
            "game_version": self.game_version,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> CompletedMission:
        return cls(
            world_id=raw["world_id"],
            status=raw.get("status", "completed"),
            score_awarded=int(raw.get("score_awarded", 0)),
            best_outcome=raw.get("best_outcome"),
            completed_at=raw.get("completed_at"),
            perfect=bool(raw.get("perfect", False)),
            time_spent=(
                float(raw["time_spent"]) if raw.get("time_spent") is not None else None
            ),
            game_version=raw.get("game_version", GAME_VERSION),
        )


@dataclass
class PlayerProgress:
    """Whole progress document of one player.

    Mutated only through progress.logic when a GameResult is applied,
    persisted wholesale.
    """

    user_id: str
    total_fl_score: int = 0
    onboarding_status: str = OnboardingStatus.NOT_STARTED.value
    completed_missions: list[CompletedMission] = field(default_factory=list)
    unlocked_achievements: list[str] = field(default_factory=list)
    unlocked_synergies: dict[str, bool] = field(default_factory=dict)
    compass_progress: dict[str, CompassStatus] = field(default_factory=dict)
    outcome_history: dict[str, list[str]] = field(default_factory=dict)
    easter_eggs_found: list[str] = field(default_factory=list)
    session_count: int = 0
    analytics_opt_in: bool = False
    game_version: str = GAME_VERSION
    created_at: str = field(default_factory=utc_now_iso)
    last_updated: str = field(default_factory=utc_now_iso)

    # ── queries ──

    def mission(self, world_id: str) -> Optional[CompletedMission]:
        for m in self.completed_missions:
            if m.world_id == world_id:
                return m
        return None

    @property
    def completed_count(self) -> int:
        return sum(1 for m in self.completed_missions if m.status == "completed")

    @property
    def unlocked_synergy_count(self) -> int:
        return sum(1 for v in self.unlocked_synergies.values() if v)

    def compass_percentage(self) -> float:
        """Share of compass nodes unlocked or mastered, 0..100. Empty map is 0."""
        if not self.compass_progress:
            return 0.0
        opened = sum(
            1 for s in self.compass_progress.values() if s != CompassStatus.LOCKED
        )
        return opened * 100.0 / len(self.compass_progress)

    def has_achievement(self, achievement_id: str) -> bool:
        return achievement_id in self.unlocked_achievements

    # ── serialization ──

    def to_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "total_fl_score": self.total_fl_score,
            "onboarding_status": self.onboarding_status,
            "completed_worlds": [m.to_dict() for m in self.completed_missions],
            "unlocked_achievements": list(self.unlocked_achievements),
            "unlocked_synergies": dict(self.unlocked_synergies),
            "compass_progress": {k: v.value for k, v in self.compass_progress.items()},
            "outcome_history": {k: list(v) for k, v in self.outcome_history.items()},
            "easter_eggs_found": list(self.easter_eggs_found),
            "session_count": self.session_count,
            "analytics_opt_in": self.analytics_opt_in,
            "game_version": self.game_version,
            "created_at": self.created_at,
            "last_updated": self.last_updated,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> PlayerProgress:
        """Stored document -> PlayerProgress. Unknown compass statuses become locked."""
        compass: dict[str, CompassStatus] = {}
        for node_id, status in (raw.get("compass_progress") or {}).items():
            try:
                compass[node_id] = CompassStatus(status)
            except ValueError:
                compass[node_id] = CompassStatus.LOCKED

        missions = raw.get("completed_worlds")
        if missions is None:
            missions = raw.get("completed_missions") or []

        unlocked: list[str] = []
        for achievement_id in raw.get("unlocked_achievements") or []:
            if achievement_id not in unlocked:
                unlocked.append(achievement_id)

        now = utc_now_iso()
        return cls(
            user_id=raw["user_id"],
            total_fl_score=int(raw.get("total_fl_score", 0)),
            onboarding_status=raw.get(
                "onboarding_status", OnboardingStatus.NOT_STARTED.value
            ),
            completed_missions=[CompletedMission.from_dict(m) for m in missions],
            unlocked_achievements=unlocked,
            unlocked_synergies={
                k: bool(v) for k, v in (raw.get("unlocked_synergies") or {}).items()
            },
            compass_progress=compass,
            outcome_history={
                k: list(v) for k, v in (raw.get("outcome_history") or {}).items()
            },
            easter_eggs_found=list(raw.get("easter_eggs_found") or []),
            session_count=int(raw.get("session_count", 0)),
            analytics_opt_in=bool(raw.get("analytics_opt_in", False)),
            game_version=raw.get("game_version", GAME_VERSION),
            created_at=raw.get("created_at") or now,
            last_updated=raw.get("last_updated") or now,
        )


# GameResult fields holding nested numeric maps
_NESTED_FIELDS = (
    "final_competence",
    "final_metrics",
    "relationship_scores",
    "companies_created",
)


@dataclass
class GameResult:
    """Outcome snapshot of one finished mission. Consumed once."""

    world_id: str
    success: bool
    score_awarded: int = 0
    outcome: Optional[str] = None
    metrics: dict[str, float] = field(default_factory=dict)
    final_competence: dict[str, float] = field(default_factory=dict)
    final_metrics: dict[str, float] = field(default_factory=dict)
    relationship_scores: dict[str, float] = field(default_factory=dict)
    companies_created: dict[str, int] = field(default_factory=dict)
    flags: dict[str, bool] = field(default_factory=dict)
    details: dict[str, Any] = field(default_factory=dict)

    def metric_value(self, path: str) -> Optional[float]:
        """Numeric lookup. "final_competence.base" reads a nested map."""
        head, _, rest = path.partition(".")
        if rest:
            if head not in _NESTED_FIELDS:
                return None
            return getattr(self, head).get(rest)
        return self.metrics.get(path)

    def flag(self, name: str) -> bool:
        return bool(self.flags.get(name, False))

    @property
    def is_perfect(self) -> bool:
        return self.flag("perfect_score")

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.details)
        data.update(self.metrics)
        data.update(
            {
                "world_id": self.world_id,
                "success": self.success,
                "score_awarded": self.score_awarded,
                "outcome": self.outcome,
                "flags": dict(self.flags),
            }
        )
        for name in _NESTED_FIELDS:
            data[name] = dict(getattr(self, name))
        return data

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> GameResult:
        """Flat mini-game payload -> GameResult.

        Top-level numbers go to metrics, everything unrecognized to details.
        """
        known = {"world_id", "success", "score_awarded", "outcome", "flags", "metrics"}
        known.update(_NESTED_FIELDS)

        metrics: dict[str, float] = dict(raw.get("metrics") or {})
        details: dict[str, Any] = {}
        for key, value in raw.items():
            if key in known:
                continue
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                metrics[key] = value
            else:
                details[key] = value

        return cls(
            world_id=raw["world_id"],
            success=bool(raw.get("success", False)),
            score_awarded=int(raw.get("score_awarded", 0)),
            outcome=raw.get("outcome"),
            metrics=metrics,
            final_competence=dict(raw.get("final_competence") or {}),
            final_metrics=dict(raw.get("final_metrics") or {}),
            relationship_scores=dict(raw.get("relationship_scores") or {}),
            companies_created=dict(raw.get("companies_created") or {}),
            flags={k: bool(v) for k, v in (raw.get("flags") or {}).items()},
            details=details,
        )
