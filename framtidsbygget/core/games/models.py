"""Mini-game content models"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class WorldId(str, Enum):
    PUZZLE = "pussel-spel-datasystem"
    WELFARE = "valfards-dilemma"
    COMPETENCE = "kompetensresan"
    CONNECTIVITY = "konnektivitetsvakten"
    ECOSYSTEM = "ekosystembyggaren"


# content table key -> world id
GAME_KEYS: dict[str, WorldId] = {
    "puzzle_game": WorldId.PUZZLE,
    "welfare_game": WorldId.WELFARE,
    "competence_game": WorldId.COMPETENCE,
    "connectivity_game": WorldId.CONNECTIVITY,
    "ecosystem_game": WorldId.ECOSYSTEM,
}


@dataclass(frozen=True)
class WorldMetadata:
    id: str
    title: str
    description: str = ""
    estimated_time: str = ""
    difficulty: str = ""


@dataclass(frozen=True)
class CompassNode:
    id: str
    title: str
    world_id: Optional[str] = None  # None = root / cross-cutting


@dataclass(frozen=True)
class SynergyRule:
    """Unlocked when `metric` of a result from `world_id` reaches `threshold`."""

    id: str
    name: str
    world_id: str
    metric: str  # GameResult.metric_value path
    threshold: float


@dataclass(frozen=True)
class Card:
    """Action card (competence) or policy card (ecosystem)."""

    id: str
    name: str
    description: str
    cost: float
    duration: int
    effects: Mapping[str, float]
    category: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Card:
        return cls(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            cost=float(raw.get("cost", 0)),
            duration=int(raw.get("duration", 0)),
            effects=dict(raw.get("effects") or {}),
            category=raw.get("category", ""),
        )


@dataclass(frozen=True)
class WelfareOutcome:
    id: str  # "consensus" | "compromise" | "partial" | "failure"
    name: str
    description: str
    fl_score: int
    message: str = ""
