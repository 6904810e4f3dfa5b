"""Mini-game content Core"""

from .models import (
    GAME_KEYS,
    Card,
    CompassNode,
    SynergyRule,
    WelfareOutcome,
    WorldId,
    WorldMetadata,
)
from .catalog import GameCatalog
from .outcomes import competence_tier, ecosystem_tier, ecosystem_total, welfare_outcome

__all__ = [
    "GAME_KEYS",
    "Card",
    "CompassNode",
    "SynergyRule",
    "WelfareOutcome",
    "WorldId",
    "WorldMetadata",
    "GameCatalog",
    "competence_tier",
    "ecosystem_tier",
    "ecosystem_total",
    "welfare_outcome",
]
