"""Player progress Core - pure Python, DB independent"""

from .models import (
    TOTAL_MISSIONS,
    TOTAL_SYNERGIES,
    CompassStatus,
    CompletedMission,
    GameResult,
    OnboardingStatus,
    PlayerProgress,
)

__all__ = [
    "TOTAL_MISSIONS",
    "TOTAL_SYNERGIES",
    "CompassStatus",
    "CompletedMission",
    "GameResult",
    "OnboardingStatus",
    "PlayerProgress",
]
