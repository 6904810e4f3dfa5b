"""Mission outcome tiers (welfare, competence, ecosystem)"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .models import WelfareOutcome

logger = logging.getLogger(__name__)

# strongest first
WELFARE_TIERS = ("perfect_consensus", "good_compromise", "partial_success")
WELFARE_FALLBACK = "failure"
COMPETENCE_TIERS = ("exceptional", "optimal", "minimum")
ECOSYSTEM_TIERS = ("perfect", "excellent", "good", "minimum")


def _welfare(raw: Mapping[str, Any]) -> WelfareOutcome:
    return WelfareOutcome(
        id=raw["id"],
        name=raw["name"],
        description=raw.get("description", ""),
        fl_score=int(raw.get("fl_score", 0)),
        message=raw.get("message", ""),
    )


def welfare_outcome(
    final_metrics: Mapping[str, float], outcomes: Mapping[str, Any]
) -> WelfareOutcome:
    """First tier whose every requirement is met, else failure.

    consensus >= 75 on all, compromise >= 60, partial >= 40.
    """
    for key in WELFARE_TIERS:
        tier = outcomes.get(key)
        if tier is None:
            continue
        requirements = tier.get("requirements") or {}
        if all(final_metrics.get(name, 0) >= floor for name, floor in requirements.items()):
            return _welfare(tier)
    return _welfare(outcomes[WELFARE_FALLBACK])


def competence_tier(
    final_competence: Mapping[str, float], win_conditions: Mapping[str, Any]
) -> Optional[str]:
    """minimum | optimal | exceptional, or None below minimum."""
    for tier in COMPETENCE_TIERS:
        floors = win_conditions.get(tier)
        if floors is None:
            continue
        if all(
            final_competence.get(name, 0) >= floor
            for name, floor in floors.items()
            if name != "description"
        ):
            return tier
    return None


def ecosystem_total(final_metrics: Mapping[str, float]) -> float:
    return sum(final_metrics.values())


def ecosystem_tier(
    final_metrics: Mapping[str, float],
    unicorns: int,
    win_conditions: Mapping[str, Any],
) -> Optional[str]:
    """minimum | good | excellent | perfect, or None below minimum.

    total_score is the sum of the national metrics; all_metrics is a
    per-metric floor.
    """
    total = ecosystem_total(final_metrics)
    for tier in ECOSYSTEM_TIERS:
        req = win_conditions.get(tier)
        if req is None:
            continue
        if total < req.get("total_score", 0):
            continue
        if unicorns < req.get("unicorns", 0):
            continue
        floor = req.get("all_metrics")
        if floor is not None and any(v < floor for v in final_metrics.values()):
            continue
        return tier
    logger.debug("Ecosystem result below minimum (total=%s)", total)
    return None
