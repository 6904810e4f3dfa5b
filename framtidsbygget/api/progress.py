"""Progress and achievement API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request

from framtidsbygget.api.schemas import (
    AchievementInfo,
    GameResultRequest,
    ProgressInfo,
    ProgressResponse,
    SubmissionResponse,
)
from framtidsbygget.core.achievement.display import public_view
from framtidsbygget.core.achievement.registry import AchievementRegistry
from framtidsbygget.core.logging import get_logger
from framtidsbygget.core.progress.logic import UnknownWorldError
from framtidsbygget.core.progress.models import GameResult
from framtidsbygget.db.store import ProgressStoreError
from framtidsbygget.services.progress_service import ProgressService, UnknownPlayerError

logger = get_logger(__name__)

router = APIRouter(tags=["progress"])


def get_progress_service(request: Request) -> ProgressService:
    """ProgressService instance (dependency injection)"""
    service: ProgressService = request.app.state.progress_service
    return service


def get_registry(request: Request) -> AchievementRegistry:
    """AchievementRegistry instance (dependency injection)"""
    registry: AchievementRegistry = request.app.state.achievement_registry
    return registry


@router.post("/progress/{user_id}", response_model=ProgressResponse)
def create_or_load_progress(
    user_id: str,
    service: ProgressService = Depends(get_progress_service),
) -> ProgressResponse:
    """Start a session: create progress for new users, load it otherwise."""
    try:
        progress, saved = service.create_or_load(user_id)
    except ProgressStoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return ProgressResponse(
        progress=ProgressInfo.model_validate(progress.to_dict()), saved=saved
    )


@router.get("/progress/{user_id}", response_model=ProgressResponse)
def get_progress(
    user_id: str,
    service: ProgressService = Depends(get_progress_service),
) -> ProgressResponse:
    try:
        progress = service.get_progress(user_id)
    except ProgressStoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    if progress is None:
        raise HTTPException(status_code=404, detail=f"Player not found: {user_id}")
    return ProgressResponse(progress=ProgressInfo.model_validate(progress.to_dict()))


@router.post("/progress/{user_id}/results", response_model=SubmissionResponse)
def submit_result(
    user_id: str,
    request: GameResultRequest,
    service: ProgressService = Depends(get_progress_service),
) -> SubmissionResponse:
    """Apply one GameResult and report newly unlocked achievements."""
    result = GameResult.from_dict(request.model_dump())
    try:
        report = service.submit_game_result(user_id, result)
    except UnknownPlayerError:
        raise HTTPException(status_code=404, detail=f"Player not found: {user_id}")
    except UnknownWorldError:
        raise HTTPException(status_code=422, detail=f"Unknown world: {result.world_id}")
    except ProgressStoreError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return SubmissionResponse(
        unlocked_achievements=[
            AchievementInfo.model_validate(public_view(a, report.progress))
            for a in report.unlocked
        ],
        new_synergies=report.new_synergies,
        total_fl_score=report.total_fl_score,
        saved=report.saved,
        progress=ProgressInfo.model_validate(report.progress.to_dict()),
    )


@router.get("/achievements", response_model=list[AchievementInfo])
def list_achievements(
    registry: AchievementRegistry = Depends(get_registry),
) -> list[AchievementInfo]:
    """All achievements; hidden ones masked."""
    return [AchievementInfo.model_validate(public_view(a)) for a in registry.get_all()]


@router.get("/achievements/{user_id}/progress", response_model=list[AchievementInfo])
def achievement_progress(
    user_id: str,
    service: ProgressService = Depends(get_progress_service),
) -> list[AchievementInfo]:
    try:
        views = service.achievement_overview(user_id)
    except UnknownPlayerError:
        raise HTTPException(status_code=404, detail=f"Player not found: {user_id}")
    except ProgressStoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return [AchievementInfo.model_validate(v) for v in views]
