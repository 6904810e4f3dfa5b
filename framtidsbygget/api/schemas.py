"""API request/response schemas."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# === Request Schemas ===


class GameResultRequest(BaseModel):
    """Result of one finished mission.

    Extra top-level numbers (security_score, final_index, ...) are accepted
    and treated as metrics.
    """

    model_config = ConfigDict(extra="allow")

    world_id: str = Field(..., min_length=1, description="World id, e.g. valfards-dilemma")
    success: bool
    score_awarded: int = Field(0, ge=0)
    outcome: Optional[str] = None
    metrics: dict[str, float] = Field(default_factory=dict)
    final_competence: dict[str, float] = Field(default_factory=dict)
    final_metrics: dict[str, float] = Field(default_factory=dict)
    relationship_scores: dict[str, float] = Field(default_factory=dict)
    companies_created: dict[str, int] = Field(default_factory=dict)
    flags: dict[str, bool] = Field(default_factory=dict)


# === Response Schemas ===


class CompletedMissionInfo(BaseModel):
    world_id: str
    status: str
    score_awarded: int
    best_outcome: Optional[str] = None
    completed_at: Optional[str] = None
    perfect: bool = False
    time_spent: Optional[float] = None
    game_version: str


class ProgressInfo(BaseModel):
    """PlayerProgress document"""

    user_id: str
    total_fl_score: int
    onboarding_status: str
    completed_worlds: list[CompletedMissionInfo] = []
    unlocked_achievements: list[str] = []
    unlocked_synergies: dict[str, bool] = {}
    compass_progress: dict[str, str] = {}
    outcome_history: dict[str, list[str]] = {}
    easter_eggs_found: list[str] = []
    session_count: int
    analytics_opt_in: bool
    game_version: str
    created_at: str
    last_updated: str


class ProgressResponse(BaseModel):
    progress: ProgressInfo
    saved: bool = True


class AchievementInfo(BaseModel):
    id: str
    name: str
    description: str
    category: str
    icon: str
    rarity: str
    rarity_name: str
    rarity_color: str
    fl_score_reward: int
    hidden: bool
    flavor_text: str = ""
    unlocked: Optional[bool] = None
    progress_text: Optional[str] = None


class SubmissionResponse(BaseModel):
    """Outcome of POST /progress/{user_id}/results"""

    unlocked_achievements: list[AchievementInfo] = []
    new_synergies: list[str] = []
    total_fl_score: int
    saved: bool
    progress: ProgressInfo


class ChoiceInfo(BaseModel):
    text: str
    effects: dict[str, float] = {}
    character_reactions: dict[str, str] = {}
    next_node_id: str


class DialogueNodeResponse(BaseModel):
    id: str
    character: str
    text: str
    narration: Optional[str] = None
    emotion: Optional[str] = None
    is_ending: bool = False
    outcome: Optional[str] = None
    outcome_description: Optional[str] = None
    choices: list[ChoiceInfo] = []


class TranslationResponse(BaseModel):
    key: str
    language: str
    text: str
    found: bool


class SequenceStepInfo(BaseModel):
    sound: str
    resolved_id: Optional[str] = None
    delay: int
    description: Optional[str] = None


class SequenceResponse(BaseModel):
    name: str
    steps: list[SequenceStepInfo]


class ErrorResponse(BaseModel):
    """Error response"""

    success: bool = False
    error: str
    detail: Optional[Any] = None
