"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from sqlalchemy.orm import Session

from framtidsbygget.api.content import router as content_router
from framtidsbygget.api.health import router as health_router
from framtidsbygget.api.pages import router as pages_router
from framtidsbygget.api.progress import router as progress_router
from framtidsbygget.config import settings
from framtidsbygget.core.achievement.registry import AchievementRegistry
from framtidsbygget.core.audio.manifest import SoundManifest
from framtidsbygget.core.dialogue.models import DialogueTree
from framtidsbygget.core.dialogue.validation import validate_tree
from framtidsbygget.core.event_bus import EventBus
from framtidsbygget.core.games.catalog import GameCatalog
from framtidsbygget.core.localization.catalog import LocalizationCatalog
from framtidsbygget.core.logging import get_logger, setup_logging
from framtidsbygget.db.database import SessionLocal, engine as db_engine
from framtidsbygget.db.models import Base
from framtidsbygget.services.audio import AudioService, get_audio_backend
from framtidsbygget.services.mock_fixtures import MockFixtures
from framtidsbygget.services.progress_service import ProgressService

setup_logging(settings.LOG_LEVEL, debug=settings.DEBUG)
logger = get_logger(__name__)


def init_app_state(app: FastAPI, db_session: Session) -> None:
    """Load content once and wire services into app.state."""
    content_dir = settings.CONTENT_DIR

    registry = AchievementRegistry.from_content(content_dir)
    catalog = GameCatalog.from_content(content_dir)
    localization = LocalizationCatalog.from_content(content_dir)
    manifest = SoundManifest.from_content(content_dir)

    tree = DialogueTree.from_dict(catalog.welfare_dialogue())
    issues = validate_tree(tree)
    if issues:
        logger.warning(f"Welfare dialogue tree has {len(issues)} issue(s)")

    event_bus = EventBus()
    progress_service = ProgressService(
        db=db_session,
        event_bus=event_bus,
        registry=registry,
        catalog=catalog,
    )
    audio_service = AudioService(
        get_audio_backend(),
        manifest,
        event_bus=event_bus,
        batch_size=settings.AUDIO_PRELOAD_BATCH_SIZE,
    )

    app.state.event_bus = event_bus
    app.state.achievement_registry = registry
    app.state.game_catalog = catalog
    app.state.localization_catalog = localization
    app.state.sound_manifest = manifest
    app.state.dialogue_tree = tree
    app.state.progress_service = progress_service
    app.state.audio_service = audio_service


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=db_engine)
    logger.info("Database tables created.")

    db_session = SessionLocal()
    logger.info("Loading content and services...")
    init_app_state(app, db_session)
    app.state.audio_service.init()
    logger.info("Services initialized.")

    if settings.SEED_MOCK_PLAYERS:
        fixtures = MockFixtures.from_content(settings.CONTENT_DIR)
        players = [fixtures.player(name) for name in fixtures.state_names()]
        app.state.progress_service.seed([p for p in players if p is not None])

    yield

    logger.info("Shutting down...")
    db_session.close()


app = FastAPI(title="Framtidsbygget", lifespan=lifespan)

app.include_router(health_router)
app.include_router(progress_router)
app.include_router(content_router)
app.include_router(pages_router)
