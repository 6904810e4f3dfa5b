"""Shared test fixtures."""

import random

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from framtidsbygget.core.achievement.registry import AchievementRegistry
from framtidsbygget.core.audio.manifest import SoundManifest
from framtidsbygget.core.event_bus import EventBus
from framtidsbygget.core.games.catalog import GameCatalog
from framtidsbygget.core.localization.catalog import LocalizationCatalog
from framtidsbygget.db.database import get_db
from framtidsbygget.db.models import Base
from framtidsbygget.main import app, init_app_state
from framtidsbygget.services.mock_fixtures import MockFixtures

TEST_ENGINE = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,  # one shared in-memory database across threads
)
TestSession = sessionmaker(bind=TEST_ENGINE, autocommit=False, autoflush=False)


def _override_get_db():
    db = TestSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = _override_get_db


# ── content (loaded once per run) ──


@pytest.fixture(scope="session")
def registry() -> AchievementRegistry:
    return AchievementRegistry.from_content()


@pytest.fixture(scope="session")
def catalog() -> GameCatalog:
    return GameCatalog.from_content()


@pytest.fixture(scope="session")
def manifest() -> SoundManifest:
    return SoundManifest.from_content()


@pytest.fixture(scope="session")
def localization() -> LocalizationCatalog:
    return LocalizationCatalog.from_content()


@pytest.fixture()
def fixtures() -> MockFixtures:
    """Mock fixtures with a seeded RNG."""
    return MockFixtures.from_content(rng=random.Random(7))


# ── database / app ──


@pytest.fixture()
def db_session() -> Session:
    """Fresh schema per test."""
    Base.metadata.drop_all(bind=TEST_ENGINE)
    Base.metadata.create_all(bind=TEST_ENGINE)
    session = TestSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def client(db_session: Session) -> TestClient:
    """FastAPI TestClient wired to an in-memory SQLite database."""
    init_app_state(app, db_session)
    return TestClient(app)
