"""Engine and sessions for the progress document store."""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from framtidsbygget.config import settings


def _connect_args(url: str) -> dict[str, object]:
    # sqlite connections are shared between the lifespan and request threads
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    connect_args=_connect_args(settings.DATABASE_URL),
    echo=settings.DEBUG,
)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db() -> Generator[Session, None, None]:
    """Request-scoped session, closed when the request ends (health check)."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
