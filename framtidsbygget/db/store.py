"""ProgressStore - document persistence of PlayerProgress over SQLAlchemy"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from framtidsbygget.core.logging import get_logger
from framtidsbygget.db.models import PlayerProgressModel

logger = get_logger(__name__)


class ProgressStoreError(Exception):
    """Persistence failure. The caller's in-memory progress stays authoritative."""


class ProgressStore:
    def __init__(self, db: Session) -> None:
        self._db = db

    def load(self, user_id: str) -> Optional[dict[str, Any]]:
        try:
            row = self._db.get(PlayerProgressModel, user_id)
        except SQLAlchemyError as e:
            raise ProgressStoreError(f"load failed for {user_id}: {e}") from e
        if row is None:
            return None
        return dict(row.document)

    def save(self, user_id: str, document: dict[str, Any]) -> None:
        """Insert or replace the whole document."""
        try:
            row = self._db.get(PlayerProgressModel, user_id)
            now = datetime.now(timezone.utc).replace(tzinfo=None)
            if row is None:
                row = PlayerProgressModel(user_id=user_id, document=document, updated_at=now)
                self._db.add(row)
            else:
                row.document = document
                row.updated_at = now
            row.total_fl_score = int(document.get("total_fl_score", 0))
            row.game_version = document.get("game_version", row.game_version or "1.0.0")
            self._db.commit()
        except SQLAlchemyError as e:
            self._db.rollback()
            raise ProgressStoreError(f"save failed for {user_id}: {e}") from e
        logger.debug(f"Progress saved: {user_id}")

    def user_ids(self) -> list[str]:
        try:
            return [r[0] for r in self._db.query(PlayerProgressModel.user_id).all()]
        except SQLAlchemyError as e:
            raise ProgressStoreError(f"listing failed: {e}") from e
