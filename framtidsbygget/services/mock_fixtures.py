"""Mock fixtures for offline development and tests"""

from __future__ import annotations

import copy
import random
import time
from pathlib import Path
from typing import Any, Mapping, Optional

from framtidsbygget.core.content import MOCK_DATA_FILE, load_json
from framtidsbygget.core.logging import get_logger
from framtidsbygget.core.progress.models import (
    GAME_VERSION,
    GameResult,
    PlayerProgress,
    utc_now_iso,
)

logger = get_logger(__name__)


class MockFixtures:
    """Named player states, mock GameResults per mini-game, error records.

    Every accessor returns a copy; the loaded tables are never handed out.
    """

    def __init__(
        self, data: Mapping[str, Any], rng: Optional[random.Random] = None
    ) -> None:
        self._states: dict[str, dict[str, Any]] = dict(data.get("game_states") or {})
        self._results: dict[str, dict[str, dict[str, Any]]] = dict(
            data.get("game_results") or {}
        )
        self._errors: dict[str, dict[str, Any]] = dict(data.get("errors") or {})
        self._store_responses: dict[str, dict[str, Any]] = dict(
            data.get("store_responses") or {}
        )
        self._rng = rng or random.Random()

    @classmethod
    def from_content(
        cls,
        content_dir: Optional[str | Path] = None,
        rng: Optional[random.Random] = None,
    ) -> MockFixtures:
        return cls(load_json(MOCK_DATA_FILE, content_dir), rng=rng)

    # ── player states ──

    def state_names(self) -> list[str]:
        return list(self._states)

    def game_state(self, name: str) -> Optional[dict[str, Any]]:
        state = self._states.get(name)
        return copy.deepcopy(state) if state is not None else None

    def player(self, name: str) -> Optional[PlayerProgress]:
        state = self._states.get(name)
        return PlayerProgress.from_dict(copy.deepcopy(state)) if state is not None else None

    def random_game_state(self) -> dict[str, Any]:
        return copy.deepcopy(self._states[self._rng.choice(list(self._states))])

    # ── game results ──

    def game_ids(self) -> list[str]:
        return list(self._results)

    def game_result(self, game_id: str, name: str) -> Optional[GameResult]:
        raw = (self._results.get(game_id) or {}).get(name)
        return GameResult.from_dict(copy.deepcopy(raw)) if raw is not None else None

    def random_game_result(self, game_id: str) -> Optional[GameResult]:
        """None when game_id has no fixtures."""
        results = self._results.get(game_id)
        if not results:
            return None
        name = self._rng.choice(list(results))
        return GameResult.from_dict(copy.deepcopy(results[name]))

    # ── analytics & errors ──

    def generate_analytics_event(
        self, event_type: str, state: Optional[Mapping[str, Any]] = None
    ) -> dict[str, Any]:
        if state is None:
            state = self._states.get("progressing_player") or {}
        return {
            "event_type": event_type,
            "session_id": f"mock_session_{int(time.time() * 1000)}",
            "user_id": state.get("user_id"),
            "timestamp": utc_now_iso(),
            "game_version": GAME_VERSION,
            "event_data": {
                "total_fl_score": state.get("total_fl_score", 0),
                "completed_worlds": len(state.get("completed_worlds") or []),
                "session_count": state.get("session_count", 0),
                "screen_size": "desktop",
            },
        }

    def create_error(self, error_type: str = "network", retry: bool = True) -> dict[str, Any]:
        """Error record with retry flag and timestamp. Unknown types fall back to network."""
        template = self._errors.get(error_type)
        if template is None:
            logger.warning(f"Unknown mock error type: {error_type}")
            template = self._errors.get("network", {"code": error_type, "message": ""})
        error = dict(template)
        error["retry"] = retry
        error["timestamp"] = utc_now_iso()
        return error

    # ── store responses ──

    def store_response(self, name: str) -> Optional[dict[str, Any]]:
        """Canned document store outcome (load_found, save_failure, ...).

        Load responses carry the referenced player state as "document".
        """
        template = self._store_responses.get(name)
        if template is None:
            return None
        response = copy.deepcopy(dict(template))
        state_name = response.pop("state", None)
        if "exists" in response:
            response["document"] = self.game_state(state_name) if state_name else None
        return response
