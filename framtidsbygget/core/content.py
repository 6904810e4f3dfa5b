"""Content file loading (JSON tables shipped in framtidsbygget/data)"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

ACHIEVEMENTS_FILE = "achievements.json"
AUDIO_FILE = "audio.json"
GAME_CONTENT_FILE = "game_content.json"
LOCALIZATION_FILE = "localization.json"
MOCK_DATA_FILE = "mock_data.json"


class ContentError(Exception):
    """Content file missing or malformed."""


def resolve_content_dir(content_dir: Optional[str | Path] = None) -> Path:
    """CONTENT_DIR override, else the packaged data directory."""
    if content_dir:
        return Path(content_dir)
    return DATA_DIR


def load_json(name: str, content_dir: Optional[str | Path] = None) -> Any:
    """Read one content table. Raises ContentError when unreadable."""
    path = resolve_content_dir(content_dir) / name
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ContentError(f"Content file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e
    logger.debug("Loaded content table %s", path)
    return data


def freeze(value: Any) -> Any:
    """Recursively wrap dicts in read-only proxies and lists in tuples."""
    if isinstance(value, dict):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(freeze(v) for v in value)
    return value

