"""SoundManifest - flattened, read-only view over audio.json"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from framtidsbygget.core.content import AUDIO_FILE, load_json

from .models import AudioCategory, SequenceStep, SoundAsset

logger = logging.getLogger(__name__)

GAMES_PREFIX = "games."
DEFAULT_BATCH_SIZE = 5
MASTER = "master"


class SoundManifest:
    """
    Sounds keyed by dotted id. Short ids used by sequences
    ("welfare.consensus_reached") resolve under "games.".
    """

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._sounds: dict[str, SoundAsset] = {}
        self._categories: dict[str, AudioCategory] = {}
        self._presets: dict[str, dict[str, float]] = {}
        self._sequences: dict[str, tuple[SequenceStep, ...]] = {}
        self._descriptions: dict[str, str] = dict(
            (data.get("accessibility") or {}).get("descriptions") or {}
        )

        for cat_id, raw in (data.get("categories") or {}).items():
            self._categories[cat_id] = AudioCategory(
                id=cat_id,
                name=raw.get("name", cat_id),
                default_volume=float(raw.get("default_volume", 1.0)),
                description=raw.get("description", ""),
            )

        self._flatten(data.get("sounds") or {}, "")

        for name, values in (data.get("presets") or {}).items():
            self._presets[name] = {k: float(v) for k, v in values.items()}

        for name, steps in (data.get("sequences") or {}).items():
            self._sequences[name] = tuple(
                SequenceStep(sound=s["sound"], delay=int(s.get("delay", 0)))
                for s in steps
            )

        preload = ((data.get("engine") or {}).get("preload")) or {}
        self.batch_size = int(preload.get("batch_size", DEFAULT_BATCH_SIZE))

        logger.info(
            "Loaded sound manifest: %d sounds, %d sequences",
            len(self._sounds),
            len(self._sequences),
        )

    @classmethod
    def from_content(cls, content_dir: Optional[str | Path] = None) -> SoundManifest:
        return cls(load_json(AUDIO_FILE, content_dir))

    def _flatten(self, table: Mapping[str, Any], prefix: str) -> None:
        for key, value in table.items():
            if not isinstance(value, Mapping):
                continue
            sound_id = f"{prefix}{key}"
            if "file" in value:
                try:
                    asset = SoundAsset.from_dict(sound_id, value)
                except (KeyError, ValueError) as e:
                    logger.warning("Failed to load sound %s: %s", sound_id, e)
                    continue
                if asset.category not in self._categories:
                    logger.warning(
                        "Sound %s uses unknown category %s", sound_id, asset.category
                    )
                self._sounds[sound_id] = asset
            else:
                self._flatten(value, f"{sound_id}.")

    # ── sounds ──

    def resolve(self, sound_id: str) -> Optional[str]:
        """Full id for sound_id, or None when unknown."""
        if sound_id in self._sounds:
            return sound_id
        prefixed = f"{GAMES_PREFIX}{sound_id}"
        if prefixed in self._sounds:
            return prefixed
        return None

    def get(self, sound_id: str) -> Optional[SoundAsset]:
        full = self.resolve(sound_id)
        return self._sounds[full] if full is not None else None

    def sounds(self) -> list[SoundAsset]:
        return list(self._sounds.values())

    def preload_assets(self) -> list[SoundAsset]:
        return [s for s in self._sounds.values() if s.preload]

    # ── categories & presets ──

    def categories(self) -> list[AudioCategory]:
        return list(self._categories.values())

    def default_volumes(self) -> dict[str, float]:
        """category -> default volume, plus master at 1.0."""
        volumes = {c.id: c.default_volume for c in self._categories.values()}
        volumes[MASTER] = 1.0
        return volumes

    def preset(self, name: str) -> Optional[dict[str, float]]:
        preset = self._presets.get(name)
        return dict(preset) if preset is not None else None

    def preset_names(self) -> list[str]:
        return list(self._presets)

    # ── sequences & accessibility ──

    def sequence(self, name: str) -> Optional[tuple[SequenceStep, ...]]:
        return self._sequences.get(name)

    def sequence_names(self) -> list[str]:
        return list(self._sequences)

    def description(self, sound_id: str) -> Optional[str]:
        """Accessibility text, looked up by short or full id."""
        if sound_id in self._descriptions:
            return self._descriptions[sound_id]
        full = self.resolve(sound_id)
        if full is None:
            return None
        if full in self._descriptions:
            return self._descriptions[full]
        if full.startswith(GAMES_PREFIX):
            return self._descriptions.get(full[len(GAMES_PREFIX):])
        return None
