"""Audio manifest models"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class SoundAsset:
    id: str  # dotted path, "ui.click", "games.welfare.choice_select"
    file: str
    volume: float = 1.0
    category: str = "ui"
    preload: bool = False
    loop: bool = False
    fade_in: int = 0  # ms
    fade_out: int = 0  # ms
    dynamic_intensity: bool = False

    @classmethod
    def from_dict(cls, sound_id: str, raw: Mapping[str, Any]) -> SoundAsset:
        return cls(
            id=sound_id,
            file=raw["file"],
            volume=float(raw.get("volume", 1.0)),
            category=raw.get("category", "ui"),
            preload=bool(raw.get("preload", False)),
            loop=bool(raw.get("loop", False)),
            fade_in=int(raw.get("fade_in", 0)),
            fade_out=int(raw.get("fade_out", 0)),
            dynamic_intensity=bool(raw.get("dynamic_intensity", False)),
        )


@dataclass(frozen=True)
class SequenceStep:
    sound: str  # id as written in the manifest, may be short
    delay: int = 0  # ms after the sequence starts


@dataclass(frozen=True)
class AudioCategory:
    id: str
    name: str
    default_volume: float
    description: str = ""


@dataclass(frozen=True)
class PlaybackHandle:
    """What AudioService.play returns."""

    sound_id: str
    volume: float
    loop: bool
    delay_ms: int
    backend_handle: Optional[Any] = None
