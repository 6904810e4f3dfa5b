"""AudioService - sequences playback calls to an injected backend

Explicitly constructed (one per app / test), no module-level instance.
"""

from typing import Any, Dict, List, Optional

from framtidsbygget.core.audio.manifest import MASTER, SoundManifest
from framtidsbygget.core.audio.models import PlaybackHandle, SoundAsset
from framtidsbygget.core.event_bus import EventBus, GameEvent
from framtidsbygget.core.event_types import EventTypes
from framtidsbygget.core.logging import get_logger
from framtidsbygget.services.audio.base import AudioBackend, AudioBackendError

logger = get_logger(__name__)

ACHIEVEMENT_SEQUENCE = "achievement_unlock"
MISSION_SEQUENCE = "mission_complete"


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


class AudioService:
    """Preload, volume per category, presets, mute, sequences."""

    def __init__(
        self,
        backend: AudioBackend,
        manifest: SoundManifest,
        event_bus: Optional[EventBus] = None,
        batch_size: Optional[int] = None,
    ) -> None:
        self._backend = backend
        self._manifest = manifest
        self._batch_size = max(1, batch_size or manifest.batch_size)
        self._volumes: Dict[str, float] = manifest.default_volumes()
        self._buffers: Dict[str, Any] = {}
        self._muted = False
        self._initialized = False
        if event_bus is not None:
            self._register_event_handlers(event_bus)

    # ── event handlers ───────────────────────────────────────

    def _register_event_handlers(self, bus: EventBus) -> None:
        bus.subscribe(EventTypes.ACHIEVEMENT_UNLOCKED, self._on_achievement_unlocked)
        bus.subscribe(EventTypes.MISSION_COMPLETED, self._on_mission_completed)

    def _on_achievement_unlocked(self, event: GameEvent) -> None:
        self.play_sequence(ACHIEVEMENT_SEQUENCE)

    def _on_mission_completed(self, event: GameEvent) -> None:
        self.play_sequence(MISSION_SEQUENCE)

    # ── loading ──────────────────────────────────────────────

    @property
    def initialized(self) -> bool:
        return self._initialized

    def init(self) -> int:
        """Preload every preload-flagged sound in batches. Returns the loaded count."""
        if self._initialized:
            return len(self._buffers)
        assets = self._manifest.preload_assets()
        loaded = 0
        for start in range(0, len(assets), self._batch_size):
            batch = assets[start : start + self._batch_size]
            for asset in batch:
                if self._load(asset) is not None:
                    loaded += 1
            logger.debug(
                f"Audio preload batch {start // self._batch_size + 1}: {len(batch)} sounds"
            )
        self._initialized = True
        logger.info(f"Audio initialized: {loaded}/{len(assets)} sounds preloaded")
        return loaded

    def _load(self, asset: SoundAsset) -> Optional[Any]:
        if asset.id in self._buffers:
            return self._buffers[asset.id]
        try:
            buffer = self._backend.load(asset.file)
        except AudioBackendError as e:
            logger.warning(f"Failed to load sound {asset.id}: {e}")
            return None
        self._buffers[asset.id] = buffer
        return buffer

    def is_loaded(self, sound_id: str) -> bool:
        full = self._manifest.resolve(sound_id)
        return full is not None and full in self._buffers

    # ── playback ─────────────────────────────────────────────

    def effective_volume(self, asset: SoundAsset, volume: float = 1.0) -> float:
        """asset volume × category volume × master × option, clamped to [0, 1]."""
        category = self._volumes.get(asset.category, 1.0)
        master = self._volumes.get(MASTER, 1.0)
        return _clamp01(asset.volume * category * master * volume)

    def play(
        self,
        sound_id: str,
        volume: float = 1.0,
        loop: Optional[bool] = None,
        delay_ms: int = 0,
    ) -> Optional[PlaybackHandle]:
        """Play a sound. None when muted, unknown or the backend fails."""
        if self._muted:
            return None
        asset = self._manifest.get(sound_id)
        if asset is None:
            logger.warning(f"Sound not found: {sound_id}")
            return None
        if not self._initialized:
            self.init()

        buffer = self._load(asset)
        if buffer is None:
            return None

        final_volume = self.effective_volume(asset, volume)
        should_loop = asset.loop if loop is None else loop
        try:
            backend_handle = self._backend.play(buffer, final_volume, should_loop, delay_ms)
        except AudioBackendError as e:
            logger.warning(f"Failed to play sound {asset.id}: {e}")
            return None
        return PlaybackHandle(
            sound_id=asset.id,
            volume=final_volume,
            loop=should_loop,
            delay_ms=delay_ms,
            backend_handle=backend_handle,
        )

    def play_sequence(self, name: str) -> List[PlaybackHandle]:
        """Play each step of a named sequence at its delay."""
        steps = self._manifest.sequence(name)
        if steps is None:
            logger.warning(f"Sound sequence not found: {name}")
            return []
        handles: List[PlaybackHandle] = []
        for step in steps:
            handle = self.play(step.sound, delay_ms=step.delay)
            if handle is not None:
                handles.append(handle)
        return handles

    # ── volume ───────────────────────────────────────────────

    def volume(self, category: str) -> Optional[float]:
        return self._volumes.get(category)

    def set_volume(self, category: str, value: float) -> Optional[float]:
        """Set a category (or master) volume, clamped to [0, 1]."""
        if category not in self._volumes:
            logger.warning(f"Unknown audio category: {category}")
            return None
        self._volumes[category] = _clamp01(value)
        return self._volumes[category]

    def apply_preset(self, name: str) -> bool:
        preset = self._manifest.preset(name)
        if preset is None:
            logger.warning(f"Unknown volume preset: {name}")
            return False
        for category, value in preset.items():
            self._volumes[category] = _clamp01(value)
        logger.info(f"Volume preset applied: {name}")
        return True

    def mute(self) -> None:
        self._muted = True

    def unmute(self) -> None:
        self._muted = False

    @property
    def muted(self) -> bool:
        return self._muted

    def describe(self, sound_id: str) -> Optional[str]:
        """Accessibility description of a sound."""
        return self._manifest.description(sound_id)
