"""Audio manifest Core (playback lives in services/audio)"""

from .models import AudioCategory, PlaybackHandle, SequenceStep, SoundAsset
from .manifest import MASTER, SoundManifest

__all__ = [
    "AudioCategory",
    "PlaybackHandle",
    "SequenceStep",
    "SoundAsset",
    "MASTER",
    "SoundManifest",
]
