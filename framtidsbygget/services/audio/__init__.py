"""Audio playback module."""

from framtidsbygget.services.audio.base import AudioBackend, AudioBackendError
from framtidsbygget.services.audio.factory import get_audio_backend
from framtidsbygget.services.audio.null import NullAudioBackend, PlayCall
from framtidsbygget.services.audio.service import AudioService

__all__ = [
    "AudioBackend",
    "AudioBackendError",
    "AudioService",
    "NullAudioBackend",
    "PlayCall",
    "get_audio_backend",
]
