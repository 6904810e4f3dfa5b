"""Factory for creating audio backend instances."""

from typing import Optional

from framtidsbygget.config import settings
from framtidsbygget.core.logging import get_logger
from framtidsbygget.services.audio.base import AudioBackend
from framtidsbygget.services.audio.null import NullAudioBackend

logger = get_logger(__name__)


def get_audio_backend(backend_name: Optional[str] = None) -> AudioBackend:
    """Get an audio backend instance.

    Args:
        backend_name: Optional backend name. If not specified,
                      uses AUDIO_BACKEND from config.

    Returns:
        An AudioBackend instance.
    """
    name = backend_name or settings.AUDIO_BACKEND

    if name == "null":
        logger.debug("Using NullAudioBackend")
        return NullAudioBackend()

    # the server has no sound device; anything else falls back
    logger.warning("Unknown audio backend '%s', falling back to NullAudioBackend", name)
    return NullAudioBackend()
