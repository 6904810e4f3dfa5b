"""Abstract base class for audio platform backends."""

from abc import ABC, abstractmethod
from typing import Any


class AudioBackendError(Exception):
    """Raised by backends when a platform call fails."""


class AudioBackend(ABC):
    """Platform audio subsystem.

    Decoding and mixing happen behind this interface; AudioService only
    hands over resolved files, volumes and timing.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the backend name."""
        ...

    @abstractmethod
    def load(self, file: str) -> Any:
        """Load and decode a file.

        Returns:
            An opaque buffer passed back to play().
        """
        ...

    @abstractmethod
    def play(self, buffer: Any, volume: float, loop: bool, delay_ms: int) -> Any:
        """Start playback.

        Args:
            buffer: Value returned by load().
            volume: Final volume in [0, 1].
            loop: Repeat until stopped.
            delay_ms: Start offset in milliseconds.

        Returns:
            An opaque playback handle.
        """
        ...
