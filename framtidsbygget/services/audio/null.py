"""Null audio backend for the server and tests."""

from dataclasses import dataclass
from typing import Any, Optional

from framtidsbygget.services.audio.base import AudioBackend, AudioBackendError


@dataclass(frozen=True)
class PlayCall:
    file: str
    volume: float
    loop: bool
    delay_ms: int


class NullAudioBackend(AudioBackend):
    """Produces no sound; records every load and play.

    Files listed in fail_files raise AudioBackendError on load.
    """

    def __init__(self, fail_files: Optional[set[str]] = None) -> None:
        self.loaded: list[str] = []
        self.played: list[PlayCall] = []
        self._fail_files = set(fail_files or ())

    @property
    def name(self) -> str:
        """Return the backend name."""
        return "null"

    def load(self, file: str) -> Any:
        if file in self._fail_files:
            raise AudioBackendError(f"cannot decode {file}")
        self.loaded.append(file)
        return file

    def play(self, buffer: Any, volume: float, loop: bool, delay_ms: int) -> Any:
        call = PlayCall(file=str(buffer), volume=volume, loop=loop, delay_ms=delay_ms)
        self.played.append(call)
        return len(self.played)
