"""Audio handles and buffer descriptions independent of the audio backend."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

AL_NONE = 0


@dataclass
class AudioHandle:
    """An opaque backend handle; ``AL_NONE`` marks an empty handle."""

    handle: int = AL_NONE

    def is_null(self) -> bool:
        return self.handle == AL_NONE

    def reset(self) -> None:
        """Forget the handle without releasing anything."""
        self.handle = AL_NONE


AudioBufferHandle = AudioHandle


@dataclass
class AudioBufferData:
    """Raw sample data and its format; ``-1`` marks an unknown property."""

    data: bytes | None = None
    size: int = 0
    sample_rate: int = -1
    bit_depth: int = -1
    channels: int = -1
    al_format: int = -1


class AudioSourceRelativeTo(Enum):
    """The space an audio source's position is given in."""

    LISTENER = auto()
    WORLD_SPACE = auto()