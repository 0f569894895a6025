"""Dataclasses shared across audio helpers."""

from __future__ import annotations

from dataclasses import InitVar, dataclass

import numpy as np


@dataclass(frozen=True, slots=True, eq=False)
class SampleBuffer:
    """Decoded audio: one float32 row per channel, shared sample rate.

    The sample array is stored read-only so buffers can be handed to several
    consumers at once; every operation builds a new buffer instead. Pass
    ``copy=False`` to adopt a freshly allocated array nobody else holds.
    """

    channels: np.ndarray
    sample_rate: int
    copy: InitVar[bool] = True

    def __post_init__(self, copy: bool) -> None:
        if copy:
            data = np.array(self.channels, dtype=np.float32, ndmin=2, copy=True)
        else:
            data = np.atleast_2d(np.asarray(self.channels, dtype=np.float32))
        data.flags.writeable = False
        object.__setattr__(self, "channels", data)
        object.__setattr__(self, "sample_rate", int(self.sample_rate))

    @classmethod
    def from_frames(cls, frames: np.ndarray, sample_rate: int) -> "SampleBuffer":
        """Build from frame-major data, ``(length,)`` or ``(length, channels)``."""
        data = np.asarray(frames, dtype=np.float32)
        if data.ndim == 1:
            data = data[:, np.newaxis]
        return cls(data.T, sample_rate)

    @classmethod
    def silent(cls, number_of_channels: int, length: int, sample_rate: int) -> "SampleBuffer":
        return cls(np.zeros((number_of_channels, length), dtype=np.float32), sample_rate)

    @property
    def number_of_channels(self) -> int:
        return int(self.channels.shape[0])

    @property
    def length(self) -> int:
        return int(self.channels.shape[1])

    @property
    def duration(self) -> float:
        return self.length / self.sample_rate

    def channel(self, index: int) -> np.ndarray:
        return self.channels[index]

    def to_frames(self) -> np.ndarray:
        return np.ascontiguousarray(self.channels.T)


@dataclass(frozen=True, slots=True)
class SilenceRegion:
    """Half-open silent span ``[start, end)`` in seconds."""

    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class KeepRegion:
    """Half-open span ``[start, end)`` in sample indices retained after removal."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(slots=True)
class ProcessingStats:
    """Before/after summary reported alongside a cleaned buffer (seconds)."""

    old_duration: float
    new_duration: float
    time_saved: float
    processing_time: float


__all__ = ["KeepRegion", "ProcessingStats", "SampleBuffer", "SilenceRegion"]
