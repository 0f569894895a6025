"""Canonical 16-bit PCM WAV serialization."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Iterable

import numpy as np

from .gap_remover import remove_silence
from .types import SampleBuffer, SilenceRegion

WAV_CONTENT_TYPE = "audio/wav"
HEADER_SIZE = 44
BYTES_PER_SAMPLE = 2

# RIFF/WAVE header with a single 16-byte PCM fmt chunk, little endian.
_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")


def wav_header(number_of_channels: int, sample_rate: int, length: int) -> bytes:
    data_size = length * number_of_channels * BYTES_PER_SAMPLE
    return _HEADER.pack(
        b"RIFF",
        HEADER_SIZE + data_size - 8,
        b"WAVE",
        b"fmt ",
        16,
        1,
        number_of_channels,
        sample_rate,
        sample_rate * BYTES_PER_SAMPLE * number_of_channels,
        number_of_channels * BYTES_PER_SAMPLE,
        16,
        b"data",
        data_size,
    )


def to_pcm16(samples: np.ndarray) -> np.ndarray:
    """Convert float samples in ``[-1, 1]`` to int16 with asymmetric scaling.

    Values below -0.5 scale by 32768 and everything else (including
    ``[-0.5, 0)``) by 32767, truncating toward zero. NaN becomes 0.
    """
    values = np.nan_to_num(np.asarray(samples, dtype=np.float64), nan=0.0)
    values = np.clip(values, -1.0, 1.0)
    scaled = np.where(0.5 + values < 0, values * 32768, values * 32767)
    return np.trunc(scaled).astype("<i2")


def encode_wav(buffer: SampleBuffer, length: int | None = None) -> bytes:
    """Serialize the first ``length`` frames of ``buffer`` as a WAV byte blob."""
    if length is None:
        length = buffer.length
    channels = buffer.channels[:, :length]
    if channels.shape[1] < length:
        # Frames beyond the buffer end are written as silence.
        channels = np.pad(channels, ((0, 0), (0, length - channels.shape[1])))
    payload = to_pcm16(channels).T.tobytes()
    return wav_header(buffer.number_of_channels, buffer.sample_rate, length) + payload


def write_wav(path: str | Path, buffer: SampleBuffer, length: int | None = None) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(encode_wav(buffer, length))
    return target


def process_audio(buffer: SampleBuffer, regions: Iterable[SilenceRegion]) -> bytes:
    """Remove ``regions`` from ``buffer`` and return the result as WAV bytes."""
    cleaned = remove_silence(buffer, regions)
    return encode_wav(cleaned, cleaned.length)


__all__ = [
    "HEADER_SIZE",
    "WAV_CONTENT_TYPE",
    "encode_wav",
    "process_audio",
    "to_pcm16",
    "wav_header",
    "write_wav",
]
