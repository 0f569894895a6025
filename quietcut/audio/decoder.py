"""Decode uploaded or on-disk audio into a SampleBuffer via libsndfile."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import soundfile as sf

from .types import SampleBuffer

LOGGER = logging.getLogger("quietcut.decoder")

AUDIO_SUFFIXES = {".wav", ".flac", ".ogg", ".oga", ".mp3", ".aiff", ".aif"}


class DecodeError(ValueError):
    """Raised when a source cannot be turned into a sample buffer."""


def is_audio_upload(filename: str | None, content_type: str | None) -> bool:
    if content_type and content_type.lower().startswith("audio/"):
        return True
    if filename:
        return Path(filename).suffix.lower() in AUDIO_SUFFIXES
    return False


def decode_audio(source: str | Path | bytes) -> SampleBuffer:
    """Read ``source`` (a path or raw file bytes) as float32 samples."""
    handle = io.BytesIO(source) if isinstance(source, (bytes, bytearray)) else str(source)
    try:
        frames, sample_rate = sf.read(handle, dtype="float32", always_2d=True)
    except (RuntimeError, OSError, TypeError) as exc:
        raise DecodeError(f"Error decoding audio file: {exc}") from exc
    if sample_rate <= 0:
        raise DecodeError("Error decoding audio file: invalid sample rate")
    buffer = SampleBuffer.from_frames(frames, sample_rate)
    LOGGER.info(
        "Decoded %.2fs of audio (%d Hz, %d channel(s))",
        buffer.duration,
        buffer.sample_rate,
        buffer.number_of_channels,
    )
    return buffer


__all__ = ["AUDIO_SUFFIXES", "DecodeError", "decode_audio", "is_audio_upload"]
