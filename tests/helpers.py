"""Waveform builders shared by the test modules."""

from __future__ import annotations

import numpy as np

from quietcut.audio.types import SampleBuffer


def gapped_tone(
    duration_s: float = 2.0,
    sample_rate: int = 8000,
    gaps: tuple[tuple[float, float], ...] = ((0.5, 1.2),),
    amplitude: float = 0.9,
    channels: int = 1,
) -> SampleBuffer:
    """Full-scale DC signal with zeroed spans at ``gaps`` (seconds)."""
    length = int(duration_s * sample_rate)
    mono = np.full(length, amplitude, dtype=np.float32)
    for start, end in gaps:
        mono[int(start * sample_rate) : int(end * sample_rate)] = 0.0
    rows = [mono * (1 if idx % 2 == 0 else -1) for idx in range(channels)]
    return SampleBuffer(np.vstack(rows), sample_rate)
