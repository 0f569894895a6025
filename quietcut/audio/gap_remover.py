"""Rebuild a sample buffer without its silent spans."""

from __future__ import annotations

import logging
import math
from typing import Callable, Iterable

import numpy as np

from .types import KeepRegion, SampleBuffer, SilenceRegion

LOGGER = logging.getLogger("quietcut.gap_remover")

Allocator = Callable[[int, int, int], np.ndarray]


def zeros_allocator(number_of_channels: int, length: int, sample_rate: int) -> np.ndarray:  # noqa: ARG001
    return np.zeros((number_of_channels, length), dtype=np.float32)


def keep_regions(regions: Iterable[SilenceRegion], sample_rate: int, length: int) -> list[KeepRegion]:
    """Return the sample spans of ``[0, length)`` not covered by ``regions``.

    Regions are sorted by start first and clamped to the buffer. Overlapping input is not merged: the
    cursor jumps to each region's end in turn, so overlaps give undefined cuts.
    """
    keeps: list[KeepRegion] = []
    cursor = 0
    for region in sorted(regions, key=lambda item: item.start):
        region_start = min(max(math.floor(region.start * sample_rate), 0), length)
        region_end = min(max(math.floor(region.end * sample_rate), 0), length)
        if cursor < region_start:
            keeps.append(KeepRegion(start=cursor, end=region_start))
        cursor = region_end
    if cursor < length:
        keeps.append(KeepRegion(start=cursor, end=length))
    return keeps


def remove_silence(
    buffer: SampleBuffer,
    regions: Iterable[SilenceRegion],
    *,
    allocate: Allocator | None = None,
) -> SampleBuffer:
    """Return a new buffer holding only the audio outside ``regions``.

    Every channel is cut at the same sample indices, so channels stay aligned.
    ``allocate`` creates the ``(channels, length)`` output array; it defaults
    to a zero-filled float32 array.
    """
    allocate = allocate or zeros_allocator
    keeps = keep_regions(regions, buffer.sample_rate, buffer.length)
    new_length = sum(keep.length for keep in keeps)

    data = allocate(buffer.number_of_channels, new_length, buffer.sample_rate)
    for index in range(buffer.number_of_channels):
        source = buffer.channel(index)
        target = data[index]
        pointer = 0
        for keep in keeps:
            target[pointer : pointer + keep.length] = source[keep.start : keep.end]
            pointer += keep.length

    LOGGER.info(
        "Rebuilt buffer: %d -> %d samples across %d channel(s) (%d kept spans)",
        buffer.length,
        new_length,
        buffer.number_of_channels,
        len(keeps),
    )
    return SampleBuffer(data, buffer.sample_rate, copy=False)


__all__ = ["Allocator", "keep_regions", "remove_silence", "zeros_allocator"]
