"""Reporting helpers: processing stats, clock formatting, export names."""

from __future__ import annotations

import math
import uuid
from pathlib import PurePath
from typing import Iterable

from .types import ProcessingStats, SilenceRegion


def total_silence(regions: Iterable[SilenceRegion]) -> float:
    return sum(region.end - region.start for region in regions)


def build_stats(
    old_duration: float, regions: Iterable[SilenceRegion], processing_time: float
) -> ProcessingStats:
    saved = total_silence(regions)
    return ProcessingStats(
        old_duration=old_duration,
        new_duration=max(0.0, old_duration - saved),
        time_saved=saved,
        processing_time=processing_time,
    )


def format_time(seconds: float) -> str:
    """Render seconds as ``M:SS.d`` (tenths truncated)."""
    if not math.isfinite(seconds):
        return "0:00.0"
    mins = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    tenths = math.floor((seconds % 1) * 10)
    return f"{mins}:{secs:02d}.{tenths}"


def export_filename(original_name: str, token: str | None = None) -> str:
    stem = PurePath(original_name or "audio").stem or "audio"
    token = token or uuid.uuid4().hex[:8]
    return f"{stem}_clean_{token}.wav"


__all__ = ["build_stats", "export_filename", "format_time", "total_silence"]
