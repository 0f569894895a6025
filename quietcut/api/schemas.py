"""Pydantic schemas for API contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from quietcut.audio.timefmt import format_time
from quietcut.audio.types import ProcessingStats, SilenceRegion


class SilenceRegionModel(BaseModel):
    start: float
    end: float

    @classmethod
    def from_region(cls, region: SilenceRegion) -> "SilenceRegionModel":
        return cls(start=region.start, end=region.end)


class AnalyzeResponse(BaseModel):
    sample_rate: int
    channels: int
    duration: float
    min_duration: float
    regions: list[SilenceRegionModel] = Field(default_factory=list)
    silence_total: float = 0.0


class ProcessingStatsResponse(BaseModel):
    old_duration: float
    new_duration: float
    time_saved: float
    processing_time: float
    old_duration_label: str
    new_duration_label: str

    @classmethod
    def from_stats(cls, stats: ProcessingStats) -> "ProcessingStatsResponse":
        return cls(
            old_duration=stats.old_duration,
            new_duration=stats.new_duration,
            time_saved=stats.time_saved,
            processing_time=stats.processing_time,
            old_duration_label=format_time(stats.old_duration),
            new_duration_label=format_time(stats.new_duration),
        )


class ProcessResponse(BaseModel):
    filename: str
    stats: ProcessingStatsResponse
    regions: list[SilenceRegionModel]


class HealthResponse(BaseModel):
    ok: bool
    version: str
    timestamp: datetime
