"""Decode uploads, find silence, and produce cleaned WAV exports."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from quietcut.audio.decoder import DecodeError, decode_audio, is_audio_upload
from quietcut.audio.gap_remover import remove_silence
from quietcut.audio.timefmt import build_stats, export_filename
from quietcut.audio.types import ProcessingStats, SampleBuffer, SilenceRegion
from quietcut.audio.wav_encoder import encode_wav

from ..metrics import PROCESS_COUNTER, SECONDS_REMOVED
from ..settings import APISettings

LOGGER = logging.getLogger("quietcut.service")


class UnsupportedMediaError(ValueError):
    """Upload is not an audio file."""


class UploadTooLargeError(ValueError):
    """Upload exceeds the configured size limit."""


@dataclass(slots=True)
class ProcessResult:
    buffer: SampleBuffer
    regions: list[SilenceRegion]
    stats: ProcessingStats
    wav: bytes | None
    filename: str


class SilenceService:
    """Run detection and reconstruction for a single uploaded file."""

    def __init__(self, settings: APISettings) -> None:
        self.settings = settings
        self.detector = settings.detector()

    def load(self, data: bytes, filename: str | None, content_type: str | None) -> SampleBuffer:
        if not is_audio_upload(filename, content_type):
            LOGGER.warning("Rejected non-audio upload %r (%s)", filename, content_type)
            raise UnsupportedMediaError("Please upload an audio file.")
        if len(data) > self.settings.max_upload_bytes:
            LOGGER.warning("Rejected upload %r: %d bytes over limit", filename, len(data))
            raise UploadTooLargeError(
                f"Upload exceeds {self.settings.max_upload_mb:g} MB limit"
            )
        return decode_audio(data)

    def analyze(self, buffer: SampleBuffer, min_duration: float | None = None) -> list[SilenceRegion]:
        try:
            regions = self.detector.detect(buffer, self._min_duration(min_duration))
        except Exception:
            PROCESS_COUNTER.labels(operation="analyze", status="error").inc()
            raise
        PROCESS_COUNTER.labels(operation="analyze", status="success").inc()
        return regions

    def process(
        self,
        buffer: SampleBuffer,
        min_duration: float | None = None,
        *,
        filename: str | None = None,
        encode: bool = True,
    ) -> ProcessResult:
        """Detect and cut silence; ``encode=False`` skips building the WAV bytes."""
        try:
            regions = self.detector.detect(buffer, self._min_duration(min_duration))
            start = time.perf_counter()
            cleaned = remove_silence(buffer, regions)
            processing_time = time.perf_counter() - start
            wav = encode_wav(cleaned, cleaned.length) if encode else None
        except Exception:
            PROCESS_COUNTER.labels(operation="process", status="error").inc()
            raise
        stats = build_stats(buffer.duration, regions, processing_time)
        PROCESS_COUNTER.labels(operation="process", status="success").inc()
        SECONDS_REMOVED.inc(stats.time_saved)
        LOGGER.info(
            "Processed %s: %.2fs -> %.2fs (%d regions removed)",
            filename or "upload",
            stats.old_duration,
            stats.new_duration,
            len(regions),
        )
        return ProcessResult(
            buffer=cleaned,
            regions=regions,
            stats=stats,
            wav=wav,
            filename=export_filename(filename or "audio"),
        )

    def _min_duration(self, value: float | None) -> float:
        return self.settings.min_silence_sec if value is None else float(value)


__all__ = [
    "DecodeError",
    "ProcessResult",
    "SilenceService",
    "UnsupportedMediaError",
    "UploadTooLargeError",
]
