"""API settings resolved from the environment."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field

from quietcut import __version__
from quietcut.audio.silence_detector import DEFAULT_STEP, DEFAULT_THRESHOLD, SilenceDetector


class APISettings(BaseModel):
    app_name: str = Field(default="quietcut Silence Remover API")
    version: str = Field(default=__version__)
    silence_threshold: float = Field(
        default=float(os.getenv("QUIETCUT_SILENCE_THRESHOLD", str(DEFAULT_THRESHOLD)))
    )
    scan_step: int = Field(default=int(os.getenv("QUIETCUT_SCAN_STEP", str(DEFAULT_STEP))), ge=1)
    min_silence_sec: float = Field(
        default=float(os.getenv("QUIETCUT_MIN_SILENCE_SEC", "0.5")), ge=0.0
    )
    max_upload_mb: float = Field(default=float(os.getenv("QUIETCUT_MAX_UPLOAD_MB", "200")))

    @property
    def max_upload_bytes(self) -> int:
        return int(self.max_upload_mb * 1024 * 1024)

    def detector(self) -> SilenceDetector:
        return SilenceDetector(threshold=self.silence_threshold, step=self.scan_step)


@lru_cache()
def get_settings() -> APISettings:
    return APISettings()
