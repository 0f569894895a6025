"""Amplitude-threshold silence detection over a strided scan of channel 0."""

from __future__ import annotations

import logging

import numpy as np

from .types import SampleBuffer, SilenceRegion

LOGGER = logging.getLogger("quietcut.detector")

DEFAULT_THRESHOLD = 0.015
DEFAULT_STEP = 200


class SilenceDetector:
    """Find spans where the reference channel stays below ``threshold``.

    Only every ``step``-th sample is inspected and the gap between two
    inspected samples is assumed to share the state of the first one, so
    region boundaries are accurate to ``step / sample_rate`` seconds. Use
    ``step=1`` for an exact scan.
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD, step: int = DEFAULT_STEP) -> None:
        self.threshold = float(threshold)
        self.step = max(1, int(step))

    def detect(self, buffer: SampleBuffer, min_duration: float) -> list[SilenceRegion]:
        length = buffer.length
        if length == 0:
            return []
        sample_rate = buffer.sample_rate
        visited = np.abs(buffer.channel(0)[:: self.step]) < self.threshold
        starts, ends = self._silent_runs(visited)

        regions: list[SilenceRegion] = []
        for start_idx, end_idx in zip(starts, ends):
            start = int(start_idx) * self.step
            # A run still open when the scan finishes closes at the buffer end.
            end = int(end_idx) * self.step if end_idx < visited.size else length
            if (end - start) / sample_rate >= min_duration:
                regions.append(SilenceRegion(start=start / sample_rate, end=end / sample_rate))
        LOGGER.info(
            "Detected %d silence regions (min_duration=%.3fs, threshold=%.4f, step=%d)",
            len(regions),
            min_duration,
            self.threshold,
            self.step,
        )
        return regions

    def _silent_runs(self, visited: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        # Positions are in visited-sample space; an end equal to visited.size
        # means the run was still silent when the scan stopped.
        padded = np.concatenate(([False], visited, [False])).astype(np.int8)
        edges = np.diff(padded)
        return np.flatnonzero(edges == 1), np.flatnonzero(edges == -1)


def detect_silence(
    buffer: SampleBuffer,
    min_duration: float,
    *,
    threshold: float = DEFAULT_THRESHOLD,
    step: int = DEFAULT_STEP,
) -> list[SilenceRegion]:
    return SilenceDetector(threshold=threshold, step=step).detect(buffer, min_duration)


__all__ = ["DEFAULT_STEP", "DEFAULT_THRESHOLD", "SilenceDetector", "detect_silence"]
