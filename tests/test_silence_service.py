import pytest
from prometheus_client import REGISTRY

from quietcut.api.services.silence_service import SilenceService
from quietcut.api.settings import APISettings

from helpers import gapped_tone


def _service() -> SilenceService:
    return SilenceService(APISettings(silence_threshold=0.015, scan_step=200, min_silence_sec=0.5))


def _count(operation: str, status: str) -> float:
    value = REGISTRY.get_sample_value(
        "silence_process_total", {"operation": operation, "status": status}
    )
    return value or 0.0


def test_process_without_encoding_skips_wav():
    result = _service().process(gapped_tone(), encode=False)
    assert result.wav is None
    assert result.buffer.duration == pytest.approx(1.3, abs=0.025)
    assert result.stats.time_saved == pytest.approx(0.7, abs=0.025)


def test_process_encodes_by_default():
    result = _service().process(gapped_tone(), filename="take.wav")
    assert result.wav[:4] == b"RIFF"
    assert result.filename.startswith("take_clean_")


def test_analyze_counts_errors(monkeypatch):
    service = _service()

    def boom(buffer, min_duration):
        raise RuntimeError("detector failed")

    monkeypatch.setattr(service.detector, "detect", boom)
    before = _count("analyze", "error")
    with pytest.raises(RuntimeError):
        service.analyze(gapped_tone())
    assert _count("analyze", "error") == before + 1


def test_analyze_counts_success():
    before = _count("analyze", "success")
    regions = _service().analyze(gapped_tone(), 0.5)
    assert len(regions) == 1
    assert _count("analyze", "success") == before + 1
