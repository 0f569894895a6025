from quietcut.api import settings as settings_mod


def test_defaults_match_detector_constants():
    settings = settings_mod.APISettings()
    detector = settings.detector()
    assert detector.threshold == 0.015
    assert detector.step == 200
    assert settings.min_silence_sec == 0.5


def test_overrides_flow_into_detector():
    settings = settings_mod.APISettings(silence_threshold=0.05, scan_step=1, max_upload_mb=1)
    detector = settings.detector()
    assert detector.threshold == 0.05
    assert detector.step == 1
    assert settings.max_upload_bytes == 1024 * 1024


def test_get_settings_is_cached():
    settings_mod.get_settings.cache_clear()  # type: ignore
    assert settings_mod.get_settings() is settings_mod.get_settings()
