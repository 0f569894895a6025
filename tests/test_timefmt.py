import math

import pytest

from quietcut.audio.timefmt import build_stats, export_filename, format_time, total_silence
from quietcut.audio.types import SilenceRegion


def test_build_stats():
    regions = [SilenceRegion(0.5, 1.2), SilenceRegion(3.0, 3.5)]
    stats = build_stats(10.0, regions, 0.01)
    assert stats.time_saved == pytest.approx(1.2)
    assert stats.new_duration == pytest.approx(8.8)
    assert stats.old_duration == 10.0
    assert stats.processing_time == 0.01


def test_build_stats_never_negative():
    stats = build_stats(1.0, [SilenceRegion(0.0, 2.0)], 0.0)
    assert stats.new_duration == 0.0


def test_total_silence_empty():
    assert total_silence([]) == 0


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "0:00.0"),
        (5.25, "0:05.2"),
        (61.99, "1:01.9"),
        (3600, "60:00.0"),
        (math.inf, "0:00.0"),
        (math.nan, "0:00.0"),
    ],
)
def test_format_time(seconds, expected):
    assert format_time(seconds) == expected


def test_export_filename():
    assert export_filename("podcast.episode.mp3", token="abcd1234") == "podcast.episode_clean_abcd1234.wav"
    generated = export_filename("voice.m4a")
    assert generated.startswith("voice_clean_")
    assert len(generated) == len("voice_clean_") + 8 + len(".wav")
    assert export_filename("", token="00000000") == "audio_clean_00000000.wav"
