import pytest

from quietcut.audio.decoder import decode_audio
from quietcut.audio.wav_encoder import write_wav
from scripts.remove_silence import main

from helpers import gapped_tone


@pytest.fixture()
def source(tmp_path):
    return write_wav(tmp_path / "memo.wav", gapped_tone(channels=2))


def test_cli_writes_cleaned_file(tmp_path, source):
    output = tmp_path / "clean.wav"
    assert main([str(source), "-o", str(output), "--min-duration", "0.5"]) == 0
    cleaned = decode_audio(output)
    assert cleaned.number_of_channels == 2
    assert cleaned.duration == pytest.approx(1.3, abs=0.025)


def test_cli_default_output_name(tmp_path, source):
    assert main([str(source)]) == 0
    outputs = list(tmp_path.glob("memo_clean_*.wav"))
    assert len(outputs) == 1


def test_cli_analyze_only(capsys, source):
    assert main([str(source), "--analyze-only", "--step", "1"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == ["0.500\t1.200"]


def test_cli_reports_decode_failure(tmp_path):
    bogus = tmp_path / "bogus.wav"
    bogus.write_bytes(b"nope")
    assert main([str(bogus)]) == 1


def test_cli_rejects_negative_min_duration(source):
    assert main([str(source), "-m", "-0.1"]) == 2
