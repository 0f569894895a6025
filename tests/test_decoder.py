import numpy as np
import pytest
import soundfile as sf

from quietcut.audio.decoder import DecodeError, decode_audio, is_audio_upload
from quietcut.audio.wav_encoder import encode_wav

from helpers import gapped_tone


def test_decode_path_keeps_channel_layout(tmp_path):
    frames = np.zeros((800, 2), dtype=np.float32)
    frames[:, 1] = 0.5
    path = tmp_path / "stereo.flac"
    sf.write(str(path), frames, 8000, format="FLAC")

    buffer = decode_audio(path)
    assert buffer.sample_rate == 8000
    assert buffer.number_of_channels == 2
    assert buffer.length == 800
    assert np.allclose(buffer.channel(0), 0.0)
    assert np.allclose(buffer.channel(1), 0.5, atol=1e-4)


def test_decode_bytes():
    source = gapped_tone()
    buffer = decode_audio(encode_wav(source))
    assert buffer.length == source.length
    assert buffer.duration == pytest.approx(2.0)


def test_decode_garbage_raises():
    with pytest.raises(DecodeError) as excinfo:
        decode_audio(b"definitely not audio")
    assert "Error decoding audio file" in str(excinfo.value)


def test_decode_missing_file_raises(tmp_path):
    with pytest.raises(DecodeError):
        decode_audio(tmp_path / "missing.wav")


@pytest.mark.parametrize(
    ("filename", "content_type", "expected"),
    [
        ("take.wav", "audio/wav", True),
        ("take.bin", "audio/mpeg", True),
        ("take.FLAC", "application/octet-stream", True),
        ("notes.txt", "text/plain", False),
        (None, None, False),
    ],
)
def test_is_audio_upload(filename, content_type, expected):
    assert is_audio_upload(filename, content_type) is expected
