"""Silence detection, gap removal and PCM WAV encoding."""

from .decoder import DecodeError, decode_audio, is_audio_upload
from .gap_remover import keep_regions, remove_silence
from .silence_detector import SilenceDetector, detect_silence
from .timefmt import build_stats, export_filename, format_time
from .types import KeepRegion, ProcessingStats, SampleBuffer, SilenceRegion
from .wav_encoder import WAV_CONTENT_TYPE, encode_wav, process_audio, write_wav

__all__ = [
    "DecodeError",
    "KeepRegion",
    "ProcessingStats",
    "SampleBuffer",
    "SilenceDetector",
    "SilenceRegion",
    "WAV_CONTENT_TYPE",
    "build_stats",
    "decode_audio",
    "detect_silence",
    "encode_wav",
    "export_filename",
    "format_time",
    "is_audio_upload",
    "keep_regions",
    "process_audio",
    "remove_silence",
    "write_wav",
]
