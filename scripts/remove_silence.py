"""Strip long silences from an audio file and save the result as 16-bit WAV."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from quietcut.audio.decoder import DecodeError, decode_audio
from quietcut.audio.gap_remover import remove_silence
from quietcut.audio.silence_detector import DEFAULT_STEP, DEFAULT_THRESHOLD, SilenceDetector
from quietcut.audio.timefmt import build_stats, export_filename, format_time
from quietcut.audio.wav_encoder import write_wav

LOGGER = logging.getLogger("quietcut.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Remove silent gaps from an audio file.")
    parser.add_argument("input", type=Path, help="Audio file to clean.")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output WAV path (default: <input>_clean_<id>.wav next to the input).",
    )
    parser.add_argument(
        "-m",
        "--min-duration",
        type=float,
        default=0.5,
        help="Shortest silence (seconds) that gets removed (default: 0.5).",
    )
    parser.add_argument(
        "-t",
        "--threshold",
        type=float,
        default=DEFAULT_THRESHOLD,
        help=f"Amplitude below which a sample is silent (default: {DEFAULT_THRESHOLD}).",
    )
    parser.add_argument(
        "-s",
        "--step",
        type=int,
        default=DEFAULT_STEP,
        help=f"Scan every Nth sample; 1 scans exactly (default: {DEFAULT_STEP}).",
    )
    parser.add_argument(
        "-a",
        "--analyze-only",
        action="store_true",
        help="Print the silence regions without writing a file.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.min_duration < 0:
        LOGGER.error("--min-duration must be >= 0")
        return 2

    try:
        buffer = decode_audio(args.input)
    except DecodeError as exc:
        LOGGER.error("%s", exc)
        return 1

    detector = SilenceDetector(threshold=args.threshold, step=args.step)
    regions = detector.detect(buffer, args.min_duration)
    for region in regions:
        LOGGER.debug("silence %s -> %s", format_time(region.start), format_time(region.end))
    if args.analyze_only:
        for region in regions:
            print(f"{region.start:.3f}\t{region.end:.3f}")
        return 0

    start = time.perf_counter()
    cleaned = remove_silence(buffer, regions)
    stats = build_stats(buffer.duration, regions, time.perf_counter() - start)
    output = args.output or args.input.with_name(export_filename(args.input.name))
    write_wav(output, cleaned)
    LOGGER.info(
        "Wrote %s (%s -> %s, saved %.2fs)",
        output,
        format_time(stats.old_duration),
        format_time(stats.new_duration),
        stats.time_saved,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
