"""CLI entrypoint for one-shot synthetic or imported-audio spectrum analysis."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from signallab.domain.models import AnalysisOptions, WaveformKind
from signallab.pipeline import AnalysisResult, analyze_synthetic, analyze_wav_file


def build_parser() -> argparse.ArgumentParser:
    """Create CLI parser for spectrum analysis."""
    parser = argparse.ArgumentParser(
        prog="signallab-analyze",
        description=(
            "Generate a synthetic waveform or load a WAV file, compute its radix-2 FFT, "
            "and print the magnitude spectrum summary as JSON."
        ),
    )
    parser.add_argument(
        "--source",
        choices=("synthetic", "file"),
        default="synthetic",
        help="Analyze a generated waveform or a decoded audio file.",
    )
    parser.add_argument(
        "--waveform",
        choices=tuple(kind.value for kind in WaveformKind),
        default=WaveformKind.SINE.value,
        help="Waveform family for the synthetic source.",
    )
    parser.add_argument("--freq1", type=float, default=50.0, help="Primary frequency (Hz).")
    parser.add_argument(
        "--freq2",
        type=float,
        default=120.0,
        help="Secondary tone (dual) or chirp end frequency (Hz).",
    )
    parser.add_argument("--sample-rate", type=float, default=2048.0, help="Synthetic sample rate (Hz).")
    parser.add_argument("--fft-size", type=int, default=1024, help="Transform size (power of 2).")
    parser.add_argument("--audio-file", type=Path, default=None, help="WAV file for the file source.")
    parser.add_argument(
        "--window-imported",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Apply the Hann window to frames extracted from audio files.",
    )
    parser.add_argument(
        "--include-bins",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Include every frequency bin and magnitude in the JSON report.",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging verbosity written to stderr.",
    )
    return parser


def run_analysis_from_args(args: argparse.Namespace) -> AnalysisResult:
    """Execute the analysis selected by parsed CLI arguments."""
    if args.source == "file":
        if args.audio_file is None:
            raise ValueError("--audio-file is required when --source=file")
        return analyze_wav_file(args.audio_file, args.fft_size, apply_window=args.window_imported)

    options = AnalysisOptions(
        fft_size=args.fft_size,
        sample_rate_hz=args.sample_rate,
        freq1_hz=args.freq1,
        freq2_hz=args.freq2,
    )
    return analyze_synthetic(args.waveform, options)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint for spectrum analysis."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        result = run_analysis_from_args(args)
    except Exception as exc:
        print(f"[ERROR] Spectrum analysis failed: {exc}", file=sys.stderr)
        return 2

    print(json.dumps(result.to_jsonable(include_bins=args.include_bins), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
