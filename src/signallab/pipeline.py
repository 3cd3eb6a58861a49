"""End-to-end analysis for the synthetic and imported-audio paths."""

from __future__ import annotations

from dataclasses import asdict, dataclass
import logging
from pathlib import Path
from typing import Any

import numpy.typing as npt

from signallab.domain.models import AnalysisOptions, Signal, Spectrum, WaveformKind, parse_waveform_kind
from signallab.dsp.frequency import SpectrumSummary, analyze, summarize_spectrum
from signallab.ingest.frame import extract_frame
from signallab.ingest.wav import load_wav_channel
from signallab.synthesis.generator import generate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Time series, spectrum, and a human-readable description of its source."""

    signal: Signal
    spectrum: Spectrum
    summary: SpectrumSummary
    label: str

    def to_jsonable(self, *, include_bins: bool = False) -> dict[str, Any]:
        """Serialize the result into JSON-compatible primitives."""
        payload: dict[str, Any] = {
            "label": self.label,
            "fft_size": self.spectrum.fft_size,
            "sample_rate_hz": self.spectrum.sample_rate_hz,
            "bin_width_hz": self.spectrum.bin_width_hz,
            "summary": asdict(self.summary),
        }
        if include_bins:
            payload["bins"] = {
                "frequencies_hz": self.spectrum.frequencies_hz.tolist(),
                "magnitudes": self.spectrum.magnitudes.tolist(),
            }
        return payload


def analyze_synthetic(kind: WaveformKind | str, options: AnalysisOptions) -> AnalysisResult:
    """Generate a windowed synthetic signal and compute its spectrum."""
    resolved = parse_waveform_kind(kind)
    signal = generate(resolved, options)
    spectrum = analyze(signal.samples, options.sample_rate_hz)
    label = (
        f"Synthetic {resolved.value} signal with "
        f"f1={_format_hz(options.freq1_hz)} Hz, f2={_format_hz(options.freq2_hz)} Hz"
    )
    logger.debug("Analyzed %s (fft_size=%d)", label, options.fft_size)
    return _build_result(signal, spectrum, label)


def analyze_imported(
    samples: npt.ArrayLike,
    sample_rate_hz: float,
    fft_size: int,
    *,
    source_name: str,
    apply_window: bool = True,
) -> AnalysisResult:
    """Decimate externally decoded samples to one frame and compute its spectrum."""
    signal = extract_frame(samples, sample_rate_hz, fft_size, apply_window=apply_window)
    spectrum = analyze(signal.samples, sample_rate_hz)
    label = f"Audio file: {source_name}, sampleRate={_format_hz(sample_rate_hz)} Hz"
    logger.debug("Analyzed %s (fft_size=%d, windowed=%s)", label, fft_size, apply_window)
    return _build_result(signal, spectrum, label)


def analyze_wav_file(wav_file: str | Path, fft_size: int, *, apply_window: bool = True) -> AnalysisResult:
    """Decode a WAV file's first channel and analyze one decimated frame."""
    path = Path(wav_file)
    decoded = load_wav_channel(path)
    return analyze_imported(
        decoded.samples,
        decoded.sample_rate_hz,
        fft_size,
        source_name=path.name,
        apply_window=apply_window,
    )


def _build_result(signal: Signal, spectrum: Spectrum, label: str) -> AnalysisResult:
    return AnalysisResult(
        signal=signal,
        spectrum=spectrum,
        summary=summarize_spectrum(spectrum),
        label=label,
    )


def _format_hz(value: float) -> str:
    return f"{value:g}"
