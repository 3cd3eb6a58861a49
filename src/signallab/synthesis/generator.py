"""Windowed waveform synthesis for the closed set of waveform kinds."""

from __future__ import annotations

from typing import Callable

import numpy as np
import numpy.typing as npt

from signallab.domain.models import AnalysisOptions, Signal, WaveformKind, parse_waveform_kind
from signallab.dsp.fft import require_power_of_two
from signallab.dsp.windowing import hann_window
from signallab.errors import InvalidWaveformKind


FloatArray = npt.NDArray[np.float64]
_Synthesizer = Callable[[FloatArray, AnalysisOptions], FloatArray]

DUAL_TONE_SECONDARY_GAIN = 0.6


def _sine(t: FloatArray, options: AnalysisOptions) -> FloatArray:
    return np.sin(2.0 * np.pi * options.freq1_hz * t)


def _dual_tone(t: FloatArray, options: AnalysisOptions) -> FloatArray:
    primary = np.sin(2.0 * np.pi * options.freq1_hz * t)
    secondary = np.sin(2.0 * np.pi * options.freq2_hz * t)
    return primary + DUAL_TONE_SECONDARY_GAIN * secondary


def _square(t: FloatArray, options: AnalysisOptions) -> FloatArray:
    # np.sign(0.0) == 0.0, so an exact zero crossing stays at zero.
    return np.sign(np.sin(2.0 * np.pi * options.freq1_hz * t))


def _chirp(t: FloatArray, options: AnalysisOptions) -> FloatArray:
    # Linear instantaneous frequency evaluated pointwise; not phase continuous.
    n = t.size
    progress = np.arange(n, dtype=np.float64) / n
    instantaneous_hz = options.freq1_hz + (options.freq2_hz - options.freq1_hz) * progress
    return np.sin(2.0 * np.pi * instantaneous_hz * t)


_SYNTHESIZERS: dict[WaveformKind, _Synthesizer] = {
    WaveformKind.SINE: _sine,
    WaveformKind.DUAL_TONE: _dual_tone,
    WaveformKind.SQUARE: _square,
    WaveformKind.CHIRP: _chirp,
}


def sample_timestamps(size: int, sample_rate_hz: float) -> FloatArray:
    """Timestamps `n / sample_rate_hz` for `n` in `[0, size)`."""
    return np.arange(size, dtype=np.float64) / sample_rate_hz


def synthesize_unwindowed(kind: WaveformKind | str, options: AnalysisOptions) -> FloatArray:
    """Raw waveform values before the Hann window is applied."""
    require_power_of_two(options.fft_size, minimum=2)
    resolved = parse_waveform_kind(kind)
    synthesizer = _SYNTHESIZERS.get(resolved)
    if synthesizer is None:
        raise InvalidWaveformKind(f"no synthesizer registered for {resolved!r}")
    t = sample_timestamps(options.fft_size, options.sample_rate_hz)
    return synthesizer(t, options)


def generate(kind: WaveformKind | str, options: AnalysisOptions) -> Signal:
    """Synthesize a Hann-windowed signal of exactly `options.fft_size` samples."""
    values = synthesize_unwindowed(kind, options)
    samples = values * hann_window(options.fft_size)
    return Signal(
        samples=samples,
        timestamps=sample_timestamps(options.fft_size, options.sample_rate_hz),
        sample_rate_hz=options.sample_rate_hz,
    )
