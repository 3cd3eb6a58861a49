"""Magnitude spectrum derivation and summary features."""

from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np
import numpy.typing as npt

from signallab.domain.models import ComplexBuffer, Spectrum
from signallab.dsp.fft import require_power_of_two, transform_in_place


FloatArray = npt.NDArray[np.float64]


@dataclass(frozen=True, slots=True)
class SpectrumSummary:
    """Compact summary of one magnitude spectrum."""

    dominant_frequency_hz: float
    dominant_magnitude: float
    spectral_centroid_hz: float
    spectral_rms: float
    total_energy: float


def frequency_bins_hz(size: int, sample_rate_hz: float) -> FloatArray:
    """Frequencies of the retained first-half bins for an N-point transform."""
    _validate_sample_rate(sample_rate_hz)
    require_power_of_two(size)
    return np.arange(size // 2, dtype=np.float64) * sample_rate_hz / size


def analyze(samples: npt.ArrayLike, sample_rate_hz: float) -> Spectrum:
    """Compute the normalized one-sided magnitude spectrum of real samples."""
    x = _as_valid_samples(samples)
    n = x.size
    require_power_of_two(n)
    frequencies = frequency_bins_hz(n, sample_rate_hz)

    buffer = transform_in_place(ComplexBuffer.from_real(x))
    half = n // 2
    magnitudes = np.hypot(buffer.real[:half], buffer.imag[:half]) / (n / 2)

    return Spectrum(
        frequencies_hz=frequencies,
        magnitudes=np.asarray(magnitudes, dtype=np.float64),
        sample_rate_hz=float(sample_rate_hz),
        fft_size=n,
    )


def summarize_spectrum(spectrum: Spectrum) -> SpectrumSummary:
    """Extract stable frequency-domain summary features."""
    freqs = spectrum.frequencies_hz
    mags = spectrum.magnitudes
    if mags.size == 0:
        return SpectrumSummary(
            dominant_frequency_hz=0.0,
            dominant_magnitude=0.0,
            spectral_centroid_hz=0.0,
            spectral_rms=0.0,
            total_energy=0.0,
        )

    dominant_idx = int(np.argmax(mags))
    mag_sum = float(np.sum(mags))
    if mag_sum <= 0:
        centroid_hz = 0.0
    else:
        centroid_hz = float(np.sum(freqs * mags) / mag_sum)

    return SpectrumSummary(
        dominant_frequency_hz=float(freqs[dominant_idx]),
        dominant_magnitude=float(mags[dominant_idx]),
        spectral_centroid_hz=centroid_hz,
        spectral_rms=float(np.sqrt(np.mean(np.square(mags)))),
        total_energy=float(np.sum(np.square(mags))),
    )


def _as_valid_samples(samples: npt.ArrayLike) -> FloatArray:
    x = np.asarray(samples, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError("samples must be 1D")
    if not np.all(np.isfinite(x)):
        raise ValueError("samples must contain only finite values")
    return x


def _validate_sample_rate(sample_rate_hz: float) -> None:
    if not math.isfinite(sample_rate_hz) or sample_rate_hz <= 0:
        raise ValueError("sample_rate_hz must be > 0")
