"""Fixed-length frame extraction from arbitrary-length sample buffers."""

from __future__ import annotations

import logging
import math

import numpy as np
import numpy.typing as npt

from signallab.domain.models import Signal
from signallab.dsp.fft import require_power_of_two
from signallab.dsp.windowing import hann_window
from signallab.synthesis.generator import sample_timestamps


FloatArray = npt.NDArray[np.float64]

logger = logging.getLogger(__name__)


def decimation_stride(sample_count: int, fft_size: int) -> int:
    """Fixed stride that spreads `fft_size` picks across the input, at least 1."""
    return max(1, sample_count // fft_size)


def extract_frame(
    external_samples: npt.ArrayLike,
    sample_rate_hz: float,
    fft_size: int,
    *,
    apply_window: bool = False,
) -> Signal:
    """Decimate external samples to exactly `fft_size` points, zero-padding the tail."""
    require_power_of_two(fft_size)
    if not math.isfinite(sample_rate_hz) or sample_rate_hz <= 0:
        raise ValueError("sample_rate_hz must be > 0")

    source = np.asarray(external_samples, dtype=np.float64).reshape(-1)
    stride = decimation_stride(source.size, fft_size)
    picks = np.arange(fft_size, dtype=np.intp) * stride
    in_range = picks < source.size

    samples = np.zeros(fft_size, dtype=np.float64)
    samples[in_range] = source[picks[in_range]]
    if not np.all(np.isfinite(samples)):
        samples = np.nan_to_num(samples, nan=0.0, posinf=0.0, neginf=0.0)

    padded = int(fft_size - np.count_nonzero(in_range))
    if padded:
        logger.debug("Zero-padded %d of %d frame samples (input length %d)", padded, fft_size, source.size)
    if apply_window:
        samples = samples * hann_window(fft_size)

    return Signal(
        samples=samples,
        timestamps=sample_timestamps(fft_size, sample_rate_hz),
        sample_rate_hz=float(sample_rate_hz),
    )
