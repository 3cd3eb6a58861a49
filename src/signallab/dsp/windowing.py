"""Hann window coefficients for leakage reduction."""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt


FloatArray = npt.NDArray[np.float64]


def hann_coefficient(n: int, size: int) -> float:
    """Hann coefficient for sample `n` of a window with `size` samples."""
    _validate_size(size)
    if not 0 <= n < size:
        raise ValueError(f"sample index must be in [0, {size}), got {n}")
    if size == 1:
        return 1.0
    return 0.5 - 0.5 * math.cos(2.0 * math.pi * n / (size - 1))


def hann_window(size: int) -> FloatArray:
    """All Hann coefficients for a window of `size` samples."""
    _validate_size(size)
    if size == 1:
        return np.ones(1, dtype=np.float64)
    n = np.arange(size, dtype=np.float64)
    return 0.5 - 0.5 * np.cos(2.0 * np.pi * n / (size - 1))


def apply_window(samples: npt.ArrayLike) -> FloatArray:
    """Return a Hann-windowed copy of a 1D sample buffer."""
    x = np.asarray(samples, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError("samples must be 1D")
    if x.size == 0:
        return x.copy()
    return x * hann_window(x.size)


def _validate_size(size: int) -> None:
    if size < 1:
        raise ValueError("window size must be >= 1")
