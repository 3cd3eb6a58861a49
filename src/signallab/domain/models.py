"""Core value types for signal synthesis and spectral analysis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import math

import numpy as np
import numpy.typing as npt

from signallab.errors import InvalidTransformSize, InvalidWaveformKind


FloatArray = npt.NDArray[np.float64]


class WaveformKind(StrEnum):
    """Closed set of synthetic waveform families."""

    SINE = "sine"
    DUAL_TONE = "dual"
    SQUARE = "square"
    CHIRP = "chirp"


_WAVEFORM_ALIASES: dict[str, WaveformKind] = {
    "sine": WaveformKind.SINE,
    "sin": WaveformKind.SINE,
    "dual": WaveformKind.DUAL_TONE,
    "dual_tone": WaveformKind.DUAL_TONE,
    "dualtone": WaveformKind.DUAL_TONE,
    "square": WaveformKind.SQUARE,
    "chirp": WaveformKind.CHIRP,
    "sweep": WaveformKind.CHIRP,
}


def parse_waveform_kind(raw: str | WaveformKind) -> WaveformKind:
    """Normalize a free-form waveform name into the closed enumeration."""
    if isinstance(raw, WaveformKind):
        return raw
    if not isinstance(raw, str):
        raise InvalidWaveformKind(f"waveform kind must be a string, got {type(raw).__name__}")
    token = raw.strip().lower().replace("-", "_").replace(" ", "_")
    kind = _WAVEFORM_ALIASES.get(token)
    if kind is None:
        raise InvalidWaveformKind(f"unsupported waveform kind: {raw!r}")
    return kind


@dataclass(frozen=True, slots=True)
class AnalysisOptions:
    """Synthesis and transform parameters chosen by the host."""

    fft_size: int = 1024
    sample_rate_hz: float = 2048.0
    freq1_hz: float = 50.0
    freq2_hz: float = 120.0

    def __post_init__(self) -> None:
        if isinstance(self.fft_size, bool) or not isinstance(self.fft_size, (int, np.integer)):
            raise InvalidTransformSize(f"fft_size must be an integer, got {self.fft_size!r}")
        object.__setattr__(self, "fft_size", int(self.fft_size))
        if self.fft_size < 2 or self.fft_size & (self.fft_size - 1):
            raise InvalidTransformSize(f"fft_size must be a power of two >= 2, got {self.fft_size}")
        if not math.isfinite(self.sample_rate_hz) or self.sample_rate_hz <= 0:
            raise ValueError("sample_rate_hz must be > 0")
        if not math.isfinite(self.freq1_hz):
            raise ValueError("freq1_hz must be finite")
        if not math.isfinite(self.freq2_hz):
            raise ValueError("freq2_hz must be finite")


@dataclass(frozen=True, slots=True)
class Signal:
    """Finite real time series with its sample timestamps."""

    samples: FloatArray
    timestamps: FloatArray
    sample_rate_hz: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "samples", _frozen_copy(self.samples, "samples"))
        object.__setattr__(self, "timestamps", _frozen_copy(self.timestamps, "timestamps"))
        if self.samples.ndim != 1 or self.timestamps.ndim != 1:
            raise ValueError("samples and timestamps must be 1D")
        if self.samples.shape != self.timestamps.shape:
            raise ValueError("samples and timestamps must have equal length")
        if not math.isfinite(self.sample_rate_hz) or self.sample_rate_hz <= 0:
            raise ValueError("sample_rate_hz must be > 0")

    @property
    def size(self) -> int:
        """Number of samples."""
        return int(self.samples.size)


@dataclass(slots=True)
class ComplexBuffer:
    """Split real/imaginary working storage for one in-place transform.

    The buffer is owned by a single transform call, which rewrites both
    arrays in place. Both arrays must be C-contiguous float64 so that the
    butterfly stages can operate on reshaped views without copying.
    """

    real: FloatArray
    imag: FloatArray

    def __post_init__(self) -> None:
        for name, values in (("real", self.real), ("imag", self.imag)):
            if not isinstance(values, np.ndarray) or values.dtype != np.float64:
                raise ValueError(f"{name} must be a float64 numpy array")
            if values.ndim != 1:
                raise ValueError(f"{name} must be 1D")
            if not values.flags.c_contiguous or not values.flags.writeable:
                raise ValueError(f"{name} must be a writeable contiguous array")
        if self.real.shape != self.imag.shape:
            raise ValueError("real and imag must have equal length")

    @classmethod
    def from_real(cls, samples: npt.ArrayLike) -> ComplexBuffer:
        """Copy real-valued samples into a fresh buffer with zero imaginary part."""
        real = np.array(samples, dtype=np.float64, copy=True).reshape(-1)
        return cls(real=real, imag=np.zeros_like(real))

    @property
    def size(self) -> int:
        """Number of complex points."""
        return int(self.real.size)

    def as_complex(self) -> npt.NDArray[np.complex128]:
        """Return a complex128 copy of the current contents."""
        return self.real + 1j * self.imag


@dataclass(frozen=True, slots=True)
class Spectrum:
    """One-sided magnitude spectrum with physical frequency labels."""

    frequencies_hz: FloatArray
    magnitudes: FloatArray
    sample_rate_hz: float
    fft_size: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "frequencies_hz", _frozen_copy(self.frequencies_hz, "frequencies_hz"))
        object.__setattr__(self, "magnitudes", _frozen_copy(self.magnitudes, "magnitudes"))
        if self.frequencies_hz.shape != self.magnitudes.shape:
            raise ValueError("frequencies_hz and magnitudes must have equal length")
        if self.frequencies_hz.ndim != 1:
            raise ValueError("spectrum arrays must be 1D")
        if np.any(self.magnitudes < 0):
            raise ValueError("magnitudes must be non-negative")

    @property
    def size(self) -> int:
        """Number of retained bins."""
        return int(self.frequencies_hz.size)

    @property
    def bin_width_hz(self) -> float:
        """Spacing between adjacent bins."""
        return self.sample_rate_hz / self.fft_size


def _frozen_copy(values: npt.ArrayLike, name: str) -> FloatArray:
    try:
        copied = np.array(values, dtype=np.float64, copy=True)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be numeric array-like") from exc
    copied.setflags(write=False)
    return copied
