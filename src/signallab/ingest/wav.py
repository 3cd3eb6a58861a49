"""WAV decoding adapter for the imported-audio path."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any, cast

import numpy as np
import numpy.typing as npt


FloatArray = npt.NDArray[np.float64]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DecodedAudio:
    """First channel of a decoded audio file as floats in [-1, 1]."""

    samples: FloatArray
    sample_rate_hz: float
    channel_count: int

    def __post_init__(self) -> None:
        if self.samples.ndim != 1:
            raise ValueError("samples must be 1D")
        if self.sample_rate_hz <= 0:
            raise ValueError("sample_rate_hz must be > 0")
        if self.channel_count <= 0:
            raise ValueError("channel_count must be > 0")

    @property
    def duration_seconds(self) -> float:
        """Length of the decoded channel in seconds."""
        return self.samples.size / self.sample_rate_hz


def load_wav_channel(wav_file: str | Path) -> DecodedAudio:
    """Load a WAV file and keep only its first channel."""
    path = Path(wav_file)
    if not path.exists():
        raise FileNotFoundError(f"Audio file does not exist: {path}")
    if path.suffix.lower() != ".wav":
        raise ValueError(f"Expected .wav file, got: {path}")

    sample_rate, raw = _read_wav(path)
    data = np.asarray(raw)
    channel_count = 1 if data.ndim == 1 else int(data.shape[1])
    first_channel = data if data.ndim == 1 else data[:, 0]
    samples = _to_unit_float(first_channel)
    logger.info(
        "Decoded %s: %d samples at %d Hz, %d channel(s); using channel 0",
        path.name,
        samples.size,
        sample_rate,
        channel_count,
    )
    return DecodedAudio(samples=samples, sample_rate_hz=float(sample_rate), channel_count=channel_count)


def _read_wav(path: Path) -> tuple[int, Any]:
    try:
        from scipy.io import wavfile  # type: ignore[import-untyped]
    except ImportError as exc:
        raise RuntimeError(
            "scipy is required to read .wav files. Install with `pip install -e '.[audio]'`."
        ) from exc
    return cast(tuple[int, Any], wavfile.read(path))


def _to_unit_float(values: npt.NDArray[Any]) -> FloatArray:
    if values.dtype == np.uint8:
        # 8-bit PCM is unsigned with a midpoint of 128.
        return (values.astype(np.float64) - 128.0) / 128.0
    if np.issubdtype(values.dtype, np.integer):
        scale = float(np.iinfo(values.dtype).max) + 1.0
        return values.astype(np.float64) / scale
    return np.asarray(values, dtype=np.float64)
