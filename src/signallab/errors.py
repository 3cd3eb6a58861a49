"""Error taxonomy for spectral analysis contract violations."""

from __future__ import annotations


class SignalLabError(Exception):
    """Base class for all SignalLab precondition failures."""


class InvalidTransformSize(SignalLabError, ValueError):
    """Transform size or sample-buffer length is not a positive power of two."""


class InvalidWaveformKind(SignalLabError, ValueError):
    """Waveform kind is outside the supported enumeration."""
