"""Value types flowing through the synthesis and analysis pipeline."""

from signallab.domain.models import (
    AnalysisOptions,
    ComplexBuffer,
    Signal,
    Spectrum,
    WaveformKind,
    parse_waveform_kind,
)

__all__ = [
    "AnalysisOptions",
    "ComplexBuffer",
    "Signal",
    "Spectrum",
    "WaveformKind",
    "parse_waveform_kind",
]
