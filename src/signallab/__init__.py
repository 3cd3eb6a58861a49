"""Signal synthesis and radix-2 FFT spectrum analysis."""

from signallab.domain.models import (
    AnalysisOptions,
    ComplexBuffer,
    Signal,
    Spectrum,
    WaveformKind,
    parse_waveform_kind,
)
from signallab.dsp.fft import transform_in_place
from signallab.dsp.frequency import SpectrumSummary, analyze, summarize_spectrum
from signallab.errors import InvalidTransformSize, InvalidWaveformKind, SignalLabError
from signallab.ingest.frame import extract_frame
from signallab.pipeline import AnalysisResult, analyze_imported, analyze_synthetic, analyze_wav_file
from signallab.synthesis.generator import generate

__all__ = [
    "AnalysisOptions",
    "AnalysisResult",
    "ComplexBuffer",
    "InvalidTransformSize",
    "InvalidWaveformKind",
    "Signal",
    "SignalLabError",
    "Spectrum",
    "SpectrumSummary",
    "WaveformKind",
    "analyze",
    "analyze_imported",
    "analyze_synthetic",
    "analyze_wav_file",
    "extract_frame",
    "generate",
    "parse_waveform_kind",
    "summarize_spectrum",
    "transform_in_place",
]
