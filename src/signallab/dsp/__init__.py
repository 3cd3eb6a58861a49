"""Window, transform, and spectrum primitives."""

from signallab.dsp.fft import (
    bit_reversal_permutation,
    is_power_of_two,
    require_power_of_two,
    reverse_bits,
    transform_in_place,
    twiddle_tables,
)
from signallab.dsp.frequency import SpectrumSummary, analyze, frequency_bins_hz, summarize_spectrum
from signallab.dsp.windowing import apply_window, hann_coefficient, hann_window

__all__ = [
    "SpectrumSummary",
    "analyze",
    "apply_window",
    "bit_reversal_permutation",
    "frequency_bins_hz",
    "hann_coefficient",
    "hann_window",
    "is_power_of_two",
    "require_power_of_two",
    "reverse_bits",
    "summarize_spectrum",
    "transform_in_place",
    "twiddle_tables",
]
