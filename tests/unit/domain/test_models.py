"""Tests for analysis value types."""

from __future__ import annotations

import numpy as np
import pytest

from signallab import AnalysisOptions, ComplexBuffer, InvalidTransformSize, InvalidWaveformKind, Signal, Spectrum, WaveformKind
from signallab import parse_waveform_kind


def test_analysis_options_defaults_are_valid() -> None:
    options = AnalysisOptions()
    assert options.fft_size == 1024
    assert options.sample_rate_hz == 2048.0
    assert (options.freq1_hz, options.freq2_hz) == (50.0, 120.0)


def test_analysis_options_validation() -> None:
    with pytest.raises(InvalidTransformSize):
        AnalysisOptions(fft_size=0)
    with pytest.raises(InvalidTransformSize):
        AnalysisOptions(fft_size=-8)
    with pytest.raises(ValueError, match="sample_rate_hz"):
        AnalysisOptions(sample_rate_hz=0.0)
    with pytest.raises(ValueError, match="freq1_hz"):
        AnalysisOptions(freq1_hz=float("nan"))


def test_parse_waveform_kind_normalizes_aliases() -> None:
    assert parse_waveform_kind(" Sine ") is WaveformKind.SINE
    assert parse_waveform_kind("dual-tone") is WaveformKind.DUAL_TONE
    assert parse_waveform_kind("CHIRP") is WaveformKind.CHIRP
    assert parse_waveform_kind(WaveformKind.SQUARE) is WaveformKind.SQUARE


def test_parse_waveform_kind_rejects_unknown_values() -> None:
    with pytest.raises(InvalidWaveformKind):
        parse_waveform_kind("sawtooth")
    with pytest.raises(InvalidWaveformKind):
        parse_waveform_kind(3)  # type: ignore[arg-type]


def test_signal_freezes_arrays_and_checks_lengths() -> None:
    signal = Signal(samples=np.zeros(4), timestamps=np.arange(4) / 4.0, sample_rate_hz=4.0)
    assert signal.size == 4
    with pytest.raises(ValueError):
        signal.samples[0] = 1.0
    with pytest.raises(ValueError, match="equal length"):
        Signal(samples=np.zeros(4), timestamps=np.zeros(3), sample_rate_hz=4.0)


def test_complex_buffer_from_real_copies_input() -> None:
    samples = np.asarray([1.0, 2.0])
    buffer = ComplexBuffer.from_real(samples)
    buffer.real[0] = 9.0

    assert samples.tolist() == [1.0, 2.0]
    assert buffer.imag.tolist() == [0.0, 0.0]


def test_complex_buffer_rejects_read_only_storage() -> None:
    real = np.zeros(4)
    real.setflags(write=False)
    with pytest.raises(ValueError, match="writeable"):
        ComplexBuffer(real=real, imag=np.zeros(4))


def test_analysis_options_accepts_numpy_integer_size() -> None:
    options = AnalysisOptions(fft_size=np.int64(8), sample_rate_hz=8.0, freq1_hz=1.0, freq2_hz=0.0)

    assert options.fft_size == 8
    assert type(options.fft_size) is int


def test_signal_copies_caller_owned_arrays() -> None:
    samples = np.zeros(4)
    timestamps = np.arange(4) / 4.0
    signal = Signal(samples=samples, timestamps=timestamps, sample_rate_hz=4.0)

    samples[0] = 1.0
    timestamps[1] = 9.0

    assert signal.samples[0] == 0.0
    assert signal.timestamps[1] == 0.25


def test_signal_built_from_view_is_isolated_from_base() -> None:
    base = np.zeros(8)
    signal = Signal(samples=base[:4], timestamps=np.arange(4) / 4.0, sample_rate_hz=4.0)

    base[0] = 5.0

    assert signal.samples[0] == 0.0
    assert not signal.samples.flags.writeable


def test_spectrum_copies_caller_owned_arrays() -> None:
    frequencies = np.asarray([0.0, 1.0])
    magnitudes = np.asarray([0.5, 0.25])
    spectrum = Spectrum(frequencies_hz=frequencies, magnitudes=magnitudes, sample_rate_hz=4.0, fft_size=4)

    magnitudes[0] = 3.0

    assert spectrum.magnitudes[0] == 0.5
    with pytest.raises(ValueError):
        spectrum.magnitudes[0] = 1.0


def test_signal_accepts_lists_and_rejects_non_numeric_input() -> None:
    signal = Signal(samples=[0.0, 1.0], timestamps=[0.0, 0.5], sample_rate_hz=2.0)  # type: ignore[arg-type]
    assert signal.samples.dtype == np.float64
    assert signal.size == 2

    with pytest.raises(ValueError, match="samples"):
        Signal(samples=["a", "b"], timestamps=[0.0, 0.5], sample_rate_hz=2.0)  # type: ignore[arg-type]


@pytest.mark.parametrize("rate", [float("nan"), float("inf"), 0.0])
def test_signal_rejects_non_finite_sample_rate(rate: float) -> None:
    with pytest.raises(ValueError, match="sample_rate_hz"):
        Signal(samples=np.zeros(2), timestamps=np.zeros(2), sample_rate_hz=rate)
