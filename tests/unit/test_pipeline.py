"""Tests for end-to-end synthetic and imported-audio analysis."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from signallab import AnalysisOptions, WaveformKind, analyze_imported, analyze_synthetic, analyze_wav_file


def test_analyze_synthetic_dual_tone_reports_primary_peak() -> None:
    options = AnalysisOptions(fft_size=1024, sample_rate_hz=2048.0, freq1_hz=50.0, freq2_hz=120.0)
    result = analyze_synthetic(WaveformKind.DUAL_TONE, options)

    assert result.label == "Synthetic dual signal with f1=50 Hz, f2=120 Hz"
    assert result.spectrum.size == 512
    assert result.summary.dominant_frequency_hz == pytest.approx(50.0, abs=result.spectrum.bin_width_hz)


def test_analyze_imported_labels_source_and_detects_tone() -> None:
    sample_rate = 8000.0
    t = np.arange(8000) / sample_rate
    tone = np.sin(2.0 * np.pi * 100.0 * t)

    result = analyze_imported(tone, sample_rate, 1024, source_name="tone.wav")

    assert result.label == "Audio file: tone.wav, sampleRate=8000 Hz"
    assert result.signal.size == 1024
    assert result.spectrum.size == 512
    assert np.all(result.spectrum.magnitudes >= 0)


def test_analyze_imported_window_flag_changes_frame() -> None:
    samples = np.ones(64)
    windowed = analyze_imported(samples, 64.0, 64, source_name="dc", apply_window=True)
    raw = analyze_imported(samples, 64.0, 64, source_name="dc", apply_window=False)

    assert raw.signal.samples[0] == 1.0
    assert windowed.signal.samples[0] == 0.0


def test_to_jsonable_optionally_includes_bins() -> None:
    result = analyze_synthetic("sine", AnalysisOptions(fft_size=8, sample_rate_hz=8.0, freq1_hz=1.0, freq2_hz=0.0))

    compact = result.to_jsonable()
    full = result.to_jsonable(include_bins=True)

    assert "bins" not in compact
    assert compact["bin_width_hz"] == 1.0
    assert full["bins"]["frequencies_hz"] == [0.0, 1.0, 2.0, 3.0]
    assert set(compact["summary"]) == {
        "dominant_frequency_hz",
        "dominant_magnitude",
        "spectral_centroid_hz",
        "spectral_rms",
        "total_energy",
    }


def test_analyze_wav_file_uses_decoded_rate(tmp_path: Path) -> None:
    wavfile = pytest.importorskip("scipy.io.wavfile")
    rate = 4096
    t = np.arange(4096) / rate
    path = tmp_path / "clip.wav"
    wavfile.write(path, rate, (0.5 * np.sin(2.0 * np.pi * 256.0 * t)).astype(np.float32))

    result = analyze_wav_file(path, 4096)

    assert result.label == "Audio file: clip.wav, sampleRate=4096 Hz"
    assert result.summary.dominant_frequency_hz == pytest.approx(256.0)
