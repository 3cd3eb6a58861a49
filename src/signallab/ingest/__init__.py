"""Adapters that turn externally decoded audio into analysis frames."""

from signallab.ingest.frame import extract_frame
from signallab.ingest.wav import DecodedAudio, load_wav_channel

__all__ = ["DecodedAudio", "extract_frame", "load_wav_channel"]
