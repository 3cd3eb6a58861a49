"""Deterministic synthetic signal generation."""

from signallab.synthesis.generator import generate, synthesize_unwindowed

__all__ = ["generate", "synthesize_unwindowed"]
