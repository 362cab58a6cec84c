"""Spectral analysis and reconstruction stages of the pipeline."""

from .envelope import analysis_offsets, extract_envelope
from .minimum_phase import EPSILON, hilbert_mask, minimum_phase_angles, reconstruct

__all__ = [
    "EPSILON",
    "analysis_offsets",
    "extract_envelope",
    "hilbert_mask",
    "minimum_phase_angles",
    "reconstruct",
]
