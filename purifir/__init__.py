"""purifir - minimum-phase impulse responses from audio samples.

A sample of any length is analysed with overlapping Hann windows, its
peak-hold magnitude spectrum is kept and the phase is replaced by the
minimum-phase phase derived from the real cepstrum.  The result is a
front-loaded FIR of a fixed power-of-two length, normalised to unit peak.

Pure Python, no external dependencies.
"""

from .buffers import AudioBufferPort, MemoryBuffer, SaveSink, normalize, to_mono
from .errors import InsufficientSamples, InvalidWindowSize, PuriFIRError
from .pipeline import DEFAULT_WINDOW_SIZE, PuriFIR, process

__version__ = "0.1.0"

__all__ = [
    "AudioBufferPort",
    "DEFAULT_WINDOW_SIZE",
    "InsufficientSamples",
    "InvalidWindowSize",
    "MemoryBuffer",
    "PuriFIR",
    "PuriFIRError",
    "SaveSink",
    "normalize",
    "process",
    "to_mono",
]
