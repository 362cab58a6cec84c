"""Peak-hold spectral envelope.

A Hann-windowed analysis frame slides across one channel with 50 %
overlap.  For every FFT bin the largest magnitude seen in any frame is
kept, so the envelope follows the loudest moment of each frequency
rather than its average over the sample.
"""

from ..complexmath import magnitudes
from ..dsp import fft, hann_window, validate_window_size
from ..errors import InsufficientSamples


def analysis_offsets(n_samples, window_size):
    """Return the start offsets of the analysis frames for one channel.

    Frames advance by ``window_size // 2``.  The first frame always starts
    at 0; a later frame is taken only while more than *window_size*
    samples remain from its start.  4096 samples with a 2048 window give
    offsets ``[0, 1024]``.
    """
    validate_window_size(window_size)
    if n_samples < window_size:
        raise InsufficientSamples(
            f"Need at least {window_size} samples, got {n_samples}"
        )

    hop = window_size // 2
    offsets = [0]
    pos = hop
    while n_samples - pos > window_size:
        offsets.append(pos)
        pos += hop
    return offsets


def extract_envelope(samples, window_size, window=None):
    """Compute the peak-hold magnitude envelope of *samples*.

    Parameters
    ----------
    samples : list[float]
        One channel of audio, at least *window_size* long.
    window_size : int
        FFT length (power of two).
    window : sequence[float] | None
        Analysis window of length *window_size*.  Defaults to Hann.

    Returns
    -------
    list[float]
        *window_size* magnitudes; bin 0 is DC, bin ``window_size // 2``
        is Nyquist and higher bins mirror the negative frequencies.
    """
    validate_window_size(window_size)
    if window is None:
        window = hann_window(window_size)
    elif len(window) != window_size:
        raise ValueError(
            f"Window length {len(window)} does not match window size {window_size}"
        )

    envelope = [0.0] * window_size
    for pos in analysis_offsets(len(samples), window_size):
        frame = [samples[pos + i] * window[i] for i in range(window_size)]
        for i, mag in enumerate(magnitudes(fft(frame))):
            if mag > envelope[i]:
                envelope[i] = mag
    return envelope
