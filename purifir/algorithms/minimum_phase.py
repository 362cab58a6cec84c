"""Minimum-phase reconstruction from a magnitude spectrum.

The phase of a minimum-phase filter is the Hilbert transform of its
log-magnitude.  Working on the real cepstrum this becomes a causal fold:
quefrency 0 and N/2 are kept, 1..N/2-1 are doubled and the negative
quefrencies are discarded.  The inverse transform of the folded cepstrum
is the analytic signal whose imaginary part carries the phase.

Reference:
    Oppenheim, A. V. & Schafer, R. W. "Discrete-Time Signal Processing",
    ch. 13 (the real cepstrum and minimum-phase systems).
"""

from ..complexmath import log, polar_to_complex
from ..dsp import fft, ifft, validate_window_size

#: Floor added to each magnitude before its logarithm is taken.
EPSILON = 1e-6


def hilbert_mask(n):
    """Return the length-*n* cepstral fold ``[1, 2, ..., 2, 1, 0, ..., 0]``."""
    half = n // 2
    mask = [0.0] * n
    mask[0] = 1.0
    mask[half] = 1.0
    for i in range(1, half):
        mask[i] = 2.0
    return mask


def minimum_phase_angles(envelope):
    """Return the minimum-phase angle (radians) of each bin of *envelope*."""
    n = len(envelope)
    validate_window_size(n)

    log_mag = [log(m + EPSILON) for m in envelope]
    cepstrum = fft(log_mag)
    folded = [c * h for c, h in zip(cepstrum, hilbert_mask(n))]
    analytic = ifft(folded)
    return [-z.imag for z in analytic]


def reconstruct(envelope):
    """Build the minimum-phase impulse response for a magnitude *envelope*.

    Parameters
    ----------
    envelope : list[float]
        Non-negative per-bin magnitudes; the length must be a power of two.

    Returns
    -------
    list[float]
        Causal impulse of ``len(envelope)`` samples whose magnitude
        spectrum equals *envelope*.
    """
    spectrum = polar_to_complex(envelope, minimum_phase_angles(envelope))
    # The imaginary residue is rounding noise.
    return [z.real for z in ifft(spectrum)]
