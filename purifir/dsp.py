"""Pure-Python DSP primitives: Hann window and radix-2 FFT / IFFT."""

import cmath
import math

from .complexmath import conjugate_all, to_complex
from .errors import InvalidWindowSize


# ---------------------------------------------------------------------------
# Window functions
# ---------------------------------------------------------------------------

def hann_window(length):
    """Return a periodic Hann window of the given *length*."""
    return [
        0.5 - 0.5 * math.cos(2.0 * math.pi * n / length)
        for n in range(length)
    ]


# ---------------------------------------------------------------------------
# Size checks
# ---------------------------------------------------------------------------

def is_power_of_two(n):
    """Return True if *n* is an int equal to 1, 2, 4, 8, ..."""
    if isinstance(n, bool) or not isinstance(n, int):
        return False
    return n > 0 and n & (n - 1) == 0


def validate_window_size(window_size):
    """Return *window_size* unchanged or raise :class:`InvalidWindowSize`.

    A usable analysis window is a power of two of at least 2, so that the
    half-window hop is non-zero.
    """
    if not is_power_of_two(window_size) or window_size < 2:
        raise InvalidWindowSize(
            f"Window size must be a power of two >= 2, got {window_size!r}"
        )
    return window_size


# ---------------------------------------------------------------------------
# FFT / IFFT  (iterative Cooley-Tukey radix-2)
# ---------------------------------------------------------------------------

def _bit_reverse(index, bits):
    """Reverse the lowest *bits* bits of *index*."""
    result = 0
    for _ in range(bits):
        result = (result << 1) | (index & 1)
        index >>= 1
    return result


def fft(x):
    """Compute the DFT of sequence *x* (list of float/complex).

    The input is reordered by bit reversal and then combined in
    ``log2(N)`` butterfly stages.  Returns the unnormalised forward
    transform ``X[k] = sum(x[n] * exp(-2j*pi*k*n/N))``.

    The twiddle root is ``exp(-1j*pi/m2)``.  Engines built on the
    ``exp(+1j*pi/m2)`` root return the complex conjugate of this result
    for real input; magnitudes, and the minimum-phase impulse derived
    from them, are the same under either sign.

    Raises
    ------
    InvalidWindowSize
        If ``len(x)`` is not a power of two.
    """
    n = len(x)
    if not is_power_of_two(n):
        raise InvalidWindowSize(f"FFT length must be a power of two, got {n}")

    bits = n.bit_length() - 1
    values = to_complex(x)
    X = [values[_bit_reverse(i, bits)] for i in range(n)]

    # Groups within a stage are independent; stages must run in order.
    for s in range(1, bits + 1):
        m = 1 << s
        m2 = m >> 1
        wm = cmath.exp(-1j * math.pi / m2)
        w = complex(1.0, 0.0)
        for j in range(m2):
            for k in range(j, n, m):
                t = w * X[k + m2]
                u = X[k]
                X[k] = u + t
                X[k + m2] = u - t
            w *= wm
    return X


def ifft(X):
    """Compute the inverse DFT of spectrum *X*."""
    n = len(X)
    # IDFT via conjugate trick: ifft(X) = conj(fft(conj(X))) / N
    result = fft(conjugate_all(X))
    return [z.conjugate() / n for z in result]
