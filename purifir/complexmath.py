"""Complex-number helpers shared by the spectral code.

Spectral values are always the built-in :class:`complex` type.  It is
immutable, so the arithmetic operators ``+``, ``-`` and ``*`` already give
add / subtract / multiply that return new values.  Real-valued sequences
stay ``float`` until :func:`to_complex` promotes them at the first
transform.
"""

import cmath
import math


def to_complex(values):
    """Promote a sequence of real or complex values to a list of ``complex``."""
    return [complex(v) for v in values]


def conjugate_all(values):
    """Return the complex conjugate of every element of *values*."""
    return [complex(v).conjugate() for v in values]


def magnitude(z):
    """Return ``sqrt(re**2 + im**2)`` of a real or complex value."""
    return math.hypot(z.real, z.imag)


def magnitudes(spectrum):
    """Return the magnitude of each DFT bin."""
    return [magnitude(z) for z in spectrum]


def log(z):
    """Natural logarithm ``ln|z| + i*atan2(im, re)``.

    A real argument must be strictly positive (its angle is 0).  Callers
    taking the log of a magnitude add a small floor first.
    """
    if isinstance(z, complex):
        if z == 0:
            raise ValueError("log of zero is undefined")
        return cmath.log(z)
    if z <= 0:
        raise ValueError(f"log requires a positive real argument, got {z!r}")
    return complex(math.log(z), 0.0)


def rect(r, phi):
    """Polar to rectangular: ``r*cos(phi) + 1j*r*sin(phi)``."""
    return complex(r * math.cos(phi), r * math.sin(phi))


def polar_to_complex(mag, pha):
    """Build a complex spectrum from per-bin magnitude and phase."""
    return [rect(m, p) for m, p in zip(mag, pha)]
