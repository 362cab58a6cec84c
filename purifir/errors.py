"""Exceptions raised by purifir."""


class PuriFIRError(ValueError):
    """Base class for input the impulse-response pipeline cannot process."""


class InvalidWindowSize(PuriFIRError):
    """Window or transform length is not a power of two."""


class InsufficientSamples(PuriFIRError):
    """A channel holds fewer samples than one analysis window."""
