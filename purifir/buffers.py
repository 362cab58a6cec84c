"""Multi-channel sample buffers: normalisation, down-mix and host ports.

Channels are plain lists of floats, one list per channel.
"""

import abc


def normalize(channels):
    """Scale *channels* in place so the largest absolute sample is 1.0.

    The peak is taken across every channel, so relative channel levels are
    kept.  An all-zero buffer is left untouched.  Returns the peak found
    before scaling.
    """
    peak = max((abs(v) for ch in channels for v in ch), default=0.0)
    if peak > 0.0:
        for ch in channels:
            for i in range(len(ch)):
                ch[i] /= peak
    return peak


def to_mono(channels):
    """Average equal-length *channels* into a single channel.

    Raises ``ValueError`` for an empty channel list or ragged channels.
    """
    if not channels:
        raise ValueError("Cannot down-mix an empty channel list")
    lengths = {len(ch) for ch in channels}
    if len(lengths) != 1:
        raise ValueError(f"Channels differ in length: {sorted(lengths)}")
    scale = 1.0 / len(channels)
    return [sum(frame) * scale for frame in zip(*channels)]


# ---------------------------------------------------------------------------
# Ports to the host environment
# ---------------------------------------------------------------------------

class AudioBufferPort(abc.ABC):
    """Sample storage owned by the caller.

    The pipeline never allocates or frees a port; it reads each channel
    once, resizes the destination to the result and writes each output
    channel once.
    """

    @abc.abstractmethod
    def channel_count(self):
        """Number of channels."""

    @abc.abstractmethod
    def frame_count(self):
        """Number of samples per channel."""

    @abc.abstractmethod
    def read(self, channel, offset, count):
        """Return *count* samples of *channel* starting at *offset*."""

    @abc.abstractmethod
    def write(self, channel, offset, samples):
        """Store *samples* into *channel* starting at *offset*."""

    @abc.abstractmethod
    def resize(self, channels, frames):
        """Discard all content and hold *channels* x *frames* of silence."""


class SaveSink(abc.ABC):
    """Receives a finished impulse response, e.g. to persist it."""

    @abc.abstractmethod
    def save(self, channels, window_size):
        """Persist *channels*, an IR of *window_size* samples per channel."""


class MemoryBuffer(AudioBufferPort):
    """In-memory :class:`AudioBufferPort` backed by a list of lists.

    Writing past the current end grows the buffer: missing channels are
    added and short channels are zero-padded.
    """

    def __init__(self, channels=None):
        self.channels = [list(ch) for ch in channels or []]

    def channel_count(self):
        return len(self.channels)

    def frame_count(self):
        return max((len(ch) for ch in self.channels), default=0)

    def read(self, channel, offset, count):
        return self.channels[channel][offset:offset + count]

    def write(self, channel, offset, samples):
        while len(self.channels) <= channel:
            self.channels.append([])
        data = self.channels[channel]
        end = offset + len(samples)
        if len(data) < end:
            data.extend([0.0] * (end - len(data)))
        data[offset:end] = samples

    def resize(self, channels, frames):
        self.channels = [[0.0] * frames for _ in range(channels)]
