"""Sample-to-impulse-response pipeline.

Each input channel is reduced to a peak-hold magnitude envelope, turned
into a minimum-phase impulse of ``window_size`` samples, and the
finished multi-channel result is normalised to unit peak.
"""

import logging

from .algorithms.envelope import extract_envelope
from .algorithms.minimum_phase import reconstruct
from .buffers import normalize
from .dsp import hann_window, validate_window_size
from .errors import InsufficientSamples, PuriFIRError

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = 4096
TYPICAL_WINDOW_SIZES = (2048, 4096, 8192, 16384)


class PuriFIR:
    """Convert audio samples into a normalised minimum-phase impulse response.

    Parameters
    ----------
    window_size : int
        Length of the analysis window and of the produced IR.  Must be a
        power of two; :class:`~purifir.errors.InvalidWindowSize` is raised
        otherwise.
    """

    def __init__(self, window_size=DEFAULT_WINDOW_SIZE):
        self.window_size = validate_window_size(window_size)
        self.window = tuple(hann_window(window_size))
        if window_size not in TYPICAL_WINDOW_SIZES:
            logger.debug("Using uncommon window size %d", window_size)

    def process(self, channels):
        """Return one IR channel of ``window_size`` samples per input channel.

        Every channel is checked before any computation starts.  Channels
        are processed independently; normalisation is applied once over
        the whole result.
        """
        if not channels:
            raise PuriFIRError("At least one input channel is required")
        for idx, ch in enumerate(channels):
            if len(ch) < self.window_size:
                raise InsufficientSamples(
                    f"Channel {idx} has {len(ch)} samples; "
                    f"window size {self.window_size} needs at least that many"
                )

        logger.debug(
            "Processing %d channel(s) with window size %d",
            len(channels), self.window_size,
        )
        output = [self.process_channel(ch) for ch in channels]
        peak = normalize(output)
        logger.debug("Normalised impulse response (peak before scaling %.6g)", peak)
        return output

    def process_channel(self, samples):
        """Return the un-normalised minimum-phase IR of a single channel."""
        envelope = extract_envelope(samples, self.window_size, self.window)
        return reconstruct(envelope)

    def process_port(self, source, destination, sink=None):
        """Run the pipeline between two :class:`~purifir.buffers.AudioBufferPort` objects.

        Reads every channel of *source* once, clears and resizes
        *destination* to the IR shape, writes each IR channel once at
        offset 0 and, if given, passes the result to *sink* (a
        :class:`~purifir.buffers.SaveSink`) afterwards.  *destination* is
        untouched if processing fails.
        """
        n_channels = source.channel_count()
        n_frames = source.frame_count()
        if n_frames < self.window_size:
            raise InsufficientSamples(
                f"Source holds {n_frames} frames; "
                f"window size {self.window_size} needs at least that many"
            )

        inputs = [source.read(ch, 0, n_frames) for ch in range(n_channels)]
        output = self.process(inputs)
        destination.resize(len(output), self.window_size)
        for ch, samples in enumerate(output):
            destination.write(ch, 0, samples)

        if sink is not None:
            sink.save(output, self.window_size)
        return output


def process(channels, window_size=DEFAULT_WINDOW_SIZE):
    """Convenience wrapper: ``PuriFIR(window_size).process(channels)``."""
    return PuriFIR(window_size).process(channels)
