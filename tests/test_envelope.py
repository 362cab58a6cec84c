"""Tests for purifir.algorithms.envelope – peak-hold spectral envelope."""

import random
import unittest

from purifir.algorithms.envelope import analysis_offsets, extract_envelope
from purifir.complexmath import magnitudes
from purifir.dsp import fft, hann_window
from purifir.errors import InsufficientSamples, InvalidWindowSize


class TestAnalysisOffsets(unittest.TestCase):
    def test_two_frames_for_twice_the_window(self):
        self.assertEqual(analysis_offsets(4096, 2048), [0, 1024])

    def test_exact_window_gives_one_frame(self):
        self.assertEqual(analysis_offsets(2048, 2048), [0])

    def test_half_overlap(self):
        # The last frame (offset 80) still has 20 > 16 samples ahead of it.
        self.assertEqual(analysis_offsets(100, 16), list(range(0, 81, 8)))

    def test_short_input_rejected(self):
        with self.assertRaises(InsufficientSamples):
            analysis_offsets(1000, 2048)

    def test_bad_window_rejected(self):
        with self.assertRaises(InvalidWindowSize):
            analysis_offsets(4096, 3000)


class TestExtractEnvelope(unittest.TestCase):
    def test_single_frame_matches_windowed_fft(self):
        rng = random.Random(7)
        n = 64
        sig = [rng.uniform(-1, 1) for _ in range(n)]
        w = hann_window(n)
        expected = magnitudes(fft([sig[i] * w[i] for i in range(n)]))
        env = extract_envelope(sig, n)
        self.assertEqual(len(env), n)
        for i in range(n):
            self.assertAlmostEqual(env[i], expected[i], places=12, msg=f"bin {i}")

    def test_peak_hold_keeps_louder_frame(self):
        # Window 8, hop 4, 13 samples -> frames at offsets 0 and 4.
        # Frame 1 sees only the tail of the step, frame 2 sees all of it.
        n = 8
        sig = [0.0] * 4 + [1.0] * 9
        self.assertEqual(analysis_offsets(len(sig), n), [0, 4])

        w = hann_window(n)
        frame1_dc = abs(fft([sig[i] * w[i] for i in range(n)])[0])
        frame2_dc = abs(fft([sig[4 + i] * w[i] for i in range(n)])[0])
        self.assertGreater(frame2_dc, frame1_dc)

        env = extract_envelope(sig, n)
        self.assertAlmostEqual(env[0], frame2_dc, places=12)
        self.assertAlmostEqual(env[0], 4.0, places=12)

    def test_more_frames_never_lower_a_bin(self):
        rng = random.Random(11)
        n = 8
        sig = [rng.uniform(-1, 1) for _ in range(13)]
        one_frame = extract_envelope(sig[:9], n)
        two_frames = extract_envelope(sig, n)
        for i in range(n):
            self.assertGreaterEqual(two_frames[i], one_frame[i])

    def test_silence_gives_zero_envelope(self):
        self.assertEqual(extract_envelope([0.0] * 32, 16), [0.0] * 16)

    def test_custom_window(self):
        sig = [1.0] * 16
        env = extract_envelope(sig, 16, window=[1.0] * 16)
        self.assertAlmostEqual(env[0], 16.0)
        for i in range(1, 16):
            self.assertAlmostEqual(env[i], 0.0, places=9)

    def test_window_length_mismatch(self):
        with self.assertRaises(ValueError):
            extract_envelope([0.0] * 32, 16, window=[1.0] * 8)

    def test_short_channel_rejected(self):
        with self.assertRaises(InsufficientSamples):
            extract_envelope([0.0] * 1000, 2048)


if __name__ == "__main__":
    unittest.main()
