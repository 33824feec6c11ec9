"""Unit tests for profile.py."""

import time
import unittest

from gpt3enc.utils.profile import Profile


class TestProfile(unittest.TestCase):
    """Unit tests for Profile."""

    def test_basic(self) -> None:
        """Test the ability to use Profile as a context manager."""
        with Profile("sleep") as prof:
            time.sleep(0.1)

        self.assertGreaterEqual(prof.seconds, 0.1)
        self.assertGreaterEqual(prof.milliseconds, 100)

    def test_exception(self) -> None:
        """Test that exceptions flow through the exception manager and profiling is still recorded."""
        with self.assertRaises(ValueError) as cm:
            with Profile() as prof:
                time.sleep(0.1)
                raise ValueError("some error")

        self.assertEqual(str(cm.exception), "some error")
        self.assertGreaterEqual(prof.milliseconds, 100)

    def test_throughput(self) -> None:
        prof = Profile()
        prof.duration = 2.0
        self.assertAlmostEqual(prof.megabytes_per_second(4 * 1024 * 1024), 2.0)

        self.assertEqual(Profile().megabytes_per_second(1024), float("inf"))

    def test_report(self) -> None:
        prof = Profile("encode")
        prof.duration = 1.5

        self.assertEqual(prof.report(), f"{'encode':<18}:  1,500.0 ms")
        self.assertTrue(prof.report(num_bytes=3 * 1024 * 1024).endswith("ms (2.00 MB/s)"))
