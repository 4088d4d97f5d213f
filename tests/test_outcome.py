import unittest

from lunar_config import LandingConfig
from lunar_outcome import Outcome, classify_landing


class TestClassifyLanding(unittest.TestCase):
    def test_nearly_flat_and_slow_lands(self):
        report = classify_landing((0, 100), (0, 101), (1000, 1000))
        self.assertEqual(report.outcome, Outcome.LANDED)

    def test_steep_ground_crashes_regardless_of_speed(self):
        for velocity in [(0, 0), (1000, 1000), (-50000, -50000)]:
            report = classify_landing((0, 100), (0, 200), velocity)
            self.assertEqual(report.outcome, Outcome.CRASHED)
            self.assertIn("not flat", report.reason)

    def test_flatness_tolerance_is_inclusive(self):
        self.assertEqual(classify_landing((0, 100), (30, 102), (0, 0)).outcome, Outcome.LANDED)
        self.assertEqual(classify_landing((0, 100), (30, 102.5), (0, 0)).outcome, Outcome.CRASHED)

    def test_too_fast_horizontally(self):
        report = classify_landing((0, 100), (30, 100), (70001, 0))
        self.assertEqual(report.outcome, Outcome.CRASHED)
        self.assertIn("horizontal", report.reason)

    def test_too_fast_vertically(self):
        report = classify_landing((0, 100), (30, 100), (0, 60001))
        self.assertEqual(report.outcome, Outcome.CRASHED)
        self.assertIn("vertical", report.reason)

    def test_speed_limits_are_inclusive(self):
        report = classify_landing((0, 100), (30, 100), (70000, 60000))
        self.assertEqual(report.outcome, Outcome.LANDED)

    def test_negative_speeds_not_limited_by_default(self):
        self.assertEqual(classify_landing((0, 100), (30, 100), (-200000, 0)).outcome, Outcome.LANDED)
        self.assertEqual(classify_landing((0, 100), (30, 100), (0, -200000)).outcome, Outcome.LANDED)

    def test_symmetric_check_limits_both_directions(self):
        cfg = LandingConfig(symmetric_speed_check=True)
        self.assertEqual(classify_landing((0, 100), (30, 100), (-200000, 0), cfg).outcome,
                         Outcome.CRASHED)
        self.assertEqual(classify_landing((0, 100), (30, 100), (0, -200000), cfg).outcome,
                         Outcome.CRASHED)
        self.assertEqual(classify_landing((0, 100), (30, 100), (-1000, -1000), cfg).outcome,
                         Outcome.LANDED)

    def test_custom_limits(self):
        cfg = LandingConfig(max_horizontal_speed=10, max_vertical_speed=10, flatness_tolerance=0)
        self.assertEqual(classify_landing((0, 5), (1, 5), (10, 10), cfg).outcome, Outcome.LANDED)
        self.assertEqual(classify_landing((0, 5), (1, 6), (0, 0), cfg).outcome, Outcome.CRASHED)
        self.assertEqual(classify_landing((0, 5), (1, 5), (11, 0), cfg).outcome, Outcome.CRASHED)


class TestOutcome(unittest.TestCase):
    def test_finished(self):
        self.assertFalse(Outcome.RUNNING.finished)
        self.assertTrue(Outcome.CRASHED.finished)
        self.assertTrue(Outcome.LANDED.finished)


if __name__ == "__main__":
    unittest.main()
