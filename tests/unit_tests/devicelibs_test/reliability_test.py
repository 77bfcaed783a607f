import math
import unittest

from raidcalc.devicelibs import power, reliability
from raidcalc.errors import RaidError


class ReliabilityTestCase(unittest.TestCase):

    def test_rebuild_hours(self):
        # 1 TB at 100 MB/s: 1048576 MB / 360000 MB per hour
        self.assertAlmostEqual(reliability.get_rebuild_hours(1, 100), 1048576 / 360000)
        self.assertAlmostEqual(reliability.get_rebuild_hours(4, 100), 4 * 1048576 / 360000)
        self.assertEqual(reliability.get_rebuild_hours(0, 100), 0)

        # faster rebuilds are shorter
        times = [reliability.get_rebuild_hours(8, speed) for speed in (10, 50, 100, 250, 1000)]
        self.assertEqual(times, sorted(times, reverse=True))
        self.assertEqual(len(set(times)), len(times))

        with self.assertRaisesRegex(RaidError, "rebuild speed"):
            reliability.get_rebuild_hours(4, 0)
        with self.assertRaises(RaidError):
            reliability.get_rebuild_hours(4, -10)

    def test_ure_probability(self):
        bits = 4 * 8 * 2 ** 40
        expected = 1 - math.exp(bits * math.log1p(-1e-14))
        self.assertAlmostEqual(reliability.get_ure_probability(4, 1e-14), expected, places=12)
        self.assertAlmostEqual(reliability.get_ure_probability(4, 1e-14), 0.2966, places=4)

        self.assertEqual(reliability.get_ure_probability(4, 0), 0.0)
        self.assertEqual(reliability.get_ure_probability(0, 1e-14), 0.0)
        self.assertEqual(reliability.get_ure_probability(4, 1), 1.0)

        # stays strictly monotonic even for tiny rates
        probs = [reliability.get_ure_probability(4, rate) for rate in (1e-18, 1e-17, 1e-16, 1e-15, 1e-14)]
        for (lower, higher) in zip(probs, probs[1:]):
            self.assertLess(lower, higher)
        self.assertGreater(probs[0], 0)

    def test_data_loss_probability(self):
        self.assertAlmostEqual(reliability.get_data_loss_probability(0.5, 3, 8760), 0.015)
        self.assertAlmostEqual(reliability.get_data_loss_probability(1, 2, 87.6), 0.0002)
        self.assertEqual(reliability.get_data_loss_probability(0.5, 0, 10), 0)


class PowerTestCase(unittest.TestCase):

    def test_power(self):
        self.assertEqual(power.get_total_power(4, 5), 20)
        self.assertAlmostEqual(power.get_annual_energy(20), 175.2)
        self.assertAlmostEqual(power.get_heat_output(20), 68.24)
        self.assertEqual(power.get_annual_energy(0), 0)
