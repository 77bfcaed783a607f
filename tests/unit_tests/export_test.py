import unittest

from raidcalc.array import Drive, OperatingParameters, evaluate
from raidcalc.export import EXPORT_FIELDS, UNDEFINED_VALUE, export_csv, export_filename, export_record


class ExportTestCase(unittest.TestCase):

    def test_record(self):
        result = evaluate([4, 4, 4, 4], "5")
        record = export_record(result)
        self.assertEqual(list(record.keys()), EXPORT_FIELDS)
        self.assertEqual(record["raidLevel"], "5")
        self.assertEqual(record["drives"], "4")
        self.assertEqual(record["driveCapacity"], "4")
        self.assertEqual(record["hotSpares"], "0")
        self.assertEqual(record["usableCapacity"], "12.00")
        self.assertEqual(record["efficiency"], "75.0")
        self.assertEqual(record["failureTolerance"], "1")
        self.assertEqual(record["totalCost"], "400.00")
        self.assertEqual(record["costPerTB"], "33.33")
        self.assertEqual(record["rebuildTime"], "11.7")
        self.assertTrue(record["ureRisk"].startswith("29.66"))
        self.assertEqual(len(record["ureRisk"].split(".")[1]), 4)

    def test_record_rounding(self):
        params = OperatingParameters(hot_spares=1, group_size=3, price_per_drive=129.99,
                                     rebuild_speed=150, ure_rate=0)
        result = evaluate([Drive(str(i), 2.5) for i in range(7)], "50", params)
        record = export_record(result)
        self.assertEqual(record["raidLevel"], "50")
        self.assertEqual(record["driveCapacity"], "2.5")
        self.assertEqual(record["hotSpares"], "1")
        self.assertEqual(record["usableCapacity"], "10.00")
        self.assertEqual(record["efficiency"], "57.1")
        self.assertEqual(record["failureTolerance"], "2")
        self.assertEqual(record["totalCost"], "909.93")
        self.assertEqual(record["costPerTB"], "90.99")
        self.assertEqual(record["rebuildTime"], "4.9")
        self.assertEqual(record["ureRisk"], "0.0000")

    def test_record_rounds_ties_up(self):
        result = evaluate([8, 8, 8, 8], "0", OperatingParameters(price_per_drive=1, ure_rate=0))
        self.assertEqual(result.cost_per_tb, 0.125)
        self.assertEqual(export_record(result)["costPerTB"], "0.13")

    def test_undefined(self):
        result = evaluate([4, 4], "1", OperatingParameters(hot_spares=2, rebuild_speed=0))
        record = export_record(result)
        self.assertEqual(record["usableCapacity"], "0.00")
        self.assertEqual(record["costPerTB"], UNDEFINED_VALUE)
        self.assertEqual(record["rebuildTime"], UNDEFINED_VALUE)

        result = evaluate([4] * 6, "50", OperatingParameters(group_size=0))
        record = export_record(result)
        self.assertEqual(record["usableCapacity"], UNDEFINED_VALUE)
        self.assertEqual(record["efficiency"], UNDEFINED_VALUE)
        self.assertEqual(record["failureTolerance"], UNDEFINED_VALUE)

    def test_non_finite_capacity(self):
        result = evaluate([4, float("inf"), 4, 4], "5")
        record = export_record(result)
        self.assertEqual(record["drives"], "4")
        self.assertEqual(record["driveCapacity"], UNDEFINED_VALUE)
        self.assertEqual(record["usableCapacity"], UNDEFINED_VALUE)
        self.assertEqual(record["efficiency"], UNDEFINED_VALUE)
        self.assertEqual(record["failureTolerance"], "1")
        self.assertEqual(record["totalCost"], "400.00")
        self.assertEqual(record["costPerTB"], UNDEFINED_VALUE)
        self.assertEqual(record["rebuildTime"], UNDEFINED_VALUE)
        self.assertEqual(record["ureRisk"], UNDEFINED_VALUE)
        self.assertNotIn("inf", export_csv(result))

    def test_csv(self):
        result = evaluate([4, 4, 4, 4], "10", OperatingParameters(ure_rate=0))
        self.assertEqual(export_csv(result),
                         "raidLevel,10\n"
                         "drives,4\n"
                         "driveCapacity,4\n"
                         "hotSpares,0\n"
                         "usableCapacity,8.00\n"
                         "efficiency,50.0\n"
                         "failureTolerance,1\n"
                         "totalCost,400.00\n"
                         "costPerTB,50.00\n"
                         "rebuildTime,11.7\n"
                         "ureRisk,0.0000")
        self.assertTrue(export_csv(result, delimiter=";").startswith("raidLevel;10\n"))

    def test_filename(self):
        self.assertEqual(export_filename("5EE"), "raid-5EE-calculation.csv")
        self.assertEqual(export_filename(evaluate([4, 4], "1").level), "raid-1-calculation.csv")
