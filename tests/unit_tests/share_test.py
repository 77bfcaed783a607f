import unittest

from raidcalc.array import Drive, OperatingParameters, evaluate
from raidcalc.devicelibs import raid
from raidcalc.errors import ShareError
from raidcalc.share import SharedConfiguration, parse_share_query, share_query, share_url


class ShareTestCase(unittest.TestCase):

    def test_share_query(self):
        result = evaluate([4, 4, 4, 4], "5", OperatingParameters(hot_spares=1))
        self.assertEqual(share_query(result), "raid=5&drives=4&size=4&spares=1")

        result = evaluate([Drive("1", 8), Drive("2", 2.5), Drive("3", 8)], "1E")
        self.assertEqual(share_query(result), "raid=1E&drives=3&size=2.5&spares=0")

    def test_share_url(self):
        result = evaluate([4] * 6, "50")
        self.assertEqual(share_url(result, "https://example.com/tools/raid"),
                         "https://example.com/tools/raid?raid=50&drives=6&size=4&spares=0")
        self.assertEqual(share_url(result, "https://example.com/raid?raid=6&drives=4#results"),
                         "https://example.com/raid?raid=50&drives=6&size=4&spares=0")

    def test_parse(self):
        config = parse_share_query("raid=6&drives=5&size=12&spares=1")
        self.assertIs(config.level, raid.RAID6)
        self.assertEqual(config.drives, tuple(Drive(str(i), 12.0) for i in range(1, 6)))
        self.assertEqual(config.hot_spares, 1)

        config = parse_share_query("https://example.com/raid?raid=10&drives=4&size=2.5#top")
        self.assertEqual(config, SharedConfiguration(raid.RAID10, tuple(Drive(str(i), 2.5) for i in range(1, 5)), 0))

        self.assertEqual(parse_share_query("?raid=0&drives=2&size=1").level, raid.RAID0)

    def test_round_trip(self):
        # mixed drive sizes come back as drives of the smallest size
        params = OperatingParameters(hot_spares=1)
        original = evaluate([4, 6, 6, 6, 6], "5", params)
        config = parse_share_query(share_query(original))
        rebuilt = evaluate(config.drives, config.level, OperatingParameters(hot_spares=config.hot_spares))
        self.assertEqual(rebuilt.usable, original.usable)
        self.assertEqual(rebuilt.drive_count, original.drive_count)
        self.assertFalse(rebuilt.mixed_sizes)
        self.assertLess(rebuilt.total_raw, original.total_raw)

    def test_share_undefined_size(self):
        result = evaluate([Drive("1", 4), Drive("2", float("nan")), Drive("3", 4)], "5")
        with self.assertRaisesRegex(ShareError, "drive size is undefined"):
            share_query(result)
        with self.assertRaises(ShareError):
            share_url(result, "https://example.com/raid")

    def test_parse_errors(self):
        with self.assertRaisesRegex(ShareError, "missing 'raid'"):
            parse_share_query("drives=4&size=4")
        with self.assertRaisesRegex(ShareError, "missing 'size'"):
            parse_share_query("raid=5&drives=4")
        with self.assertRaisesRegex(ShareError, "invalid RAID level descriptor"):
            parse_share_query("raid=7&drives=4&size=4")
        with self.assertRaisesRegex(ShareError, "invalid value 'four'"):
            parse_share_query("raid=5&drives=four&size=4")
        with self.assertRaisesRegex(ShareError, "not positive"):
            parse_share_query("raid=5&drives=4&size=0")
        for size in ("nan", "inf", "-inf"):
            with self.assertRaisesRegex(ShareError, "not a finite number"):
                parse_share_query("raid=5&drives=4&size=%s" % size)
        with self.assertRaisesRegex(ShareError, "negative"):
            parse_share_query("raid=5&drives=4&size=4&spares=-1")

        try:
            parse_share_query("raid=5")
        except ShareError as e:
            self.assertEqual(e.query, "raid=5")
