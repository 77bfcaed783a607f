import logging
import os
import tempfile
import unittest

from raidcalc import util
from raidcalc.flags import flags


class MiscTest(unittest.TestCase):

    def test_format_number(self):
        self.assertEqual(util.format_number(4), "4")
        self.assertEqual(util.format_number(4.0), "4")
        self.assertEqual(util.format_number(4.5), "4.5")
        self.assertEqual(util.format_number(0.1 + 0.2), "0.30000000000000004")
        self.assertEqual(util.format_number(float("inf")), "inf")

    def test_format_fixed(self):
        self.assertEqual(util.format_fixed(33.333333, 2), "33.33")
        self.assertEqual(util.format_fixed(11.650844, 1), "11.7")
        self.assertEqual(util.format_fixed(0, 4), "0.0000")

        # ties round up on the exact value of the float
        self.assertEqual(util.format_fixed(0.125, 2), "0.13")
        self.assertEqual(util.format_fixed(2.5, 0), "3")
        self.assertEqual(util.format_fixed(0.05, 1), "0.1")
        self.assertEqual(util.format_fixed(1.005, 2), "1.00")
        self.assertEqual(util.format_fixed(-0.125, 2), "-0.13")
        self.assertEqual(util.format_fixed(-0.0, 2), "0.00")
        self.assertEqual(util.format_fixed(400, 2), "400.00")
        self.assertEqual(util.format_fixed(1e22, 1), "10000000000000000000000.0")
        self.assertEqual(util.format_fixed(float("inf"), 2), "inf")


class TestDefaultNamedtuple(unittest.TestCase):
    def test_default_namedtuple(self):
        TestTuple = util.default_namedtuple("TestTuple", ["x", "y", ("z", 5), "w"])
        dnt = TestTuple(1, 2, 3, 6)
        self.assertEqual(dnt.x, 1)
        self.assertEqual(dnt.y, 2)
        self.assertEqual(dnt.z, 3)
        self.assertEqual(dnt.w, 6)
        self.assertEqual(dnt, (1, 2, 3, 6))

        dnt = TestTuple(1, 2, 3, w=6)
        self.assertEqual(dnt.x, 1)
        self.assertEqual(dnt.y, 2)
        self.assertEqual(dnt.z, 3)
        self.assertEqual(dnt.w, 6)
        self.assertEqual(dnt, (1, 2, 3, 6))

        dnt = TestTuple(1, 2)
        self.assertEqual(dnt.x, 1)
        self.assertEqual(dnt.y, 2)
        self.assertEqual(dnt.z, 5)
        self.assertIsNone(dnt.w)
        self.assertEqual(dnt, (1, 2, 5, None))

        dnt = TestTuple(1, 2, w=6)
        self.assertEqual(dnt, (1, 2, 5, 6))
        self.assertEqual(type(dnt).__name__, "TestTuple")

        with self.assertRaisesRegex(TypeError, "unexpected field"):
            TestTuple(1, 2, v=3)

        # still a namedtuple
        self.assertEqual(dnt._replace(x=7), (7, 2, 5, 6))
        self.assertEqual(dnt._asdict()["w"], 6)


class LoggingTest(unittest.TestCase):

    def _remove_file_handlers(self):
        for name in ("raidcalc", "py.warnings"):
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                if isinstance(handler, logging.FileHandler):
                    logger.removeHandler(handler)
                    handler.close()
        logging.getLogger("raidcalc").setLevel(logging.NOTSET)

    def tearDown(self):
        flags.reset()
        self._remove_file_handlers()

    def test_set_up_logging(self):
        flags.debug = True
        with tempfile.TemporaryDirectory() as log_dir:
            util.set_up_logging(log_dir=log_dir, log_prefix="test")
            self.assertEqual(logging.getLogger("raidcalc").level, logging.DEBUG)
            logging.getLogger("raidcalc").debug("hello from the test")
            self._remove_file_handlers()
            with open(os.path.join(log_dir, "test.log")) as f:
                self.assertIn("hello from the test", f.read())
