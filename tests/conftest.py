import logging

import pytest

from raidcalc.flags import flags


@pytest.fixture(autouse=True)
def reset_flags():
    """Give every test the default configuration."""
    flags.reset()
    yield
    flags.reset()
    logging.getLogger("raidcalc").setLevel(logging.NOTSET)
