# util.py
# Miscellaneous helpers for the raidcalc library.
#
# Copyright (C) 2026  raidcalc authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

import decimal
import logging
import math
import os
import sys
from collections import namedtuple

from .flags import flags

log = logging.getLogger("raidcalc")
console_log = logging.getLogger("raidcalc.console")


def default_namedtuple(name, fields, doc=""):
    """Create a namedtuple class

    The difference between a namedtuple class and this class is that default
    values may be specified for fields and fields with missing values on
    initialization being initialized to None.

    :param str name: name of the new class
    :param fields: field descriptions - an iterable of either "name" or ("name", default_value)
    :type fields: list of str or (str, object) objects
    :param str doc: the docstring for the new class (should at least describe the meanings and
                    types of fields)
    :returns: a new default namedtuple class
    :rtype: type

    """
    field_names = list()
    for field in fields:
        if isinstance(field, tuple):
            field_names.append(field[0])
        else:
            field_names.append(field)
    nt = namedtuple(name, field_names)

    class TheDefaultNamedTuple(nt):
        __slots__ = ()
        if doc:
            __doc__ = doc

        def __new__(cls, *args, **kwargs):
            unknown = set(kwargs) - set(field_names)
            if unknown:
                raise TypeError("%s got unexpected field(s): %s" % (name, ", ".join(sorted(unknown))))

            args_list = list(args)
            for i in range(len(args), len(field_names)):
                if field_names[i] in kwargs:
                    args_list.append(kwargs[field_names[i]])
                elif isinstance(fields[i], tuple):
                    args_list.append(fields[i][1])
                else:
                    args_list.append(None)

            return nt.__new__(cls, *args_list)

    TheDefaultNamedTuple.__name__ = name
    return TheDefaultNamedTuple


def format_number(value):
    """ Return the shortest string representation of a number.

        Integral values are written without a fractional part, so both
        4 and 4.0 become "4" while 4.5 stays "4.5".

        :param value: the number to format
        :type value: int or float
        :rtype: str
    """
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def format_fixed(value, places):
    """ Format value with a fixed number of decimal places.

        :param float value: the number to format
        :param int places: number of digits after the decimal point
        :rtype: str

        Ties are rounded away from zero on the exact binary value of the
        float, so 0.125 becomes "0.13" while 1.005 (really 1.00499...)
        becomes "1.00".
    """
    if not math.isfinite(value):
        return repr(float(value))
    if value == 0:
        # no "-0.00"
        value = 0

    with decimal.localcontext() as ctx:
        # enough digits for any float written out in full
        ctx.prec = 400
        exact = decimal.Decimal(value)
        rounded = exact.quantize(decimal.Decimal(1).scaleb(-places), rounding=decimal.ROUND_HALF_UP)
    return format(rounded, "f")


def set_up_logging(log_dir="/tmp", log_prefix="raidcalc", console_logs=None):
    """ Configure the raidcalc logger to write out a log file.

        :keyword str log_dir: path to directory where log files are
        :keyword str log_prefix: prefix for log file names
        :keyword list console_logs: list of log names to output on the console
    """
    level = logging.DEBUG if flags.debug else logging.INFO
    log.setLevel(level)

    log_file = os.path.realpath("%s/%s.log" % (log_dir, log_prefix))
    handler = logging.FileHandler(log_file)
    handler.setLevel(level)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    handler.setFormatter(formatter)
    log.addHandler(handler)

    # capture python warnings in our logs
    warning_log = logging.getLogger("py.warnings")
    warning_log.addHandler(handler)

    if console_logs:
        set_up_console_log(log_names=console_logs)

    log.info("sys.argv = %s", sys.argv)


def set_up_console_log(log_names=None):
    log_names = log_names or []
    handler = logging.StreamHandler()
    console_log.setLevel(logging.DEBUG)
    handler.setLevel(logging.DEBUG)
    formatter = logging.Formatter("%(message)s")
    handler.setFormatter(formatter)
    console_log.addHandler(handler)
    for log_name in log_names:
        logging.getLogger(log_name).addHandler(handler)
