# units.py
# Unit constants and conversions used by the array models.
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

# capacities are binary: 1 TB here is 2**40 bytes
MB_PER_TB = 1024 * 1024
BITS_PER_TB = 8 * 2 ** 40

SECONDS_PER_HOUR = 3600
HOURS_PER_YEAR = 24 * 365

WATTS_PER_KILOWATT = 1000
BTU_PER_WATT_HOUR = 3.412


def tb_to_mb(size):
    """ Convert a capacity in (binary) terabytes to megabytes.

        :param size: capacity in TB
        :type size: int or float
        :rtype: float
    """
    return size * MB_PER_TB


def tb_to_bits(size):
    """ Convert a capacity in (binary) terabytes to bits.

        :param size: capacity in TB
        :type size: int or float
        :rtype: float
    """
    return size * BITS_PER_TB
