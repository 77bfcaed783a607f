#
# reliability.py
# rebuild and data loss estimates for RAID arrays
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

import math

from ..errors import RaidError
from ..units import tb_to_bits, tb_to_mb, HOURS_PER_YEAR, SECONDS_PER_HOUR


def get_rebuild_hours(member_size, rebuild_speed):
    """ Estimate how long it takes to rebuild one failed member.

        :param member_size: size of the member to rebuild, in TB
        :type member_size: int or float
        :param rebuild_speed: sustained rebuild throughput in MB/s
        :type rebuild_speed: int or float
        :returns: rebuild time in hours
        :rtype: float

        The whole member is assumed to be rewritten at a constant speed;
        contention with other I/O on the array is ignored.

        Raises a RaidError if rebuild_speed is not a positive number.
    """
    if rebuild_speed <= 0:
        raise RaidError("rebuild speed must be a positive number")
    return tb_to_mb(member_size) / (rebuild_speed * SECONDS_PER_HOUR)


def get_ure_probability(member_size, ure_rate):
    """ Estimate the probability of hitting an unrecoverable read error
        while reading member_size worth of data during a rebuild.

        :param member_size: amount of data read, in TB
        :type member_size: int or float
        :param float ure_rate: probability of a read error per bit
        :returns: 1 - (1 - ure_rate) ** bits_read
        :rtype: float

        Every bit is assumed to fail independently.
    """
    bits = tb_to_bits(member_size)
    if bits <= 0 or ure_rate <= 0:
        return 0.0
    if ure_rate >= 1:
        return 1.0

    # (1 - p) ** n underflows to exactly 1 for tiny p
    return -math.expm1(bits * math.log1p(-ure_rate))


def get_data_loss_probability(afr, exposed_members, rebuild_hours):
    """ Rough annual probability of losing data.

        :param afr: annual failure rate of a single drive, in percent
        :type afr: int or float
        :param exposed_members: active members beyond the failure tolerance
        :type exposed_members: int or float
        :param float rebuild_hours: length of the rebuild window
        :rtype: float

        This is the chance that another member fails while a rebuild is
        running: (afr / 100) * exposed_members * (rebuild_hours / 8760).
        It ignores correlated failures and overlapping rebuild windows and
        is meant for illustration only, not as a reliability guarantee.
    """
    return (afr / 100) * exposed_members * (rebuild_hours / HOURS_PER_YEAR)
