#
# power.py
# power draw and heat output of drive arrays
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

from ..units import BTU_PER_WATT_HOUR, HOURS_PER_YEAR, WATTS_PER_KILOWATT


def get_total_power(member_count, power_per_member):
    """ Power draw of the whole array in watts. """
    return member_count * power_per_member


def get_annual_energy(total_power):
    """ Energy used in a year of continuous operation.

        :param total_power: array power draw in watts
        :type total_power: int or float
        :returns: energy in kWh
        :rtype: float
    """
    return total_power / WATTS_PER_KILOWATT * HOURS_PER_YEAR


def get_heat_output(total_power):
    """ Heat dissipated by the array in BTU per hour. """
    return total_power * BTU_PER_WATT_HOUR
