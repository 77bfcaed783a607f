# export.py
# Flat export of array evaluations.
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

from collections import OrderedDict

from .devicelibs.raid import lookup
from .util import format_fixed, format_number

# shown in place of metrics that could not be computed
UNDEFINED_VALUE = "—"

EXPORT_FIELDS = ["raidLevel", "drives", "driveCapacity", "hotSpares", "usableCapacity",
                 "efficiency", "failureTolerance", "totalCost", "costPerTB", "rebuildTime",
                 "ureRisk"]


def _fixed(value, places):
    if value is None:
        return UNDEFINED_VALUE
    return format_fixed(value, places)


def export_record(evaluation):
    """ Flatten an evaluation into an ordered key/value record.

        :param evaluation: the evaluation to export
        :type evaluation: :class:`~.array.ArrayEvaluation`
        :rtype: :class:`collections.OrderedDict` of str to str

        The keys and their order are those of :data:`EXPORT_FIELDS`.
        Currency and capacity use two decimals, percentages and hours one,
        and the URE risk (in percent) four.
    """
    record = OrderedDict()
    record["raidLevel"] = evaluation.level.level
    record["drives"] = str(evaluation.drive_count)
    if evaluation.min_capacity is None:
        record["driveCapacity"] = UNDEFINED_VALUE
    else:
        record["driveCapacity"] = format_number(evaluation.min_capacity)
    record["hotSpares"] = format_number(evaluation.hot_spares)
    record["usableCapacity"] = _fixed(evaluation.usable, 2)
    record["efficiency"] = _fixed(evaluation.efficiency_percent, 1)
    if evaluation.failure_tolerance is None:
        record["failureTolerance"] = UNDEFINED_VALUE
    else:
        record["failureTolerance"] = format_number(evaluation.failure_tolerance)
    record["totalCost"] = _fixed(evaluation.total_cost, 2)
    record["costPerTB"] = _fixed(evaluation.cost_per_tb, 2)
    record["rebuildTime"] = _fixed(evaluation.rebuild_hours, 1)
    record["ureRisk"] = _fixed(evaluation.ure_percent, 4)
    return record


def export_csv(evaluation, delimiter=","):
    """ Render an evaluation as delimited text, one key/value pair per line.

        :param evaluation: the evaluation to export
        :type evaluation: :class:`~.array.ArrayEvaluation`
        :param str delimiter: separator between key and value
        :rtype: str
    """
    record = export_record(evaluation)
    return "\n".join("%s%s%s" % (key, delimiter, value) for (key, value) in record.items())


def export_filename(level):
    """ Name of the file an export of level is saved as.

        :param level: a RAID level descriptor
        :rtype: str
    """
    return "raid-%s-calculation.csv" % lookup(level).level
