# array.py
# Evaluation of a drive array laid out with a given RAID level.
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
import numbers
from enum import Enum

from .devicelibs import power, reliability
from .devicelibs.raid import lookup, RAID5
from .errors import ArrayError, RaidError
from .flags import flags
from .i18n import _, P_
from .storage_log import log_method_call, log_method_return
from .util import default_namedtuple, format_number

import logging
log = logging.getLogger("raidcalc")

# limits the presentation layer is expected to enforce before evaluating
MIN_DRIVE_CAPACITY = 0.5
DRIVE_CAPACITY_STEP = 0.5
MIN_DRIVE_COUNT = 2
MIN_PRICE_PER_DRIVE = 1
MIN_REBUILD_SPEED = 10
MIN_AFR = 0.1
MAX_AFR = 5
MIN_POWER_PER_DRIVE = 1

# float noise allowed when checking the capacity breakdown
_CAPACITY_TOLERANCE = 1e-9

Drive = default_namedtuple("Drive", ["id", "capacity"],
                           doc="""A physical drive.

                           :param str id: identifier, unique within an array
                           :param capacity: capacity in (binary) TB
                           :type capacity: int or float
                           """)

OperatingParameters = default_namedtuple("OperatingParameters",
                                         [("hot_spares", 0),
                                          ("group_size", None),
                                          ("price_per_drive", 100),
                                          ("rebuild_speed", 100),
                                          ("ure_rate", 1e-14),
                                          ("afr", 0.5),
                                          ("power_per_drive", 5)],
                                         doc="""Operating parameters of an array.

                                         :param int hot_spares: drives held in reserve
                                         :param group_size: drives per group, only used by RAID 50/60
                                         :param price_per_drive: price of one drive
                                         :param rebuild_speed: rebuild throughput in MB/s
                                         :param float ure_rate: unrecoverable read errors per bit read
                                         :param afr: annual failure rate of one drive, in percent
                                         :param power_per_drive: power draw of one drive in watts
                                         """)


class IssueKind(Enum):
    configuration = 1
    undefined_metric = 2
    advisory = 3
    input_limit = 4

    @property
    def is_error(self):
        return self is not IssueKind.advisory


ValidationIssue = default_namedtuple("ValidationIssue", ["kind", "message", ("metric", None)],
                                     doc="""A problem found while evaluating an array.

                                     :param kind: what sort of problem this is
                                     :type kind: :class:`IssueKind`
                                     :param str message: human readable description
                                     :param metric: name of the affected result field, if any
                                     """)

_EVALUATION_FIELDS = ["level", "drives", "drive_count", "hot_spares", "group_size", "active_drives",
                      "min_capacity", "max_capacity", "mixed_sizes", "total_raw", "usable",
                      "overhead", "spare_capacity", "overhead_drives", "efficiency",
                      "failure_tolerance", "total_cost", "cost_per_tb", "rebuild_hours",
                      "ure_probability", "data_loss_probability", "total_power",
                      "annual_energy", "heat_output", ("issues", ())]


class ArrayEvaluation(default_namedtuple("ArrayEvaluation", _EVALUATION_FIELDS)):

    """ The metrics of one array, as computed by :func:`evaluate`.

        Capacities are in TB, rebuild_hours in hours, total_power in watts,
        annual_energy in kWh and heat_output in BTU/h. efficiency,
        ure_probability and data_loss_probability are fractions.

        Metrics that cannot be computed for the given input are None and
        have a matching :class:`IssueKind.undefined_metric` issue.
    """
    __slots__ = ()

    errors = property(lambda s: [i for i in s.issues if i.kind.is_error],
                      doc="Issues that make this configuration unusable")

    warnings = property(lambda s: [i for i in s.issues if not i.kind.is_error],
                        doc="Advisory issues")

    is_valid = property(lambda s: not s.errors,
                        doc="Whether the configuration can be built as given")

    undefined_metrics = property(lambda s: [i.metric for i in s.issues
                                            if i.kind is IssueKind.undefined_metric],
                                 doc="Names of the metrics that could not be computed")

    @property
    def efficiency_percent(self):
        if self.efficiency is None:
            return None
        return self.efficiency * 100

    @property
    def ure_percent(self):
        if self.ure_probability is None:
            return None
        return self.ure_probability * 100


def get_drives(drives):
    """ Return drives as a tuple of :class:`Drive`.

        :param drives: the drives of the array
        :type drives: iterable of :class:`Drive` or of capacities

        Plain capacities are given ids by their position, starting at "1".

        Raises an ArrayError if drives is not an iterable of drives or
        numbers.
    """
    try:
        items = list(drives)
    except TypeError:
        raise ArrayError("drives must be an iterable of drives or capacities")

    result = []
    for i, drive in enumerate(items):
        if isinstance(drive, Drive):
            if not isinstance(drive.capacity, numbers.Real):
                raise ArrayError("drive %s has a capacity of %r" % (drive.id, drive.capacity))
            result.append(drive)
        elif isinstance(drive, numbers.Real) and not isinstance(drive, bool):
            result.append(Drive(str(i + 1), drive))
        else:
            raise ArrayError("%r is neither a drive nor a capacity" % (drive,))

    return tuple(result)


class ArrayEvaluator(object):

    """ Computes the metrics of an array of drives at one RAID level.

        An evaluator is used for a single evaluation; it only collects
        the issues found along the way.
    """

    def __init__(self, drives, level, params=None):
        """
            :param drives: the drives of the array, spares included
            :type drives: iterable of :class:`Drive` or of capacities
            :param level: a RAID level descriptor, e.g. "5", "raid50" or RAID6
            :param params: operating parameters, defaults if None
            :type params: :class:`OperatingParameters`

            Raises a RaidError if level does not name a known RAID level.
        """
        self.level = lookup(level)
        self.drives = get_drives(drives)
        self.params = params if params is not None else OperatingParameters()
        self._issues = []

    def _add_issue(self, kind, message, metric=None):
        log.debug("%s issue: %s", kind.name, message)
        self._issues.append(ValidationIssue(kind, message, metric))

    def _undefined(self, metric, message):
        self._add_issue(IssueKind.undefined_metric, message, metric)
        return None

    def _compute(self, metric, func, *args):
        try:
            return func(*args)
        except RaidError as e:
            return self._undefined(metric, str(e))

    def _get_group_size(self):
        if not self.level.is_grouped:
            return None
        if self.params.group_size is None:
            return self.level.min_group_size
        return self.params.group_size

    def _validate_structure(self, group_size):
        level = self.level
        count = len(self.drives)

        if count < level.min_members:
            message = P_("%(level)s requires minimum %(min)d drive",
                         "%(level)s requires minimum %(min)d drives",
                         level.min_members)
            self._add_issue(IssueKind.configuration,
                            message % {"level": level.label, "min": level.min_members})

        if level.requires_even_members and count % 2 != 0:
            self._add_issue(IssueKind.configuration,
                            _("%s requires an even number of drives") % level.label)

        if level.is_grouped:
            if group_size < level.min_group_size:
                message = _("%(level)s requires a group size of at least %(min)d drives")
                self._add_issue(IssueKind.configuration,
                                message % {"level": level.label, "min": level.min_group_size})
            if level.requires_divisible_groups and group_size > 0 and count % group_size != 0:
                self._add_issue(IssueKind.configuration,
                                _("Total drives must be divisible by group size (%d)") % group_size)

        spares = self.params.hot_spares
        if spares < 0:
            self._add_issue(IssueKind.configuration, _("The number of hot spares cannot be negative"))
        elif count >= level.min_members:
            max_spares = level.get_max_spares(count)
            if spares > max_spares:
                message = P_("%(level)s with %(count)d drives allows at most %(max)d hot spare",
                             "%(level)s with %(count)d drives allows at most %(max)d hot spares",
                             max_spares)
                self._add_issue(IssueKind.configuration,
                                message % {"level": level.label, "count": count, "max": max_spares})

        seen = set()
        for drive in self.drives:
            if not math.isfinite(drive.capacity):
                self._add_issue(IssueKind.configuration,
                                _("Drive %s must have a finite capacity") % drive.id)
            elif drive.capacity <= 0:
                self._add_issue(IssueKind.configuration,
                                _("Drive %s must have a positive capacity") % drive.id)
            if drive.id in seen:
                self._add_issue(IssueKind.configuration,
                                _("Drive id %s is used more than once") % drive.id)
            seen.add(drive.id)

    def evaluate(self):
        """ Compute every metric of the array.

            :rtype: :class:`ArrayEvaluation`

            Structural problems and undefined metrics are reported in the
            result's issues instead of being raised; the remaining metrics
            are still computed.
        """
        log_method_call(self, level=self.level, drives=len(self.drives), params=self.params)
        level = self.level
        params = self.params
        group_size = self._get_group_size()
        self._validate_structure(group_size)

        sizes = [d.capacity for d in self.drives]
        count = len(sizes)
        spares = params.hot_spares
        active = count - spares

        min_capacity = max_capacity = total_raw = spare_capacity = usable = None
        if all(math.isfinite(s) for s in sizes):
            min_capacity = min(sizes) if sizes else 0.0
            max_capacity = max(sizes) if sizes else 0.0
            total_raw = sum(sizes)
            spare_capacity = spares * min_capacity
        else:
            for metric in ("min_capacity", "max_capacity", "total_raw", "spare_capacity", "usable"):
                self._undefined(metric, _("Capacities cannot be computed for drives without a finite capacity"))

        mixed_sizes = min_capacity != max_capacity
        if mixed_sizes:
            message = _("Mixed drive sizes detected. Usable capacity calculated using minimum drive size (%s TB)")
            self._add_issue(IssueKind.advisory, message % format_number(min_capacity))

        if min_capacity is not None:
            usable = self._compute("usable", level.get_usable_capacity, sizes, spares, group_size)
        if usable is not None and usable < 0:
            # only reachable together with a structural error
            log.debug("%s usable capacity %s reported as 0", level, usable)
            usable = 0.0
        overhead_drives = self._compute("overhead_drives", level.get_overhead_members, active, group_size)
        tolerance = self._compute("failure_tolerance", level.get_failure_tolerance, active, group_size)

        overhead = None
        if usable is None:
            self._undefined("overhead", _("Parity overhead cannot be computed without usable capacity"))
        else:
            overhead = total_raw - usable - spare_capacity
            if overhead < -_CAPACITY_TOLERANCE:
                message = _("Usable capacity exceeds raw capacity by %.2f TB; check the hot spare count")
                self._add_issue(IssueKind.advisory, message % -overhead)

        efficiency = None
        if total_raw is not None and total_raw <= 0:
            self._undefined("efficiency", _("Efficiency is undefined for an array without raw capacity"))
        elif usable is not None:
            efficiency = usable / total_raw
        else:
            self._undefined("efficiency", _("Efficiency cannot be computed without usable capacity"))

        total_cost = count * params.price_per_drive
        cost_per_tb = None
        if usable:
            cost_per_tb = total_cost / usable
        else:
            self._undefined("cost_per_tb", _("Cost per TB is undefined for an array without usable capacity"))

        rebuild_hours = ure_probability = None
        if min_capacity is None:
            message = _("Rebuild metrics cannot be computed for drives without a finite capacity")
            self._undefined("rebuild_hours", message)
            self._undefined("ure_probability", message)
        else:
            rebuild_hours = self._compute("rebuild_hours", reliability.get_rebuild_hours,
                                          min_capacity, params.rebuild_speed)
            ure_probability = reliability.get_ure_probability(min_capacity, params.ure_rate)

        data_loss_probability = None
        if rebuild_hours is None or tolerance is None:
            self._undefined("data_loss_probability",
                            _("Data loss probability cannot be computed without rebuild time and failure tolerance"))
        else:
            data_loss_probability = reliability.get_data_loss_probability(params.afr, active - tolerance,
                                                                          rebuild_hours)

        total_power = power.get_total_power(count, params.power_per_drive)

        if ure_probability is not None and ure_probability > flags.ure_warning_threshold:
            message = _("High URE risk during rebuild (%.2f%%). Consider RAID 6 or smaller drives.")
            self._add_issue(IssueKind.advisory, message % (ure_probability * 100))

        if level is RAID5 and min_capacity is not None and min_capacity > flags.raid5_large_drive_threshold:
            message = _("RAID 5 with drives >%sTB has increased rebuild risk. Consider RAID 6.")
            self._add_issue(IssueKind.advisory, message % format_number(flags.raid5_large_drive_threshold))

        result = ArrayEvaluation(level=level,
                                 drives=self.drives,
                                 drive_count=count,
                                 hot_spares=spares,
                                 group_size=group_size,
                                 active_drives=active,
                                 min_capacity=min_capacity,
                                 max_capacity=max_capacity,
                                 mixed_sizes=mixed_sizes,
                                 total_raw=total_raw,
                                 usable=usable,
                                 overhead=overhead,
                                 spare_capacity=spare_capacity,
                                 overhead_drives=overhead_drives,
                                 efficiency=efficiency,
                                 failure_tolerance=tolerance,
                                 total_cost=total_cost,
                                 cost_per_tb=cost_per_tb,
                                 rebuild_hours=rebuild_hours,
                                 ure_probability=ure_probability,
                                 data_loss_probability=data_loss_probability,
                                 total_power=total_power,
                                 annual_energy=power.get_annual_energy(total_power),
                                 heat_output=power.get_heat_output(total_power),
                                 issues=tuple(self._issues))
        log_method_return(self, "usable=%s errors=%d warnings=%d" %
                          (usable, len(result.errors), len(result.warnings)))
        return result


def evaluate(drives, level, params=None):
    """ Evaluate an array of drives laid out with the given RAID level.

        :param drives: the drives of the array, spares included
        :type drives: iterable of :class:`Drive` or of capacities
        :param level: a RAID level descriptor, e.g. "5", "raid50" or RAID6
        :param params: operating parameters, defaults if None
        :type params: :class:`OperatingParameters`
        :rtype: :class:`ArrayEvaluation`

        Raises a RaidError for an unknown level and an ArrayError if drives
        is not a collection of drives. Everything else is reported in the
        issues of the result.
    """
    return ArrayEvaluator(drives, level, params).evaluate()


def check_input_limits(drives, level, params=None):
    """ Check input against the limits a calculator form should enforce.

        :param drives: the drives of the array, spares included
        :type drives: iterable of :class:`Drive` or of capacities
        :param level: a RAID level descriptor
        :param params: operating parameters, defaults if None
        :type params: :class:`OperatingParameters`
        :returns: one issue of kind :attr:`IssueKind.input_limit` per violation
        :rtype: list of :class:`ValidationIssue`

        These limits are not required by :func:`evaluate`; they describe
        the input a form should accept.
    """
    level = lookup(level)
    drives = get_drives(drives)
    params = params if params is not None else OperatingParameters()
    issues = []

    def add(message, metric):
        issues.append(ValidationIssue(IssueKind.input_limit, message, metric))

    for drive in drives:
        if drive.capacity < MIN_DRIVE_CAPACITY or \
           not float(drive.capacity / DRIVE_CAPACITY_STEP).is_integer():
            message = _("Drive %(id)s capacity must be at least %(min)s TB in steps of %(step)s TB")
            add(message % {"id": drive.id, "min": format_number(MIN_DRIVE_CAPACITY),
                           "step": format_number(DRIVE_CAPACITY_STEP)}, "drives")

    if len(drives) < MIN_DRIVE_COUNT:
        add(_("At least %d drives are required") % MIN_DRIVE_COUNT, "drives")

    if params.price_per_drive < MIN_PRICE_PER_DRIVE:
        add(_("Price per drive must be at least %d") % MIN_PRICE_PER_DRIVE, "price_per_drive")

    if params.rebuild_speed < MIN_REBUILD_SPEED:
        add(_("Rebuild speed must be at least %d MB/s") % MIN_REBUILD_SPEED, "rebuild_speed")

    if not MIN_AFR <= params.afr <= MAX_AFR:
        add(_("Annual failure rate must be between %(min)s%% and %(max)s%%") %
            {"min": format_number(MIN_AFR), "max": format_number(MAX_AFR)}, "afr")

    if params.power_per_drive < MIN_POWER_PER_DRIVE:
        add(_("Power per drive must be at least %d W") % MIN_POWER_PER_DRIVE, "power_per_drive")

    max_spares = max(len(drives) - level.min_members, 0)
    if not 0 <= params.hot_spares <= max_spares:
        add(_("Hot spares must be between 0 and %d") % max_spares, "hot_spares")

    return issues
