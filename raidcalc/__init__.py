# __init__.py
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

__version__ = '1.0.0'

import logging
log = logging.getLogger("raidcalc")

# Enable logging of python warnings.
logging.captureWarnings(True)

from .array import Drive, OperatingParameters, IssueKind, ValidationIssue, ArrayEvaluation
from .array import ArrayEvaluator, evaluate, check_input_limits
from .devicelibs.raid import raid_levels, lookup
from .export import export_record, export_csv, export_filename
from .flags import flags
from .share import share_query, share_url, parse_share_query

__all__ = ["Drive", "OperatingParameters", "IssueKind", "ValidationIssue", "ArrayEvaluation",
           "ArrayEvaluator", "evaluate", "check_input_limits", "raid_levels", "lookup",
           "export_record", "export_csv", "export_filename", "flags",
           "share_query", "share_url", "parse_share_query"]
