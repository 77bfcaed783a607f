# i18n.py
# Internationalization functions
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

__all__ = ["_", "P_"]

import gettext
import locale

# Create and cache a translations object for the current LC_MESSAGES value
_cached_translations = {}


def _get_translations():
    # setlocale with None only reads the current value, it changes nothing
    lc_messages = locale.setlocale(locale.LC_MESSAGES, None)
    if lc_messages not in _cached_translations:
        _cached_translations[lc_messages] = gettext.translation("raidcalc", fallback=True)
    return _cached_translations[lc_messages]


# the lambdas keep _get_translations() evaluated on every call
# pylint: disable=unnecessary-lambda
_ = lambda x: _get_translations().gettext(x) if x != "" else ""
P_ = lambda x, y, z: _get_translations().ngettext(x, y, z)
