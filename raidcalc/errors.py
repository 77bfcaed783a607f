# errors.py
# Exception classes for the raidcalc array modeling library.
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


class RaidCalcError(Exception):
    pass

# RAID


class RaidError(RaidCalcError):
    pass

# Array


class ArrayError(RaidCalcError):
    pass

# Sharing


class ShareError(RaidCalcError):

    def __init__(self, message, query=None):
        RaidCalcError.__init__(self, message)
        self.query = query
