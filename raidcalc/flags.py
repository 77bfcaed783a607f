# flags.py
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

class Flags(object):

    def __init__(self):
        #
        # mode of operation
        #
        self.debug = False

        #
        # advisory thresholds
        #

        # URE probability during a rebuild above which a warning is issued
        self.ure_warning_threshold = 0.01

        # smallest member size (TB) above which RAID 5 is flagged as risky
        self.raid5_large_drive_threshold = 8.0

    def reset(self):
        self.__init__()


flags = Flags()
