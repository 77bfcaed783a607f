#
# raid.py
# representation of RAID levels
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

import abc

from ..errors import RaidError


class RAIDLevel(object, metaclass=abc.ABCMeta):

    """An abstract class which is the parent of classes which represent a
       RAID level. A better word would be classification, since 'level'
       implies an ordering, but level is the canonical word.

       The abstract properties of the class are:

       - level: A string designating this level, e.g. "5" or "1E"

       - min_members: The minimum number of members required for this
           level to be sensibly used.

       - nick: A single nickname for this level, may be None

       - performance, redundancy, description, use_case: descriptive
           text for presentation; never interpreted here.

       Sizes are plain numbers in (binary) terabytes. When members differ
       in size every member is treated as if it were as small as the
       smallest one.

       Note that each subclass in this file is instantiated immediately after
       it is defined and using the same name, effectively yielding a
       singleton object of the class.
    """

    # ABSTRACT PROPERTIES
    level = abc.abstractproperty(doc="A code representing the level")

    min_members = abc.abstractproperty(
        doc="The minimum number of members required for this level")

    nick = abc.abstractproperty(doc="A nickname for this level")

    performance = abc.abstractproperty(doc="Relative performance tier")
    redundancy = abc.abstractproperty(doc="Relative redundancy tier")
    description = abc.abstractproperty(doc="Short description of the layout")
    use_case = abc.abstractproperty(doc="Typical use case for this level")

    # PROPERTIES
    min_group_size = property(lambda s: None,
                              doc="The minimum members per inner group, None if not grouped")

    requires_even_members = property(lambda s: False,
                                     doc="Whether the member count must be even")

    requires_divisible_groups = property(lambda s: False,
                                         doc="Whether the member count must be a multiple of the group size")

    is_grouped = property(lambda s: s.min_group_size is not None,
                          doc="Whether this level stripes across inner redundancy groups")

    number = property(lambda s: int(s.level) if s.level.isdigit() else None,
                      doc="A numeric code for this level, None if there is none")

    name = property(lambda s: "raid" + s.level,
                    doc="The canonical name for this level")

    label = property(lambda s: "RAID " + s.level,
                     doc="The name of this level as shown to people")

    alt_synth_names = property(lambda s: [n for n in ["RAID" + s.level, s.level, s.number] if n is not None],
                               doc="names that can be synthesized from level but are not name")

    names = property(lambda s:
                     [n for n in [s.name] + [s.nick] + s.alt_synth_names if n is not None],
                     doc="all valid names for this level")

    # METHODS
    def has_redundancy(self):
        """ Whether this RAID level survives the loss of a member.

            :rtype: boolean
        """
        return self.get_failure_tolerance(self.min_members) > 0

    def get_max_spares(self, member_count):
        """The maximum number of hot spares for this level.

           :param int member_count: the number of drives belonging to the array
           :rtype: int

           Raises a RaidError if member_count is fewer than the minimum
           number of members required for this level.
        """
        if member_count < self.min_members:
            raise RaidError("%s requires at least %d disks" % (self.name, self.min_members))
        return member_count - self.min_members

    def get_group_size(self, group_size=None):
        """The group size this level works with.

           :param group_size: requested members per inner group, or None
           :type group_size: int or NoneType
           :returns: None for levels that are not grouped, otherwise
              group_size or the minimum group size if none was requested
           :rtype: int or NoneType

           Raises a RaidError if a grouped level is given a group size
           that is not a positive number.
        """
        if not self.is_grouped:
            return None
        if group_size is None:
            return self.min_group_size
        if group_size <= 0:
            raise RaidError("%s group size must be a positive number" % self.name)
        return group_size

    def get_net_array_size(self, member_count, smallest_member_size, group_size=None):
        """Return the space available for data on an array of member_count
           active members of smallest_member_size each.

           :param int member_count: the number of active members in the array
           :param smallest_member_size: the size of the smallest
             member of this array, in TB
           :type smallest_member_size: int or float
           :param group_size: members per inner group for grouped levels
           :type group_size: int or NoneType
           :returns: the array size in TB
           :rtype: float

           The result is not checked against min_members; validating the
           member count is left to the caller.

           Raises a RaidError if smallest_member_size is less than 0.
        """
        if smallest_member_size < 0:
            raise RaidError("size is a negative number")
        return self._get_net_array_size(member_count, smallest_member_size,
                                        self.get_group_size(group_size))

    @abc.abstractmethod
    def _get_net_array_size(self, member_count, smallest_member_size, group_size):
        """Helper function; not to be called directly."""
        raise NotImplementedError()

    def get_usable_capacity(self, member_sizes, spares=0, group_size=None):
        """Estimate the amount of data that can be stored on this array.

           :param member_sizes: the sizes of all drives of the array, in TB
           :type member_sizes: list of int or float
           :param int spares: how many of the drives are hot spares
           :param group_size: members per inner group for grouped levels
           :type group_size: int or NoneType
           :returns: usable capacity in TB
           :rtype: float
        """
        if not member_sizes:
            return 0.0

        return self.get_net_array_size(len(member_sizes) - spares, min(member_sizes), group_size)

    def get_overhead_members(self, member_count, group_size=None):
        """The number of members whose space goes to parity or mirroring.

           :param int member_count: the number of active members
           :param group_size: members per inner group for grouped levels
           :type group_size: int or NoneType
           :rtype: int or float
        """
        return self._get_overhead_members(member_count, self.get_group_size(group_size))

    @abc.abstractmethod
    def _get_overhead_members(self, member_count, group_size):
        """Helper function; not to be called directly."""
        raise NotImplementedError()

    def get_failure_tolerance(self, member_count, group_size=None):
        """The number of concurrent member failures the array survives.

           :param int member_count: the number of active members
           :param group_size: members per inner group for grouped levels
           :type group_size: int or NoneType
           :rtype: int
        """
        return self._get_failure_tolerance(member_count, self.get_group_size(group_size))

    @abc.abstractmethod
    def _get_failure_tolerance(self, member_count, group_size):
        """Helper function; not to be called directly."""
        raise NotImplementedError()

    def __str__(self):
        return self.name

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        # pylint: disable=unused-argument
        return self


class RAIDnm(RAIDLevel, metaclass=abc.ABCMeta):

    """An abstract class for nested levels which stripe data across a
       number of equally sized parity groups.

       Each group gives up group_parity members to parity, and survives
       the loss of as many members.
    """

    group_parity = abc.abstractproperty(doc="Parity members in each group")

    requires_divisible_groups = property(lambda s: True)

    def _get_net_array_size(self, member_count, smallest_member_size, group_size):
        groups = member_count / group_size
        return groups * (group_size - self.group_parity) * smallest_member_size

    def _get_overhead_members(self, member_count, group_size):
        return (member_count / group_size) * self.group_parity

    def _get_failure_tolerance(self, member_count, group_size):
        return (member_count // group_size) * self.group_parity


class RAIDLevels(object):

    """A class which keeps track of registered RAID levels, in the order
       in which they were registered.
    """

    def __init__(self, levels=None):
        """Add the specified standard levels to the levels in this object.

           :param levels: the levels to be added to this object
           :type levels: list of valid RAID level descriptors

           levels must be a list of valid level descriptors of standard
           levels. Duplicate descriptors are ignored.
        """
        levels = levels or []
        self._raid_levels = []
        for level in levels:
            matches = [l for l in ALL_LEVELS if level in l.names]
            if len(matches) != 1:
                raise RaidError("invalid standard RAID level descriptor %s" % level)
            else:
                self.add_raid_level(matches[0])

    @classmethod
    def is_raid_level(cls, level):
        """Return False if level does not satisfy minimum requirements for
           a RAID level, otherwise return True.

           :param object level: an object representing a RAID level

           There must be at least one element in the names list, or the level
           will be impossible to look up by any string.

           The name property must be defined; it should be one of the
           elements in the names list.
        """
        try:
            return len(level.names) > 0 and level.name in level.names
        except (TypeError, AttributeError):
            return False

    def raid_level(self, descriptor):
        """Return RAID object corresponding to descriptor.

           :param object descriptor: a RAID level descriptor

           Note that descriptor may be any object that identifies a
           RAID level, including the RAID object itself.

           Raises a RaidError if no RAID object can be found for this
           descriptor.
        """
        for level in self._raid_levels:
            if descriptor is level or descriptor in level.names:
                return level
        raise RaidError("invalid RAID level descriptor %s" % descriptor)

    def add_raid_level(self, level):
        """Adds level to levels if it is not already there.

           :param object level: an object representing a RAID level

           Raises a RaidError if level is not valid.

           Does not allow duplicate level objects.
        """
        if not self.is_raid_level(level):
            raise RaidError("level is not a valid RAID level")
        if level not in self._raid_levels:
            self._raid_levels.append(level)

    def __iter__(self):
        return iter(self._raid_levels)

    def __len__(self):
        return len(self._raid_levels)


ALL_LEVELS = RAIDLevels()


class RAID0(RAIDLevel):

    level = property(lambda s: "0")
    min_members = property(lambda s: 2)
    nick = property(lambda s: "stripe")

    performance = property(lambda s: "Excellent")
    redundancy = property(lambda s: "None")
    description = property(lambda s: "Striping across all drives - No redundancy, maximum performance and capacity")
    use_case = property(lambda s: "Non-critical data, maximum speed needed")

    def _get_net_array_size(self, member_count, smallest_member_size, group_size):
        return smallest_member_size * member_count

    def _get_overhead_members(self, member_count, group_size):
        return 0

    def _get_failure_tolerance(self, member_count, group_size):
        return 0


RAID0 = RAID0()
ALL_LEVELS.add_raid_level(RAID0)


class RAID1(RAIDLevel):

    level = property(lambda s: "1")
    min_members = property(lambda s: 2)
    nick = property(lambda s: "mirror")

    performance = property(lambda s: "Good")
    redundancy = property(lambda s: "High")
    description = property(lambda s: "Complete mirroring - 50% capacity, excellent redundancy for 2-4 drives")
    use_case = property(lambda s: "Critical data, 2-4 drives, read-heavy workloads")

    def _get_net_array_size(self, member_count, smallest_member_size, group_size):
        return smallest_member_size * (member_count // 2)

    def _get_overhead_members(self, member_count, group_size):
        return member_count // 2

    def _get_failure_tolerance(self, member_count, group_size):
        return 1


RAID1 = RAID1()
ALL_LEVELS.add_raid_level(RAID1)


class RAID1E(RAIDLevel):

    level = property(lambda s: "1E")
    min_members = property(lambda s: 3)
    nick = property(lambda s: None)

    performance = property(lambda s: "Good")
    redundancy = property(lambda s: "High")
    description = property(lambda s: "Enhanced mirroring - Supports odd number of drives, distributed mirrors")
    use_case = property(lambda s: "Odd-numbered drive arrays, better rebuild performance than RAID 1")

    def _get_net_array_size(self, member_count, smallest_member_size, group_size):
        return smallest_member_size * (member_count // 2)

    def _get_overhead_members(self, member_count, group_size):
        return member_count // 2

    def _get_failure_tolerance(self, member_count, group_size):
        return 1


RAID1E = RAID1E()
ALL_LEVELS.add_raid_level(RAID1E)


class RAID10(RAIDLevel):

    level = property(lambda s: "10")
    min_members = property(lambda s: 4)
    nick = property(lambda s: None)
    requires_even_members = property(lambda s: True)

    performance = property(lambda s: "Excellent")
    redundancy = property(lambda s: "High")
    description = property(lambda s: "Mirrored stripes - Excellent performance and redundancy, requires even drives")
    use_case = property(lambda s: "Database servers, high I/O applications, 4+ even drives")

    # the member count is even, so no rounding is needed
    def _get_net_array_size(self, member_count, smallest_member_size, group_size):
        return smallest_member_size * (member_count / 2)

    def _get_overhead_members(self, member_count, group_size):
        return member_count / 2

    def _get_failure_tolerance(self, member_count, group_size):
        return 1


RAID10 = RAID10()
ALL_LEVELS.add_raid_level(RAID10)


class RAID5(RAIDLevel):

    level = property(lambda s: "5")
    min_members = property(lambda s: 3)
    nick = property(lambda s: None)

    performance = property(lambda s: "Good")
    redundancy = property(lambda s: "Medium")
    description = property(lambda s: "Single parity striping - Good balance of capacity, performance, and redundancy")
    use_case = property(lambda s: "General purpose, 3-8 drives, balanced workloads")

    def _get_net_array_size(self, member_count, smallest_member_size, group_size):
        return smallest_member_size * (member_count - 1)

    def _get_overhead_members(self, member_count, group_size):
        return 1

    def _get_failure_tolerance(self, member_count, group_size):
        return 1


RAID5 = RAID5()
ALL_LEVELS.add_raid_level(RAID5)


class RAID6(RAIDLevel):

    level = property(lambda s: "6")
    min_members = property(lambda s: 4)
    nick = property(lambda s: None)

    performance = property(lambda s: "Good")
    redundancy = property(lambda s: "High")
    description = property(lambda s: "Dual parity striping - Can survive 2 drive failures, safer for large drives")
    use_case = property(lambda s: "Large capacity drives (>8TB), mission-critical data, 4+ drives")

    def _get_net_array_size(self, member_count, smallest_member_size, group_size):
        return smallest_member_size * (member_count - 2)

    def _get_overhead_members(self, member_count, group_size):
        return 2

    def _get_failure_tolerance(self, member_count, group_size):
        return 2


RAID6 = RAID6()
ALL_LEVELS.add_raid_level(RAID6)


class RAID5E(RAIDLevel):

    """ RAID 5 with one member's worth of spare space distributed across
        all members, so it gives up two members of capacity but still
        tolerates only a single failure.
    """

    level = property(lambda s: "5E")
    min_members = property(lambda s: 4)
    nick = property(lambda s: None)

    performance = property(lambda s: "Good")
    redundancy = property(lambda s: "Medium-High")
    description = property(lambda s: "RAID 5 with integrated distributed spare - Faster rebuild than hot spare")
    use_case = property(lambda s: "When faster rebuild is priority over RAID 5")

    def _get_net_array_size(self, member_count, smallest_member_size, group_size):
        return smallest_member_size * (member_count - 2)

    def _get_overhead_members(self, member_count, group_size):
        return 2

    def _get_failure_tolerance(self, member_count, group_size):
        return 1


RAID5E = RAID5E()
ALL_LEVELS.add_raid_level(RAID5E)


class RAID5EE(RAIDLevel):

    level = property(lambda s: "5EE")
    min_members = property(lambda s: 4)
    nick = property(lambda s: None)

    performance = property(lambda s: "Good")
    redundancy = property(lambda s: "Medium-High")
    description = property(lambda s: "Enhanced RAID 5E - Better spare distribution and performance")
    use_case = property(lambda s: "Advanced RAID 5E alternative with better characteristics")

    def _get_net_array_size(self, member_count, smallest_member_size, group_size):
        return smallest_member_size * (member_count - 2)

    def _get_overhead_members(self, member_count, group_size):
        return 2

    def _get_failure_tolerance(self, member_count, group_size):
        return 1


RAID5EE = RAID5EE()
ALL_LEVELS.add_raid_level(RAID5EE)


class RAID50(RAIDnm):

    level = property(lambda s: "50")
    min_members = property(lambda s: 6)
    min_group_size = property(lambda s: 3)
    group_parity = property(lambda s: 1)
    nick = property(lambda s: None)

    performance = property(lambda s: "Excellent")
    redundancy = property(lambda s: "Medium")
    description = property(lambda s: "Striped RAID 5 arrays - Better performance, 1 failure per RAID 5 group")
    use_case = property(lambda s: "Large arrays (6-24 drives), high performance needs")


RAID50 = RAID50()
ALL_LEVELS.add_raid_level(RAID50)


class RAID60(RAIDnm):

    level = property(lambda s: "60")
    min_members = property(lambda s: 8)
    min_group_size = property(lambda s: 4)
    group_parity = property(lambda s: 2)
    nick = property(lambda s: None)

    performance = property(lambda s: "Very Good")
    redundancy = property(lambda s: "Very High")
    description = property(lambda s: "Striped RAID 6 arrays - Maximum redundancy, 2 failures per RAID 6 group")
    use_case = property(lambda s: "Enterprise, very large arrays, maximum data protection")


RAID60 = RAID60()
ALL_LEVELS.add_raid_level(RAID60)


raid_levels = RAIDLevels(["0", "1", "1E", "10", "5", "6", "5E", "5EE", "50", "60"])


def lookup(descriptor):
    """ Convenience function to return a RAID level for the descriptor.

        :param object descriptor: a RAID level descriptor
        :rtype: RAIDLevel
        :returns: The RAIDLevel object for this descriptor

        Note that descriptor may be any object that identifies a
        RAID level, including the RAID object itself.

        Raises a RaidError is there is no RAID object for the descriptor.
    """
    return raid_levels.raid_level(descriptor)
