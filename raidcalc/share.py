# share.py
# Shareable links for array configurations.
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
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from .array import Drive
from .devicelibs.raid import lookup
from .errors import RaidError, ShareError
from .util import default_namedtuple, format_number

import logging
log = logging.getLogger("raidcalc")

SharedConfiguration = default_namedtuple("SharedConfiguration", ["level", "drives", ("hot_spares", 0)],
                                         doc="""An array configuration read back from a link.

                                         :param level: the RAID level
                                         :type level: :class:`~.devicelibs.raid.RAIDLevel`
                                         :param drives: equally sized drives
                                         :type drives: tuple of :class:`~.array.Drive`
                                         :param int hot_spares: number of hot spares
                                         """)


def share_query(evaluation):
    """ Encode the essentials of an evaluated array as a URL query.

        :param evaluation: the evaluation to share
        :type evaluation: :class:`~.array.ArrayEvaluation`
        :rtype: str

        Only the level, the drive count, the smallest drive size and the
        number of hot spares are kept, so an array of mixed drives comes
        back as an array of drives of the smallest size.

        Raises a ShareError if the drive capacities of the evaluation are
        undefined.
    """
    if evaluation.min_capacity is None:
        raise ShareError("cannot share an array whose drive size is undefined")
    return urlencode([("raid", evaluation.level.level),
                      ("drives", str(evaluation.drive_count)),
                      ("size", format_number(evaluation.min_capacity)),
                      ("spares", format_number(evaluation.hot_spares))])


def share_url(evaluation, base_url):
    """ Return base_url with the query of :func:`share_query`.

        Any query or fragment already present in base_url is replaced.
    """
    (scheme, netloc, path, _query, _fragment) = urlsplit(base_url)
    return urlunsplit((scheme, netloc, path, share_query(evaluation), ""))


def _get_value(params, key, convert, query, default=None):
    values = params.get(key)
    if not values:
        if default is not None:
            return default
        raise ShareError("missing '%s' in shared configuration" % key, query)
    try:
        return convert(values[-1])
    except ValueError:
        raise ShareError("invalid value %r for '%s' in shared configuration" % (values[-1], key), query)


def parse_share_query(query):
    """ Rebuild an array configuration from a shared query.

        :param str query: a query string as made by :func:`share_query`,
            optionally with a leading '?' or as part of a full URL
        :rtype: :class:`SharedConfiguration`

        Raises a ShareError if the query does not describe an array.
    """
    if "?" in query:
        query = query.split("?", 1)[1]
    query = query.split("#", 1)[0]
    params = parse_qs(query)

    try:
        level = lookup(_get_value(params, "raid", str, query))
    except RaidError as e:
        raise ShareError(str(e), query)

    count = _get_value(params, "drives", int, query)
    size = _get_value(params, "size", float, query)
    spares = _get_value(params, "spares", int, query, default=0)

    if count < 0:
        raise ShareError("drive count in shared configuration is negative", query)
    if not math.isfinite(size):
        raise ShareError("drive size in shared configuration is not a finite number", query)
    if size <= 0:
        raise ShareError("drive size in shared configuration is not positive", query)
    if spares < 0:
        raise ShareError("hot spare count in shared configuration is negative", query)

    log.debug("shared configuration: %s, %d x %s TB, %d spares", level, count, format_number(size), spares)
    drives = tuple(Drive(str(i + 1), size) for i in range(count))
    return SharedConfiguration(level, drives, spares)
