#
# This is open-source software licensed under a BSD license.
# Please see the file LICENSE.txt for details.
#
"""
dateTime.iso8601 values, in the fixed layout used by XML-RPC:

    YYYYMMDDTHH:MM:SS

Encoding uses the calendar fields of the value as they are; no timezone
conversion is done.  Microseconds are not carried.
"""
import datetime
import re

from xrpc import xr_types

# year, month, day, separator, hour, minute, second at fixed offsets
_layout = re.compile(r'^(\d{4})(\d{2})(\d{2}).(\d{2}):(\d{2}):(\d{2})$')


class Codec(object):

    kind = xr_types.DATETIME
    zero = None

    def __init__(self):
        self.version = '1.0'

    def encode(self, value):
        if not isinstance(value, datetime.datetime):
            # a plain date is sent as midnight of that day
            value = datetime.datetime(value.year, value.month, value.day)
        return "%04d%02d%02dT%02d:%02d:%02d" % (
            value.year, value.month, value.day,
            value.hour, value.minute, value.second)

    def decode(self, text):
        text = text.strip()
        match = _layout.match(text)
        if match is None:
            raise ValueError("not a dateTime.iso8601 value: '%s'" % (text))
        year, month, day, hour, minute, sec = [int(s) for s in match.groups()]
        return datetime.datetime(year, month, day, hour, minute, sec)

    def __str__(self):
        return "%s/%s" % (self.kind, self.version)
