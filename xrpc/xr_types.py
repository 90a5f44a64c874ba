#
# xr_types.py -- wire type tags and classification of native values
#
# This is open-source software licensed under a BSD license.
# Please see the file LICENSE.txt for details.
#
"""
Every native value sent over XML-RPC is given exactly one wire tag:

    Python value                          wire tag
    ------------------------------------  ----------------
    bool                                  boolean
    number with an integral value         int
    other number (float, Decimal, ...)    double
    bytes, bytearray, Binary              base64
    datetime.datetime, datetime.date      dateTime.iso8601
    list, tuple                           array
    str                                   string
    None                                  nil
    anything else                         struct

The classification is total: an unrecognized value is treated as a
struct (a mapping's items, or an object's ``__dict__``).
"""
import datetime
import decimal
import math
import numbers

# scalar tags
INT = 'int'
DOUBLE = 'double'
BOOLEAN = 'boolean'
STRING = 'string'
DATETIME = 'dateTime.iso8601'
BASE64 = 'base64'
NIL = 'nil'

# container tags
ARRAY = 'array'
STRUCT = 'struct'

scalar_tags = (INT, DOUBLE, BOOLEAN, STRING, DATETIME, BASE64, NIL)
container_tags = (ARRAY, STRUCT)

# alternate spellings accepted when reading a response
tag_aliases = {
    'i4': INT,
    'i8': INT,
    'datetime.iso8601': DATETIME,
}


class Binary(object):
    """Marks a byte sequence to be sent as base64.

    Plain ``bytes`` are already sent as base64; wrap other buffers (e.g.
    a memoryview) in this class to get the same treatment.
    """

    def __init__(self, data=b''):
        self.data = bytes(data)

    def __bytes__(self):
        return self.data

    def __len__(self):
        return len(self.data)

    def __eq__(self, other):
        if isinstance(other, Binary):
            other = other.data
        return self.data == other

    __hash__ = None

    def __repr__(self):
        return "<%s %r>" % (self.__class__.__name__, self.data)


def _classify_number(value):
    if isinstance(value, numbers.Integral):
        return INT
    if not math.isfinite(value):
        return DOUBLE
    if round(value) == value:
        return INT
    return DOUBLE


def classify(value):
    """Return the wire tag for `value`.

    Parameters
    ----------
    value : native value

    Returns
    -------
    tag : str
        one of the tags in `scalar_tags` or `container_tags`
    """
    # bool must be checked before int, it is a subclass
    if isinstance(value, bool):
        return BOOLEAN
    # Decimal is not registered as a numbers.Real
    if isinstance(value, (numbers.Real, decimal.Decimal)):
        return _classify_number(value)
    if isinstance(value, (bytes, bytearray, Binary)):
        return BASE64
    if isinstance(value, datetime.date):
        return DATETIME
    if isinstance(value, (list, tuple)):
        return ARRAY
    if isinstance(value, str):
        return STRING
    if value is None:
        return NIL
    return STRUCT


def normalize_tag(tag):
    """Map a tag name read off the wire to one of our tags."""
    tag = tag.strip().lower()
    return tag_aliases.get(tag, tag)


def struct_items(value):
    """Return the (name, value) pairs of something classified as a struct."""
    if hasattr(value, 'items'):
        return list(value.items())
    try:
        return list(vars(value).items())
    except TypeError:
        # no __dict__ (e.g. a set or a slotted object): an empty struct
        return []

#END
