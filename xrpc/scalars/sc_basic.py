#
# This is open-source software licensed under a BSD license.
# Please see the file LICENSE.txt for details.
#
from xrpc import xr_types


class BaseCodec(object):

    kind = None
    zero = None

    def __init__(self):
        self.version = '1.0'

    def encode(self, value):
        return str(value)

    def decode(self, text):
        return text

    def __str__(self):
        return "%s/%s" % (self.kind, self.version)


class IntCodec(BaseCodec):

    kind = xr_types.INT
    zero = 0

    def encode(self, value):
        # floats with an integral value are sent as int
        return '%d' % (int(value))

    def decode(self, text):
        return int(text.strip())


class DoubleCodec(BaseCodec):

    kind = xr_types.DOUBLE
    zero = 0.0

    def encode(self, value):
        return repr(float(value))

    def decode(self, text):
        return float(text.strip())


class BooleanCodec(BaseCodec):

    kind = xr_types.BOOLEAN
    zero = False

    def encode(self, value):
        return '1' if value else '0'

    def decode(self, text):
        return text.strip() == '1'


class StringCodec(BaseCodec):

    kind = xr_types.STRING
    zero = ''


class NilCodec(BaseCodec):

    kind = xr_types.NIL

    def encode(self, value):
        # <nil/> has no content
        return None

    def decode(self, text):
        return None
