#
# This is open-source software licensed under a BSD license.
# Please see the file LICENSE.txt for details.
#
import base64
import re

from xrpc import xr_types

_whitespace = re.compile(r'\s+')


class Codec(object):

    kind = xr_types.BASE64
    zero = b''

    def __init__(self):
        self.version = '1.0'

    def encode(self, value):
        return base64.b64encode(bytes(value)).decode('ascii')

    def decode(self, text):
        # servers commonly wrap base64 text into lines
        text = _whitespace.sub('', text)
        # restore trailing padding if the sender dropped it
        text += '=' * (-len(text) % 4)
        return base64.b64decode(text.encode('ascii'))

    def __str__(self):
        return "%s/%s" % (self.kind, self.version)
