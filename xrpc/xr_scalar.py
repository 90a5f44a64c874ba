#
# xr_scalar.py -- registry of XML-RPC scalar codecs
#
# This is open-source software licensed under a BSD license.
# Please see the file LICENSE.txt for details.
#
"""
All scalar values pass through a codec looked up by wire tag:

    text = encode(tag, value)
    value = decode(tag, text)

A codec for a tag is an object with `kind`, `zero`, `encode` and
`decode` (see `xrpc.scalars`).  Additional codecs can be installed with
`register_codec`.
"""
from . import xr_types
from .scalars import sc_basic, sc_datetime, sc_base64

# holds all the scalar codecs, by wire tag
codecs = {}


def register_codec(codec):
    codecs[codec.kind] = codec


def get_codec(tag):
    return codecs[xr_types.normalize_tag(tag)]


def is_scalar(tag):
    return xr_types.normalize_tag(tag) in codecs


def encode(tag, value):
    """Encode a scalar into element text.

    Parameters
    ----------
    tag : str
        wire tag, as returned by `xr_types.classify`
    value : native scalar value

    Returns
    -------
    text : str or None
        None only for tags that have no content (nil)
    """
    return get_codec(tag).encode(value)


def decode(tag, text):
    """Decode element text into a scalar.

    An element with no text decodes to the zero value of its tag.
    Whitespace-only text counts as no text, except for strings, where
    it is the value.

    Raises
    ------
    `ValueError` : if `text` is not valid for `tag`
    """
    codec = get_codec(tag)
    if text is None:
        return codec.zero
    if codec.kind != xr_types.STRING and not text.strip():
        return codec.zero
    return codec.decode(text)


for codec in (sc_basic.IntCodec(), sc_basic.DoubleCodec(),
              sc_basic.BooleanCodec(), sc_basic.StringCodec(),
              sc_basic.NilCodec(), sc_datetime.Codec(),
              sc_base64.Codec()):
    register_codec(codec)

# END
