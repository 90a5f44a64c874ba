#
# xr_marshal.py -- native values to XML-RPC markup
#
# This is open-source software licensed under a BSD license.
# Please see the file LICENSE.txt for details.
#
from lxml import etree

from . import xr_config, xr_types, xr_scalar


class Marshaller(object):
    """Renders native values as XML-RPC elements.

    `marshal` returns the typed element (``<int>``, ``<array>``, ...);
    `dump_value` wraps it in ``<value>``.  Containers are rendered
    recursively; a value that contains itself recurses until Python's
    recursion limit is hit, so callers must not pass cyclic values.
    """

    def __init__(self, allow_none=None):
        if allow_none is None:
            allow_none = xr_config.allow_none
        self.allow_none = allow_none

        self.dispatch = {
            xr_types.ARRAY: self.dump_array,
            xr_types.STRUCT: self.dump_struct,
            xr_types.NIL: self.dump_nil,
            }

    def marshal(self, value):
        tag = xr_types.classify(value)
        method = self.dispatch.get(tag, self.dump_scalar)
        return method(tag, value)

    def dump_value(self, value):
        elt = etree.Element('value')
        elt.append(self.marshal(value))
        return elt

    def dump_scalar(self, tag, value):
        elt = etree.Element(tag)
        elt.text = xr_scalar.encode(tag, value)
        return elt

    def dump_nil(self, tag, value):
        if not self.allow_none:
            raise TypeError("cannot marshal None unless allow_none is enabled")
        return etree.Element(tag)

    def dump_array(self, tag, value):
        elt = etree.Element(tag)
        data = etree.SubElement(elt, 'data')
        # keep an explicit end tag when there are no elements
        data.text = ''
        for item in value:
            data.append(self.dump_value(item))
        return elt

    def dump_struct(self, tag, value):
        elt = etree.Element(tag)
        elt.text = ''
        for name, item in xr_types.struct_items(value):
            member = etree.SubElement(elt, 'member')
            etree.SubElement(member, 'name').text = str(name)
            member.append(self.dump_value(item))
        return elt


def tostring(elt):
    """Serialize an element as text."""
    return etree.tostring(elt, encoding='unicode')


def dumps(params, method_name, allow_none=None):
    """Encode a method call as an XML-RPC request document (text)."""
    from .xr_envelope import Request
    return Request(method_name, params).to_xml(allow_none=allow_none)

#END
