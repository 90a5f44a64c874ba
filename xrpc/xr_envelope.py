#
# xr_envelope.py -- XML-RPC request and response documents
#
# This is open-source software licensed under a BSD license.
# Please see the file LICENSE.txt for details.
#
"""
Request document (produced):

    <?xml version="1.0"?>
    <methodCall><methodName>NAME</methodName><params>
    <param><value>...</value></param>
    ...
    </params></methodCall>

Response documents (consumed, see `xr_unmarshal`):

    <methodResponse><params><param><value>...</value></param></params></methodResponse>
    <methodResponse><fault><value><struct>...</struct></value></fault></methodResponse>
"""
from lxml import etree

from . import xr_config
from .xr_marshal import Marshaller, tostring
from .exceptions import ProtocolFault


class Request(object):
    """A method call: a method name and an ordered list of parameters.

    A Request does not change once it is built.
    """

    __slots__ = ('_method_name', '_params')

    def __init__(self, method_name, params=()):
        self._method_name = method_name
        self._params = tuple(params)

    @property
    def method_name(self):
        return self._method_name

    @property
    def params(self):
        return self._params

    def to_tree(self, allow_none=None):
        marshaller = Marshaller(allow_none=allow_none)

        root = etree.Element('methodCall')
        etree.SubElement(root, 'methodName').text = self._method_name
        params = etree.SubElement(root, 'params')
        params.text = '\n'
        for value in self._params:
            param = etree.SubElement(params, 'param')
            param.append(marshaller.dump_value(value))
            param.tail = '\n'
        return root

    def to_xml(self, allow_none=None):
        """Render the complete request document as text."""
        return xr_config.prolog + tostring(self.to_tree(allow_none=allow_none))

    def __repr__(self):
        return "<%s %s%r>" % (self.__class__.__name__, self._method_name,
                              self._params)


class Fault(object):
    """Application error returned by the server in place of a value."""

    def __init__(self, code, message):
        self.code = code
        self.message = message

    @classmethod
    def from_struct(cls, d):
        return cls(d.get('faultCode'), d.get('faultString'))

    def to_exception(self, msg=None):
        return ProtocolFault(self.code, self.message, msg=msg)

    def __eq__(self, other):
        return (isinstance(other, Fault) and
                (self.code, self.message) == (other.code, other.message))

    __hash__ = None

    def __repr__(self):
        return "<%s %s: %s>" % (self.__class__.__name__, self.code,
                                self.message)


class Response(object):
    """Outcome of a call: either a value or a `Fault`."""

    def __init__(self, value=None, fault=None):
        self.value = value
        self.fault = fault

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, fault):
        return cls(fault=fault)

    def is_fault(self):
        return self.fault is not None

    def result(self):
        """Return the value, or raise `ProtocolFault` for a fault."""
        if self.fault is not None:
            raise self.fault.to_exception()
        return self.value

    def __repr__(self):
        if self.fault is not None:
            return "<%s failure %r>" % (self.__class__.__name__, self.fault)
        return "<%s success %r>" % (self.__class__.__name__, self.value)

#END
