#
# xr_unmarshal.py -- XML-RPC response markup to native values
#
# This is open-source software licensed under a BSD license.
# Please see the file LICENSE.txt for details.
#
"""
The response tree is decoded in a single depth-first pass.

Containers are attached to their parent the moment their opening tag is
seen, and a frame for the new container is pushed; everything decoded
below it is added to that (already linked) container in place.  The
frame is popped when the container element is left.  So the finished
value tree exists as soon as the walk ends, with no second pass.

The parser is lenient by default: structure that is missing or in the
wrong place is skipped, giving a partial (or missing) value.  With
``strict=True`` such responses raise `MalformedResponseError` instead.
Scalar text that cannot be decoded always raises.

Whitespace-only text between elements is ignored, but the text of a
<string> element is kept exactly as sent, so a string of spaces survives
a round trip.  For other scalars whitespace-only text is the zero value.
"""
import logging

from lxml import etree

from . import xr_config, xr_types, xr_scalar
from .xr_envelope import Response, Fault
from .exceptions import MalformedResponseError


class ParseFrame(object):
    """One array or struct under construction."""

    __slots__ = ('container', 'name')

    def __init__(self, container):
        self.container = container
        # pending member name (structs only)
        self.name = None

    def is_struct(self):
        return isinstance(self.container, dict)

    def attach(self, value):
        if not self.is_struct():
            self.container.append(value)
            return True

        if self.name is None:
            # member value without a <name>
            return False
        self.container[self.name] = value
        self.name = None
        return True


class ParseState(object):
    """Everything that changes during one walk of a response tree."""

    def __init__(self):
        self.is_fault = False
        # open containers, innermost last
        self.frames = []
        # values that have no enclosing container
        self.results = []

    def attach(self, value):
        if len(self.frames) == 0:
            self.results.append(value)
            return True
        return self.frames[-1].attach(value)

    def set_name(self, name):
        for frame in reversed(self.frames):
            if frame.is_struct():
                frame.name = name
                return True
        return False


class Unmarshaller(object):

    def __init__(self, logger=None, strict=None):
        if logger:
            self.logger = logger
        else:
            self.logger = logging.Logger('null')

        if strict is None:
            strict = xr_config.strict_parsing
        self.strict = strict

    def parse(self, root):
        """Decode a methodResponse tree.

        Parameters
        ----------
        root : lxml element (or element tree)
            the parsed response document

        Returns
        -------
        response : `Response`
            holding either the first value in the document or a `Fault`
        """
        if hasattr(root, 'getroot'):
            root = root.getroot()

        if self.strict and _localname(root) != 'methodresponse':
            raise MalformedResponseError(
                "expected <methodResponse>, got <%s>" % (root.tag))

        state = ParseState()
        self.walk(root, state)

        if len(state.results) == 0:
            self.malformed("response contains no value")
            value = None
        else:
            value = state.results[0]
            if len(state.results) > 1:
                self.logger.debug("ignoring %d extra values in response" % (
                    len(state.results) - 1))

        if state.is_fault:
            return Response.failure(self.make_fault(value))
        return Response.success(value)

    def walk(self, elt, state):
        tag = _localname(elt)

        if tag == 'fault':
            state.is_fault = True

        elif tag == 'name':
            if not state.set_name(elt.text or ''):
                self.malformed("<name> outside of a struct")
            return

        elif tag in xr_types.container_tags:
            container = [] if tag == xr_types.ARRAY else {}
            self.attach(state, container)
            state.frames.append(ParseFrame(container))
            try:
                for child in _elements(elt):
                    self.walk(child, state)
            finally:
                state.frames.pop()
            return

        elif xr_scalar.is_scalar(tag):
            self.attach(state, self.decode(tag, elt.text))
            return

        elif tag == 'value' and _is_untyped(elt):
            # a value with no type element is a string
            self.attach(state, self.decode(xr_types.STRING, elt.text))
            return

        for child in _elements(elt):
            self.walk(child, state)

    def attach(self, state, value):
        if not state.attach(value):
            self.malformed("struct member has no <name>")

    def decode(self, tag, text):
        try:
            return xr_scalar.decode(tag, text)

        except ValueError as e:
            raise MalformedResponseError("bad <%s> value %r: %s" % (
                tag, text, str(e)))

    def make_fault(self, value):
        if not isinstance(value, dict):
            self.malformed("fault does not contain a struct")
            value = {}
        elif 'faultCode' not in value or 'faultString' not in value:
            self.malformed("fault struct lacks faultCode/faultString")
        return Fault.from_struct(value)

    def malformed(self, msg):
        if self.strict:
            raise MalformedResponseError(msg)
        self.logger.debug("malformed response: %s" % (msg))


def _localname(elt):
    return etree.QName(elt).localname.lower()


def _elements(elt):
    # skip comments and processing instructions
    return [child for child in elt if isinstance(child.tag, str)]


def _is_untyped(elt):
    return len(_elements(elt)) == 0


def make_parser():
    # responses come from the network: no entities, no fetching of DTDs.
    # huge_tree lifts libxml2's depth limit of 256, which nested
    # containers (3 levels each) reach quickly
    return etree.XMLParser(resolve_entities=False, no_network=True,
                           remove_comments=True, huge_tree=True)


def parse_text(text):
    """Parse response text into an lxml element tree root.

    Raises
    ------
    `MalformedResponseError` : if `text` is not well formed XML
    """
    if isinstance(text, str):
        # lxml refuses str input that carries an encoding declaration
        text = text.encode('utf-8')
    try:
        return etree.fromstring(text, parser=make_parser())

    except (etree.XMLSyntaxError, ValueError) as e:
        raise MalformedResponseError("response is not well formed XML: %s" % (
            str(e)))


def loads(text, strict=None, logger=None):
    """Decode XML-RPC response text into a `Response`."""
    root = parse_text(text)
    return Unmarshaller(logger=logger, strict=strict).parse(root)

#END
