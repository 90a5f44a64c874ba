#
# Exceptions raised by the xrpc codec and its transports
#
# This is open-source software licensed under a BSD license.
# Please see the file LICENSE.txt for details.
#

class XmlRpcError(Exception):
    pass

class ProtocolFault(XmlRpcError):
    """The remote side answered with a <fault> response."""

    def __init__(self, code, message, msg=None):
        if msg is None:
            msg = "%s (fault code %s)" % (message, code)
        XmlRpcError.__init__(self, msg)
        self.code = code
        self.message = message

class TransportFailure(XmlRpcError):
    """The request could not be delivered or no response was obtained."""

    def __init__(self, msg, url=None, status=None, reason=None):
        XmlRpcError.__init__(self, msg)
        self.url = url
        self.status = status
        self.reason = reason

class TimeoutError(TransportFailure):
    pass

class MalformedResponseError(XmlRpcError):
    pass

#END
