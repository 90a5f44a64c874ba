#
# xr_connection.py -- client connection to an XML-RPC service
#
# This is open-source software licensed under a BSD license.
# Please see the file LICENSE.txt for details.
#
"""
Connection to an XML-RPC service.

USAGE:

>>> from xrpc.xr_connection import Connection
>>> rpc = Connection('http://localhost:8000/', log=True, record=False)

# call any method by name
>>> rpc.request('add', [2, 3])
5

# a single parameter need not be in a list
>>> rpc.request('echo', 'hello')
'hello'

If the server supports introspection (system.listMethods), a stub is
made for every remote method, so it can be called directly.  Dotted
method names become namespaces:

>>> rpc.add(2, 3)
5
>>> rpc.system.methodHelp('add')
'Add two numbers'

A fault returned by the server is raised as `ProtocolFault`.  If the
request cannot be delivered the failure is logged and the call returns
None (pass ``raise_errors=True`` to get the exception instead).
"""
import logging

from . import xr_config, xr_transport
from .xr_envelope import Request
from .xr_unmarshal import Unmarshaller
from .exceptions import (ProtocolFault, TransportFailure,
                         MalformedResponseError)


class MethodStub(object):
    """Calls one remote method with its positional arguments."""

    def __init__(self, connection, name):
        self.connection = connection
        self.name = name

    def __call__(self, *args):
        return self.connection.request(self.name, list(args))

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self.name)


class Namespace(object):
    """Holds the stubs of remote methods that share a dotted prefix."""

    def __init__(self, name):
        self._name = name

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self._name)


class Connection(object):

    def __init__(self, url, log=None, record=None, introspect=None,
                 timeout=None, logger=None, transport=None,
                 allow_none=None, strict=None, raise_errors=False):
        self.url = url

        if logger:
            self.logger = logger
        else:
            self.logger = logging.Logger('null')

        if log is None:
            log = xr_config.log_requests
        self.log = log
        if record is None:
            record = xr_config.record_requests
        self.record = record
        if allow_none is None:
            allow_none = xr_config.allow_none
        self.allow_none = allow_none
        self.raise_errors = raise_errors

        # log of requests, kept if `record` is True
        self.requests_performed = []
        # names of the remote methods we have stubs for
        self.methods = []

        if transport is None:
            transport = xr_transport.make_transport(url, timeout=timeout,
                                                    logger=self.logger)
        self.transport = transport
        self.unmarshaller = Unmarshaller(logger=self.logger, strict=strict)

        if introspect is None:
            introspect = xr_config.introspect
        if introspect:
            self.add_methods()

    def request(self, method, params=None):
        """Call a remote method.

        Parameters
        ----------
        method : str
            name of the remote method

        params : list or tuple, or a single value
            positional parameters for the method

        Returns
        -------
        res : native value
            unmarshalled result of the call, or None if the call failed

        Raises
        ------
        `ProtocolFault` : if the server answered with a fault
        """
        params = self._make_params(params)

        if self.log:
            self.logger.info('RPC request to %s for "%s(%s)"' % (
                self.url, method,
                _format_params(params)[:xr_config.log_param_limit]))

        record = None
        if self.record:
            record = dict(url=self.url, method=method, params=params,
                          response=None)
            self.requests_performed.append(record)

        req = Request(method, params)
        try:
            root = self.transport.send(req.to_xml(allow_none=self.allow_none))
            response = self.unmarshaller.parse(root)

        except (TransportFailure, MalformedResponseError) as e:
            self.logger.error("RPC request to %s for '%s' failed: %s" % (
                self.url, method, str(e)))
            if self.raise_errors:
                raise
            return None

        if record is not None:
            record['response'] = response

        if response.is_fault():
            fault = response.fault
            self.logger.error("RPC fault from %s for '%s': %s (%s)" % (
                self.url, method, fault.message, fault.code))
            raise fault.to_exception(
                msg="Something went wrong on the XML-RPC server: %s" % (
                    fault.message))

        self.logger.debug("response is: %s" % (
            str(response.value)[:xr_config.log_param_limit]))
        return response.value

    def call(self, method, *args):
        return self.request(method, list(args))

    def add_methods(self):
        """Add a stub for every method the server lists."""
        try:
            names = self.request('system.listMethods')

        except ProtocolFault as e:
            self.logger.warning("%s does not support introspection: %s" % (
                self.url, str(e)))
            return

        if not isinstance(names, list):
            return
        for name in names:
            self.add_method(name)

    def add_method(self, name):
        parts = str(name).split('.')
        if '' in parts:
            self.logger.warning("skipping bad method name '%s'" % (name))
            return

        obj = self
        for i, part in enumerate(parts[:-1]):
            ns = getattr(obj, part, None)
            if ns is None:
                ns = Namespace('.'.join(parts[:i+1]))
                setattr(obj, part, ns)
            elif not isinstance(ns, Namespace):
                self.logger.warning("method '%s' would replace attribute '%s'" % (
                    name, part))
                return
            obj = ns

        attr = parts[-1]
        if hasattr(obj, attr):
            self.logger.warning("method '%s' would replace attribute '%s'" % (
                name, attr))
            return
        setattr(obj, attr, MethodStub(self, name))
        self.methods.append(name)

    def _make_params(self, params):
        if params is None:
            return []
        if not isinstance(params, (list, tuple)):
            params = [params]

        res = []
        for param in params:
            if callable(param):
                self.logger.warning("dropping callable parameter %r" % (
                    param,))
                continue
            res.append(param)
        return res

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self.url)


def _format_params(params):
    return ', '.join([repr(param) for param in params])


def make_serviceProxy(host, port, secure=False, path='/', **kwargs):
    """
    Convenience function to make a connection to the service at
    `host`:`port`.  'secure' should be True if you want to use SSL,
    otherwise vanilla http.  Other keyword arguments are passed on to
    `Connection`.
    """
    if secure:
        url = 'https://%s:%d%s' % (host, port, path)
    else:
        url = 'http://%s:%d%s' % (host, port, path)

    return Connection(url, **kwargs)

#END
