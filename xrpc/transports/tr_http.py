#
# tr_http.py -- HTTP(S) transport for xrpc
#
# This is open-source software licensed under a BSD license.
# Please see the file LICENSE.txt for details.
#
import logging
import socket
import http.client
from urllib.parse import urlsplit
from xmlrpc.client import (Transport, SafeTransport, ProtocolError,
                           GzipDecodedResponse)

from .. import xr_config, xr_unmarshal
from ..exceptions import XmlRpcError, TransportFailure, TimeoutError


class HTTPSendMixin(object):
    """Sends one request per connection and hands back the parsed
    response document instead of unmarshalled values.
    """

    def setup(self, url, timeout=None, logger=None, encoding=None):
        self.url = url
        parts = urlsplit(url)
        self.host = parts.netloc
        handler = parts.path or '/'
        if parts.query:
            handler += '?' + parts.query
        self.handler = handler

        if timeout is None:
            timeout = xr_config.default_timeout
        self.timeout = timeout

        if encoding is None:
            encoding = xr_config.default_encoding
        self.encoding = encoding

        if logger:
            self.logger = logger
        else:
            self.logger = logging.Logger('null')

    def send(self, request_text):
        """POST `request_text` and return the root of the response tree.

        Raises
        ------
        `TimeoutError` : if the server does not answer in time
        `TransportFailure` : for any other network or HTTP level error
        `MalformedResponseError` : if the response is not XML
        """
        body = request_text.encode(self.encoding, 'xmlcharrefreplace')
        try:
            return self.request(self.host, self.handler, body)

        except XmlRpcError:
            raise

        except ProtocolError as e:
            raise TransportFailure("%s: HTTP error %d (%s)" % (
                self.url, e.errcode, e.errmsg), url=self.url,
                status=e.errcode, reason=e.errmsg)

        except socket.timeout as e:
            raise TimeoutError("%s: timed out after %s sec" % (
                self.url, self.timeout), url=self.url) from e

        except (OSError, http.client.HTTPException) as e:
            raise TransportFailure("%s: %s" % (self.url, str(e)),
                                   url=self.url) from e

    def request(self, host, handler, request_body, verbose=False):
        # no retry on a cold cached connection: each call gets a fresh one
        try:
            return self.single_request(host, handler, request_body, verbose)

        finally:
            self.close()

    def parse_response(self, response):
        if response.getheader("Content-Encoding", "") == "gzip":
            stream = GzipDecodedResponse(response)
        else:
            stream = response

        try:
            data = stream.read()
        finally:
            if stream is not response:
                stream.close()

        self.logger.debug("response body: %s" % (repr(data)[:500]))
        return xr_unmarshal.parse_text(data)


class HTTPTransport(HTTPSendMixin, Transport):

    def __init__(self, url, timeout=None, logger=None, encoding=None,
                 headers=()):
        Transport.__init__(self, headers=headers)
        self.setup(url, timeout=timeout, logger=logger, encoding=encoding)

    def make_connection(self, host):
        if self._connection and host == self._connection[0]:
            return self._connection[1]

        chost, self._extra_headers, x509 = self.get_host_info(host)
        self._connection = host, http.client.HTTPConnection(
            chost, timeout=self.timeout)
        return self._connection[1]


class HTTPSTransport(HTTPSendMixin, SafeTransport):

    def __init__(self, url, timeout=None, logger=None, encoding=None,
                 headers=(), context=None):
        SafeTransport.__init__(self, headers=headers, context=context)
        self.setup(url, timeout=timeout, logger=logger, encoding=encoding)

    def make_connection(self, host):
        if self._connection and host == self._connection[0]:
            return self._connection[1]

        chost, self._extra_headers, x509 = self.get_host_info(host)
        self._connection = host, http.client.HTTPSConnection(
            chost, timeout=self.timeout, context=self.context)
        return self._connection[1]

#END
