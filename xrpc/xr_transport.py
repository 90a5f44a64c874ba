#
# xr_transport.py -- xrpc transports
#
# This is open-source software licensed under a BSD license.
# Please see the file LICENSE.txt for details.
#
"""
Transports are picked by the scheme of the service URL:

    transport = make_transport('http://host:8000/RPC2', timeout=5.0)
    root = transport.send(request_text)
"""
from urllib.parse import urlsplit

from . import xr_config

# holds all the possible transports, by URL scheme
transports = {}


def get_transport(name):
    return transports[name]


def make_transport(url, **kwargs):
    """Make a transport for `url`; `kwargs` are passed to its constructor."""
    scheme = urlsplit(url).scheme.lower()
    if not scheme:
        scheme = xr_config.default_transport
    try:
        klass = get_transport(scheme)

    except KeyError:
        raise ValueError("no transport for scheme '%s' (url '%s')" % (
            scheme, url))

    return klass(url, **kwargs)


############################################################
# Collect the different transports we can use
############################################################

from .transports import tr_http
transports['http'] = tr_http.HTTPTransport
transports['https'] = tr_http.HTTPSTransport

# END
