#
# This is open-source software licensed under a BSD license.
# Please see the file LICENSE.txt for details.
#
"""
xrpc -- a client-side XML-RPC codec.

USAGE:

>>> from xrpc import xr_connection
>>> rpc = xr_connection.Connection('http://localhost:8000/')
>>> rpc.request('add', [2, 3])
5

# if the server supports system.listMethods
>>> rpc.add(2, 3)
5

Lower level pieces:

xr_marshal     native values -> XML-RPC markup
xr_unmarshal   XML-RPC response tree -> native values (or a fault)
xr_envelope    Request / Response / Fault document shapes
xr_transport   HTTP transports that move the documents
"""
