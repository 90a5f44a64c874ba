"""
Transports move an XML-RPC request document to a server and return the
parsed response document.  A transport has one method that matters:

    root = transport.send(request_text)

`send` raises `xrpc.exceptions.TransportFailure` if the request could not
be delivered or the server did not answer with a document.
"""
