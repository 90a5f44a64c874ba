"""
Codecs for the XML-RPC scalar types.

Each module provides one or more codec classes with this interface:

codec.kind         wire tag the codec handles (e.g. 'base64')
codec.zero         value of an element of this kind that has no text
codec.encode(v)    native value -> element text
codec.decode(s)    element text -> native value

The codecs are collected by tag in `xrpc.xr_scalar`.
"""
