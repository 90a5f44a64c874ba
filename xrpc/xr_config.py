#
# Configuration file for xrpc
#
# This is open-source software licensed under a BSD license.
# Please see the file LICENSE.txt for details.
#

# Default transport, used when the URL scheme does not pick one
default_transport  = 'http'

# Timeout (in seconds) for the socket of a single XML-RPC call.
# None means block indefinitely.
default_timeout    = 10.0

# Encoding of request bodies
default_encoding   = 'utf-8'

# Document prolog written in front of every request
prolog             = '<?xml version="1.0"?>\n'

# Should None be sent/received as <nil/>?  (nil is not a part of the
# XML-RPC standard, but most servers understand it)
allow_none         = True

# If True, responses that are missing required structure raise
# MalformedResponseError instead of producing a partial or missing value
strict_parsing     = False

# Log every request to the connection's logger
log_requests       = True

# Keep a record of every request (and its result) on the connection
record_requests    = False

# Call system.listMethods on connect and add a stub per remote method
introspect         = True

# Truncate logged parameters to this many characters
log_param_limit    = 500

#END
