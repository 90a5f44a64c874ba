"""
Example that connects to an XML-RPC service, lists its methods and
calls one of them through the generated stubs.

IMPORTANT:

[1] Stubs are only made if the service supports introspection
(system.listMethods).  Otherwise use rpc.request('method', [args]).

[2] A fault from the service is raised as ProtocolFault; if the service
cannot be reached the call is logged and returns None.

"""
import sys
import logging
import argparse

from xrpc.xr_connection import make_serviceProxy
from xrpc.exceptions import ProtocolFault


def main(options, args):
    logger = logging.getLogger('list_methods')
    logging.basicConfig(level=logging.INFO)

    rpc = make_serviceProxy(options.host, options.port, logger=logger,
                            record=True)

    print('methods:')
    for name in rpc.methods:
        print('  ', name)

    if 'system.methodHelp' in rpc.methods:
        for name in rpc.methods:
            try:
                print(name, ':', rpc.system.methodHelp(name))

            except ProtocolFault as e:
                print(name, ': no help (%s)' % (e.message))

    print('%d requests performed' % len(rpc.requests_performed))


if __name__ == '__main__':

    # Parse command line options
    argprs = argparse.ArgumentParser()

    argprs.add_argument("--host", dest="host", metavar="HOST",
                        default='localhost',
                        help="Connect to service on HOST")
    argprs.add_argument("--port", dest="port", metavar="PORT",
                        type=int, default=8000,
                        help="Connect to service on PORT")
    (options, args) = argprs.parse_known_args(sys.argv[1:])

    if len(args) != 0:
        argprs.error("incorrect number of arguments")

    main(options, args)
