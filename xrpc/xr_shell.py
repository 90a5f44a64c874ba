#
# xr_shell.py -- call XML-RPC methods from the command line
#
# This is open-source software licensed under a BSD license.
# Please see the file LICENSE.txt for details.
#
"""
Usage:
    $ xr_call --url=http://localhost:8000/ add 2 3
    5
    $ xr_call --url=http://localhost:8000/ --list
    add
    system.listMethods
    ...

Parameters are read as Python literals ("[1, 2]", "{'a': 1}", "2.5"),
anything that is not a literal is passed as a string.
"""
import sys
import ast
import logging
import pprint
from optparse import OptionParser

from xrpc import xr_config
from xrpc.version import version
from xrpc.xr_connection import Connection
from xrpc.exceptions import ProtocolFault, XmlRpcError

LOG_FORMAT = '%(asctime)s | %(levelname)1.1s | %(filename)s:%(lineno)d | %(message)s'


def make_logger(name, options):
    logger = logging.getLogger(name)
    logger.setLevel(options.loglevel)
    if options.logstderr:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    else:
        logger.addHandler(logging.NullHandler())
    return logger


def addlogopts(parser):
    parser.add_option("--loglevel", dest="loglevel", metavar="LEVEL",
                      type="int", default=logging.WARNING,
                      help="Set logging level to LEVEL")
    parser.add_option("--stderr", dest="logstderr", default=False,
                      action="store_true",
                      help="Copy logging also to stderr")


def parse_param(text):
    try:
        return ast.literal_eval(text)

    except (ValueError, SyntaxError):
        return text


def main(options, args):

    logger = make_logger('xr_call', options)

    if not options.url:
        print("Please specify a --url")
        return 2

    rpc = Connection(options.url, logger=logger, log=True,
                     record=options.record, introspect=False,
                     timeout=options.timeout, raise_errors=True)

    try:
        if options.list:
            for name in rpc.request('system.listMethods'):
                print(name)
            return 0

        if len(args) == 0:
            print("Please specify a method to call")
            return 2

        method, params = args[0], [parse_param(arg) for arg in args[1:]]
        res = rpc.request(method, params)
        pprint.pprint(res)

    except ProtocolFault as e:
        print("Fault %s: %s" % (e.code, e.message))
        return 1

    except XmlRpcError as e:
        print("Error: %s" % (str(e)))
        return 1

    if options.record:
        for rec in rpc.requests_performed:
            logger.info("recorded: %s" % (str(rec)))

    return 0


def make_parser():
    usage = "usage: %prog [options] method [param ...]"
    parser = OptionParser(usage=usage, version=('%%prog %s' % version))

    parser.add_option("--debug", dest="debug", default=False,
                      action="store_true",
                      help="Enter the pdb debugger on main()")
    parser.add_option("--list", dest="list", default=False,
                      action="store_true",
                      help="List the methods of the service")
    parser.add_option("--profile", dest="profile", action="store_true",
                      default=False,
                      help="Run the profiler on main()")
    parser.add_option("--record", dest="record", action="store_true",
                      default=False,
                      help="Record requests and log them at exit")
    parser.add_option("--timeout", dest="timeout", type="float",
                      default=xr_config.default_timeout, metavar="SEC",
                      help="Give up on a call after SEC seconds")
    parser.add_option("--url", dest="url", metavar="URL",
                      help="URL of the XML-RPC service")
    addlogopts(parser)
    return parser


def run(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    parser = make_parser()
    (options, args) = parser.parse_args(argv)

    # Are we debugging this?
    if options.debug:
        import pdb

        return pdb.runcall(main, options, args)

    # Are we profiling this?
    elif options.profile:
        import profile

        print("%s profile:" % sys.argv[0])
        return profile.runctx('main(options, args)', globals(), locals())

    else:
        return main(options, args)

#END
