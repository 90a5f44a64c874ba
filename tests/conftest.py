"""Pytest fixtures: a local XML-RPC server to talk to."""

import socket
import threading
import time
from xmlrpc.client import Fault
from xmlrpc.server import SimpleXMLRPCServer

import pytest


def add(a, b):
    """Add two numbers"""
    return a + b


def echo(value):
    return value


def fail(code, message):
    raise Fault(code, message)


def crash():
    return 1 / 0


def nap(secs):
    time.sleep(secs)
    return True


def square(x):
    return x * x


def make_server():
    server = SimpleXMLRPCServer(('127.0.0.1', 0), logRequests=False,
                                allow_none=True)
    server.register_introspection_functions()
    for func in (add, echo, fail, crash, nap):
        server.register_function(func)
    server.register_function(square, 'math.square')
    # would shadow Connection.request
    server.register_function(echo, 'request')
    return server


@pytest.fixture
def server_url():
    server = make_server()
    thread = threading.Thread(target=server.serve_forever,
                              kwargs=dict(poll_interval=0.05))
    thread.daemon = True
    thread.start()

    host, port = server.server_address
    yield 'http://%s:%d/' % (host, port)

    server.shutdown()
    server.server_close()
    thread.join()


@pytest.fixture
def dead_url():
    # a port that nothing listens on
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(('127.0.0.1', 0))
    port = sock.getsockname()[1]
    sock.close()
    return 'http://127.0.0.1:%d/' % (port)
