#! /usr/bin/env python
#
from setuptools import setup
import os

srcdir = os.path.dirname(os.path.abspath(__file__))

def read(fname):
    with open(os.path.join(srcdir, fname), 'r') as in_f:
        return in_f.read()

def get_version():
    # don't import xrpc here, its dependencies may not be installed yet
    d = {}
    exec(read(os.path.join('xrpc', 'version.py')), d)
    return d['version']

setup(
    name = "xrpc",
    version = get_version(),
    author = "xrpc developers",
    description = ("A client-side codec and connection for the XML-RPC protocol."),
    long_description = read('README.txt'),
    license = "BSD",
    keywords = "xml-rpc, xmlrpc, rpc, codec, marshal, client",
    packages = ['xrpc',
                # scalar codecs
                'xrpc.scalars',
                # transports
                'xrpc.transports',
                ],
    python_requires = ">=3.8",
    install_requires = ['lxml'],
    extras_require = {'test': ['pytest']},
    scripts = ['scripts/xr_call'],
    classifiers = [
        "License :: OSI Approved :: BSD License",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Topic :: Internet",
        "Topic :: Software Development :: Libraries",
    ],
)
