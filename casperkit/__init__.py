"""Casper node client library: CL types, byte codecs, global state keys, typed records and JSON-RPC."""

__version__ = "1.0.0"