"""
Helpers for answering HTTP tracker requests with Bencoded bodies.
"""
from aiohttp import web

from .encoder import to_bytes
from .structure import Dict

# Trackers conventionally serve bencoded bodies as plain text.
CONTENT_TYPE = "text/plain"


def bencode_response(value, status: int = 200) -> web.Response:
    """Builds an aiohttp response whose body is the bencoding of value."""
    return web.Response(body=to_bytes(value), status=status, content_type=CONTENT_TYPE)


def failure_response(reason) -> web.Response:
    """
    Builds a tracker failure response.

    BEP 3 failures are ordinary 200 responses carrying a single
    'failure reason' key; clients look for the key, not the status.
    """
    return bencode_response(Dict({"failure reason": reason}))


async def write_bencoded(stream, value) -> int:
    """
    Encodes value and writes it to a prepared web.StreamResponse.
    Returns the number of bytes written.
    """
    data = to_bytes(value)
    await stream.write(data)
    return len(data)
