"""
Bencode encoder for BitTorrent metainfo and tracker responses.
"""
import io
from datetime import timedelta

from .structure import (
    INT64_MIN,
    UINT64_MAX,
    BencodeInt,
    BencodeString,
    BencodeUint,
    Marshaler,
    RawBytes,
)


class EncodeError(Exception):
    """Custom exception for Bencode encoding errors."""
    pass


class UnsupportedTypeError(EncodeError, TypeError):
    """Raised for a value (or dictionary key) the encoder has no rule for."""
    def __init__(self, obj, what="value"):
        self.obj = obj
        super().__init__(f"Cannot bencode {what} of type {type(obj).__name__}")


_MICROS_PER_SECOND = 1_000_000


class Encoder:
    """
    Writes Bencoded values to a sink.

    The sink is anything with a ``write(bytes)`` method. The encoder never
    buffers, flushes or closes it, and errors raised by ``write`` propagate
    as they are.
    """
    def __init__(self, sink):
        self.sink = sink

    def encode(self, obj) -> None:
        """Writes the bencoding of obj to the sink."""
        self._marshal(obj)

    # --------------------------
    # Dispatch
    # --------------------------

    def _marshal(self, obj):
        if isinstance(obj, Marshaler):
            self._write_custom(obj)
            return

        if isinstance(obj, RawBytes):
            self._write(obj.value)
            return

        if isinstance(obj, (str, bytes, bytearray, BencodeString)):
            self._write_string(_string_bytes(obj))
            return

        if isinstance(obj, (BencodeInt, BencodeUint)):
            self._write_int(obj.value)
            return

        if isinstance(obj, int) and not isinstance(obj, bool):
            if not INT64_MIN <= obj <= UINT64_MAX:
                raise UnsupportedTypeError(obj, "out-of-range integer")
            self._write_int(obj)
            return

        if isinstance(obj, timedelta):
            self._write_int(_whole_seconds(obj))
            return

        if isinstance(obj, dict):
            self._write_dict(obj)
            return

        if isinstance(obj, (list, tuple)):
            self._write_list(obj)
            return

        raise UnsupportedTypeError(obj)

    # --------------------------
    # Writers
    # --------------------------

    def _write(self, data: bytes):
        self.sink.write(data)

    def _write_custom(self, obj):
        data = obj.__bencode__()
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise EncodeError(
                f"{type(obj).__name__}.__bencode__ returned "
                f"{type(data).__name__}, expected bytes"
            )
        self._write(bytes(data))

    def _write_int(self, n: int):
        self._write(b"i%de" % n)

    def _write_string(self, b: bytes):
        self._write(b"%d:" % len(b))
        self._write(b)

    def _write_dict(self, d: dict):
        # every key is checked before anything is written
        items = {}
        for key, value in d.items():
            if not isinstance(key, (str, bytes, bytearray)):
                raise UnsupportedTypeError(key, "dictionary key")
            key_bytes = _string_bytes(key)
            if key_bytes in items:
                raise EncodeError(f"Duplicate dictionary key after encoding: {key_bytes!r}")
            items[key_bytes] = value

        self._write(b"d")
        for key_bytes in sorted(items):
            self._write_string(key_bytes)
            self._marshal(items[key_bytes])
        self._write(b"e")

    def _write_list(self, lst):
        self._write(b"l")
        for item in lst:
            self._marshal(item)
        self._write(b"e")


# ------------------------------------------------------------
#   Helpers
# ------------------------------------------------------------

def _string_bytes(s) -> bytes:
    if isinstance(s, BencodeString):
        return s.value
    if isinstance(s, str):
        return s.encode()
    return bytes(s)


def _whole_seconds(td: timedelta) -> int:
    """Seconds in td, truncated toward zero."""
    micros = (td.days * 86400 + td.seconds) * _MICROS_PER_SECOND + td.microseconds
    seconds = abs(micros) // _MICROS_PER_SECOND
    return seconds if micros >= 0 else -seconds


def encode(sink, obj) -> None:
    """Writes the bencoding of obj to sink."""
    Encoder(sink).encode(obj)


def to_bytes(obj) -> bytes:
    """Returns the bencoding of obj."""
    buf = io.BytesIO()
    Encoder(buf).encode(obj)
    return buf.getvalue()
