"""
Data structures for representing values the Bencode encoder understands.
"""
from typing import Protocol, runtime_checkable

__all__ = [
    "INT64_MIN",
    "INT64_MAX",
    "UINT64_MAX",
    "BencodeInt",
    "BencodeUint",
    "BencodeString",
    "RawBytes",
    "Dict",
    "Marshaler",
    "new_dict",
]

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1


@runtime_checkable
class Marshaler(Protocol):
    """
    Implemented by objects that can bencode themselves.

    The encoder checks for this before any other rule and copies the
    returned bytes to the sink unchanged.
    """
    def __bencode__(self) -> bytes:
        ...


class BencodeType:
    """Base class for all Bencode wrapper types."""


class BencodeInt(BencodeType):
    """Represents a signed 64-bit Bencoded integer."""
    def __init__(self, value: int):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("BencodeInt requires an integer.")
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"BencodeInt out of int64 range: {value}")
        self.value = value

    def __repr__(self):
        return f"BencodeInt({self.value})"


class BencodeUint(BencodeType):
    """Represents an unsigned 64-bit Bencoded integer."""
    def __init__(self, value: int):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("BencodeUint requires an integer.")
        if not 0 <= value <= UINT64_MAX:
            raise ValueError(f"BencodeUint out of uint64 range: {value}")
        self.value = value

    def __repr__(self):
        return f"BencodeUint({self.value})"


class BencodeString(BencodeType):
    """Represents a Bencoded byte string. Text is stored UTF-8 encoded."""
    def __init__(self, value):
        if isinstance(value, str):
            value = value.encode()
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError("BencodeString requires bytes or str.")
        self.value = bytes(value)

    def __repr__(self):
        return f"BencodeString({self.value!r})"


class RawBytes(BencodeType):
    """Already-encoded bytes, written to the sink with no framing."""
    def __init__(self, value: bytes):
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError("RawBytes requires bytes.")
        self.value = bytes(value)

    def __repr__(self):
        return f"RawBytes({self.value!r})"


class Dict(dict):
    """
    A Bencode dictionary. Keys are str or bytes, values anything encodable.

    Insertion order does not matter: keys are always emitted sorted.
    """
    def __repr__(self):
        return f"Dict({dict.__repr__(self)})"


def new_dict() -> Dict:
    """Returns a fresh, empty dictionary for one message."""
    return Dict()
