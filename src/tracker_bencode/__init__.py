"""
Bencode encoding package for BitTorrent metainfo and tracker messages.
"""
from .encoder import EncodeError, Encoder, UnsupportedTypeError, encode, to_bytes
from .structure import BencodeInt, BencodeString, BencodeUint, Dict, Marshaler, RawBytes, new_dict

__all__ = [
    'encode', 'to_bytes', 'Encoder', 'EncodeError', 'UnsupportedTypeError',
    'BencodeInt', 'BencodeUint', 'BencodeString', 'RawBytes', 'Dict', 'new_dict', 'Marshaler',
]
