"""Main package initialization."""

import logging

__version__ = "0.1.0"
__author__ = "hexcodec Team"
__description__ = "Hexadecimal encoding and strict, whitespace-tolerant decoding"

from .codec import HEX_CHARS, HEX_WHITESPACE, encode_hex, decode_hex, hex_to_bytes, is_hex
from .errors import DecodeError, DecodeResult, InvalidHexCharacter, InvalidHexLength, parse_decode_error
from .exceptions import (
    HexCodecException,
    HexDecodeError,
    InvalidHexCharacterError,
    InvalidHexLengthError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "HEX_CHARS",
    "HEX_WHITESPACE",
    "encode_hex",
    "decode_hex",
    "hex_to_bytes",
    "is_hex",
    "DecodeError",
    "DecodeResult",
    "InvalidHexCharacter",
    "InvalidHexLength",
    "parse_decode_error",
    "HexCodecException",
    "HexDecodeError",
    "InvalidHexCharacterError",
    "InvalidHexLengthError",
]
