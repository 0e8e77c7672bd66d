"""Hex binary-to-text encoding and decoding."""

import logging
from typing import Iterable, Union

from hexcodec.errors import DecodeResult, InvalidHexCharacter, InvalidHexLength

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]
HexText = Union[str, bytes, bytearray, memoryview]

# Output alphabet, indexed by nibble value
HEX_CHARS = "0123456789abcdef"
# Characters skipped by the decoder
HEX_WHITESPACE = " \r\n\t"

_HEX_CHAR_BYTES = HEX_CHARS.encode("ascii")
_WHITESPACE_BYTES = frozenset(HEX_WHITESPACE.encode("ascii"))


def _build_nibble_table() -> tuple:
    table = [None] * 256
    for value, char in enumerate(b"0123456789abcdef"):
        table[char] = value
    for value, char in enumerate(b"ABCDEF", start=10):
        table[char] = value
    return tuple(table)


# Nibble value per input byte, None for anything that is not a hex digit
_NIBBLES = _build_nibble_table()


def _ensure_bytes(data: BytesLike) -> bytes:
    if isinstance(data, bytes):
        return data
    # bytes(n) would silently produce n zero bytes
    if isinstance(data, (str, int)):
        raise TypeError(f"Expected a byte sequence, got {type(data)}")
    return bytes(data)


def _storage_bytes(text: HexText) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8", "surrogatepass")
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise TypeError(f"Expected str or bytes, got {type(text)}")


def _utf8_sequence_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _char_at(text: HexText, raw: bytes, idx: int) -> str:
    """
    Return the full character starting at storage offset ``idx``.

    Only called at the first rejected byte. Every byte before it was ASCII,
    so for ``str`` input the storage offset is also the character index.
    """
    if isinstance(text, str):
        return text[idx]
    end = idx + _utf8_sequence_length(raw[idx])
    return raw[idx:end].decode("utf-8", errors="replace")[0]


def encode_hex(data: BytesLike) -> str:
    """
    Convert bytes to a lowercase hexadecimal string.

    Each byte becomes two characters, high nibble first.

    Args:
        data: bytes, bytearray, memoryview or an iterable of ints in 0..255

    Returns:
        str: Hex string exactly twice as long as ``data``

    Raises:
        TypeError: If ``data`` is a str or not a byte sequence
        ValueError: If an int in ``data`` is outside 0..255
    """
    data = _ensure_bytes(data)
    out = bytearray(len(data) * 2)
    pos = 0
    for byte in data:
        out[pos] = _HEX_CHAR_BYTES[byte >> 4]
        out[pos + 1] = _HEX_CHAR_BYTES[byte & 0xF]
        pos += 2
    return out.decode("ascii")


def decode_hex(text: HexText) -> DecodeResult:
    """
    Convert hexadecimal text to bytes.

    Digits may be upper or lower case. Spaces, carriage returns, newlines
    and tabs are skipped anywhere in the input, including between the two
    digits of one byte. Malformed input is reported through the returned
    result, never raised.

    Args:
        text: Hex text, as str or as its UTF-8 encoded bytes

    Returns:
        DecodeResult: The decoded bytes, or InvalidHexCharacter (with the
        character and its zero-based offset) or InvalidHexLength

    Raises:
        TypeError: If ``text`` is neither str nor bytes-like
    """
    raw = _storage_bytes(text)
    out = bytearray()
    buf = 0
    modulus = 0

    for idx, byte in enumerate(raw):
        nibble = _NIBBLES[byte]
        if nibble is None:
            if byte in _WHITESPACE_BYTES:
                continue
            error = InvalidHexCharacter.model_construct(
                character=_char_at(text, raw, idx),
                position=idx,
            )
            return DecodeResult.failure(error)

        buf = (buf << 4) | nibble
        modulus ^= 1
        if modulus == 0:
            out.append(buf)
            buf = 0

    if modulus:
        return DecodeResult.failure(InvalidHexLength())
    return DecodeResult.success(bytes(out))


def hex_to_bytes(text: HexText) -> bytes:
    """
    Decode hex text, raising on malformed input.

    Raises:
        InvalidHexCharacterError: If the input contains a non-hex character
        InvalidHexLengthError: If the input has an odd number of hex digits
    """
    result = decode_hex(text)
    if not result.ok:
        logger.debug(f"Hex decode failed: {result.error}")
    return result.unwrap()


def is_hex(text: HexText) -> bool:
    """Whether ``text`` decodes cleanly."""
    return decode_hex(text).ok
