"""Custom exceptions for the hexcodec package."""


class HexCodecException(Exception):
    """Base exception for all hexcodec errors."""
    pass


# Decoding Errors
class HexDecodeError(HexCodecException, ValueError):
    """
    Base exception for hex decoding failures.

    The tagged error value produced by ``decode_hex`` is kept in ``error``
    so callers catching the exception can still inspect it.
    """

    def __init__(self, error):
        super().__init__(str(error))
        self.error = error


class InvalidHexCharacterError(HexDecodeError):
    """Raised when the input contains a character that is not a hex digit."""

    @property
    def character(self) -> str:
        return self.error.character

    @property
    def position(self) -> int:
        return self.error.position


class InvalidHexLengthError(HexDecodeError):
    """Raised when the input holds an odd number of hex digits."""
    pass
