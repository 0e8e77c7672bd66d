"""Tagged decode-error values and the result type returned by ``decode_hex``."""

from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Literal, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from hexcodec.exceptions import (
    HexDecodeError,
    InvalidHexCharacterError,
    InvalidHexLengthError,
)


class InvalidHexCharacter(BaseModel):
    """The input contained a character that is not part of the hex format."""

    model_config = ConfigDict(frozen=True)

    exception: ClassVar[Type[HexDecodeError]] = InvalidHexCharacterError

    kind: Literal["invalid_character"] = "invalid_character"
    character: str = Field(..., min_length=1, max_length=1, description="Offending character")
    position: int = Field(..., ge=0, description="Zero-based offset into the input")

    @property
    def description(self) -> str:
        return "invalid character"

    def __str__(self) -> str:
        return f"Invalid character '{self.character}' at position {self.position}"


class InvalidHexLength(BaseModel):
    """The input had an odd number of hex digits."""

    model_config = ConfigDict(frozen=True)

    exception: ClassVar[Type[HexDecodeError]] = InvalidHexLengthError

    kind: Literal["invalid_length"] = "invalid_length"

    @property
    def description(self) -> str:
        return "invalid length"

    def __str__(self) -> str:
        return "Invalid input length"


DecodeError = Annotated[
    Union[InvalidHexCharacter, InvalidHexLength],
    Field(discriminator="kind"),
]

_decode_error_adapter = TypeAdapter(DecodeError)


def parse_decode_error(data: Any) -> Union[InvalidHexCharacter, InvalidHexLength]:
    """
    Rebuild a decode error from its dumped form.

    Args:
        data: Mapping produced by ``model_dump()`` (or equivalent JSON)

    Returns:
        The matching error value, selected by its ``kind`` tag

    Raises:
        pydantic.ValidationError: If ``data`` is not a valid decode error
    """
    return _decode_error_adapter.validate_python(data)


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of a decode: either the decoded bytes or a decode error.

    Exactly one of ``value`` and ``error`` is set.
    """

    value: Optional[bytes] = None
    error: Optional[Union[InvalidHexCharacter, InvalidHexLength]] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("DecodeResult needs exactly one of value or error")

    @classmethod
    def success(cls, value: bytes) -> "DecodeResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Union[InvalidHexCharacter, InvalidHexLength]) -> "DecodeResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> bytes:
        """
        Return the decoded bytes.

        Raises:
            InvalidHexCharacterError: If decoding hit a non-hex character
            InvalidHexLengthError: If the input had an odd number of digits
        """
        if self.error is not None:
            raise self.error.exception(self.error)
        return self.value
