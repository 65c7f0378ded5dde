"""ES51986 exception classes."""

from __future__ import annotations

from typing import Any


class ES51986Error(Exception):
    """Base exception for all ES51986 errors."""


class ParseError(ES51986Error, ValueError):
    """Frame-level decoding errors.

    Parse errors are raised by the frame and field decoders and returned as
    values by the stream decoder, so they compare equal by type and arguments
    and can be serialized for logging or transport.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the error."""
        raise NotImplementedError


class LengthError(ParseError):
    """Frame boundary reached (or buffer overflowed) with a length other than 9."""

    length: int

    def __init__(self, length: int) -> None:
        super().__init__(length)
        self.length = length

    def __str__(self) -> str:
        return f"Invalid frame length: {self.length}"

    def to_dict(self) -> dict[str, Any]:
        return {"error": "LengthError", "len": self.length}


class _InvalidByteError(ParseError):
    _kind: str = ""

    byte: int

    def __init__(self, byte: int) -> None:
        super().__init__(byte)
        self.byte = byte

    def __str__(self) -> str:
        return f"Invalid {self._kind.removeprefix('Invalid').lower()} byte: 0x{self.byte:02X}"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self._kind, "byte": self.byte}


class InvalidRangeError(_InvalidByteError):
    """Range byte outside 0x30-0x36."""

    _kind = "InvalidRange"


class InvalidFunctionError(_InvalidByteError):
    """Function byte not present in the function table."""

    _kind = "InvalidFunction"


class InvalidDigitError(_InvalidByteError):
    """Digit byte outside ASCII '0'-'9'."""

    _kind = "InvalidDigit"
