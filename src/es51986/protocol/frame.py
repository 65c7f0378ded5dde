"""ES51986 frame decoding.

A frame is the 9-byte payload between two line terminators:

    byte 0      range
    bytes 1-4   digit group (ASCII '0'-'9')
    byte 5      function
    byte 6      status
    byte 7      option1 (unused by this protocol revision)
    byte 8      option2

Fields are validated in frame order: range, then digits left to right, then
function. The first failing field is reported and no partial Record is
returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..exceptions import LengthError
from .common import (
    DIGITS_LENGTH,
    DIGITS_OFFSET,
    FRAME_LENGTH,
    FUNCTION_OFFSET,
    OPTION1_OFFSET,
    OPTION2_OFFSET,
    RANGE_OFFSET,
    STATUS_OFFSET,
)
from .fields import Function, Option, Range, Status, decode_function, decode_option, decode_range, decode_status
from .value import Digits, MeasurementValue, resolve


@dataclass(frozen=True, kw_only=True)
class Record:
    """One decoded ES51986 frame.

    Attributes:
        range: Range selector (decimal-point placement family)
        digits: The 4-digit reading
        function: Measurement function
        status: Unit, sign, battery and overflow flags
        option: DC, AC and auto-range flags (option2 byte)
        option1: Raw option1 byte, kept so later chip revisions can be
            decoded without reshaping the record
        raw: The 9 frame bytes the record was decoded from
    """

    range: Range
    digits: Digits
    function: Function
    status: Status
    option: Option
    option1: int = 0
    raw: bytes = field(default=b"", repr=False)

    @classmethod
    def from_bytes(cls, data: bytes) -> Record:
        """Decode a 9-byte frame.

        Args:
            data: Frame payload without terminators

        Returns:
            The decoded Record

        Raises:
            LengthError: If data is not exactly 9 bytes long
            InvalidRangeError: If the range byte is invalid
            InvalidDigitError: On the first invalid digit byte
            InvalidFunctionError: If the function byte is invalid
        """
        data = bytes(data)

        if len(data) != FRAME_LENGTH:
            raise LengthError(len(data))

        range_ = decode_range(data[RANGE_OFFSET])
        digits = Digits.from_bytes(data[DIGITS_OFFSET : DIGITS_OFFSET + DIGITS_LENGTH])
        function = decode_function(data[FUNCTION_OFFSET])

        return cls(
            range=range_,
            digits=digits,
            function=function,
            status=decode_status(data[STATUS_OFFSET]),
            option=decode_option(data[OPTION2_OFFSET]),
            option1=data[OPTION1_OFFSET],
            raw=data,
        )

    def get_value(self) -> MeasurementValue | None:
        """Resolve the reading to formatted digits and unit (None if unmapped)."""
        return resolve(self.range, self.function, self.digits)


def decode_frame(data: bytes) -> Record:
    """Decode a 9-byte frame into a Record (see Record.from_bytes)."""
    return Record.from_bytes(data)
