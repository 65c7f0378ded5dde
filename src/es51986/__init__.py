"""pyES51986: Python decoder for the ES51986 multimeter serial protocol.

This library turns the byte stream emitted by ES51986-family digital
multimeter chips into decoded measurement records, with on-demand
resolution of each reading to a scaled value and unit.
"""

from __future__ import annotations

from .exceptions import (
    ES51986Error,
    InvalidDigitError,
    InvalidFunctionError,
    InvalidRangeError,
    LengthError,
    ParseError,
)
from .parser import DecodeResult, DecoderState, StreamDecoder
from .protocol import (
    BaseUnit,
    DigitRadix,
    Digits,
    Function,
    MeasurementValue,
    Option,
    Range,
    Record,
    Sign,
    Status,
    TemperatureUnit,
    UnitPrefix,
    ValueUnit,
    decode_frame,
    resolve,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Stream decoding
    "DecodeResult",
    "DecoderState",
    "StreamDecoder",
    # Frame and fields
    "Function",
    "Option",
    "Range",
    "Record",
    "Sign",
    "Status",
    "TemperatureUnit",
    "decode_frame",
    # Values
    "BaseUnit",
    "DigitRadix",
    "Digits",
    "MeasurementValue",
    "UnitPrefix",
    "ValueUnit",
    "resolve",
    # Exceptions
    "ES51986Error",
    "InvalidDigitError",
    "InvalidFunctionError",
    "InvalidRangeError",
    "LengthError",
    "ParseError",
]
