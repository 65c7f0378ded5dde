"""Protocol layer components for ES51986 frame decoding.

This package contains the field decoders, the frame decoder and the
range/function value table.
"""

from .fields import (
    Function,
    Option,
    Range,
    Sign,
    Status,
    TemperatureUnit,
    decode_digit,
    decode_function,
    decode_option,
    decode_range,
    decode_status,
)
from .frame import Record, decode_frame
from .value import (
    BaseUnit,
    DigitRadix,
    Digits,
    MeasurementValue,
    UnitPrefix,
    ValueUnit,
    resolve,
)

__all__ = [
    # Field types
    "Function",
    "Option",
    "Range",
    "Sign",
    "Status",
    "TemperatureUnit",
    # Field decoders
    "decode_digit",
    "decode_function",
    "decode_option",
    "decode_range",
    "decode_status",
    # Frame
    "Record",
    "decode_frame",
    # Values
    "BaseUnit",
    "DigitRadix",
    "Digits",
    "MeasurementValue",
    "UnitPrefix",
    "ValueUnit",
    "resolve",
]
