"""Field decoding for ES51986 frames.

This module implements decoding and validation of the individual byte fields
of an ES51986 frame. It provides:

Enums:
    - Range: Range selector (decimal-point placement family)
    - Function: Measurement function (voltage, current, resistance, ...)
    - TemperatureUnit: Celsius or Fahrenheit
    - Sign: Reading polarity

Classes:
    - Status: Flags from the status byte (unit, sign, battery, overflow)
    - Option: Flags from the option2 byte (DC, AC, auto-range)

The range and function byte maps are irregular by hardware design, so both
are explicit lookup tables rather than arithmetic on the byte value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from functools import lru_cache

from ..exceptions import InvalidDigitError, InvalidFunctionError, InvalidRangeError

# =============================================================================
# Status / Option Constants
# =============================================================================


STATUS_CELSIUS_BIT_MASK = 0b00001000  # Bit 3: set = Celsius, clear = Fahrenheit
STATUS_SIGN_BIT_MASK = 0b00000100  # Bit 2: set = negative reading
STATUS_BATTERY_BIT_MASK = 0b00000010  # Bit 1: battery depleted
STATUS_OVERFLOW_BIT_MASK = 0b00000001  # Bit 0: overflow (OL)

OPTION_DC_BIT_MASK = 0b00001000  # Bit 3: DC measurement
OPTION_AC_BIT_MASK = 0b00000100  # Bit 2: AC measurement
OPTION_AUTO_BIT_MASK = 0b00000010  # Bit 1: auto-range enabled

DIGIT_ZERO = 0x30  # ASCII '0'
DIGIT_NINE = 0x39  # ASCII '9'

# =============================================================================
# Field Enums
# =============================================================================


class Range(Enum):
    RANGE0 = auto()
    RANGE1 = auto()
    RANGE2 = auto()
    RANGE3 = auto()
    RANGE4 = auto()
    RANGE5 = auto()
    RANGE6 = auto()


class Function(Enum):
    VOLTAGE = auto()
    MICRO_AMPERE = auto()
    MILLI_AMPERE = auto()
    AUTO_AMPERE = auto()
    MANUAL_AMPERE = auto()
    OHM = auto()
    CONTINUITY = auto()
    DIODE = auto()
    FREQUENCY = auto()
    CAPACITOR = auto()
    TEMPERATURE = auto()
    ADP0 = auto()  # Luminance
    ADP1 = auto()  # Sound level
    ADP2 = auto()
    ADP3 = auto()


class TemperatureUnit(Enum):
    CELSIUS = auto()
    FAHRENHEIT = auto()


class Sign(Enum):
    """Polarity of a reading.

    Modeled as a two-valued enum so call sites use named predicates instead
    of a bare boolean. ``int(sign)`` gives +1 or -1.
    """

    PLUS = auto()
    MINUS = auto()

    @property
    def is_negative(self) -> bool:
        return self is Sign.MINUS

    @property
    def is_positive(self) -> bool:
        return self is Sign.PLUS

    def __int__(self) -> int:
        return -1 if self.is_negative else 1


# =============================================================================
# Field Descriptors and Lookup Tables
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class _RangeDescriptor:
    code: int
    range: Range


@dataclass(frozen=True, kw_only=True)
class _FunctionDescriptor:
    code: int
    function: Function


_RangeTable: tuple[_RangeDescriptor, ...] = (
    _RangeDescriptor(code=0x30, range=Range.RANGE0),
    _RangeDescriptor(code=0x31, range=Range.RANGE1),
    _RangeDescriptor(code=0x32, range=Range.RANGE2),
    _RangeDescriptor(code=0x33, range=Range.RANGE3),
    _RangeDescriptor(code=0x34, range=Range.RANGE4),
    _RangeDescriptor(code=0x35, range=Range.RANGE5),
    _RangeDescriptor(code=0x36, range=Range.RANGE6),
)


_FunctionTable: tuple[_FunctionDescriptor, ...] = (
    _FunctionDescriptor(code=0x3B, function=Function.VOLTAGE),
    _FunctionDescriptor(code=0x3D, function=Function.MICRO_AMPERE),
    _FunctionDescriptor(code=0x3F, function=Function.MILLI_AMPERE),
    _FunctionDescriptor(code=0x30, function=Function.AUTO_AMPERE),
    _FunctionDescriptor(code=0x39, function=Function.MANUAL_AMPERE),
    _FunctionDescriptor(code=0x33, function=Function.OHM),
    _FunctionDescriptor(code=0x35, function=Function.CONTINUITY),
    _FunctionDescriptor(code=0x31, function=Function.DIODE),
    _FunctionDescriptor(code=0x32, function=Function.FREQUENCY),
    _FunctionDescriptor(code=0x36, function=Function.CAPACITOR),
    _FunctionDescriptor(code=0x34, function=Function.TEMPERATURE),
    _FunctionDescriptor(code=0x3E, function=Function.ADP0),
    _FunctionDescriptor(code=0x3C, function=Function.ADP1),
    _FunctionDescriptor(code=0x38, function=Function.ADP2),
    _FunctionDescriptor(code=0x3A, function=Function.ADP3),
)


@lru_cache(maxsize=16)
def _find_range_descriptor(field_code: int) -> _RangeDescriptor | None:
    for range_descriptor in _RangeTable:
        if range_descriptor.code == field_code:
            return range_descriptor
    return None


@lru_cache(maxsize=32)
def _find_function_descriptor(field_code: int) -> _FunctionDescriptor | None:
    for function_descriptor in _FunctionTable:
        if function_descriptor.code == field_code:
            return function_descriptor
    return None


# =============================================================================
# Flag Records
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class Status:
    """Flags decoded from the status byte (frame byte 6).

    Attributes:
        temperature_unit: Unit of temperature readings (bit 3)
        sign: Polarity of the reading (bit 2)
        is_battery_depleted: Low battery indicator (bit 1)
        is_overflow: Reading exceeds the selected range (bit 0)
    """

    temperature_unit: TemperatureUnit
    sign: Sign
    is_battery_depleted: bool
    is_overflow: bool


@dataclass(frozen=True, kw_only=True)
class Option:
    """Flags decoded from the option2 byte (frame byte 8)."""

    is_dc: bool
    is_ac: bool
    is_auto: bool


# =============================================================================
# Field Decoders
# =============================================================================


def decode_range(field_code: int) -> Range:
    """Decode the range byte.

    Args:
        field_code: Frame byte 0

    Returns:
        The matching Range member

    Raises:
        InvalidRangeError: If the byte is outside 0x30-0x36
    """
    range_descriptor = _find_range_descriptor(field_code)
    if range_descriptor is None:
        raise InvalidRangeError(field_code)
    return range_descriptor.range


def decode_function(field_code: int) -> Function:
    """Decode the function byte.

    Args:
        field_code: Frame byte 5

    Returns:
        The matching Function member

    Raises:
        InvalidFunctionError: If the byte is not in the function table
    """
    function_descriptor = _find_function_descriptor(field_code)
    if function_descriptor is None:
        raise InvalidFunctionError(field_code)
    return function_descriptor.function


def decode_digit(field_code: int) -> int:
    """Decode one ASCII digit byte to its value 0-9.

    Raises:
        InvalidDigitError: If the byte is not ASCII '0'-'9'
    """
    if not DIGIT_ZERO <= field_code <= DIGIT_NINE:
        raise InvalidDigitError(field_code)
    return field_code - DIGIT_ZERO


def decode_status(field_code: int) -> Status:
    return Status(
        temperature_unit=(
            TemperatureUnit.CELSIUS if field_code & STATUS_CELSIUS_BIT_MASK else TemperatureUnit.FAHRENHEIT
        ),
        sign=Sign.MINUS if field_code & STATUS_SIGN_BIT_MASK else Sign.PLUS,
        is_battery_depleted=field_code & STATUS_BATTERY_BIT_MASK != 0,
        is_overflow=field_code & STATUS_OVERFLOW_BIT_MASK != 0,
    )


def decode_option(field_code: int) -> Option:
    return Option(
        is_dc=field_code & OPTION_DC_BIT_MASK != 0,
        is_ac=field_code & OPTION_AC_BIT_MASK != 0,
        is_auto=field_code & OPTION_AUTO_BIT_MASK != 0,
    )
