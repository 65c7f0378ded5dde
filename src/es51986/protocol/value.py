"""ES51986 value representation and resolution.

This module turns the raw digit group of a frame into a physical value:
- Digits: the 4-digit reading and its decimal-point formatter
- DigitRadix: where the decimal point is placed in the digit group
- UnitPrefix / BaseUnit / ValueUnit: the unit a reading is expressed in
- MeasurementValue: formatted digits plus unit
- resolve(): the (range, function) -> (placement, unit) table lookup

The placement and unit for each range/function pair is fixed by the meter's
hardware design and has no closed form, so it is kept as one explicit table.
Pairs missing from the table (temperature, continuity, diode, the adapter
channels and combinations the chip never reports) resolve to None.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum, auto

from .common import DIGITS_LENGTH
from .fields import Function, Range, decode_digit


class UnitPrefix(StrEnum):
    """Metric prefixes used by ES51986 readings."""

    MEGA = "M"
    KILO = "k"
    NONE = ""
    MILLI = "m"
    MICRO = "µ"
    NANO = "n"


class BaseUnit(StrEnum):
    """SI base units used by ES51986 readings."""

    AMPERE = "A"
    VOLT = "V"
    OHM = "Ω"
    HERTZ = "Hz"
    FARAD = "F"


class DigitRadix(Enum):
    """Decimal-point placement within the 4-digit group."""

    ZERO = auto()  # No decimal point: 0-9999
    MINUS1 = auto()  # Point before the last digit
    MINUS2 = auto()  # Point before the last two digits
    MINUS3 = auto()  # Point before the last three digits


@dataclass(frozen=True)
class ValueUnit:
    prefix_unit: UnitPrefix
    base_unit: BaseUnit

    def __str__(self) -> str:
        return f"{self.prefix_unit}{self.base_unit}"


@dataclass(frozen=True)
class Digits:
    """The four decimal digits of a reading, most significant first."""

    digits: tuple[int, int, int, int]

    def __post_init__(self) -> None:
        if len(self.digits) != DIGITS_LENGTH:
            raise ValueError(f"Expected {DIGITS_LENGTH} digits, got {len(self.digits)}")
        if any(not 0 <= digit <= 9 for digit in self.digits):
            raise ValueError(f"Digit values must be 0-9: {self.digits}")

    @classmethod
    def from_bytes(cls, data: bytes) -> Digits:
        """Decode 4 ASCII digit bytes, left to right.

        Raises:
            InvalidDigitError: On the first byte that is not ASCII '0'-'9';
                later bytes are not inspected
            ValueError: If data is not exactly 4 bytes long
        """
        if len(data) != DIGITS_LENGTH:
            raise ValueError(f"Expected {DIGITS_LENGTH} digit bytes, got {len(data)}")

        d0, d1, d2, d3 = (decode_digit(field_code) for field_code in data)
        return cls((d0, d1, d2, d3))

    def to_value(self, radix: DigitRadix) -> str:
        """Format the digits with the decimal point at the given placement.

        No trailing zeros are trimmed and the leading digit group is rendered
        as an integer, so [0, 0, 2, 2] gives "22" (ZERO), "2.2" (MINUS1),
        "0.22" (MINUS2) and "0.022" (MINUS3).
        """
        d0, d1, d2, d3 = self.digits
        match radix:
            case DigitRadix.ZERO:
                return f"{d0 * 1000 + d1 * 100 + d2 * 10 + d3}"
            case DigitRadix.MINUS1:
                return f"{d0 * 100 + d1 * 10 + d2}.{d3}"
            case DigitRadix.MINUS2:
                return f"{d0 * 10 + d1}.{d2}{d3}"
            case DigitRadix.MINUS3:
                return f"{d0}.{d1}{d2}{d3}"
        raise ValueError(f"Unknown digit radix: {radix!r}")


@dataclass(frozen=True)
class MeasurementValue:
    digits: str
    value_unit: ValueUnit

    def __str__(self) -> str:
        return f"{self.digits} {self.value_unit}"


# =============================================================================
# Value Table
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class _ValueDescriptor:
    radix: DigitRadix
    value_unit: ValueUnit


def _value(radix: DigitRadix, prefix_unit: UnitPrefix, base_unit: BaseUnit) -> _ValueDescriptor:
    return _ValueDescriptor(radix=radix, value_unit=ValueUnit(prefix_unit, base_unit))


_ValueTable: dict[Range, dict[Function, _ValueDescriptor]] = {
    Range.RANGE0: {
        Function.VOLTAGE: _value(DigitRadix.MINUS3, UnitPrefix.NONE, BaseUnit.VOLT),
        Function.MICRO_AMPERE: _value(DigitRadix.MINUS1, UnitPrefix.MICRO, BaseUnit.AMPERE),
        Function.MILLI_AMPERE: _value(DigitRadix.MINUS2, UnitPrefix.MILLI, BaseUnit.AMPERE),
        Function.AUTO_AMPERE: _value(DigitRadix.MINUS3, UnitPrefix.NONE, BaseUnit.AMPERE),
        Function.MANUAL_AMPERE: _value(DigitRadix.MINUS3, UnitPrefix.NONE, BaseUnit.AMPERE),
        Function.OHM: _value(DigitRadix.MINUS1, UnitPrefix.NONE, BaseUnit.OHM),
        Function.FREQUENCY: _value(DigitRadix.MINUS3, UnitPrefix.KILO, BaseUnit.HERTZ),
        Function.CAPACITOR: _value(DigitRadix.MINUS3, UnitPrefix.NANO, BaseUnit.FARAD),
    },
    Range.RANGE1: {
        Function.VOLTAGE: _value(DigitRadix.MINUS2, UnitPrefix.NONE, BaseUnit.VOLT),
        Function.MICRO_AMPERE: _value(DigitRadix.ZERO, UnitPrefix.MICRO, BaseUnit.AMPERE),
        Function.MILLI_AMPERE: _value(DigitRadix.MINUS1, UnitPrefix.MILLI, BaseUnit.AMPERE),
        Function.AUTO_AMPERE: _value(DigitRadix.MINUS2, UnitPrefix.NONE, BaseUnit.AMPERE),
        Function.OHM: _value(DigitRadix.MINUS3, UnitPrefix.KILO, BaseUnit.OHM),
        Function.FREQUENCY: _value(DigitRadix.MINUS2, UnitPrefix.KILO, BaseUnit.HERTZ),
        Function.CAPACITOR: _value(DigitRadix.MINUS2, UnitPrefix.NANO, BaseUnit.FARAD),
    },
    Range.RANGE2: {
        Function.VOLTAGE: _value(DigitRadix.MINUS1, UnitPrefix.NONE, BaseUnit.VOLT),
        Function.OHM: _value(DigitRadix.MINUS2, UnitPrefix.KILO, BaseUnit.OHM),
        Function.FREQUENCY: _value(DigitRadix.MINUS1, UnitPrefix.KILO, BaseUnit.HERTZ),
        Function.CAPACITOR: _value(DigitRadix.MINUS1, UnitPrefix.NANO, BaseUnit.FARAD),
    },
    Range.RANGE3: {
        Function.VOLTAGE: _value(DigitRadix.ZERO, UnitPrefix.NONE, BaseUnit.VOLT),
        Function.OHM: _value(DigitRadix.MINUS1, UnitPrefix.KILO, BaseUnit.OHM),
        Function.FREQUENCY: _value(DigitRadix.MINUS3, UnitPrefix.MEGA, BaseUnit.HERTZ),
        Function.CAPACITOR: _value(DigitRadix.MINUS3, UnitPrefix.MICRO, BaseUnit.FARAD),
    },
    Range.RANGE4: {
        Function.VOLTAGE: _value(DigitRadix.MINUS1, UnitPrefix.MILLI, BaseUnit.VOLT),
        Function.OHM: _value(DigitRadix.MINUS3, UnitPrefix.MEGA, BaseUnit.OHM),
        Function.FREQUENCY: _value(DigitRadix.MINUS2, UnitPrefix.MEGA, BaseUnit.HERTZ),
        Function.CAPACITOR: _value(DigitRadix.MINUS2, UnitPrefix.MICRO, BaseUnit.FARAD),
    },
    Range.RANGE5: {
        Function.OHM: _value(DigitRadix.MINUS2, UnitPrefix.MEGA, BaseUnit.OHM),
        Function.CAPACITOR: _value(DigitRadix.MINUS2, UnitPrefix.MICRO, BaseUnit.FARAD),
    },
    Range.RANGE6: {
        Function.CAPACITOR: _value(DigitRadix.MINUS3, UnitPrefix.MILLI, BaseUnit.FARAD),
    },
}


def resolve(range_: Range, function: Function, digits: Digits) -> MeasurementValue | None:
    """Resolve a reading to formatted digits and unit.

    Args:
        range_: Decoded range of the frame
        function: Decoded function of the frame
        digits: Decoded digit group of the frame

    Returns:
        MeasurementValue, or None if the range/function pair has no unit mapping
    """
    value_descriptor = _ValueTable[range_].get(function)
    if value_descriptor is None:
        return None

    return MeasurementValue(digits.to_value(value_descriptor.radix), value_descriptor.value_unit)
