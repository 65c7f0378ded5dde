"""Unit tests for digit formatting and the range/function value table."""

import pytest

from src.es51986.protocol.fields import Function, Range
from src.es51986.protocol.value import (
    BaseUnit,
    DigitRadix,
    Digits,
    MeasurementValue,
    UnitPrefix,
    ValueUnit,
    resolve,
)
from src.es51986.exceptions import InvalidDigitError

# =============================================================================
# Test Constants - Duplicated from src for test isolation
# =============================================================================

R = DigitRadix
P = UnitPrefix
B = BaseUnit

TEST_VALUE_TABLE: dict[tuple[Range, Function], tuple[DigitRadix, UnitPrefix, BaseUnit]] = {
    (Range.RANGE0, Function.VOLTAGE): (R.MINUS3, P.NONE, B.VOLT),
    (Range.RANGE0, Function.MICRO_AMPERE): (R.MINUS1, P.MICRO, B.AMPERE),
    (Range.RANGE0, Function.MILLI_AMPERE): (R.MINUS2, P.MILLI, B.AMPERE),
    (Range.RANGE0, Function.AUTO_AMPERE): (R.MINUS3, P.NONE, B.AMPERE),
    (Range.RANGE0, Function.MANUAL_AMPERE): (R.MINUS3, P.NONE, B.AMPERE),
    (Range.RANGE0, Function.OHM): (R.MINUS1, P.NONE, B.OHM),
    (Range.RANGE0, Function.FREQUENCY): (R.MINUS3, P.KILO, B.HERTZ),
    (Range.RANGE0, Function.CAPACITOR): (R.MINUS3, P.NANO, B.FARAD),
    (Range.RANGE1, Function.VOLTAGE): (R.MINUS2, P.NONE, B.VOLT),
    (Range.RANGE1, Function.MICRO_AMPERE): (R.ZERO, P.MICRO, B.AMPERE),
    (Range.RANGE1, Function.MILLI_AMPERE): (R.MINUS1, P.MILLI, B.AMPERE),
    (Range.RANGE1, Function.AUTO_AMPERE): (R.MINUS2, P.NONE, B.AMPERE),
    (Range.RANGE1, Function.OHM): (R.MINUS3, P.KILO, B.OHM),
    (Range.RANGE1, Function.FREQUENCY): (R.MINUS2, P.KILO, B.HERTZ),
    (Range.RANGE1, Function.CAPACITOR): (R.MINUS2, P.NANO, B.FARAD),
    (Range.RANGE2, Function.VOLTAGE): (R.MINUS1, P.NONE, B.VOLT),
    (Range.RANGE2, Function.OHM): (R.MINUS2, P.KILO, B.OHM),
    (Range.RANGE2, Function.FREQUENCY): (R.MINUS1, P.KILO, B.HERTZ),
    (Range.RANGE2, Function.CAPACITOR): (R.MINUS1, P.NANO, B.FARAD),
    (Range.RANGE3, Function.VOLTAGE): (R.ZERO, P.NONE, B.VOLT),
    (Range.RANGE3, Function.OHM): (R.MINUS1, P.KILO, B.OHM),
    (Range.RANGE3, Function.FREQUENCY): (R.MINUS3, P.MEGA, B.HERTZ),
    (Range.RANGE3, Function.CAPACITOR): (R.MINUS3, P.MICRO, B.FARAD),
    (Range.RANGE4, Function.VOLTAGE): (R.MINUS1, P.MILLI, B.VOLT),
    (Range.RANGE4, Function.OHM): (R.MINUS3, P.MEGA, B.OHM),
    (Range.RANGE4, Function.FREQUENCY): (R.MINUS2, P.MEGA, B.HERTZ),
    (Range.RANGE4, Function.CAPACITOR): (R.MINUS2, P.MICRO, B.FARAD),
    (Range.RANGE5, Function.OHM): (R.MINUS2, P.MEGA, B.OHM),
    (Range.RANGE5, Function.CAPACITOR): (R.MINUS2, P.MICRO, B.FARAD),
    (Range.RANGE6, Function.CAPACITOR): (R.MINUS3, P.MILLI, B.FARAD),
}

TEST_DIGITS = Digits((1, 2, 3, 4))

# =============================================================================
# Digits Tests
# =============================================================================


@pytest.mark.unit
class TestDigits:
    """Tests for Digits parsing and formatting."""

    @pytest.mark.parametrize(
        ("digits", "radix", "expected"),
        [
            ((1, 2, 3, 4), DigitRadix.ZERO, "1234"),
            ((1, 2, 3, 4), DigitRadix.MINUS1, "123.4"),
            ((1, 2, 3, 4), DigitRadix.MINUS2, "12.34"),
            ((1, 2, 3, 4), DigitRadix.MINUS3, "1.234"),
            ((0, 1, 3, 6), DigitRadix.ZERO, "136"),
            ((0, 0, 0, 0), DigitRadix.ZERO, "0"),
            ((0, 0, 0, 0), DigitRadix.MINUS1, "0.0"),
            ((0, 0, 0, 2), DigitRadix.MINUS2, "0.02"),
            ((0, 0, 2, 2), DigitRadix.MINUS3, "0.022"),
            ((0, 9, 8, 9), DigitRadix.MINUS1, "98.9"),
            ((6, 0, 0, 0), DigitRadix.MINUS2, "60.00"),
            ((9, 9, 9, 9), DigitRadix.MINUS3, "9.999"),
        ],
        ids=[
            "zero_1234",
            "minus1_1234",
            "minus2_1234",
            "minus3_1234",
            "zero_leading_zeros",
            "zero_all_zero",
            "minus1_all_zero",
            "minus2_leading_zeros",
            "minus3_keeps_leading_digit",
            "minus1_leading_zero",
            "minus2_trailing_zeros_kept",
            "minus3_max",
        ],
    )
    def test_to_value(self, digits: tuple[int, int, int, int], radix: DigitRadix, expected: str) -> None:
        """Test exact string output for each decimal placement."""
        assert Digits(digits).to_value(radix) == expected

    def test_from_bytes(self) -> None:
        """Test decoding 4 ASCII digit bytes."""
        assert Digits.from_bytes(b"0989") == Digits((0, 9, 8, 9))

    def test_from_bytes_reports_first_invalid_digit(self) -> None:
        """Test that decoding stops at the leftmost invalid digit."""
        with pytest.raises(InvalidDigitError) as exc_info:
            Digits.from_bytes(b"1A;B")
        assert exc_info.value.byte == ord("A")

    def test_from_bytes_wrong_length_raises(self) -> None:
        """Test that a digit group must be exactly 4 bytes."""
        with pytest.raises(ValueError, match="Expected 4 digit bytes"):
            Digits.from_bytes(b"123")

    @pytest.mark.parametrize("digits", [(1, 2, 3), (1, 2, 3, 4, 5), (1, 2, 3, 10), (-1, 0, 0, 0)])
    def test_invalid_digits_rejected(self, digits: tuple[int, ...]) -> None:
        """Test that Digits enforces 4 values in 0-9."""
        with pytest.raises(ValueError):
            Digits(digits)  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        """Test that Digits cannot be modified after creation."""
        with pytest.raises(AttributeError):
            TEST_DIGITS.digits = (0, 0, 0, 0)  # type: ignore[misc]


# =============================================================================
# Unit Tests
# =============================================================================


@pytest.mark.unit
class TestValueUnit:
    """Tests for unit and value rendering."""

    @pytest.mark.parametrize(
        ("value_unit", "expected"),
        [
            (ValueUnit(UnitPrefix.NONE, BaseUnit.VOLT), "V"),
            (ValueUnit(UnitPrefix.MEGA, BaseUnit.OHM), "MΩ"),
            (ValueUnit(UnitPrefix.KILO, BaseUnit.HERTZ), "kHz"),
            (ValueUnit(UnitPrefix.MICRO, BaseUnit.AMPERE), "µA"),
            (ValueUnit(UnitPrefix.NANO, BaseUnit.FARAD), "nF"),
            (ValueUnit(UnitPrefix.MILLI, BaseUnit.VOLT), "mV"),
        ],
    )
    def test_str(self, value_unit: ValueUnit, expected: str) -> None:
        """Test that units render as SI symbols."""
        assert str(value_unit) == expected

    def test_measurement_value_str(self) -> None:
        """Test value rendering with unit."""
        value = MeasurementValue("98.9", ValueUnit(UnitPrefix.NONE, BaseUnit.VOLT))
        assert str(value) == "98.9 V"


# =============================================================================
# Value Table Tests
# =============================================================================

ALL_COMBINATIONS = [(range_, function) for range_ in Range for function in Function]


@pytest.mark.unit
class TestResolve:
    """Tests for resolve over all range/function combinations."""

    def test_combination_count(self) -> None:
        """Test that the grid covers 7 ranges x 15 functions."""
        assert len(ALL_COMBINATIONS) == 105

    @pytest.mark.parametrize(
        ("range_", "function"),
        ALL_COMBINATIONS,
        ids=[f"{r.name}-{f.name}" for r, f in ALL_COMBINATIONS],
    )
    def test_resolve_matches_table(self, range_: Range, function: Function) -> None:
        """Test each combination returns its table entry, or None when absent."""
        result = resolve(range_, function, TEST_DIGITS)

        expected = TEST_VALUE_TABLE.get((range_, function))
        if expected is None:
            assert result is None
        else:
            radix, prefix_unit, base_unit = expected
            assert result == MeasurementValue(TEST_DIGITS.to_value(radix), ValueUnit(prefix_unit, base_unit))

    @pytest.mark.parametrize(
        "function",
        [
            Function.TEMPERATURE,
            Function.CONTINUITY,
            Function.DIODE,
            Function.ADP0,
            Function.ADP1,
            Function.ADP2,
            Function.ADP3,
        ],
    )
    def test_unmapped_functions_never_resolve(self, function: Function) -> None:
        """Test that functions without a physical unit resolve to None in every range."""
        assert all(resolve(range_, function, TEST_DIGITS) is None for range_ in Range)

    def test_range3_micro_ampere_absent(self) -> None:
        """Test a pair the chip never reports resolves to None rather than raising."""
        assert resolve(Range.RANGE3, Function.MICRO_AMPERE, TEST_DIGITS) is None

    def test_mapped_count(self) -> None:
        """Test the number of mapped combinations."""
        mapped = [pair for pair in ALL_COMBINATIONS if resolve(*pair, TEST_DIGITS) is not None]
        assert len(mapped) == len(TEST_VALUE_TABLE) == 30
