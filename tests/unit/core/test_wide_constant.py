"""Tests for WideConstant (64-bit, 32 fractional bits)."""

from decimal import Decimal

import pytest

from fixmath import FixedValue, InvalidArgument, WideConstant
from fixmath.constants import WIDE_RAW_MAX, WIDE_RAW_MIN


class TestWideConstantConstruction:
    """Tests for WideConstant construction."""

    def test_from_int(self):
        """from_int shifts by 32 bits."""
        assert WideConstant.from_int(1).raw == 2**32

    def test_from_decimal(self):
        """1.5 is stored as 3 * 2^31."""
        assert WideConstant.from_decimal(Decimal("1.5")).raw == 3 << 31

    def test_from_decimal_negative_splits_at_floor(self):
        """-1.25 is floor -2 plus fraction 0.75."""
        assert WideConstant.from_decimal(Decimal("-1.25")).raw == -5 * 2**30

    def test_from_decimal_integer_part_out_of_range_raises(self):
        """The integer part must fit 32 bits."""
        with pytest.raises(InvalidArgument):
            WideConstant.from_decimal(Decimal(2**31))
        with pytest.raises(InvalidArgument):
            WideConstant.from_decimal(Decimal(-(2**31) - 1))

    def test_from_decimal_not_finite_raises(self):
        """Infinity is rejected."""
        with pytest.raises(InvalidArgument):
            WideConstant.from_decimal(Decimal("Infinity"))

    def test_overflow_wraps_at_64_bits(self):
        """Arithmetic wraps in 64 bits, not 32."""
        assert WideConstant(WIDE_RAW_MAX) + WideConstant(1) == WideConstant(WIDE_RAW_MIN)
        assert WideConstant(2**40).raw == 2**40


class TestWideConstantArithmetic:
    """Tests for WideConstant arithmetic."""

    def test_mul_and_div(self):
        """Multiplication and division work at 32 fractional bits."""
        two = WideConstant.from_int(2)
        three = WideConstant.from_int(3)
        assert two * three == WideConstant.from_int(6)
        assert three / two == WideConstant.from_decimal(Decimal("1.5"))

    def test_not_interchangeable_with_fixed_value(self):
        """WideConstant and FixedValue never compare equal or mix."""
        assert WideConstant.from_int(1) != FixedValue.from_int(1)
        with pytest.raises(TypeError):
            WideConstant.from_int(1) + FixedValue.from_int(1)  # type: ignore

    def test_to_int_floors(self):
        """to_int rounds toward negative infinity."""
        assert WideConstant.from_decimal(Decimal("-0.5")).to_int() == -1
        assert WideConstant.from_decimal(Decimal("2.75")).to_int() == 2


class TestWideConstantQuantize:
    """Tests for to_fixed()."""

    def test_to_fixed_rounds_to_nearest(self):
        """pi at 32 fractional bits quantizes to 205887 at 16."""
        assert WideConstant(13493037705).to_fixed() == FixedValue(205887)

    def test_to_fixed_half_rounds_up(self):
        """Exactly half a 16-bit unit rounds up."""
        assert WideConstant(1 << 15).to_fixed() == FixedValue(1)
        assert WideConstant((1 << 15) - 1).to_fixed() == FixedValue(0)

    def test_to_fixed_exact(self):
        """Values on the 16-bit grid are preserved."""
        assert WideConstant.from_decimal(Decimal("-2.5")).to_fixed() == FixedValue(-163840)

    def test_default_width_is_runtime_format(self):
        """Without an argument to_fixed targets the 16 fractional bits of FixedValue."""
        assert WideConstant.from_int(1).to_fixed() == FixedValue.ONE
        for raw in [-(1 << 15), 1 << 15, -13493037705, -5 * 2**30]:
            value = WideConstant(raw)
            assert value.to_fixed() == value.to_fixed(16)

    def test_negative_half_rounds_up(self):
        """Minus half a 16-bit unit rounds toward positive infinity."""
        assert WideConstant(-(1 << 15)).to_fixed() == FixedValue.ZERO
        assert WideConstant(-(1 << 15) - 1).to_fixed() == FixedValue(-1)

    @pytest.mark.parametrize("fractional_bits", [0, 32, 40, -1])
    def test_invalid_width_raises(self, fractional_bits):
        """The target must keep fewer fractional bits than the source."""
        with pytest.raises(InvalidArgument) as exc_info:
            WideConstant.from_int(1).to_fixed(fractional_bits)
        assert "Cannot quantize" in str(exc_info.value)


class TestWideConstantText:
    """Tests for str()."""

    def test_integer(self):
        """Whole numbers print without a fraction."""
        assert str(WideConstant.from_int(1)) == "1"
        assert str(WideConstant.from_int(-3)) == "-3"

    def test_fraction(self):
        """Up to nine fraction digits."""
        assert str(WideConstant(1 << 31)) == "0.5"
        assert str(WideConstant(13493037705)).startswith("3.14159265")

    def test_fraction_rounding_carries(self):
        """A fraction that rounds to a whole unit carries into the integer part."""
        assert str(WideConstant((1 << 32) - 1)) == "1"

    def test_parse_inverts_str(self):
        """parse(str(v)) gives back v for a value on the printed grid."""
        value = WideConstant.from_decimal(Decimal("-12.125"))
        assert WideConstant.parse(str(value)) == value
