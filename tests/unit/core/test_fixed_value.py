"""Tests for FixedValue arithmetic, conversion and text."""

import math
from decimal import Decimal

import pytest

from fixmath import DivideByZero, FixedValue, FixMathError, InvalidArgument
from tests.helpers import fx


class TestFixedValueConstruction:
    """Tests for FixedValue construction."""

    def test_from_raw(self):
        """The raw integer is stored as is."""
        assert FixedValue(98304).raw == 98304
        assert FixedValue.from_raw(-5).raw == -5

    def test_from_int(self):
        """from_int shifts by the fractional bits."""
        assert FixedValue.from_int(3).raw == 3 << 16
        assert FixedValue.from_int(-2).raw == -(2 << 16)

    def test_from_int_out_of_range_wraps(self):
        """32768 does not fit 16 integer bits and wraps to the minimum."""
        assert FixedValue.from_int(32768) == FixedValue.MIN_VALUE

    def test_from_float(self):
        """1.5 is stored as 98304."""
        assert FixedValue.from_float(1.5).raw == 98304
        assert FixedValue.from_float(-1.5).raw == -98304

    def test_from_decimal_rounds_half_up(self):
        """Halfway raw values round away from zero."""
        half_unit = Decimal(1) / Decimal(2**17)
        assert FixedValue.from_decimal(half_unit).raw == 1
        assert FixedValue.from_decimal(-half_unit).raw == -1

    def test_from_decimal_out_of_range_raises(self):
        """Decimals beyond the 16.16 range are rejected."""
        with pytest.raises(InvalidArgument):
            FixedValue.from_decimal(Decimal(40000))

    def test_from_decimal_not_finite_raises(self):
        """NaN and infinity are rejected."""
        with pytest.raises(InvalidArgument):
            FixedValue.from_decimal(Decimal("NaN"))
        with pytest.raises(InvalidArgument):
            FixedValue.from_float(math.inf)

    def test_invalid_raw_type_raises(self):
        """Only int raw values are accepted."""
        with pytest.raises(TypeError):
            FixedValue(1.5)  # type: ignore
        with pytest.raises(TypeError):
            FixedValue(True)

    def test_constants(self):
        """Class constants sit at the ends of the raw range."""
        assert FixedValue.ZERO.raw == 0
        assert FixedValue.ONE.raw == 65536
        assert FixedValue.EPSILON.raw == 1
        assert FixedValue.MIN_VALUE.raw == -(2**31)
        assert FixedValue.MAX_VALUE.raw == 2**31 - 1


class TestFixedValueMixAndRatio:
    """Tests for mix() and ratio()."""

    def test_mix(self):
        """mix(2, 1, 4) is 2.25."""
        assert FixedValue.mix(2, 1, 4) == fx(2.25)

    def test_mix_fraction_follows_integer_sign(self):
        """mix(-2, 1, 4) is -2.25, not -1.75."""
        assert FixedValue.mix(-2, 1, 4) == fx(-2.25)

    def test_mix_keeps_only_fractional_part(self):
        """An improper fraction contributes only its fractional part."""
        assert FixedValue.mix(1, 5, 4) == fx(1.25)

    def test_mix_truncates_fraction(self):
        """mix(0, 1, 3) truncates 65536/3."""
        assert FixedValue.mix(0, 1, 3).raw == 21845

    def test_mix_negative_numerator_raises(self):
        """Negative ratios are rejected."""
        with pytest.raises(InvalidArgument):
            FixedValue.mix(1, -1, 2)

    def test_mix_zero_denominator_raises(self):
        """A zero denominator raises DivideByZero."""
        with pytest.raises(DivideByZero):
            FixedValue.mix(1, 1, 0)

    def test_ratio_rounds_half_up(self):
        """1/3 rounds down and 2/3 rounds up."""
        assert FixedValue.ratio(1, 3).raw == 21845
        assert FixedValue.ratio(2, 3).raw == 43691

    def test_ratio_exact(self):
        """Exact ratios are exact."""
        assert FixedValue.ratio(1, 2) == fx(0.5)
        assert FixedValue.ratio(6, 3) == fx(2)

    def test_ratio_negative_raises(self):
        """ratio() takes non-negative operands only."""
        with pytest.raises(InvalidArgument):
            FixedValue.ratio(-1, 2)

    def test_ratio_zero_denominator_raises(self):
        """A zero denominator raises DivideByZero."""
        with pytest.raises(DivideByZero):
            FixedValue.ratio(1, 0)


class TestFixedValueArithmetic:
    """Tests for FixedValue arithmetic operations."""

    def test_add(self):
        """1.5 + 2.5 = 4."""
        assert fx(1.5) + fx(2.5) == fx(4)

    def test_sub(self):
        """1.5 - 2.5 = -1."""
        assert fx(1.5) - fx(2.5) == fx(-1)

    def test_add_overflow_wraps(self):
        """MAX + epsilon wraps to MIN."""
        assert FixedValue.MAX_VALUE + FixedValue.EPSILON == FixedValue.MIN_VALUE

    def test_sub_underflow_wraps(self):
        """MIN - epsilon wraps to MAX."""
        assert FixedValue.MIN_VALUE - FixedValue.EPSILON == FixedValue.MAX_VALUE

    def test_mul(self):
        """1.5 * 1.5 = 2.25."""
        assert fx(1.5) * fx(1.5) == fx(2.25)

    def test_mul_rounds_half_up(self):
        """3 raw units * 0.5 = 1.5 raw units, rounded up to 2."""
        assert (FixedValue(3) * fx(0.5)).raw == 2
        assert (FixedValue(-3) * fx(0.5)).raw == -1

    def test_mul_overflow_wraps(self):
        """200 * 200 wraps modulo 2^32."""
        result = fx(200) * fx(200)
        assert result.raw == 40000 * 65536 - 2**32

    def test_div(self):
        """Exact quotients are exact."""
        assert fx(3) / fx(2) == fx(1.5)
        assert fx(-3) / fx(2) == fx(-1.5)

    def test_div_rounds_half_up(self):
        """1/3 and 2/3 round to the nearest raw unit."""
        assert (fx(1) / fx(3)).raw == 21845
        assert (fx(2) / fx(3)).raw == 43691

    def test_div_truncates_before_rounding(self):
        """Negative quotients are truncated toward zero before the final rounding."""
        assert (fx(-2) / fx(3)).raw == -43690

    def test_div_by_zero_raises(self):
        """Division by zero raises DivideByZero."""
        with pytest.raises(DivideByZero) as exc_info:
            fx(1) / FixedValue.ZERO
        assert "Division by zero" in str(exc_info.value)

    def test_div_by_zero_is_zero_division_error(self):
        """DivideByZero is also a ZeroDivisionError and a FixMathError."""
        with pytest.raises(ZeroDivisionError):
            fx(1) / FixedValue.ZERO
        with pytest.raises(FixMathError):
            fx(1) / FixedValue.ZERO

    def test_mod(self):
        """Remainder of the raw integers."""
        assert fx(5.5) % fx(2) == fx(1.5)
        assert FixedValue(7) % FixedValue(3) == FixedValue(1)

    def test_mod_sign_follows_dividend(self):
        """The remainder takes the sign of the dividend."""
        assert FixedValue(-7) % FixedValue(3) == FixedValue(-1)
        assert FixedValue(7) % FixedValue(-3) == FixedValue(1)

    def test_mod_by_zero_raises(self):
        """Modulo by zero raises DivideByZero."""
        with pytest.raises(DivideByZero):
            fx(1) % FixedValue.ZERO

    def test_neg(self):
        """Negation flips the sign; MIN wraps onto itself."""
        assert -fx(1.5) == fx(-1.5)
        assert -FixedValue.MIN_VALUE == FixedValue.MIN_VALUE

    def test_abs(self):
        """abs() drops the sign."""
        assert abs(fx(-1.5)) == fx(1.5)
        assert abs(fx(1.5)) == fx(1.5)

    def test_shifts(self):
        """Shifts act on the raw integer."""
        assert fx(3) << 1 == fx(6)
        assert fx(-3) >> 1 == fx(-1.5)
        assert FixedValue(-1) >> 1 == FixedValue(-1)

    def test_negative_shift_raises(self):
        """A negative shift count is rejected."""
        with pytest.raises(InvalidArgument):
            fx(1) << -1
        with pytest.raises(InvalidArgument):
            fx(1) >> -1

    def test_mixed_types_rejected(self):
        """Operators do not accept int or float operands."""
        with pytest.raises(TypeError):
            fx(1) + 1  # type: ignore
        with pytest.raises(TypeError):
            fx(1) * 1.5  # type: ignore
        with pytest.raises(TypeError):
            fx(1) < 2  # type: ignore

    def test_immutable(self):
        """Operations return new values."""
        a = fx(1)
        b = a + fx(1)
        assert a == fx(1)
        assert b == fx(2)


class TestFixedValueComparison:
    """Tests for ordering, equality and hashing."""

    def test_ordering(self):
        """Ordering follows the raw integers."""
        assert fx(-1) < fx(0) < fx(0.5) < fx(1)
        assert fx(1) >= fx(1)
        assert fx(1) <= fx(1)
        assert fx(2) > fx(1)

    def test_equality(self):
        """Equal raw values are equal; other types never are."""
        assert fx(1.5) == FixedValue(98304)
        assert fx(1.5) != fx(2.5)
        assert fx(1) != 1

    def test_hash(self):
        """Equal values hash equally."""
        assert len({fx(1), fx(1), FixedValue(65536)}) == 1

    def test_bool(self):
        """Only zero is falsy."""
        assert not FixedValue.ZERO
        assert FixedValue.EPSILON


class TestFixedValueConversion:
    """Tests for conversion to int and float."""

    @pytest.mark.parametrize(
        "value,floor,trunc,ceil",
        [
            (1.5, 1, 1, 2),
            (-1.5, -2, -1, -1),
            (2, 2, 2, 2),
            (-2, -2, -2, -2),
            (0.25, 0, 0, 1),
            (-0.25, -1, 0, 0),
        ],
    )
    def test_integer_conversions(self, value, floor, trunc, ceil):
        """int() floors, math.trunc() truncates, math.ceil() rounds up."""
        v = fx(value)
        assert int(v) == floor
        assert v.to_int() == floor
        assert math.floor(v) == floor
        assert math.trunc(v) == trunc
        assert math.ceil(v) == ceil

    def test_to_float(self):
        """to_float divides the raw value by 2^16."""
        assert fx(1.5).to_float() == 1.5
        assert float(FixedValue.EPSILON) == 1 / 65536

    def test_to_decimal_is_exact(self):
        """to_decimal gives the exact represented value."""
        assert FixedValue.EPSILON.to_decimal() == Decimal(1) / Decimal(65536)
        assert fx(-1.5).to_decimal() == Decimal("-1.5")


class TestFixedValueText:
    """Tests for str(), repr() and parse()."""

    @pytest.mark.parametrize(
        "value,text",
        [
            (FixedValue(98304), "1.5"),
            (FixedValue(-98304), "-1.5"),
            (FixedValue.from_int(3), "3"),
            (FixedValue(-32768), "-0.5"),
            (FixedValue.EPSILON, "0.000015"),
            (FixedValue.ratio(1, 3), "0.333328"),
            (FixedValue.MIN_VALUE, "-32768"),
            (FixedValue.MAX_VALUE, "32767.999985"),
            (FixedValue.ZERO, "0"),
        ],
    )
    def test_str(self, value, text):
        """Text uses up to six rounded fraction digits, trailing zeros trimmed."""
        assert str(value) == text

    def test_repr(self):
        """repr shows the raw value."""
        assert repr(fx(1.5)) == "FixedValue(raw=98304)"

    @pytest.mark.parametrize(
        "raw",
        [0, 1, -1, 98304, -98304, 21845, 123456789, -987654321, 2**31 - 1, -(2**31)],
    )
    def test_parse_inverts_str(self, raw):
        """parse(str(v)) gives back v."""
        value = FixedValue(raw)
        assert FixedValue.parse(str(value)) == value

    def test_parse_accepts_sign_and_whitespace(self):
        """Leading signs and surrounding whitespace are allowed."""
        assert FixedValue.parse(" +2.25 ") == fx(2.25)
        assert FixedValue.parse("-7") == fx(-7)

    @pytest.mark.parametrize("text", ["", "abc", "1e5", "1.2.3", ".5", "1."])
    def test_parse_invalid_raises(self, text):
        """Anything but a plain decimal number is rejected."""
        with pytest.raises(InvalidArgument) as exc_info:
            FixedValue.parse(text)
        assert "Cannot parse" in str(exc_info.value)

    def test_parse_out_of_range_raises(self):
        """Numbers beyond the range are rejected rather than wrapped."""
        with pytest.raises(InvalidArgument):
            FixedValue.parse("40000")
