"""Logarithms, powers and the exponential.

log2 uses the bit-serial algorithm: normalize the mantissa into [1, 2), then
square it F times, emitting one result bit per squaring.

pow dispatches on the exponent:
- integer exponent: exponentiation by squaring (negative via reciprocal)
- fractional exponent: rewrite b^e as 2^(e * log2 b), take 2^n by shifting
  and 2^r = e^(r ln 2) for the remainder |r| <= 1/2 by a Taylor series at
  32 fractional bits, driven by the inverse-factorial table
"""

from __future__ import annotations

from fixmath.constants import WIDE_FRACTIONAL_BITS
from fixmath.errors import InvalidArgument
from fixmath.fixed import FixedValue
from fixmath.tables import MathTables

_WIDE_HALF = 1 << (WIDE_FRACTIONAL_BITS - 1)


def log2(tables: MathTables, value: FixedValue) -> FixedValue:
    """Binary logarithm.

    Raises:
        InvalidArgument: If value <= 0
    """
    if value.raw <= 0:
        raise InvalidArgument(f"Logarithm requires a positive value, got {value}")

    f = tables.config.fractional_bits
    x = value.raw
    y = 0

    # Normalize x into [2^F, 2^(F+1)), counting whole powers of two
    while x < 1 << f:
        x <<= 1
        y -= 1 << f
    while x >= 2 << f:
        x >>= 1
        y += 1 << f

    # Each squaring doubles the exponent; an overflow past 2 is one result bit
    b = 1 << (f - 1)
    z = x
    for _ in range(f):
        z = (z * z) >> f
        if z >= 2 << f:
            z >>= 1
            y += b
        b >>= 1

    return FixedValue(y)


def log(tables: MathTables, value: FixedValue) -> FixedValue:
    """Natural logarithm."""
    return log2(tables, value) * tables.ln2


def log10(tables: MathTables, value: FixedValue) -> FixedValue:
    return log2(tables, value) * tables.log10_2


def log_base(tables: MathTables, value: FixedValue, base: FixedValue) -> FixedValue:
    """Logarithm in an arbitrary base.

    Bases 2, e and 10 use their dedicated constants; anything else divides
    binary logarithms.

    Raises:
        InvalidArgument: If value or base is not positive
        DivideByZero: If base is 1
    """
    if base == FixedValue.from_int(2):
        return log2(tables, value)
    elif base == tables.e:
        return log(tables, value)
    elif base == FixedValue.from_int(10):
        return log10(tables, value)
    return log2(tables, value) / log2(tables, base)


def _int_pow(base: FixedValue, exponent: int) -> FixedValue:
    if exponent < 0:
        t = FixedValue.ONE / base
        p = -exponent
    else:
        t = base
        p = exponent

    result = FixedValue.ONE
    while p > 0:
        if p & 1:
            result = result * t
        t = t * t
        p >>= 1
    return result


def pow_(tables: MathTables, base: FixedValue, exponent: FixedValue) -> FixedValue:
    """Raise base to a fixed-point exponent.

    Args:
        tables: Tables holding ln 2 and the inverse factorials
        base: Base (must be positive unless the exponent is an integer)
        exponent: Exponent

    Returns:
        base ** exponent

    Raises:
        DivideByZero: If base is 0 and exponent is a negative integer
        InvalidArgument: If base <= 0 and exponent has a fractional part
    """
    f = tables.config.fractional_bits
    one = FixedValue.ONE
    if base == one or exponent.raw == 0:
        return one

    if exponent.raw & FixedValue.FRACTION_MASK == 0:
        return _int_pow(base, exponent.raw >> f)

    exponent = exponent * log2(tables, base)
    int_pow = (exponent.raw + (FixedValue.FRACTION_RANGE >> 1)) >> f
    int_factor = one >> -int_pow if int_pow < 0 else one << int_pow

    # r * ln 2 at 32 fractional bits, with r = exponent - int_pow in [-1/2, 1/2]
    x = ((exponent.raw - (int_pow << f)) * tables.ln2_wide.raw + (FixedValue.FRACTION_RANGE >> 1)) >> f
    if x == 0:
        return int_factor

    # e^x - 1 = x + x^2/2! + x^3/3! + ...
    frac_factor = x
    power = x
    for inverse_factorial in tables.inverse_factorials[2:]:
        if power == 0:
            break
        power = (power * x + _WIDE_HALF) >> WIDE_FRACTIONAL_BITS
        frac_factor += (power * inverse_factorial.raw + _WIDE_HALF) >> WIDE_FRACTIONAL_BITS

    return FixedValue(
        ((int_factor.raw * frac_factor + _WIDE_HALF) >> WIDE_FRACTIONAL_BITS) + int_factor.raw
    )


def exp(tables: MathTables, value: FixedValue) -> FixedValue:
    """e ** value."""
    return pow_(tables, tables.e, value)
