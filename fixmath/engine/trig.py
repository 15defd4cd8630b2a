"""Sine, cosine and tangent of angles in degrees.

Cosine is read from a quarter-period sine table with 2^R samples per degree
and linearly interpolated between samples. The other three quarters come from
the usual symmetries, so only 90 * 2^R + 1 values are stored.
"""

from __future__ import annotations

from fixmath.fixed import FixedValue, wrap
from fixmath.tables import MathTables


def cos_lookup(tables: MathTables, index: int) -> FixedValue:
    """Cosine at a non-negative table index (index / 2^R degrees).

    Args:
        tables: Tables holding the quarter-sine samples
        index: Angle in table steps

    Returns:
        cos(index / 2^R degrees), exactly as stored in the table
    """
    quarter = 90 * (1 << tables.config.sine_resolution_power)
    index %= 4 * quarter
    table = tables.quarter_sine

    if index < quarter:
        return table[quarter - index]
    elif index < 2 * quarter:
        return -table[index - quarter]
    elif index < 3 * quarter:
        return -table[quarter - (index - 2 * quarter)]
    else:
        return table[index - 3 * quarter]


def cos_raw(tables: MathTables, raw: int) -> FixedValue:
    """Cosine of a raw angle in degrees, interpolated between table steps."""
    shift = tables.config.fractional_bits - tables.config.sine_resolution_power
    raw = -raw if raw < 0 else raw
    t = raw & ((1 << shift) - 1)
    index = raw >> shift

    if t == 0:
        return cos_lookup(tables, index)

    v1 = cos_lookup(tables, index)
    v2 = cos_lookup(tables, index + 1)
    return FixedValue((v1.raw * ((1 << shift) - t) + v2.raw * t + (1 << (shift - 1))) >> shift)


def cos(tables: MathTables, degrees: FixedValue) -> FixedValue:
    return cos_raw(tables, degrees.raw)


def sin(tables: MathTables, degrees: FixedValue) -> FixedValue:
    """sin(d) = cos(d - 90), subtracting on the wrapped raw angle."""
    quarter_turn = 90 << tables.config.fractional_bits
    return cos_raw(tables, wrap(degrees.raw - quarter_turn, FixedValue.TOTAL_BITS))


def tan(tables: MathTables, degrees: FixedValue) -> FixedValue:
    """Tangent as sin / cos.

    Raises:
        DivideByZero: At the poles, where cos(degrees) is exactly zero
    """
    return sin(tables, degrees) / cos(tables, degrees)
