"""Rounding, sign and ordering helpers on raw bits."""

from __future__ import annotations

from fixmath.fixed import FixedValue


def absolute(value: FixedValue) -> FixedValue:
    """Absolute value (wraps MIN_VALUE onto itself)."""
    return abs(value)


def sign(value: FixedValue) -> FixedValue:
    """-1, 0 or 1 as a FixedValue."""
    if value.raw < 0:
        return -FixedValue.ONE
    if value.raw > 0:
        return FixedValue.ONE
    return FixedValue.ZERO


def floor(value: FixedValue) -> FixedValue:
    """Round toward negative infinity."""
    return FixedValue(value.raw & FixedValue.INTEGER_MASK)


def ceiling(value: FixedValue) -> FixedValue:
    """Round toward positive infinity (wraps at MAX_INTEGER)."""
    return FixedValue((value.raw + FixedValue.FRACTION_MASK) & FixedValue.INTEGER_MASK)


def truncate(value: FixedValue) -> FixedValue:
    """Round toward zero: ceiling for negatives, floor otherwise."""
    if value.raw < 0:
        return ceiling(value)
    return floor(value)


def round_half_up(value: FixedValue) -> FixedValue:
    """Round to the nearest integer, halves toward positive infinity."""
    return FixedValue((value.raw + (FixedValue.FRACTION_RANGE >> 1)) & FixedValue.INTEGER_MASK)


def minimum(v1: FixedValue, v2: FixedValue) -> FixedValue:
    return v1 if v1 < v2 else v2


def maximum(v1: FixedValue, v2: FixedValue) -> FixedValue:
    return v1 if v1 > v2 else v2
