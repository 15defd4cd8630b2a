"""Integer square root.

Scalar sqrt and vector magnitude share one primitive, isqrt_newton, so both
are bit-identical on every platform.
"""

from __future__ import annotations

from collections.abc import Iterable

from fixmath.errors import InvalidArgument
from fixmath.fixed import FixedValue


def isqrt_newton(n: int) -> int:
    """Compute floor(sqrt(n)) with Heron's method.

    Starts from a power of two that is at least sqrt(n) and iterates
    x = (x + n // x) >> 1 until the sequence stops decreasing.

    Args:
        n: Non-negative integer

    Returns:
        The largest x with x * x <= n

    Raises:
        InvalidArgument: If n is negative
    """
    if n < 0:
        raise InvalidArgument(f"Square root of negative integer {n}")
    if n == 0:
        return 0

    x = 1 << ((n.bit_length() + 1) // 2)
    while True:
        y = (x + n // x) >> 1
        if y >= x:
            return x
        x = y


def _rounded_root(n: int) -> FixedValue:
    # n carries two extra bits; the last one rounds the result to nearest
    return FixedValue((isqrt_newton(n << 2) + 1) >> 1)


def sqrt(value: FixedValue) -> FixedValue:
    """Square root, correctly rounded to the nearest raw unit.

    Raises:
        InvalidArgument: If value is negative
    """
    if value.raw < 0:
        raise InvalidArgument(f"Square root requires a non-negative value, got {value}")
    if value.raw == 0:
        return FixedValue.ZERO
    return _rounded_root(value.raw << FixedValue.FRACTIONAL_BITS)


def magnitude(components: Iterable[FixedValue]) -> FixedValue:
    """Euclidean norm of a vector of components.

    The squared components are summed as unbounded integers, so no
    intermediate overflow can occur.
    """
    return _rounded_root(sum(c.raw * c.raw for c in components))
