"""Inverse trigonometry by CORDIC vectoring.

atan2 rotates (x, y) onto the positive x axis by a sequence of angles
atan(2^-i), using only shifts and adds, and accumulates the rotation. The
result is in degrees.
"""

from __future__ import annotations

from fixmath.engine.sqrt import sqrt
from fixmath.errors import InvalidArgument
from fixmath.fixed import FixedValue
from fixmath.tables import MathTables


def atan2(tables: MathTables, y: FixedValue, x: FixedValue) -> FixedValue:
    """Angle of the vector (x, y) in degrees, in (-180, 180].

    Args:
        tables: Tables holding the CORDIC angle steps
        y: Vertical component
        x: Horizontal component

    Returns:
        atan2(y, x) in degrees

    Raises:
        InvalidArgument: If both x and y are zero
    """
    if x.raw == 0 and y.raw == 0:
        raise InvalidArgument("atan2 is undefined when y and x are both 0")

    angle = FixedValue.ZERO

    # Vectoring only converges in the right half-plane
    if x.raw < 0:
        if y.raw < 0:
            x, y = -y, x
            angle = FixedValue.from_int(-90)
        elif y.raw > 0:
            x, y = y, -x
            angle = FixedValue.from_int(90)
        else:
            angle = FixedValue.from_int(180)

    for i, step in enumerate(tables.cordic_angles):
        if y.raw > 0:
            x, y = x + (y >> i), y - (x >> i)
            angle = angle + step
        elif y.raw < 0:
            x, y = x - (y >> i), y + (x >> i)
            angle = angle - step
        else:
            break

    return angle


def atan(tables: MathTables, value: FixedValue) -> FixedValue:
    return atan2(tables, value, FixedValue.ONE)


def asin(tables: MathTables, value: FixedValue) -> FixedValue:
    """Arcsine in degrees.

    Raises:
        InvalidArgument: If |value| > 1
    """
    one = FixedValue.ONE
    return atan2(tables, value, sqrt((one + value) * (one - value)))


def acos(tables: MathTables, value: FixedValue) -> FixedValue:
    """Arccosine in degrees.

    Raises:
        InvalidArgument: If |value| > 1
    """
    one = FixedValue.ONE
    return atan2(tables, sqrt((one + value) * (one - value)), value)
