"""Wide constant type.

WideConstant is a 64-bit integer scaled by 2^32. It only exists to author
constants and lookup tables with more precision than the runtime type, so that
quantizing them down gives correctly rounded values for any valid runtime
format.
"""

from __future__ import annotations

import decimal
from decimal import ROUND_FLOOR, Decimal
from typing import ClassVar

from fixmath.constants import (
    FRACTIONAL_BITS as RUNTIME_FRACTIONAL_BITS,
    WIDE_FRACTIONAL_BITS,
    WIDE_TEXT_DIGITS,
    WIDE_TOTAL_BITS,
)
from fixmath.errors import InvalidArgument
from fixmath.fixed import DECIMAL_CONTEXT, FixedValue, ScaledInteger

__all__ = ["WideConstant"]


class WideConstant(ScaledInteger):
    """64-bit fixed-point number with 32 fractional bits.

    Example: pi is stored as 13493037705 (round(pi * 2^32)).
    """

    TOTAL_BITS: ClassVar[int] = WIDE_TOTAL_BITS
    FRACTIONAL_BITS: ClassVar[int] = WIDE_FRACTIONAL_BITS
    TEXT_DIGITS: ClassVar[int] = WIDE_TEXT_DIGITS

    # Integer part must fit a 32-bit signed integer
    MIN_INTEGER: ClassVar[int] = -(1 << 31)
    MAX_INTEGER: ClassVar[int] = (1 << 31) - 1

    __slots__ = ()

    @classmethod
    def from_decimal(cls, d: Decimal) -> WideConstant:
        """Create from a Decimal, splitting it into integer and fraction.

        The integer part is the floor of d; the fraction is scaled by 2^32 and
        rounded to nearest.

        Raises:
            InvalidArgument: If d is not finite or its integer part does not
                fit 32 bits
        """
        if not d.is_finite():
            raise InvalidArgument(f"WideConstant.from_decimal requires a finite value, got {d}")
        floor = int(d.to_integral_value(rounding=ROUND_FLOOR))
        if not cls.MIN_INTEGER <= floor <= cls.MAX_INTEGER:
            raise InvalidArgument(f"{d} is outside the range of WideConstant")
        with decimal.localcontext(DECIMAL_CONTEXT):
            remainder = d - floor
        fraction = super().from_decimal(remainder)
        return cls((floor << cls.FRACTIONAL_BITS) + fraction.raw)

    def to_fixed(self, fractional_bits: int = RUNTIME_FRACTIONAL_BITS) -> FixedValue:
        """Quantize to the runtime type, rounding to nearest.

        Args:
            fractional_bits: Fractional bits of the target format

        Returns:
            FixedValue with raw = (raw + half) >> (32 - fractional_bits)

        Raises:
            InvalidArgument: If fractional_bits is not in [1, 32)
        """
        if not 0 < fractional_bits < self.FRACTIONAL_BITS:
            raise InvalidArgument(
                f"Cannot quantize to {fractional_bits} fractional bits "
                f"(must be in [1, {self.FRACTIONAL_BITS}))"
            )
        shift = self.FRACTIONAL_BITS - fractional_bits
        return FixedValue((self._raw + (1 << (shift - 1))) >> shift)
