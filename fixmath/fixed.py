"""Fixed-point value type.

FixedValue stores a 32-bit two's-complement integer scaled by 2^16, so 1.5 is
stored as 98304. Every operation works on the raw integers and wraps the
result back into 32 bits: overflow is silent, never an error.

Rounding rules:
- multiply: round half up on the final shift
- divide: truncate the widened quotient, then round half up by one extra bit
- modulo: remainder of the raw integers (sign follows the dividend)

Operators only accept operands of the same type. Mixing in int or float
returns NotImplemented; use the named constructors to convert explicitly.
"""

from __future__ import annotations

import decimal
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import ClassVar, TypeVar

# Importing config validates the compiled-in format before any arithmetic
from fixmath.config import DEFAULT_MATH_CONFIG  # noqa: F401
from fixmath.constants import (
    FIXED_TEXT_DIGITS,
    FRACTION_MASK,
    FRACTION_RANGE,
    FRACTIONAL_BITS,
    INTEGER_BITS,
    INTEGER_MASK,
    MAX_INTEGER,
    MIN_INTEGER,
    TOTAL_BITS,
)
from fixmath.errors import DivideByZero, InvalidArgument

__all__ = [
    "FixedValue",
    "ScaledInteger",
    "div_trunc",
    "rem_trunc",
    "wrap",
]

S = TypeVar("S", bound="ScaledInteger")

# Enough digits for any 64-bit raw value and its 2^32 scale
DECIMAL_CONTEXT = decimal.Context(prec=60)

_NUMBER_TEXT = re.compile(r"[+-]?\d+(\.\d+)?")


def wrap(value: int, bits: int) -> int:
    """Wrap an integer into the signed two's-complement range of `bits` bits."""
    half = 1 << (bits - 1)
    return ((value + half) & ((1 << bits) - 1)) - half


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // rounds toward negative infinity; fixed-point division models
    machine integer division, which truncates. This matters for negative
    operands.

    Raises:
        DivideByZero: If b is zero

    Examples:
        -7 // 3 = -3, div_trunc(-7, 3) = -2
    """
    if b == 0:
        raise DivideByZero("Division by zero in div_trunc")
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def rem_trunc(a: int, b: int) -> int:
    """Remainder matching div_trunc (takes the sign of the dividend)."""
    return a - b * div_trunc(a, b)


def format_scaled(raw: int, fractional_bits: int, digits: int) -> str:
    """Render a scaled integer as ASCII decimal text.

    The fraction is scaled by 10^digits with round-to-nearest and trailing
    zeros are trimmed. A fraction that rounds up to a whole unit carries into
    the integer part.
    """
    magnitude = -raw if raw < 0 else raw
    integer = magnitude >> fractional_bits
    fraction = magnitude & ((1 << fractional_bits) - 1)
    if fraction:
        scale = 10**digits
        fraction = (fraction * scale + (1 << (fractional_bits - 1))) >> fractional_bits
        if fraction == scale:
            integer += 1
            fraction = 0

    sign = "-" if raw < 0 else ""
    if not fraction:
        return f"{sign}{integer}"
    return f"{sign}{integer}.{str(fraction).zfill(digits).rstrip('0')}"


class ScaledInteger:
    """Signed integer of TOTAL_BITS bits scaled by 2^FRACTIONAL_BITS.

    Subclasses pin the layout. Values are immutable and compare, hash and
    wrap on their raw integer.
    """

    TOTAL_BITS: ClassVar[int]
    FRACTIONAL_BITS: ClassVar[int]
    TEXT_DIGITS: ClassVar[int]

    __slots__ = ("_raw",)
    _raw: int

    def __init__(self, raw: int) -> None:
        """Create from a raw scaled integer (wrapped into TOTAL_BITS).

        Raises:
            TypeError: If raw is not an int
        """
        if not isinstance(raw, int) or isinstance(raw, bool):
            raise TypeError(f"{type(self).__name__} requires int raw value, got {type(raw).__name__}")
        self._raw = wrap(raw, self.TOTAL_BITS)

    # --- Layout ---

    @classmethod
    def fraction_range(cls) -> int:
        return 1 << cls.FRACTIONAL_BITS

    @classmethod
    def fraction_mask(cls) -> int:
        return (1 << cls.FRACTIONAL_BITS) - 1

    @property
    def raw(self) -> int:
        """The underlying scaled integer."""
        return self._raw

    # --- Construction ---

    @classmethod
    def from_raw(cls: type[S], raw: int) -> S:
        return cls(raw)

    @classmethod
    def from_int(cls: type[S], value: int) -> S:
        """Create from an integer (raw = value << F, wraps if out of range)."""
        return cls(value << cls.FRACTIONAL_BITS)

    @classmethod
    def from_decimal(cls: type[S], d: Decimal) -> S:
        """Create from a Decimal, rounding half away from zero.

        Raises:
            InvalidArgument: If d is not finite or does not fit the format
        """
        if not d.is_finite():
            raise InvalidArgument(f"{cls.__name__}.from_decimal requires a finite value, got {d}")
        with decimal.localcontext(DECIMAL_CONTEXT):
            scaled = int((d * cls.fraction_range()).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        lowest = -(1 << (cls.TOTAL_BITS - 1))
        if not lowest <= scaled < -lowest:
            raise InvalidArgument(f"{d} is outside the range of {cls.__name__}")
        return cls(scaled)

    @classmethod
    def from_float(cls: type[S], value: float) -> S:
        """Create from a float, converted exactly through Decimal (interop only)."""
        return cls.from_decimal(Decimal(value))

    @classmethod
    def parse(cls: type[S], text: str) -> S:
        """Parse the text produced by str().

        Raises:
            InvalidArgument: If text is not a plain decimal number
        """
        stripped = text.strip()
        if not _NUMBER_TEXT.fullmatch(stripped):
            raise InvalidArgument(f"Cannot parse {cls.__name__} from {text!r}")
        return cls.from_decimal(Decimal(stripped))

    # --- Conversion ---

    def to_int(self) -> int:
        """Integer part, rounded toward negative infinity."""
        return self._raw >> self.FRACTIONAL_BITS

    def to_float(self) -> float:
        """Real value as a float, for display and interop only."""
        return self._raw / self.fraction_range()

    def to_decimal(self) -> Decimal:
        """Exact real value as a Decimal."""
        with decimal.localcontext(DECIMAL_CONTEXT):
            return Decimal(self._raw) / Decimal(self.fraction_range())

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    def __trunc__(self) -> int:
        """Integer part, rounded toward zero."""
        if self._raw < 0:
            return -((-self._raw) >> self.FRACTIONAL_BITS)
        return self._raw >> self.FRACTIONAL_BITS

    def __floor__(self) -> int:
        return self.to_int()

    def __ceil__(self) -> int:
        return -((-self._raw) >> self.FRACTIONAL_BITS)

    def __bool__(self) -> bool:
        return self._raw != 0

    # --- Arithmetic ---

    def __pos__(self: S) -> S:
        return self

    def __neg__(self: S) -> S:
        return type(self)(-self._raw)

    def __abs__(self: S) -> S:
        return type(self)(-self._raw) if self._raw < 0 else self

    def __add__(self: S, other: object) -> S:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._raw + other._raw)  # type: ignore[attr-defined]

    def __sub__(self: S, other: object) -> S:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._raw - other._raw)  # type: ignore[attr-defined]

    def __mul__(self: S, other: object) -> S:
        """Multiply in double width, rounding half up on the final shift."""
        if type(other) is not type(self):
            return NotImplemented
        product = self._raw * other._raw + (self.fraction_range() >> 1)  # type: ignore[attr-defined]
        return type(self)(product >> self.FRACTIONAL_BITS)

    def __truediv__(self: S, other: object) -> S:
        """Divide with round half up on the quotient.

        The numerator is widened by F+1 bits, divided with truncation, then
        the extra bit is rounded away.

        Raises:
            DivideByZero: If other's raw value is zero
        """
        if type(other) is not type(self):
            return NotImplemented
        divisor = other._raw  # type: ignore[attr-defined]
        if divisor == 0:
            raise DivideByZero(f"Division by zero: {self} / 0")
        quotient = div_trunc(self._raw << (self.FRACTIONAL_BITS + 1), divisor)
        return type(self)((quotient + 1) >> 1)

    def __mod__(self: S, other: object) -> S:
        """Remainder of the raw integers.

        Defined on raw units, not on real values: no rescaling is applied.

        Raises:
            DivideByZero: If other's raw value is zero
        """
        if type(other) is not type(self):
            return NotImplemented
        divisor = other._raw  # type: ignore[attr-defined]
        if divisor == 0:
            raise DivideByZero(f"Modulo by zero: {self} % 0")
        return type(self)(rem_trunc(self._raw, divisor))

    def __lshift__(self: S, count: int) -> S:
        if not isinstance(count, int):
            return NotImplemented
        if count < 0:
            raise InvalidArgument(f"Negative shift count: {count}")
        return type(self)(self._raw << count)

    def __rshift__(self: S, count: int) -> S:
        if not isinstance(count, int):
            return NotImplemented
        if count < 0:
            raise InvalidArgument(f"Negative shift count: {count}")
        return type(self)(self._raw >> count)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw == other._raw  # type: ignore[attr-defined]

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw < other._raw  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw <= other._raw  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw > other._raw  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw >= other._raw  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((self.TOTAL_BITS, self._raw))

    # --- Text ---

    def __repr__(self) -> str:
        return f"{type(self).__name__}(raw={self._raw})"

    def __str__(self) -> str:
        return format_scaled(self._raw, self.FRACTIONAL_BITS, self.TEXT_DIGITS)


class FixedValue(ScaledInteger):
    """32-bit fixed-point number with FRACTIONAL_BITS fractional bits.

    Example: with 16 fractional bits, 1.5 is stored as 98304.
    """

    TOTAL_BITS: ClassVar[int] = TOTAL_BITS
    FRACTIONAL_BITS: ClassVar[int] = FRACTIONAL_BITS
    TEXT_DIGITS: ClassVar[int] = FIXED_TEXT_DIGITS
    INTEGER_BITS: ClassVar[int] = INTEGER_BITS
    FRACTION_MASK: ClassVar[int] = FRACTION_MASK
    INTEGER_MASK: ClassVar[int] = INTEGER_MASK
    FRACTION_RANGE: ClassVar[int] = FRACTION_RANGE
    MIN_INTEGER: ClassVar[int] = MIN_INTEGER
    MAX_INTEGER: ClassVar[int] = MAX_INTEGER

    ZERO: ClassVar[FixedValue]
    ONE: ClassVar[FixedValue]
    MIN_VALUE: ClassVar[FixedValue]
    MAX_VALUE: ClassVar[FixedValue]
    EPSILON: ClassVar[FixedValue]

    __slots__ = ()

    @classmethod
    def mix(cls, integer: int, numerator: int, denominator: int) -> FixedValue:
        """Create integer + numerator/denominator.

        The fraction takes the sign of the integer part, so mix(-2, 1, 4) is
        -2.25. Only the fractional part of numerator/denominator is kept.

        Args:
            integer: Integer part
            numerator: Non-negative fraction numerator
            denominator: Positive fraction denominator

        Raises:
            InvalidArgument: If numerator or denominator is negative
            DivideByZero: If denominator is zero
        """
        if numerator < 0 or denominator < 0:
            raise InvalidArgument(f"Ratio must be non-negative, got {numerator}/{denominator}")
        if denominator == 0:
            raise DivideByZero(f"Zero denominator in mix({integer}, {numerator}, 0)")
        fraction = (cls.fraction_range() * numerator // denominator) & cls.fraction_mask()
        if integer < 0:
            fraction = -fraction
        return cls((integer << cls.FRACTIONAL_BITS) + fraction)

    @classmethod
    def ratio(cls, numerator: int, denominator: int) -> FixedValue:
        """Create numerator/denominator, rounded half up.

        Raises:
            InvalidArgument: If numerator or denominator is negative
            DivideByZero: If denominator is zero
        """
        if numerator < 0 or denominator < 0:
            raise InvalidArgument(f"Ratio must be non-negative, got {numerator}/{denominator}")
        if denominator == 0:
            raise DivideByZero(f"Zero denominator in ratio({numerator}, 0)")
        quotient = div_trunc(numerator << (cls.FRACTIONAL_BITS + 1), denominator)
        return cls((quotient + 1) >> 1)


FixedValue.ZERO = FixedValue(0)
FixedValue.ONE = FixedValue(1 << FRACTIONAL_BITS)
FixedValue.MIN_VALUE = FixedValue(-(1 << (TOTAL_BITS - 1)))
FixedValue.MAX_VALUE = FixedValue((1 << (TOTAL_BITS - 1)) - 1)
FixedValue.EPSILON = FixedValue(1)
