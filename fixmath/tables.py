"""Precomputed constants and lookup tables.

Tables are authored as WideConstant values (32 fractional bits) from
high-precision Decimal arithmetic, then quantized into FixedValue once. The
Decimal work never depends on the host's floating point, so every platform
builds bit-identical tables.

Tables:
- quarter sine: sin(i / 2^R degrees) for i in [0, 90 * 2^R]
- CORDIC angles: atan(2^-i) in degrees for i in [0, F + 2)
- inverse factorials: 1/i! at 32 fractional bits, until an entry rounds to 0
"""

from __future__ import annotations

import decimal
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache

import structlog

from fixmath.config import DEFAULT_MATH_CONFIG, MathConfig
from fixmath.constants import WIDE_FRACTIONAL_BITS
from fixmath.errors import ConfigurationError
from fixmath.fixed import FixedValue
from fixmath.wide import WideConstant

logger = structlog.get_logger()

__all__ = [
    "MathTables",
    "WideTables",
    "author_tables",
    "build_tables",
    "quantize_tables",
    "validate_tables",
]

# 60 significant digits: far beyond the 2^-32 resolution of WideConstant
AUTHORING_CONTEXT = decimal.Context(prec=60)


# =============================================================================
# Decimal authoring helpers
# =============================================================================


def _pi() -> Decimal:
    """Compute pi to the current context precision."""
    decimal.getcontext().prec += 2
    three = Decimal(3)
    lasts, t, s, n, na, d, da = Decimal(0), three, three, 1, 0, 0, 24
    while s != lasts:
        lasts = s
        n, na = n + na, na + 8
        d, da = d + da, da + 32
        t = (t * n) / d
        s += t
    decimal.getcontext().prec -= 2
    return +s


def _sin(x: Decimal) -> Decimal:
    """Sine of x radians by Taylor series."""
    decimal.getcontext().prec += 2
    i, lasts, s, fact, num, sign = 1, Decimal(0), x, 1, x, 1
    while s != lasts:
        lasts = s
        i += 2
        fact *= i * (i - 1)
        num *= x * x
        sign *= -1
        s += num / fact * sign
    decimal.getcontext().prec -= 2
    return +s


def _atan(x: Decimal) -> Decimal:
    """Arctangent of 0 <= x <= 1 in radians.

    Halves the angle twice with atan(x) = 2 * atan(x / (1 + sqrt(1 + x^2)))
    so the Taylor series converges quickly, then doubles back.
    """
    decimal.getcontext().prec += 4
    halvings = 2
    for _ in range(halvings):
        x = x / (1 + (1 + x * x).sqrt())

    x_squared = x * x
    lasts, s, num, k, sign = Decimal(0), x, x, 1, 1
    while s != lasts:
        lasts = s
        k += 2
        num *= x_squared
        sign = -sign
        s += sign * num / k
    s *= 1 << halvings
    decimal.getcontext().prec -= 4
    return +s


def _inverse_factorials() -> tuple[WideConstant, ...]:
    """1/i! at 32 fractional bits, rounded half up, up to the last non-zero entry."""
    one = 1 << WIDE_FRACTIONAL_BITS
    entries = []
    factorial = 1
    i = 0
    while True:
        if i > 0:
            factorial *= i
        raw = (one + factorial // 2) // factorial
        if raw == 0:
            break
        entries.append(WideConstant(raw))
        i += 1
    return tuple(entries)


# =============================================================================
# Table sets
# =============================================================================


@dataclass(frozen=True)
class WideTables:
    """Constants and tables at WideConstant precision, before quantization."""

    pi: WideConstant
    e: WideConstant
    log2_e: WideConstant
    log2_10: WideConstant
    ln2: WideConstant
    log10_2: WideConstant
    quarter_sine: tuple[WideConstant, ...]
    cordic_angles: tuple[WideConstant, ...]
    inverse_factorials: tuple[WideConstant, ...]


@dataclass(frozen=True)
class MathTables:
    """Constants and lookup tables quantized for one runtime format.

    Immutable once built. The wide ln 2 and the inverse factorials stay at
    32 fractional bits since the exponential series runs at that precision.
    """

    config: MathConfig
    pi: FixedValue
    e: FixedValue
    log2_e: FixedValue
    log2_10: FixedValue
    ln2: FixedValue
    log10_2: FixedValue
    ln2_wide: WideConstant
    quarter_sine: tuple[FixedValue, ...]
    cordic_angles: tuple[FixedValue, ...]
    inverse_factorials: tuple[WideConstant, ...]


@lru_cache(maxsize=8)
def _author(resolution_power: int, cordic_length: int) -> WideTables:
    with decimal.localcontext(AUTHORING_CONTEXT):
        pi = _pi()
        ln2 = Decimal(2).ln()
        ln10 = Decimal(10).ln()
        degrees_per_radian = Decimal(180) / pi

        steps_per_degree = 1 << resolution_power
        quarter_sine = tuple(
            WideConstant.from_decimal(_sin(Decimal(i) / steps_per_degree / degrees_per_radian))
            for i in range(90 * steps_per_degree + 1)
        )
        cordic_angles = tuple(
            WideConstant.from_decimal(_atan(Decimal(1) / (1 << i)) * degrees_per_radian)
            for i in range(cordic_length)
        )

        return WideTables(
            pi=WideConstant.from_decimal(pi),
            e=WideConstant.from_decimal(Decimal(1).exp()),
            log2_e=WideConstant.from_decimal(1 / ln2),
            log2_10=WideConstant.from_decimal(ln10 / ln2),
            ln2=WideConstant.from_decimal(ln2),
            log10_2=WideConstant.from_decimal(ln2 / ln10),
            quarter_sine=quarter_sine,
            cordic_angles=cordic_angles,
            inverse_factorials=_inverse_factorials(),
        )


def author_tables(config: MathConfig = DEFAULT_MATH_CONFIG) -> WideTables:
    """Author all constants and tables at WideConstant precision.

    Args:
        config: Layout deciding the sine resolution and CORDIC length

    Returns:
        WideTables for the layout (cached per layout)
    """
    return _author(config.sine_resolution_power, config.cordic_length)


def quantize_tables(wide: WideTables, config: MathConfig = DEFAULT_MATH_CONFIG) -> MathTables:
    """Quantize wide tables into the runtime format of `config`."""
    f = config.fractional_bits
    return MathTables(
        config=config,
        pi=wide.pi.to_fixed(f),
        e=wide.e.to_fixed(f),
        log2_e=wide.log2_e.to_fixed(f),
        log2_10=wide.log2_10.to_fixed(f),
        ln2=wide.ln2.to_fixed(f),
        log10_2=wide.log10_2.to_fixed(f),
        ln2_wide=wide.ln2,
        quarter_sine=tuple(c.to_fixed(f) for c in wide.quarter_sine),
        cordic_angles=tuple(c.to_fixed(f) for c in wide.cordic_angles),
        inverse_factorials=wide.inverse_factorials,
    )


def validate_tables(tables: MathTables) -> MathTables:
    """Check table lengths against the layout they were built for.

    Raises:
        ConfigurationError: If any table does not match its required length
    """
    config = tables.config
    if len(tables.quarter_sine) != config.quarter_sine_length:
        raise ConfigurationError(
            f"Quarter-sine table length must be 90 * 2^{config.sine_resolution_power} + 1 = "
            f"{config.quarter_sine_length}, got {len(tables.quarter_sine)}"
        )
    if len(tables.cordic_angles) != config.cordic_length:
        raise ConfigurationError(
            f"CORDIC angle table length must be F + 2 = {config.cordic_length}, "
            f"got {len(tables.cordic_angles)}"
        )
    if len(tables.inverse_factorials) < 2:
        raise ConfigurationError(
            f"Inverse factorial table needs at least 2 entries, got {len(tables.inverse_factorials)}"
        )
    return tables


def build_tables(config: MathConfig = DEFAULT_MATH_CONFIG) -> MathTables:
    """Author, quantize and validate the tables for `config`.

    Raises:
        ConfigurationError: If the resulting tables do not fit the layout
    """
    tables = validate_tables(quantize_tables(author_tables(config), config))
    logger.debug(
        "math_tables_built",
        fractional_bits=config.fractional_bits,
        sine_resolution_power=config.sine_resolution_power,
        quarter_sine=len(tables.quarter_sine),
        cordic_angles=len(tables.cordic_angles),
        inverse_factorials=len(tables.inverse_factorials),
    )
    return tables
