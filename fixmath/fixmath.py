"""Fixed-point math functions bound to one set of lookup tables.

FixMath owns an immutable MathTables instance and exposes every function of
the engine as a method. Build one explicitly with initialize(), or share the
process-wide instance returned by get_default_math().

Usage:
    from fixmath import FixedValue, initialize

    math = initialize()
    half = FixedValue.ratio(1, 2)
    angle = math.asin(half)  # ~30 degrees
"""

from __future__ import annotations

import threading

import structlog

from fixmath.config import DEFAULT_MATH_CONFIG, MathConfig
from fixmath.engine import basic, cordic, logexp, trig
from fixmath.engine import sqrt as sqrt_engine
from fixmath.fixed import FixedValue
from fixmath.tables import MathTables, build_tables, validate_tables

logger = structlog.get_logger()

__all__ = [
    "FixMath",
    "get_default_math",
    "initialize",
]


class FixMath:
    """Deterministic math functions over FixedValue.

    All angles are in degrees. Every method is pure; the tables are read-only
    after construction.

    Attributes:
        tables: Constants and lookup tables used by the engines
    """

    __slots__ = ("tables",)

    def __init__(self, tables: MathTables) -> None:
        """Bind to validated tables.

        Raises:
            ConfigurationError: If the table lengths do not match their layout
        """
        self.tables = validate_tables(tables)

    @property
    def config(self) -> MathConfig:
        return self.tables.config

    @property
    def PI(self) -> FixedValue:  # noqa: N802
        return self.tables.pi

    @property
    def E(self) -> FixedValue:  # noqa: N802
        return self.tables.e

    # --- Rounding and ordering ---

    def abs(self, value: FixedValue) -> FixedValue:
        return basic.absolute(value)

    def sign(self, value: FixedValue) -> FixedValue:
        return basic.sign(value)

    def floor(self, value: FixedValue) -> FixedValue:
        return basic.floor(value)

    def ceiling(self, value: FixedValue) -> FixedValue:
        return basic.ceiling(value)

    def truncate(self, value: FixedValue) -> FixedValue:
        return basic.truncate(value)

    def round(self, value: FixedValue) -> FixedValue:
        return basic.round_half_up(value)

    def min(self, v1: FixedValue, v2: FixedValue) -> FixedValue:
        return basic.minimum(v1, v2)

    def max(self, v1: FixedValue, v2: FixedValue) -> FixedValue:
        return basic.maximum(v1, v2)

    def mix(self, integer: int, numerator: int, denominator: int) -> FixedValue:
        return FixedValue.mix(integer, numerator, denominator)

    def ratio(self, numerator: int, denominator: int) -> FixedValue:
        return FixedValue.ratio(numerator, denominator)

    # --- Roots and trigonometry ---

    def sqrt(self, value: FixedValue) -> FixedValue:
        return sqrt_engine.sqrt(value)

    def sin(self, degrees: FixedValue) -> FixedValue:
        return trig.sin(self.tables, degrees)

    def cos(self, degrees: FixedValue) -> FixedValue:
        return trig.cos(self.tables, degrees)

    def tan(self, degrees: FixedValue) -> FixedValue:
        return trig.tan(self.tables, degrees)

    def asin(self, value: FixedValue) -> FixedValue:
        return cordic.asin(self.tables, value)

    def acos(self, value: FixedValue) -> FixedValue:
        return cordic.acos(self.tables, value)

    def atan(self, value: FixedValue) -> FixedValue:
        return cordic.atan(self.tables, value)

    def atan2(self, y: FixedValue, x: FixedValue) -> FixedValue:
        return cordic.atan2(self.tables, y, x)

    # --- Logarithms and powers ---

    def exp(self, value: FixedValue) -> FixedValue:
        return logexp.exp(self.tables, value)

    def pow(self, base: FixedValue, exponent: FixedValue) -> FixedValue:
        return logexp.pow_(self.tables, base, exponent)

    def log(self, value: FixedValue, base: FixedValue | None = None) -> FixedValue:
        """Natural logarithm, or the logarithm in `base` when given."""
        if base is None:
            return logexp.log(self.tables, value)
        return logexp.log_base(self.tables, value, base)

    def log2(self, value: FixedValue) -> FixedValue:
        return logexp.log2(self.tables, value)

    def log10(self, value: FixedValue) -> FixedValue:
        return logexp.log10(self.tables, value)


def initialize(config: MathConfig | None = None) -> FixMath:
    """Build the tables for `config` and return a ready FixMath.

    Args:
        config: Layout to build for (defaults to DEFAULT_MATH_CONFIG)

    Returns:
        FixMath bound to freshly built, validated tables

    Raises:
        ConfigurationError: If the tables do not fit the layout
    """
    config = config or DEFAULT_MATH_CONFIG
    math = FixMath(build_tables(config))
    logger.info(
        "math_initialized",
        format=f"{config.integer_bits}.{config.fractional_bits}",
        sine_resolution_power=config.sine_resolution_power,
    )
    return math


_default_math: FixMath | None = None
_default_lock = threading.Lock()


def get_default_math() -> FixMath:
    """Return the process-wide FixMath, building it on first use.

    Initialization happens once under a lock, so no caller can observe
    partially built tables.
    """
    global _default_math
    if _default_math is None:
        with _default_lock:
            if _default_math is None:
                _default_math = initialize()
    return _default_math


# =============================================================================
# Module-level functions over the default instance
# =============================================================================


def abs_(value: FixedValue) -> FixedValue:
    return get_default_math().abs(value)


def sign(value: FixedValue) -> FixedValue:
    return get_default_math().sign(value)


def floor(value: FixedValue) -> FixedValue:
    return get_default_math().floor(value)


def ceiling(value: FixedValue) -> FixedValue:
    return get_default_math().ceiling(value)


def truncate(value: FixedValue) -> FixedValue:
    return get_default_math().truncate(value)


def round_(value: FixedValue) -> FixedValue:
    return get_default_math().round(value)


def min_(v1: FixedValue, v2: FixedValue) -> FixedValue:
    return get_default_math().min(v1, v2)


def max_(v1: FixedValue, v2: FixedValue) -> FixedValue:
    return get_default_math().max(v1, v2)


def sqrt(value: FixedValue) -> FixedValue:
    return get_default_math().sqrt(value)


def sin(degrees: FixedValue) -> FixedValue:
    return get_default_math().sin(degrees)


def cos(degrees: FixedValue) -> FixedValue:
    return get_default_math().cos(degrees)


def tan(degrees: FixedValue) -> FixedValue:
    return get_default_math().tan(degrees)


def asin(value: FixedValue) -> FixedValue:
    return get_default_math().asin(value)


def acos(value: FixedValue) -> FixedValue:
    return get_default_math().acos(value)


def atan(value: FixedValue) -> FixedValue:
    return get_default_math().atan(value)


def atan2(y: FixedValue, x: FixedValue) -> FixedValue:
    return get_default_math().atan2(y, x)


def exp(value: FixedValue) -> FixedValue:
    return get_default_math().exp(value)


def pow_(base: FixedValue, exponent: FixedValue) -> FixedValue:
    return get_default_math().pow(base, exponent)


def log(value: FixedValue, base: FixedValue | None = None) -> FixedValue:
    return get_default_math().log(value, base)


def log2(value: FixedValue) -> FixedValue:
    return get_default_math().log2(value)


def log10(value: FixedValue) -> FixedValue:
    return get_default_math().log10(value)
