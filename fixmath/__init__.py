"""Deterministic fixed-point arithmetic and transcendental functions.

All results are computed with integer operations only, so they are
bit-identical on every platform.
"""

from fixmath.config import DEFAULT_MATH_CONFIG, MathConfig, load_config
from fixmath.errors import ConfigurationError, DivideByZero, FixMathError, InvalidArgument
from fixmath.fixed import FixedValue
from fixmath.fixmath import (
    FixMath,
    abs_,
    acos,
    asin,
    atan,
    atan2,
    ceiling,
    cos,
    exp,
    floor,
    get_default_math,
    initialize,
    log,
    log2,
    log10,
    max_,
    min_,
    pow_,
    round_,
    sign,
    sin,
    sqrt,
    tan,
    truncate,
)
from fixmath.wide import WideConstant

__version__ = "0.1.0"
__all__ = [
    # Types
    "FixedValue",
    "WideConstant",
    "FixMath",
    "MathConfig",
    # Errors
    "FixMathError",
    "InvalidArgument",
    "DivideByZero",
    "ConfigurationError",
    # Setup
    "DEFAULT_MATH_CONFIG",
    "load_config",
    "initialize",
    "get_default_math",
    # Functions
    "abs_",
    "sign",
    "floor",
    "ceiling",
    "truncate",
    "round_",
    "min_",
    "max_",
    "sqrt",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "atan2",
    "exp",
    "pow_",
    "log",
    "log2",
    "log10",
    "__version__",
]
