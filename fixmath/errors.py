"""Error classes for fixed-point arithmetic.

Domain violations, zero divisors and invalid format parameters each get their
own class. Overflow is not an error: raw arithmetic wraps silently.
"""


class FixMathError(Exception):
    """Base error for fixmath operations."""

    pass


class InvalidArgument(FixMathError, ValueError):
    """Argument outside the domain of the operation (e.g. sqrt of a negative)."""

    pass


class DivideByZero(FixMathError, ZeroDivisionError):
    """Division, modulo or reciprocal with a zero raw divisor."""

    pass


class ConfigurationError(FixMathError):
    """Invalid format parameters or lookup table layout.

    Raised during import or initialize(), before any arithmetic is served.
    """

    pass
