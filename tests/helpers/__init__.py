"""Test helpers module for shared test utilities.

- constants: Reference raw values for the default 16.16 layout
- factories: Shorthand constructors and tolerance assertions
"""

from tests.helpers.constants import (
    CORDIC_45_WIDE,
    INVERSE_FACTORIALS_WIDE,
    QUARTER_SINE_WIDE,
    WIDE_REFERENCE,
)
from tests.helpers.factories import assert_close, fx, fx_raws

__all__ = [
    # Constants
    "WIDE_REFERENCE",
    "CORDIC_45_WIDE",
    "INVERSE_FACTORIALS_WIDE",
    "QUARTER_SINE_WIDE",
    # Factories
    "fx",
    "fx_raws",
    "assert_close",
]
