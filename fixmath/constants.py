"""Format parameters for the fixed-point runtime and constant types.

Centralizes the bit layout of FixedValue and WideConstant. The layout is
validated once when fixmath.config is imported, so a bad edit here fails
before any arithmetic can run.
"""

# Runtime type: 32-bit two's-complement raw with F fractional bits
TOTAL_BITS = 32
FRACTIONAL_BITS = 16
INTEGER_BITS = TOTAL_BITS - FRACTIONAL_BITS

FRACTION_MASK = (1 << FRACTIONAL_BITS) - 1
INTEGER_MASK = ~FRACTION_MASK
FRACTION_RANGE = FRACTION_MASK + 1

RAW_MIN = -(1 << (TOTAL_BITS - 1))
RAW_MAX = (1 << (TOTAL_BITS - 1)) - 1
MIN_INTEGER = RAW_MIN >> FRACTIONAL_BITS
MAX_INTEGER = RAW_MAX >> FRACTIONAL_BITS

# Wide constant type: 64-bit raw with 32 fractional bits
WIDE_TOTAL_BITS = 64
WIDE_FRACTIONAL_BITS = 32
WIDE_FRACTION_MASK = (1 << WIDE_FRACTIONAL_BITS) - 1
WIDE_FRACTION_RANGE = WIDE_FRACTION_MASK + 1
WIDE_RAW_MIN = -(1 << (WIDE_TOTAL_BITS - 1))
WIDE_RAW_MAX = (1 << (WIDE_TOTAL_BITS - 1)) - 1

# Quarter-sine table holds 2^R samples per degree
SINE_RESOLUTION_POWER = 2

# Decimal digits rendered after the point by str()
FIXED_TEXT_DIGITS = 6
WIDE_TEXT_DIGITS = 9
