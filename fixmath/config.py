"""Format and table configuration.

The split between integer and fractional bits is fixed in fixmath.constants.
MathConfig describes the layout an engine is built for; it is validated once
and a mismatch with the runtime format is fatal.
"""

from __future__ import annotations

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from fixmath.constants import FRACTIONAL_BITS, SINE_RESOLUTION_POWER, TOTAL_BITS
from fixmath.errors import ConfigurationError

logger = structlog.get_logger()

MIN_FRACTIONAL_BITS = 8
MIN_INTEGER_BITS = 10


def _format_problem(fractional_bits: int, total_bits: int) -> str | None:
    """Return a description of what is wrong with a bit layout, or None."""
    if fractional_bits < MIN_FRACTIONAL_BITS:
        return f"need at least {MIN_FRACTIONAL_BITS} fractional bits, got {fractional_bits}"
    if total_bits - fractional_bits < MIN_INTEGER_BITS:
        return (
            f"need at least {MIN_INTEGER_BITS} integer bits, "
            f"got {total_bits - fractional_bits}"
        )
    if fractional_bits % 2 == 1:
        return f"fractional bits must be even, got {fractional_bits}"
    return None


def validate_format(fractional_bits: int, total_bits: int = TOTAL_BITS) -> int:
    """Validate a fixed-point bit layout.

    Args:
        fractional_bits: Number of low bits holding the fraction
        total_bits: Width of the raw integer

    Returns:
        The validated number of fractional bits

    Raises:
        ConfigurationError: If the layout is unusable
    """
    problem = _format_problem(fractional_bits, total_bits)
    if problem is not None:
        raise ConfigurationError(f"Invalid fixed-point format: {problem}")
    return fractional_bits


class MathConfig(BaseModel):
    """Layout an engine and its lookup tables are built for.

    Attributes:
        fractional_bits: Fractional bits of the runtime type (must match
            fixmath.constants.FRACTIONAL_BITS)
        total_bits: Width of the runtime raw integer
        sine_resolution_power: Quarter-sine table holds 2^R samples per degree
    """

    model_config = ConfigDict(frozen=True)

    fractional_bits: int = FRACTIONAL_BITS
    total_bits: int = TOTAL_BITS
    sine_resolution_power: int = SINE_RESOLUTION_POWER

    @model_validator(mode="after")
    def _check_layout(self) -> MathConfig:
        problem = _format_problem(self.fractional_bits, self.total_bits)
        if problem is not None:
            raise ValueError(problem)
        if self.fractional_bits != FRACTIONAL_BITS or self.total_bits != TOTAL_BITS:
            raise ValueError(
                f"layout {self.total_bits - self.fractional_bits}.{self.fractional_bits} "
                f"does not match the runtime format "
                f"{TOTAL_BITS - FRACTIONAL_BITS}.{FRACTIONAL_BITS}"
            )
        if not 0 <= self.sine_resolution_power < self.fractional_bits:
            raise ValueError(
                "sine resolution power must be in [0, fractional_bits), "
                f"got {self.sine_resolution_power}"
            )
        return self

    @property
    def integer_bits(self) -> int:
        return self.total_bits - self.fractional_bits

    @property
    def quarter_sine_length(self) -> int:
        """Required quarter-sine table length: 90 * 2^R + 1."""
        return 90 * (1 << self.sine_resolution_power) + 1

    @property
    def cordic_length(self) -> int:
        """Required CORDIC angle table length: F + 2."""
        return self.fractional_bits + 2


def load_config(**overrides: int) -> MathConfig:
    """Build a validated MathConfig.

    Args:
        **overrides: Field values replacing the defaults

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If the resulting layout is invalid
    """
    try:
        return MathConfig(**overrides)
    except ValidationError as err:
        reason = "; ".join(str(e["msg"]) for e in err.errors())
        logger.warning("config_rejected", reason=reason, **overrides)
        raise ConfigurationError(f"Invalid math configuration: {reason}") from err


# The compiled-in format is checked here, at import time
validate_format(FRACTIONAL_BITS, TOTAL_BITS)

# Default configuration instance
DEFAULT_MATH_CONFIG = load_config()
