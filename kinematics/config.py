"""Global configuration and type definitions for the kinematics package.

This module provides centralized configuration and the fundamental numeric
type definitions shared by every quantity type and solver function. It fixes
which raw values can be turned into quantities, how text conversions behave
when they cannot be parsed, and the precision used when extracting the
fractional part of a quantity.

Type Definitions:
    BASE_TYPE: Union type of raw numeric values accepted when constructing
               a quantity. Supports Python native numbers, ``Decimal`` and
               NumPy scalar types so values coming out of vectorized NumPy
               code can be wrapped without an explicit ``float()`` call.

Settings:
    CONVERSION_POLICY: What ``parse``/``from_char`` do with unparsable input.
    FRAC_SIGNIFICANT_DIGITS: Decimal precision of ``Quantity.frac``.

The settings are read at call time, so assigning a new value to the module
attribute changes the behaviour of every later conversion:

Example:
    >>> from kinematics import config
    >>> from kinematics.unit import Distance
    >>> Distance.parse("ten")
    Distance(0.0)
    >>> config.CONVERSION_POLICY = config.ConversionPolicy.FAIL
    >>> Distance.parse("ten")
    Traceback (most recent call last):
        ...
    ValueError: could not convert 'ten' to Distance
"""

from decimal import Decimal
from enum import Enum

from numpy import number

BASE_TYPE = int | float | Decimal | number


class ConversionPolicy(Enum):
    """Fallback behaviour for text and character conversions.

    Attributes:
        DEFAULT_TO_ZERO: Unparsable input silently becomes the zero quantity.
        FAIL: Unparsable input raises ``ValueError``.
    """

    DEFAULT_TO_ZERO = "zero"
    FAIL = "fail"


CONVERSION_POLICY: ConversionPolicy = ConversionPolicy.DEFAULT_TO_ZERO

# Matches the precision of a double converted to a 128-bit decimal.
FRAC_SIGNIFICANT_DIGITS: int = 15
