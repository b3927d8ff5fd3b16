"""Float-based quantity type shared by every kinematic dimension.

This module provides the Quantity class, the single implementation of the
numeric contract used by Distance, Speed, Acceleration and Time. It combines
Python's float type with the unit family system so that each dimension is a
distinct type while all of them share the same comparison, arithmetic,
rounding and interpolation behaviour.

Key Features:
- IEEE-754 semantics throughout: division by zero, square roots of negative
  numbers and trigonometry of infinities produce ±inf/NaN, never exceptions
- Type-safe operations between values of the same family only
- Explicit conversions from numbers, text and digit characters, with a
  configurable fallback for unparsable input
- Per-family constants ZERO, ONE, PI and TWO_PI

Operations that plain Python floats would raise on (``/``, ``%``, ``**``,
``math.sqrt`` and friends) are evaluated with NumPy under
``numpy.errstate(all="ignore")`` so degenerate input propagates silently as
special values.

Classes:
    Quantity: Base class for all float-based kinematic quantities.

Example:
    >>> class Distance(Quantity):
    ...     IS_FAMILY_ROOT = True
    ...     SYMBOL = "m"
    ...
    >>> Distance(3) + Distance(4)
    Distance(7.0)
    >>> Distance(1) / 0
    Distance(inf)
    >>> Distance(-4).sqrt()
    Distance(nan)
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
import logging
from math import isfinite, isnan, nan, pi
import operator
from typing import Any, ClassVar, Self

import numpy as np

from kinematics import config
from kinematics.config import BASE_TYPE, ConversionPolicy

from .unit_base import Unit

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"


def ieee(func: Callable[..., Any], *operands: Any) -> float:
    """Evaluate a NumPy function on float64 operands without raising.

    Args:
        func: NumPy ufunc (or any callable) to apply.
        *operands: Values convertible to float64.

    Returns:
        float: The result, possibly ±inf or NaN.
    """
    with np.errstate(all="ignore"):
        return float(func(*(np.float64(x) for x in operands)))


class Quantity(float, Unit):
    """Base class for type-safe kinematic quantities.

    A quantity is an immutable float tagged with a family (dimension).
    Ordering and equality are plain IEEE-754 double comparisons: there is no
    tolerance, and a NaN quantity compares unequal to everything.

    Operand rules:
        - ``+`` and ``-`` need a quantity of the same family.
        - ``*``, ``/``, ``%`` and ``**`` accept a quantity of the same family
          or a plain number used as a scale factor.
        - Named methods (``clamp``, ``step``, ``lerp``...) accept a plain
          number wherever a quantity of the same family is expected.
        - A quantity of a different family raises ``TypeError``, except
          for ``==``/``!=``, which report the values as unequal.

    Attributes:
        ROOT (ClassVar[type[Quantity]]): Root class defining the family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
        ZERO, ONE, PI, TWO_PI (ClassVar[Quantity]): Per-family constants.
    """

    __slots__ = ()

    IS_FAMILY_ROOT: ClassVar[bool] = False

    ZERO: ClassVar[Quantity]
    ONE: ClassVar[Quantity]
    PI: ClassVar[Quantity]
    TWO_PI: ClassVar[Quantity]

    def __init_subclass__(cls, **kwargs):
        """Attach the per-family constants to every quantity subclass.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)
        cls.ZERO = cls.from_si(0.0)
        cls.ONE = cls.from_si(1.0)
        cls.PI = cls.from_si(pi)
        cls.TWO_PI = cls.from_si(2.0 * pi)

    def __new__(cls, value: BASE_TYPE | Quantity = 0.0):
        """Create a new quantity from a number or a quantity of the same family.

        Args:
            value: Raw numeric value, or a quantity of this family.

        Returns:
            Quantity: New instance holding ``float(value)``.

        Raises:
            TypeError: If ``value`` is text or a quantity of another family.
        """
        if isinstance(value, Unit):
            cls._check_same_root(type(value))
        elif isinstance(value, (str, bytes)):
            msg = f"use {cls.__name__}.parse() to convert text"
            raise TypeError(msg)
        return float.__new__(cls, value)

    @classmethod
    def from_si(cls, si_value: float) -> Self:
        """Create instance directly from a raw double, without checks."""
        return float.__new__(cls, si_value)

    @classmethod
    def parse(cls, text: str, policy: ConversionPolicy | None = None) -> Self:
        """Create a quantity from a decimal or scientific literal.

        Surrounding whitespace is ignored; ``"nan"`` and ``"inf"`` are
        accepted. Unparsable text is handled according to ``policy``.

        Args:
            text: Text to parse.
            policy: Fallback policy; defaults to ``config.CONVERSION_POLICY``.

        Returns:
            Quantity: Parsed value, or ZERO under DEFAULT_TO_ZERO.

        Raises:
            ValueError: If the text is unparsable and the policy is FAIL.
        """
        try:
            return cls.from_si(float(text))
        except (TypeError, ValueError):
            return cls._conversion_fallback(text, policy)

    @classmethod
    def from_char(cls, char: str, policy: ConversionPolicy | None = None) -> Self:
        """Create a quantity from a single digit character (``"7"`` -> 7.0).

        Args:
            char: One character.
            policy: Fallback policy; defaults to ``config.CONVERSION_POLICY``.

        Raises:
            ValueError: If ``char`` is not a digit and the policy is FAIL.
        """
        if isinstance(char, str) and len(char) == 1 and char in _DIGITS:
            return cls.from_si(float(ord(char) - ord("0")))
        return cls._conversion_fallback(char, policy)

    @classmethod
    def _conversion_fallback(cls, raw: Any, policy: ConversionPolicy | None) -> Self:
        policy = policy or config.CONVERSION_POLICY
        if policy is ConversionPolicy.FAIL:
            msg = f"could not convert {raw!r} to {cls.__name__}"
            raise ValueError(msg)
        logger.debug("could not convert %r to %s, defaulting to zero", raw, cls.__name__)
        return cls.ZERO

    @property
    def value(self) -> float:
        """The raw double held by this quantity."""
        return float(self)

    def _operand(self, other: Any) -> float:
        """Read a same-family quantity or a plain number as a raw double."""
        if isinstance(other, Unit):
            self._check_same_root(type(other))
        elif not isinstance(other, BASE_TYPE):
            msg = f"unsupported operand for {type(self).__name__}: {type(other).__name__}"
            raise TypeError(msg)
        return float(other)

    # -------------------------------- Comparisons --------------------------------
    def _compare(self, other: Any, op: Callable[[float, float], bool]) -> bool:
        # plain numbers compare by value, other families are a TypeError
        if isinstance(other, Unit):
            self._check_same_root(type(other))
        elif not isinstance(other, BASE_TYPE):
            return NotImplemented
        return op(float(self), float(other))

    def __eq__(self, other: object) -> bool:
        # different families are never equal, so mixed sets and dict keys stay usable
        if isinstance(other, Unit) and not self.is_same_family(type(other)):
            return False
        return self._compare(other, operator.eq)

    def __ne__(self, other: object) -> bool:
        if isinstance(other, Unit) and not self.is_same_family(type(other)):
            return True
        return self._compare(other, operator.ne)

    def __lt__(self, other: Quantity) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Quantity) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Quantity) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Quantity) -> bool:
        return self._compare(other, operator.ge)

    __hash__ = float.__hash__

    def compare_to(self, other: Quantity | BASE_TYPE) -> int:
        """Return 1 if larger than ``other``, -1 if smaller, else 0.

        NaN on either side yields 0 because neither ``>`` nor ``<`` holds.
        """
        other = type(self)(other)
        if self > other:
            return 1
        if self < other:
            return -1
        return 0

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: Quantity) -> Self:
        """Add two quantities of the same family.

        Raises:
            TypeError: If ``other`` is not a quantity of the same family.
        """
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: Quantity) -> Self:
        return self.__add__(other)

    def __sub__(self, other: Quantity) -> Self:
        """Subtract a quantity of the same family.

        Raises:
            TypeError: If ``other`` is not a quantity of the same family.
        """
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: Quantity) -> Self:
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __mul__(self, k: Quantity | BASE_TYPE) -> Self:
        """Multiply by a same-family quantity or a scalar factor."""
        return type(self).from_si(float(self) * self._operand(k))

    def __rmul__(self, k: Quantity | BASE_TYPE) -> Self:
        return self.__mul__(k)

    def __truediv__(self, k: Quantity | BASE_TYPE) -> Self:
        """Divide by a same-family quantity or a scalar.

        Division by zero yields ±inf (or NaN for 0/0) instead of raising.
        """
        return type(self).from_si(ieee(np.divide, self, self._operand(k)))

    def __rtruediv__(self, k: Quantity | BASE_TYPE) -> Self:
        return type(self).from_si(ieee(np.divide, self._operand(k), self))

    def __floordiv__(self, k: Quantity | BASE_TYPE) -> Self:
        return type(self).from_si(ieee(np.floor_divide, self, self._operand(k)))

    def __mod__(self, k: Quantity | BASE_TYPE) -> Self:
        """Truncated remainder; the result has the sign of the dividend.

        A zero divisor yields NaN instead of raising.
        """
        return type(self).from_si(ieee(np.fmod, self, self._operand(k)))

    def __rmod__(self, k: Quantity | BASE_TYPE) -> Self:
        return type(self).from_si(ieee(np.fmod, self._operand(k), self))

    def __pow__(self, exponent: Quantity | BASE_TYPE) -> Self:
        return type(self).from_si(ieee(np.power, self, self._operand(exponent)))

    def __rpow__(self, base: Quantity | BASE_TYPE) -> Self:
        return type(self).from_si(ieee(np.power, self._operand(base), self))

    def __neg__(self) -> Self:
        return type(self).from_si(-float(self))

    def __pos__(self) -> Self:
        return self

    def __abs__(self) -> Self:
        return type(self).from_si(abs(float(self)))

    def add_one(self) -> Self:
        """Return this quantity plus one (increment)."""
        return type(self).from_si(float(self) + 1.0)

    def sub_one(self) -> Self:
        """Return this quantity minus one (decrement)."""
        return type(self).from_si(float(self) - 1.0)

    # -------------------------------- Numeric Functions --------------------------------
    def abs(self) -> Self:
        return self.__abs__()

    def sign(self) -> int:
        """Return -1, 0 or 1. NaN has no sign and yields 0."""
        if isnan(self):
            return 0
        return int(np.sign(float(self)))

    def truncate(self) -> Self:
        """Integral part, rounding toward zero."""
        return type(self).from_si(ieee(np.trunc, self))

    def frac(self) -> Self:
        """Fractional part, with the sign of the quantity.

        The remainder is taken in decimal arithmetic on the value rounded to
        ``config.FRAC_SIGNIFICANT_DIGITS`` significant digits, so
        ``Distance(1.1).frac()`` is exactly ``0.1`` rather than
        ``0.10000000000000009``. Values too large to carry a fractional
        digit at that precision yield zero; non-finite values yield NaN.
        """
        value = float(self)
        if not isfinite(value):
            return type(self).from_si(nan)
        digits = config.FRAC_SIGNIFICANT_DIGITS
        if abs(value) >= 10.0**digits:
            return type(self).from_si(0.0)
        rounded = Decimal(f"{value:.{digits}g}")
        return type(self).from_si(float(rounded % 1))

    def dist(self, other: Quantity | BASE_TYPE) -> Self:
        """Absolute difference between two quantities.

        Example:
            >>> Distance(2).dist(Distance(5)) == Distance(5).dist(Distance(2))
            True
        """
        other = type(self)(other)
        return self - other if self > other else other - self

    def pow(self, exponent: Quantity | BASE_TYPE) -> Self:
        return self.__pow__(exponent)

    def sqrt(self) -> Self:
        """Principal square root; NaN for negative quantities."""
        return type(self).from_si(ieee(np.sqrt, self))

    def min(self, other: Quantity | BASE_TYPE) -> Self:
        """Smaller of two quantities; NaN if either is NaN."""
        return type(self).from_si(ieee(np.minimum, self, type(self)(other)))

    def max(self, other: Quantity | BASE_TYPE) -> Self:
        """Larger of two quantities; NaN if either is NaN."""
        return type(self).from_si(ieee(np.maximum, self, type(self)(other)))

    def clamp(self, low: Quantity | BASE_TYPE, high: Quantity | BASE_TYPE) -> Self:
        """Force this quantity into ``[low, high]``.

        The lower bound is checked first. Bounds are not reordered, so with
        ``low > high`` the result depends on that order: values below
        ``low`` return ``low``, everything else returns ``high``.

        Args:
            low: Lower bound.
            high: Upper bound.

        Returns:
            Quantity: ``low``, ``high`` or this quantity unchanged.
        """
        low, high = type(self)(low), type(self)(high)
        if self < low:
            return low
        if self > high:
            return high
        return self

    def round(self) -> Self:
        """Round to the nearest integer, halves to even."""
        return type(self).from_si(ieee(np.rint, self))

    def floor(self) -> Self:
        return type(self).from_si(ieee(np.floor, self))

    def ceil(self) -> Self:
        return type(self).from_si(ieee(np.ceil, self))

    def sin(self) -> Self:
        return type(self).from_si(ieee(np.sin, self))

    def cos(self) -> Self:
        return type(self).from_si(ieee(np.cos, self))

    def tan(self) -> Self:
        return type(self).from_si(ieee(np.tan, self))

    def step(self, target: Quantity | BASE_TYPE, step_size: Quantity | BASE_TYPE) -> Self:
        """Move toward ``target`` by at most ``|step_size|`` without overshooting.

        Calling this once per frame with ``speed * dt`` as the step gives
        frame-rate independent approach-to-target motion.

        Args:
            target: Value to move toward.
            step_size: Maximum distance to move; its sign is ignored.

        Returns:
            Quantity: The stepped value, or ``target`` once it is reached.

        Example:
            >>> Distance(0).step(Distance(1), Distance(0.75))
            Distance(0.75)
            >>> Distance(0.75).step(Distance(1), Distance(0.75))
            Distance(1.0)
        """
        target = type(self)(target)
        step_size = type(self)(step_size).abs()
        if self < target:
            return (self + step_size).min(target)
        if self > target:
            return (self - step_size).max(target)
        return target

    def lerp(self, other: Quantity | BASE_TYPE, factor: BASE_TYPE) -> Self:
        """Linearly interpolate from this quantity toward ``other``.

        ``factor`` is clamped to ``[0, 1]`` first, so the result always lies
        between the two end points. The weighted form hits both end points
        exactly, even when ``other - self`` is not representable.

        Args:
            other: End point reached at ``factor == 1``.
            factor: Interpolation factor.

        Returns:
            Quantity: ``self * (1 - f) + other * f`` with ``f`` the clamped factor.

        Example:
            >>> Distance(-3.7).lerp(Distance(0.1), 1)
            Distance(0.1)
        """
        other = type(self)(other)
        factor = ieee(np.minimum, ieee(np.maximum, factor, 0.0), 1.0)
        return type(self).from_si(float(self) * (1.0 - factor) + float(other) * factor)

    # -------------------------------- Display --------------------------------
    def __str__(self) -> str:
        """Return the value followed by the family symbol (e.g. ``"9.0 m"``)."""
        return f"{float(self)} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"
