"""Decorator turning a closed-form equation of motion into a solver classmethod.

Each SUVAT rearrangement is written as a plain expression over float64
operands. The decorator takes care of everything around it:

- Arguments are checked against the dimension named in the parameter's
  annotation (``start_speed: Speed`` only accepts a Speed or a plain number).
- The expression is evaluated under ``numpy.errstate(all="ignore")``, so a
  zero divisor or a negative radicand produces ±inf/NaN without raising or
  warning.
- The result is wrapped in the class the method was called on.

Example:
    >>> class Distance(Quantity):
    ...     IS_FAMILY_ROOT = True
    ...
    ...     @kinematic_formula
    ...     def from_vt(cls, speed: Speed, time: Time) -> Distance:
    ...         return speed * time
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
import inspect
from typing import Any

import numpy as np

from kinematics.config import BASE_TYPE

from .unit_base import Unit


def _as_operand(value: Any, family: str, name: str) -> np.float64:
    if isinstance(value, Unit):
        if value.family_name() != family:
            msg = f"{name} must be a {family}, got {type(value).__name__}"
            raise TypeError(msg)
    elif not isinstance(value, BASE_TYPE):
        msg = f"{name} must be a {family} or a number, got {type(value).__name__}"
        raise TypeError(msg)
    return np.float64(value)


def kinematic_formula(func: Callable[..., Any]) -> classmethod:
    """Wrap ``func(cls, *operands)`` as a dimension-checked solver classmethod.

    Parameter annotations must name the family of each argument
    (``Distance``, ``Speed``, ``Acceleration`` or ``Time``).

    Args:
        func: Formula taking ``cls`` followed by float64 operands.

    Returns:
        classmethod: Solver returning an instance of the calling class.
    """
    signature = inspect.signature(func)
    names = list(signature.parameters)[1:]
    families = {name: func.__annotations__[name] for name in names}

    @wraps(func)
    def solver(cls, *args, **kwargs):
        bound = signature.bind(cls, *args, **kwargs)
        operands = {
            name: _as_operand(bound.arguments[name], families[name], name) for name in names
        }
        with np.errstate(all="ignore"):
            result = func(cls, **operands)
        return cls.from_si(float(result))

    return classmethod(solver)
