"""Time quantity and the equations of motion solved for elapsed time.

This module provides the Time family. Time spans are stored in seconds, the
SI base unit, with no minute or hour variants.

The two quadratic forms (``from_asu`` and ``from_vas``) come from solving
S = U·T + ½A·T² (respectively S = V·T − ½A·T²) for T. A quadratic has two
roots; these methods return exactly one of them, the root of the
rearrangement shown below, and never the other. A projectile that passes
the same height on the way up and on the way down therefore only reports
the first crossing from ``from_asu``.

    ============  ================================  ==============
    Given         Formula                           Method
    ============  ================================  ==============
    S, V          T = S / V                         ``from_sv``
    S, V, U       T = 2S / (V + U)                  ``from_svu``
    V, U, A       T = (V − U) / A                   ``from_vua``
    A, S, U       T = (√(2AS + U²) − U) / A         ``from_asu``
    V, A, S       T = (V − √(V² − 2AS)) / A         ``from_vas``
    ============  ================================  ==============

Negative results are returned as-is; the caller decides whether a negative
time is meaningful.

Classes:
    Time: Time span in seconds.

Example:
    >>> from kinematics.unit import Acceleration, Distance, Speed
    >>> Time.from_asu(Acceleration(2), Distance(9), Speed(0))
    Time(3.0)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .unit_formula import kinematic_formula
from .unit_quantity import Quantity

if TYPE_CHECKING:
    from .unit_acceleration import Acceleration
    from .unit_distance import Distance
    from .unit_speed import Speed


class Time(Quantity):
    """Time unit: Second (SI base unit for time).

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root time unit.
        SYMBOL (str): "s", the standard symbol for seconds.

    Example:
        >>> time_interval = Time(5.5)
        >>> print(time_interval)  # "5.5 s"
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "s"

    @kinematic_formula
    def from_sv(cls, distance: Distance, speed: Speed) -> Time:
        """Time to cover a distance at constant speed."""
        return distance / speed

    @kinematic_formula
    def from_svu(cls, distance: Distance, end_speed: Speed, start_speed: Speed) -> Time:
        return 2.0 * distance / (end_speed + start_speed)

    @kinematic_formula
    def from_vua(cls, end_speed: Speed, start_speed: Speed, acceleration: Acceleration) -> Time:
        return (end_speed - start_speed) / acceleration

    @kinematic_formula
    def from_asu(cls, acceleration: Acceleration, distance: Distance, start_speed: Speed) -> Time:
        """Time from acceleration, distance and start speed (one root only).

        Zero acceleration with a non-negative start speed yields NaN (0/0)
        rather than S/U; use ``from_sv`` for uniform motion.
        """
        return (np.sqrt(2.0 * acceleration * distance + start_speed**2) - start_speed) / acceleration

    @kinematic_formula
    def from_vas(cls, end_speed: Speed, acceleration: Acceleration, distance: Distance) -> Time:
        """Time from end speed, acceleration and distance (one root only)."""
        return (end_speed - np.sqrt(end_speed**2 - 2.0 * acceleration * distance)) / acceleration
