"""Distance quantity and the equations of motion solved for displacement.

This module provides the Distance family. Distances are stored as plain
doubles in meters; there are no scaled sub-units (kilometers, feet) since
the package never converts between unit systems.

The solver classmethods cover every constant-acceleration rearrangement
that yields a displacement S from three (or, for constant speed, two) of
the other quantities:

    ============  ==============================  ==================
    Given         Formula                         Method
    ============  ==============================  ==================
    V, T          S = V·T                         ``from_vt``
    U, V, T       S = ½(U + V)·T                  ``from_uvt``
    U, V, A       S = (V² − U²) / 2A              ``from_uva``
    U, A, T       S = U·T + ½A·T²                 ``from_uat``
    V, A, T       S = V·T − ½A·T²                 ``from_vat``
    ============  ==============================  ==================

Classes:
    Distance: Displacement in meters.

Example:
    >>> from kinematics.unit import Acceleration, Speed, Time
    >>> Distance.from_uat(Speed(0), Acceleration(2), Time(3))
    Distance(9.0)
    >>> Distance.from_uvt(Speed(0), Speed(6), Time(3))
    Distance(9.0)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .unit_formula import kinematic_formula
from .unit_quantity import Quantity

if TYPE_CHECKING:
    from .unit_acceleration import Acceleration
    from .unit_speed import Speed
    from .unit_time import Time


class Distance(Quantity):
    """Distance quantity: Meter (SI base unit for length).

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root distance unit.
        SYMBOL (str): "m", the standard symbol for meters.

    Example:
        >>> altitude = Distance(150.5)
        >>> print(altitude)  # "150.5 m"
        >>> altitude.value  # 150.5
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "m"

    @kinematic_formula
    def from_vt(cls, constant_speed: Speed, time: Time) -> Distance:
        """Distance covered at constant speed."""
        return constant_speed * time

    @kinematic_formula
    def from_uvt(cls, start_speed: Speed, end_speed: Speed, time: Time) -> Distance:
        """Distance from start speed, end speed and time."""
        return 0.5 * (start_speed + end_speed) * time

    @kinematic_formula
    def from_uva(cls, start_speed: Speed, end_speed: Speed, acceleration: Acceleration) -> Distance:
        """Distance from start speed, end speed and acceleration.

        Zero acceleration yields ±inf, or NaN when the speeds are equal.
        """
        return (end_speed**2 - start_speed**2) / (2.0 * acceleration)

    @kinematic_formula
    def from_uat(cls, start_speed: Speed, acceleration: Acceleration, time: Time) -> Distance:
        """Distance from start speed, acceleration and time."""
        return start_speed * time + 0.5 * acceleration * time**2

    @kinematic_formula
    def from_vat(cls, end_speed: Speed, acceleration: Acceleration, time: Time) -> Distance:
        """Distance from end speed, acceleration and time."""
        return end_speed * time - 0.5 * acceleration * time**2
