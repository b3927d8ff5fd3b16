"""Speed quantity and the equations of motion solved for start or end speed.

This module provides the Speed family (meters per second). Speeds are
signed scalars: a negative speed is motion against the axis. There is a
single SI unit and no km/h or knot variants.

Solver classmethods are named after what they solve for and which three
quantities they take (S distance, U start speed, V end speed,
A acceleration, T time):

    ========================  ============================
    Method                    Formula
    ========================  ============================
    ``const_speed_from_st``   V = S / T
    ``end_speed_from_uat``    V = U + A·T
    ``start_speed_from_vat``  U = V − A·T
    ``end_speed_from_sut``    V = 2S/T − U
    ``start_speed_from_svt``  U = 2S/T − V
    ``end_speed_from_sat``    V = S/T + ½A·T
    ``start_speed_from_sat``  U = S/T − ½A·T
    ``end_speed_from_sua``    V = √(U² + 2AS)
    ``start_speed_from_sva``  U = √(V² − 2AS)
    ========================  ============================

The two square-root forms return the principal (non-negative) root only, so
they lose the direction of travel; a negative radicand, meaning the state is
unreachable under that acceleration, yields NaN.

Classes:
    Speed: Signed speed in meters per second.

Example:
    >>> from kinematics.unit import Acceleration, Distance, Time
    >>> Speed.end_speed_from_uat(Speed(0), Acceleration(2), Time(3))
    Speed(6.0)
    >>> Speed.end_speed_from_sua(Distance(-10), Speed(1), Acceleration(2))
    Speed(nan)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .unit_formula import kinematic_formula
from .unit_quantity import Quantity

if TYPE_CHECKING:
    from .unit_acceleration import Acceleration
    from .unit_distance import Distance
    from .unit_time import Time


class Speed(Quantity):
    """Speed quantity: Meter per Second (SI unit for velocity).

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root speed unit.
        SYMBOL (str): "m/s", the standard symbol for meters per second.

    Example:
        >>> cruise = Speed(15.5)
        >>> print(cruise)  # "15.5 m/s"
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "m/s"

    @kinematic_formula
    def const_speed_from_st(cls, distance: Distance, time: Time) -> Speed:
        """Constant speed needed to cover a distance in a given time."""
        return distance / time

    @kinematic_formula
    def end_speed_from_uat(cls, start_speed: Speed, acceleration: Acceleration, time: Time) -> Speed:
        return start_speed + acceleration * time

    @kinematic_formula
    def start_speed_from_vat(cls, end_speed: Speed, acceleration: Acceleration, time: Time) -> Speed:
        return end_speed - acceleration * time

    @kinematic_formula
    def end_speed_from_sut(cls, distance: Distance, start_speed: Speed, time: Time) -> Speed:
        return 2.0 * distance / time - start_speed

    @kinematic_formula
    def start_speed_from_svt(cls, distance: Distance, end_speed: Speed, time: Time) -> Speed:
        return 2.0 * distance / time - end_speed

    @kinematic_formula
    def end_speed_from_sat(cls, distance: Distance, acceleration: Acceleration, time: Time) -> Speed:
        """End speed from distance, acceleration and time (S = V·T − ½A·T²)."""
        return distance / time + 0.5 * acceleration * time

    @kinematic_formula
    def start_speed_from_sat(cls, distance: Distance, acceleration: Acceleration, time: Time) -> Speed:
        """Start speed from distance, acceleration and time (S = U·T + ½A·T²)."""
        return distance / time - 0.5 * acceleration * time

    @kinematic_formula
    def end_speed_from_sua(cls, distance: Distance, start_speed: Speed, acceleration: Acceleration) -> Speed:
        """End speed from distance, start speed and acceleration.

        Returns the principal root of U² + 2AS, NaN when it is negative.
        """
        return np.sqrt(start_speed**2 + 2.0 * acceleration * distance)

    @kinematic_formula
    def start_speed_from_sva(cls, distance: Distance, end_speed: Speed, acceleration: Acceleration) -> Speed:
        """Start speed from distance, end speed and acceleration.

        Returns the principal root of V² − 2AS, NaN when it is negative.
        """
        return np.sqrt(end_speed**2 - 2.0 * acceleration * distance)
